# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for rule load error classification, aggregation and syntax error filtering."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any

import pytest

from seqra.core.constants import ErrorCategory, Reason, Step
from seqra.load_trace.aggregate import (
    ErrorEntry,
    FileSummary,
    RuleLoadTraceSummary,
    RuleSummary,
    StepSummary,
    aggregate_rule_load_errors_summary,
    classify_error,
    collect_rule_load_trace_summary,
    collect_ruleset_load_errors,
)
from seqra.load_trace.paths import TracePathBuilder, generate_rule_load_trace_path
from seqra.load_trace.syntax_errors import (
    filter_files_with_syntax_errors,
    rule_syntax_errors,
)
from seqra.models.load_trace import RuleLoadTrace, TraceEntry

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_error(step: str | None, reason: str = "ERROR", message: str = "boom") -> dict[str, Any]:
    entry: dict[str, Any] = {"type": "Error", "message": message, "reason": reason}
    if step is not None:
        entry["step"] = step
    return entry


def _make_trace(files: list[dict[str, Any]]) -> RuleLoadTrace:
    return RuleLoadTrace.model_validate({"fileTraces": files})


def _summarize(files: list[dict[str, Any]]):
    return aggregate_rule_load_errors_summary(collect_rule_load_trace_summary(_make_trace(files)))


# ===========================================================================
# classify_error()
# ===========================================================================


class TestClassifyError:
    """Tests for classify_error()."""

    def test_info_entry_is_not_classified(self):
        assert classify_error(TraceEntry.info("loaded")) is None

    def test_not_implemented_is_unsupported_even_in_user_step(self):
        entry = TraceEntry.error(Step.LOAD_RULESET, Reason.NOT_IMPLEMENTED, "x")
        assert classify_error(entry) == ErrorCategory.UNSUPPORTED

    @pytest.mark.parametrize(
        "step",
        [Step.LOAD_RULESET, Step.BUILD_CONVERT_TO_RAW_RULE, Step.BUILD_PARSE_SEMGREP_RULE],
    )
    def test_user_steps_are_syntax_errors(self, step):
        entry = TraceEntry.error(step, Reason.ERROR, "x")
        assert classify_error(entry) == ErrorCategory.SYNTAX_ERROR

    def test_warning_reason_in_user_step_is_syntax_error(self):
        entry = TraceEntry.error(Step.BUILD_PARSE_SEMGREP_RULE, Reason.WARNING, "x")
        assert classify_error(entry) == ErrorCategory.SYNTAX_ERROR

    @pytest.mark.parametrize(
        "step",
        [
            Step.BUILD_META_VAR_RESOLVING,
            Step.BUILD_ACTION_LIST_CONVERSION,
            Step.BUILD_TRANSFORM_TO_AUTOMATA,
            Step.AUTOMATA_TO_TAINT_RULE,
            "SOME_FUTURE_STEP",
        ],
    )
    def test_other_steps_are_unsupported(self, step):
        assert classify_error(TraceEntry.error(step, Reason.ERROR, "x")) == ErrorCategory.UNSUPPORTED

    def test_error_without_step_is_unsupported(self):
        entry = TraceEntry(type="Error", message="x", reason="ERROR")
        assert classify_error(entry) == ErrorCategory.UNSUPPORTED


# ===========================================================================
# collect_rule_load_trace_summary()
# ===========================================================================


class TestCollectRuleLoadTraceSummary:
    """Tests for collect_rule_load_trace_summary()."""

    def test_none_trace_gives_empty_summary(self):
        assert collect_rule_load_trace_summary(None).files == []

    def test_keeps_shape_and_only_errors(self):
        summary = collect_rule_load_trace_summary(_make_trace([
            {
                "path": "rules/a.yml",
                "entries": [{"type": "Info", "message": "read"}],
                "ruleTraces": [
                    {
                        "ruleId": "rules.r1",
                        "entries": [_make_error("LOAD_RULESET", message="bad key")],
                        "steps": [
                            {
                                "step": "AUTOMATA_TO_TAINT_RULE",
                                "entries": [_make_error("AUTOMATA_TO_TAINT_RULE")],
                            }
                        ],
                    }
                ],
            }
        ]))
        file = summary.files[0]
        assert file.path == "rules/a.yml"
        assert file.errors == []
        assert file.categories == set()

        rule = file.rules[0]
        assert rule.rule_id == "rules.r1"
        assert rule.errors == [ErrorEntry("bad key", ErrorCategory.SYNTAX_ERROR)]
        assert rule.steps[0].step == "AUTOMATA_TO_TAINT_RULE"
        assert rule.steps[0].categories == {ErrorCategory.UNSUPPORTED}
        assert rule.all_categories == {ErrorCategory.SYNTAX_ERROR, ErrorCategory.UNSUPPORTED}

    def test_entry_without_type_skipped_with_rest_kept(self):
        summary = collect_rule_load_trace_summary(_make_trace([
            {
                "path": "a.yml",
                "entries": [
                    {"message": "no type"},
                    {"type": "Error", "message": None, "step": "LOAD_RULESET", "reason": "ERROR"},
                ],
            }
        ]))
        assert summary.files[0].errors == [ErrorEntry("", ErrorCategory.SYNTAX_ERROR)]

    def test_unknown_entry_type_is_ignored(self, caplog):
        with caplog.at_level("WARNING", logger="seqra.load_trace.aggregate"):
            summary = collect_rule_load_trace_summary(_make_trace([
                {"path": "a.yml", "entries": [{"type": "Debug", "message": "?"}]}
            ]))
        assert summary.files[0].errors == []
        assert "unknown trace entry type" in caplog.text


# ===========================================================================
# aggregate_rule_load_errors_summary()
# ===========================================================================


class TestAggregateRuleLoadErrors:
    """Tests for aggregate_rule_load_errors_summary()."""

    def test_empty_summary_has_zero_counters(self):
        summary = aggregate_rule_load_errors_summary(RuleLoadTraceSummary())
        assert summary.file_error_types == {
            ErrorCategory.SYNTAX_ERROR: 0,
            ErrorCategory.UNSUPPORTED: 0,
        }
        assert summary.rule_error_types == summary.file_error_types
        assert summary.total_affected_files == 0
        assert summary.total_affected_rules == 0

    def test_file_level_syntax_error(self):
        summary = _summarize([
            {"path": "a.yml", "entries": [_make_error("BUILD_PARSE_SEMGREP_RULE")]}
        ])
        assert summary.file_error_types[ErrorCategory.SYNTAX_ERROR] == 1
        assert summary.total_affected_files == 1
        assert summary.total_affected_rules == 0

    def test_step_error_affects_rule_but_not_file(self):
        summary = _summarize([
            {
                "path": "a.yml",
                "ruleTraces": [
                    {
                        "ruleId": "r",
                        "steps": [
                            {
                                "step": "LOAD_RULESET",
                                "entries": [_make_error("LOAD_RULESET", "NOT_IMPLEMENTED")],
                            }
                        ],
                    }
                ],
            }
        ])
        assert summary.rule_error_types[ErrorCategory.UNSUPPORTED] == 1
        assert summary.total_affected_rules == 1
        assert summary.file_error_types[ErrorCategory.UNSUPPORTED] == 0
        assert summary.total_affected_files == 0

    def test_counts_presence_not_frequency(self):
        summary = _summarize([
            {
                "path": "a.yml",
                "entries": [
                    _make_error("LOAD_RULESET"),
                    _make_error("LOAD_RULESET"),
                    _make_error("AUTOMATA_TO_TAINT_RULE"),
                ],
            }
        ])
        assert summary.file_error_types[ErrorCategory.SYNTAX_ERROR] == 1
        assert summary.file_error_types[ErrorCategory.UNSUPPORTED] == 1
        assert summary.total_affected_files == 1

    def test_rule_with_both_categories_counted_once_in_total(self):
        summary = _summarize([
            {
                "path": "a.yml",
                "ruleTraces": [
                    {
                        "ruleId": "r",
                        "entries": [_make_error("BUILD_CONVERT_TO_RAW_RULE")],
                        "steps": [
                            {
                                "step": "BUILD_META_VAR_RESOLVING",
                                "entries": [_make_error("BUILD_META_VAR_RESOLVING")],
                            }
                        ],
                    },
                    {"ruleId": "clean", "entries": [{"type": "Info", "message": "ok"}]},
                ],
            }
        ])
        assert summary.rule_error_types[ErrorCategory.SYNTAX_ERROR] == 1
        assert summary.rule_error_types[ErrorCategory.UNSUPPORTED] == 1
        assert summary.total_affected_rules == 1

    def test_totals_bounded_by_file_and_rule_counts(self):
        files = [
            {
                "path": f"f{i}.yml",
                "entries": [_make_error("LOAD_RULESET")] if i % 2 else [],
                "ruleTraces": [
                    {"ruleId": f"r{i}", "entries": [_make_error("AUTOMATA_TO_TAINT_RULE")]}
                ],
            }
            for i in range(4)
        ]
        summary = _summarize(files)
        assert summary.total_affected_files == 2
        assert summary.total_affected_rules == 4
        assert summary.total_affected_files <= len(files)


class TestCollectRulesetLoadErrors:
    """Tests for collect_ruleset_load_errors()."""

    def test_reads_and_aggregates(self, trace_file):
        path = trace_file({
            "fileTraces": [{"path": "a.yml", "entries": [_make_error("LOAD_RULESET")]}]
        })
        result, trace_summary = collect_ruleset_load_errors(path)
        assert result.error is None
        assert result.summary.total_affected_files == 1
        assert trace_summary.files[0].path == "a.yml"

    def test_missing_file_recorded_as_error(self, tmp_path):
        result, trace_summary = collect_ruleset_load_errors(tmp_path / "missing.json")
        assert result.error is not None
        assert "failed to read" in result.error
        assert result.summary.total_affected_files == 0
        assert trace_summary.files == []

    def test_malformed_file_recorded_as_error(self, tmp_path):
        path = tmp_path / "trace.json"
        path.write_text(json.dumps({"fileTraces": "oops"}), encoding="utf-8")
        result, _ = collect_ruleset_load_errors(path)
        assert result.error is not None


# ===========================================================================
# syntax_errors.py
# ===========================================================================


class TestSyntaxErrorFilter:
    """Tests for filter_files_with_syntax_errors()."""

    def test_keeps_only_syntax_errors_in_order(self):
        trace_summary = RuleLoadTraceSummary(files=[
            FileSummary(
                path="a.yml",
                errors=[
                    ErrorEntry("file broken", ErrorCategory.SYNTAX_ERROR),
                    ErrorEntry("file unsupported", ErrorCategory.UNSUPPORTED),
                ],
                rules=[
                    RuleSummary(
                        rule_id="r1",
                        errors=[ErrorEntry("rule broken", ErrorCategory.SYNTAX_ERROR)],
                        steps=[
                            StepSummary(
                                step="BUILD_PARSE_SEMGREP_RULE",
                                errors=[ErrorEntry("step broken", ErrorCategory.SYNTAX_ERROR)],
                            ),
                            StepSummary(
                                step="AUTOMATA_TO_TAINT_RULE",
                                errors=[ErrorEntry("step unsupported", ErrorCategory.UNSUPPORTED)],
                            ),
                        ],
                    ),
                    RuleSummary(
                        rule_id="r2",
                        errors=[ErrorEntry("only unsupported", ErrorCategory.UNSUPPORTED)],
                    ),
                ],
            ),
            FileSummary(
                path="b.yml",
                errors=[ErrorEntry("unsupported", ErrorCategory.UNSUPPORTED)],
            ),
        ])

        files = filter_files_with_syntax_errors(trace_summary)
        assert len(files) == 1
        assert files[0].path == "a.yml"
        assert files[0].messages == ["file broken"]
        assert len(files[0].rules) == 1
        assert files[0].rules[0].rule_id == "r1"
        assert files[0].rules[0].messages == ["rule broken", "step broken"]

    def test_file_with_only_rule_syntax_errors_included(self):
        trace_summary = RuleLoadTraceSummary(files=[
            FileSummary(
                path="c.yml",
                rules=[
                    RuleSummary(
                        rule_id="r",
                        steps=[
                            StepSummary(
                                step="LOAD_RULESET",
                                errors=[ErrorEntry("bad", ErrorCategory.SYNTAX_ERROR)],
                            )
                        ],
                    )
                ],
            )
        ])
        files = filter_files_with_syntax_errors(trace_summary)
        assert files[0].messages == []
        assert files[0].rules[0].messages == ["bad"]

    def test_rule_syntax_errors_empty_for_clean_rule(self):
        assert rule_syntax_errors(RuleSummary(rule_id="r")) == []


# ===========================================================================
# paths.py
# ===========================================================================


class TestTracePathBuilder:
    """Tests for TracePathBuilder and generate_rule_load_trace_path()."""

    def test_default_layout(self, tmp_path):
        path = TracePathBuilder().base_dir(tmp_path).build(now=datetime(2026, 1, 2, 3, 4, 5))
        assert path == tmp_path / "seqra" / "rule_load_trace" / "2026-01-02_03-04-05.json"
        assert path.parent.is_dir()
        assert not path.exists()

    def test_custom_parts(self, tmp_path):
        path = (
            TracePathBuilder()
            .base_dir(tmp_path)
            .sub_dir("traces")
            .file_prefix("run-")
            .file_suffix(".trace.json")
            .time_format("%Y%m%d")
            .permissions(0o700)
            .build(now=datetime(2026, 10, 16))
        )
        assert path == tmp_path / "traces" / "run-20261016.trace.json"
        assert path.parent.is_dir()

    def test_generate_uses_base_dir(self, tmp_path):
        path = generate_rule_load_trace_path(tmp_path)
        assert path.parent == tmp_path / "seqra" / "rule_load_trace"
        assert path.suffix == ".json"
