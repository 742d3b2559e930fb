# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Classification and aggregation of rule load errors.

The trace is folded in two passes. :func:`collect_rule_load_trace_summary`
keeps the classified error entries at file, rule and step level, and
:func:`aggregate_rule_load_errors_summary` turns them into per-category
counts of affected files and rules.

File-level and rule-level affectedness are computed from different entry
scopes: a file only counts as affected when its own entries carry an error,
never because one of its rules does.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, Field

from seqra.core.constants import USER_ERROR_STEPS, ErrorCategory, Reason
from seqra.core.exceptions import TraceParseError
from seqra.models.load_trace import (
    RuleLoadTrace,
    TraceEntry,
    load_rule_load_trace,
    validate_trace_entry,
)

logger = logging.getLogger("seqra.load_trace.aggregate")


def classify_error(entry: TraceEntry) -> ErrorCategory | None:
    """Return the error category of an entry, or None for non-error entries."""
    if not entry.is_error:
        return None

    if entry.reason == Reason.NOT_IMPLEMENTED:
        return ErrorCategory.UNSUPPORTED

    if entry.step in USER_ERROR_STEPS:
        return ErrorCategory.SYNTAX_ERROR

    return ErrorCategory.UNSUPPORTED


@dataclass
class ErrorEntry:
    message: str
    category: ErrorCategory


@dataclass
class StepSummary:
    step: str
    errors: list[ErrorEntry] = field(default_factory=list)
    categories: set[ErrorCategory] = field(default_factory=set)


@dataclass
class RuleSummary:
    rule_id: str
    errors: list[ErrorEntry] = field(default_factory=list)
    categories: set[ErrorCategory] = field(default_factory=set)
    steps: list[StepSummary] = field(default_factory=list)

    @property
    def all_categories(self) -> set[ErrorCategory]:
        """Rule categories including those raised by any of its steps."""
        merged = set(self.categories)
        for step in self.steps:
            merged |= step.categories
        return merged


@dataclass
class FileSummary:
    path: str
    errors: list[ErrorEntry] = field(default_factory=list)
    categories: set[ErrorCategory] = field(default_factory=set)
    rules: list[RuleSummary] = field(default_factory=list)


@dataclass
class RuleLoadTraceSummary:
    files: list[FileSummary] = field(default_factory=list)


def _collect_from_entries(
    entries: list[TraceEntry],
) -> tuple[list[ErrorEntry], set[ErrorCategory]]:
    errors: list[ErrorEntry] = []
    categories: set[ErrorCategory] = set()

    for entry in entries:
        try:
            validate_trace_entry(entry)
        except ValueError as exc:
            logger.warning("Ignoring trace entry: %s", exc)
            continue

        category = classify_error(entry)
        if category is None:
            continue
        errors.append(ErrorEntry(message=entry.message, category=category))
        categories.add(category)

    return errors, categories


def collect_rule_load_trace_summary(trace: RuleLoadTrace | None) -> RuleLoadTraceSummary:
    """Classify every error entry of the trace, keeping the file/rule/step shape."""
    out = RuleLoadTraceSummary()
    if trace is None:
        return out

    for file_trace in trace.fileTraces:
        errors, categories = _collect_from_entries(file_trace.entries)
        file_summary = FileSummary(path=file_trace.path, errors=errors, categories=categories)

        for rule_trace in file_trace.ruleTraces:
            errors, categories = _collect_from_entries(rule_trace.entries)
            rule_summary = RuleSummary(
                rule_id=rule_trace.display_id, errors=errors, categories=categories
            )
            for step_trace in rule_trace.steps:
                errors, categories = _collect_from_entries(step_trace.entries)
                rule_summary.steps.append(
                    StepSummary(step=step_trace.step, errors=errors, categories=categories)
                )
            file_summary.rules.append(rule_summary)

        out.files.append(file_summary)

    return out


def _zero_counts() -> dict[ErrorCategory, int]:
    return {category: 0 for category in ErrorCategory}


class RuleLoadErrorsAggregatedSummary(BaseModel):
    # Number of files that have each error type
    file_error_types: dict[ErrorCategory, int] = Field(default_factory=_zero_counts)
    # Number of rules that have each error type
    rule_error_types: dict[ErrorCategory, int] = Field(default_factory=_zero_counts)
    total_affected_files: int = 0
    total_affected_rules: int = 0


class RuleLoadErrorsResult(BaseModel):
    summary: RuleLoadErrorsAggregatedSummary = Field(
        default_factory=RuleLoadErrorsAggregatedSummary
    )
    error: str | None = None


def aggregate_rule_load_errors_summary(
    trace_summary: RuleLoadTraceSummary,
) -> RuleLoadErrorsAggregatedSummary:
    """Count files and rules affected by each error category (presence, not frequency)."""
    summary = RuleLoadErrorsAggregatedSummary()

    for file in trace_summary.files:
        for category in file.categories:
            summary.file_error_types[category] += 1
        if file.categories:
            summary.total_affected_files += 1

        for rule in file.rules:
            rule_categories = rule.all_categories
            if rule_categories:
                summary.total_affected_rules += 1
            for category in rule_categories:
                summary.rule_error_types[category] += 1

    return summary


def collect_ruleset_load_errors(
    trace_path: Path,
) -> tuple[RuleLoadErrorsResult, RuleLoadTraceSummary]:
    """Read a trace file and aggregate it.

    Read and parse failures are recorded on the result instead of raised so the
    statistics view can still render.
    """
    try:
        trace = load_rule_load_trace(trace_path)
    except TraceParseError as exc:
        logger.error("%s", exc)
        return RuleLoadErrorsResult(error=str(exc)), RuleLoadTraceSummary()

    trace_summary = collect_rule_load_trace_summary(trace)
    result = RuleLoadErrorsResult(summary=aggregate_rule_load_errors_summary(trace_summary))
    return result, trace_summary
