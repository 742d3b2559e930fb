# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Filter a rule load trace summary down to user rule syntax errors."""

from __future__ import annotations

from dataclasses import dataclass, field

from seqra.core.constants import ErrorCategory
from seqra.load_trace.aggregate import (
    ErrorEntry,
    FileSummary,
    RuleLoadTraceSummary,
    RuleSummary,
    StepSummary,
)


@dataclass
class RuleSyntaxErrors:
    rule_id: str
    messages: list[str] = field(default_factory=list)


@dataclass
class FileSyntaxErrors:
    path: str
    messages: list[str] = field(default_factory=list)
    rules: list[RuleSyntaxErrors] = field(default_factory=list)


def filter_syntax_errors(errors: list[ErrorEntry]) -> list[ErrorEntry]:
    return [e for e in errors if e.category == ErrorCategory.SYNTAX_ERROR]


def collect_step_syntax_errors(steps: list[StepSummary]) -> list[ErrorEntry]:
    result: list[ErrorEntry] = []
    for step in steps:
        result.extend(filter_syntax_errors(step.errors))
    return result


def rule_syntax_errors(rule: RuleSummary) -> list[ErrorEntry]:
    """Rule-level syntax errors followed by those of its steps, in step order."""
    return filter_syntax_errors(rule.errors) + collect_step_syntax_errors(rule.steps)


def _file_syntax_errors(file: FileSummary) -> FileSyntaxErrors | None:
    rules = [
        RuleSyntaxErrors(rule_id=rule.rule_id, messages=[e.message for e in errors])
        for rule in file.rules
        if (errors := rule_syntax_errors(rule))
    ]
    messages = [e.message for e in filter_syntax_errors(file.errors)]
    if not messages and not rules:
        return None
    return FileSyntaxErrors(path=file.path, messages=messages, rules=rules)


def filter_files_with_syntax_errors(summary: RuleLoadTraceSummary) -> list[FileSyntaxErrors]:
    """Files with at least one syntax error at file, rule or step level."""
    result: list[FileSyntaxErrors] = []
    for file in summary.files:
        file_errors = _file_syntax_errors(file)
        if file_errors is not None:
            result.append(file_errors)
    return result
