# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Rule load trace aggregation and syntax error reporting."""

from seqra.load_trace.aggregate import (
    RuleLoadErrorsAggregatedSummary,
    RuleLoadErrorsResult,
    RuleLoadTraceSummary,
    aggregate_rule_load_errors_summary,
    classify_error,
    collect_rule_load_trace_summary,
    collect_ruleset_load_errors,
)
from seqra.load_trace.paths import TracePathBuilder, generate_rule_load_trace_path
from seqra.load_trace.syntax_errors import FileSyntaxErrors, filter_files_with_syntax_errors

__all__ = [
    "FileSyntaxErrors",
    "RuleLoadErrorsAggregatedSummary",
    "RuleLoadErrorsResult",
    "RuleLoadTraceSummary",
    "TracePathBuilder",
    "aggregate_rule_load_errors_summary",
    "classify_error",
    "collect_rule_load_trace_summary",
    "collect_ruleset_load_errors",
    "filter_files_with_syntax_errors",
    "generate_rule_load_trace_path",
]
