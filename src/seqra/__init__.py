# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""seqra - SARIF post-processing front end for the Seqra JVM analyzer."""

__version__ = "2.1.0"

from seqra.load_trace.aggregate import (
    aggregate_rule_load_errors_summary,
    classify_error,
    collect_rule_load_trace_summary,
)
from seqra.models.sarif import SarifReport, load_report, parse_report, write_report
from seqra.sarif.summary import Summary, generate_summary

__all__ = [
    "SarifReport",
    "Summary",
    "__version__",
    "aggregate_rule_load_errors_summary",
    "classify_error",
    "collect_rule_load_trace_summary",
    "generate_summary",
    "load_report",
    "parse_report",
    "write_report",
]
