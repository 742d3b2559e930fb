# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Domain models for seqra."""

from seqra.models.load_trace import RuleLoadTrace, TraceEntry
from seqra.models.sarif import SarifReport, SarifResult, SarifRun

__all__ = [
    "RuleLoadTrace",
    "SarifReport",
    "SarifResult",
    "SarifRun",
    "TraceEntry",
]
