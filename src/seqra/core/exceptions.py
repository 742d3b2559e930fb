# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for seqra."""


class SeqraError(Exception):
    """Base exception for all seqra errors."""


class ConfigurationError(SeqraError):
    """Invalid or missing configuration."""


class SarifParseError(SeqraError):
    """Failed to parse a SARIF report."""


class TraceParseError(SeqraError):
    """Failed to parse a rule load trace file."""


class SourceRootError(SeqraError):
    """The %SRCROOT% base URI is missing from a run."""


class ReportWriteError(SeqraError):
    """Failed to write a SARIF report to disk."""
