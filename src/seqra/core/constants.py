# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Enumerations and fixed values shared by the SARIF and rule-load-trace layers."""

from enum import StrEnum


class Level(StrEnum):
    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"


class TraceEntryType(StrEnum):
    INFO = "Info"
    ERROR = "Error"


class Reason(StrEnum):
    ERROR = "ERROR"
    WARNING = "WARNING"
    NOT_IMPLEMENTED = "NOT_IMPLEMENTED"


class Step(StrEnum):
    LOAD_RULESET = "LOAD_RULESET"
    BUILD_CONVERT_TO_RAW_RULE = "BUILD_CONVERT_TO_RAW_RULE"
    BUILD_PARSE_SEMGREP_RULE = "BUILD_PARSE_SEMGREP_RULE"
    BUILD_META_VAR_RESOLVING = "BUILD_META_VAR_RESOLVING"
    BUILD_ACTION_LIST_CONVERSION = "BUILD_ACTION_LIST_CONVERSION"
    BUILD_TRANSFORM_TO_AUTOMATA = "BUILD_TRANSFORM_TO_AUTOMATA"
    AUTOMATA_TO_TAINT_RULE = "AUTOMATA_TO_TAINT_RULE"


class ErrorCategory(StrEnum):
    """Rule load error classes, in display order."""

    SYNTAX_ERROR = "SyntaxError"
    # Analyzer internal errors and constructs it does not implement yet
    UNSUPPORTED = "Unsupported"


# Steps where a malformed user-authored rule surfaces
USER_ERROR_STEPS: frozenset[str] = frozenset({
    Step.LOAD_RULESET,
    Step.BUILD_CONVERT_TO_RAW_RULE,
    Step.BUILD_PARSE_SEMGREP_RULE,
})

SRCROOT = "%SRCROOT%"
TOOL_DRIVER_NAME = "Seqra"
SOURCE_FILE_EXTENSIONS: frozenset[str] = frozenset({".java", ".kt"})
DEFAULT_LEVEL = Level.NOTE

ISSUES_URL = "https://github.com/seqra/seqra/issues"
