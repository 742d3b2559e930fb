# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Rule load trace models written by the analyzer while compiling rules."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, Field, ValidationError

from seqra.core.constants import TraceEntryType
from seqra.core.exceptions import TraceParseError


def _null_as_blank(v: object) -> object:
    return "" if v is None else v


BlankStr = Annotated[str, BeforeValidator(_null_as_blank)]


class TraceEntry(BaseModel):
    """A single info or error record.

    ``step`` and ``reason`` are plain strings so that values the analyzer
    adds later still parse; they are compared against :class:`Step` and
    :class:`Reason` members.
    """

    type: BlankStr = ""
    message: BlankStr = ""
    step: str | None = None
    reason: str | None = None

    @classmethod
    def info(cls, message: str) -> TraceEntry:
        return cls(type=TraceEntryType.INFO, message=message)

    @classmethod
    def error(cls, step: str, reason: str, message: str) -> TraceEntry:
        return cls(type=TraceEntryType.ERROR, message=message, step=step, reason=reason)

    @property
    def is_error(self) -> bool:
        return self.type == TraceEntryType.ERROR

    @property
    def is_info(self) -> bool:
        return self.type == TraceEntryType.INFO


def validate_trace_entry(entry: TraceEntry) -> None:
    """Raise :class:`ValueError` if the entry type is neither Info nor Error.

    Entries with a missing type parse with an empty one and fail here.
    """
    if entry.type not in (TraceEntryType.INFO, TraceEntryType.ERROR):
        msg = f"unknown trace entry type: {entry.type!r}"
        raise ValueError(msg)


def _null_as_empty(v: object) -> object:
    # The analyzer serializes empty lists as null
    return [] if v is None else v


EntryList = Annotated[list[TraceEntry], BeforeValidator(_null_as_empty)]


class StepLoadTrace(BaseModel):
    step: BlankStr = ""
    entries: EntryList = Field(default_factory=list)


class RuleLoadTraceEntry(BaseModel):
    ruleId: BlankStr = ""
    ruleIdInFile: BlankStr = ""
    steps: Annotated[list[StepLoadTrace], BeforeValidator(_null_as_empty)] = Field(
        default_factory=list
    )
    entries: EntryList = Field(default_factory=list)

    @property
    def display_id(self) -> str:
        return self.ruleId or self.ruleIdInFile


class FileLoadTrace(BaseModel):
    path: BlankStr = ""
    ruleTraces: Annotated[list[RuleLoadTraceEntry], BeforeValidator(_null_as_empty)] = Field(
        default_factory=list
    )
    entries: EntryList = Field(default_factory=list)


class RuleLoadTrace(BaseModel):
    """Complete trace of one rule loading run, one entry per rule file."""

    fileTraces: Annotated[list[FileLoadTrace], BeforeValidator(_null_as_empty)] = Field(
        default_factory=list
    )


def parse_rule_load_trace(data: bytes | str) -> RuleLoadTrace:
    try:
        return RuleLoadTrace.model_validate_json(data)
    except ValidationError as exc:
        raise TraceParseError(f"failed to deserialize rule load trace: {exc}") from exc


def load_rule_load_trace(path: Path) -> RuleLoadTrace:
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise TraceParseError(f"failed to read rule load trace file {path}: {exc}") from exc
    return parse_rule_load_trace(data)
