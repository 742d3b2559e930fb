# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Timestamped locations for rule load trace files."""

from __future__ import annotations

import tempfile
from datetime import datetime
from pathlib import Path


class TracePathBuilder:
    """Fluent builder for ``<base>/<sub>/<prefix><timestamp><suffix>`` paths."""

    def __init__(self) -> None:
        self._base_dir = Path(tempfile.gettempdir())
        self._sub_dir = Path("seqra") / "rule_load_trace"
        self._file_prefix = ""
        self._file_suffix = ".json"
        self._time_format = "%Y-%m-%d_%H-%M-%S"
        self._permissions = 0o755

    def base_dir(self, directory: Path | str) -> TracePathBuilder:
        self._base_dir = Path(directory)
        return self

    def sub_dir(self, directory: Path | str) -> TracePathBuilder:
        self._sub_dir = Path(directory)
        return self

    def file_prefix(self, prefix: str) -> TracePathBuilder:
        self._file_prefix = prefix
        return self

    def file_suffix(self, suffix: str) -> TracePathBuilder:
        self._file_suffix = suffix
        return self

    def time_format(self, fmt: str) -> TracePathBuilder:
        self._time_format = fmt
        return self

    def permissions(self, mode: int) -> TracePathBuilder:
        self._permissions = mode
        return self

    def build(self, now: datetime | None = None) -> Path:
        """Create the trace directory and return the file path inside it."""
        directory = self._base_dir / self._sub_dir
        stamp = (now or datetime.now()).strftime(self._time_format)
        directory.mkdir(mode=self._permissions, parents=True, exist_ok=True)
        return directory / f"{self._file_prefix}{stamp}{self._file_suffix}"


def generate_rule_load_trace_path(base_dir: Path | None = None) -> Path:
    builder = TracePathBuilder()
    if base_dir is not None:
        builder.base_dir(base_dir)
    return builder.build()
