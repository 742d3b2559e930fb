# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import pytest


def _write_json(path: Path, data: dict[str, Any]) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def sarif_file(tmp_path: Path):
    """Factory writing a SARIF dict to a file and returning its path."""

    def _write(data: dict[str, Any], name: str = "report.sarif") -> Path:
        return _write_json(tmp_path / name, data)

    return _write


@pytest.fixture
def trace_file(tmp_path: Path):
    """Factory writing a rule load trace dict to a file and returning its path."""

    def _write(data: dict[str, Any], name: str = "trace.json") -> Path:
        return _write_json(tmp_path / name, data)

    return _write


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch, tmp_path):
    """Keep SEQRA_* variables and stray .env files out of every test."""
    for key in list(os.environ):
        if key.startswith("SEQRA_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_seqra_logger():
    """Drop handlers installed by setup_logging() so they never outlive a test."""
    yield
    logger = logging.getLogger("seqra")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
