# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Application configuration via environment variables and .env files."""

from pathlib import Path
from typing import Annotated

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from seqra.core.constants import ISSUES_URL
from seqra.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SEQRA_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"  # "text" or "json"
    verbosity: str = "info"  # "info" or "debug"

    @field_validator("verbosity", mode="before")
    @classmethod
    def _normalize_verbosity(cls, v: object) -> str:
        verbosity = str(v).strip().lower() if v is not None else "info"
        if verbosity not in ("info", "debug"):
            raise ValueError(f"verbosity must be 'info' or 'debug', got {v!r}")
        return verbosity

    # Analyzer
    analyzer_version: str = "2025.10.02.eb0ff77"
    semgrep_compatibility: bool = True
    source_extensions: Annotated[list[str], NoDecode] = [".java", ".kt"]

    @field_validator("source_extensions", mode="before")
    @classmethod
    def _parse_source_extensions(cls, v: object) -> list[str]:
        if isinstance(v, str):
            return [e.strip().lower() for e in v.split(",") if e.strip()]
        return v if isinstance(v, list) else []

    # Rule load trace
    trace_dir: Path | None = None

    # Issue tracker shown for unsupported constructs
    issues_url: str = ISSUES_URL

    @property
    def is_debug(self) -> bool:
        return self.verbosity == "debug"


def get_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError(f"invalid SEQRA_* configuration: {exc}") from exc
