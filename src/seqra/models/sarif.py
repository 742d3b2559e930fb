# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""SARIF 2.1.0 report models.

Reports come from the analyzer subprocess, so nearly every field is optional.
Properties the models do not name are kept (``extra="allow"``) and written
back out unchanged.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError

from seqra.core.constants import SRCROOT
from seqra.core.exceptions import ReportWriteError, SarifParseError, SourceRootError

logger = logging.getLogger("seqra.models.sarif")


def _null_as_empty(v: object) -> object:
    # Absent lists come through as null, as with the rule load trace
    return [] if v is None else v


def _null_as_default(v: object) -> object:
    return {} if v is None else v


class SarifModel(BaseModel):
    model_config = ConfigDict(extra="allow")


class SarifMessage(SarifModel):
    text: str | None = None


class SarifArtifactLocation(SarifModel):
    uri: str | None = None
    uriBaseId: str | None = None


class SarifRegion(SarifModel):
    startLine: int | None = None
    endLine: int | None = None
    startColumn: int | None = None
    endColumn: int | None = None


class SarifPhysicalLocation(SarifModel):
    artifactLocation: SarifArtifactLocation | None = None
    region: SarifRegion | None = None


class SarifLogicalLocation(SarifModel):
    name: str | None = None
    fullyQualifiedName: str | None = None
    kind: str | None = None


class SarifLocation(SarifModel):
    physicalLocation: SarifPhysicalLocation | None = None
    logicalLocations: list[SarifLogicalLocation] | None = None
    message: SarifMessage | None = None

    @property
    def uri(self) -> str | None:
        if self.physicalLocation is None or self.physicalLocation.artifactLocation is None:
            return None
        return self.physicalLocation.artifactLocation.uri

    @property
    def start_line(self) -> int | None:
        if self.physicalLocation is None or self.physicalLocation.region is None:
            return None
        return self.physicalLocation.region.startLine


class SarifThreadFlowLocation(SarifModel):
    location: SarifLocation | None = None
    executionOrder: int | None = None
    message: SarifMessage | None = None


class SarifThreadFlow(SarifModel):
    locations: Annotated[list[SarifThreadFlowLocation], BeforeValidator(_null_as_empty)] = Field(
        default_factory=list
    )


class SarifCodeFlow(SarifModel):
    message: SarifMessage | None = None
    threadFlows: Annotated[list[SarifThreadFlow], BeforeValidator(_null_as_empty)] = Field(
        default_factory=list
    )


class SarifRule(SarifModel):
    id: str = ""
    name: str | None = None
    shortDescription: SarifMessage | None = None
    fullDescription: SarifMessage | None = None


class SarifDriver(SarifModel):
    name: str | None = None
    version: str | None = None
    semanticVersion: str | None = None
    informationUri: str | None = None
    rules: Annotated[list[SarifRule], BeforeValidator(_null_as_empty)] = Field(default_factory=list)


class SarifTool(SarifModel):
    driver: Annotated[SarifDriver, BeforeValidator(_null_as_default)] = Field(
        default_factory=SarifDriver
    )


class SarifResult(SarifModel):
    ruleId: str | None = None
    level: str | None = None
    message: Annotated[SarifMessage, BeforeValidator(_null_as_default)] = Field(
        default_factory=SarifMessage
    )
    locations: Annotated[list[SarifLocation], BeforeValidator(_null_as_empty)] = Field(
        default_factory=list
    )
    codeFlows: Annotated[list[SarifCodeFlow], BeforeValidator(_null_as_empty)] = Field(
        default_factory=list
    )


class SarifRun(SarifModel):
    tool: Annotated[SarifTool, BeforeValidator(_null_as_default)] = Field(
        default_factory=SarifTool
    )
    results: Annotated[list[SarifResult], BeforeValidator(_null_as_empty)] = Field(
        default_factory=list
    )
    originalUriBaseIds: dict[str, SarifArtifactLocation] | None = None


class SarifReport(SarifModel):
    version: str | None = "2.1.0"
    runs: Annotated[list[SarifRun], BeforeValidator(_null_as_empty)] = Field(default_factory=list)

    def project_path(self, run_index: int) -> str:
        """Return the absolute source root recorded for a run.

        Raises:
            SourceRootError: If ``%SRCROOT%`` is missing or has no URI.
        """
        run = self.runs[run_index]
        base = (run.originalUriBaseIds or {}).get(SRCROOT)
        if base is None:
            raise SourceRootError(f"{SRCROOT} not found in originalUriBaseIds")
        if base.uri is None:
            logger.warning("%s base has no URI", SRCROOT)
            raise SourceRootError(f"{SRCROOT} URI is nil")
        return base.uri


def parse_report(data: bytes | str) -> SarifReport:
    """Parse SARIF JSON into a :class:`SarifReport`."""
    try:
        return SarifReport.model_validate_json(data)
    except ValidationError as exc:
        raise SarifParseError(f"failed to parse SARIF: {exc}") from exc


def load_report(path: Path) -> SarifReport:
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise SarifParseError(f"failed to read SARIF report {path}: {exc}") from exc
    return parse_report(data)


def dump_report(report: SarifReport) -> str:
    """Serialize with two-space indentation, leaving HTML and non-ASCII unescaped."""
    data = report.model_dump(mode="json", exclude_none=True)
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def write_report(report: SarifReport, path: Path) -> None:
    """Write the report through a temporary file renamed over ``path``."""
    text = dump_report(report)
    directory = path.parent if str(path.parent) else Path(".")
    tmp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=directory,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(text)
        os.replace(tmp_name, path)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise ReportWriteError(f"failed to write SARIF report {path}: {exc}") from exc
    logger.debug("Wrote SARIF report to %s", path)
