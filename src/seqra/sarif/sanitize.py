# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""In-place clean-up passes over an analyzer SARIF report."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import PurePosixPath

from seqra.core.constants import SOURCE_FILE_EXTENSIONS, SRCROOT, TOOL_DRIVER_NAME
from seqra.models.sarif import SarifArtifactLocation, SarifLocation, SarifReport

logger = logging.getLogger("seqra.sarif.sanitize")


def is_source_location(
    location: SarifLocation | None,
    extensions: Iterable[str] = SOURCE_FILE_EXTENSIONS,
) -> bool:
    """True if the location points into a Java or Kotlin source file."""
    if location is None:
        return False
    uri = location.uri
    if uri is None:
        return False
    return PurePosixPath(uri.replace("\\", "/")).suffix in set(extensions)


def keep_only_file_locations(
    report: SarifReport,
    extensions: Iterable[str] = SOURCE_FILE_EXTENSIONS,
) -> None:
    """Drop result locations and thread flow steps outside source files."""
    extensions = frozenset(extensions)
    for run in report.runs:
        for result in run.results:
            result.locations = [
                loc for loc in result.locations if is_source_location(loc, extensions)
            ]
            for code_flow in result.codeFlows:
                for thread_flow in code_flow.threadFlows:
                    thread_flow.locations = [
                        step
                        for step in thread_flow.locations
                        if is_source_location(step.location, extensions)
                    ]


def keep_only_one_code_flow_element(report: SarifReport) -> None:
    """Keep only the first thread flow of every code flow."""
    for run in report.runs:
        for result in run.results:
            for code_flow in result.codeFlows:
                del code_flow.threadFlows[1:]


def _all_locations(report: SarifReport) -> Iterator[SarifLocation | None]:
    for run in report.runs:
        for result in run.results:
            yield from result.locations
            for code_flow in result.codeFlows:
                for thread_flow in code_flow.threadFlows:
                    for step in thread_flow.locations:
                        yield step.location


def source_root_uri(source_root: str) -> str:
    """Return ``source_root`` with exactly one trailing path separator."""
    return source_root.rstrip(os.sep) + os.sep


def update_uri_info(report: SarifReport, abs_project_path: str) -> None:
    """Point every location at ``%SRCROOT%`` and record the root for each run."""
    for run in report.runs:
        if run.originalUriBaseIds is None:
            run.originalUriBaseIds = {}
        run.originalUriBaseIds[SRCROOT] = SarifArtifactLocation(uri=abs_project_path)

    for location in _all_locations(report):
        if location is None or location.physicalLocation is None:
            logger.debug("Location doesn't contain PhysicalLocation")
            continue
        if location.physicalLocation.artifactLocation is None:
            logger.debug("PhysicalLocation doesn't contain ArtifactLocation")
            continue
        location.physicalLocation.artifactLocation.uriBaseId = SRCROOT


def set_tool_driver(report: SarifReport, version: str, semantic_version: str) -> None:
    """Overwrite the driver metadata reported by the analyzer."""
    for run in report.runs:
        run.tool.driver.name = TOOL_DRIVER_NAME
        run.tool.driver.version = version
        run.tool.driver.semanticVersion = semantic_version
