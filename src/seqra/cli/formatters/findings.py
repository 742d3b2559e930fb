# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Per-finding trees: rule, message, primary location and taint code flow."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from rich.console import Console
from rich.style import Style
from rich.text import Text
from rich.tree import Tree

from seqra.core.exceptions import SourceRootError
from seqra.models.sarif import SarifLocation, SarifReport, SarifResult, SarifThreadFlowLocation

logger = logging.getLogger("seqra.cli.findings")

LEVEL_INDICATORS: dict[str, tuple[str, str]] = {
    "error": ("[ERROR]", "bold red"),
    "warning": ("[WARNING]", "yellow"),
    "note": ("[NOTE]", "default"),
}
UNKNOWN_INDICATOR = ("[UNKNOWN]", "default")


@dataclass
class NodeLocation:
    rel_file_path: str = ""
    file_name: str = ""
    method: str = ""
    line: int = -1


def level_indicator(level: str | None) -> tuple[str, str]:
    return LEVEL_INDICATORS.get((level or "").lower(), UNKNOWN_INDICATOR)


def extract_node_location(location: SarifLocation | None) -> NodeLocation:
    if location is None or location.uri is None:
        logger.warning("Location has no PhysicalLocation/ArtifactLocation/URI")
        return NodeLocation()

    # Forward slashes keep file:// links valid on Windows
    rel_file_path = location.uri.replace("\\", "/")
    line = location.start_line
    if line is None:
        logger.warning("Region or StartLine is nil")
        line = -1

    method = ""
    if not location.logicalLocations:
        logger.warning("Logical locations is empty, unable to extract method name")
    elif location.logicalLocations[0].fullyQualifiedName is not None:
        method = location.logicalLocations[0].fullyQualifiedName

    return NodeLocation(
        rel_file_path=rel_file_path,
        file_name=PurePosixPath(rel_file_path).name,
        method=method,
        line=line,
    )


def format_location_link(loc: NodeLocation, abs_project_path: str) -> Text:
    """``path:line`` rendered as a terminal hyperlink to the source file."""
    root = abs_project_path.replace("\\", "/")
    if not root.endswith("/"):
        root += "/"
    text = Text()
    text.append(loc.rel_file_path, style=Style(link=f"file://{root}{loc.rel_file_path}"))
    text.append(f":{loc.line}")
    if loc.method:
        text.append(f" {loc.method}", style="dim")
    return text


class SnippetBuilder:
    """Loads the lines around a target line, marking the target."""

    def __init__(self) -> None:
        self._radius = 3
        self._line_marker = ">>"

    def radius(self, radius: int) -> SnippetBuilder:
        self._radius = radius
        return self

    def line_marker(self, marker: str) -> SnippetBuilder:
        self._line_marker = marker
        return self

    def load(self, file_path: Path, center_line: int) -> str:
        lines = file_path.read_text(encoding="utf-8", errors="replace").split("\n")
        start = max(center_line - self._radius - 1, 0)
        end = min(center_line + self._radius - 1, len(lines) - 1)

        out: list[str] = []
        for i in range(start, end + 1):
            marker = self._line_marker if i + 1 == center_line else "  "
            out.append(f"│ {marker:>2} {i + 1:4d} {lines[i]}")
        return "\n".join(out)


def _snippet(location: SarifLocation | None, abs_project_path: str, name: str) -> str:
    if location is None or location.uri is None:
        logger.warning("%s location has no URI; snippet path will be empty", name)
        return ""
    loc = extract_node_location(location)
    try:
        return SnippetBuilder().load(Path(abs_project_path) / location.uri, loc.line)
    except OSError as exc:
        logger.warning("Failed to load code snippet: %s", exc)
        return ""


def _execution_order(step: SarifThreadFlowLocation) -> int:
    if step.executionOrder is None:
        logger.warning("Missing executionOrder in taint step; treating as 0")
        return 0
    return step.executionOrder


def ordered_taint_steps(result: SarifResult) -> list[SarifThreadFlowLocation]:
    """Steps of the first thread flow, source to sink, by execution order.

    Raises:
        ValueError: If the result carries no code flow steps.
    """
    if not result.codeFlows:
        raise ValueError("result has no codeFlows")
    code_flow = result.codeFlows[0]
    if not code_flow.threadFlows:
        raise ValueError("result has codeFlows but no threadFlows")
    thread_flow = code_flow.threadFlows[0]
    if not thread_flow.locations:
        raise ValueError("threadFlow has no locations")
    return sorted(thread_flow.locations, key=_execution_order)


def _step_message(step: SarifThreadFlowLocation) -> str:
    if step.location is not None and step.location.message is not None:
        if step.location.message.text is not None:
            return step.location.message.text
    if step.message is not None and step.message.text is not None:
        return step.message.text
    logger.warning("ThreadFlowLocation has no message text")
    return ""


def build_finding_tree(
    report: SarifReport,
    run_index: int,
    result: SarifResult,
    *,
    show_snippets: bool = False,
) -> Tree | None:
    """Build the tree for one finding, or None when it cannot be located."""
    try:
        abs_project_path = report.project_path(run_index)
    except SourceRootError as exc:
        logger.error("Project path lookup failed: %s", exc)
        return None

    if not result.locations or result.locations[0].physicalLocation is None:
        logger.warning("No primary location for finding")
        return None

    if result.level is None:
        logger.warning("Finding has nil level; defaulting to 'unknown'")
    indicator, style = level_indicator(result.level)
    tree = Tree(Text(indicator, style=style))

    rule = result.ruleId
    if rule is None:
        logger.warning("Finding has nil ruleId")
        rule = "<unknown>"
    message = result.message.text
    if message is None:
        logger.warning("Finding has nil message.text")
        message = ""

    tree.add(Text(f"Rule: {rule}"))
    tree.add(Text(f"Message: {message}"))

    primary = result.locations[0]
    location_line = Text("Location: ")
    location_line.append_text(
        format_location_link(extract_node_location(primary), abs_project_path)
    )
    tree.add(location_line)

    try:
        steps = ordered_taint_steps(result)
    except ValueError as exc:
        logger.debug("No source/sink: %s", exc)
        if show_snippets:
            snippet = _snippet(primary, abs_project_path, "Result")
            if snippet:
                tree.add(Text(snippet, style="dim"))
        return tree

    flow = tree.add("Code Flow")
    last = len(steps) - 1
    for i, step in enumerate(steps):
        node = flow.add(Text(_step_message(step)))
        node.add(format_location_link(extract_node_location(step.location), abs_project_path))
        # Snippets only for the source and the sink
        if show_snippets and i in (0, last):
            snippet = _snippet(step.location, abs_project_path, "Flow")
            if snippet:
                node.add(Text(snippet, style="dim"))
    return tree


def print_findings(
    report: SarifReport,
    *,
    show_snippets: bool = False,
    out: Console | None = None,
) -> None:
    if out is None:
        from seqra.cli.formatters.console import console

        out = console
    for run_index, run in enumerate(report.runs):
        for result in run.results:
            tree = build_finding_tree(report, run_index, result, show_snippets=show_snippets)
            if tree is not None:
                out.print(tree)
                out.print()
