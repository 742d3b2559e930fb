# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Rich console trees for scan summaries and rule load statistics."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from seqra.core.constants import ISSUES_URL, ErrorCategory, Level
from seqra.load_trace.aggregate import RuleLoadErrorsResult
from seqra.load_trace.syntax_errors import FileSyntaxErrors
from seqra.sarif.summary import Summary

console = Console()

LEVEL_COLORS = {
    Level.ERROR: "bold red",
    Level.WARNING: "yellow",
    Level.NOTE: "cyan",
}


def build_summary_tree(summary: Summary, sarif_path: Path | None = None) -> Tree:
    """Totals and findings by severity; missing levels show as zero."""
    tree = Tree("[bold]Scan Results Summary[/bold]")
    if sarif_path is not None:
        tree.add(Text(f"Report: {sarif_path}"))
    tree.add(f"Total findings: {summary.total_findings}")
    tree.add(f"Total rules run: {summary.total_rules_executed}")
    tree.add(f"Total rules triggered: {summary.total_rules_triggered}")

    if summary.findings_by_level:
        by_level = tree.add("Findings by severity")
        for level in Level:
            by_level.add(
                Text(f"{level}: {summary.count_for(level)}", style=LEVEL_COLORS[level])
            )
    return tree


def _add_parsing_issues(
    tree: Tree,
    result: RuleLoadErrorsResult | None,
    trace_path: Path | None,
    *,
    verbose: bool,
    issues_url: str,
) -> None:
    issues = tree.add("Rule Parsing Issues")

    if result is None:
        issues.add("No rule parsing data available")
        return

    if result.error is not None:
        failed = issues.add("Unable to retrieve rule load failures info")
        failed.add(Text(f"Error: {result.error}"))
        return

    s = result.summary
    affected = s.total_affected_files > 0 or s.total_affected_rules > 0
    if not verbose and not affected:
        issues.add("No issues found")
        return

    files = issues.add("File-level")
    files.add(f"Files with syntax errors: {s.file_error_types[ErrorCategory.SYNTAX_ERROR]}")
    files.add(
        f"Files with unsupported constructs: {s.file_error_types[ErrorCategory.UNSUPPORTED]}"
    )
    files.add(f"Total affected files: {s.total_affected_files}")

    rules = issues.add("Rule-level")
    rules.add(f"Rules with syntax errors: {s.rule_error_types[ErrorCategory.SYNTAX_ERROR]}")
    rules.add(
        f"Rules with unsupported constructs: {s.rule_error_types[ErrorCategory.UNSUPPORTED]}"
    )
    rules.add(f"Total affected rules: {s.total_affected_rules}")

    details = issues.add("More details")
    if trace_path is not None:
        details.add(Text(f"See Rule load trace: {trace_path}"))
    unsupported = (
        s.file_error_types[ErrorCategory.UNSUPPORTED] > 0
        or s.rule_error_types[ErrorCategory.UNSUPPORTED] > 0
    )
    if verbose or unsupported:
        details.add(Text(f"Report issues here: {issues_url}"))


def build_rule_statistics_tree(
    result: RuleLoadErrorsResult | None,
    sarif_summary: Summary | None,
    trace_path: Path | None = None,
    *,
    verbose: bool = False,
    issues_url: str = ISSUES_URL,
) -> Tree:
    """Rule parsing issues followed by rule execution counts.

    ``verbose`` shows the full counter breakdown even when nothing failed.
    """
    tree = Tree("[bold]Rule Statistics[/bold]")
    _add_parsing_issues(tree, result, trace_path, verbose=verbose, issues_url=issues_url)

    execution = tree.add("Rule Execution")
    if sarif_summary is None:
        execution.add("No SARIF report available")
    else:
        execution.add(f"Rules executed: {sarif_summary.total_rules_executed}")
        execution.add(f"Rules triggered: {sarif_summary.total_rules_triggered}")
    return tree


def build_syntax_error_trees(files: list[FileSyntaxErrors]) -> list[Tree]:
    trees: list[Tree] = []
    for file in files:
        tree = Tree(Text(f"File: {file.path}"))
        for message in file.messages:
            tree.add(Text(f"Error {message}", style="red"))
        for rule in file.rules:
            node = tree.add(Text(f"Rule: {rule.rule_id}"))
            for message in rule.messages:
                node.add(Text(f"Error {message}", style="red"))
        trees.append(tree)
    return trees


def print_syntax_error_report(files: list[FileSyntaxErrors], out: Console | None = None) -> None:
    if not files:
        return
    out = out or console
    out.rule("[bold]Rule Syntax Errors[/bold]")
    for tree in build_syntax_error_trees(files):
        out.print(tree)
        out.print()
