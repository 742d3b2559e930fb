# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Summary command: print findings and totals of a SARIF report."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from seqra.cli.formatters.console import build_summary_tree, console
from seqra.cli.formatters.findings import print_findings
from seqra.models.sarif import SarifReport
from seqra.sarif.summary import generate_summary


def print_sarif_summary(
    report: SarifReport,
    sarif_path: Path,
    *,
    show_findings: bool = False,
    show_code_snippets: bool = False,
) -> None:
    if show_findings:
        print_findings(report, show_snippets=show_code_snippets)
    console.print(build_summary_tree(generate_summary(report), sarif_path))
    console.print()


def summary_command(
    sarif: Annotated[Path, typer.Argument(help="Path to a SARIF file")],
    show_findings: Annotated[
        bool, typer.Option("--show-findings", help="Show all issues from the SARIF file")
    ] = False,
    show_code_snippets: Annotated[
        bool,
        typer.Option(
            "--show-code-snippets", help="Show finding related code snippets", hidden=True
        ),
    ] = False,
) -> None:
    """Print a summary of a SARIF report."""
    from seqra.core.exceptions import SeqraError
    from seqra.models.sarif import load_report

    abs_sarif_path = sarif.resolve()
    try:
        report = load_report(abs_sarif_path)
    except SeqraError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc
    print_sarif_summary(
        report,
        abs_sarif_path,
        show_findings=show_findings,
        show_code_snippets=show_code_snippets,
    )
