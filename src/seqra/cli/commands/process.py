# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Process command: post-process an analyzer SARIF report and its rule load trace."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from seqra.cli.commands.summary import print_sarif_summary
from seqra.cli.formatters.console import (
    build_rule_statistics_tree,
    console,
    print_syntax_error_report,
)


def process_command(
    sarif: Annotated[Path, typer.Argument(help="SARIF report written by the analyzer")],
    source_root: Annotated[
        Path, typer.Option("--source-root", "-s", help="Root of the analyzed sources")
    ],
    trace: Annotated[
        Path | None, typer.Option("--trace", "-t", help="Rule load trace JSON file")
    ] = None,
    ruleset: Annotated[
        list[str] | None,
        typer.Option("--ruleset", help="Ruleset argument the analyzer was given (repeatable)"),
    ] = None,
    semgrep_compatibility: Annotated[
        bool,
        typer.Option(
            "--semgrep-compatibility/--no-semgrep-compatibility",
            help="Use Semgrep compatible rule ids",
        ),
    ] = True,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the report here instead of in place"),
    ] = None,
    show_findings: Annotated[
        bool, typer.Option("--show-findings", help="Show all issues from the SARIF file")
    ] = False,
) -> None:
    """Post-process a SARIF report and print rule statistics."""
    from seqra import __version__
    from seqra.core.config import get_settings
    from seqra.core.exceptions import SeqraError
    from seqra.load_trace.aggregate import collect_ruleset_load_errors
    from seqra.load_trace.syntax_errors import filter_files_with_syntax_errors
    from seqra.models.sarif import load_report, write_report
    from seqra.sarif.postprocess import postprocess_report
    from seqra.sarif.summary import generate_summary

    settings = get_settings()
    # Either the flag or SEQRA_SEMGREP_COMPATIBILITY=false turns the remap off
    semgrep_compatibility = semgrep_compatibility and settings.semgrep_compatibility

    abs_sarif_path = sarif.resolve()
    target = output.resolve() if output is not None else abs_sarif_path
    try:
        report = load_report(abs_sarif_path)
        postprocess_report(
            report,
            source_root=str(source_root.resolve()),
            analyzer_version=settings.analyzer_version,
            semantic_version=__version__,
            user_rulesets=ruleset or [],
            semgrep_compatibility=semgrep_compatibility,
            extensions=settings.source_extensions,
        )
        write_report(report, target)
    except SeqraError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc

    result = None
    trace_summary = None
    abs_trace_path = None
    if trace is not None:
        abs_trace_path = trace.resolve()
        result, trace_summary = collect_ruleset_load_errors(abs_trace_path)

    console.print(
        build_rule_statistics_tree(
            result,
            generate_summary(report),
            abs_trace_path,
            verbose=settings.is_debug,
            issues_url=settings.issues_url,
        )
    )
    console.print()
    if trace_summary is not None:
        print_syntax_error_report(filter_files_with_syntax_errors(trace_summary))

    print_sarif_summary(report, target, show_findings=show_findings)
    console.print(f"To view findings run: seqra summary --show-findings {target}", style="dim")
