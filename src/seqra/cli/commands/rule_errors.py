# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Rule errors command: rule load statistics and syntax errors from a trace file."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from seqra.cli.formatters.console import (
    build_rule_statistics_tree,
    console,
    print_syntax_error_report,
)
from seqra.load_trace.aggregate import collect_ruleset_load_errors
from seqra.load_trace.syntax_errors import filter_files_with_syntax_errors


def rule_errors_command(
    trace: Annotated[Path, typer.Argument(help="Path to a rule load trace JSON file")],
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show all counters even without issues")
    ] = False,
) -> None:
    """Summarize rule loading errors recorded by the analyzer."""
    from seqra.core.config import get_settings

    settings = get_settings()
    abs_trace_path = trace.resolve()
    result, trace_summary = collect_ruleset_load_errors(abs_trace_path)

    console.print(
        build_rule_statistics_tree(
            result,
            None,
            abs_trace_path,
            verbose=verbose or settings.is_debug,
            issues_url=settings.issues_url,
        )
    )
    console.print()
    print_syntax_error_report(filter_files_with_syntax_errors(trace_summary))

    if result.error is not None:
        raise typer.Exit(1)
