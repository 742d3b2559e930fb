# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typer CLI application root."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from seqra.cli.commands.process import process_command
from seqra.cli.commands.rule_errors import rule_errors_command
from seqra.cli.commands.summary import summary_command

app = typer.Typer(
    name="seqra",
    help="SARIF post-processing and rule load statistics for the Seqra analyzer",
    no_args_is_help=True,
)

app.command(name="summary")(summary_command)
app.command(name="process")(process_command)
app.command(name="rule-errors")(rule_errors_command)


@app.callback()
def main() -> None:
    """Configure logging from SEQRA_* settings before any command runs."""
    from seqra.core.config import get_settings
    from seqra.core.exceptions import ConfigurationError
    from seqra.core.logging import setup_logging

    try:
        settings = get_settings()
    except ConfigurationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc

    level = "DEBUG" if settings.is_debug else settings.log_level
    setup_logging(level=level, fmt=settings.log_format)


@app.command(name="trace-path")
def trace_path(
    base_dir: Annotated[
        Path | None,
        typer.Option("--base-dir", help="Directory to place the trace under"),
    ] = None,
) -> None:
    """Create the rule load trace directory and print a fresh trace file path."""
    from seqra.core.config import get_settings
    from seqra.load_trace.paths import generate_rule_load_trace_path

    path = generate_rule_load_trace_path(base_dir or get_settings().trace_dir)
    typer.echo(str(path))


@app.command()
def version() -> None:
    """Show version information."""
    from seqra import __version__
    from seqra.core.config import get_settings

    typer.echo(f"seqra v{__version__}")
    typer.echo(f"analyzer {get_settings().analyzer_version}")
