#!/usr/bin/env python3
"""Command line interface for fastxreader using Typer."""

import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from fastxreader.core.constants import STDIN_PATH
from fastxreader.core.errors import PairingViolation, ResourceError
from fastxreader.core.logging_config import get_logger, setup_logging
from fastxreader.version import __version__

app = typer.Typer(
    name="fastxreader",
    help="Read FASTA and FASTQ files, single or paired-end.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Sequences go to stdout, everything else to stderr
console = Console(stderr=True, soft_wrap=True)
logger = get_logger(__name__)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold green]fastxreader[/bold green] version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True, help="Show version and exit."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-V", help="Enable verbose output (DEBUG level)."),
    ] = False,
    log_file: Annotated[Optional[Path], typer.Option("--log-file", help="Also write logs to this file.")] = None,
) -> None:
    """fastxreader - streaming FASTA/FASTQ parser."""
    log_level = "DEBUG" if verbose else "INFO"
    setup_logging(level=log_level, log_file=log_file)  # type: ignore


@app.command()
def read(
    files: Annotated[
        Optional[list[str]], typer.Argument(help="FASTA/FASTQ files to read; '-' reads standard input.")
    ] = None,
) -> None:
    """Parse FASTA/FASTQ files and print the records back."""
    from fastxreader.core.reader import FastxReader
    from fastxreader.core.writers import write_records

    for input_file in files or [STDIN_PATH]:
        if input_file != STDIN_PATH and not Path(input_file).exists():
            console.print(f"[red]Skipping:[/red] {escape(input_file)} (not found)")
            continue

        logger.info(f"Reading {input_file}")
        try:
            with FastxReader.open(input_file) as reader:
                counter = write_records(reader, sys.stdout)
        except ResourceError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise typer.Exit(1) from None
        logger.info(f"Finished {input_file}: {counter} sequences")


@app.command()
def pairs(
    read1: Annotated[
        Optional[Path], typer.Option("-r1", "--read1", help="First FASTQ file (R1); omit or '-' for interleaved stdin.")
    ] = None,
    read2: Annotated[Optional[Path], typer.Option("-r2", "--read2", help="Second FASTQ file (R2).")] = None,
    interleaved: Annotated[bool, typer.Option("--interleaved", help="Read R1 as an interleaved file.")] = False,
    check_names: Annotated[bool, typer.Option("--check/--no-check", help="Require identical mate names.")] = True,
    revcompl: Annotated[bool, typer.Option("--revcompl", help="Reverse complement the second mate.")] = False,
    tag1: Annotated[Optional[str], typer.Option("--tag1", help="Tag in the R1 file name to replace.")] = None,
    tag2: Annotated[Optional[str], typer.Option("--tag2", help="Replacement giving the R2 file name.")] = None,
    require_mate: Annotated[
        bool, typer.Option("--require-mate", help="Fail instead of falling back to interleaved when R2 is not found.")
    ] = False,
) -> None:
    """Read paired-end files and print the pairs as interleaved records."""
    from fastxreader.core.paired import PairedReader
    from fastxreader.core.writers import write_records
    from fastxreader.models.models import PairConfig

    if (tag1 is None) != (tag2 is None):
        console.print("[red]Error:[/red] --tag1 and --tag2 must be given together.")
        raise typer.Exit(1)

    settings = {}
    if tag1 is not None:
        settings["tag_pairs"] = ((tag1, tag2),)

    try:
        config = PairConfig(
            read1=read1,
            read2=read2,
            interleaved=interleaved,
            check_names=check_names,
            reverse_complement=revcompl,
            require_mate=require_mate,
            **settings,
        )
    except ValidationError as e:
        console.print(f"[red]Invalid options:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None

    try:
        with PairedReader(config) as reader:
            counter = write_records(reader, sys.stdout)
    except (PairingViolation, ResourceError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None

    logger.info(f"Finished: {counter} pairs")


@app.command()
def check(
    infile: Annotated[str, typer.Argument(help="FASTQ file to validate; '-' reads standard input.")],
    max_errors: Annotated[
        int, typer.Option("-m", "--max-errors", help="Stop after this many errors (0 reports all).")
    ] = 0,
) -> None:
    """Validate a four-line FASTQ file with the strict parser."""
    from fastxreader.core.strict import StrictFastqReader
    from fastxreader.models.models import FormatViolation

    try:
        reader = StrictFastqReader.open(infile)
    except ResourceError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None

    with reader:
        for item in reader:
            if isinstance(item, FormatViolation):
                console.print(f"[red]{escape(infile)}[/red] {escape(str(item))}")
                if max_errors and reader.violations >= max_errors:
                    break

    logger.info(f"Checked {infile}: {reader.records_read} valid records, {reader.violations} errors")
    if reader.violations:
        raise typer.Exit(1)


@app.command(name="format")
def file_format(
    files: Annotated[list[Path], typer.Argument(help="Files to inspect.")],
) -> None:
    """Print the detected format (fasta, fastq or unknown) of each file."""
    from fastxreader.core.file_format import get_file_format

    failed = False
    for path in files:
        try:
            detected = get_file_format(path)
        except ResourceError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            failed = True
            continue
        typer.echo(f"{path}\t{detected or 'unknown'}")

    if failed:
        raise typer.Exit(1)


def main_cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main_cli()
