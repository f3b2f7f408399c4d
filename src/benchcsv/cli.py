"""benchcsv - convert benchmark logs to CSV tables."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .core import BenchCsvError, UnknownModeError, read_text, resolve_section
from .dispatch import export, resolve_mode
from .parsers import AllocationLogParser, detect_parser
from .records import Record, RecordStore

app = typer.Typer(help="benchcsv - benchmark log to CSV converter")
console = Console()
err_console = Console(stderr=True)


def fail(message: str) -> typer.Exit:
    err_console.print(f"[red]Error:[/red] {escape(message)}")
    return typer.Exit(1)


def load_log(log: Path, section: str | None) -> RecordStore:
    """Read and parse a log file into a RecordStore."""
    lines = read_text(log).split("\n")
    section = resolve_section(section)
    parser = detect_parser(lines, section)
    if parser is None:
        err_console.print(
            f"[yellow]Warning:[/yellow] no benchmark lines recognized in {escape(str(log))}"
        )
        parser = AllocationLogParser(section)
    return parser.parse(lines)


@app.command()
def convert(
    mode: str = typer.Argument(
        ...,
        help="Output mode: 'csv' for one combined table, 'csv-dir' for one file per section.",
    ),
    log: Path = typer.Argument(..., help="Benchmark log to read"),
    out: Path = typer.Argument(
        ...,
        help="Output file, or directory when it has no extension.",
    ),
    section: str | None = typer.Option(
        None,
        "--section",
        help="Section name for records (default: $BENCHCSV_SECTION or 'all')",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Report progress"),
) -> None:
    """
    Convert a benchmark log to CSV.

    If OUT has no file extension, one CSV file is written per section.
    """
    try:
        output_mode = resolve_mode(mode, out)
    except UnknownModeError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        return

    try:
        store = load_log(log, section)
        if verbose:
            for name, records in store.items():
                console.print(f"Parsed {len(records)} records in section '{name}'")
        written = export(store, output_mode, out)
    except BenchCsvError as exc:
        raise fail(str(exc))
    except OSError as exc:
        raise fail(f"{exc.strerror or exc}: {exc.filename or log}")

    if verbose:
        for path in written:
            console.print(f"[green]Wrote[/green] {escape(str(path))}")


@app.command()
def show(
    log: Path = typer.Argument(..., help="Benchmark log to read"),
    section: str | None = typer.Option(
        None,
        "--section",
        help="Section name for records (default: $BENCHCSV_SECTION or 'all')",
    ),
) -> None:
    """
    Print parsed records as a table without writing any files.
    """
    try:
        store = load_log(log, section)
    except BenchCsvError as exc:
        raise fail(str(exc))
    except OSError as exc:
        raise fail(f"{exc.strerror or exc}: {exc.filename or log}")

    for name, records in store.items():
        table = Table(title=f"{name} ({len(records)} records)")
        for field in Record.FIELDS:
            table.add_column(field, justify="left" if field == "technique" else "right")
        for record in records:
            table.add_row(*(escape(str(value)) for value in record.values()))
        console.print(table)


if __name__ == "__main__":
    app()
