"""benchcsv - convert benchmark logs into CSV tables."""

from __future__ import annotations

from .core import BenchCsvError, EmptyRowSetError, MalformedNumberError, UnknownModeError
from .dispatch import OutputMode, export, resolve_mode
from .parsers import read_log
from .records import ParserState, Record, RecordStore
from .render import render_csv, render_sections

__all__ = [
    "BenchCsvError",
    "EmptyRowSetError",
    "MalformedNumberError",
    "UnknownModeError",
    "OutputMode",
    "ParserState",
    "Record",
    "RecordStore",
    "export",
    "read_log",
    "render_csv",
    "render_sections",
    "resolve_mode",
]
