"""Core helpers: file access, configuration and errors."""

from __future__ import annotations

import os
import re
from pathlib import Path

DEFAULT_SECTION = "all"

SECTION_ENV_VARS = (
    "BENCHCSV_SECTION",
)

NEWLINE_PATTERN = re.compile(r"\r?\n")


class BenchCsvError(Exception):
    """Base class for errors raised while converting a log."""


class UnknownModeError(BenchCsvError):
    """Requested output mode is not one of the recognized tokens."""

    def __init__(self, token: str) -> None:
        super().__init__(f'unknown output mode "{token}"')
        self.token = token


class EmptyRowSetError(BenchCsvError):
    """Rendering was attempted with no records to derive a table from."""

    def __init__(self, section: str | None = None) -> None:
        where = f" in section '{section}'" if section else ""
        super().__init__(f"no benchmark records found{where}")
        self.section = section


class MalformedNumberError(BenchCsvError):
    """A numeric field captured from a log line could not be parsed."""

    def __init__(self, lineno: int, line: str, value: str) -> None:
        super().__init__(f"line {lineno}: cannot parse number {value!r} in {line!r}")
        self.lineno = lineno
        self.line = line
        self.value = value


def resolve_section(cli_section: str | None) -> str:
    """Resolve section name with precedence: CLI > Env > Default."""
    if cli_section:
        return cli_section
    for env_var in SECTION_ENV_VARS:
        value = os.environ.get(env_var)
        if value:
            return value
    return DEFAULT_SECTION


def normalize_newlines(text: str) -> str:
    return NEWLINE_PATTERN.sub("\n", text)


def read_text(path: str | Path) -> str:
    """Read a text file, normalizing any newline convention to ``\\n``."""
    with open(path, encoding="utf-8", newline="") as f:
        return normalize_newlines(f.read())


def write_text(path: str | Path, text: str) -> None:
    """Write text using the host line-ending convention."""
    text = normalize_newlines(text).replace("\n", os.linesep)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)
