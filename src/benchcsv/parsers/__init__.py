"""Log parser plugins for benchmark output formats."""

from __future__ import annotations

from ..core import DEFAULT_SECTION
from .allocation import AllocationLogParser, classify_line, read_log, read_log_line
from .base import LogParser

__all__ = [
    "LogParser",
    "AllocationLogParser",
    "AVAILABLE_PARSERS",
    "classify_line",
    "detect_parser",
    "read_log",
    "read_log_line",
]

AVAILABLE_PARSERS: list[type[LogParser]] = [
    AllocationLogParser,
    # Future parsers can be added here
]


def detect_parser(
    log_lines: list[str], section: str = DEFAULT_SECTION
) -> LogParser | None:
    """
    Auto-detect appropriate parser for log content.

    Args:
        log_lines: Lines from the log file
        section: Name of the section records are collected under

    Returns:
        LogParser instance that matches the log content, or None if no
        parser recognizes any of its lines
    """
    for parser_class in AVAILABLE_PARSERS:
        parser = parser_class(section)
        if parser.detect(log_lines):
            return parser
    return None
