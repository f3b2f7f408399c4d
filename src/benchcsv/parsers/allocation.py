"""Parser for allocation benchmark logs.

The log is a sequence of timed results, each optionally followed by a line
describing the allocations the trial performed::

    malloc: 52.113 ms
    free: 30.902 ms
    Performed 4194304 allocations of 64 bytes each.

A detail line applies to every record already collected in the section as
well as to the ones that follow it.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from ..core import DEFAULT_SECTION, MalformedNumberError
from ..records import ParserState, Record, RecordStore
from .base import LogParser

RESULT_PATTERN = re.compile(r"(.+?): (.+?) ms")
DETAIL_PATTERN = re.compile(r"Performed (.+?) allocations of (.+?) bytes each\.")


@dataclass(frozen=True)
class ResultLine:
    technique: str
    time: float


@dataclass(frozen=True)
class DetailLine:
    allocation_count: int
    allocation_size: int


NUMBER_PATTERNS = {
    float: re.compile(r"[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?"),
    int: re.compile(r"[-+]?\d+"),
}


def _number(kind: type, value: str, line: str, lineno: int):
    # float() and int() also accept nan, inf and underscores.
    if not NUMBER_PATTERNS[kind].fullmatch(value):
        raise MalformedNumberError(lineno, line, value)
    number = kind(value)
    if not math.isfinite(number):
        raise MalformedNumberError(lineno, line, value)
    return number


def classify_line(line: str, lineno: int = 0) -> ResultLine | DetailLine | None:
    """Classify a single log line, or return None if it is not recognized."""
    match = RESULT_PATTERN.fullmatch(line)
    if match:
        technique, time = match.groups()
        return ResultLine(technique, _number(float, time, line, lineno))
    match = DETAIL_PATTERN.fullmatch(line)
    if match:
        count, size = match.groups()
        return DetailLine(
            _number(int, count, line, lineno), _number(int, size, line, lineno)
        )
    return None


def read_log_line(
    line: str,
    store: RecordStore,
    state: ParserState,
    section: str = DEFAULT_SECTION,
    lineno: int = 0,
) -> ParserState:
    """Apply one log line to the store and return the state for the next line."""
    store.ensure(section)
    parsed = classify_line(line, lineno)
    if isinstance(parsed, ResultLine):
        store.append(
            section,
            Record(
                technique=parsed.technique,
                time=parsed.time,
                allocation_count=state.allocation_count,
                allocation_size=state.allocation_size,
            ),
        )
    elif isinstance(parsed, DetailLine):
        state = ParserState(parsed.allocation_count, parsed.allocation_size)
        store.backfill(section, state.allocation_count, state.allocation_size)
    return state


def read_log(log_lines: list[str], section: str = DEFAULT_SECTION) -> RecordStore:
    """Parse all log lines into a RecordStore."""
    store = RecordStore()
    state = ParserState()
    for lineno, line in enumerate(log_lines, start=1):
        state = read_log_line(line, store, state, section, lineno)
    return store


class AllocationLogParser(LogParser):
    """Parser for timed allocation benchmark logs."""

    def name(self) -> str:
        return "allocation"

    def detect(self, log_lines: list[str]) -> bool:
        """Detect if any line carries a timed result or allocation detail."""
        return any(
            RESULT_PATTERN.fullmatch(line) or DETAIL_PATTERN.fullmatch(line)
            for line in log_lines
        )

    def parse(self, log_lines: list[str]) -> RecordStore:
        """Parse allocation benchmark log into the configured section."""
        return read_log(log_lines, self.section)
