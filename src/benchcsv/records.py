"""Records and the section-grouped store the parser fills."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, fields
from typing import ClassVar


@dataclass
class Record:
    """One timed trial outcome."""

    technique: str
    time: float
    allocation_count: int = 0
    allocation_size: int = 0

    FIELDS: ClassVar[tuple[str, ...]]

    def values(self) -> tuple[object, ...]:
        """Return field values in column order."""
        return tuple(getattr(self, name) for name in self.FIELDS)


Record.FIELDS = tuple(f.name for f in fields(Record))


@dataclass(frozen=True)
class ParserState:
    """Allocation details carried from one log line to the next."""

    allocation_count: int = 0
    allocation_size: int = 0


class RecordStore:
    """Ordered mapping of section name to the records collected for it."""

    def __init__(self) -> None:
        self._sections: dict[str, list[Record]] = {}

    def ensure(self, section: str) -> list[Record]:
        """Return the records for a section, creating it on first use."""
        return self._sections.setdefault(section, [])

    def append(self, section: str, record: Record) -> None:
        self.ensure(section).append(record)

    def backfill(self, section: str, allocation_count: int, allocation_size: int) -> None:
        """Overwrite allocation details on every record already in a section."""
        for record in self.ensure(section):
            record.allocation_count = allocation_count
            record.allocation_size = allocation_size

    def sections(self) -> list[str]:
        return list(self._sections)

    def items(self) -> Iterator[tuple[str, list[Record]]]:
        return iter(self._sections.items())

    def record_count(self) -> int:
        return sum(len(records) for records in self._sections.values())

    def __getitem__(self, section: str) -> list[Record]:
        return self._sections[section]

    def __contains__(self, section: object) -> bool:
        return section in self._sections

    def __iter__(self) -> Iterator[str]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)
