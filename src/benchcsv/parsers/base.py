"""Base class for benchmark log parsers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..core import DEFAULT_SECTION
from ..records import RecordStore


class LogParser(ABC):
    """Base class for log parsers."""

    def __init__(self, section: str = DEFAULT_SECTION) -> None:
        self.section = section

    @abstractmethod
    def name(self) -> str:
        """Return the parser name."""
        pass

    @abstractmethod
    def detect(self, log_lines: list[str]) -> bool:
        """
        Detect if this parser applies to the given log.

        Args:
            log_lines: Lines of the log file

        Returns:
            True if this parser should be used for the log
        """
        pass

    @abstractmethod
    def parse(self, log_lines: list[str]) -> RecordStore:
        """
        Parse log and return records grouped by section.

        Args:
            log_lines: Lines of the log file

        Returns:
            RecordStore mapping section names to their records
        """
        pass
