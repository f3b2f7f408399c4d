"""Render benchmark records as CSV text."""

from __future__ import annotations

import csv
import io
from collections.abc import Sequence

from .core import EmptyRowSetError
from .records import Record, RecordStore


def render_csv(records: Sequence[Record], section: str | None = None) -> str:
    """
    Render records as CSV.

    The header row lists the record fields unquoted; every value in the data
    rows is wrapped in double quotes.

    Raises:
        EmptyRowSetError: if there are no records to render
    """
    if not records:
        raise EmptyRowSetError(section)
    out = io.StringIO()
    csv.writer(out, lineterminator="\n").writerow(Record.FIELDS)
    rows = csv.writer(out, quoting=csv.QUOTE_ALL, lineterminator="\n")
    rows.writerows(record.values() for record in records)
    return out.getvalue()


def combined_rows(store: RecordStore) -> list[Record]:
    """Flatten all sections into one row set, section order first."""
    rows: list[Record] = []
    for _, records in store.items():
        rows.extend(records)
    return rows


def render_combined(store: RecordStore) -> str:
    return render_csv(combined_rows(store))


def render_sections(store: RecordStore) -> dict[str, str]:
    """Render each section to its own CSV text, keyed by section name."""
    return {section: render_csv(records, section) for section, records in store.items()}


def parse_header(text: str) -> list[str]:
    """Return the column names from rendered CSV text."""
    return next(csv.reader(io.StringIO(text)), [])
