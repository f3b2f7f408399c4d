"""Select and write the requested output layout."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from .core import EmptyRowSetError, UnknownModeError, write_text
from .records import RecordStore
from .render import render_combined, render_sections


class OutputMode(Enum):
    """Output layouts, valued by their command-line token."""

    COMBINED = "csv"
    PER_SECTION = "csv-dir"


def resolve_mode(token: str, out: str | Path) -> OutputMode:
    """
    Map a command-line token to an output mode.

    An output path without an extension always selects per-section output.

    Raises:
        UnknownModeError: if the token is not a recognized mode
    """
    try:
        mode = OutputMode(token)
    except ValueError:
        raise UnknownModeError(token) from None
    if not Path(out).suffix:
        return OutputMode.PER_SECTION
    return mode


def export(store: RecordStore, mode: OutputMode, out: str | Path) -> list[Path]:
    """Render the store and write it to disk, returning the written paths."""
    out = Path(out)
    # Render everything before touching the filesystem.
    if mode is OutputMode.COMBINED:
        outputs = {out: render_combined(store)}
    else:
        outputs = {
            out / f"{section}.csv": text
            for section, text in render_sections(store).items()
        }
        if not outputs:
            raise EmptyRowSetError()
        out.mkdir(parents=True, exist_ok=True)

    for path, text in outputs.items():
        write_text(path, text)
    return list(outputs)
