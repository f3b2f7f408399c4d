"""Tests for output mode selection and file export."""

import pytest

from benchcsv.core import EmptyRowSetError, UnknownModeError, read_text, write_text
from benchcsv.dispatch import OutputMode, export, resolve_mode
from benchcsv.records import Record, RecordStore


@pytest.fixture
def store():
    store = RecordStore()
    store.append("malloc", Record("malloc", 5.0, 10, 64))
    store.append("arena", Record("arena-alloc", 1.5, 10, 64))
    return store


class TestResolveMode:
    """Test mapping tokens to output modes."""

    def test_csv_with_extension_is_combined(self):
        assert resolve_mode("csv", "out.csv") is OutputMode.COMBINED

    def test_csv_without_extension_is_per_section(self):
        assert resolve_mode("csv", "results") is OutputMode.PER_SECTION

    def test_csv_dir_token(self):
        assert resolve_mode("csv-dir", "results") is OutputMode.PER_SECTION

    def test_unknown_token(self):
        with pytest.raises(UnknownModeError) as excinfo:
            resolve_mode("xyz", "out.csv")
        assert excinfo.value.token == "xyz"
        assert '"xyz"' in str(excinfo.value)

    def test_unknown_token_without_extension(self):
        with pytest.raises(UnknownModeError):
            resolve_mode("xyz", "results")


class TestExport:
    """Test writing rendered tables to disk."""

    def test_combined_writes_single_file(self, store, tmp_path):
        out = tmp_path / "bench.csv"
        written = export(store, OutputMode.COMBINED, out)

        assert written == [out]
        lines = read_text(out).splitlines()
        assert lines[0] == "technique,time,allocation_count,allocation_size"
        assert [line.split(",")[0] for line in lines[1:]] == [
            '"malloc"',
            '"arena-alloc"',
        ]

    def test_per_section_writes_file_per_section(self, store, tmp_path):
        out = tmp_path / "nested" / "results"
        written = export(store, OutputMode.PER_SECTION, out)

        assert written == [out / "malloc.csv", out / "arena.csv"]
        assert sorted(p.name for p in out.iterdir()) == ["arena.csv", "malloc.csv"]
        assert '"arena-alloc"' in read_text(out / "arena.csv")

    def test_empty_section_leaves_no_files(self, store, tmp_path):
        store.ensure("empty")
        out = tmp_path / "results"
        with pytest.raises(EmptyRowSetError):
            export(store, OutputMode.PER_SECTION, out)
        assert not out.exists()

    def test_empty_store_leaves_no_file(self, tmp_path):
        out = tmp_path / "bench.csv"
        with pytest.raises(EmptyRowSetError):
            export(RecordStore(), OutputMode.COMBINED, out)
        assert not out.exists()


class TestFileHelpers:
    """Test newline handling of file helpers."""

    def test_read_normalizes_crlf(self, tmp_path):
        path = tmp_path / "log.txt"
        path.write_bytes(b"a: 1 ms\r\nb: 2 ms\r\n")
        assert read_text(path) == "a: 1 ms\nb: 2 ms\n"

    def test_write_uses_host_line_endings(self, tmp_path, monkeypatch):
        monkeypatch.setattr("benchcsv.core.os.linesep", "\r\n")
        path = tmp_path / "out.csv"
        write_text(path, "a\nb\n")
        assert path.read_bytes() == b"a\r\nb\r\n"
