from __future__ import annotations
import gzip
import os
import pytest # type: ignore
from hllcount.lib.utils import read_lines


def flatten(chunks):
    return [line for chunk in chunks for line in chunk]


@pytest.mark.quick
class TestReadLinesQuick:
    """Quick tests for the chunked line reader."""

    def test_lf_lines(self, write_lines):
        path = write_lines("ips.txt", [b"10.0.0.1", b"10.0.0.2", b"10.0.0.1"])
        assert flatten(read_lines(path)) == [b"10.0.0.1", b"10.0.0.2", b"10.0.0.1"]

    def test_crlf_lines(self, write_lines):
        path = write_lines("ips.txt", [b"10.0.0.1", b"10.0.0.2"], terminator=b"\r\n")
        assert flatten(read_lines(path)) == [b"10.0.0.1", b"10.0.0.2"]

    def test_missing_final_newline(self, write_lines):
        path = write_lines("ips.txt", [b"a", b"b", b"c"], final_newline=False)
        assert flatten(read_lines(path)) == [b"a", b"b", b"c"]

    def test_empty_lines_are_kept(self, write_lines):
        path = write_lines("ips.txt", [b"a", b"", b"b", b""])
        assert flatten(read_lines(path)) == [b"a", b"", b"b", b""]

    def test_empty_file(self, write_lines):
        path = write_lines("empty.txt", [])
        assert list(read_lines(path)) == []

    def test_chunking(self, write_lines):
        lines = [str(i).encode() for i in range(25)]
        path = write_lines("numbers.txt", lines)
        chunks = list(read_lines(path, chunk_size=10))
        assert [len(chunk) for chunk in chunks] == [10, 10, 5]
        assert flatten(chunks) == lines

    def test_gzip(self, temp_dir):
        path = os.path.join(temp_dir, "ips.txt.gz")
        with gzip.open(path, "wb") as f:
            f.write(b"10.0.0.1\n10.0.0.2\n")
        assert flatten(read_lines(path)) == [b"10.0.0.1", b"10.0.0.2"]

    def test_missing_file(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            list(read_lines(os.path.join(temp_dir, "missing.txt")))

    def test_invalid_chunk_size(self, write_lines):
        path = write_lines("ips.txt", [b"a"])
        with pytest.raises(ValueError):
            list(read_lines(path, chunk_size=0))
