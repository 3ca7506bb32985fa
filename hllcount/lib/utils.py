import gzip
from typing import Iterator, List


def _strip_newline(line: bytes) -> bytes:
    if line.endswith(b"\n"):
        line = line[:-1]
        if line.endswith(b"\r"):
            line = line[:-1]
    return line


def read_lines(filename: str, chunk_size: int = 100_000) -> Iterator[List[bytes]]:
    """Read a text file as raw lines, in chunks.

    Each line is yielded without its line terminator (LF or CRLF). A last
    line with no terminator is still yielded; empty lines are kept.
    Files ending in .gz are decompressed on the fly.

    Errors opening or reading the file are not caught here.
    """
    if chunk_size < 1:
        raise ValueError("chunk_size must be at least 1")

    opener = gzip.open if filename.endswith(".gz") else open

    lines = []
    with opener(filename, "rb") as file:
        for line in file:
            lines.append(_strip_newline(line))
            if len(lines) >= chunk_size:
                yield lines
                lines = []
        if lines:  # Yield any remaining lines
            yield lines
