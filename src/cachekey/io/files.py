"""File-level helpers for streaming reads."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from cachekey.constants.keys import FILE_HASH_CHUNK_SIZE


def iter_file_chunks(path: Path, chunk_size: int = FILE_HASH_CHUNK_SIZE) -> Iterator[bytes]:
    """Yield a file's bytes in fixed-size chunks."""
    with path.open("rb") as handle:
        yield from iter(lambda: handle.read(chunk_size), b"")
