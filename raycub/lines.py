"""Line-by-line reading of scene and map files."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import TextIO

_CHUNK_SIZE = 4096


def iter_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of a text stream without their newline characters.

    Only ``"\\n"`` ends a line; any other character, carriage returns
    included, is kept as part of the line. Text after the last newline is
    yielded as a final line when it is not empty.
    """
    pending = ""
    while chunk := stream.read(_CHUNK_SIZE):
        pending += chunk
        *complete, pending = pending.split("\n")
        yield from complete
    if pending:
        yield pending


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Read every line of the file at ``path``."""
    with open(path, encoding="utf-8", newline="") as stream:
        return list(iter_lines(stream))