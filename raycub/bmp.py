"""Writing rendered frames as 24-bit BMP images."""

from __future__ import annotations

import os
import struct

from raycub.render import Frame

HEADER_SIZE = 54
INFO_HEADER_SIZE = 40


def encode_bmp(frame: Frame) -> bytes:
    """Encode a frame as an uncompressed bottom-up 24-bit BMP."""
    padding = frame.width % 4
    filesize = HEADER_SIZE + (3 * frame.width + padding) * frame.height
    header = bytearray(HEADER_SIZE)
    header[0:2] = b"BM"
    struct.pack_into("<I", header, 2, filesize)
    header[10] = HEADER_SIZE
    header[14] = INFO_HEADER_SIZE
    struct.pack_into("<ii", header, 18, frame.width, frame.height)
    header[26] = 1
    header[28] = 24

    out = bytearray(header)
    pad = bytes(padding)
    for y in reversed(range(frame.height)):
        for x in range(frame.width):
            out += (frame.get(x, y) & 0xFFFFFF).to_bytes(3, "little")
        out += pad
    return bytes(out)


def save_bmp(frame: Frame, path: str | os.PathLike[str] = "screenshot.bmp") -> None:
    """Write the frame to ``path`` as a BMP file, replacing any existing file."""
    data = encode_bmp(frame)
    with open(path, "wb") as handle:
        handle.write(data)