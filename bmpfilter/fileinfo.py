"""Bitmap file and DIB header handling."""

from __future__ import annotations

import struct
from dataclasses import astuple, dataclass
from typing import BinaryIO

_HEADER = struct.Struct("<BBIHHIIIIHHIIIIII")
HEADER_SIZE = _HEADER.size


@dataclass
class FileInfo:
    """The 54-byte header at the start of a 24-bit bitmap file."""

    id1: int = 0
    id2: int = 0
    size_file: int = 0
    unused1: int = 0
    unused2: int = 0
    pix_offset: int = 0
    dib_size: int = 0
    px_width: int = 0
    px_height: int = 0
    cplane: int = 0
    bit_px: int = 0
    px_compress: int = 0
    raw_size: int = 0
    dpi_h: int = 0
    dpi_v: int = 0
    colors: int = 0
    imp_colors: int = 0

    def padding(self) -> int:
        """Number of padding bytes at the end of each pixel row."""
        if self.px_height == 0:
            raise ValueError("image height is zero")
        pad = self.raw_size // self.px_height - self.px_width * 3
        if pad < 0:
            raise ValueError("raw image size is too small for the image width")
        return pad

    @classmethod
    def read(cls, stream: BinaryIO) -> FileInfo:
        """Read the header from the start of a binary stream."""
        stream.seek(0)
        data = stream.read(HEADER_SIZE)
        if len(data) < HEADER_SIZE:
            raise EOFError("truncated bitmap header")
        return cls(*_HEADER.unpack(data))

    def write(self, stream: BinaryIO) -> None:
        """Write the header at the start of a binary stream."""
        stream.seek(0)
        stream.write(_HEADER.pack(*astuple(self)))