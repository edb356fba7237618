"""Pixels and pixel grids with colour filters and a box blur."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from itertools import accumulate
from typing import BinaryIO, Callable, Iterator


@dataclass(frozen=True)
class Pixel:
    """An RGB pixel with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0

    def red_only(self) -> Pixel:
        return Pixel(self.r, 0, 0)

    def green_only(self) -> Pixel:
        return Pixel(0, self.g, 0)

    def blue_only(self) -> Pixel:
        return Pixel(0, 0, self.b)


def _summed_area(rows: list[list[int]], width: int) -> list[list[int]]:
    table = [[0] * (width + 1)]
    for row in rows:
        above = table[-1]
        table.append([0] + [a + s for a, s in zip(above[1:], accumulate(row))])
    return table


@dataclass
class PixelArray:
    """A row-major grid of pixels addressed by (x, y)."""

    width: int
    height: int
    data: list[Pixel] = field(default_factory=list)

    def __post_init__(self) -> None:
        size = self.width * self.height
        if not self.data:
            self.data = [Pixel()] * size
        elif len(self.data) != size:
            raise ValueError(f"expected {size} pixels, got {len(self.data)}")

    def _rows(self) -> Iterator[list[Pixel]]:
        for start in range(0, self.width * self.height, self.width or 1):
            yield self.data[start:start + self.width]

    def _index(self, pos: tuple[int, int]) -> int:
        x, y = pos
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel position {pos} out of range")
        return y * self.width + x

    def __getitem__(self, pos: tuple[int, int]) -> Pixel:
        return self.data[self._index(pos)]

    def __setitem__(self, pos: tuple[int, int], pixel: Pixel) -> None:
        self.data[self._index(pos)] = pixel

    @classmethod
    def read(cls, stream: BinaryIO, width: int, height: int, offset: int,
             padding: int) -> PixelArray:
        """Read BGR pixel rows starting at offset, skipping row padding."""
        stream.seek(offset)
        row_len = width * 3
        pixels: list[Pixel] = []
        for _ in range(height):
            row = stream.read(row_len)
            if len(row) < row_len:
                raise EOFError("truncated pixel data")
            pixels.extend(
                Pixel(r, g, b) for b, g, r in zip(row[0::3], row[1::3], row[2::3])
            )
            stream.seek(padding, io.SEEK_CUR)
        return cls(width, height, pixels)

    def write(self, stream: BinaryIO, offset: int, padding: int) -> None:
        """Write BGR pixel rows at offset, each followed by zero padding."""
        stream.seek(offset)
        pad = bytes(padding)
        for row in self._rows():
            stream.write(bytes(c for p in row for c in (p.b, p.g, p.r)) + pad)

    def map(self, func: Callable[[Pixel], Pixel]) -> PixelArray:
        """Return a new array with func applied to every pixel."""
        return PixelArray(self.width, self.height, [func(p) for p in self.data])

    def red(self) -> PixelArray:
        return self.map(Pixel.red_only)

    def green(self) -> PixelArray:
        return self.map(Pixel.green_only)

    def blue(self) -> PixelArray:
        return self.map(Pixel.blue_only)

    def blur(self, blur_y: int, blur_x: int) -> PixelArray:
        """Box blur with a window of blur_x by blur_y, clipped at the edges."""
        if blur_x < 1 or blur_y < 1:
            raise ValueError("blur window must be at least 1x1")
        width, height = self.width, self.height
        if width == 0 or height == 0:
            return PixelArray(width, height, list(self.data))
        dx = (blur_x - 1) // 2
        dy = (blur_y - 1) // 2
        rows = list(self._rows())
        tables = [
            _summed_area([[getattr(p, ch) for p in row] for row in rows], width)
            for ch in ("r", "g", "b")
        ]

        def window_sum(table: list[list[int]], x0: int, x1: int, y0: int, y1: int) -> int:
            return table[y1 + 1][x1 + 1] - table[y0][x1 + 1] - table[y1 + 1][x0] + table[y0][x0]

        pixels = []
        for y in range(height):
            y0, y1 = max(0, y - dy), min(height - 1, y + dy)
            for x in range(width):
                x0, x1 = max(0, x - dx), min(width - 1, x + dx)
                count = (x1 - x0 + 1) * (y1 - y0 + 1)
                r, g, b = (window_sum(t, x0, x1, y0, y1) // count for t in tables)
                pixels.append(Pixel(r, g, b))
        return PixelArray(width, height, pixels)