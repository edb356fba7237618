"""A bitmap image: header plus pixel grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

from .fileinfo import FileInfo
from .pixel import PixelArray


@dataclass
class Bitmap:
    """A 24-bit bitmap read from or written to a binary stream."""

    meta: FileInfo
    image: PixelArray

    @classmethod
    def read(cls, stream: BinaryIO) -> Bitmap:
        meta = FileInfo.read(stream)
        image = PixelArray.read(
            stream, meta.px_width, meta.px_height, meta.pix_offset, meta.padding()
        )
        return cls(meta, image)

    def write(self, stream: BinaryIO) -> None:
        self.meta.write(stream)
        self.image.write(stream, self.meta.pix_offset, self.meta.padding())
        stream.flush()

    def red(self) -> Bitmap:
        return Bitmap(self.meta, self.image.red())

    def green(self) -> Bitmap:
        return Bitmap(self.meta, self.image.green())

    def blue(self) -> Bitmap:
        return Bitmap(self.meta, self.image.blue())

    def blur(self, blur_x: int, blur_y: int) -> Bitmap:
        return Bitmap(self.meta, self.image.blur(blur_x, blur_y))