import io

import pytest

from bmpfilter.bitmap import Bitmap
from bmpfilter.fileinfo import FileInfo
from bmpfilter.pixel import Pixel, PixelArray


def _bitmap():
    meta = FileInfo(
        id1=ord("B"),
        id2=ord("M"),
        size_file=78,
        pix_offset=54,
        dib_size=40,
        px_width=3,
        px_height=2,
        cplane=1,
        bit_px=24,
        raw_size=24,
    )
    image = PixelArray(3, 2, [Pixel(10 * i, 20 * i, 30 * i) for i in range(6)])
    return Bitmap(meta, image)


def _encode(bm):
    buf = io.BytesIO()
    bm.write(buf)
    return buf.getvalue()


def test_write_then_read_round_trip():
    bm = _bitmap()
    assert Bitmap.read(io.BytesIO(_encode(bm))) == bm


def test_written_size_matches_header():
    bm = _bitmap()
    data = _encode(bm)
    assert len(data) == bm.meta.pix_offset + bm.meta.raw_size
    assert data[:2] == b"BM"


def test_padding_bytes_are_zero():
    data = _encode(_bitmap())
    row_start = 54
    assert data[row_start + 9:row_start + 12] == bytes(3)


def test_filters_keep_header():
    bm = _bitmap()
    for filtered, expected in (
        (bm.red(), bm.image.red()),
        (bm.green(), bm.image.green()),
        (bm.blue(), bm.image.blue()),
        (bm.blur(7, 7), bm.image.blur(7, 7)),
    ):
        assert filtered.meta == bm.meta
        assert filtered.image == expected


def test_read_truncated_pixels():
    data = _encode(_bitmap())[:60]
    with pytest.raises(EOFError):
        Bitmap.read(io.BytesIO(data))