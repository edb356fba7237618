import io

import pytest

from bmpfilter.fileinfo import HEADER_SIZE, FileInfo


def _sample():
    return FileInfo(
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
        dpi_h=2835,
        dpi_v=2835,
    )


def test_round_trip():
    info = _sample()
    buf = io.BytesIO()
    info.write(buf)
    assert FileInfo.read(buf) == info


def test_written_header_starts_with_magic():
    buf = io.BytesIO()
    _sample().write(buf)
    data = buf.getvalue()
    assert data[:2] == b"BM"
    assert len(data) == HEADER_SIZE == 54


def test_fields_are_little_endian():
    buf = io.BytesIO()
    _sample().write(buf)
    data = buf.getvalue()
    assert data[10:14] == (54).to_bytes(4, "little")
    assert data[18:22] == (3).to_bytes(4, "little")


def test_read_rewinds_stream():
    buf = io.BytesIO()
    _sample().write(buf)
    buf.seek(20)
    assert FileInfo.read(buf).px_height == 2


def test_padding():
    assert _sample().padding() == 3


def test_padding_zero_height():
    with pytest.raises(ValueError):
        FileInfo(px_width=1, px_height=0, raw_size=4).padding()


def test_padding_negative():
    with pytest.raises(ValueError):
        FileInfo(px_width=10, px_height=1, raw_size=4).padding()


def test_truncated_header():
    with pytest.raises(EOFError):
        FileInfo.read(io.BytesIO(b"BM\x00\x00"))


def test_default_is_zeroed():
    buf = io.BytesIO()
    FileInfo().write(buf)
    assert buf.getvalue() == bytes(HEADER_SIZE)