import io

import pytest

from ncscreen.errors import SourceReadError
from ncscreen.framebuffer import (
    FRAME_SIZE,
    ROW_BYTES,
    ROW_STRIDE,
    ROWS,
    RawFrame,
    decode_frame,
    load_frame,
    read_frame,
)


def _make_dump(padding: int = 0xAA) -> bytes:
    data = bytearray()
    for row in range(ROWS):
        data.extend((row * 7 + col * 13) & 0xFF for col in range(ROW_BYTES))
        data.extend([padding] * (ROW_STRIDE - ROW_BYTES))
    return bytes(data)


def test_decode_drops_row_padding():
    dump = _make_dump()
    frame = decode_frame(dump)

    assert len(frame.rows) == ROWS
    for row in range(ROWS):
        assert frame.row(row) == dump[row * ROW_STRIDE : row * ROW_STRIDE + ROW_BYTES]
    assert all(len(row) == ROW_BYTES for row in frame.rows)


def test_padding_content_does_not_affect_frame():
    assert decode_frame(_make_dump(0x00)) == decode_frame(_make_dump(0xFF))


def test_trailing_bytes_are_ignored():
    dump = _make_dump()
    assert decode_frame(dump + b"\x12\x34") == decode_frame(dump)


def test_short_dump_is_rejected():
    with pytest.raises(SourceReadError):
        decode_frame(bytes(FRAME_SIZE - 1))


def test_read_frame_from_stream():
    dump = _make_dump()
    stream = io.BytesIO(dump + b"extra")

    frame = read_frame(stream)

    assert frame == decode_frame(dump)
    assert stream.read() == b"extra"


def test_bit_grid_matches_packed_bytes():
    frame = decode_frame(_make_dump())
    bits = frame.bits

    for row in (0, 1, 31, 63):
        for col in (0, 1, 7, 8, 100, 479):
            expected = (frame.rows[row][col // 8] >> (7 - col % 8)) & 1
            assert bits[row, col] == expected


def test_bit_grid_msb_is_leftmost_dot():
    dump = bytearray(FRAME_SIZE)
    dump[0] = 0x80
    bits = decode_frame(bytes(dump)).bits

    assert bits.row(0)[:9] == [1, 0, 0, 0, 0, 0, 0, 0, 0]
    assert sum(bits.row(1)) == 0


def test_bit_grid_bounds():
    bits = decode_frame(bytes(FRAME_SIZE)).bits
    with pytest.raises(IndexError):
        bits[64, 0]
    with pytest.raises(IndexError):
        bits[0, 480]


def test_raw_frame_rejects_wrong_geometry():
    with pytest.raises(ValueError):
        RawFrame(tuple(bytes(ROW_BYTES) for _ in range(ROWS - 1)))
    with pytest.raises(ValueError):
        RawFrame(tuple(bytes(ROW_STRIDE) for _ in range(ROWS)))


def test_load_frame_missing_file(tmp_path):
    missing = tmp_path / "missing.bin"
    with pytest.raises(SourceReadError) as excinfo:
        load_frame(missing)
    assert excinfo.value.path == missing
    assert str(missing) in str(excinfo.value)


def test_load_frame_short_file(tmp_path):
    source = tmp_path / "short.bin"
    source.write_bytes(bytes(100))
    with pytest.raises(SourceReadError) as excinfo:
        load_frame(source)
    assert excinfo.value.path == source


def test_load_frame(tmp_path):
    source = tmp_path / "grab.bin"
    source.write_bytes(_make_dump())
    assert load_frame(source) == decode_frame(_make_dump())
