import io

from PIL import Image

from ncscreen.framebuffer import FRAME_SIZE, ROW_BYTES, ROW_STRIDE, ROWS, decode_frame
from ncscreen.pcx import PCX_HEADER, RUN_MARKER, encode_pcx


def _make_dump() -> bytes:
    data = bytearray()
    for row in range(ROWS):
        data.extend((row * 5 + col * 41 + 7) & 0xFF for col in range(ROW_BYTES))
        data.extend(b"\xDE\xAD\xBE\xEF")
    return bytes(data)


def test_header_template():
    assert len(PCX_HEADER) == 128
    assert PCX_HEADER[:12] == bytes(
        [0x0A, 0x05, 0x01, 0x01, 0x00, 0x00, 0x00, 0x00, 0xDF, 0x01, 0x3F, 0x00]
    )
    assert PCX_HEADER[16:22] == bytes([0x00, 0x00, 0x00, 0xFF, 0xFF, 0xFF])
    assert PCX_HEADER[64:70] == bytes([0x00, 0x01, 0x3C, 0x00, 0x01, 0x00])
    assert PCX_HEADER[70:] == bytes(58)


def test_output_length():
    assert len(encode_pcx(decode_frame(_make_dump()))) == 128 + 64 * 60 * 2 == 7808


def test_pixels_in_capture_order_with_run_markers():
    dump = _make_dump()
    body = encode_pcx(decode_frame(dump))[128:]

    assert body[0::2] == bytes([RUN_MARKER]) * (ROWS * ROW_BYTES)
    expected = b"".join(
        dump[row * ROW_STRIDE : row * ROW_STRIDE + ROW_BYTES] for row in range(ROWS)
    )
    assert body[1::2] == expected


def test_all_zero_frame():
    body = encode_pcx(decode_frame(bytes(FRAME_SIZE)))[128:]
    assert body == bytes([0xC1, 0x00]) * 3840


def test_decodes_with_pillow():
    frame = decode_frame(_make_dump())
    bits = frame.bits

    with Image.open(io.BytesIO(encode_pcx(frame))) as image:
        assert image.format == "PCX"
        assert image.size == (480, 64)
        assert image.mode == "1"
        for row in (0, 33, 63):
            for col in (0, 9, 255, 479):
                assert image.getpixel((col, row)) == 255 * bits[row, col]
