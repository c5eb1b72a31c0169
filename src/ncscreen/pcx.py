"""ZSoft PCX writer for NC100 screen grabs.

Rows are written in capture order. Every packed byte is preceded by a run
marker with a count of one, so the data is valid RLE without any
compression.
"""
from __future__ import annotations

from .framebuffer import HEIGHT, ROW_BYTES, WIDTH, RawFrame

RUN_MARKER = 0xC1
PCX_HEADER_SIZE = 128


def _build_header() -> bytes:
    header = bytearray(PCX_HEADER_SIZE)
    header[0] = 0x0A  # ZSoft
    header[1] = 0x05  # version 3.0+
    header[2] = 0x01  # RLE
    header[3] = 0x01  # bits per pixel
    header[4:12] = (
        (0).to_bytes(2, "little")
        + (0).to_bytes(2, "little")
        + (WIDTH - 1).to_bytes(2, "little")
        + (HEIGHT - 1).to_bytes(2, "little")
    )
    # 16-colour map: entry 0 black, entry 1 white
    header[19:22] = b"\xFF\xFF\xFF"
    header[65] = 0x01  # colour planes
    header[66:68] = ROW_BYTES.to_bytes(2, "little")
    header[68:70] = (1).to_bytes(2, "little")  # colour/BW palette
    return bytes(header)


PCX_HEADER = _build_header()


def pcx_pixel_data(frame: RawFrame) -> bytes:
    data = bytearray()
    for row in frame.iter_rows():
        for value in row:
            data.append(RUN_MARKER)
            data.append(value)
    return bytes(data)


def encode_pcx(frame: RawFrame) -> bytes:
    return PCX_HEADER + pcx_pixel_data(frame)
