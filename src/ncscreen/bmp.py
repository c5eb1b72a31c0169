"""Windows Bitmap writer for NC100 screen grabs.

Layout of the generated file::

    offset  size  block
    0       14    BITMAPFILEHEADER
    14      124   BITMAPV5HEADER (only the V4 fields carry values)
    138     8     colour table: white, black (B, G, R, reserved)
    146     ...   pixel rows, bottom row first

Raw output keeps the 1bpp packing of the dump (60 bytes per row). Scaled
output is the 3x grid with one palette index byte per pixel.
"""
from __future__ import annotations

import struct
from dataclasses import dataclass

from .framebuffer import FRAME_SIZE, HEIGHT, WIDTH, RawFrame
from .unpack import unpack_frame
from .upscale import SCALE, SCALED_HEIGHT, SCALED_SIZE, SCALED_WIDTH, upscale

FILE_HEADER_SIZE = 14
DIB_HEADER_SIZE = 124
COLOR_TABLE = bytes([0xFF, 0xFF, 0xFF, 0x00, 0x00, 0x00, 0x00, 0x00])
HEADER_SIZE = FILE_HEADER_SIZE + DIB_HEADER_SIZE + len(COLOR_TABLE)

PIXELS_PER_METRE_72DPI = 2835
BI_RGB = 0
LCS_SRGB = 0x73524742  # 'sRGB'
LCS_GM_IMAGES = 4


@dataclass(frozen=True)
class BmpGeometry:
    """Per-mode values that differ between raw and scaled bitmaps."""

    width: int
    height: int
    bits_per_pixel: int
    image_size: int
    pixels_per_metre: int

    @property
    def file_size(self) -> int:
        return HEADER_SIZE + self.image_size


# The raw image size is the size of the whole dump, padding included.
RAW_GEOMETRY = BmpGeometry(
    width=WIDTH,
    height=HEIGHT,
    bits_per_pixel=1,
    image_size=FRAME_SIZE,
    pixels_per_metre=PIXELS_PER_METRE_72DPI,
)

SCALED_GEOMETRY = BmpGeometry(
    width=SCALED_WIDTH,
    height=SCALED_HEIGHT,
    bits_per_pixel=8,
    image_size=SCALED_SIZE,
    pixels_per_metre=PIXELS_PER_METRE_72DPI * SCALE,
)


def geometry_for(scale: bool) -> BmpGeometry:
    return SCALED_GEOMETRY if scale else RAW_GEOMETRY


def build_file_header(geometry: BmpGeometry) -> bytes:
    return struct.pack("<2sIHHI", b"BM", geometry.file_size, 0, 0, HEADER_SIZE)


def build_dib_header(geometry: BmpGeometry) -> bytes:
    info = struct.pack(
        "<IiiHHIIiiII",
        DIB_HEADER_SIZE,
        geometry.width,
        geometry.height,
        1,
        geometry.bits_per_pixel,
        BI_RGB,
        geometry.image_size,
        geometry.pixels_per_metre,
        geometry.pixels_per_metre,
        len(COLOR_TABLE) // 4,
        0,
    )
    masks = struct.pack("<IIII", 0, 0, 0, 0)
    color_space = struct.pack("<I36sIII", LCS_SRGB, bytes(36), 0, 0, 0)
    v5_tail = struct.pack("<IIII", LCS_GM_IMAGES, 0, 0, 0)
    return info + masks + color_space + v5_tail


def build_bmp_header(scale: bool) -> bytes:
    """Return a fresh 146-byte header block for the requested mode."""

    geometry = geometry_for(scale)
    return build_file_header(geometry) + build_dib_header(geometry) + COLOR_TABLE


def bmp_pixel_data(frame: RawFrame, scale: bool) -> bytes:
    """Pixel rows, bottom first.

    Raw mode yields 3840 bytes although the header reports the 4096-byte dump
    size as the image size.
    """

    if scale:
        return upscale(unpack_frame(frame)).to_bytes()
    return b"".join(frame.iter_rows(flipped=True))


def encode_bmp(frame: RawFrame, scale: bool = True) -> bytes:
    return build_bmp_header(scale) + bmp_pixel_data(frame, scale)
