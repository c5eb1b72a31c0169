"""Render screen grabs as Pillow images."""
from __future__ import annotations

from PIL import Image

from .framebuffer import HEIGHT, WIDTH, RawFrame
from .unpack import unpack_frame
from .upscale import SCALED_HEIGHT, SCALED_WIDTH, upscale

# pixel value 1 is a dark LCD dot
_INK = bytes([255, 0]) + bytes(254)


def frame_to_image(frame: RawFrame, scale: bool = False) -> Image.Image:
    """Return a mode ``"1"`` image with the top screen row first."""

    if not scale:
        packed = b"".join(frame.iter_rows())
        return Image.frombytes("1", (WIDTH, HEIGHT), packed, "raw", "1;I")

    scaled = upscale(unpack_frame(frame))
    rows = [scaled.row(index) for index in range(scaled.height - 1, -1, -1)]
    grey = b"".join(rows).translate(_INK)
    image = Image.frombytes("L", (SCALED_WIDTH, SCALED_HEIGHT), grey)
    return image.convert("1", dither=Image.Dither.NONE)
