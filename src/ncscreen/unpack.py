"""Expand packed 1bpp rows into one byte per pixel, bottom row first."""
from __future__ import annotations

from typing import Tuple

from .framebuffer import HEIGHT, WIDTH, RawFrame

# byte value -> its 8 pixels, MSB first
_EXPANSION = tuple(
    bytes((value >> shift) & 1 for shift in range(7, -1, -1)) for value in range(256)
)


class UnpackedGrid:
    """480x64 grid of 0x00/0x01 pixels stored bottom-up.

    Row 0 holds the last row of the captured screen, matching the row order of
    a bottom-up BMP.
    """

    width = WIDTH
    height = HEIGHT

    def __init__(self, data: bytes | bytearray):
        if len(data) != self.width * self.height:
            raise ValueError(f"UnpackedGrid needs {self.width * self.height} bytes")
        self._data = bytes(data)

    @property
    def stride(self) -> int:
        return self.width

    def __getitem__(self, position: Tuple[int, int]) -> int:
        row, col = position
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"pixel ({row}, {col}) outside {self.width}x{self.height}")
        return self._data[row * self.stride + col]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnpackedGrid):
            return NotImplemented
        return self._data == other._data

    def __len__(self) -> int:
        return len(self._data)

    def row(self, index: int) -> bytes:
        start = index * self.stride
        return self._data[start : start + self.width]

    def to_bytes(self) -> bytes:
        return self._data


def unpack_row(packed: bytes) -> bytes:
    return b"".join(_EXPANSION[value] for value in packed)


def unpack_frame(frame: RawFrame) -> UnpackedGrid:
    """Expand every dot to a byte while flipping the frame vertically."""

    return UnpackedGrid(b"".join(unpack_row(row) for row in frame.iter_rows(flipped=True)))
