"""3x enlargement by spreading each pixel over its 3x3 neighbourhood.

Each source pixel gets an anchor in the middle row of its destination band.
The anchor moves three cells per pixel along the row, and the pixel value is
written to the anchor and its eight neighbours. Every cell is reached by
exactly one source pixel, so the result is a blocky 3x enlargement. Columns
are not clipped per row: the left neighbours of a row's first pixel land in
the last column of the destination rows above.
"""
from __future__ import annotations

from typing import Tuple

from .unpack import UnpackedGrid

SCALE = 3
SCALED_WIDTH = UnpackedGrid.width * SCALE
SCALED_HEIGHT = UnpackedGrid.height * SCALE
SCALED_SIZE = SCALED_WIDTH * SCALED_HEIGHT

SPREAD_OFFSETS: Tuple[int, ...] = (
    -SCALED_WIDTH - 1,
    -SCALED_WIDTH,
    -SCALED_WIDTH + 1,
    -1,
    0,
    1,
    SCALED_WIDTH - 1,
    SCALED_WIDTH,
    SCALED_WIDTH + 1,
)


class ScaledGrid:
    """1440x192 grid of 0x00/0x01 pixels, bottom-up like :class:`UnpackedGrid`."""

    width = SCALED_WIDTH
    height = SCALED_HEIGHT

    def __init__(self, data: bytes | bytearray):
        if len(data) != SCALED_SIZE:
            raise ValueError(f"ScaledGrid needs {SCALED_SIZE} bytes")
        self._data = bytes(data)

    @property
    def stride(self) -> int:
        return self.width

    def __getitem__(self, position: Tuple[int, int]) -> int:
        row, col = position
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"pixel ({row}, {col}) outside {self.width}x{self.height}")
        return self._data[row * self.stride + col]

    def __len__(self) -> int:
        return len(self._data)

    def row(self, index: int) -> bytes:
        start = index * self.stride
        return self._data[start : start + self.width]

    def to_bytes(self) -> bytes:
        return self._data


def anchor_index(row: int, col: int) -> int:
    """Flat destination index of the anchor for source pixel ``(row, col)``."""

    return (row * SCALE + 1) * SCALED_WIDTH + col * SCALE


def spread_indices(row: int, col: int) -> list[int]:
    """Destination cells written for ``(row, col)``, clipped to the buffer."""

    anchor = anchor_index(row, col)
    return [
        anchor + delta
        for delta in SPREAD_OFFSETS
        if 0 <= anchor + delta < SCALED_SIZE
    ]


def upscale(grid: UnpackedGrid) -> ScaledGrid:
    source = grid.to_bytes()
    scaled = bytearray(SCALED_SIZE)
    start = 0
    for index, value in enumerate(source):
        if index % grid.width == 0:
            start = anchor_index(index // grid.width, 0)
        else:
            start += SCALE
        for delta in SPREAD_OFFSETS:
            target = start + delta
            if 0 <= target < SCALED_SIZE:
                scaled[target] = value
    return ScaledGrid(scaled)
