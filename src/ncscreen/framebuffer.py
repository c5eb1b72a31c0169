"""Decoder for NC100 screen grab dumps.

The dump is a straight copy of the LCD framebuffer: 64 rows of 64 bytes each.
Only the first 60 bytes of a row carry pixels (480 dots, 8 per byte, MSB is the
leftmost dot); the remaining 4 bytes are alignment padding and are dropped.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterator, Tuple

from .errors import SourceReadError

ROWS = 64
ROW_STRIDE = 64
ROW_BYTES = 60
PADDING_BYTES = ROW_STRIDE - ROW_BYTES
WIDTH = ROW_BYTES * 8
HEIGHT = ROWS
FRAME_SIZE = ROWS * ROW_STRIDE


@dataclass(frozen=True)
class RawFrame:
    """Packed 1bpp pixel rows with the padding columns removed."""

    rows: Tuple[bytes, ...]

    def __post_init__(self) -> None:
        if len(self.rows) != ROWS or any(len(row) != ROW_BYTES for row in self.rows):
            raise ValueError(f"RawFrame needs {ROWS} rows of {ROW_BYTES} bytes")

    def row(self, index: int) -> bytes:
        return self.rows[index]

    def iter_rows(self, flipped: bool = False) -> Iterator[bytes]:
        """Yield packed rows top-down, or bottom-up when ``flipped``."""

        if flipped:
            return reversed(self.rows)
        return iter(self.rows)

    @property
    def bits(self) -> "BitGrid":
        return BitGrid(self)


class BitGrid:
    """Read-only 480x64 view of single-bit pixels over a :class:`RawFrame`."""

    width = WIDTH
    height = HEIGHT

    def __init__(self, frame: RawFrame):
        self.frame = frame

    def __getitem__(self, position: Tuple[int, int]) -> int:
        row, col = position
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"pixel ({row}, {col}) outside {self.width}x{self.height}")
        return (self.frame.rows[row][col >> 3] >> (7 - (col & 7))) & 1

    def row(self, index: int) -> list[int]:
        return [self[index, col] for col in range(self.width)]


def decode_frame(data: bytes) -> RawFrame:
    """Split a raw dump into rows, dropping the per-row padding.

    Anything after the first :data:`FRAME_SIZE` bytes is ignored.
    """

    if len(data) < FRAME_SIZE:
        raise SourceReadError(
            f"Screen dump is too short: {len(data)} bytes, expected {FRAME_SIZE}"
        )
    rows = tuple(
        bytes(data[offset : offset + ROW_BYTES])
        for offset in range(0, FRAME_SIZE, ROW_STRIDE)
    )
    return RawFrame(rows)


def read_frame(stream: BinaryIO) -> RawFrame:
    data = stream.read(FRAME_SIZE)
    return decode_frame(data)


def load_frame(path: str | Path) -> RawFrame:
    path = Path(path)
    try:
        with path.open("rb") as stream:
            data = stream.read(FRAME_SIZE)
    except FileNotFoundError as exc:
        raise SourceReadError(f"File {path} not found.", path) from exc
    except OSError as exc:
        raise SourceReadError(f"Cannot read file {path}: {exc.strerror}", path) from exc

    try:
        return decode_frame(data)
    except SourceReadError as exc:
        raise SourceReadError(f"{exc} ({path})", path) from exc
