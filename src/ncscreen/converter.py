"""Convert NC100 screen dumps into BMP, PCX or PNG files."""
from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path

from .bmp import encode_bmp
from .errors import ConversionError, DestinationWriteError
from .framebuffer import RawFrame, load_frame
from .pcx import encode_pcx
from .preview import frame_to_image

FORMATS = ("bmp", "pcx", "png")


@dataclass
class ConvertOptions:
    """Output selection for a single conversion."""

    output_format: str = "bmp"  # bmp, pcx, png
    scale: bool = True  # ignored for pcx


def convert_frame(frame: RawFrame, options: ConvertOptions | None = None) -> bytes:
    options = options or ConvertOptions()
    output_format = options.output_format.lower()

    if output_format == "bmp":
        return encode_bmp(frame, scale=options.scale)
    if output_format == "pcx":
        return encode_pcx(frame)
    if output_format == "png":
        buffer = io.BytesIO()
        frame_to_image(frame, scale=options.scale).save(buffer, format="PNG")
        return buffer.getvalue()
    raise ConversionError(f"Unknown output format: {options.output_format}")


def convert_file(
    source: str | Path,
    destination: str | Path,
    options: ConvertOptions | None = None,
) -> Path:
    """Convert ``source`` and write the result to ``destination``.

    The whole dump is read and encoded before the destination is opened, so
    an unreadable source never leaves an empty output file behind. Writing
    over the source itself is refused.
    """

    frame = load_frame(source)
    data = convert_frame(frame, options)

    destination = Path(destination)
    if destination.resolve() == Path(source).resolve():
        raise DestinationWriteError(
            f"Refusing to overwrite source file {destination}.", destination
        )
    try:
        with destination.open("wb") as stream:
            stream.write(data)
    except OSError as exc:
        raise DestinationWriteError(f"Cannot create file {destination}.", destination) from exc
    return destination
