"""NC100 screen grab converter.

Turns the 4096-byte LCD framebuffer dump of an Amstrad NC100 into BMP, PCX or
PNG images. It can be invoked through the CLI (``python -m ncscreen``) or
imported to convert a dump into bytes.
"""

from .bmp import build_bmp_header, encode_bmp
from .converter import FORMATS, ConvertOptions, convert_file, convert_frame
from .errors import ConversionError, DestinationWriteError, SourceReadError
from .framebuffer import BitGrid, RawFrame, decode_frame, load_frame, read_frame
from .pcx import encode_pcx
from .preview import frame_to_image
from .unpack import UnpackedGrid, unpack_frame
from .upscale import ScaledGrid, upscale

__all__ = [
    "BitGrid",
    "ConversionError",
    "ConvertOptions",
    "DestinationWriteError",
    "FORMATS",
    "RawFrame",
    "ScaledGrid",
    "SourceReadError",
    "UnpackedGrid",
    "build_bmp_header",
    "convert_file",
    "convert_frame",
    "decode_frame",
    "encode_bmp",
    "encode_pcx",
    "frame_to_image",
    "load_frame",
    "read_frame",
    "unpack_frame",
    "upscale",
]
