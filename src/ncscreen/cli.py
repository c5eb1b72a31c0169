"""Command line interface for the NC100 screen grab converter."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .converter import FORMATS, ConvertOptions, convert_file
from .errors import ConversionError, DestinationWriteError, SourceReadError

EXIT_SOURCE_ERROR = 1
EXIT_DESTINATION_ERROR = 2
EXIT_USAGE_ERROR = 3


class _ArgumentParser(argparse.ArgumentParser):
    """argparse parser whose usage errors do not collide with exit status 2."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE_ERROR, f"{self.prog}: error: {message}\n")


def default_destination(source: str | Path, output_format: str = "bmp") -> Path:
    """Swap the source extension for the output format's one."""

    return Path(source).with_suffix(f".{output_format}")


def normalize_destination(destination: str | Path, output_format: str) -> Path:
    path = Path(destination)
    if not path.suffix:
        return path.with_suffix(f".{output_format}")
    return path


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="ncscreen",
        description=(
            "Convert an Amstrad NC100 screen grab (4096-byte framebuffer dump) into a\n"
            "Windows Bitmap, PCX or PNG file.\n"
            "BMP and PNG output is enlarged 3x (1440x192) unless --rawsize is given.\n"
            "PCX output is always 480x64."
        ),
        epilog=(
            "exit status:\n"
            "  0  success\n"
            f"  {EXIT_SOURCE_ERROR}  source missing, unreadable or too short\n"
            f"  {EXIT_DESTINATION_ERROR}  destination cannot be written (or is the source)\n"
            f"  {EXIT_USAGE_ERROR}  invalid command line"
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("source", help="Screen grab file to convert")
    parser.add_argument(
        "destination",
        nargs="?",
        help="Output file (default: source name with the output format's extension)",
    )
    parser.add_argument(
        "-r",
        "--rawsize",
        action="store_true",
        help="Keep the native 480x64 size instead of enlarging 3x",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default="bmp",
        help="Output format",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    options = ConvertOptions(output_format=args.format, scale=not args.rawsize)
    if args.destination:
        destination = normalize_destination(args.destination, args.format)
    else:
        destination = default_destination(args.source, args.format)

    try:
        target = convert_file(args.source, destination, options)
    except SourceReadError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return EXIT_SOURCE_ERROR
    except DestinationWriteError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return EXIT_DESTINATION_ERROR
    except ConversionError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return EXIT_SOURCE_ERROR

    print(f"wrote {target}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
