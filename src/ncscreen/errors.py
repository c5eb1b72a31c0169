"""Exceptions raised while converting framebuffer dumps."""
from __future__ import annotations

from pathlib import Path


class ConversionError(Exception):
    """Base class for conversion failures."""


class SourceReadError(ConversionError):
    """Raised when the source dump is missing, unreadable, or too short."""

    def __init__(self, message: str, path: str | Path | None = None):
        super().__init__(message)
        self.path = path


class DestinationWriteError(ConversionError):
    """Raised when the destination file cannot be created or written."""

    def __init__(self, message: str, path: str | Path | None = None):
        super().__init__(message)
        self.path = path
