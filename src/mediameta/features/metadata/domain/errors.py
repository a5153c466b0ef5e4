"""Exceptions raised by the metadata extraction and serving flows."""

from __future__ import annotations

from pathlib import Path


class MetadataError(Exception):
    """Base class for metadata pipeline failures."""


class UnsupportedFormatError(MetadataError, ValueError):
    """Raised when no raw tag source handles a file's container type."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Unsupported file format: {path.suffix.lower() or path.name}")
        self.path: Path = path


class SourceUnreadableError(MetadataError):
    """Raised when a container cannot be opened or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not read {path}: {reason}")
        self.path: Path = path
        self.reason: str = reason


class ArtworkServeError(MetadataError, LookupError):
    """Raised when previously registered artwork cannot be reproduced."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not serve album art for {path}: {reason}")
        self.path: Path = path
        self.reason: str = reason


__all__ = [
    "ArtworkServeError",
    "MetadataError",
    "SourceUnreadableError",
    "UnsupportedFormatError",
]
