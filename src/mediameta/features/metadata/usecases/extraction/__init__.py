"""
Summary: Public surface for metadata extraction modules.
Why: Provide a stable import path for the CLI and tests.
"""

from .format_sources import (
    FlacSource,
    Id3Source,
    ImageExifSource,
    Mp4Source,
    source_for_family,
    source_for_path,
)
from .metadata_extractor import MetadataExtractor

__all__ = [
    "MetadataExtractor",
    "ImageExifSource",
    "Id3Source",
    "FlacSource",
    "Mp4Source",
    "source_for_family",
    "source_for_path",
]
