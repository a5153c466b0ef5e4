# Where: mediameta.features.metadata.__init__
# What: Expose the metadata extraction facade and its result types.
# Why: Provide a cohesive import surface for UI and integration layers.

from mediameta.shared.catalog_item import CatalogItem, ResourceDescriptor
from .domain.errors import (
    ArtworkServeError,
    MetadataError,
    SourceUnreadableError,
    UnsupportedFormatError,
)
from .usecases.artwork import ArtworkContent
from .usecases.extraction import MetadataExtractor
from .usecases.processing_types import ArtworkOutcome, ExtractionEvent, ExtractionResult

__all__ = [
    "ArtworkContent",
    "ArtworkOutcome",
    "ArtworkServeError",
    "CatalogItem",
    "ExtractionEvent",
    "ExtractionResult",
    "MetadataError",
    "MetadataExtractor",
    "ResourceDescriptor",
    "SourceUnreadableError",
    "UnsupportedFormatError",
]
