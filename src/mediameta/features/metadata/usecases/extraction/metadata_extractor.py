"""Media file metadata extraction facade.

Where: src/mediameta/features/metadata/usecases/extraction/metadata_extractor.py
What: Provide the MetadataExtractor facade wiring sources, normalizer and artwork resolution.
Why: Offer one orchestration entry point for the CLI and tests.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import ClassVar

from mediameta.config.settings import ExtractionSettings
from mediameta.platform.filesystem import LocalDirectoryLister
from mediameta.platform.logging import logger
from mediameta.platform.mimetype_sniffer import PuremagicSniffer
from mediameta.platform.transcoding import StringConverter

from ...domain.errors import SourceUnreadableError
from ...domain.fields import CanonicalField
from ..artwork.album_art_resolver import resolve_album_art
from ..artwork.content_server import ArtworkContent, serve_artwork
from ..ports import (
    CatalogItemPort,
    DirectoryListerPort,
    MimetypeSnifferPort,
    RawTagSourcePort,
    StringTranscoderPort,
)
from ..processing_types import ExtractionEvent, ExtractionResult
from .aux_data import collect_aux_data
from .field_normalizer import normalize_fields
from .format_sources import SOURCE_TYPES, source_for_family, source_for_path
from .resource_attributes import build_resource_attributes

__all__ = ["MetadataExtractor"]


class MetadataExtractor:
    """Facade class for extracting metadata from media files.

    The source is selected by file extension; everything the pass learns is
    written onto the catalog item and summarised in an ``ExtractionResult``.
    """

    SUPPORTED_FORMATS: ClassVar[frozenset[str]] = frozenset(
        extension for source_type in SOURCE_TYPES for extension in source_type.EXTENSIONS
    )

    def __init__(
        self,
        settings: ExtractionSettings,
        *,
        lister: DirectoryListerPort | None = None,
        sniffer: MimetypeSnifferPort | None = None,
        transcoder: StringTranscoderPort | None = None,
    ) -> None:
        self.settings: ExtractionSettings = settings
        self.lister: DirectoryListerPort = lister or LocalDirectoryLister()
        self.sniffer: MimetypeSnifferPort = sniffer or PuremagicSniffer()
        self.transcoder: StringTranscoderPort = transcoder or StringConverter(
            settings.target_encoding
        )

    @classmethod
    def supports(cls, path: Path) -> bool:
        return path.suffix.lower() in cls.SUPPORTED_FORMATS

    def _open_source(self, family: str, path: Path) -> RawTagSourcePort:
        source_type = source_for_family(family)
        if source_type is None:
            raise SourceUnreadableError(path, f"unknown container family {family!r}")
        return source_type.open(path)

    def extract(self, item: CatalogItemPort) -> ExtractionResult:
        """Populate ``item`` from the file at ``item.location``.

        Args:
            item: Catalog item to mutate.

        Returns:
            ExtractionResult: Fields, attributes, aux data and artwork outcome.

        Raises:
            UnsupportedFormatError: If no source handles the file extension.
            SourceUnreadableError: If the container cannot be opened.
        """
        path = Path(item.location)
        source_type = source_for_path(path)
        started = time.perf_counter()
        logger.debug(
            "Extracting metadata from %s",
            path,
            extra={
                "extraction_event": ExtractionEvent.FILE_START.value,
                "source_path": str(path),
                "container_family": str(source_type.FAMILY),
            },
        )

        try:
            source = source_type.open(path)
        except SourceUnreadableError as exc:
            logger.error(
                "Failed to extract metadata from %s: %s",
                path,
                exc.reason,
                extra={
                    "extraction_event": ExtractionEvent.FILE_ERROR.value,
                    "source_path": str(path),
                    "container_family": str(source_type.FAMILY),
                    "error_message": exc.reason,
                },
            )
            raise

        result = ExtractionResult(path=path, family=source.FAMILY)
        result.fields = normalize_fields(item, source.canonical_fields(), self.transcoder)
        if self.settings.id3_aux_tags:
            result.aux_data = collect_aux_data(
                item, source, self.settings.id3_aux_tags, self.transcoder
            )
        result.attributes = build_resource_attributes(item, source.technical_properties())

        resolution = resolve_album_art(
            item,
            source,
            lister=self.lister,
            sniffer=self.sniffer,
            patterns=self.settings.album_art_patterns,
        )
        result.artwork_outcome = resolution.outcome
        result.artwork_resource_index = resolution.resource_index
        result.artwork_mimetype = resolution.mimetype

        logger.info(
            "Extracted metadata from %s",
            path,
            extra={
                "extraction_event": ExtractionEvent.FILE_SUCCESS.value,
                "source_path": str(path),
                "container_family": str(source.FAMILY),
                "duration_ms": (time.perf_counter() - started) * 1000,
                "artist": result.fields.get(CanonicalField.ARTIST.key),
                "title": result.fields.get(CanonicalField.TITLE.key),
            },
        )
        return result

    def serve_artwork(self, item: CatalogItemPort, resource_index: int) -> ArtworkContent:
        """Reproduce the album art registered on ``item`` at ``resource_index``.

        Raises:
            ArtworkServeError: If the artwork can no longer be produced.
        """
        return serve_artwork(
            item,
            resource_index,
            open_source=self._open_source,
            lister=self.lister,
            patterns=self.settings.album_art_patterns,
        )
