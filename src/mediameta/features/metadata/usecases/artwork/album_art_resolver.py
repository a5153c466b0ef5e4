"""src/mediameta/features/metadata/usecases/artwork/album_art_resolver.py
Where: Metadata feature usecases layer.
What: Resolve one album art candidate per item and register it as a resource.
Why: Embedded art, sibling images and mimetype validation behave the same for every container.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from mediameta.platform.logging import logger
from mediameta.shared.catalog_item import ResourceDescriptor

from ...domain.fields import (
    ALBUM_ART_CONTENT_TYPE,
    MIMETYPE_DEFAULT,
    RESOURCE_CONTENT_TYPE,
    ContainerFamily,
    ResourceAttribute,
    render_protocol_info,
)
from ..ports import (
    CatalogItemPort,
    DirectoryListerPort,
    MimetypeSnifferPort,
    RawTagSourcePort,
)
from ..processing_types import ArtworkCandidate, ArtworkOutcome, ExtractionEvent
from .sibling_artwork import load_sibling_artwork

ARTWORK_FAMILIES: Final[frozenset[ContainerFamily]] = frozenset(
    {ContainerFamily.ID3, ContainerFamily.FLAC, ContainerFamily.MP4}
)


@dataclass(frozen=True, slots=True)
class ArtworkResolution:
    """Outcome of one album art resolution."""

    outcome: ArtworkOutcome
    resource_index: int | None = None
    mimetype: str | None = None


def locate_artwork(
    source: RawTagSourcePort,
    *,
    lister: DirectoryListerPort,
    patterns: Sequence[str],
) -> ArtworkCandidate | None:
    """Return embedded artwork, falling back to a sibling image file."""

    try:
        embedded = source.embedded_artwork()
    except Exception as exc:
        logger.warning("Failed to read embedded artwork from %s: %s", source.path, exc)
        embedded = None

    if embedded is not None and embedded.data:
        return embedded
    return load_sibling_artwork(source.path, lister=lister, patterns=patterns)


def resolve_mimetype(
    candidate: ArtworkCandidate,
    sniffer: MimetypeSnifferPort | None,
) -> str:
    """Accept a well-formed declared mimetype, else sniff, else the default."""

    declared = (candidate.declared_mimetype or "").strip()
    if "/" in declared:
        return declared
    if sniffer is not None:
        sniffed = (sniffer.sniff(candidate.data) or "").strip()
        if "/" in sniffed:
            return sniffed
    return MIMETYPE_DEFAULT


def build_artwork_descriptor(mimetype: str, family: ContainerFamily) -> ResourceDescriptor:
    """Create the album art resource descriptor for ``family``."""

    descriptor = ResourceDescriptor(handler=str(family))
    descriptor.add_attribute(ResourceAttribute.PROTOCOL_INFO.value, render_protocol_info(mimetype))
    descriptor.add_parameter(RESOURCE_CONTENT_TYPE, ALBUM_ART_CONTENT_TYPE)
    return descriptor


def is_album_art(descriptor: ResourceDescriptor) -> bool:
    return descriptor.parameters.get(RESOURCE_CONTENT_TYPE) == ALBUM_ART_CONTENT_TYPE


def resolve_album_art(
    item: CatalogItemPort,
    source: RawTagSourcePort,
    *,
    lister: DirectoryListerPort,
    sniffer: MimetypeSnifferPort | None,
    patterns: Sequence[str],
) -> ArtworkResolution:
    """Register at most one album art resource on ``item``.

    Rejected and missing artwork are not errors; they only show up in the
    returned outcome.
    """

    family = source.FAMILY
    if family not in ARTWORK_FAMILIES:
        return ArtworkResolution(ArtworkOutcome.NOT_APPLICABLE)

    candidate = locate_artwork(source, lister=lister, patterns=patterns)
    if candidate is None:
        logger.debug(
            "No album art found for %s",
            source.path,
            extra={
                "extraction_event": ExtractionEvent.ARTWORK_NOT_FOUND.value,
                "source_path": str(source.path),
            },
        )
        return ArtworkResolution(ArtworkOutcome.NOT_FOUND)

    mimetype = resolve_mimetype(candidate, sniffer)
    if mimetype == MIMETYPE_DEFAULT:
        # An unidentifiable buffer is most likely garbage.
        logger.debug(
            "Rejected %s album art for %s: mimetype could not be determined",
            candidate.origin,
            source.path,
            extra={
                "extraction_event": ExtractionEvent.ARTWORK_REJECTED.value,
                "source_path": str(candidate.path or source.path),
            },
        )
        return ArtworkResolution(ArtworkOutcome.REJECTED)

    index = item.add_resource(build_artwork_descriptor(mimetype, family))
    logger.debug(
        "Registered %s album art (%s) for %s",
        candidate.origin,
        mimetype,
        source.path,
        extra={
            "extraction_event": ExtractionEvent.ARTWORK_REGISTERED.value,
            "source_path": str(candidate.path or source.path),
            "container_family": str(family),
            "mimetype": mimetype,
        },
    )
    return ArtworkResolution(ArtworkOutcome.REGISTERED, resource_index=index, mimetype=mimetype)


__all__ = [
    "ARTWORK_FAMILIES",
    "ArtworkResolution",
    "build_artwork_descriptor",
    "is_album_art",
    "locate_artwork",
    "resolve_album_art",
    "resolve_mimetype",
]
