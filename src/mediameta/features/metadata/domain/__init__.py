"""Domain vocabulary for metadata extraction."""

from .errors import (
    ArtworkServeError,
    MetadataError,
    SourceUnreadableError,
    UnsupportedFormatError,
)
from .fields import (
    ALBUM_ART_CONTENT_TYPE,
    MIMETYPE_DEFAULT,
    RESOURCE_CONTENT_TYPE,
    CanonicalField,
    ContainerFamily,
    ResourceAttribute,
    parse_protocol_info,
    render_protocol_info,
)

__all__ = [
    "ALBUM_ART_CONTENT_TYPE",
    "MIMETYPE_DEFAULT",
    "RESOURCE_CONTENT_TYPE",
    "ArtworkServeError",
    "CanonicalField",
    "ContainerFamily",
    "MetadataError",
    "ResourceAttribute",
    "SourceUnreadableError",
    "UnsupportedFormatError",
    "parse_protocol_info",
    "render_protocol_info",
]
