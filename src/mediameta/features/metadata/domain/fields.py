"""Canonical field vocabulary and resource attribute names.

Where: src/mediameta/features/metadata/domain/fields.py
What: Enumerate catalog metadata keys, resource attribute names and container families.
Why: Every format source maps onto the same fixed vocabulary.
"""

from __future__ import annotations

from enum import Enum, StrEnum
from typing import Final

MIMETYPE_DEFAULT: Final[str] = "application/octet-stream"

RESOURCE_CONTENT_TYPE: Final[str] = "resContentType"
ALBUM_ART_CONTENT_TYPE: Final[str] = "aa"


class CanonicalField(Enum):
    """Format-independent metadata fields understood by the catalog."""

    TITLE = "dc:title"
    ARTIST = "upnp:artist"
    ALBUM = "upnp:album"
    DATE = "dc:date"
    GENRE = "upnp:genre"
    DESCRIPTION = "dc:description"
    TRACK_NUMBER = "upnp:originalTrackNumber"
    ALBUM_ART_URI = "upnp:albumArtURI"

    @property
    def key(self) -> str:
        """Catalog key the value is stored under."""
        return self.value

    @property
    def is_text(self) -> bool:
        return self in _TEXT_FIELDS


_TEXT_FIELDS: Final[frozenset[CanonicalField]] = frozenset(
    {
        CanonicalField.TITLE,
        CanonicalField.ARTIST,
        CanonicalField.ALBUM,
        CanonicalField.GENRE,
        CanonicalField.DESCRIPTION,
    }
)


class ResourceAttribute(StrEnum):
    """Attribute names attached to resource descriptors."""

    PROTOCOL_INFO = "protocolInfo"
    BITRATE = "bitrate"
    DURATION = "duration"
    SAMPLE_FREQUENCY = "sampleFrequency"
    NR_AUDIO_CHANNELS = "nrAudioChannels"


class ContainerFamily(StrEnum):
    """Media container types, each served by one raw tag source."""

    IMAGE_EXIF = "exif"
    ID3 = "id3"
    FLAC = "flac"
    MP4 = "mp4"


def render_protocol_info(mimetype: str) -> str:
    """Render an HTTP protocolInfo string for ``mimetype``."""
    return f"http-get:*:{mimetype}:*"


def parse_protocol_info(protocol_info: str | None) -> str | None:
    """Extract the mimetype part of a protocolInfo string."""
    if not protocol_info:
        return None
    parts = protocol_info.split(":")
    if len(parts) != 4 or not parts[2]:
        return None
    return parts[2]


__all__ = [
    "ALBUM_ART_CONTENT_TYPE",
    "MIMETYPE_DEFAULT",
    "RESOURCE_CONTENT_TYPE",
    "CanonicalField",
    "ContainerFamily",
    "ResourceAttribute",
    "parse_protocol_info",
    "render_protocol_info",
]
