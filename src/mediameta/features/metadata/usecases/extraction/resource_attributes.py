"""Technical attributes for the primary resource.

Where: src/mediameta/features/metadata/usecases/extraction/resource_attributes.py
What: Convert raw stream properties into catalog units and attach them to resource 0.
Why: Clients expect bytes/second bitrates and H:MM:SS durations regardless of container.
"""

from __future__ import annotations

from ...domain.fields import ResourceAttribute
from ..ports import CatalogItemPort
from ..processing_types import BitrateUnit, TechnicalProperties
from ._tag_utils import seconds_to_hms

__all__ = ["bitrate_bytes_per_second", "build_resource_attributes", "duration_seconds"]


def bitrate_bytes_per_second(bitrate: int, unit: BitrateUnit) -> int:
    """Convert a source bitrate into bytes/second using the source's unit convention."""

    if unit is BitrateUnit.KILOBITS:
        return bitrate * 1024 // 8
    return bitrate // 8


def duration_seconds(ticks: int, timescale: int) -> int:
    """Whole seconds for ``ticks`` at ``timescale`` ticks per second."""

    if timescale <= 0:
        return 0
    return ticks // timescale


def build_resource_attributes(
    item: CatalogItemPort,
    properties: TechnicalProperties,
) -> dict[str, str]:
    """Attach bitrate, duration, sample rate and channel count to resource 0.

    Values that are absent or not positive are skipped.
    """

    attributes: dict[str, str] = {}

    if properties.bitrate and properties.bitrate > 0:
        bytes_per_second = bitrate_bytes_per_second(properties.bitrate, properties.bitrate_unit)
        if bytes_per_second > 0:
            attributes[ResourceAttribute.BITRATE] = str(bytes_per_second)

    if properties.duration_ticks and properties.duration_ticks > 0:
        seconds = duration_seconds(properties.duration_ticks, properties.timescale)
        if seconds > 0:
            attributes[ResourceAttribute.DURATION] = seconds_to_hms(seconds)

    if properties.sample_rate and properties.sample_rate > 0:
        attributes[ResourceAttribute.SAMPLE_FREQUENCY] = str(properties.sample_rate)

    if properties.channels and properties.channels > 0:
        attributes[ResourceAttribute.NR_AUDIO_CHANNELS] = str(properties.channels)

    if attributes:
        primary = item.get_resource(0)
        for name, value in attributes.items():
            item.add_attribute(primary, str(name), value)
    return {str(name): value for name, value in attributes.items()}
