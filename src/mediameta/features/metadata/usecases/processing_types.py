"""src/mediameta/features/metadata/usecases/processing_types.py
Where: Metadata feature usecases layer.
What: Shared enums and dataclasses for the extraction and serving flows.
Why: Keep the pipeline modules lean by centralising type definitions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, StrEnum
from pathlib import Path

from ..domain.fields import ContainerFamily


class ExtractionEvent(StrEnum):
    """Structured event identifiers for extraction logs."""

    FILE_START = "extraction.file.start"
    FILE_SUCCESS = "extraction.file.success"
    FILE_ERROR = "extraction.file.error"
    ARTWORK_REGISTERED = "extraction.artwork.registered"
    ARTWORK_REJECTED = "extraction.artwork.rejected"
    ARTWORK_NOT_FOUND = "extraction.artwork.not_found"
    SERVE_SUCCESS = "serving.artwork.success"
    SERVE_ERROR = "serving.artwork.error"


class BitrateUnit(Enum):
    """Unit convention a raw tag source reports its bitrate in."""

    KILOBITS = "kbit/s"
    BITS = "bit/s"


class ArtworkOutcome(StrEnum):
    """Terminal states of album art resolution."""

    REGISTERED = "registered"
    NOT_FOUND = "not_found"
    REJECTED = "rejected"
    NOT_APPLICABLE = "not_applicable"


@dataclass(frozen=True, slots=True)
class ArtworkCandidate:
    """Artwork bytes under consideration during a single resolution call."""

    data: bytes
    declared_mimetype: str | None = None
    origin: str = "embedded"
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class TechnicalProperties:
    """Stream properties as reported by a raw tag source.

    ``duration_ticks`` is expressed in units of ``timescale`` ticks per second.
    """

    bitrate: int | None = None
    bitrate_unit: BitrateUnit = BitrateUnit.KILOBITS
    duration_ticks: int | None = None
    timescale: int = 1
    sample_rate: int | None = None
    channels: int | None = None


@dataclass
class ExtractionResult:
    """Summary of one extraction pass over a file."""

    path: Path
    family: ContainerFamily
    fields: dict[str, str] = field(default_factory=dict)
    attributes: dict[str, str] = field(default_factory=dict)
    aux_data: dict[str, str] = field(default_factory=dict)
    artwork_outcome: ArtworkOutcome = ArtworkOutcome.NOT_APPLICABLE
    artwork_resource_index: int | None = None
    artwork_mimetype: str | None = None


__all__ = [
    "ArtworkCandidate",
    "ArtworkOutcome",
    "BitrateUnit",
    "ExtractionEvent",
    "ExtractionResult",
    "TechnicalProperties",
]
