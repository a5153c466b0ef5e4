"""Summary: Ports defining metadata use case dependencies.
Why: Decouple use cases from concrete adapters so tests and swaps stay simple."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol, runtime_checkable

from mediameta.shared.catalog_item import ResourceDescriptor

from ..domain.fields import CanonicalField, ContainerFamily
from .processing_types import ArtworkCandidate, BitrateUnit, TechnicalProperties


@runtime_checkable
class RawTagSourcePort(Protocol):
    """Capabilities every per-container tag source offers."""

    FAMILY: ContainerFamily
    BITRATE_UNIT: BitrateUnit
    path: Path

    def canonical_fields(self) -> dict[CanonicalField, str | int]:
        """Return the sparse mapping of raw values per canonical field."""
        ...

    def embedded_artwork(self) -> ArtworkCandidate | None:
        """Return the first embedded picture, if any."""
        ...

    def technical_properties(self) -> TechnicalProperties:
        """Return stream properties; unknown values are ``None``."""
        ...

    def aux_fields(self, names: Iterable[str]) -> dict[str, str]:
        """Return raw values for the requested auxiliary tag names."""
        ...


@runtime_checkable
class DirectoryListerPort(Protocol):
    """Port for listing sibling files in native order."""

    def list_files(self, directory: Path) -> list[str]:
        """Return file names without re-sorting."""
        ...


@runtime_checkable
class MimetypeSnifferPort(Protocol):
    """Port for content-signature mimetype detection."""

    def sniff(self, data: bytes) -> str | None:
        """Return a mimetype or ``None`` when inconclusive."""
        ...


@runtime_checkable
class StringTranscoderPort(Protocol):
    """Port for converting raw text into the target encoding."""

    def convert(self, text: str) -> str:
        """Convert ``text``; never raises."""
        ...


@runtime_checkable
class CatalogItemPort(Protocol):
    """Port for the catalog item mutated by extraction."""

    location: Path

    def set_metadata(self, key: str, value: str) -> None: ...

    def set_track_number(self, number: int) -> None: ...

    def set_aux_data(self, key: str, value: str) -> None: ...

    def add_resource(self, descriptor: ResourceDescriptor) -> int: ...

    def get_resource(self, index: int) -> ResourceDescriptor: ...

    def add_attribute(self, descriptor: ResourceDescriptor, name: str, value: str) -> None: ...


__all__ = [
    "CatalogItemPort",
    "DirectoryListerPort",
    "MimetypeSnifferPort",
    "RawTagSourcePort",
    "StringTranscoderPort",
]
