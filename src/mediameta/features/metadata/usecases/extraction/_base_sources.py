"""Shared base classes for raw tag sources.

Where: src/mediameta/features/metadata/usecases/extraction/_base_sources.py
What: Define the capability contract every container family implements.
Why: Keep per-field isolation and mutagen error handling in one place.
"""

from __future__ import annotations

import abc
from collections.abc import Iterable
from pathlib import Path
from typing import Any, ClassVar, Self

from mutagen import MutagenError

from mediameta.platform.logging import logger

from ...domain.errors import SourceUnreadableError
from ...domain.fields import CanonicalField, ContainerFamily
from ..processing_types import ArtworkCandidate, BitrateUnit, TechnicalProperties

__all__ = ["BaseMutagenSource", "RawTagSource"]


class RawTagSource(abc.ABC):
    """Abstract base class for per-container raw tag sources."""

    FAMILY: ClassVar[ContainerFamily]
    EXTENSIONS: ClassVar[frozenset[str]] = frozenset()
    BITRATE_UNIT: ClassVar[BitrateUnit] = BitrateUnit.KILOBITS

    def __init__(self, path: Path) -> None:
        self.path: Path = path

    @classmethod
    @abc.abstractmethod
    def open(cls, path: Path) -> Self:
        """Open ``path`` and read its tags.

        Raises:
            SourceUnreadableError: If the container cannot be opened or parsed.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def read_field(self, field: CanonicalField) -> str | int | None:
        """Return the raw value backing ``field``, or ``None`` when untagged."""
        raise NotImplementedError

    def canonical_fields(self) -> dict[CanonicalField, str | int]:
        """Read every canonical field, isolating failures per field."""

        values: dict[CanonicalField, str | int] = {}
        for field in CanonicalField:
            try:
                value = self.read_field(field)
            except Exception as exc:
                logger.warning(
                    "Failed to read %s from %s: %s", field.name, self.path, exc
                )
                continue
            if value is None:
                continue
            values[field] = value
        return values

    def embedded_artwork(self) -> ArtworkCandidate | None:
        """Return the first embedded picture. Sources without artwork return ``None``."""
        return None

    def technical_properties(self) -> TechnicalProperties:
        return TechnicalProperties(bitrate_unit=self.BITRATE_UNIT)

    def aux_fields(self, names: Iterable[str]) -> dict[str, str]:
        del names
        return {}


class BaseMutagenSource(RawTagSource, abc.ABC):
    """Base class for audio sources parsed with mutagen."""

    FILE_CLASS: ClassVar[type | None] = None
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}

    TAG_MAPPING: ClassVar[dict[CanonicalField, str]] = {}

    def __init__(self, path: Path, tags: Any, info: Any) -> None:
        super().__init__(path)
        self.tags: Any = tags
        self.info: Any = info

    @classmethod
    def _open_file(cls, path: Path) -> Any:
        """Open the audio file with the configured mutagen class."""

        if cls.FILE_CLASS is None:
            raise NotImplementedError("FILE_CLASS must be defined in subclass")
        try:
            return cls.FILE_CLASS(path, **cls.FILE_INIT_PARAMS)
        except (MutagenError, OSError) as exc:
            logger.debug(
                "mutagen could not open %s as %s: %s",
                path,
                cls.__name__.replace("Source", ""),
                exc,
            )
            raise SourceUnreadableError(path, str(exc) or type(exc).__name__) from exc

    @classmethod
    def open(cls, path: Path) -> Self:
        audio = cls._open_file(path)
        logger.debug("Opened %s with tags type: %s", path, type(audio.tags))
        return cls(path, tags=audio.tags, info=audio.info)

    @abc.abstractmethod
    def _get_tag_value(self, key: str) -> str | None:
        """Return the first text value stored under ``key``."""
        raise NotImplementedError

    def _mapped_text(self, field: CanonicalField) -> str | None:
        key = self.TAG_MAPPING.get(field)
        if not key or self.tags is None:
            return None
        return self._get_tag_value(key)

    def _stream_seconds(self) -> int | None:
        length = getattr(self.info, "length", None)
        if not length:
            return None
        return int(length)

    def technical_properties(self) -> TechnicalProperties:
        """Map mutagen stream info; bitrate is reported in kbit/s."""

        if self.info is None:
            return super().technical_properties()
        bitrate = getattr(self.info, "bitrate", None)
        return TechnicalProperties(
            bitrate=int(bitrate) // 1000 if bitrate else None,
            bitrate_unit=BitrateUnit.KILOBITS,
            duration_ticks=self._stream_seconds(),
            timescale=1,
            sample_rate=getattr(self.info, "sample_rate", None),
            channels=getattr(self.info, "channels", None),
        )
