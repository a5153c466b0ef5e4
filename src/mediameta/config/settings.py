"""Where: src/mediameta/config/settings.py
What: Immutable extraction settings derived from persisted configuration.
Why: Hand each extraction or serving call a read-only snapshot instead of a live singleton.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Validation is limited to simple checks; bad values fall back to defaults.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from pathlib import Path

from mediameta.config.config import (
    ALBUM_ART_PATTERNS_DEFAULT,
    TARGET_ENCODING_DEFAULT,
    Config,
)
from mediameta.platform.logging import logger


def _as_names(value: object, key: str) -> list[str]:
    """Normalize a configured name list; a bare string counts as one entry."""

    if isinstance(value, str):
        return [value]
    if not isinstance(value, (list, tuple)):
        logger.warning("Ignoring %s: expected a list of strings, got %r", key, value)
        return []
    names: list[str] = []
    for entry in value:
        if isinstance(entry, str):
            names.append(entry)
        else:
            logger.warning("Ignoring non-string entry %r in %s", entry, key)
    return names


@dataclass(frozen=True, slots=True)
class ExtractionSettings:
    """Read-only view of the options consulted by the extraction pipeline."""

    target_encoding: str = TARGET_ENCODING_DEFAULT
    id3_aux_tags: tuple[str, ...] = ()
    album_art_patterns: tuple[str, ...] = ALBUM_ART_PATTERNS_DEFAULT

    @classmethod
    def from_config(cls, config: Config) -> "ExtractionSettings":
        """Build a snapshot from a loaded ``Config``."""

        encoding = (config.target_encoding or "").strip() or TARGET_ENCODING_DEFAULT
        try:
            _ = codecs.lookup(encoding)
        except LookupError:
            logger.warning(
                "Unknown target encoding %r; falling back to %s",
                encoding,
                TARGET_ENCODING_DEFAULT,
            )
            encoding = TARGET_ENCODING_DEFAULT

        aux_tags = tuple(
            tag.strip() for tag in _as_names(config.id3_aux_tags, "id3_aux_tags") if tag.strip()
        )
        patterns = tuple(
            p for p in _as_names(config.album_art_patterns, "album_art_patterns") if p
        )

        return cls(
            target_encoding=encoding,
            id3_aux_tags=aux_tags,
            album_art_patterns=patterns or ALBUM_ART_PATTERNS_DEFAULT,
        )


def load_settings(config_file: Path | None = None) -> ExtractionSettings:
    """Load configuration from disk and freeze it into ``ExtractionSettings``."""

    return ExtractionSettings.from_config(Config.load(config_file))


__all__ = ["ExtractionSettings", "load_settings"]
