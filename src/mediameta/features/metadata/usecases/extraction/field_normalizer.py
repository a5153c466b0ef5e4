"""Canonical field normalization.

Where: src/mediameta/features/metadata/usecases/extraction/field_normalizer.py
What: Apply per-field parsing rules to raw values and write them onto a catalog item.
Why: Every container family funnels through the same absence, date and track rules.
"""

from __future__ import annotations

from collections.abc import Mapping

from mediameta.platform.logging import logger

from ...domain.fields import CanonicalField
from ..ports import CatalogItemPort, StringTranscoderPort
from ._tag_utils import parse_positive_int

__all__ = ["normalize_date", "normalize_fields", "normalize_text"]


def normalize_text(raw: object, transcoder: StringTranscoderPort) -> str | None:
    """Transcode then trim; empty-after-trim counts as absent."""

    if raw is None:
        return None
    value = transcoder.convert(str(raw)).strip()
    return value or None


def normalize_date(raw: object, transcoder: StringTranscoderPort) -> str | None:
    """Render a year as ``YYYY-01-01``; full date strings pass through."""

    if isinstance(raw, bool) or raw is None:
        return None
    if isinstance(raw, int):
        return f"{raw}-01-01" if raw > 0 else None
    return normalize_text(raw, transcoder)


def normalize_fields(
    item: CatalogItemPort,
    raw_fields: Mapping[CanonicalField, object],
    transcoder: StringTranscoderPort,
) -> dict[str, str]:
    """Write normalized values for every field present in ``raw_fields``.

    Each field is handled on its own: a value that fails to parse is logged
    and skipped without affecting its siblings.

    Returns:
        dict[str, str]: Catalog keys and the values written to ``item``.
    """

    written: dict[str, str] = {}
    for field in CanonicalField:
        raw = raw_fields.get(field)
        if raw is None:
            continue
        try:
            if field is CanonicalField.TRACK_NUMBER:
                number = parse_positive_int(raw)
                if number is None:
                    continue
                value: str | None = str(number)
                item.set_track_number(number)
            elif field is CanonicalField.DATE:
                value = normalize_date(raw, transcoder)
            else:
                value = normalize_text(raw, transcoder)
        except Exception as exc:
            logger.warning(
                "Skipping %s for %s: %s", field.name, item.location, exc
            )
            continue

        if value is None:
            continue
        item.set_metadata(field.key, value)
        written[field.key] = value
        logger.debug("Setting %s = %r on %s", field.key, value, item.location)
    return written
