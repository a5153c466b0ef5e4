"""Auxiliary tag capture for configured raw tag names."""

from __future__ import annotations

from collections.abc import Sequence

from mediameta.platform.logging import logger

from ..ports import CatalogItemPort, RawTagSourcePort, StringTranscoderPort

__all__ = ["collect_aux_data"]


def collect_aux_data(
    item: CatalogItemPort,
    source: RawTagSourcePort,
    names: Sequence[str],
    transcoder: StringTranscoderPort,
) -> dict[str, str]:
    """Copy the requested raw tags into the item's aux data."""

    if not names:
        return {}
    try:
        raw = source.aux_fields(names)
    except Exception as exc:
        logger.warning("Failed to read auxiliary tags from %s: %s", source.path, exc)
        return {}

    collected: dict[str, str] = {}
    for name, value in raw.items():
        converted = transcoder.convert(value).strip()
        if not converted:
            continue
        logger.debug("Adding aux tag %s with value %r", name, converted)
        item.set_aux_data(name, converted)
        collected[name] = converted
    return collected
