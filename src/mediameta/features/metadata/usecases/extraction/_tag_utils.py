"""Tag utility helpers.

Where: src/mediameta/features/metadata/usecases/extraction/_tag_utils.py
What: Provide pure helper routines for parsing raw tag values.
Why: Share parsing rules across the per-format sources and the normalizer.
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "first_text",
    "parse_positive_int",
    "parse_slash_separated",
    "parse_tuple_numbers",
    "parse_year",
    "seconds_to_hms",
]


def first_text(values: Sequence[object] | str | None) -> str | None:
    """Return the first value of a multi-valued tag as text.

    Repeated tags keep their source order; the first one wins.
    """
    if values is None:
        return None
    if isinstance(values, str):
        return values
    for value in values:
        if value is None:
            continue
        return str(value)
    return None


def parse_slash_separated(value: str) -> tuple[int | None, int | None]:
    """Parse a string in 'number/total' format.

    Returns a tuple (number, total) or (None, None) if conversion fails.
    """
    parts: list[str] = [part.strip() for part in value.split(sep="/")] if value else []
    num: int | None = int(parts[0]) if parts and parts[0].isdigit() else None
    total: int | None = int(parts[1]) if len(parts) > 1 and parts[1].isdigit() else None
    return num, total


def parse_tuple_numbers(data: Sequence[tuple[int, int]] | None) -> tuple[int | None, int | None]:
    """Parse a list of numeric tuples and return the first tuple with zeros converted to None."""
    if data:
        first: tuple[int, int] = data[0]
        num: int | None = first[0] if first[0] != 0 else None
        total: int | None = first[1] if first[1] != 0 else None
        return num, total
    return None, None


def parse_year(date_str: str | None) -> int | None:
    """Parse a year from a string (expects the first 4 characters to be digits)."""
    if not date_str:
        return None
    date_str = date_str.strip()
    return int(date_str[:4]) if len(date_str) >= 4 and date_str[:4].isdigit() else None


def parse_positive_int(value: object) -> int | None:
    """Coerce ``value`` to an int greater than zero, else ``None``."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str):
        number, _ = parse_slash_separated(value)
        return number if number is not None and number > 0 else None
    return None


def seconds_to_hms(seconds: int) -> str:
    """Render whole seconds as ``H:MM:SS`` with unbounded hours."""
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours}:{minutes:02d}:{secs:02d}"
