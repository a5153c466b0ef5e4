"""Fallback descriptions for images without an explicit comment.

Where: src/mediameta/features/metadata/usecases/extraction/description_composer.py
What: Pick the explicit comment when present, otherwise compose one from camera details.
Why: Give untagged photos a readable description built from EXIF fields.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CameraDetails:
    """EXIF values the composed description is built from."""

    model: str | None = None
    flash: str | None = None
    focal_length: str | None = None
    focal_length_35mm: str | None = None


def _present(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def compose_description(details: CameraDetails) -> str | None:
    """Compose ``"Taken with …, Flash setting:…, Focal length: …"``.

    Clauses whose field is absent are omitted. Returns ``None`` when nothing
    could be composed.
    """

    model = _present(details.model)
    flash = _present(details.flash)
    focal = _present(details.focal_length)
    if focal is not None:
        focal_35mm = _present(details.focal_length_35mm)
        if focal_35mm is not None:
            focal = f"{focal} (35 mm equivalent: {focal_35mm})"

    comment = ""
    if model is not None:
        comment = f"Taken with {model}"

    if flash is not None:
        if comment:
            comment = f"{comment}, Flash setting:{flash}"
        else:
            comment = f"Flash setting: {flash}"

    if focal is not None:
        if comment:
            comment = f"{comment}, Focal length: {focal}"
        else:
            comment = f"Focal length: {focal}"

    return comment or None


def resolve_description(
    comment: str | None,
    user_comment: str | None,
    details: CameraDetails,
) -> str | None:
    """Return the image description honoring comment precedence.

    The container's own comment wins, then the free-text EXIF comment; only
    when both are empty is a description composed.
    """

    for explicit in (comment, user_comment):
        value = _present(explicit)
        if value is not None:
            return value
    return compose_description(details)


__all__ = ["CameraDetails", "compose_description", "resolve_description"]
