"""src/mediameta/features/metadata/usecases/artwork/sibling_artwork.py
What: Locate album art stored next to a media file.
Why: Share the filesystem fallback between extraction and serving.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from mediameta.platform.filesystem import read_file_bytes
from mediameta.platform.logging import logger

from ..ports import DirectoryListerPort
from ..processing_types import ArtworkCandidate


def find_sibling_artwork(
    media_path: Path,
    *,
    lister: DirectoryListerPort,
    patterns: Sequence[str],
) -> Path | None:
    """Return the first listed sibling whose name contains any pattern.

    Listing order decides; the pattern order only matters within one name.
    """

    directory = media_path.parent
    for name in lister.list_files(directory):
        if name == media_path.name:
            continue
        if any(pattern in name for pattern in patterns):
            return directory / name
    return None


def load_sibling_artwork(
    media_path: Path,
    *,
    lister: DirectoryListerPort,
    patterns: Sequence[str],
) -> ArtworkCandidate | None:
    """Read the matching sibling image into a candidate with no declared mimetype."""

    image_path = find_sibling_artwork(media_path, lister=lister, patterns=patterns)
    if image_path is None:
        return None

    try:
        data = read_file_bytes(image_path)
    except OSError as exc:
        logger.warning("Could not read album art %s: %s", image_path, exc)
        return None

    if not data:
        logger.debug("Ignoring empty album art file %s", image_path)
        return None
    return ArtworkCandidate(data=data, declared_mimetype=None, origin="sibling", path=image_path)


__all__ = ["find_sibling_artwork", "load_sibling_artwork"]
