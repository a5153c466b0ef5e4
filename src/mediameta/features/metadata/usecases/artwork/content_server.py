"""src/mediameta/features/metadata/usecases/artwork/content_server.py
Where: Metadata feature usecases layer.
What: Re-derive registered album art bytes on request and hand back a sized read handle.
Why: Nothing survives between extraction and serving, so serving reopens the source file.
"""

from __future__ import annotations

import io
from collections.abc import Callable, Sequence
from pathlib import Path
from types import TracebackType
from typing import Self

from mediameta.platform.logging import logger

from ...domain.errors import ArtworkServeError, SourceUnreadableError
from ...domain.fields import ResourceAttribute, parse_protocol_info
from ..ports import CatalogItemPort, DirectoryListerPort, RawTagSourcePort
from ..processing_types import ExtractionEvent
from .album_art_resolver import is_album_art, locate_artwork


class ArtworkContent:
    """Sequential, seekable read handle over served album art.

    ``total_size`` is known before the first read.
    """

    def __init__(self, data: bytes, mimetype: str | None = None) -> None:
        self._buffer: io.BytesIO = io.BytesIO(data)
        self.total_size: int = len(data)
        self.mimetype: str | None = mimetype

    def read(self, size: int = -1) -> bytes:
        return self._buffer.read(size)

    def read_range(self, start: int, end: int | None = None) -> bytes:
        """Return bytes ``start`` through ``end`` inclusive, HTTP range style."""

        if start < 0 or start >= self.total_size:
            raise ValueError(f"Range start {start} outside 0..{self.total_size - 1}")
        stop = self.total_size if end is None else min(end + 1, self.total_size)
        if stop <= start:
            raise ValueError(f"Invalid range {start}-{end}")
        _ = self._buffer.seek(start)
        return self._buffer.read(stop - start)

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        return self._buffer.seek(offset, whence)

    def tell(self) -> int:
        return self._buffer.tell()

    @property
    def closed(self) -> bool:
        return self._buffer.closed

    def close(self) -> None:
        self._buffer.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def serve_artwork(
    item: CatalogItemPort,
    resource_index: int,
    *,
    open_source: Callable[[str, Path], RawTagSourcePort],
    lister: DirectoryListerPort,
    patterns: Sequence[str],
) -> ArtworkContent:
    """Reproduce the album art registered at ``resource_index``.

    Args:
        item: Item carrying the album art descriptor.
        resource_index: Index of the descriptor on ``item``.
        open_source: Opens ``item.location`` with the source registered for a
            container family tag.
        lister: Directory lister for the sibling fallback.
        patterns: Sibling file name fragments.

    Raises:
        ArtworkServeError: If the descriptor is not album art, the container
            cannot be reopened, or no non-empty artwork is found any more.
    """

    location = Path(item.location)

    def _fail(reason: str) -> ArtworkServeError:
        logger.error(
            "Cannot serve album art for %s: %s",
            location,
            reason,
            extra={
                "extraction_event": ExtractionEvent.SERVE_ERROR.value,
                "source_path": str(location),
                "error_message": reason,
            },
        )
        return ArtworkServeError(location, reason)

    try:
        descriptor = item.get_resource(resource_index)
    except IndexError as exc:
        raise _fail(f"no resource {resource_index}") from exc

    if not is_album_art(descriptor):
        raise _fail(f"resource {resource_index} is not album art")
    if not descriptor.handler:
        raise _fail(f"resource {resource_index} has no container family")

    try:
        source = open_source(descriptor.handler, location)
    except SourceUnreadableError as exc:
        raise _fail(f"could not open file: {exc.reason}") from exc

    candidate = locate_artwork(source, lister=lister, patterns=patterns)
    if candidate is None or not candidate.data:
        raise _fail("embedded image and sibling album art not found")

    mimetype = parse_protocol_info(descriptor.attributes.get(ResourceAttribute.PROTOCOL_INFO.value))
    content = ArtworkContent(candidate.data, mimetype=mimetype)
    logger.debug(
        "Serving %s album art for %s",
        candidate.origin,
        location,
        extra={
            "extraction_event": ExtractionEvent.SERVE_SUCCESS.value,
            "source_path": str(location),
            "mimetype": mimetype,
            "total_size": content.total_size,
        },
    )
    return content


__all__ = ["ArtworkContent", "serve_artwork"]
