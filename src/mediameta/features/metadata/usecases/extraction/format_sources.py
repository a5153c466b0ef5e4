"""Format-specific raw tag sources.

Where: src/mediameta/features/metadata/usecases/extraction/format_sources.py
What: Define the closed set of container sources (EXIF image, MP3/ID3v2, FLAC, MP4).
Why: Separate format logic from the facade so each container maps onto the same contract.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, ClassVar, Final, Self

from mutagen.flac import FLAC
from mutagen.id3 import TextFrame
from mutagen.mp3 import MP3
from mutagen.mp4 import MP4, MP4Cover
from PIL import ExifTags, Image, UnidentifiedImageError

from mediameta.platform.logging import logger

from ...domain.errors import SourceUnreadableError, UnsupportedFormatError
from ...domain.fields import CanonicalField, ContainerFamily
from ..processing_types import ArtworkCandidate, BitrateUnit, TechnicalProperties
from ._base_sources import BaseMutagenSource, RawTagSource
from ._tag_utils import first_text, parse_slash_separated, parse_tuple_numbers, parse_year
from .description_composer import CameraDetails, resolve_description

__all__ = [
    "FlacSource",
    "Id3Source",
    "ImageExifSource",
    "Mp4Source",
    "SOURCE_TYPES",
    "source_for_family",
    "source_for_path",
]


def _format_exif_value(value: object) -> str | None:
    """Render a Pillow EXIF value as trimmed text."""

    if value is None:
        return None
    if isinstance(value, bytes):
        text = value.decode("utf-8", errors="replace")
    elif isinstance(value, int):
        text = str(value)
    elif hasattr(value, "numerator") and hasattr(value, "denominator"):
        # Rationals render as "num/den", unreduced.
        text = f"{getattr(value, 'numerator')}/{getattr(value, 'denominator')}"
    elif isinstance(value, tuple):
        text = " ".join(str(part) for part in value)
    else:
        text = str(value)
    text = text.replace("\x00", "").strip()
    return text or None


def _decode_user_comment(value: object) -> str | None:
    """Decode an EXIF UserComment, dropping its 8-byte character code prefix."""

    if not isinstance(value, bytes):
        return _format_exif_value(value)

    prefix, body = value[:8], value[8:]
    if prefix.startswith(b"UNICODE"):
        codec = "utf-16-be" if body[:1] == b"\x00" else "utf-16-le"
        text = body.decode(codec, errors="replace")
    elif prefix.startswith((b"ASCII", b"JIS", b"\x00\x00\x00\x00\x00\x00\x00\x00")):
        text = body.decode("utf-8", errors="replace")
    else:
        text = value.decode("utf-8", errors="replace")
    text = text.replace("\x00", "").strip()
    return text or None


class ImageExifSource(RawTagSource):
    """Source for JPEG images carrying EXIF data, read with Pillow."""

    FAMILY: ClassVar[ContainerFamily] = ContainerFamily.IMAGE_EXIF
    EXTENSIONS: ClassVar[frozenset[str]] = frozenset({".jpg", ".jpeg"})

    def __init__(
        self,
        path: Path,
        exif: Mapping[int, object],
        exif_ifd: Mapping[int, object],
        comment: str | None = None,
    ) -> None:
        super().__init__(path)
        self.exif: dict[int, object] = dict(exif)
        self.exif_ifd: dict[int, object] = dict(exif_ifd)
        self.comment: str | None = comment

    @classmethod
    def open(cls, path: Path) -> Self:
        try:
            with Image.open(path) as image:
                exif = image.getexif()
                base = dict(exif)
                exif_ifd = dict(exif.get_ifd(ExifTags.IFD.Exif))
                raw_comment = image.info.get("comment")
        except (UnidentifiedImageError, OSError) as exc:
            logger.debug("Pillow could not open %s: %s", path, exc)
            raise SourceUnreadableError(path, str(exc) or type(exc).__name__) from exc
        return cls(path, base, exif_ifd, comment=_format_exif_value(raw_comment))

    @property
    def has_exif(self) -> bool:
        return bool(self.exif or self.exif_ifd)

    def _tag(self, tag: int) -> object | None:
        if tag in self.exif_ifd:
            return self.exif_ifd[tag]
        return self.exif.get(tag)

    def camera_details(self) -> CameraDetails:
        focal = _format_exif_value(self._tag(ExifTags.Base.FocalLength))
        return CameraDetails(
            model=_format_exif_value(self._tag(ExifTags.Base.Model)),
            flash=_format_exif_value(self._tag(ExifTags.Base.Flash)),
            focal_length=focal,
            focal_length_35mm=(
                _format_exif_value(self._tag(ExifTags.Base.FocalLengthIn35mmFilm))
                if focal
                else None
            ),
        )

    def read_field(self, field: CanonicalField) -> str | int | None:
        # Without an EXIF record the image contributes nothing, comment included.
        if not self.has_exif:
            return None
        if field is CanonicalField.DATE:
            return _format_exif_value(self._tag(ExifTags.Base.DateTimeOriginal))
        if field is CanonicalField.DESCRIPTION:
            return resolve_description(
                self.comment,
                _decode_user_comment(self._tag(ExifTags.Base.UserComment)),
                self.camera_details(),
            )
        return None


class Id3Source(BaseMutagenSource):
    """Source for MP3 files carrying ID3v2 tags."""

    FAMILY: ClassVar[ContainerFamily] = ContainerFamily.ID3
    EXTENSIONS: ClassVar[frozenset[str]] = frozenset({".mp3"})
    FILE_CLASS: ClassVar[type | None] = MP3

    TAG_MAPPING: ClassVar[dict[CanonicalField, str]] = {
        CanonicalField.TITLE: "TIT2",
        CanonicalField.ARTIST: "TPE1",
        CanonicalField.ALBUM: "TALB",
        CanonicalField.GENRE: "TCON",
        CanonicalField.DESCRIPTION: "COMM",
        CanonicalField.DATE: "TDRC",
        CanonicalField.TRACK_NUMBER: "TRCK",
    }

    def _frames(self, key: str) -> list[Any]:
        if self.tags is None:
            return []
        return list(self.tags.getall(key))

    def _get_tag_value(self, key: str) -> str | None:
        frames = self._frames(key)
        if not frames:
            return None
        frame = frames[0]
        if key == "TCON":
            genres = getattr(frame, "genres", None)
            if genres:
                return first_text(genres)
        return first_text(getattr(frame, "text", None))

    def read_field(self, field: CanonicalField) -> str | int | None:
        if field is CanonicalField.DATE:
            frames = self._frames("TDRC")
            if not frames or not frames[0].text:
                return None
            year = getattr(frames[0].text[0], "year", None)
            return int(year) if year is not None else parse_year(str(frames[0].text[0]))
        if field is CanonicalField.TRACK_NUMBER:
            number, _ = parse_slash_separated(self._mapped_text(field) or "")
            return number
        return self._mapped_text(field)

    def embedded_artwork(self) -> ArtworkCandidate | None:
        frames = self._frames("APIC")
        if not frames:
            return None
        picture = frames[0]
        data = bytes(getattr(picture, "data", b"") or b"")
        if not data:
            return None
        mime = (getattr(picture, "mime", None) or "").strip()
        return ArtworkCandidate(data=data, declared_mimetype=mime or None, origin="embedded")

    def aux_fields(self, names: Iterable[str]) -> dict[str, str]:
        """Collect text identification frames named in ``names``."""

        if self.tags is None:
            return {}
        found: dict[str, str] = {}
        frames = list(self.tags.values())
        for name in names:
            for frame in frames:
                if not isinstance(frame, TextFrame) or frame.FrameID != name:
                    continue
                value = " ".join(str(text) for text in frame.text).strip()
                if value:
                    found[name] = value
                    break
        return found


class FlacSource(BaseMutagenSource):
    """Source for FLAC files carrying Vorbis comments and picture blocks."""

    FAMILY: ClassVar[ContainerFamily] = ContainerFamily.FLAC
    EXTENSIONS: ClassVar[frozenset[str]] = frozenset({".flac"})
    FILE_CLASS: ClassVar[type | None] = FLAC

    TAG_MAPPING: ClassVar[dict[CanonicalField, str]] = {
        CanonicalField.TITLE: "title",
        CanonicalField.ARTIST: "artist",
        CanonicalField.ALBUM: "album",
        CanonicalField.GENRE: "genre",
        CanonicalField.DATE: "date",
        CanonicalField.TRACK_NUMBER: "tracknumber",
    }

    def __init__(self, path: Path, tags: Any, info: Any, pictures: Iterable[Any] = ()) -> None:
        super().__init__(path, tags, info)
        self.pictures: list[Any] = list(pictures)

    @classmethod
    def open(cls, path: Path) -> Self:
        audio = cls._open_file(path)
        return cls(path, tags=audio.tags, info=audio.info, pictures=audio.pictures)

    def _get_tag_value(self, key: str) -> str | None:
        return first_text(self.tags.get(key))

    def read_field(self, field: CanonicalField) -> str | int | None:
        if self.tags is None:
            return None
        if field is CanonicalField.DESCRIPTION:
            return self._get_tag_value("description") or self._get_tag_value("comment")
        if field is CanonicalField.DATE:
            return parse_year(self._mapped_text(field))
        if field is CanonicalField.TRACK_NUMBER:
            number, _ = parse_slash_separated(self._mapped_text(field) or "")
            return number
        return self._mapped_text(field)

    def embedded_artwork(self) -> ArtworkCandidate | None:
        if not self.pictures:
            return None
        picture = self.pictures[0]
        data = bytes(getattr(picture, "data", b"") or b"")
        if not data:
            return None
        mime = (getattr(picture, "mime", None) or "").strip()
        return ArtworkCandidate(data=data, declared_mimetype=mime or None, origin="embedded")


_MP4_COVER_MIMETYPES: Final[dict[int, str]] = {
    MP4Cover.FORMAT_JPEG: "image/jpeg",
    MP4Cover.FORMAT_PNG: "image/png",
}


class Mp4Source(BaseMutagenSource):
    """Source for MP4/M4A files carrying iTunes-style atoms."""

    FAMILY: ClassVar[ContainerFamily] = ContainerFamily.MP4
    EXTENSIONS: ClassVar[frozenset[str]] = frozenset({".m4a", ".m4b", ".mp4", ".m4v"})
    BITRATE_UNIT: ClassVar[BitrateUnit] = BitrateUnit.BITS
    FILE_CLASS: ClassVar[type | None] = MP4

    # mutagen exposes the movie length in seconds; it is re-expressed in
    # millisecond ticks so the builder divides by the timescale like any track.
    TIMESCALE: ClassVar[int] = 1000

    TAG_MAPPING: ClassVar[dict[CanonicalField, str]] = {
        CanonicalField.TITLE: "\xa9nam",
        CanonicalField.ARTIST: "\xa9ART",
        CanonicalField.ALBUM: "\xa9alb",
        CanonicalField.GENRE: "\xa9gen",
        CanonicalField.DESCRIPTION: "\xa9cmt",
        CanonicalField.DATE: "\xa9day",
        CanonicalField.TRACK_NUMBER: "trkn",
    }

    def _get_tag_value(self, key: str) -> str | None:
        return first_text(self.tags.get(key))

    def read_field(self, field: CanonicalField) -> str | int | None:
        if self.tags is None:
            return None
        if field is CanonicalField.TRACK_NUMBER:
            number, _ = parse_tuple_numbers(self.tags.get("trkn"))
            return number
        if field is CanonicalField.DATE:
            return parse_year(self._mapped_text(field))
        return self._mapped_text(field)

    def embedded_artwork(self) -> ArtworkCandidate | None:
        if self.tags is None:
            return None
        covers = self.tags.get("covr") or []
        if not covers:
            return None
        cover = covers[0]
        data = bytes(cover)
        if not data:
            return None
        mimetype = _MP4_COVER_MIMETYPES.get(getattr(cover, "imageformat", None) or 0)
        return ArtworkCandidate(data=data, declared_mimetype=mimetype, origin="embedded")

    def technical_properties(self) -> TechnicalProperties:
        """Map MP4 stream info; bitrate is reported in bit/s."""

        if self.info is None:
            return super().technical_properties()
        length = getattr(self.info, "length", None)
        bitrate = getattr(self.info, "bitrate", None)
        return TechnicalProperties(
            bitrate=int(bitrate) if bitrate else None,
            bitrate_unit=self.BITRATE_UNIT,
            duration_ticks=round(length * self.TIMESCALE) if length else None,
            timescale=self.TIMESCALE,
            sample_rate=getattr(self.info, "sample_rate", None),
            channels=getattr(self.info, "channels", None),
        )


SOURCE_TYPES: Final[tuple[type[RawTagSource], ...]] = (
    ImageExifSource,
    Id3Source,
    FlacSource,
    Mp4Source,
)

_SOURCE_BY_EXTENSION: Final[dict[str, type[RawTagSource]]] = {
    extension: source_type
    for source_type in SOURCE_TYPES
    for extension in source_type.EXTENSIONS
}

_SOURCE_BY_FAMILY: Final[dict[ContainerFamily, type[RawTagSource]]] = {
    source_type.FAMILY: source_type for source_type in SOURCE_TYPES
}


def source_for_path(path: Path) -> type[RawTagSource]:
    """Select the source type handling ``path`` by its extension.

    Raises:
        UnsupportedFormatError: If no source handles the extension.
    """
    source_type = _SOURCE_BY_EXTENSION.get(path.suffix.lower())
    if source_type is None:
        raise UnsupportedFormatError(path)
    return source_type


def source_for_family(family: str) -> type[RawTagSource] | None:
    """Return the source type registered for a container family tag."""
    try:
        return _SOURCE_BY_FAMILY.get(ContainerFamily(family))
    except ValueError:
        return None
