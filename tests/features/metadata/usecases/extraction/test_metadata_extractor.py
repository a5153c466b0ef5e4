"""Tests for the MetadataExtractor facade."""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest
from mutagen.id3 import APIC, ID3, TDRC, TIT2, TPE1, TRCK, TSOP
from PIL import ExifTags, Image
from pytest_mock import MockerFixture

from mediameta.config.settings import ExtractionSettings
from mediameta.features.metadata import (
    ArtworkOutcome,
    ArtworkServeError,
    CatalogItem,
    MetadataExtractor,
    SourceUnreadableError,
    UnsupportedFormatError,
)
from mediameta.features.metadata.domain import ContainerFamily
from mediameta.features.metadata.usecases.artwork.album_art_resolver import (
    build_artwork_descriptor,
)
from mediameta.features.metadata.usecases.extraction.format_sources import Id3Source


def _id3_source(
    path: Path, *, track: str = "5", apic: bytes | None = None, mime: str = "image/png"
) -> Id3Source:
    tags = ID3()
    tags.add(TIT2(encoding=3, text=["Song"]))
    tags.add(TPE1(encoding=3, text=["Artist"]))
    tags.add(TDRC(encoding=3, text=["2003"]))
    tags.add(TRCK(encoding=3, text=[track]))
    tags.add(TSOP(encoding=3, text=["Artist, The"]))
    if apic is not None:
        tags.add(APIC(encoding=3, mime=mime, type=3, desc="", data=apic))
    info = SimpleNamespace(bitrate=320000, length=245.0, sample_rate=44100, channels=2)
    return Id3Source(path, tags=tags, info=info)


@pytest.fixture
def song(tmp_path: Path) -> Path:
    return tmp_path / "song.mp3"


def test_supported_formats() -> None:
    assert MetadataExtractor.SUPPORTED_FORMATS == frozenset(
        {".jpg", ".jpeg", ".mp3", ".flac", ".m4a", ".m4b", ".mp4", ".m4v"}
    )
    assert MetadataExtractor.supports(Path("A.FLAC"))
    assert not MetadataExtractor.supports(Path("a.ogg"))


def test_extract_populates_item(
    song: Path, png_bytes: bytes, mocker: MockerFixture, make_lister, make_sniffer
) -> None:
    _ = mocker.patch.object(Id3Source, "open", return_value=_id3_source(song, apic=png_bytes))
    lister = make_lister(["cover.jpg"])
    extractor = MetadataExtractor(
        ExtractionSettings(id3_aux_tags=("TSOP",)), lister=lister, sniffer=make_sniffer()
    )
    item = CatalogItem(location=song)

    result = extractor.extract(item)

    assert result.family is ContainerFamily.ID3
    assert item.metadata == {
        "dc:title": "Song",
        "upnp:artist": "Artist",
        "dc:date": "2003-01-01",
        "upnp:originalTrackNumber": "5",
    }
    assert item.track_number == 5
    assert item.aux_data == {"TSOP": "Artist, The"}
    assert result.aux_data == {"TSOP": "Artist, The"}
    assert item.resources[0].attributes["bitrate"] == "40960"
    assert item.resources[0].attributes["duration"] == "0:04:05"
    assert result.artwork_outcome is ArtworkOutcome.REGISTERED
    assert result.artwork_resource_index == 1
    assert result.artwork_mimetype == "image/png"
    assert lister.calls == []


def test_aux_tags_are_opt_in(song: Path, mocker: MockerFixture, make_lister, make_sniffer) -> None:
    _ = mocker.patch.object(Id3Source, "open", return_value=_id3_source(song))
    extractor = MetadataExtractor(ExtractionSettings(), lister=make_lister(), sniffer=make_sniffer())
    item = CatalogItem(location=song)

    result = extractor.extract(item)

    assert item.aux_data == {}
    assert result.aux_data == {}
    assert result.artwork_outcome is ArtworkOutcome.NOT_FOUND


def test_track_number_zero_is_skipped(
    song: Path, mocker: MockerFixture, make_lister, make_sniffer
) -> None:
    _ = mocker.patch.object(Id3Source, "open", return_value=_id3_source(song, track="0"))
    item = CatalogItem(location=song)
    _ = MetadataExtractor(ExtractionSettings(), lister=make_lister(), sniffer=make_sniffer()).extract(item)
    assert "upnp:originalTrackNumber" not in item.metadata
    assert item.track_number is None


def test_rejected_artwork_is_not_an_error(
    song: Path, mocker: MockerFixture, make_lister, make_sniffer
) -> None:
    _ = mocker.patch.object(
        Id3Source, "open", return_value=_id3_source(song, apic=b"\x00garbage", mime="")
    )
    lister = make_lister(["cover.jpg"])
    item = CatalogItem(location=song)

    result = MetadataExtractor(
        ExtractionSettings(), lister=lister, sniffer=make_sniffer(None)
    ).extract(item)

    assert result.artwork_outcome is ArtworkOutcome.REJECTED
    assert len(item.resources) == 1
    assert lister.calls == []


def test_extract_then_serve(
    song: Path, png_bytes: bytes, mocker: MockerFixture, make_lister, make_sniffer
) -> None:
    open_mock = mocker.patch.object(
        Id3Source, "open", return_value=_id3_source(song, apic=png_bytes)
    )
    extractor = MetadataExtractor(ExtractionSettings(), lister=make_lister(), sniffer=make_sniffer())
    item = CatalogItem(location=song)
    result = extractor.extract(item)
    assert result.artwork_resource_index is not None

    with extractor.serve_artwork(item, result.artwork_resource_index) as content:
        assert content.total_size == len(png_bytes)
        assert content.read() == png_bytes
    assert open_mock.call_count == 2


def test_serve_unknown_family(song: Path, make_lister, make_sniffer) -> None:
    item = CatalogItem(location=song)
    extractor = MetadataExtractor(ExtractionSettings(), lister=make_lister(), sniffer=make_sniffer())
    _ = item.add_resource(build_artwork_descriptor("image/png", ContainerFamily.ID3))
    item.resources[1].handler = "wav"

    with pytest.raises(ArtworkServeError):
        _ = extractor.serve_artwork(item, 1)


def test_unsupported_extension(tmp_path: Path, settings: ExtractionSettings) -> None:
    with pytest.raises(UnsupportedFormatError):
        _ = MetadataExtractor(settings).extract(CatalogItem(location=tmp_path / "notes.txt"))


def test_unreadable_file_is_logged_once_and_reraised(
    tmp_path: Path, settings: ExtractionSettings, caplog: pytest.LogCaptureFixture
) -> None:
    bogus = tmp_path / "bogus.flac"
    _ = bogus.write_bytes(b"not a flac stream " * 8)

    with pytest.raises(SourceUnreadableError):
        _ = MetadataExtractor(settings).extract(CatalogItem(location=bogus))

    errors = [
        record
        for record in caplog.records
        if getattr(record, "extraction_event", None) == "extraction.file.error"
    ]
    assert len(errors) == 1


def test_real_jpeg_end_to_end(tmp_path: Path, settings: ExtractionSettings, make_lister) -> None:
    path = tmp_path / "photo.jpg"
    exif = Image.Exif()
    exif[ExifTags.Base.Model] = "X100"
    Image.new("RGB", (8, 8)).save(path, exif=exif)
    item = CatalogItem(location=path)

    result = MetadataExtractor(settings, lister=make_lister()).extract(item)

    assert item.metadata == {"dc:description": "Taken with X100"}
    assert result.artwork_outcome is ArtworkOutcome.NOT_APPLICABLE
    assert item.resources[0].attributes == {}
