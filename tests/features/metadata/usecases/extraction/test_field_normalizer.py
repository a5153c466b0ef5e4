"""Tests for canonical field normalization."""

from pathlib import Path

import pytest

from mediameta.features.metadata.domain import CanonicalField
from mediameta.features.metadata.usecases.extraction.field_normalizer import (
    normalize_date,
    normalize_fields,
    normalize_text,
)
from mediameta.platform.transcoding import StringConverter
from mediameta.shared.catalog_item import CatalogItem


@pytest.fixture
def item() -> CatalogItem:
    return CatalogItem(location=Path("/music/song.mp3"))


@pytest.fixture
def transcoder() -> StringConverter:
    return StringConverter("utf-8")


class ExplodingTranscoder:
    """Transcoder failing on one specific value."""

    def convert(self, text: str) -> str:
        if text == "boom":
            raise RuntimeError("cannot convert")
        return text


def test_absent_fields_write_nothing(item: CatalogItem, transcoder: StringConverter) -> None:
    written = normalize_fields(item, {}, transcoder)
    assert written == {}
    assert item.metadata == {}
    assert item.track_number is None


def test_text_fields_are_trimmed(item: CatalogItem, transcoder: StringConverter) -> None:
    written = normalize_fields(
        item,
        {CanonicalField.TITLE: "  Song  ", CanonicalField.ARTIST: "   "},
        transcoder,
    )
    assert written == {"dc:title": "Song"}
    assert item.get_metadata("upnp:artist") is None


@pytest.mark.parametrize("raw", [0, -3, "0", "abc"])
def test_track_number_rejects_non_positive(
    item: CatalogItem, transcoder: StringConverter, raw: object
) -> None:
    _ = normalize_fields(item, {CanonicalField.TRACK_NUMBER: raw}, transcoder)
    assert "upnp:originalTrackNumber" not in item.metadata
    assert item.track_number is None


def test_track_number_writes_both_views(item: CatalogItem, transcoder: StringConverter) -> None:
    _ = normalize_fields(item, {CanonicalField.TRACK_NUMBER: 5}, transcoder)
    assert item.metadata["upnp:originalTrackNumber"] == "5"
    assert item.track_number == 5


def test_year_dates(item: CatalogItem, transcoder: StringConverter) -> None:
    _ = normalize_fields(item, {CanonicalField.DATE: 0}, transcoder)
    assert "dc:date" not in item.metadata

    _ = normalize_fields(item, {CanonicalField.DATE: 2003}, transcoder)
    assert item.metadata["dc:date"] == "2003-01-01"


def test_normalize_date_passes_full_strings(transcoder: StringConverter) -> None:
    assert normalize_date("2003:05:01 10:00:00", transcoder) == "2003:05:01 10:00:00"
    assert normalize_date("", transcoder) is None
    assert normalize_date(True, transcoder) is None


def test_normalize_text_strips_nul(transcoder: StringConverter) -> None:
    assert normalize_text("A\x00B ", transcoder) == "AB"
    assert normalize_text(None, transcoder) is None


def test_failure_in_one_field_keeps_the_others(
    item: CatalogItem, caplog: pytest.LogCaptureFixture
) -> None:
    written = normalize_fields(
        item,
        {CanonicalField.TITLE: "boom", CanonicalField.ARTIST: "Artist"},
        ExplodingTranscoder(),
    )
    assert written == {"upnp:artist": "Artist"}
    assert any("Skipping TITLE" in record.getMessage() for record in caplog.records)
