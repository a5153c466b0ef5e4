"""Tests for the sibling album art search."""

from pathlib import Path

from mediameta.config.config import ALBUM_ART_PATTERNS_DEFAULT
from mediameta.features.metadata.usecases.artwork.sibling_artwork import (
    find_sibling_artwork,
    load_sibling_artwork,
)
from mediameta.platform.filesystem import LocalDirectoryLister


def test_listing_order_wins_over_pattern_order(tmp_path: Path, make_lister) -> None:
    lister = make_lister(["z_folder.jpg", "cover.jpg"])
    found = find_sibling_artwork(
        tmp_path / "song.mp3", lister=lister, patterns=ALBUM_ART_PATTERNS_DEFAULT
    )
    assert found == tmp_path / "z_folder.jpg"
    assert lister.calls == [tmp_path]


def test_media_file_itself_is_skipped(tmp_path: Path, make_lister) -> None:
    lister = make_lister(["photo.jpg", "notes.txt"])
    found = find_sibling_artwork(
        tmp_path / "photo.jpg", lister=lister, patterns=ALBUM_ART_PATTERNS_DEFAULT
    )
    assert found is None


def test_load_reads_whole_file(tmp_path: Path, jpeg_bytes: bytes) -> None:
    _ = (tmp_path / "song.mp3").write_bytes(b"audio")
    _ = (tmp_path / "Folder.jpg").write_bytes(jpeg_bytes)

    candidate = load_sibling_artwork(
        tmp_path / "song.mp3",
        lister=LocalDirectoryLister(),
        patterns=ALBUM_ART_PATTERNS_DEFAULT,
    )
    assert candidate is not None
    assert candidate.data == jpeg_bytes
    assert candidate.declared_mimetype is None
    assert candidate.origin == "sibling"
    assert candidate.path == tmp_path / "Folder.jpg"


def test_empty_sibling_is_no_candidate(tmp_path: Path, make_lister) -> None:
    _ = (tmp_path / "cover.jpg").write_bytes(b"")
    candidate = load_sibling_artwork(
        tmp_path / "song.mp3",
        lister=make_lister(["cover.jpg"]),
        patterns=ALBUM_ART_PATTERNS_DEFAULT,
    )
    assert candidate is None


def test_unreadable_sibling_is_no_candidate(tmp_path: Path, make_lister) -> None:
    candidate = load_sibling_artwork(
        tmp_path / "song.mp3",
        lister=make_lister(["cover.jpg"]),
        patterns=ALBUM_ART_PATTERNS_DEFAULT,
    )
    assert candidate is None
