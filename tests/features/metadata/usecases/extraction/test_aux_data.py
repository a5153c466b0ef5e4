"""Tests for auxiliary tag capture."""

from collections.abc import Iterable
from pathlib import Path

import pytest

from mediameta.features.metadata.usecases.extraction.aux_data import collect_aux_data
from mediameta.platform.transcoding import StringConverter
from mediameta.shared.catalog_item import CatalogItem


class AuxSource:
    path: Path = Path("song.mp3")

    def __init__(self, values: dict[str, str], fail: bool = False) -> None:
        self.values: dict[str, str] = values
        self.fail: bool = fail
        self.requested: list[str] = []

    def aux_fields(self, names: Iterable[str]) -> dict[str, str]:
        if self.fail:
            raise RuntimeError("corrupt frame")
        self.requested = list(names)
        return {name: self.values[name] for name in self.requested if name in self.values}


def test_collects_requested_tags() -> None:
    item = CatalogItem(location=Path("song.mp3"))
    source = AuxSource({"TSOP": " Sorted ", "TENC": "   "})

    collected = collect_aux_data(item, source, ("TSOP", "TENC"), StringConverter())  # pyright: ignore[reportArgumentType]

    assert collected == {"TSOP": "Sorted"}
    assert item.aux_data == {"TSOP": "Sorted"}
    assert source.requested == ["TSOP", "TENC"]


def test_no_names_skips_source() -> None:
    item = CatalogItem(location=Path("song.mp3"))
    source = AuxSource({"TSOP": "x"})
    assert collect_aux_data(item, source, (), StringConverter()) == {}  # pyright: ignore[reportArgumentType]
    assert source.requested == []


def test_source_failure_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    item = CatalogItem(location=Path("song.mp3"))
    source = AuxSource({}, fail=True)
    assert collect_aux_data(item, source, ("TSOP",), StringConverter()) == {}  # pyright: ignore[reportArgumentType]
    assert "corrupt frame" in caplog.text
