"""Test configuration management."""

import tomllib
from pathlib import Path

import pytest

from mediameta.config.config import ALBUM_ART_PATTERNS_DEFAULT, Config
from mediameta.config.paths import default_config_path


def test_load_creates_default_file(isolated_config: Path) -> None:
    """A missing config file is created with defaults."""
    config = Config.load()

    assert config.target_encoding == "utf-8"
    assert config.id3_aux_tags == []
    assert config.album_art_patterns == list(ALBUM_ART_PATTERNS_DEFAULT)
    assert config.log_file is None

    written = default_config_path()
    assert written == (isolated_config / "config.toml").resolve()
    with open(written, "rb") as f:
        assert tomllib.load(f)["album_art_patterns"][0] == "Folder.jpg"


def test_save_load_toml(tmp_path: Path) -> None:
    """Values survive a save and reload, including escaped strings."""
    original = Config(
        target_encoding="latin-1",
        id3_aux_tags=["TSOP", "TENC"],
        album_art_patterns=['odd"name.jpg', "cover.jpg"],
        log_file=Path("/tmp/logs/mediameta.log"),
    )
    target = original.save(tmp_path / "custom.toml")

    Config._instance = None  # pyright: ignore[reportPrivateUsage]
    loaded = Config.load(target)

    assert loaded.target_encoding == "latin-1"
    assert loaded.id3_aux_tags == ["TSOP", "TENC"]
    assert loaded.album_art_patterns == ['odd"name.jpg', "cover.jpg"]
    assert loaded.log_file == Path("/tmp/logs/mediameta.log")


def test_load_is_cached_per_file(tmp_path: Path) -> None:
    target = tmp_path / "config.toml"
    first = Config.load(target)
    assert Config.load(target) is first


def test_partial_file_gets_defaults_and_ignores_unknown_keys(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    target = tmp_path / "config.toml"
    _ = target.write_text('id3_aux_tags = ["TSOP"]\nmystery = 1\n', encoding="utf-8")

    config = Config.load(target)

    assert config.id3_aux_tags == ["TSOP"]
    assert config.target_encoding == "utf-8"
    assert config.album_art_patterns == list(ALBUM_ART_PATTERNS_DEFAULT)
    assert "mystery" in caplog.text


def test_invalid_toml_raises(tmp_path: Path) -> None:
    target = tmp_path / "config.toml"
    _ = target.write_text("target_encoding = ", encoding="utf-8")
    with pytest.raises(tomllib.TOMLDecodeError):
        _ = Config.load(target)
