"""Shared pytest fixtures isolating configuration and log locations."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from mediameta.config.config import Config
from mediameta.platform.logging import setup_logger


@pytest.fixture(autouse=True, scope="session")
def console_only_logging() -> Iterator[None]:
    """Keep test runs from writing into the repository log file."""

    _ = setup_logger(log_file=None)
    yield None


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the config directory at a temporary location and reset the singleton."""

    config_dir = tmp_path / "config"
    monkeypatch.setenv("MEDIAMETA_CONFIG_DIR", str(config_dir))

    original_instance = Config._instance  # pyright: ignore[reportPrivateUsage]
    original_loaded_from = Config._loaded_from  # pyright: ignore[reportPrivateUsage]
    Config._instance = None  # pyright: ignore[reportPrivateUsage]
    Config._loaded_from = None  # pyright: ignore[reportPrivateUsage]
    try:
        yield config_dir
    finally:
        Config._instance = original_instance  # pyright: ignore[reportPrivateUsage]
        Config._loaded_from = original_loaded_from  # pyright: ignore[reportPrivateUsage]
