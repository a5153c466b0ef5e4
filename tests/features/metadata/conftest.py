"""Fakes and sample payloads for metadata feature tests."""

from __future__ import annotations

from io import BytesIO
from pathlib import Path

import pytest
from PIL import Image

from mediameta.config.settings import ExtractionSettings


class FakeLister:
    """Directory lister returning a fixed listing and recording calls."""

    def __init__(self, names: list[str] | None = None) -> None:
        self.names: list[str] = list(names or [])
        self.calls: list[Path] = []

    def list_files(self, directory: Path) -> list[str]:
        self.calls.append(directory)
        return list(self.names)


class StubSniffer:
    """Sniffer answering with a fixed mimetype and recording calls."""

    def __init__(self, mimetype: str | None = None) -> None:
        self.mimetype: str | None = mimetype
        self.calls: int = 0

    def sniff(self, data: bytes) -> str | None:
        self.calls += 1
        return self.mimetype


def _image_bytes(fmt: str) -> bytes:
    buffer = BytesIO()
    Image.new("RGB", (4, 4), color=(200, 10, 10)).save(buffer, fmt)
    return buffer.getvalue()


@pytest.fixture
def png_bytes() -> bytes:
    return _image_bytes("PNG")


@pytest.fixture
def jpeg_bytes() -> bytes:
    return _image_bytes("JPEG")


@pytest.fixture
def settings() -> ExtractionSettings:
    return ExtractionSettings()


@pytest.fixture
def make_lister() -> type[FakeLister]:
    return FakeLister


@pytest.fixture
def make_sniffer() -> type[StubSniffer]:
    return StubSniffer
