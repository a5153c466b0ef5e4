"""Shared data models for the CLI layer."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from mediameta.features.metadata import CatalogItem, ExtractionResult


@dataclass(slots=True)
class CommandOutcome:
    """Per-file outcome of a CLI command."""

    path: Path
    success: bool
    item: CatalogItem | None = None
    result: ExtractionResult | None = None
    error_message: str | None = None
    output_path: Path | None = None
    bytes_written: int | None = None


__all__ = ["CommandOutcome"]
