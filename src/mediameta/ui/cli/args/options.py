"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class ExtractArgs:
    """Command line arguments for the ``extract`` subcommand."""

    command: Literal["extract"]
    files: list[Path]
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ArtworkArgs:
    """Command line arguments for the ``artwork`` subcommand."""

    command: Literal["artwork"]
    file: Path
    output: Path
    verbose: bool
    quiet: bool


CLIArgs = ExtractArgs | ArtworkArgs

__all__ = ["ArtworkArgs", "CLIArgs", "ExtractArgs"]
