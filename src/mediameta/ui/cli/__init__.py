"""Command line interface package."""

from mediameta.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
