"""Command execution package for CLI."""

from mediameta.ui.cli.commands.artwork import ArtworkCommand
from mediameta.ui.cli.commands.executor import CommandExecutor
from mediameta.ui.cli.commands.extract import ExtractCommand

__all__ = ["ArtworkCommand", "CommandExecutor", "ExtractCommand"]
