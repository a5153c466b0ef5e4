"""Command line argument handling package."""

from mediameta.ui.cli.args.parser import ArgumentParser
from mediameta.ui.cli.args.options import ArtworkArgs, CLIArgs, ExtractArgs

__all__ = ["ArgumentParser", "ArtworkArgs", "CLIArgs", "ExtractArgs"]
