"""Display management for CLI interface."""

from mediameta.ui.cli.display.result import ResultDisplay

__all__ = ["ResultDisplay"]
