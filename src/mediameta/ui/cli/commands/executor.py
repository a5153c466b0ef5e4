"""src/mediameta/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse settings loading, extraction and presentation across commands.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from mediameta.config.settings import ExtractionSettings, load_settings
from mediameta.features.metadata import (
    CatalogItem,
    MetadataError,
    MetadataExtractor,
    SourceUnreadableError,
)
from mediameta.platform.logging import logger
from mediameta.ui.cli.args.options import CLIArgs
from mediameta.ui.cli.display.result import ResultDisplay
from mediameta.ui.cli.models import CommandOutcome


class CommandExecutor(ABC):
    """Base class for command execution."""

    args: CLIArgs
    settings: ExtractionSettings
    extractor: MetadataExtractor
    result_display: ResultDisplay

    def __init__(self, args: CLIArgs, settings: ExtractionSettings | None = None) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            settings: Extraction settings; loaded from the config file when omitted.
        """
        self.args = args
        self.settings = settings if settings is not None else load_settings()
        self.extractor = MetadataExtractor(self.settings)
        self.result_display = ResultDisplay()

    @abstractmethod
    def execute(self) -> list[CommandOutcome]:
        """Execute the command.

        Returns:
            List of per-file outcomes.
        """
        pass

    def extract_file(self, path: Path) -> CommandOutcome:
        """Run extraction for ``path`` and capture failures as outcomes."""

        item = CatalogItem(location=path)
        try:
            result = self.extractor.extract(item)
        except SourceUnreadableError as exc:
            # Already reported by the extractor.
            return CommandOutcome(path=path, success=False, item=item, error_message=exc.reason)
        except MetadataError as exc:
            logger.error("%s", exc)
            return CommandOutcome(path=path, success=False, item=item, error_message=str(exc))
        return CommandOutcome(path=path, success=True, item=item, result=result)
