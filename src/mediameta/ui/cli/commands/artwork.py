"""src/mediameta/ui/cli/commands/artwork.py
What: Extract a file, then serve its registered album art into an output file.
Why: Exercise the deferred serving path the way a catalog client would.
"""

from typing import override

from mediameta.platform.filesystem import write_file_bytes
from mediameta.features.metadata import ArtworkOutcome, ArtworkServeError
from mediameta.platform.logging import logger
from mediameta.ui.cli.args.options import ArtworkArgs
from mediameta.ui.cli.commands.executor import CommandExecutor
from mediameta.ui.cli.models import CommandOutcome


class ArtworkCommand(CommandExecutor):
    """Command for writing a file's album art to disk."""

    args: ArtworkArgs

    @override
    def execute(self) -> list[CommandOutcome]:
        outcome = self._serve()
        self.result_display.show_artwork(outcome, quiet=self.args.quiet)
        return [outcome]

    def _serve(self) -> CommandOutcome:
        outcome = self.extract_file(self.args.file)
        if not outcome.success or outcome.result is None or outcome.item is None:
            return outcome

        result = outcome.result
        if (
            result.artwork_outcome is not ArtworkOutcome.REGISTERED
            or result.artwork_resource_index is None
        ):
            message = f"no album art registered ({result.artwork_outcome})"
            logger.error("%s: %s", self.args.file, message)
            outcome.success = False
            outcome.error_message = message
            return outcome

        try:
            with self.extractor.serve_artwork(outcome.item, result.artwork_resource_index) as content:
                data = content.read()
        except ArtworkServeError as exc:
            outcome.success = False
            outcome.error_message = exc.reason
            return outcome

        try:
            _ = write_file_bytes(self.args.output, data)
        except OSError as exc:
            logger.error("Failed to write album art to %s: %s", self.args.output, exc)
            outcome.success = False
            outcome.error_message = str(exc)
            return outcome

        outcome.output_path = self.args.output
        outcome.bytes_written = len(data)
        return outcome
