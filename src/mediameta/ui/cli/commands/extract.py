"""src/mediameta/ui/cli/commands/extract.py
What: Execute metadata extraction for the files named on the command line.
"""

from typing import override

from mediameta.ui.cli.args.options import ExtractArgs
from mediameta.ui.cli.commands.executor import CommandExecutor
from mediameta.ui.cli.models import CommandOutcome


class ExtractCommand(CommandExecutor):
    """Command for extracting metadata from one or more files."""

    args: ExtractArgs

    @override
    def execute(self) -> list[CommandOutcome]:
        """Execute extraction for every requested file.

        Returns:
            List of per-file outcomes.
        """
        outcomes = [self.extract_file(path) for path in self.args.files]
        self.result_display.show_results(outcomes, quiet=self.args.quiet)
        return outcomes
