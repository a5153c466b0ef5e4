"""Command line interface for mediameta."""

import sys
from typing import final

from mediameta.platform.logging import logger
from mediameta.ui.cli.args import ArgumentParser
from mediameta.ui.cli.args.options import ArtworkArgs, CLIArgs, ExtractArgs
from mediameta.ui.cli.commands import ArtworkCommand, ExtractCommand
from mediameta.ui.cli.commands.executor import CommandExecutor


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            command: CommandExecutor
            if isinstance(args, ExtractArgs):
                command = ExtractCommand(args)
            else:
                assert isinstance(args, ArtworkArgs)
                command = ArtworkCommand(args)

            outcomes = command.execute()
            if any(not outcome.success for outcome in outcomes):
                sys.exit(1)

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
