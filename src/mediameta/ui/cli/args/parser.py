"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from mediameta.config.config import Config
from mediameta.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from mediameta.ui.cli.args.options import ArtworkArgs, CLIArgs, ExtractArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            description="mediameta - Extract and normalize metadata from media files.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        extract_parser = subparsers.add_parser(
            "extract",
            help="Extract normalized metadata from one or more media files",
        )
        _ = extract_parser.add_argument(
            "files",
            type=str,
            nargs="+",
            help="Media files to inspect",
            metavar="FILE",
        )
        ArgumentParser._add_verbosity_flags(extract_parser)

        artwork_parser = subparsers.add_parser(
            "artwork",
            help="Write the album art registered for a media file",
        )
        _ = artwork_parser.add_argument(
            "file",
            type=str,
            help="Media file whose album art should be served",
            metavar="FILE",
        )
        _ = artwork_parser.add_argument(
            "-o",
            "--output",
            type=str,
            required=True,
            help="Destination file for the album art bytes",
            metavar="OUT",
        )
        ArgumentParser._add_verbosity_flags(artwork_parser)

        return parser

    @staticmethod
    def _add_verbosity_flags(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed extraction information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If an input file does not exist.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        # Set log level based on verbosity flags
        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        if parsed_args.command == "extract":
            files = [Path(raw) for raw in parsed_args.files]
            for path in files:
                ArgumentParser._require_file(path)
            return ExtractArgs(
                command="extract",
                files=files,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        file_path = Path(parsed_args.file)
        ArgumentParser._require_file(file_path)
        return ArtworkArgs(
            command="artwork",
            file=file_path,
            output=Path(parsed_args.output),
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _require_file(path: Path) -> None:
        if not path.is_file():
            logger.error("File does not exist: %s", path)
            sys.exit(1)
