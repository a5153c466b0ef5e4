"""src/mediameta/ui/cli/display/result.py
What: Render extracted metadata, aux data and resources as Rich tables.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mediameta.ui.cli.models import CommandOutcome

from .summary import render_processing_summary


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_results(self, outcomes: list[CommandOutcome], quiet: bool = False) -> None:
        """Display one table per extracted file followed by a summary.

        Args:
            outcomes: Per-file outcomes.
            quiet: Whether to suppress non-error output.
        """
        if quiet:
            return

        for outcome in outcomes:
            if outcome.success:
                self.console.print(self.build_table(outcome))

        render_processing_summary(
            console=self.console,
            outcomes=outcomes,
            header_label="Extraction Summary",
        )

    def show_artwork(self, outcome: CommandOutcome, quiet: bool = False) -> None:
        if quiet:
            return
        if outcome.success and outcome.output_path is not None:
            mimetype = outcome.result.artwork_mimetype if outcome.result else None
            self.console.print(
                f"[green]Wrote {outcome.bytes_written} bytes of {mimetype} album art to "
                f"{escape(str(outcome.output_path))}[/green]"
            )
            return
        reason = escape(outcome.error_message or "")
        self.console.print(
            f"[red]No album art written for {escape(str(outcome.path))}: {reason}[/red]"
        )

    @staticmethod
    def build_table(outcome: CommandOutcome) -> Table:
        """Build the metadata table for a successful outcome."""

        table = Table(title=escape(str(outcome.path)), title_justify="left")
        table.add_column("Section", style="cyan", no_wrap=True)
        table.add_column("Key", style="magenta")
        table.add_column("Value", style="white")

        item = outcome.item
        if item is None:
            return table

        for key, value in item.metadata.items():
            table.add_row("metadata", key, escape(value))
        for key, value in item.aux_data.items():
            table.add_row("aux", key, escape(value))
        for index, descriptor in enumerate(item.resources):
            section = f"res[{index}]"
            if descriptor.handler:
                table.add_row(section, "handler", descriptor.handler)
            for key, value in descriptor.attributes.items():
                table.add_row(section, key, value)
            for key, value in descriptor.parameters.items():
                table.add_row(section, key, value)
        if outcome.result is not None:
            table.add_row("artwork", "outcome", str(outcome.result.artwork_outcome))
        return table
