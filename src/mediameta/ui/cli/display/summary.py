"""Utilities for rendering shared CLI display content."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape

from mediameta.ui.cli.models import CommandOutcome


def render_processing_summary(
    console: Console,
    outcomes: Sequence[CommandOutcome],
    header_label: str,
) -> None:
    """Render a formatted summary of per-file outcomes.

    Args:
        console: Rich console instance used to render output.
        outcomes: Sequence of outcomes to summarize.
        header_label: Label rendered in the summary header.
    """
    success_count = sum(1 for outcome in outcomes if outcome.success)
    failures = [outcome for outcome in outcomes if not outcome.success]

    console.print(f"\n[bold]{header_label}:[/bold]")
    console.print(f"Total files: {len(outcomes)}")
    console.print(f"[green]Successful: {success_count}[/green]")

    if not failures:
        return

    console.print(f"[red]Failed: {len(failures)}[/red]")
    for failed in failures:
        reason = escape(failed.error_message or "")
        console.print(f"[red]  • {escape(str(failed.path))}: {reason}[/red]")
