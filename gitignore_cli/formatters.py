"""Terminal message formatting for gitignore-cli."""

import typer

from gitignore_cli.config import GITIGNORE_FILE
from gitignore_cli.entries import Entry


def format_add_message(name: str) -> str:
    """Format the line reported for an entry being added."""
    label = typer.style("Adding:", fg=typer.colors.GREEN, bold=True)
    return f"{label} {typer.style(name, fg=typer.colors.MAGENTA)} to {GITIGNORE_FILE}"


def format_skip_message(name: str) -> str:
    """Format the line reported for an entry that is already ignored."""
    label = typer.style("Skipping:", fg=typer.colors.YELLOW, bold=True)
    return f"{label} {typer.style(name, fg=typer.colors.MAGENTA)} is already ignored"


def format_entry_lines(entries: list[Entry], added: bool, dry_run: bool = False) -> list[str]:
    """Render one report line per non-comment entry.

    Args:
        entries: Entries to report.
        added: Whether the entries are being added or skipped.
        dry_run: Prefix each line with [dry-run].

    Returns:
        Formatted lines, comments omitted.
    """
    formatter = format_add_message if added else format_skip_message
    prefix = "[dry-run]" if dry_run else ""
    return [f"{prefix}    {formatter(entry.name)}" for entry in entries if not entry.is_comment]


def format_summary(add_count: int, skip_count: int) -> str:
    """Format the closing summary line.

    Example output:
        Done! Added 2 new entries. Skipped 1.
    """
    done = typer.style("Done!", fg=typer.colors.GREEN, bold=True)
    added = typer.style(str(add_count), fg=typer.colors.GREEN)
    skipped = typer.style(str(skip_count), fg=typer.colors.YELLOW)
    return f"{done} Added {added} new entries. Skipped {skipped}."
