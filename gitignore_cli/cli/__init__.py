"""CLI entry point for gitignore-cli."""

import typer

from gitignore_cli.cli.main import main_command
from gitignore_cli.cli.runner import GitIgnoreCli

app = typer.Typer(
    name="gitignore",
    help="Small command-line utility for adding new entries to .gitignore.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command()(main_command)


__all__ = [
    "app",
    "main_command",
    "GitIgnoreCli",
]
