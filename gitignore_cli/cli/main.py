"""Main CLI command for adding entries to .gitignore."""

import sys
from typing import List, Optional

import typer

from gitignore_cli import __version__
from gitignore_cli.args import Arguments
from gitignore_cli.cache import JsonCacheProvider
from gitignore_cli.cli.runner import GitIgnoreCli
from gitignore_cli.config import load_config
from gitignore_cli.exceptions import GitIgnoreError
from gitignore_cli.prompts import TyperPrompter
from gitignore_cli.templates import GitIgnoreTemplateProvider


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"gitignore v{__version__}")
        raise typer.Exit()


def read_piped_entries() -> list[str]:
    """Read entries piped on stdin, one per line.

    Returns:
        Non-blank lines, or an empty list when stdin is a terminal.
    """
    if sys.stdin is None or sys.stdin.isatty():
        return []
    return [line.rstrip("\r\n") for line in sys.stdin if line.strip()]


def main_command(
    ctx: typer.Context,
    entries: Optional[List[str]] = typer.Argument(
        None,
        help="Entries to add to .gitignore (e.g., node_modules/ \"*.out\")",
        show_default=False,
    ),
    lang: Optional[str] = typer.Option(
        None,
        "--lang",
        "-l",
        help="Language/framework to fetch a template for (e.g., node, python, ruby)",
    ),
    clear_cache: bool = typer.Option(
        False,
        "--clear-cache",
        "-c",
        help="Clear the template cache before fetching",
    ),
    confirm: bool = typer.Option(
        False,
        "--confirm",
        "-y",
        help="Skip the confirmation prompt",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-d",
        help="Show what would change without writing .gitignore",
    ),
    overwrite: bool = typer.Option(
        False,
        "--overwrite",
        "-o",
        help="Overwrite .gitignore instead of appending to it",
    ),
    search: bool = typer.Option(
        False,
        "--search",
        "-s",
        help="Interactively search through the available templates",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print the entries that are being added/skipped",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Add new entries to .gitignore, skipping the ones already present."""
    all_entries = read_piped_entries() + list(entries or [])

    # Nothing to do: behave like --help
    if not all_entries and lang is None and not (search or clear_cache):
        typer.echo(ctx.get_help())
        raise typer.Exit(0)

    args = Arguments(
        verbose=verbose,
        dry_run=dry_run,
        overwrite=overwrite,
        clear_cache=clear_cache,
        confirm=confirm,
        search=search,
        lang=lang,
        entries=all_entries,
    )

    try:
        args.check_conflicts()

        settings = load_config()
        cache = JsonCacheProvider(settings.cache_dir)
        templates = GitIgnoreTemplateProvider(
            cache,
            api_url=settings.api_url,
            timeout=settings.timeout,
        )

        GitIgnoreCli(cache, templates, TyperPrompter()).run(args)

    except GitIgnoreError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(e.exit_code)
