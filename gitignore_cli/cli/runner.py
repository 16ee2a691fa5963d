"""Run sequencing for a single gitignore invocation.

Steps, each of which may end the run early:
1. Clear the cache (--clear-cache)
2. Pick a template interactively (--search or --lang=list)
3. Fetch the template and add its lines to the candidate entries
4. Reconcile candidates against the current .gitignore
5. Write new entries (unless --dry-run)
6. Report what was added and skipped
"""

from pathlib import Path
from typing import Optional

import typer

from gitignore_cli.args import Arguments
from gitignore_cli.cache import BaseCacheProvider
from gitignore_cli.config import GITIGNORE_FILE, LIST_TEMPLATE
from gitignore_cli.entries import ReconciliationResult, read_ignore_file, reconcile
from gitignore_cli.exceptions import TemplateError, TemplateFetchError
from gitignore_cli.formatters import format_entry_lines, format_summary
from gitignore_cli.prompts import BasePrompter
from gitignore_cli.templates import BaseTemplateProvider
from gitignore_cli.writer import WriteMode, apply_entries


class GitIgnoreCli:
    """Sequences cache, template, reconciliation and write steps."""

    def __init__(
        self,
        cache: BaseCacheProvider,
        templates: BaseTemplateProvider,
        prompter: BasePrompter,
        ignore_file: Path = Path(GITIGNORE_FILE),
    ):
        self.cache = cache
        self.templates = templates
        self.prompter = prompter
        self.ignore_file = ignore_file

    def run(self, args: Arguments) -> Optional[ReconciliationResult]:
        """Execute one invocation.

        Args:
            args: Validated command-line arguments.

        Returns:
            The reconciliation result, or None if the run stopped after
            clearing the cache.

        Raises:
            GitIgnoreError: Any failure; nothing is written once one is raised.
        """
        entries = list(args.entries)
        lang = args.lang

        if args.clear_cache:
            typer.echo(typer.style("Clearing cache...", fg=typer.colors.YELLOW), err=True)
            self.cache.clear()
            if not args.has_work:
                typer.echo(typer.style("Cache cleared. No entries to add.", fg=typer.colors.YELLOW))
                return None

        if args.wants_search:
            lang = self.select_template(skip_confirm=args.confirm)

        if lang:
            entries += self.fetch_template(lang)

        return self.add_entries(entries, args)

    def select_template(self, skip_confirm: bool = False) -> Optional[str]:
        """Let the user pick a template from the service catalog.

        Args:
            skip_confirm: Accept the selection without asking.

        Returns:
            The selected template name, or None if the user declined it.
        """
        catalog = self.fetch_catalog()
        choice = self.prompter.select_one(catalog, "Select a template")

        if not skip_confirm and not self.prompter.confirm(f"Fetch the template for {choice}?"):
            typer.echo("No template selected.", err=True)
            return None
        return choice

    def fetch_catalog(self) -> list[str]:
        """Return the names of the available templates."""
        catalog = self.templates.list_templates()
        if not catalog:
            raise TemplateFetchError(LIST_TEMPLATE, "the template catalog is empty")
        return catalog

    def fetch_template(self, name: str) -> list[str]:
        """Fetch a template, reporting progress on stderr."""
        typer.echo(f"Fetching a template for {typer.style(name, fg=typer.colors.GREEN)}...", err=True)
        try:
            template = self.templates.fetch_template(name)
        except TemplateError:
            typer.echo(typer.style("✗ Fetch failed", fg=typer.colors.RED), err=True)
            raise
        typer.echo(typer.style(f"✓ Fetched {len(template)} lines", fg=typer.colors.GREEN), err=True)
        return template

    def add_entries(self, candidates: list[str], args: Arguments) -> ReconciliationResult:
        """Reconcile candidates with the ignore file and write the new ones."""
        result = reconcile(read_ignore_file(self.ignore_file), candidates)

        if args.verbose or args.dry_run:
            for line in format_entry_lines(result.added, added=True, dry_run=args.dry_run):
                typer.echo(line)
            for line in format_entry_lines(result.skipped, added=False, dry_run=args.dry_run):
                typer.echo(line)

        if not args.dry_run:
            mode = WriteMode.OVERWRITE if args.overwrite else WriteMode.APPEND
            apply_entries(result.added, self.ignore_file, mode)

        typer.echo(format_summary(result.add_count, result.skip_count))
        return result
