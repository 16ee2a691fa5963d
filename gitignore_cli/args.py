"""Parsed command-line arguments."""

from typing import Optional

from pydantic import BaseModel

from gitignore_cli.config import LIST_TEMPLATE
from gitignore_cli.exceptions import ConflictingFlagsError, UsageError


class Arguments(BaseModel):
    """Flags and entries for a single gitignore run."""

    verbose: bool = False
    dry_run: bool = False
    overwrite: bool = False
    clear_cache: bool = False
    confirm: bool = False
    search: bool = False
    lang: Optional[str] = None
    entries: list[str] = []

    @property
    def wants_search(self) -> bool:
        """Whether the template should be picked interactively."""
        return self.search or self.lang == LIST_TEMPLATE

    @property
    def has_work(self) -> bool:
        """Whether anything beyond clearing the cache was requested."""
        return self.search or bool(self.lang) or bool(self.entries)

    def check_conflicts(self) -> None:
        """Validate flag combinations before any I/O happens.

        Raises:
            UsageError: If --lang was given an empty value.
            ConflictingFlagsError: If mutually exclusive flags are combined.
        """
        if self.lang is not None and not self.lang.strip():
            raise UsageError("you must specify a language when using the -l/--lang flag")

        if self.overwrite and self.dry_run:
            raise ConflictingFlagsError("cannot use both --overwrite and --dry-run at the same time")

        if self.search and self.lang:
            raise ConflictingFlagsError("cannot use both --search and --lang at the same time")
