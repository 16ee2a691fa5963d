"""Interactive prompts used by the CLI.

The runner only depends on BasePrompter so tests can answer prompts
without a terminal.
"""

from abc import ABC, abstractmethod

import typer


class BasePrompter(ABC):
    """Abstract source of interactive answers."""

    @abstractmethod
    def select_one(self, options: list[str], message: str) -> str:
        """Return one of options chosen by the user."""
        pass

    @abstractmethod
    def confirm(self, message: str) -> bool:
        """Return the user's yes/no answer to message."""
        pass


def match_options(options: list[str], query: str) -> list[str]:
    """Return the options matching query.

    An exact match (case-insensitive) wins; otherwise every option containing
    query is returned.

    Args:
        options: Available options.
        query: User input.

    Returns:
        Matching options in their original order.
    """
    query = query.strip().lower()
    if not query:
        return []
    exact = [option for option in options if option.lower() == query]
    if exact:
        return exact[:1]
    return [option for option in options if query in option.lower()]


class TyperPrompter(BasePrompter):
    """Prompts on the terminal with typer."""

    def select_one(self, options: list[str], message: str) -> str:
        while True:
            query = typer.prompt(message)
            matches = match_options(options, query)

            if len(matches) == 1:
                return matches[0]
            if matches:
                typer.echo(f"Matching templates: {', '.join(matches)}", err=True)
            else:
                typer.echo(f"Invalid template: {query}", err=True)

    def confirm(self, message: str) -> bool:
        return typer.confirm(message, default=True)
