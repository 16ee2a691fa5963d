"""Base class and shared helpers for template providers."""

from abc import ABC, abstractmethod

from gitignore_cli.config import LIST_TEMPLATE
from gitignore_cli.entries import split_lines


def split_template_lines(text: str) -> list[str]:
    """Split template text into lines, dropping blank ones.

    Args:
        text: Raw template text.

    Returns:
        Non-blank lines in their original order.
    """
    return [line for line in split_lines(text) if line.strip()]


def strip_boilerplate(lines: list[str]) -> list[str]:
    """Drop the header (first two lines) and footer (last line) added by the service.

    Args:
        lines: Non-blank lines of a service response.

    Returns:
        The template payload.
    """
    return lines[2:-1]


def parse_catalog(lines: list[str]) -> list[str]:
    """Flatten comma-separated catalog lines into template names.

    Args:
        lines: Lines of the list template.

    Returns:
        Template names in service order.
    """
    return [name.strip() for line in lines for name in line.split(",") if name.strip()]


class BaseTemplateProvider(ABC):
    """Abstract base class for ignore template providers."""

    @abstractmethod
    def fetch_template(self, name: str) -> list[str]:
        """Return the non-blank lines of the template called name.

        Raises:
            TemplateNotFoundError: If the template does not exist.
            TemplateFetchError: If the template could not be retrieved.
        """
        pass

    def list_templates(self) -> list[str]:
        """Return the names of all available templates.

        The catalog goes through the same boilerplate stripping as any other
        template, so the first two and the last catalog lines are dropped.
        """
        return parse_catalog(self.fetch_template(LIST_TEMPLATE))
