"""Template provider module for gitignore-cli."""

from gitignore_cli.templates.base import (
    BaseTemplateProvider,
    parse_catalog,
    split_template_lines,
    strip_boilerplate,
)
from gitignore_cli.templates.gitignore_io import GitIgnoreTemplateProvider


__all__ = [
    "BaseTemplateProvider",
    "GitIgnoreTemplateProvider",
    "parse_catalog",
    "split_template_lines",
    "strip_boilerplate",
]
