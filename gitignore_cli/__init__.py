"""Small command-line utility for adding new entries to .gitignore."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("gitignore-cli")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
