"""Entry point for `python -m gitignore_cli`."""

from gitignore_cli.cli import app


def main() -> None:
    """Execute the Typer application."""
    app()


if __name__ == "__main__":
    main()
