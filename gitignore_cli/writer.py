"""Writing reconciled entries to the ignore file."""

import os
from enum import Enum
from pathlib import Path

from gitignore_cli.entries import Entry
from gitignore_cli.exceptions import IgnoreFileError


class WriteMode(Enum):
    """How new entries are applied to the ignore file."""

    APPEND = "append"
    OVERWRITE = "overwrite"


def format_entries(entries: list[Entry]) -> str:
    """Join entries into file content, one per line with a trailing newline.

    Args:
        entries: Entries to format.

    Returns:
        The file content, or an empty string for no entries.
    """
    if not entries:
        return ""
    return "\n".join(entry.name for entry in entries) + "\n"


def ends_without_newline(path: Path) -> bool:
    """Return True if path is a non-empty file whose last byte is not a newline."""
    try:
        if path.stat().st_size == 0:
            return False
        with open(path, "rb") as f:
            f.seek(-1, os.SEEK_END)
            return f.read(1) != b"\n"
    except FileNotFoundError:
        return False


def delete_file(path: Path) -> None:
    """Remove a file, ignoring it if it does not exist.

    Args:
        path: Path to the file.

    Raises:
        IgnoreFileError: If the file exists but cannot be removed.
    """
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        raise IgnoreFileError(f"failed to delete {path}: {e}")


def apply_entries(entries: list[Entry], path: Path, mode: WriteMode) -> None:
    """Write entries to the ignore file.

    Nothing is touched when entries is empty, so a run with nothing to add
    never creates or truncates the file.

    Args:
        entries: Entries to write.
        path: Path to the ignore file.
        mode: APPEND keeps prior contents, OVERWRITE replaces them.

    Raises:
        IgnoreFileError: If the file cannot be written.
    """
    if not entries:
        return

    if mode == WriteMode.OVERWRITE:
        delete_file(path)

    content = format_entries(entries)
    try:
        if mode == WriteMode.APPEND and ends_without_newline(path):
            content = "\n" + content
        with open(path, "a", encoding="utf-8", errors="surrogateescape") as f:
            f.write(content)
    except OSError as e:
        raise IgnoreFileError(f"failed to write {path}: {e}")
