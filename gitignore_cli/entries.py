"""Ignore file parsing and entry reconciliation.

Contains:
- Entry: One line destined for (or already in) the ignore file
- ReconciliationResult: Candidate entries split into added and skipped
- split_lines: Split text on newlines only, dropping a trailing carriage return
- read_ignore_file: Read the ignore file, treating a missing file as empty
- parse_ignored_entries: Build the set of lines already present
- reconcile: Partition candidate entries against existing contents
"""

from pathlib import Path

from pydantic import BaseModel, field_validator

from gitignore_cli.exceptions import IgnoreFileError


class Entry(BaseModel):
    """A single ignore file line.

    Attributes:
        name: The raw line text.
    """

    name: str

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        """Ensure the entry has content."""
        if not v:
            raise ValueError("Entry cannot be empty")
        return v

    @property
    def is_comment(self) -> bool:
        """Comments are deduplicated like any other line but never counted."""
        return self.name.startswith("#")


class ReconciliationResult(BaseModel):
    """Candidate entries partitioned against the current ignore file.

    Attributes:
        added: Entries not yet present, in input order.
        skipped: Entries already present, in input order.
        add_count: Number of non-comment entries in added.
        skip_count: Number of non-comment entries in skipped.
    """

    added: list[Entry] = []
    skipped: list[Entry] = []
    add_count: int = 0
    skip_count: int = 0


def split_lines(text: str) -> list[str]:
    """Split text on newline characters, removing a trailing carriage return per line.

    Unlike str.splitlines(), form feeds and other Unicode line separators stay
    part of the line, so an entry always reads back as the key it was written as.
    """
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def read_ignore_file(path: Path) -> str:
    """Read the ignore file contents.

    Args:
        path: Path to the ignore file.

    Returns:
        The file contents, or an empty string if the file does not exist.

    Raises:
        IgnoreFileError: If the file exists but cannot be read.
    """
    try:
        # Undecodable bytes survive the round trip back to disk
        return path.read_text(encoding="utf-8", errors="surrogateescape")
    except FileNotFoundError:
        return ""
    except OSError as e:
        raise IgnoreFileError(f"failed to read {path}: {e}")


def parse_ignored_entries(contents: str) -> set[str]:
    """Build the set of lines already present in an ignore file.

    Blank lines are dropped; every other line, comments included, is kept
    verbatim.

    Args:
        contents: Ignore file contents.

    Returns:
        Set of existing lines.
    """
    return {line for line in split_lines(contents) if line.strip()}


def reconcile(existing_contents: str, candidates: list[str]) -> ReconciliationResult:
    """Split candidate entries into new and already present ones.

    Candidates are only compared against the existing contents, not against
    each other, so a repeated new candidate is added twice. Blank candidates
    are ignored and appear in neither partition.

    Args:
        existing_contents: Current ignore file contents.
        candidates: Candidate lines in the order they were given.

    Returns:
        A ReconciliationResult.
    """
    ignored = parse_ignored_entries(existing_contents)

    added: list[Entry] = []
    skipped: list[Entry] = []
    for candidate in candidates:
        if not candidate.strip():
            continue
        entry = Entry(name=candidate)
        if entry.name in ignored:
            skipped.append(entry)
        else:
            added.append(entry)

    return ReconciliationResult(
        added=added,
        skipped=skipped,
        add_count=sum(1 for entry in added if not entry.is_comment),
        skip_count=sum(1 for entry in skipped if not entry.is_comment),
    )
