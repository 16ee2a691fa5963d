"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path
from typing import Optional

import pytest

from gitignore_cli.cache import BaseCacheProvider
from gitignore_cli.exceptions import TemplateNotFoundError
from gitignore_cli.prompts import BasePrompter
from gitignore_cli.templates import BaseTemplateProvider


class FakeCacheProvider(BaseCacheProvider):
    """In-memory cache that never touches the disk."""

    def __init__(self):
        self.values: dict[str, str] = {}
        self.clear_calls = 0

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def has(self, key: str) -> bool:
        return key in self.values

    def set(self, key: str, value: str) -> None:
        self.values[key] = value

    def clear(self) -> None:
        self.clear_calls += 1
        self.values = {}


class FakeTemplateProvider(BaseTemplateProvider):
    """Serves templates from a dict, caching them like the real provider."""

    def __init__(self, cache: BaseCacheProvider):
        self.cache = cache
        self.templates = {
            "node": ["*.out", "node_modules/", "*.o", "tmp/", "!tmp/.gitkeep"],
            "list": ["node,python", "ruby"],
        }
        self.requested: list[str] = []

    def fetch_template(self, name: str) -> list[str]:
        self.requested.append(name)
        cached = self.cache.get(name)
        if cached is not None:
            return cached.split("\n")
        if name not in self.templates:
            raise TemplateNotFoundError(name)
        self.cache.set(name, "\n".join(self.templates[name]))
        return list(self.templates[name])


class FakePrompter(BasePrompter):
    """Answers prompts with preset values and records the questions."""

    def __init__(self):
        self.selection: Optional[str] = None
        self.answer = True
        self.options: Optional[list[str]] = None
        self.confirm_messages: list[str] = []

    def select_one(self, options: list[str], message: str) -> str:
        self.options = options
        return self.selection or options[0]

    def confirm(self, message: str) -> bool:
        self.confirm_messages.append(message)
        return self.answer


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def work_dir(temp_dir, monkeypatch):
    """Run the test from inside a temporary directory."""
    monkeypatch.chdir(temp_dir)
    return temp_dir


@pytest.fixture
def fake_cache():
    """In-memory cache provider."""
    return FakeCacheProvider()


@pytest.fixture
def fake_templates(fake_cache):
    """Template provider backed by a dict and the fake cache."""
    return FakeTemplateProvider(fake_cache)


@pytest.fixture
def fake_prompter():
    """Prompter with preset answers."""
    return FakePrompter()


@pytest.fixture
def sample_template_response():
    """Sample raw response from the template service."""
    return """# Created by https://www.toptal.com/developers/gitignore/api/node
# Edit at https://www.toptal.com/developers/gitignore?templates=node

### Node ###
logs
*.log

node_modules/

# End of https://www.toptal.com/developers/gitignore/api/node
"""
