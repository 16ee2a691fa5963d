"""Tests for gitignore_cli.templates module."""

from unittest.mock import MagicMock

import pytest
import requests

from gitignore_cli.exceptions import TemplateFetchError, TemplateNotFoundError
from gitignore_cli.templates import (
    GitIgnoreTemplateProvider,
    parse_catalog,
    split_template_lines,
    strip_boilerplate,
)


def make_response(status_code=200, text=""):
    """Build a fake requests response."""
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    return response


@pytest.fixture
def session():
    """HTTP session whose get() is a mock."""
    return MagicMock()


@pytest.fixture
def provider(fake_cache, session):
    """Provider wired to the fake cache and mock session."""
    return GitIgnoreTemplateProvider(
        fake_cache,
        api_url="https://templates.example/api/",
        timeout=5.0,
        session=session,
    )


class TestTemplateHelpers:
    """Tests for line helpers."""

    def test_split_drops_blank_lines(self):
        """Test that blank and whitespace-only lines are removed."""
        assert split_template_lines("a\n\n  \nb\n") == ["a", "b"]

    def test_strip_boilerplate_five_lines(self):
        """Test that two header lines and one footer line are removed."""
        lines = ["# header 1", "# header 2", "node_modules/", "*.log", "# footer"]
        assert strip_boilerplate(lines) == ["node_modules/", "*.log"]

    def test_strip_boilerplate_short_input(self):
        """Test that a response shorter than the boilerplate yields nothing."""
        assert strip_boilerplate(["a", "b"]) == []

    def test_parse_catalog_flattens_commas(self):
        """Test catalog parsing."""
        assert parse_catalog(["node,python", "ruby, rust"]) == ["node", "python", "ruby", "rust"]


class TestFetchTemplate:
    """Tests for GitIgnoreTemplateProvider.fetch_template."""

    def test_fetches_and_strips_boilerplate(self, provider, session, sample_template_response):
        """Test a successful fetch."""
        session.get.return_value = make_response(200, sample_template_response)

        template = provider.fetch_template("node")

        assert template == ["### Node ###", "logs", "*.log", "node_modules/"]
        session.get.assert_called_once_with(
            "https://templates.example/api/node",
            timeout=5.0,
        )

    def test_five_line_response_returns_two_lines(self, provider, session):
        """Test that exactly the first two and the last line are removed."""
        session.get.return_value = make_response(200, "h1\nh2\n\nkeep1\nkeep2\nfooter\n")

        assert provider.fetch_template("node") == ["keep1", "keep2"]

    def test_stores_payload_in_cache(self, provider, session, fake_cache, sample_template_response):
        """Test that the stripped payload is cached newline-joined."""
        session.get.return_value = make_response(200, sample_template_response)

        provider.fetch_template("node")

        assert fake_cache.get("node") == "### Node ###\nlogs\n*.log\nnode_modules/"

    def test_second_fetch_uses_cache(self, provider, session, sample_template_response):
        """Test that a cached template never hits the network again."""
        session.get.return_value = make_response(200, sample_template_response)

        first = provider.fetch_template("node")
        session.get.side_effect = AssertionError("network called twice")
        second = provider.fetch_template("node")

        assert first == second
        assert session.get.call_count == 1

    def test_form_feed_does_not_split_lines(self, provider, session):
        """Test that template lines are split on newlines only."""
        session.get.return_value = make_response(200, "h1\nh2\na\x0cb\nfooter\n")

        assert provider.fetch_template("node") == ["a\x0cb"]

    def test_cached_value_drops_blank_lines(self, provider, session, fake_cache):
        """Test that cached bodies are split into non-blank lines."""
        fake_cache.set("node", "node_modules/\n\n*.log\n")

        assert provider.fetch_template("node") == ["node_modules/", "*.log"]
        session.get.assert_not_called()

    def test_404_raises_not_found(self, provider, session, fake_cache):
        """Test that 404 maps to TemplateNotFoundError."""
        session.get.return_value = make_response(404)

        with pytest.raises(TemplateNotFoundError) as exc_info:
            provider.fetch_template("nosuchlang")

        assert exc_info.value.name == "nosuchlang"
        assert not fake_cache.has("nosuchlang")

    def test_unexpected_status_raises_fetch_error(self, provider, session):
        """Test that other statuses map to TemplateFetchError."""
        session.get.return_value = make_response(500)

        with pytest.raises(TemplateFetchError) as exc_info:
            provider.fetch_template("node")

        assert "500" in str(exc_info.value)

    def test_connection_error_raises_fetch_error(self, provider, session):
        """Test that transport failures map to TemplateFetchError."""
        session.get.side_effect = requests.ConnectionError("connection refused")

        with pytest.raises(TemplateFetchError) as exc_info:
            provider.fetch_template("node")

        assert "check your connection" in str(exc_info.value)

    def test_timeout_raises_fetch_error(self, provider, session):
        """Test that an expired timeout maps to TemplateFetchError."""
        session.get.side_effect = requests.Timeout()

        with pytest.raises(TemplateFetchError) as exc_info:
            provider.fetch_template("node")

        assert "timed out" in str(exc_info.value)

    def test_combined_names_keep_commas(self, provider):
        """Test URL building for combined templates."""
        assert provider.template_url("node,python") == "https://templates.example/api/node,python"

    def test_names_are_quoted(self, provider):
        """Test that unsafe characters are escaped."""
        assert provider.template_url("c sharp") == "https://templates.example/api/c%20sharp"


class TestListTemplates:
    """Tests for GitIgnoreTemplateProvider.list_templates."""

    def test_list_is_fetched_like_any_template(self, provider, session):
        """Test that the catalog goes through the regular fetch path."""
        session.get.return_value = make_response(
            200, "header1\nheader2\nnode,python\nruby,rust\nfooter\n"
        )

        assert provider.list_templates() == ["node", "python", "ruby", "rust"]
        session.get.assert_called_once_with("https://templates.example/api/list", timeout=5.0)
