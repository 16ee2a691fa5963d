"""Template provider backed by the gitignore.io API."""

from typing import Optional
from urllib.parse import quote

import requests

from gitignore_cli.cache import BaseCacheProvider
from gitignore_cli.config import DEFAULT_API_URL, DEFAULT_TIMEOUT
from gitignore_cli.exceptions import TemplateFetchError, TemplateNotFoundError
from gitignore_cli.templates.base import (
    BaseTemplateProvider,
    split_template_lines,
    strip_boilerplate,
)


class GitIgnoreTemplateProvider(BaseTemplateProvider):
    """Fetches templates from gitignore.io with a cache in front of the network."""

    def __init__(
        self,
        cache: BaseCacheProvider,
        api_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the provider.

        Args:
            cache: Cache consulted before, and filled after, every fetch.
            api_url: Base URL of the template API.
            timeout: Request timeout in seconds.
            session: HTTP session to use. A new one is created if omitted.
        """
        self.cache = cache
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def template_url(self, name: str) -> str:
        """Return the API URL for a template name."""
        # Commas combine several templates in one request
        return f"{self.api_url}/{quote(name, safe=',')}"

    def fetch_template(self, name: str) -> list[str]:
        """Return the template called name, from the cache when possible.

        A successful network fetch is stored in the cache before returning.

        Args:
            name: Template name (e.g. "node", "python", "node,python").

        Returns:
            Non-blank template lines.

        Raises:
            TemplateNotFoundError: If the service answers 404.
            TemplateFetchError: On any other status or a transport failure.
            CacheError: If the fetched template cannot be written to the cache.
        """
        cached = self.cache.get(name)
        if cached is not None:
            return split_template_lines(cached)

        try:
            response = self.session.get(self.template_url(name), timeout=self.timeout)
        except requests.Timeout:
            raise TemplateFetchError(name, f"request timed out after {self.timeout:g}s")
        except requests.RequestException as e:
            raise TemplateFetchError(name, str(e))

        if response.status_code == 404:
            raise TemplateNotFoundError(name)
        if response.status_code != 200:
            raise TemplateFetchError(name, f"the API returned {response.status_code}")

        template = strip_boilerplate(split_template_lines(response.text))
        self.cache.set(name, "\n".join(template))
        return template
