"""Configuration for gitignore-cli.

Defaults can be overridden in ~/.gitignore-cli/config.yaml or through
environment variables (a .env file in the working directory is honoured):

    GITIGNORE_API_URL    Base URL of the template service
    GITIGNORE_TIMEOUT    Template request timeout in seconds
    GITIGNORE_CACHE_DIR  Cache root used instead of the platform default
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ValidationError, field_validator

from gitignore_cli import global_config
from gitignore_cli.exceptions import GlobalConfigError


# ============================================================
# DEFAULT VALUES
# ============================================================

DEFAULT_API_URL = "https://www.toptal.com/developers/gitignore/api"
DEFAULT_TIMEOUT = 10.0

GITIGNORE_FILE = ".gitignore"

CACHE_FOLDER = "gitignore"
CACHE_FILE = "cache.json"

# Template name that the service answers with its catalog
LIST_TEMPLATE = "list"

ENV_API_URL = "GITIGNORE_API_URL"
ENV_TIMEOUT = "GITIGNORE_TIMEOUT"
ENV_CACHE_DIR = "GITIGNORE_CACHE_DIR"


class Settings(BaseModel):
    """Resolved runtime settings."""

    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT
    cache_dir: Optional[Path] = None

    @field_validator("api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the base URL so template names can be appended."""
        v = v.strip()
        if not v:
            raise ValueError("api_url cannot be empty")
        return v.rstrip("/")

    @field_validator("timeout")
    @classmethod
    def timeout_must_be_positive(cls, v: float) -> float:
        """Ensure the request timeout is bounded and positive."""
        if v <= 0:
            raise ValueError("timeout must be greater than zero")
        return v


def load_config() -> Settings:
    """Resolve settings from the environment, the user config file and defaults.

    Environment variables take precedence over ~/.gitignore-cli/config.yaml.

    Returns:
        The resolved Settings.

    Raises:
        GlobalConfigError: If the config file or an override is invalid.
    """
    load_dotenv(find_dotenv(usecwd=True))

    values = {
        key: value
        for key, value in global_config.load_global_config().items()
        if key in Settings.model_fields
    }

    for key, env_var in (
        ("api_url", ENV_API_URL),
        ("timeout", ENV_TIMEOUT),
        ("cache_dir", ENV_CACHE_DIR),
    ):
        env_value = os.environ.get(env_var)
        if env_value:
            values[key] = env_value

    try:
        return Settings(**values)
    except ValidationError as e:
        raise GlobalConfigError(f"Invalid configuration: {e}")
