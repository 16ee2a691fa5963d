"""User configuration management for gitignore-cli.

Handles user-level configuration stored in ~/.gitignore-cli/config.yaml.
Recognized keys: api_url, timeout, cache_dir.
"""

from pathlib import Path
from typing import Any, Dict

import yaml

from gitignore_cli.exceptions import GlobalConfigError


_CONFIG_DIR = Path.home() / ".gitignore-cli"


def get_global_config_dir() -> Path:
    """Get the global gitignore-cli configuration directory.

    Returns:
        Path to ~/.gitignore-cli/
    """
    return _CONFIG_DIR


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.gitignore-cli/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.gitignore-cli/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        GlobalConfigError: If the file exists but cannot be read or parsed.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Invalid config in {config_file}: expected a mapping")
    return config
