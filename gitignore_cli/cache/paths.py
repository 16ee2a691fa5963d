"""Cache file path utilities for gitignore-cli.

Contains functions for locating the template cache:
- get_platform_cache_dir: Get the OS-specific user cache root
- get_cache_dir: Get the gitignore cache directory
- get_cache_file: Get path to the JSON cache file
"""

import os
import sys
from pathlib import Path
from typing import Optional

from gitignore_cli.config import CACHE_FILE, CACHE_FOLDER


def get_platform_cache_dir() -> Optional[Path]:
    """Return the user cache root for the current platform.

    - Windows: %FOLDERID_LocalAppData% or %LOCALAPPDATA%
    - macOS: $HOME/Library/Caches
    - Linux and other Unix: $XDG_CACHE_HOME or $HOME/.cache

    Returns:
        Path to the cache root, or None if it cannot be resolved.
    """
    if sys.platform == "win32":
        local_app_data = os.environ.get("FOLDERID_LocalAppData") or os.environ.get("LOCALAPPDATA")
        return Path(local_app_data) if local_app_data else None

    home = os.environ.get("HOME")

    if sys.platform == "darwin":
        return Path(home) / "Library" / "Caches" if home else None

    xdg = os.environ.get("XDG_CACHE_HOME")
    if xdg:
        return Path(xdg)
    return Path(home) / ".cache" if home else None


def get_cache_dir(cache_root: Optional[Path] = None) -> Optional[Path]:
    """Return the gitignore cache directory (not created here).

    Args:
        cache_root: Cache root to use instead of the platform default.

    Returns:
        Path to <cache_root>/gitignore, or None if no cache root is available.
    """
    root = cache_root or get_platform_cache_dir()
    if root is None:
        return None
    return Path(root) / CACHE_FOLDER


def get_cache_file(cache_root: Optional[Path] = None) -> Optional[Path]:
    """Return path to the JSON cache file.

    Args:
        cache_root: Cache root to use instead of the platform default.

    Returns:
        Path to cache.json, or None if no cache root is available.
    """
    cache_dir = get_cache_dir(cache_root)
    if cache_dir is None:
        return None
    return cache_dir / CACHE_FILE
