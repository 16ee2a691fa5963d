"""Cache module for gitignore-cli.

This package keeps fetched templates on disk to avoid redundant network calls:
- base: BaseCacheProvider interface
- models: CacheStore payload model
- paths: Functions for locating the cache file
- json_provider: JsonCacheProvider implementation
"""

from gitignore_cli.cache.base import BaseCacheProvider
from gitignore_cli.cache.json_provider import JsonCacheProvider
from gitignore_cli.cache.models import CacheStore
from gitignore_cli.cache.paths import (
    get_cache_dir,
    get_cache_file,
    get_platform_cache_dir,
)


__all__ = [
    "BaseCacheProvider",
    "CacheStore",
    "JsonCacheProvider",
    "get_cache_dir",
    "get_cache_file",
    "get_platform_cache_dir",
]
