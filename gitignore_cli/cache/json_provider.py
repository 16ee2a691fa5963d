"""JSON file backed template cache.

The whole cache lives in a single JSON object at
<platform cache dir>/gitignore/cache.json. It is read once when the provider
is created and rewritten in full after every mutation. Two processes sharing
the same cache file are not coordinated; the last writer wins.
"""

from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from gitignore_cli.cache.base import BaseCacheProvider
from gitignore_cli.cache.models import CacheStore
from gitignore_cli.cache.paths import get_cache_file
from gitignore_cli.exceptions import CacheError


class JsonCacheProvider(BaseCacheProvider):
    """Persistent key-value cache stored as a JSON file.

    If no cache directory can be resolved or created, the provider silently
    falls back to memory-only operation for the rest of the process.
    """

    def __init__(self, cache_root: Optional[Path] = None):
        """Initialize the cache and load its file.

        Args:
            cache_root: Cache root to use instead of the platform default.

        Raises:
            CacheError: If an existing cache file cannot be read.
        """
        self.cache_file = get_cache_file(cache_root)
        self.enabled = self.cache_file is not None
        self._store = CacheStore()
        self._load()

    def _load(self) -> None:
        if not self.enabled:
            return

        try:
            content = self.cache_file.read_text(encoding="utf-8")
        except (FileNotFoundError, NotADirectoryError, UnicodeDecodeError):
            self._initialize()
            return
        except OSError as e:
            raise CacheError(f"failed to read cache file {self.cache_file}: {e}")

        try:
            self._store = CacheStore.model_validate_json(content)
        except ValidationError:
            # Corrupt cache is treated like a missing one
            self._initialize()

    def _initialize(self) -> None:
        self._store = CacheStore()
        try:
            self.cache_file.parent.mkdir(parents=True, exist_ok=True)
            self._write()
        except OSError:
            self.enabled = False

    def _write(self) -> None:
        self.cache_file.write_text(self._store.model_dump_json(), encoding="utf-8")

    def _persist(self) -> None:
        if not self.enabled:
            return
        try:
            self._write()
        except OSError as e:
            raise CacheError(f"failed to write cache file {self.cache_file}: {e}")

    def get(self, key: str) -> Optional[str]:
        return self._store.root.get(key)

    def has(self, key: str) -> bool:
        return key in self._store.root

    def set(self, key: str, value: str) -> None:
        """Store value under key and rewrite the cache file.

        The in-memory value is updated even if writing the file fails.

        Raises:
            CacheError: If the cache file cannot be written.
        """
        self._store.root[key] = value
        self._persist()

    def clear(self) -> None:
        """Empty the cache and rewrite the cache file.

        Raises:
            CacheError: If the cache file cannot be written.
        """
        self._store = CacheStore()
        self._persist()
