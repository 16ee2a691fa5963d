"""Base class for template cache providers."""

from abc import ABC, abstractmethod
from typing import Optional


class BaseCacheProvider(ABC):
    """Abstract string-to-string cache used in front of the template service."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the cached value for key, or None if absent."""
        pass

    @abstractmethod
    def has(self, key: str) -> bool:
        """Return True if key is cached."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every cached value."""
        pass
