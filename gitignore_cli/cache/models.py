"""Cache data models for gitignore-cli."""

from pydantic import Field, RootModel


class CacheStore(RootModel[dict[str, str]]):
    """On-disk cache payload: template name mapped to the raw template body."""

    root: dict[str, str] = Field(default_factory=dict)
