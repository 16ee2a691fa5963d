"""Exception classes for gitignore-cli.

Contains all exception classes raised by the core modules:
- GitIgnoreError: Base exception, carries the process exit code
- IgnoreFileError: Raised when .gitignore cannot be read or written
- CacheError: Raised when the template cache file cannot be read or written
- TemplateError: Base exception for template retrieval errors
- TemplateNotFoundError: Raised when the service has no such template
- TemplateFetchError: Raised on network failures or unexpected responses
- ConflictingFlagsError: Raised when mutually exclusive flags are combined
- UsageError: Raised when a flag is given an invalid value
- GlobalConfigError: Raised when the user configuration cannot be loaded
"""


class GitIgnoreError(Exception):
    """Base exception for gitignore-cli errors."""

    exit_code = 1


class IgnoreFileError(GitIgnoreError):
    """Raised when the ignore file cannot be read, written or removed."""

    pass


class CacheError(GitIgnoreError):
    """Raised when the cache file cannot be read or written."""

    pass


class TemplateError(GitIgnoreError):
    """Base exception for template retrieval errors."""

    def __init__(self, name: str, message: str):
        super().__init__(message)
        self.name = name


class TemplateNotFoundError(TemplateError):
    """Raised when the template service has no template for a name."""

    def __init__(self, name: str):
        super().__init__(name, f"no template found for {name}")


class TemplateFetchError(TemplateError):
    """Raised when a template could not be fetched."""

    def __init__(self, name: str, cause: str):
        super().__init__(
            name,
            f"failed to fetch template for {name} ({cause}), "
            "check your connection and try again",
        )
        self.cause = cause


class ConflictingFlagsError(GitIgnoreError):
    """Raised when mutually exclusive flags are used together."""

    exit_code = 2


class UsageError(GitIgnoreError):
    """Raised when a flag is given an invalid value."""

    exit_code = 2


class GlobalConfigError(GitIgnoreError):
    """Raised when there's an error with the user configuration."""

    pass
