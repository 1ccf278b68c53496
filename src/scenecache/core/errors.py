"""Base exception for the package."""


class SceneCacheError(Exception):
    """Base class for errors raised by scenecache."""

    pass
