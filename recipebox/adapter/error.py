"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class CacheInvalidationError(AdapterError):
    """Downstream cache could not be invalidated."""

    pass
