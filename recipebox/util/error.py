"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""


class ConfigurationError(UtilError):
    """Settings are unsafe or inconsistent for the current environment."""


class DependencyInjectionError(UtilError):
    """No provider implementation matches the requested variant."""
