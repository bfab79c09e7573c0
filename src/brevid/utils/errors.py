"""Exception hierarchy shared across the package."""
from __future__ import annotations


class BrevIdError(Exception):
    """Base class for all brevid failures."""


class InvalidConfigurationError(BrevIdError, ValueError):
    """A configuration field is out of range or malformed."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"Invalid {field}: {reason}")
        self.field = field
        self.reason = reason


class EnvironmentUnavailableError(BrevIdError):
    pass


class ConfigFileNotFound(BrevIdError):
    pass


class ConfigFileError(BrevIdError):
    pass


class SchemaValidationError(BrevIdError):
    pass
