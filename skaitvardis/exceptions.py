"""Custom exceptions for skaitvardis."""


class SkaitvardisError(Exception):
    """Base exception for all skaitvardis errors."""


class InvalidArgumentError(SkaitvardisError, ValueError):
    """Raised when an argument falls outside its permitted range."""

    def __init__(
        self,
        message: str,
        value: int,
        minimum: int | None = None,
        maximum: int | None = None,
    ) -> None:
        super().__init__(message)
        self.value = value
        self.minimum = minimum
        self.maximum = maximum


class ConfigurationError(SkaitvardisError):
    """Raised when configuration is invalid."""


class TextNormalizationError(SkaitvardisError):
    """Raised when text normalization fails."""
