"""Configuration and input exceptions: settings files, user-supplied dates."""

from typing import Any

from .base import DailyProgressError


class ConfigurationError(DailyProgressError):
    """Base class for configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class InvalidDateError(ConfigurationError):
    """Raised when a user-supplied date cannot be understood."""

    def __init__(self, value: str, reason: str):
        super().__init__(f"Invalid date: {value}", details={"reason": reason})
        self.value = value
        self.reason = reason
