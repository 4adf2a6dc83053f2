"""Exception hierarchy for Daily Git Progress."""

from .base import DailyProgressError
from .config import ConfigurationError, InvalidConfigError, InvalidDateError
from .git import MalformedOutputError, ToolInvocationError

__all__ = [
    "DailyProgressError",
    "ToolInvocationError",
    "MalformedOutputError",
    "ConfigurationError",
    "InvalidConfigError",
    "InvalidDateError",
]
