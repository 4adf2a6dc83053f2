"""Configuration loading and management for Daily Git Progress.

Configuration sources are merged in priority order:
    1. Defaults (defined in ProgressConfig)
    2. Global config (~/.daily-git-progress.toml)
    3. Project config (./daily-git-progress.toml)
    4. Explicit config file
    5. Environment variables (DAILY_GIT_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(view_as_tree=True)
    >>> config.view_as_tree
    True
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "DAILY_GIT_"
CONFIG_FILENAME = "daily-git-progress.toml"


@dataclass(frozen=True)
class ProgressConfig:
    """Settings for history queries and view rendering.

    Attributes:
        Git invocation:
            git_timeout_seconds: Timeout for each git subprocess
            max_output_mb: Largest accepted git output; larger is a failure
            all_refs: Query every ref (--all), not only the checked-out branch

        File-list resolution:
            batch_file_lookup: Resolve changed files for many commits per call
            batch_size: Commits per batched git show call

        Presentation:
            view_as_tree: Show file lists as folder trees instead of flat lists
            verbosity: Logging verbosity level
    """

    git_timeout_seconds: int = 10
    max_output_mb: float = 10.0
    all_refs: bool = True

    batch_file_lookup: bool = True
    batch_size: int = 100

    view_as_tree: bool = False
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        if self.git_timeout_seconds < 1:
            raise InvalidConfigError(
                "git_timeout_seconds", self.git_timeout_seconds, "must be at least 1"
            )
        if self.max_output_mb <= 0:
            raise InvalidConfigError("max_output_mb", self.max_output_mb, "must be positive")
        if self.batch_size < 1:
            raise InvalidConfigError("batch_size", self.batch_size, "must be at least 1")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )


def load_config(config_file: Optional[Path] = None, **overrides) -> ProgressConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options fall through.

    Returns:
        Validated ProgressConfig instance

    Raises:
        ConfigurationError: If a config file is missing or invalid
    """
    merged: dict = {}

    global_config = Path.home() / f".{CONFIG_FILENAME}"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / CONFIG_FILENAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return ProgressConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from DAILY_GIT_* environment variables.

    Example: DAILY_GIT_BATCH_SIZE=50, DAILY_GIT_VIEW_AS_TREE=true.
    """
    type_hints = get_type_hints(ProgressConfig)

    result: dict[str, Any] = {}

    for field_name in ProgressConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        try:
            result[field_name] = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise InvalidConfigError(field_name, env_value, f"{env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the field's type."""
    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        if lower in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    # str and Literal (verbosity)
    return value


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return the parsed dict."""
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")
