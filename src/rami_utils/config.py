"""Configuration for optional debug diagnostics.

Bounds warnings go through a dedicated logger and are only emitted when
``debug_bounds_checks`` is set here. The flag lives in this module rather
than on the logger, so host logging configuration cannot flip it.
"""

import os
from typing import Optional

BOUNDS_LOGGER_NAME = "rami_utils.bounds"
DEBUG_ENV_VAR = "RAMI_UTILS_DEBUG"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


# Falls back to __debug__ so `python -O` turns the checks off
DEFAULT_CONFIG = {
    "debug_bounds_checks": _env_flag(DEBUG_ENV_VAR, __debug__),
}

_active_config: dict = dict(DEFAULT_CONFIG)


def configure(config: Optional[dict] = None) -> dict:
    """Apply package configuration.

    Args:
        config: Optional config with:
            - debug_bounds_checks: bool, log a warning before out-of-range
              array accesses fail

    Returns:
        The active configuration

    Raises:
        ValueError: If the config contains unknown keys
    """
    global _active_config

    if config is None:
        config = {}

    unknown = set(config) - set(DEFAULT_CONFIG)
    if unknown:
        raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")

    merged = {**DEFAULT_CONFIG, **config}
    merged["debug_bounds_checks"] = bool(merged["debug_bounds_checks"])

    _active_config = merged
    return dict(_active_config)


def get_config() -> dict:
    """Return a copy of the active configuration."""
    return dict(_active_config)


def bounds_checks_enabled() -> bool:
    """Whether out-of-range accesses are logged before they fail."""
    return _active_config["debug_bounds_checks"]


configure()
