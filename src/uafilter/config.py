"""
Environment-driven settings for uafilter.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .utils.logging import apply_log_level

LOG_LEVEL_ENV = "UAFILTER_LOG_LEVEL"
STRICT_REFERENCES_ENV = "UAFILTER_STRICT_REFERENCES"
MAX_ELEMENTS_ENV = "UAFILTER_MAX_ELEMENTS"

# Element operands are UInt32 on the wire.
UINT32_MAX = 2**32 - 1


class ConfigurationError(ValueError):
    """Raised when an environment setting holds an invalid value."""


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(value: str, *, key: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean value for '{key}': {value!r}")


def _parse_positive_int(value: str, *, key: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid integer value for '{key}': {value!r}") from exc
    if parsed <= 0:
        raise ConfigurationError(f"Value for '{key}' must be positive, got {parsed}")
    return parsed


def _parse_level(value: str, *, key: str) -> int:
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Invalid log level for '{key}': {value!r}")
    return level


@dataclass(frozen=True)
class FilterSettings:
    log_level: int = logging.WARNING
    strict_references: bool = False
    max_elements: int = UINT32_MAX

    @classmethod
    def from_env(cls) -> "FilterSettings":
        """
        Build settings from ``UAFILTER_*`` environment variables, falling back to defaults.
        """

        defaults = cls()
        log_level = defaults.log_level
        strict_references = defaults.strict_references
        max_elements = defaults.max_elements

        raw = os.getenv(LOG_LEVEL_ENV)
        if raw:
            log_level = _parse_level(raw, key=LOG_LEVEL_ENV)
        raw = os.getenv(STRICT_REFERENCES_ENV)
        if raw:
            strict_references = _parse_bool(raw, key=STRICT_REFERENCES_ENV)
        raw = os.getenv(MAX_ELEMENTS_ENV)
        if raw:
            max_elements = min(_parse_positive_int(raw, key=MAX_ELEMENTS_ENV), UINT32_MAX)

        return cls(
            log_level=log_level,
            strict_references=strict_references,
            max_elements=max_elements,
        )


_settings: FilterSettings | None = None


def get_settings() -> FilterSettings:
    global _settings
    if _settings is None:
        _settings = FilterSettings.from_env()
        apply_log_level(_settings.log_level)
    return _settings


def reset_settings() -> None:
    """Drop cached settings; the next lookup re-reads the environment and re-applies the log level."""

    global _settings
    _settings = None
