"""Configuration management

YAML configuration file loading and environment overrides.
"""

from .settings import (
    DEFAULT_MAX_THREADS,
    MAX_THREADS_ENV_VAR,
    FilterSettings,
    LoggingConfig,
    load_settings,
    resolve_max_threads,
)

__all__ = [
    "DEFAULT_MAX_THREADS",
    "MAX_THREADS_ENV_VAR",
    "FilterSettings",
    "LoggingConfig",
    "load_settings",
    "resolve_max_threads",
]
