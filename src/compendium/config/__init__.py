"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var
from .errors import ConfigurationError
from .logging import configure_logging, resolve_log_level
from .paths import PathsConfig, get_paths_config

__all__ = [
    "ConfigurationError",
    "PathsConfig",
    "configure_logging",
    "get_paths_config",
    "optional_env_var",
    "resolve_log_level",
]
