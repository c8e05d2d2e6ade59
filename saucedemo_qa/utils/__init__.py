"""Utility helpers for configuration, logging, and target reachability."""

from .config import Settings, get_bool_from_env, get_directory_from_env, get_float_from_env, load_settings
from .logging_utils import InterceptHandler, configure_json_logging
from .reachability import is_reachable

__all__ = [
    "InterceptHandler",
    "Settings",
    "configure_json_logging",
    "get_bool_from_env",
    "get_directory_from_env",
    "get_float_from_env",
    "is_reachable",
    "load_settings",
]
