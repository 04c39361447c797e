"""Configuration helpers."""

from .settings_utils import (
    env_str,
    format_bool,
    format_int,
    is_help_request,
    parse_bool,
    parse_int,
)

__all__ = [
    "env_str",
    "format_bool",
    "format_int",
    "is_help_request",
    "parse_bool",
    "parse_int",
]
