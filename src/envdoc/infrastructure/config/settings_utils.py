"""Environment parsing helpers."""

from __future__ import annotations

import os
import re
from typing import Mapping, Optional, Sequence


_TRUE_VALUES = {"1", "true", "yes", "on"}
_HELP_FLAGS = {"help", "--help", "-help", "-h"}
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def parse_bool(value: object) -> bool:
    """Case-insensitive match against the true set; anything else is False.

    No trimming: " yes " is not "yes".
    """
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).lower() in _TRUE_VALUES


def parse_int(value: object) -> int:
    """Parse a strict signed 64-bit base-10 integer, raising ValueError otherwise."""
    raw = "" if value is None else str(value)
    # int() alone would also accept whitespace, "1_000" and non-ASCII digits.
    if not _INT_PATTERN.fullmatch(raw):
        raise ValueError(f"invalid base-10 integer: {value!r}")
    parsed = int(raw)
    if not _INT64_MIN <= parsed <= _INT64_MAX:
        raise ValueError(f"integer out of 64-bit range: {value!r}")
    return parsed


def format_int(value: int) -> str:
    return str(int(value))


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def is_help_request(argv: Sequence[str]) -> bool:
    """Whether the first argument after the program name asks for usage."""
    if len(argv) < 2:
        return False
    return str(argv[1]).lower() in _HELP_FLAGS


def env_str(
    name: str,
    default: str = "",
    environ: Optional[Mapping[str, str]] = None,
) -> str:
    """Read `name` from `environ`, treating unset and empty alike."""
    source = os.environ if environ is None else environ
    value = source.get(name)
    if value is None or value == "":
        return default
    return str(value)
