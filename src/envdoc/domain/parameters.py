"""Declared parameter metadata and validation outcome."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Parameter:
    """A single declared configuration parameter.

    The default is always kept as text; typed accessors convert on read.
    """

    name: str
    description: str = ""
    mandatory: bool = False
    default_value: str = ""

    def variable_name(self, prefix: str = "") -> str:
        """Environment variable backing this parameter under `prefix`."""
        return f"{prefix}{self.name}"


@dataclass(frozen=True)
class ValidationResult:
    help_requested: bool = False
    missing: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def passed(self) -> bool:
        return not self.help_requested and not self.missing
