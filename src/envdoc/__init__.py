"""envdoc - declare, validate and auto-document environment configuration.

An application:
- Declares each string, integer or boolean parameter once, mandatory or with a default
- Validates the process environment at startup, failing fast with usage text
- Reads typed values through a single explicit Registry object
"""

from .domain import (
    EnvdocError,
    HelpRequested,
    InvalidIntegerError,
    MissingParametersError,
    Parameter,
    ValidationResult,
)
from .registry import EXIT_FAILURE, Registry

__version__ = "0.1.0"

__all__ = [
    "EXIT_FAILURE",
    "Registry",
    "Parameter",
    "ValidationResult",
    "EnvdocError",
    "HelpRequested",
    "InvalidIntegerError",
    "MissingParametersError",
]
