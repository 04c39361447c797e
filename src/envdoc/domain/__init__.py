"""Domain models for envdoc."""

from .errors import (
    EnvdocError,
    HelpRequested,
    InvalidIntegerError,
    MissingParametersError,
)
from .parameters import Parameter, ValidationResult

__all__ = [
    "Parameter",
    "ValidationResult",
    # Errors
    "EnvdocError",
    "HelpRequested",
    "InvalidIntegerError",
    "MissingParametersError",
]
