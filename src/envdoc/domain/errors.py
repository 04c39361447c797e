"""Domain errors."""

from __future__ import annotations

from typing import Iterable


class EnvdocError(Exception):
    """Base error."""
    pass


class HelpRequested(EnvdocError):
    """Usage information was requested on the command line."""

    def __init__(self) -> None:
        super().__init__("usage information requested")


class MissingParametersError(EnvdocError):
    """One or more mandatory environment variables are unset or empty."""

    def __init__(self, names: Iterable[str]):
        self.names = tuple(names)
        super().__init__(
            f"Missing mandatory environment variables: {', '.join(self.names)}"
        )


class InvalidIntegerError(EnvdocError, ValueError):
    """An environment value could not be parsed as a base-10 integer."""

    def __init__(self, variable: str, value: str):
        self.variable = variable
        self.value = value
        super().__init__(
            f"Value '{value}' of environment variable {variable} is not an integer!"
        )
