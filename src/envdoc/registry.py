"""Parameter registry - declare, validate and document environment settings.

An application describes every environment variable it reads once at
startup, then validates the process environment before any real work runs.

Usage:
    registry = Registry(prefix="EXAMPLE_")
    registry.declare_optional_int("PORT", "The port to listen to", 1234)
    registry.declare_mandatory_string("TOKEN", "API token")
    registry.parse()                   # exits with usage text on failure
    port = registry.get_int("PORT")    # EXAMPLE_PORT or 1234
"""

from __future__ import annotations

import sys
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, TextIO

from envdoc.domain.errors import (
    HelpRequested,
    InvalidIntegerError,
    MissingParametersError,
)
from envdoc.domain.parameters import Parameter, ValidationResult
from envdoc.infrastructure.config.settings_utils import (
    env_str,
    format_bool,
    format_int,
    is_help_request,
    parse_bool,
    parse_int,
)
from envdoc.infrastructure.logging_setup import get_logger

logger = get_logger(__name__)

EXIT_FAILURE = 1

USAGE_HEADER = "Use the following environment variables:"


class Registry:
    """Declared parameters plus the prefix used to look them up.

    Populate during startup, then treat as read-only. Reads go to
    `environ` when one is given, otherwise to the live `os.environ`.
    """

    def __init__(
        self,
        prefix: str = "",
        environ: Optional[Mapping[str, str]] = None,
    ):
        self._prefix = prefix
        self._environ = environ
        self._parameters: Dict[str, Parameter] = {}

    # ------------------------------------------------------------------
    # Declaration
    # ------------------------------------------------------------------

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def parameters(self) -> Mapping[str, Parameter]:
        return MappingProxyType(self._parameters)

    def set_prefix(self, prefix: str) -> None:
        """Set the prefix for all environment lookups and usage output.

        It makes sense to use the application name, e.g. "EXAMPLE_", to
        avoid collisions with variables read by other programs.
        """
        self._prefix = prefix

    def describe_string(
        self,
        name: str,
        description: str,
        mandatory: bool,
        default_value: str = "",
    ) -> None:
        self._parameters[name] = Parameter(
            name=name,
            description=description,
            mandatory=mandatory,
            default_value=default_value,
        )

    def describe_int(
        self,
        name: str,
        description: str,
        mandatory: bool,
        default_value: int = 0,
    ) -> None:
        self.describe_string(name, description, mandatory, format_int(default_value))

    def describe_bool(
        self,
        name: str,
        description: str,
        mandatory: bool,
        default_value: bool = False,
    ) -> None:
        self.describe_string(name, description, mandatory, format_bool(default_value))

    def declare_mandatory_string(self, name: str, description: str) -> None:
        self.describe_string(name, description, True)

    def declare_mandatory_int(self, name: str, description: str) -> None:
        # Mandatory parameters keep an empty default, not "0".
        self.describe_string(name, description, True)

    def declare_mandatory_bool(self, name: str, description: str) -> None:
        self.describe_string(name, description, True)

    def declare_optional_string(self, name: str, description: str, default_value: str) -> None:
        self.describe_string(name, description, False, default_value)

    def declare_optional_int(self, name: str, description: str, default_value: int) -> None:
        self.describe_int(name, description, False, default_value)

    def declare_optional_bool(self, name: str, description: str, default_value: bool) -> None:
        self.describe_bool(name, description, False, default_value)

    def __contains__(self, name: object) -> bool:
        return name in self._parameters

    def __len__(self) -> int:
        return len(self._parameters)

    def __iter__(self) -> Iterator[Parameter]:
        return iter(self._parameters.values())

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self, argv: Optional[Sequence[str]] = None) -> ValidationResult:
        """Check the command line and environment without side effects.

        Args:
            argv: Command line to inspect; defaults to sys.argv.

        Returns:
            A result flagging a help request, or listing every missing
            mandatory variable (prefixed) in declaration order.
        """
        args = sys.argv if argv is None else argv
        if is_help_request(args):
            return ValidationResult(help_requested=True)

        missing = tuple(
            parameter.variable_name(self._prefix)
            for parameter in self._parameters.values()
            if parameter.mandatory and self._lookup(parameter.name) == ""
        )
        return ValidationResult(missing=missing)

    def parse(
        self,
        argv: Optional[Sequence[str]] = None,
        *,
        fatal: bool = True,
        stream: Optional[TextIO] = None,
    ) -> None:
        """Validate the environment and stop the program if it is unusable.

        A help request or any missing mandatory variable prints usage and
        exits with EXIT_FAILURE. With `fatal=False` the same conditions
        raise HelpRequested / MissingParametersError instead.
        """
        result = self.validate(argv)
        out = stream if stream is not None else sys.stdout

        if result.help_requested:
            logger.info("configuration_help_requested")
            if not fatal:
                raise HelpRequested()
            self.print_usage(out)
            sys.exit(EXIT_FAILURE)

        if result.missing:
            logger.warning("mandatory_parameters_missing", variables=list(result.missing))
            if not fatal:
                raise MissingParametersError(result.missing)
            for variable in result.missing:
                print(f"Error: Mandatory environment variable {variable} not set!", file=out)
            self.print_usage(out)
            sys.exit(EXIT_FAILURE)

    # ------------------------------------------------------------------
    # Usage
    # ------------------------------------------------------------------

    def format_usage(self) -> str:
        mandatory = [p for p in self._parameters.values() if p.mandatory]
        optional = [p for p in self._parameters.values() if not p.mandatory]

        lines: List[str] = ["", USAGE_HEADER]
        if mandatory:
            lines.append("")
            lines.append("Mandatory:")
            for parameter in mandatory:
                lines.append(
                    f"  {parameter.variable_name(self._prefix)}  {parameter.description}"
                )
        if optional:
            lines.append("")
            lines.append("Optional:")
            for parameter in optional:
                line = f"  {parameter.variable_name(self._prefix)}  {parameter.description}"
                if parameter.default_value != "":
                    line += f" (Default: {parameter.default_value})"
                lines.append(line)
        return "\n".join(lines) + "\n"

    def print_usage(self, stream: Optional[TextIO] = None) -> None:
        out = stream if stream is not None else sys.stdout
        out.write(self.format_usage())

    # ------------------------------------------------------------------
    # Typed access
    # ------------------------------------------------------------------

    def _lookup(self, name: str) -> str:
        return env_str(self._prefix + name, "", self._environ)

    def get_string(self, name: str) -> str:
        """Environment value for `name`, or its declared default."""
        parameter = self._parameters.get(name)
        default = parameter.default_value if parameter is not None else ""
        return env_str(self._prefix + name, default, self._environ)

    def get_int(
        self,
        name: str,
        *,
        fatal: bool = True,
        stream: Optional[TextIO] = None,
    ) -> int:
        """Integer value for `name`.

        A value that is not a base-10 integer in the signed 64-bit range
        prints a diagnostic to `stream` (stdout by default) and exits with
        EXIT_FAILURE, or raises InvalidIntegerError when `fatal=False`.
        An undeclared, unset name has an empty default and fails the same way.
        """
        raw = self.get_string(name)
        try:
            return parse_int(raw)
        except ValueError:
            variable = self._prefix + name
            logger.error("invalid_integer_value", variable=variable, value=raw)
            error = InvalidIntegerError(variable, raw)
            if not fatal:
                raise error from None
            print(f"Error: {error}", file=stream if stream is not None else sys.stdout)
            sys.exit(EXIT_FAILURE)

    def get_bool(self, name: str) -> bool:
        """True for "true", "1", "yes" or "on" in any case; False otherwise."""
        return parse_bool(self.get_string(name))
