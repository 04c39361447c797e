"""Fatal paths: help requests, missing variables and bad integers exit."""

import io

import pytest

from envdoc import EXIT_FAILURE, Registry


def _registry(environ):
    registry = Registry(prefix="APP_", environ=environ)
    registry.declare_mandatory_string("TOKEN", "API token")
    registry.declare_mandatory_string("REGION", "Deployment region")
    registry.declare_optional_int("PORT", "The port to listen to", 1234)
    return registry


def test_missing_mandatory_prints_all_and_exits(capsys):
    registry = _registry({})

    with pytest.raises(SystemExit) as excinfo:
        registry.parse(["prog"])

    assert excinfo.value.code == EXIT_FAILURE
    out = capsys.readouterr().out
    assert "Error: Mandatory environment variable APP_TOKEN not set!" in out
    assert "Error: Mandatory environment variable APP_REGION not set!" in out
    assert "Use the following environment variables:" in out
    assert "  APP_PORT  The port to listen to (Default: 1234)" in out


def test_help_exits_without_validating(capsys):
    registry = _registry({})

    with pytest.raises(SystemExit) as excinfo:
        registry.parse(["prog", "--HELP"])

    assert excinfo.value.code == EXIT_FAILURE
    out = capsys.readouterr().out
    assert "Use the following environment variables:" in out
    assert "not set!" not in out


def test_help_exits_even_when_configuration_is_valid(capsys):
    registry = _registry({"APP_TOKEN": "t", "APP_REGION": "eu"})

    with pytest.raises(SystemExit) as excinfo:
        registry.parse(["prog", "-h"])

    assert excinfo.value.code != 0
    assert "APP_TOKEN  API token" in capsys.readouterr().out


def test_invalid_integer_exits_with_diagnostic(capsys):
    registry = _registry({"APP_PORT": "abc"})

    with pytest.raises(SystemExit) as excinfo:
        registry.get_int("PORT")

    assert excinfo.value.code == EXIT_FAILURE
    out = capsys.readouterr().out
    assert "Error: Value 'abc' of environment variable APP_PORT is not an integer!" in out


def test_undeclared_integer_exits_instead_of_crashing():
    registry = Registry(environ={})

    with pytest.raises(SystemExit) as excinfo:
        registry.get_int("MISSING")

    assert excinfo.value.code == EXIT_FAILURE


def test_parse_writes_to_given_stream(capsys):
    registry = _registry({"APP_TOKEN": "t"})
    buffer = io.StringIO()

    with pytest.raises(SystemExit):
        registry.parse(["prog"], stream=buffer)

    assert "APP_REGION not set!" in buffer.getvalue()
    assert "APP_TOKEN not set!" not in buffer.getvalue()
    assert "not set!" not in capsys.readouterr().out


def test_help_output_is_exactly_usage_without_logging_setup(capsys):
    registry = Registry(environ={})
    registry.declare_mandatory_string("TOKEN", "API token")

    with pytest.raises(SystemExit):
        registry.parse(["prog", "--help"])

    assert capsys.readouterr().out == registry.format_usage()


def test_missing_output_has_no_log_lines_without_logging_setup(capsys):
    registry = _registry({"APP_TOKEN": "t"})

    with pytest.raises(SystemExit):
        registry.parse(["prog"])

    expected = "Error: Mandatory environment variable APP_REGION not set!\n" + registry.format_usage()
    assert capsys.readouterr().out == expected


def test_invalid_integer_output_is_only_the_diagnostic(capsys):
    registry = _registry({"APP_PORT": " 42"})

    with pytest.raises(SystemExit):
        registry.get_int("PORT")

    assert capsys.readouterr().out == (
        "Error: Value ' 42' of environment variable APP_PORT is not an integer!\n"
    )


def test_get_int_writes_to_given_stream(capsys):
    registry = _registry({"APP_PORT": "abc"})
    buffer = io.StringIO()

    with pytest.raises(SystemExit) as excinfo:
        registry.get_int("PORT", stream=buffer)

    assert excinfo.value.code == EXIT_FAILURE
    assert "APP_PORT is not an integer!" in buffer.getvalue()
    assert capsys.readouterr().out == ""
