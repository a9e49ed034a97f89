"""Tests for output dispatching."""

import logging

import pytest
from pydantic import ValidationError

from core.domain.models import CliArgs, Command
from core.greeting import hello
from core.services.dispatcher import (
    render_command_lines,
    render_lines,
    render_option_lines,
)


def test_no_arguments_prints_no():
    assert render_option_lines(CliArgs()) == ["no"]


def test_hello_flag_prefixes_program_name():
    lines = render_option_lines(CliArgs(hello=True))
    assert lines == ["lsr  Hello, World!", "no"]


@pytest.mark.parametrize("name", ["Ada", "", "  ", "no"])
def test_any_name_prints_greeting(name):
    """The name value is never used, only its presence."""
    assert render_option_lines(CliArgs(name=name)) == [hello()]


def test_version_flag_has_no_effect():
    assert render_option_lines(CliArgs(version=True)) == render_option_lines(CliArgs())


def test_sayhi_matches_greeting_function():
    assert render_command_lines(Command.SAYHI) == [hello()]


def test_render_lines_orders_options_before_command():
    args = CliArgs(hello=True, name="x", command=Command.SAYHI)
    assert render_lines(args) == ["lsr  Hello, World!", "Hello, World!", "Hello, World!"]


def test_render_lines_without_command():
    assert render_lines(CliArgs(name="x")) == ["Hello, World!"]


def test_dispatch_is_logged_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="core.services.dispatcher"):
        render_command_lines(Command.SAYHI)
    assert "dispatching subcommand sayhi" in caplog.text


def test_cli_args_reject_unknown_fields():
    with pytest.raises(ValidationError):
        CliArgs(verbose=True)


def test_cli_args_are_frozen():
    args = CliArgs()
    with pytest.raises(ValidationError):
        args.hello = True
