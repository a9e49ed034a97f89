"""Decide qué líneas imprime cada invocación.

Por qué separado de la CLI:
- Typer/Rich quedan en el borde; aquí solo hay funciones puras.
- Permite testear el orden de salida sin un runner.
"""

from __future__ import annotations

import logging

from core.domain.models import CliArgs, Command
from core.greeting import hello

PROGRAM_NAME = "lsr"
NO_NAME_LINE = "no"

logger = logging.getLogger(__name__)


def render_option_lines(args: CliArgs) -> list[str]:
    """Lines produced by the root options, in print order.

    `--hello` adds the program-prefixed greeting. Then either the greeting
    (a name was given, whatever its value) or the literal ``no``.
    """

    lines: list[str] = []
    if args.hello:
        lines.append(f"{PROGRAM_NAME}  {hello()}")

    if args.name is not None:
        lines.append(hello())
    else:
        lines.append(NO_NAME_LINE)

    logger.debug(
        "options hello=%s name_given=%s version=%s -> %d line(s)",
        args.hello,
        args.name is not None,
        args.version,
        len(lines),
    )
    return lines


def render_command_lines(command: Command) -> list[str]:
    """Lines produced by a subcommand."""

    logger.debug("dispatching subcommand %s", command.value)
    if command is Command.SAYHI:
        return [hello()]
    raise ValueError(f"Unsupported command: {command!r}")


def render_lines(args: CliArgs) -> list[str]:
    """Full output for `args`: root options first, then the subcommand."""

    lines = render_option_lines(args)
    if args.command is not None:
        lines.extend(render_command_lines(args.command))
    return lines
