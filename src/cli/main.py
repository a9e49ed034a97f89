"""CLI `lsr` (Typer).

Por qué Typer:
- Flags y subcomandos declarados con tipos; el parseo y los errores de uso
  (mensaje + exit 2) los resuelve Click por debajo.

Ejecución: script `lsr` instalado, o `python -m cli.main` con `src/` en el path.
"""

from __future__ import annotations

import logging

import typer
from pydantic import ValidationError

from cli.ui_components import build_console, print_error, print_lines
from core.config import AppSettings
from core.domain.models import CliArgs, Command
from core.logging_setup import configure_logging
from core.services.dispatcher import PROGRAM_NAME, render_lines

app = typer.Typer(
    name=PROGRAM_NAME,
    help="A simple hello world CLI",
    add_completion=False,
)

_console = build_console()
_err_console = build_console(stderr=True)

logger = logging.getLogger(__name__)


def _load_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        for error in exc.errors():
            field = ".".join(str(part) for part in error.get("loc", ()))
            print_error(_err_console, f"invalid setting {field}: {error.get('msg')}")
        raise typer.Exit(code=2) from exc


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    hello: bool = typer.Option(False, "--hello", help="Print a hello message."),
    name: str | None = typer.Option(None, "--name", metavar="NAME", help="Optional name."),
    version: bool = typer.Option(False, "-v", "--version", help="Show version"),
) -> None:
    """A simple hello world CLI."""

    if ctx.resilient_parsing:
        return

    settings = _load_settings()
    configure_logging(settings.log_level_value)

    command = Command(ctx.invoked_subcommand) if ctx.invoked_subcommand else None
    args = CliArgs(hello=hello, name=name, version=version, command=command)
    logger.debug("parsed arguments: %s", args.model_dump(mode="json"))

    # Subcommands print the whole output, root option lines included.
    if command is None:
        print_lines(_console, render_lines(args))
    else:
        ctx.obj = args


@app.command(name=Command.SAYHI.value)
def sayhi(ctx: typer.Context) -> None:
    """Runs the hello function"""

    args: CliArgs = ctx.obj
    print_lines(_console, render_lines(args))


def run() -> None:
    app(prog_name=PROGRAM_NAME)


if __name__ == "__main__":
    run()
