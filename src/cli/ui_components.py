"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Los comandos reciben líneas ya decididas por el Core y solo las pintan.
"""

from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.text import Text


def build_console(*, stderr: bool = False) -> Console:
    """Console for plain command output (no markup, no highlighting)."""

    return Console(stderr=stderr, highlight=False)


def print_lines(console: Console, lines: Iterable[str]) -> None:
    """Imprime cada línea tal cual, sin interpretar markup."""

    for line in lines:
        console.print(line, markup=False, soft_wrap=True)


def print_error(console: Console, message: str) -> None:
    console.print(Text.assemble(("Error: ", "bold red"), message), soft_wrap=True)
