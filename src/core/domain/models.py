"""Modelos del dominio (Pydantic v2).

Nota:
- `CliArgs` describe *qué* pidió el usuario, no *cómo* se parseó.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Command(str, Enum):
    """Subcommands exposed by the CLI."""

    SAYHI = "sayhi"


class CliArgs(BaseModel):
    """Parsed command-line arguments for a single invocation."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    hello: bool = Field(
        default=False,
        description="Imprime la línea de saludo con el nombre del programa.",
    )
    name: str | None = Field(
        default=None,
        description="Nombre opcional. Solo importa si está presente, no su contenido.",
    )
    version: bool = Field(
        default=False,
        description="Flag de versión (se parsea, no tiene efecto).",
    )
    command: Command | None = Field(
        default=None,
        description="Subcomando elegido, si hay.",
    )
