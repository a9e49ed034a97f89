"""Función de saludo.

Por qué aquí:
- Es la única lógica de dominio del proyecto; la CLI solo la imprime.
- Pura y sin I/O para poder probarla sin consola.
"""

from __future__ import annotations

GREETING = "Hello, World!"


def hello() -> str:
    """Devuelve el saludo fijo."""

    return GREETING
