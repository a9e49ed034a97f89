"""Logging setup shared by every entry point.

Logs go to stderr through Rich so stdout only carries command output.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: int = logging.WARNING) -> logging.Logger:
    """Install a `RichHandler` on the root logger once and set its level."""

    root = logging.getLogger()
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        root.addHandler(handler)
    root.setLevel(level)
    return root
