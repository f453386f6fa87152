"""
CLI for abo-parser.

Command-line interface for converting ABO bank statement files.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from abo_parser.cli.context import ExitCode

if TYPE_CHECKING:
    from typer import Typer

    app: Typer


def __getattr__(name: str) -> Any:
    if name == "app":
        from abo_parser.cli.main import app as _app

        return _app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "ExitCode",
    "app",
]
