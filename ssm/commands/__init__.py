from __future__ import annotations

import typer

from . import connect


def register_commands(app: typer.Typer) -> None:
    connect.register(app)


__all__ = ["register_commands"]
