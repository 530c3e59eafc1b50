from __future__ import annotations

import sys
from typing import Sequence

import typer
from typer.main import get_command

from .commands import register_commands

app = typer.Typer(help="Pick a host from your SSH config and connect to it.", add_completion=False)
register_commands(app)


def run(argv: Sequence[str] | None = None) -> None:
    """Console-script entry point."""
    command = get_command(app)
    if argv is None:
        argv = tuple(sys.argv[1:])
    command.main(args=list(argv), prog_name="ssm")


__all__ = ["app", "run"]
