from __future__ import annotations

import shutil
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.markup import escape

from .. import config as config_module
from .. import process as process_module
from .. import tmux as tmux_module
from ..ui import menu as menu_module
from .common import console, err_console, setup_logging


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]{escape(message)}[/red]")
    raise typer.Exit(1)


def register(app: typer.Typer) -> None:
    @app.command("connect")
    def connect(
        config: Optional[Path] = typer.Option(
            None,
            "--config",
            "-c",
            envvar=config_module.CONFIG_PATH_ENV,
            help="SSH config file to read hosts from (default: ~/.ssh/config).",
            show_default=False,
        ),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr."),
    ):
        """Choose a host from your SSH config and connect to it."""
        setup_logging(verbose)
        config_path = config.expanduser() if config is not None else config_module.default_config_path()

        try:
            hosts = config_module.get_ssh_hosts(config_path)
        except config_module.ConfigReadError as exc:
            _fail(f"Error reading SSH config: {exc}")

        if not hosts:
            _fail(f"No SSH hosts found in {config_path}")

        try:
            selection = menu_module.render_menu(hosts, config_path)
        except menu_module.MenuError as exc:
            _fail(f"Error rendering menu: {exc}")

        if selection.is_cancelled:
            raise typer.Exit(0)

        host = selection.target()
        console.print(f"Connecting to {escape(host)} ...")

        ssh_path = shutil.which("ssh")
        if ssh_path is None:
            _fail("ssh command not found on PATH")

        tmux_module.ensure_window(host)

        try:
            process_module.replace_process(ssh_path, ["ssh", host])
        except process_module.ExecError as exc:
            _fail(f"Failed to execute ssh: {exc}")


__all__ = ["register"]
