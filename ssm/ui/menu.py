from __future__ import annotations

import enum
import logging
import os
import shlex
import subprocess
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence

from rich.text import Text
from textual import on
from textual.app import App, ComposeResult, SuspendNotSupported
from textual.binding import Binding
from textual.screen import Screen
from textual.widgets import Footer, Input, OptionList
from textual.widgets.option_list import Option

from .. import config as config_module
from ..models import Host, MenuSelection
from .detail_dialog import HostDetailDialog
from .theme import MenuTheme

logger = logging.getLogger(__name__)

EDITOR_ENV = "EDITOR"


class MenuError(Exception):
    """Raised when the menu could not run to completion."""


class MenuState(enum.Enum):
    LIST = "list"
    DETAIL = "detail"
    DONE = "done"


def editor_command(config_path: Path, environ: Optional[Mapping[str, str]] = None) -> Optional[List[str]]:
    """Build the command that opens the config in $EDITOR, or None when unset."""
    env = os.environ if environ is None else environ
    editor = env.get(EDITOR_ENV, "").strip()
    if not editor:
        return None
    return shlex.split(editor) + [str(config_path)]


def _host_prompt(host: Host, theme: MenuTheme) -> Text:
    prompt = Text(host.alias, style=f"bold {theme.text}")
    prompt.append("\n")
    prompt.append(host.hostname, style=theme.subtext1)
    return prompt


class FilterInput(Input):
    BINDINGS = [Binding("escape", "clear_filter", "clear filter", show=False)]

    def action_clear_filter(self) -> None:
        self.value = ""
        self.screen.query_one("#hosts", OptionList).focus()


class HostListScreen(Screen):
    """Filterable list of hosts; alias as title, hostname as subtitle."""

    AUTO_FOCUS = "#hosts"

    DEFAULT_CSS = """
    HostListScreen {
        padding: 1 2;
    }
    #filter {
        border: none;
        height: 1;
        padding: 0 1;
        margin-bottom: 1;
    }
    #hosts {
        border: none;
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("e", "edit_config", "edit config"),
        Binding("v", "view_details", "view details"),
        Binding("slash", "filter", "filter"),
        Binding("escape", "back", "quit"),
        Binding("q", "quit", "quit"),
    ]

    def __init__(self, hosts: Sequence[Host], theme: MenuTheme) -> None:
        super().__init__()
        self.hosts: List[Host] = list(hosts)
        self.menu_theme = theme
        self._by_alias: Dict[str, Host] = {}

    def compose(self) -> ComposeResult:
        yield FilterInput(placeholder="/ to filter hosts", id="filter")
        yield OptionList(id="hosts")
        yield Footer()

    def on_mount(self) -> None:
        self.apply_filter("")

    def set_hosts(self, hosts: Sequence[Host]) -> None:
        self.hosts = list(hosts)
        self.apply_filter(self.query_one("#filter", FilterInput).value)

    def apply_filter(self, text: str) -> None:
        needle = text.lower()
        visible = [host for host in self.hosts if needle in host.alias.lower()]
        self._by_alias = {host.alias: host for host in visible}

        option_list = self.query_one("#hosts", OptionList)
        option_list.clear_options()
        option_list.add_options(
            [Option(_host_prompt(host, self.menu_theme), id=host.alias) for host in visible]
        )
        if visible:
            option_list.highlighted = 0

    def highlighted_host(self) -> Optional[Host]:
        option_list = self.query_one("#hosts", OptionList)
        if option_list.highlighted is None:
            return None
        option = option_list.get_option_at_index(option_list.highlighted)
        if option.id is None:
            return None
        return self._by_alias.get(option.id)

    @on(Input.Changed, "#filter")
    def _filter_changed(self, event: Input.Changed) -> None:
        self.apply_filter(event.value)

    @on(Input.Submitted, "#filter")
    def _filter_submitted(self) -> None:
        self.query_one("#hosts", OptionList).focus()

    @on(OptionList.OptionSelected, "#hosts")
    def _host_selected(self, event: OptionList.OptionSelected) -> None:
        if event.option.id is not None:
            self.app.select_host(event.option.id)

    def action_filter(self) -> None:
        self.query_one("#filter", FilterInput).focus()

    def action_back(self) -> None:
        filter_input = self.query_one("#filter", FilterInput)
        if filter_input.value:
            filter_input.action_clear_filter()
            return
        self.app.exit_cancelled()

    def action_quit(self) -> None:
        self.app.exit_cancelled()

    def action_view_details(self) -> None:
        host = self.highlighted_host()
        if host is not None:
            self.app.show_details(host)

    def action_edit_config(self) -> None:
        self.app.edit_config()


class HostMenu(App[MenuSelection]):
    """Pick an SSH host; the return value is a MenuSelection."""

    TITLE = "ssm"

    BINDINGS = [Binding("ctrl+c", "cancel", "quit", show=False, priority=True)]

    def __init__(
        self,
        hosts: Sequence[Host],
        config_path: Path,
        theme: Optional[MenuTheme] = None,
    ) -> None:
        super().__init__()
        self.hosts = list(hosts)
        self.config_path = Path(config_path)
        self.menu_theme = theme or MenuTheme()
        self.state = MenuState.LIST
        self.list_screen: Optional[HostListScreen] = None

    def on_mount(self) -> None:
        self.register_theme(self.menu_theme.to_textual())
        self.theme = self.menu_theme.name
        self.list_screen = HostListScreen(self.hosts, self.menu_theme)
        self.push_screen(self.list_screen)

    def select_host(self, alias: str) -> None:
        if self.state is not MenuState.LIST:
            return
        self.state = MenuState.DONE
        self.exit(MenuSelection(alias))

    def exit_cancelled(self) -> None:
        self.state = MenuState.DONE
        self.exit(MenuSelection.cancelled())

    def action_cancel(self) -> None:
        self.exit_cancelled()

    def show_details(self, host: Host) -> None:
        if self.state is not MenuState.LIST:
            return
        try:
            details = config_module.get_host_details(host, self.config_path)
        except config_module.ConfigReadError as exc:
            logger.debug("Detail lookup for %s failed: %s", host.alias, exc)
            return
        self.state = MenuState.DETAIL
        self.push_screen(HostDetailDialog(details), callback=self._details_closed)

    def _details_closed(self, _result: None) -> None:
        if self.state is MenuState.DETAIL:
            self.state = MenuState.LIST

    def edit_config(self) -> None:
        if self.state is not MenuState.LIST:
            return
        command = editor_command(self.config_path)
        if command is None:
            return
        try:
            with self.suspend():
                subprocess.run(command, check=False)
        except (OSError, SuspendNotSupported) as exc:
            logger.debug("Editor %s failed: %s", command[0], exc)
            return
        self.reload_hosts()

    def reload_hosts(self) -> None:
        try:
            hosts = config_module.get_ssh_hosts(self.config_path)
        except config_module.ConfigReadError as exc:
            logger.debug("Keeping previous host list: %s", exc)
            return
        self.hosts = hosts
        if self.list_screen is not None:
            self.list_screen.set_hosts(hosts)


def render_menu(
    hosts: Sequence[Host],
    config_path: Path,
    theme: Optional[MenuTheme] = None,
) -> MenuSelection:
    """Run the menu until the user picks a host or cancels."""
    app = HostMenu(hosts, config_path, theme)
    try:
        result = app.run()
    except Exception as exc:
        raise MenuError(str(exc)) from exc
    if app.return_code:
        raise MenuError(f"menu exited with status {app.return_code}")
    if result is None:
        return MenuSelection.cancelled()
    return result


__all__ = [
    "HostListScreen",
    "HostMenu",
    "MenuError",
    "MenuState",
    "editor_command",
    "render_menu",
]
