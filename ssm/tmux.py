"""tmux window handling so every SSH destination owns one named window."""

from __future__ import annotations

import logging
import os
import shutil
from typing import Mapping, Optional

import libtmux
from libtmux.exc import LibTmuxException

from .process import ExecError, replace_process

logger = logging.getLogger(__name__)

SESSION_ENV = "TMUX"
PANE_ENV = "TMUX_PANE"
WINDOW_PREFIX = "ssh:"


class TmuxError(Exception):
    """Raised when the current tmux session cannot be located."""


def in_tmux_session(environ: Optional[Mapping[str, str]] = None) -> bool:
    env = os.environ if environ is None else environ
    return bool(env.get(SESSION_ENV))


def window_name(host: str) -> str:
    return f"{WINDOW_PREFIX}{host}"


def tmux_server() -> libtmux.Server:
    """Server bound to the socket of the tmux client we are running in."""
    return libtmux.Server()


def current_session(
    server: libtmux.Server,
    environ: Optional[Mapping[str, str]] = None,
) -> libtmux.Session:
    """Return the session that owns the pane this process runs in."""
    env = os.environ if environ is None else environ
    pane_id = env.get(PANE_ENV)
    if not pane_id:
        raise TmuxError(f"{PANE_ENV} is not set")
    panes = server.panes.filter(pane_id=pane_id)
    if not panes:
        raise TmuxError(f"pane {pane_id} not found")
    return panes[0].window.session


def find_window(session: libtmux.Session, name: str) -> Optional[libtmux.Window]:
    matches = [w for w in session.windows if w.window_name == name]
    return matches[0] if matches else None


def ensure_window(host: str) -> None:
    """Switch to or create the ``ssh:<host>`` window.

    Both paths replace the current process. Returning means tmux is not in
    use or could not be driven, and the caller should run ssh itself.
    """
    if not in_tmux_session():
        return

    tmux = shutil.which("tmux")
    if tmux is None:
        logger.debug("tmux binary not found on PATH; skipping window management")
        return

    name = window_name(host)
    try:
        window = find_window(current_session(tmux_server()), name)
    except (TmuxError, LibTmuxException) as exc:
        logger.debug("Cannot query tmux windows: %s", exc)
        return

    if window is not None:
        logger.debug("Switching to existing window %s (%s)", window.window_index, name)
        try:
            replace_process(tmux, ["tmux", "select-window", "-t", str(window.window_index)])
        except ExecError as exc:
            logger.debug("select-window failed: %s", exc)

    logger.debug("Opening new window %s", name)
    try:
        replace_process(tmux, ["tmux", "new-window", "-n", name, "ssh", host])
    except ExecError as exc:
        logger.debug("new-window failed: %s", exc)


__all__ = [
    "TmuxError",
    "current_session",
    "ensure_window",
    "find_window",
    "in_tmux_session",
    "tmux_server",
    "window_name",
]
