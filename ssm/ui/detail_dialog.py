from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Footer, Static

from ..models import HostDetails


def format_host_details(details: HostDetails) -> str:
    """Render the alias followed by aligned ``key    value`` rows."""
    pairs = details.display_pairs()
    width = max((len(key) for key, _ in pairs), default=0)
    lines = [details.alias, ""]
    for key, value in pairs:
        lines.append(f"{key:<{width}}    {value}")
    return "\n".join(lines) + "\n"


class HostDetailDialog(ModalScreen[None]):
    """Popup listing every directive of one host."""

    DEFAULT_CSS = """
    HostDetailDialog {
        align: center middle;
    }
    #detail-box {
        width: 60;
        height: auto;
        max-height: 90%;
        border: round $primary;
        background: $background;
        color: $foreground;
        padding: 1 2;
        overflow-y: auto;
    }
    """

    BINDINGS = [
        Binding("escape", "back", "go back"),
        Binding("q", "quit", "quit"),
    ]

    def __init__(self, details: HostDetails) -> None:
        super().__init__()
        self.details = details

    def compose(self) -> ComposeResult:
        with Vertical(id="detail-box"):
            yield Static(format_host_details(self.details), id="detail-text", markup=False)
        yield Footer()

    def action_back(self) -> None:
        self.dismiss(None)

    def action_quit(self) -> None:
        self.app.exit_cancelled()


__all__ = ["HostDetailDialog", "format_host_details"]
