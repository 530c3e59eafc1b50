from .detail_dialog import HostDetailDialog, format_host_details
from .menu import HostMenu, MenuError, MenuState, render_menu
from .theme import MenuTheme

__all__ = [
    "HostDetailDialog",
    "HostMenu",
    "MenuError",
    "MenuState",
    "MenuTheme",
    "format_host_details",
    "render_menu",
]
