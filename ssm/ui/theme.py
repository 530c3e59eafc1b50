from __future__ import annotations

from dataclasses import dataclass

from textual.theme import Theme


@dataclass(frozen=True)
class MenuTheme:
    """Colours for the host menu; defaults to the Catppuccin Mocha palette."""

    name: str = "ssm-mocha"
    mauve: str = "#cba6f7"
    pink: str = "#f5c2e7"
    text: str = "#cdd6f4"
    subtext0: str = "#a6adc8"
    subtext1: str = "#bac2de"
    overlay0: str = "#6c7086"
    surface0: str = "#313244"
    base: str = "#1e1e2e"
    mantle: str = "#181825"
    red: str = "#f38ba8"
    yellow: str = "#f9e2af"
    green: str = "#a6e3a1"

    def to_textual(self) -> Theme:
        return Theme(
            name=self.name,
            primary=self.mauve,
            secondary=self.pink,
            accent=self.pink,
            foreground=self.text,
            background=self.base,
            surface=self.mantle,
            panel=self.surface0,
            warning=self.yellow,
            error=self.red,
            success=self.green,
            dark=True,
            variables={
                "subtitle-color": self.subtext1,
                "dimmed-color": self.overlay0,
            },
        )


__all__ = ["MenuTheme"]
