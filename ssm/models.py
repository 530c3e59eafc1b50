from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Host:
    """A selectable Host block from the SSH config."""

    alias: str
    hostname: str = ""


@dataclass
class HostDetails:
    """Every directive recorded for a single Host block."""

    alias: str
    hostname: str = ""
    attributes: Dict[str, str] = field(default_factory=dict)

    def display_pairs(self) -> List[Tuple[str, str]]:
        pairs = dict(self.attributes)
        if "HostName" not in pairs and self.hostname:
            pairs["HostName"] = self.hostname
        return sorted(pairs.items())


@dataclass(frozen=True)
class MenuSelection:
    """Outcome of one menu run; ``alias`` is None when the user cancelled."""

    alias: Optional[str] = None

    @classmethod
    def cancelled(cls) -> "MenuSelection":
        return cls(None)

    @property
    def is_cancelled(self) -> bool:
        return self.alias is None

    def target(self) -> str:
        """Return the alias without any trailing annotation after a space."""
        if self.alias is None:
            raise ValueError("A cancelled selection has no target.")
        return self.alias.split(" ", 1)[0]


__all__ = ["Host", "HostDetails", "MenuSelection"]
