from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .core.directives import BLOCK_KEYS, canonical_key, split_directive
from .models import Host, HostDetails

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("~/.ssh/config")
CONFIG_PATH_ENV = "SSM_CONFIG"
WILDCARD_HOST = "*"


class ConfigReadError(Exception):
    """Raised when the SSH config cannot be opened or read."""


def default_config_path() -> Path:
    """Return the SSH config to read, honouring the SSM_CONFIG override."""
    override = os.environ.get(CONFIG_PATH_ENV)
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH.expanduser()


def _resolve(path: Optional[Path]) -> Path:
    if path is None:
        return default_config_path()
    return Path(path).expanduser()


def _read_lines(path: Path) -> List[str]:
    """Read the whole file; undecodable bytes become U+FFFD, I/O failures ConfigReadError."""
    try:
        with path.open("r", encoding="utf-8", errors="replace") as handle:
            return handle.read().splitlines()
    except OSError as exc:
        raise ConfigReadError(f"failed to read SSH config file {str(path)!r}: {exc}") from exc


def parse_hosts(lines: Iterable[str]) -> Dict[str, Host]:
    """Scan config lines and map every non-wildcard Host alias to its HostName."""
    hostnames: Dict[str, str] = {}
    current: Optional[str] = None

    for line in lines:
        key, value = split_directive(line)
        if key is None or value is None:
            continue

        if key == "host":
            if value == WILDCARD_HOST:
                current = None
                continue
            current = value
            hostnames[current] = ""
            continue

        if key == "match":
            current = None
            continue

        if current is not None and key == "hostname":
            hostnames[current] = value

    return {alias: Host(alias=alias, hostname=hostname) for alias, hostname in hostnames.items()}


def get_ssh_hosts(path: Optional[Path] = None) -> List[Host]:
    """Load the hosts of the given SSH config, sorted by alias."""
    resolved = _resolve(path)
    hosts = parse_hosts(_read_lines(resolved))
    logger.debug("Read %d host(s) from %s", len(hosts), resolved)
    return sorted(hosts.values(), key=lambda host: host.alias)


def parse_host_details(lines: Iterable[str], alias: str) -> Optional[Dict[str, str]]:
    """Collect the directives of the Host block named exactly ``alias``.

    Returns None when no such block exists. A repeated block replaces the
    earlier one, matching parse_hosts.
    """
    details: Optional[Dict[str, str]] = None
    inside = False

    for line in lines:
        key, value = split_directive(line)
        if key is None or value is None:
            continue

        if key in BLOCK_KEYS:
            inside = key == "host" and value == alias
            if inside:
                details = {}
            continue

        if inside and details is not None:
            details[canonical_key(key)] = value

    return details


def get_host_details(host: Host, path: Optional[Path] = None) -> HostDetails:
    """Re-read the config and return every directive recorded for ``host``."""
    resolved = _resolve(path)
    attributes = parse_host_details(_read_lines(resolved), host.alias)
    if attributes is None:
        logger.debug("No Host block named %r in %s", host.alias, resolved)
        attributes = {}
    return HostDetails(alias=host.alias, hostname=host.hostname, attributes=attributes)


__all__ = [
    "CONFIG_PATH_ENV",
    "ConfigReadError",
    "DEFAULT_CONFIG_PATH",
    "default_config_path",
    "get_host_details",
    "get_ssh_hosts",
    "parse_host_details",
    "parse_hosts",
]
