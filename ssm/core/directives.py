"""Directive name handling for ssh_config keywords."""

from typing import Dict, List, Optional, Tuple

# Lower-cased keyword -> capitalization used in ssh_config(5).
CANONICAL_KEYS: Dict[str, str] = {
    "addkeystoagent": "AddKeysToAgent",
    "addressfamily": "AddressFamily",
    "batchmode": "BatchMode",
    "bindaddress": "BindAddress",
    "certificatefile": "CertificateFile",
    "checkhostip": "CheckHostIP",
    "ciphers": "Ciphers",
    "compression": "Compression",
    "connectionattempts": "ConnectionAttempts",
    "connecttimeout": "ConnectTimeout",
    "controlmaster": "ControlMaster",
    "controlpath": "ControlPath",
    "controlpersist": "ControlPersist",
    "dynamicforward": "DynamicForward",
    "forwardagent": "ForwardAgent",
    "forwardx11": "ForwardX11",
    "forwardx11trusted": "ForwardX11Trusted",
    "globalknownhostsfile": "GlobalKnownHostsFile",
    "hostkeyalgorithms": "HostKeyAlgorithms",
    "hostkeyalias": "HostKeyAlias",
    "hostname": "HostName",
    "identitiesonly": "IdentitiesOnly",
    "identityagent": "IdentityAgent",
    "identityfile": "IdentityFile",
    "localcommand": "LocalCommand",
    "localforward": "LocalForward",
    "loglevel": "LogLevel",
    "passwordauthentication": "PasswordAuthentication",
    "permitlocalcommand": "PermitLocalCommand",
    "port": "Port",
    "preferredauthentications": "PreferredAuthentications",
    "proxycommand": "ProxyCommand",
    "proxyjump": "ProxyJump",
    "pubkeyauthentication": "PubkeyAuthentication",
    "remotecommand": "RemoteCommand",
    "remoteforward": "RemoteForward",
    "requesttty": "RequestTTY",
    "sendenv": "SendEnv",
    "serveralivecountmax": "ServerAliveCountMax",
    "serveraliveinterval": "ServerAliveInterval",
    "setenv": "SetEnv",
    "stricthostkeychecking": "StrictHostKeyChecking",
    "tcpkeepalive": "TCPKeepAlive",
    "updatehostkeys": "UpdateHostKeys",
    "user": "User",
    "userknownhostsfile": "UserKnownHostsFile",
    "visualhostkey": "VisualHostKey",
}

# Directives that open a new block.
BLOCK_KEYS = frozenset({"host", "match"})


def canonical_key(key: str) -> str:
    """
    Return the conventional capitalization of an ssh_config keyword.

    Args:
        key: Keyword as written in the file, in any case

    Returns:
        The known spelling, or a title-cased fallback for unknown keywords

    Example:
        "identityfile" -> "IdentityFile", "somethingnew" -> "Somethingnew"
    """
    lowered = key.lower()
    known = CANONICAL_KEYS.get(lowered)
    if known is not None:
        return known
    return lowered.title()


def split_directive(line: str) -> Tuple[Optional[str], Optional[str]]:
    """Split a config line into (lower-cased key, value).

    Comment lines and lines with fewer than two tokens yield (None, None).
    """
    stripped = line.strip()
    if stripped.startswith("#"):
        return None, None
    parts: List[str] = stripped.split()
    if len(parts) < 2:
        return None, None
    return parts[0].lower(), " ".join(parts[1:])
