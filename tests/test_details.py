from __future__ import annotations

import pytest

from ssm.config import ConfigReadError, get_host_details, get_ssh_hosts, parse_host_details
from ssm.core.directives import canonical_key, split_directive
from ssm.models import Host, HostDetails
from ssm.ui.detail_dialog import format_host_details


def test_get_host_details_collects_canonical_keys(sample_config):
    details = get_host_details(Host("server1", "192.168.1.100"), sample_config)

    assert details.alias == "server1"
    assert details.attributes == {
        "HostName": "192.168.1.100",
        "User": "admin",
        "IdentityFile": "~/.ssh/id_server1",
    }


def test_get_host_details_missing_file(tmp_path):
    with pytest.raises(ConfigReadError):
        get_host_details(Host("server1"), tmp_path / "missing")


def test_get_host_details_unknown_alias_is_empty(sample_config):
    details = get_host_details(Host("gone", "gone.example"), sample_config)

    assert details.attributes == {}
    assert details.hostname == "gone.example"


def test_lookup_matches_alias_exactly():
    lines = [
        "Host web2",
        "  HostName web2.example",
        "Host web",
        "  HostName web.example",
        "  Port 2222",
    ]

    assert parse_host_details(lines, "web") == {"HostName": "web.example", "Port": "2222"}


def test_lookup_stops_at_next_block():
    lines = [
        "Host app",
        "  User deploy",
        "Match host *.internal",
        "  User root",
        "Host other",
        "  User nobody",
    ]

    assert parse_host_details(lines, "app") == {"User": "deploy"}


def test_repeated_block_uses_last_occurrence():
    lines = [
        "Host db",
        "  HostName old.example",
        "  User legacy",
        "Host x",
        "  HostName x.example",
        "Host db",
        "  HostName new.example",
    ]

    assert parse_host_details(lines, "db") == {"HostName": "new.example"}


def test_details_agree_with_host_list_for_repeated_block(tmp_path):
    path = tmp_path / "config"
    path.write_text("Host db\n  HostName old.example\nHost x\nHost db\n  HostName new.example\n")

    [host, _] = get_ssh_hosts(path)
    details = get_host_details(host, path)

    assert host == Host("db", "new.example")
    assert details.display_pairs() == [("HostName", "new.example")]


def test_lookup_of_empty_block_returns_empty_mapping():
    assert parse_host_details(["Host bare", "Host next", "  User x"], "bare") == {}


def test_lookup_without_block_returns_none():
    assert parse_host_details(["Host other", "  User x"], "app") is None


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("hostname", "HostName"),
        ("IDENTITYFILE", "IdentityFile"),
        ("proxyjump", "ProxyJump"),
        ("forwardx11", "ForwardX11"),
        ("somethingnew", "Somethingnew"),
    ],
)
def test_canonical_key(raw, expected):
    assert canonical_key(raw) == expected


def test_split_directive_skips_comments_and_short_lines():
    assert split_directive("  # Host x") == (None, None)
    assert split_directive("Host") == (None, None)
    assert split_directive("  ProxyCommand  ssh -W %h:%p bastion ") == (
        "proxycommand",
        "ssh -W %h:%p bastion",
    )


def test_format_host_details_sorts_and_aligns():
    details = HostDetails(
        alias="app",
        hostname="app.example",
        attributes={"User": "deploy", "IdentityFile": "~/.ssh/app", "Port": "22"},
    )

    rendered = format_host_details(details)

    assert rendered.splitlines() == [
        "app",
        "",
        "HostName        app.example",
        "IdentityFile    ~/.ssh/app",
        "Port            22",
        "User            deploy",
    ]


def test_format_host_details_keeps_scanned_hostname():
    details = HostDetails(alias="app", hostname="stale", attributes={"HostName": "fresh"})

    assert details.display_pairs() == [("HostName", "fresh")]


def test_format_host_details_without_hostname():
    details = HostDetails(alias="bare")

    assert details.display_pairs() == []
    assert format_host_details(details) == "bare\n\n"
