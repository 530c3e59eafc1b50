from pathlib import Path

import pytest

SAMPLE_CONFIG = """\
# personal hosts
Host *
  User default

Host server1
  HostName 192.168.1.100
  user admin
  identityfile ~/.ssh/id_server1

Host server2
  HostName example.com

Host server3
  HostName test.com
"""


@pytest.fixture()
def sample_config(tmp_path) -> Path:
    path = tmp_path / "config"
    path.write_text(SAMPLE_CONFIG)
    return path


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    monkeypatch.delenv("TMUX", raising=False)
    monkeypatch.delenv("TMUX_PANE", raising=False)
    monkeypatch.delenv("EDITOR", raising=False)
    monkeypatch.delenv("SSM_CONFIG", raising=False)
