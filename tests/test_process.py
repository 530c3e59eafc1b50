from __future__ import annotations

import pytest

from ssm import process as process_module


def test_replace_process_calls_execv(monkeypatch):
    recorded = {}

    class Replaced(Exception):
        pass

    def fake_execv(path, args):
        recorded["path"] = path
        recorded["args"] = args
        raise Replaced()

    monkeypatch.setattr(process_module.os, "execv", fake_execv)

    with pytest.raises(Replaced):
        process_module.replace_process("/usr/bin/ssh", ("ssh", "web"))

    assert recorded == {"path": "/usr/bin/ssh", "args": ["ssh", "web"]}


def test_replace_process_wraps_os_error(monkeypatch):
    def fake_execv(path, args):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(process_module.os, "execv", fake_execv)

    with pytest.raises(process_module.ExecError) as excinfo:
        process_module.replace_process("/usr/bin/ssh", ["ssh", "web"])

    assert "Permission denied" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, PermissionError)
