"""Unit tests for service cmd_start."""

import os

import pytest

from ccr.api.registry import write_pid
from ccr.api.service.cmd_start import cmd_start
from ccr.api.service.Supervisor import Supervisor
from tests.unit.conftest import run_cmd

pytestmark = pytest.mark.service


def test_cmd_start_spawns(monkeypatch, ccr_home):
    calls = []

    def fake_start(self):
        calls.append(self.config.port)
        return 4242

    monkeypatch.setattr(Supervisor, "start", fake_start)
    result = run_cmd(cmd_start)

    assert result.success is True
    assert calls == [3456]
    assert result.output["pid"] == 4242
    assert result.output["log_path"] == str(ccr_home / "logs" / "service.log")
    assert "http://127.0.0.1:3456" in result.result


def test_cmd_start_already_running(monkeypatch):
    write_pid(os.getpid())

    def fail_start(self):
        raise AssertionError("must not spawn a second service")

    monkeypatch.setattr(Supervisor, "start", fail_start)
    result = run_cmd(cmd_start)

    assert result.success is True
    assert result.output["pid"] == os.getpid()
    assert result.output["warnings"] == ["service already running"]


def test_cmd_start_spawn_failure(monkeypatch):
    def boom(self):
        raise PermissionError("denied")

    monkeypatch.setattr(Supervisor, "start", boom)
    result = run_cmd(cmd_start)

    assert result.success is False
    assert result.result.startswith("Failed to start service:")
    assert result.output["pid"] == -1
    assert "denied" in result.output["errors"][0]


def test_cmd_start_invalid_config(ccr_home):
    (ccr_home / "config.json").write_text("{not json")
    result = run_cmd(cmd_start)

    assert result.success is False
    assert "Invalid JSON" in result.output["errors"][0]
