"""Unit tests for service cmd_stop."""

import pytest

from ccr.api.registry import increment_reference_count, read_pid, read_reference_count, write_pid
from ccr.api.service.cmd_stop import ALREADY_STOPPED_MESSAGE, STOPPED_MESSAGE, cmd_stop
from tests.unit.conftest import run_cmd

pytestmark = pytest.mark.service


def test_cmd_stop_nothing_running():
    result = run_cmd(cmd_stop)

    assert result.success is True
    assert result.result == ALREADY_STOPPED_MESSAGE
    assert result.output["stopped"] is False
    assert result.output["pid"] == -1


def test_cmd_stop_twice():
    run_cmd(cmd_stop)
    result = run_cmd(cmd_stop)
    assert result.success is True
    assert result.output["message"] == ALREADY_STOPPED_MESSAGE


def test_cmd_stop_stale_record(dead_pid):
    write_pid(dead_pid)
    increment_reference_count()

    result = run_cmd(cmd_stop)
    assert result.success is True
    assert result.result == ALREADY_STOPPED_MESSAGE
    assert result.output["pid"] == dead_pid
    assert read_pid() is None
    assert read_reference_count() == 0


def test_cmd_stop_running_service(sleeper):
    write_pid(sleeper.pid)

    result = run_cmd(cmd_stop)
    assert result.success is True
    assert result.result == STOPPED_MESSAGE
    assert result.output["stopped"] is True
    sleeper.wait(timeout=10)
    assert read_pid() is None


def test_cmd_stop_ignores_broken_config(ccr_home):
    (ccr_home / "config.json").write_text('{"unknown": 1}')
    result = run_cmd(cmd_stop)

    assert result.success is True
    assert result.output["warnings"]
