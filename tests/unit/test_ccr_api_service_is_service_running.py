"""Unit tests for the liveness check."""

import os

import pytest

from ccr.api.registry import read_pid, write_pid
from ccr.api.service._pid_running import _pid_running
from ccr.api.service.get_service_state import get_service_state
from ccr.api.service.is_service_running import is_service_running
from ccr.api.service.ServiceState import ServiceState

pytestmark = pytest.mark.service


def test_pid_running_self():
    assert _pid_running(os.getpid()) is True


@pytest.mark.parametrize("pid", [0, -1])
def test_pid_running_non_positive(pid):
    assert _pid_running(pid) is False


def test_pid_running_dead(dead_pid):
    assert _pid_running(dead_pid) is False


def test_no_record_is_not_running():
    assert is_service_running() is False
    assert get_service_state() is ServiceState.STOPPED


def test_live_record_is_running():
    write_pid(os.getpid())
    assert is_service_running() is True
    assert get_service_state() is ServiceState.RUNNING


def test_stale_record_is_not_running_and_kept(dead_pid):
    write_pid(dead_pid)
    assert is_service_running() is False
    assert read_pid() == dead_pid


def test_malformed_record_is_not_running(ccr_home):
    (ccr_home / ".claude-code-router.pid").write_text("garbage")
    assert is_service_running() is False


def test_pid_running_beyond_pid_range():
    assert _pid_running(99999999999) is False


def test_oversized_record_is_not_running(ccr_home):
    (ccr_home / ".claude-code-router.pid").write_text("99999999999")
    assert is_service_running() is False
    assert get_service_state() is ServiceState.STOPPED
