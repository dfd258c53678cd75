"""Tests for ccr/cli/__init__.py - CLI entry point and dispatch."""

import importlib
import io
import json
import os
from contextlib import redirect_stderr, redirect_stdout

import pytest

from ccr.api.registry import read_reference_count, write_pid
from tests.unit.conftest import FakeStdin

pytestmark = pytest.mark.cli

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 8
JPEG = b"\xff\xd8\xff\xe0" + b"\x00" * 8

cmd_code_module = importlib.import_module("ccr.api.code.cmd_code")
cmd_image_module = importlib.import_module("ccr.api.code.cmd_image")


def run_cli(args, stdin: bytes = b"", tty: bool = True, monkeypatch=None):
    """Execute CLI command and capture stdout/stderr."""
    from ccr.cli import main

    monkeypatch.setattr("sys.stdin", FakeStdin(stdin, tty=tty))
    out_buf = io.StringIO()
    err_buf = io.StringIO()
    with redirect_stdout(out_buf), redirect_stderr(err_buf):
        rc = main(args)
    return rc, out_buf.getvalue(), err_buf.getvalue()


class FakeResponse:
    status_code = 200
    ok = True
    reason = "OK"
    text = ""

    def json(self):
        return {"choices": [{"message": {"content": "a diagram"}}]}


@pytest.fixture
def image_posts(monkeypatch):
    calls = []

    def fake_post(url, json=None, timeout=None):
        calls.append({"url": url, "json": json})
        return FakeResponse()

    monkeypatch.setattr(cmd_image_module.requests, "post", fake_post)
    return calls


def test_no_args_prints_help_and_fails(monkeypatch):
    rc, out, _err = run_cli([], monkeypatch=monkeypatch)
    assert rc == 1
    assert "Usage: ccr [command]" in out


def test_unknown_command_prints_help_and_fails(monkeypatch):
    rc, out, _err = run_cli(["frobnicate"], monkeypatch=monkeypatch)
    assert rc == 1
    assert "Commands:" in out


@pytest.mark.parametrize("arg", ["-h", "help"])
def test_help(monkeypatch, arg):
    rc, out, _err = run_cli([arg], monkeypatch=monkeypatch)
    assert rc == 0
    assert "ccr code" in out


@pytest.mark.parametrize("arg", ["-v", "version"])
def test_version(monkeypatch, arg):
    rc, out, _err = run_cli([arg], monkeypatch=monkeypatch)
    assert rc == 0
    assert out.startswith("claude-code-router version: ")


def test_stop_when_nothing_running(monkeypatch):
    rc, out, err = run_cli(["stop"], monkeypatch=monkeypatch)
    assert rc == 0
    assert "may have already been stopped" in err
    assert "stopped: false" in out


def test_stop_clears_stale_record(monkeypatch, dead_pid, ccr_home):
    write_pid(dead_pid)
    rc, _out, _err = run_cli(["stop"], monkeypatch=monkeypatch)
    assert rc == 0
    assert not (ccr_home / ".claude-code-router.pid").exists()


def test_status_json_display(monkeypatch):
    write_pid(os.getpid())
    rc, out, _err = run_cli(["--display", "json", "status"], monkeypatch=monkeypatch)
    assert rc == 0
    body = json.loads(out)
    assert body["state"] == "running"
    assert body["pid"] == os.getpid()


def test_display_option_before_help(monkeypatch):
    rc, out, _err = run_cli(["-d", "json", "help"], monkeypatch=monkeypatch)
    assert rc == 0
    assert "Usage: ccr [command]" in out


def test_piped_png_routes_to_image(monkeypatch, image_posts):
    rc, out, _err = run_cli([], stdin=PNG, tty=False, monkeypatch=monkeypatch)
    assert rc == 0
    assert len(image_posts) == 1
    assert image_posts[0]["url"].endswith("/upload-image")
    assert image_posts[0]["json"]["mimeType"] == "image/png"
    assert json.loads(out)["choices"][0]["message"]["content"] == "a diagram"


def test_piped_image_takes_priority_over_command(monkeypatch, image_posts):
    rc, _out, _err = run_cli(["stop"], stdin=JPEG, tty=False, monkeypatch=monkeypatch)
    assert rc == 0
    assert image_posts[0]["json"]["mimeType"] == "image/jpeg"


def test_piped_text_falls_through_to_command(monkeypatch, image_posts):
    rc, _out, err = run_cli(["stop"], stdin=b"hello\n", tty=False, monkeypatch=monkeypatch)
    assert rc == 0
    assert image_posts == []
    assert "may have already been stopped" in err


def test_code_end_to_end(monkeypatch):
    """One spawn, one readiness wait, one forward carrying the user's arguments."""
    events = []

    class FakeSupervisor:
        def __init__(self, config):
            pass

        def spawn_launcher(self):
            events.append("spawn")
            return 1234

        def wait_until_ready(self, timeout_ms=None, initial_delay_ms=None):
            events.append("wait")
            return True

    def fake_execute(args, config):
        events.append(("forward", args))
        return 0

    monkeypatch.setattr(cmd_code_module, "Supervisor", FakeSupervisor)
    monkeypatch.setattr(cmd_code_module, "is_service_running", lambda: False)
    monkeypatch.setattr(cmd_code_module, "execute_code_command", fake_execute)

    rc, _out, err = run_cli(["code", "hello"], monkeypatch=monkeypatch)
    assert rc == 0
    assert events == ["spawn", "wait", ("forward", ["hello"])]
    assert "Service not running, starting service..." in err
    assert read_reference_count() == 0


def test_code_forwards_program_exit_code(monkeypatch):
    monkeypatch.setattr(cmd_code_module, "is_service_running", lambda: True)
    monkeypatch.setattr(cmd_code_module, "execute_code_command", lambda args, config: 7)

    rc, _out, _err = run_cli(["code", "--print", "x"], monkeypatch=monkeypatch)
    assert rc == 7


def test_stop_clears_oversized_record(monkeypatch, ccr_home):
    (ccr_home / ".claude-code-router.pid").write_text("99999999999")
    rc, _out, err = run_cli(["stop"], monkeypatch=monkeypatch)
    assert rc == 0
    assert "may have already been stopped" in err
    assert not (ccr_home / ".claude-code-router.pid").exists()


@pytest.mark.parametrize(
    ("argv", "expected"),
    [
        (["-d", "json", "status"], "status"),
        (["--display", "yaml", "stop"], "stop"),
        (["--display=json", "code", "x"], "code"),
        (["-d", "json"], None),
    ],
)
def test_find_command_skips_display_option(argv, expected):
    from ccr.cli import _find_command

    assert _find_command(argv) == expected
