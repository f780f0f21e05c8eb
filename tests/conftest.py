"""Shared test fixtures for httpstat tests."""

import io
import json
import stat
from collections.abc import Callable
from pathlib import Path

import pytest
from rich.console import Console
from typer.testing import CliRunner

from httpstat.config import ENV_VARS

TLS_TIMINGS = {
    "time_namelookup": 0.012,
    "time_connect": 0.048,
    "time_appconnect": 0.068,
    "time_pretransfer": 0.069,
    "time_redirect": 0.0,
    "time_starttransfer": 0.198,
    "time_total": 0.238,
    "speed_download": 51200.0,
    "speed_upload": 0.0,
    "size_download": 2048,
    "remote_ip": "93.184.216.34",
    "remote_port": "443",
    "local_ip": "192.168.1.10",
    "local_port": "54321",
}

PLAIN_TIMINGS = {
    **TLS_TIMINGS,
    "time_appconnect": 0.0,
    "time_pretransfer": 0.049,
    "remote_port": "80",
}


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop any HTTPSTAT_* variables inherited from the developer's shell."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def tls_timings() -> dict:
    return dict(TLS_TIMINGS)


@pytest.fixture
def plain_timings() -> dict:
    return dict(PLAIN_TIMINGS)


@pytest.fixture
def make_stub(tmp_path: Path) -> Callable[[str], Path]:
    """Write an executable shell script standing in for curl."""

    def _make(body: str, name: str = "fake-curl") -> Path:
        path = tmp_path / name
        path.write_text("#!/bin/sh\n" + body)
        path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return path

    return _make


@pytest.fixture
def fake_curl(make_stub: Callable[[str], Path], tls_timings: dict) -> Path:
    """A curl stand-in that writes headers and body and prints TLS timings."""
    script = (
        r"""while [ $# -gt 0 ]; do
  case "$1" in
    -D) printf 'HTTP/1.1 200 OK\r\nContent-Type: text/plain\r\nX-Served-By: stub\r\n\r\n' > "$2"; shift ;;
    -o) printf 'hello from stub' > "$2"; shift ;;
  esac
  shift
done
cat <<'JSON'
"""
        + json.dumps(tls_timings)
        + "\nJSON\n"
    )
    return make_stub(script)


@pytest.fixture
def buffer_console() -> tuple[Console, io.StringIO]:
    """Plain (uncolored) console writing into a buffer."""
    output = io.StringIO()
    console = Console(file=output, color_system=None, highlight=False, soft_wrap=True)
    return console, output
