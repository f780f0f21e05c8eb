"""Tests for the end-to-end pipeline."""

import json
from pathlib import Path

import pytest

from httpstat.config import RenderConfig
from httpstat.core.runner import run_httpstat
from httpstat.errors import ConfigurationError
from httpstat.output import ReportPrinter


def test_pipeline_renders_stub_response(buffer_console, fake_curl: Path) -> None:
    console, output = buffer_console
    config = RenderConfig(curl_bin=str(fake_curl), save_body=False)

    code = run_httpstat("https://example.com", [], config, ReportPrinter(console, config))

    text = output.getvalue()
    assert code == 0
    assert "HTTP/1.1 200 OK" in text
    assert "namelookup:12ms" in text
    assert "TLS Handshake" in text


def test_pipeline_returns_curl_status_for_failed_transfer(
    buffer_console, make_stub, tls_timings
) -> None:
    """A --fail style exit with timings still renders and reports curl's status."""
    console, output = buffer_console
    stub = make_stub("echo '" + json.dumps(tls_timings) + "'\nexit 22\n")
    config = RenderConfig(curl_bin=str(stub), save_body=False)

    code = run_httpstat(
        "https://example.com/missing", ["--fail"], config, ReportPrinter(console, config)
    )

    assert code == 22
    assert "total:238ms" in output.getvalue()


def test_pipeline_rejects_flag_before_running(buffer_console, make_stub, tmp_path: Path) -> None:
    console, output = buffer_console
    marker = tmp_path / "ran"
    stub = make_stub(f'touch "{marker}"\n')
    config = RenderConfig(curl_bin=str(stub))

    with pytest.raises(ConfigurationError):
        run_httpstat("https://example.com", ["--silent"], config, ReportPrinter(console, config))

    assert not marker.exists()
    assert output.getvalue() == ""
