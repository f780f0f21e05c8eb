"""Tests for httpstat configuration."""

import pytest
from pydantic import ValidationError

from httpstat.config import Layout, RenderConfig
from httpstat.errors import ConfigurationError


def test_defaults_from_empty_env():
    """No variables set should give the documented defaults."""
    config = RenderConfig.from_env({})

    assert config.show_body is False
    assert config.show_ip is True
    assert config.show_speed is False
    assert config.save_body is True
    assert config.curl_bin == "curl"
    assert config.debug is False
    assert config.timeout == 10
    assert config.layout is Layout.TIMELINE


def test_env_overrides():
    """Each variable should override its field."""
    config = RenderConfig.from_env(
        {
            "HTTPSTAT_SHOW_BODY": "true",
            "HTTPSTAT_SHOW_IP": "0",
            "HTTPSTAT_SHOW_SPEED": "yes",
            "HTTPSTAT_SAVE_BODY": "false",
            "HTTPSTAT_CURL_BIN": "/opt/curl/bin/curl",
            "HTTPSTAT_DEBUG": "1",
            "HTTPSTAT_TIMEOUT": "30",
            "HTTPSTAT_LAYOUT": "TABLE",
        }
    )

    assert config.show_body is True
    assert config.show_ip is False
    assert config.show_speed is True
    assert config.save_body is False
    assert config.curl_bin == "/opt/curl/bin/curl"
    assert config.debug is True
    assert config.timeout == 30
    assert config.layout is Layout.TABLE


def test_empty_values_use_defaults():
    """Blank variables should be ignored."""
    config = RenderConfig.from_env({"HTTPSTAT_TIMEOUT": "", "HTTPSTAT_CURL_BIN": "  "})
    assert config.timeout == 10
    assert config.curl_bin == "curl"


def test_reads_os_environ(monkeypatch):
    """Without an explicit mapping, os.environ is used."""
    monkeypatch.setenv("HTTPSTAT_SHOW_SPEED", "true")
    assert RenderConfig.from_env().show_speed is True


@pytest.mark.parametrize(
    ("var", "value"),
    [
        ("HTTPSTAT_SHOW_BODY", "maybe"),
        ("HTTPSTAT_TIMEOUT", "soon"),
        ("HTTPSTAT_TIMEOUT", "0"),
        ("HTTPSTAT_TIMEOUT", "-5"),
        ("HTTPSTAT_LAYOUT", "sparkline"),
    ],
)
def test_invalid_values_raise_configuration_error(var, value):
    """Invalid values should name the offending variable."""
    with pytest.raises(ConfigurationError, match=var):
        RenderConfig.from_env({var: value})


def test_config_is_immutable():
    """Config should not change after startup."""
    config = RenderConfig()
    with pytest.raises(ValidationError):
        config.show_body = True
