"""Configuration management for httpstat.

Settings come from ``HTTPSTAT_*`` environment variables and are read once at
startup. The resulting :class:`RenderConfig` is passed explicitly to the
driver and the formatter.
"""

import os
from collections.abc import Mapping
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .constants import DEFAULT_TIMEOUT
from .errors import ConfigurationError


class Layout(str, Enum):
    """How the phase durations are drawn."""

    TIMELINE = "timeline"
    TABLE = "table"


# Environment variable -> RenderConfig field
ENV_VARS: dict[str, str] = {
    "HTTPSTAT_SHOW_BODY": "show_body",
    "HTTPSTAT_SHOW_IP": "show_ip",
    "HTTPSTAT_SHOW_SPEED": "show_speed",
    "HTTPSTAT_SAVE_BODY": "save_body",
    "HTTPSTAT_CURL_BIN": "curl_bin",
    "HTTPSTAT_DEBUG": "debug",
    "HTTPSTAT_TIMEOUT": "timeout",
    "HTTPSTAT_LAYOUT": "layout",
}


class RenderConfig(BaseModel):
    """Runtime options for a single httpstat invocation."""

    model_config = ConfigDict(frozen=True)

    show_body: bool = False
    show_ip: bool = True
    show_speed: bool = False
    save_body: bool = True
    curl_bin: str = Field(default="curl", min_length=1)
    debug: bool = False
    timeout: int = Field(default=DEFAULT_TIMEOUT, gt=0, description="Timeout in seconds")
    layout: Layout = Layout.TIMELINE

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "RenderConfig":
        """Build config from environment variables, falling back to defaults.

        Args:
            env: Mapping to read from (default: ``os.environ``)

        Raises:
            ConfigurationError: If a variable holds a value of the wrong type
        """
        env = os.environ if env is None else env
        values: dict[str, str] = {}
        for var, field in ENV_VARS.items():
            raw = env.get(var)
            if raw is None or raw.strip() == "":
                continue
            values[field] = raw.strip().lower() if field == "layout" else raw.strip()

        try:
            return cls.model_validate(values)
        except ValidationError as e:
            fields = {v: k for k, v in ENV_VARS.items()}
            problems = []
            for err in e.errors():
                field = str(err["loc"][0]) if err["loc"] else ""
                var = fields.get(field, field)
                problems.append(f"{var}={values.get(field)!r}: {err['msg']}")
            raise ConfigurationError(
                "Invalid environment configuration: " + "; ".join(problems)
            ) from None
