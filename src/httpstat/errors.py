"""httpstat errors.

Every error is terminal for the current invocation. The CLI prints the
message and exits with ``exit_code``.
"""

from .constants import (
    EXIT_CONFIG_ERROR,
    EXIT_INVOCATION_ERROR,
    EXIT_PARSE_ERROR,
    EXIT_TIMEOUT,
)


class HttpstatError(Exception):
    """Base exception for httpstat failures."""

    exit_code: int = 1


class ConfigurationError(HttpstatError):
    """Raised for a disallowed curl flag or an invalid environment value."""

    exit_code = EXIT_CONFIG_ERROR


class InvocationError(HttpstatError):
    """Raised when curl is missing or fails without usable timing data."""

    def __init__(self, message: str, exit_code: int = EXIT_INVOCATION_ERROR) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class RequestTimeoutError(HttpstatError, TimeoutError):
    """Raised when curl exceeds the configured timeout."""

    exit_code = EXIT_TIMEOUT


class ParseError(HttpstatError):
    """Raised when the write-out timing report is malformed."""

    exit_code = EXIT_PARSE_ERROR
