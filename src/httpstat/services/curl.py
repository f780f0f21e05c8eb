"""curl integration for httpstat."""

import logging
import shlex
import subprocess
import tempfile
from collections.abc import Sequence
from pathlib import Path

from ..config import RenderConfig
from ..constants import (
    CURL_SHORT_WITH_VALUE,
    CURL_TIMEOUT_EXIT_CODE,
    CURL_WRITE_OUT,
    DISALLOWED_FLAGS,
    EXIT_NOT_FOUND,
)
from ..errors import ConfigurationError, InvocationError, RequestTimeoutError
from ..models import CommandResult

logger = logging.getLogger(__name__)

_SHORT_DISALLOWED = {flag[1] for flag in DISALLOWED_FLAGS if not flag.startswith("--")}
_LONG_DISALLOWED = {flag for flag in DISALLOWED_FLAGS if flag.startswith("--")}


def _scan_short_cluster(cluster: str) -> tuple[bool, bool]:
    """Walk ``-abc`` letters up to the first one that takes a value.

    Returns:
        (disallowed letter seen, next argument is that letter's value)
    """
    for i, letter in enumerate(cluster[1:], start=1):
        if letter in _SHORT_DISALLOWED:
            # -o, -w and -D are followed by their value unless given inline
            return True, letter in CURL_SHORT_WITH_VALUE and i == len(cluster) - 1
        if letter in CURL_SHORT_WITH_VALUE:
            # -Hfoo carries its value inline; -H takes the next argument
            return False, i == len(cluster) - 1
    return False, False


def validate_curl_args(args: Sequence[str]) -> None:
    """Reject curl flags that conflict with the ones httpstat injects.

    Short clusters such as ``-Ls`` or ``-Lo out.html`` are checked letter by
    letter; values of short options (``-H -s``) are skipped.

    Raises:
        ConfigurationError: If any disallowed flag is present
    """
    rejected = []
    skip_value = False
    for arg in args:
        if skip_value:
            skip_value = False
            continue
        if arg.startswith("--"):
            if arg.split("=", 1)[0] in _LONG_DISALLOWED:
                rejected.append(arg)
        elif arg.startswith("-") and len(arg) > 1:
            disallowed, skip_value = _scan_short_cluster(arg)
            if disallowed:
                rejected.append(arg)
    if rejected:
        raise ConfigurationError(
            f"Disallowed curl option(s): {', '.join(rejected)} "
            f"(httpstat manages {', '.join(DISALLOWED_FLAGS)} itself)"
        )


def build_curl_command(
    url: str,
    args: Sequence[str],
    config: RenderConfig,
    header_path: Path,
    body_path: Path,
) -> list[str]:
    """Assemble the curl argv with the write-out template and output redirection."""
    return [
        config.curl_bin,
        "-w",
        CURL_WRITE_OUT,
        "-D",
        str(header_path),
        "-o",
        str(body_path),
        "-sS",
        "--max-time",
        str(config.timeout),
        *args,
        url,
    ]


def _temp_path(prefix: str) -> Path:
    with tempfile.NamedTemporaryFile(prefix=prefix, delete=False) as f:
        return Path(f.name)


def run_curl(url: str, args: Sequence[str], config: RenderConfig) -> CommandResult:
    """Run curl once and capture timings, headers and body.

    The body file is left on disk when ``config.save_body`` is set so the
    user can open it afterwards; its path is returned in the result. The
    header file is always removed.

    Args:
        url: Target URL
        args: Extra curl flags, forwarded verbatim
        config: Runtime configuration

    Returns:
        CommandResult with curl's exit status and captured output

    Raises:
        ConfigurationError: If a disallowed flag is present
        InvocationError: If curl is missing or fails without producing timings
        RequestTimeoutError: If curl runs longer than ``config.timeout``
    """
    validate_curl_args(args)

    header_path = _temp_path("httpstat-header-")
    body_path = _temp_path("httpstat-body-")
    keep_body = False
    cmd = build_curl_command(url, args, config, header_path, body_path)
    logger.debug("Executing: %s", shlex.join(cmd))

    try:
        try:
            proc = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=config.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise RequestTimeoutError(
                f"curl timed out after {config.timeout} seconds"
            ) from e
        except FileNotFoundError:
            raise InvocationError(
                f"curl executable not found: {config.curl_bin}", exit_code=EXIT_NOT_FOUND
            ) from None

        logger.debug("curl exited with %d", proc.returncode)
        logger.debug("Raw timing output: %s", proc.stdout)

        if proc.returncode == CURL_TIMEOUT_EXIT_CODE:
            raise RequestTimeoutError(f"curl timed out after {config.timeout} seconds")
        if proc.returncode != 0 and not proc.stdout.strip():
            raise InvocationError(
                f"curl failed: {proc.stderr.strip()}", exit_code=proc.returncode
            )

        headers = header_path.read_text(errors="replace") if header_path.exists() else ""
        body = body_path.read_bytes() if body_path.exists() else None
        keep_body = config.save_body

        return CommandResult(
            returncode=proc.returncode,
            stdout=proc.stdout,
            stderr=proc.stderr,
            headers=headers,
            body=body,
            body_path=body_path if keep_body else None,
        )
    finally:
        header_path.unlink(missing_ok=True)
        if not keep_body:
            body_path.unlink(missing_ok=True)
