"""External tool integrations for httpstat.

- curl: builds and runs the curl command, captures timings, headers and body
"""

from .curl import build_curl_command, run_curl, validate_curl_args

__all__ = [
    "build_curl_command",
    "run_curl",
    "validate_curl_args",
]
