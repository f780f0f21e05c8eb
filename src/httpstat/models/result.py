"""Result of a single curl invocation."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CommandResult:
    """Captured output of the curl process.

    Attributes:
        returncode: curl's exit status
        stdout: Write-out text (the timing report)
        stderr: curl's error output
        headers: Response status line(s) and headers dumped by ``-D``
        body: Response body bytes, if any were written
        body_path: Location of the retained body file, or None if it was removed
    """

    returncode: int
    stdout: str
    stderr: str
    headers: str = ""
    body: bytes | None = None
    body_path: Path | None = None
