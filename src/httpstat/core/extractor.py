"""Parse curl's write-out timing report."""

import json
import logging

from pydantic import ValidationError

from ..errors import InvocationError, ParseError
from ..models import CommandResult, TimingReport

logger = logging.getLogger(__name__)


def parse_timing_report(text: str) -> TimingReport:
    """Decode the JSON object emitted by the write-out template.

    Args:
        text: curl stdout

    Returns:
        Parsed TimingReport; missing fields are zero

    Raises:
        ParseError: If the text is not a JSON object or holds non-numeric timings
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Malformed timing output: {e}") from e

    if not isinstance(data, dict):
        raise ParseError(f"Malformed timing output: expected an object, got {type(data).__name__}")

    try:
        return TimingReport.model_validate(data)
    except ValidationError as e:
        raise ParseError(f"Malformed timing output: {e}") from e


def extract_timing(result: CommandResult) -> TimingReport:
    """Get the timing report out of a curl run.

    A failed run (e.g. ``--fail`` on a 404) is still usable when curl got as
    far as reporting a total time.

    Raises:
        ParseError: If curl succeeded but the report is malformed
        InvocationError: If curl failed and produced no usable timings
    """
    if result.returncode == 0:
        return parse_timing_report(result.stdout)

    try:
        report = parse_timing_report(result.stdout)
    except ParseError:
        report = None

    if report is None or report.time_total <= 0:
        raise InvocationError(
            f"curl failed: {result.stderr.strip() or f'exit status {result.returncode}'}",
            exit_code=result.returncode,
        )

    logger.warning("curl exited with status %d: %s", result.returncode, result.stderr.strip())
    return report
