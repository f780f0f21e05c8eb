"""End-to-end httpstat pipeline: curl -> timings -> phases -> terminal."""

from collections.abc import Sequence

from ..config import RenderConfig
from ..errors import HttpstatError
from ..output import ReportPrinter
from ..services.curl import run_curl
from .extractor import extract_timing
from .phases import compute_phases


def run_httpstat(
    url: str,
    curl_args: Sequence[str],
    config: RenderConfig,
    printer: ReportPrinter,
) -> int:
    """Request ``url`` once and print the timing breakdown.

    Returns:
        curl's exit status (non-zero when a failed transfer still reported timings)

    Raises:
        HttpstatError: On any configuration, invocation, timeout or parse failure
    """
    result = run_curl(url, curl_args, config)
    try:
        report = extract_timing(result)
    except HttpstatError:
        # Nothing will be rendered, so the saved body would never be announced
        if result.body_path is not None:
            result.body_path.unlink(missing_ok=True)
        raise
    phases = compute_phases(report)
    printer.render(result, report, phases)
    return result.returncode
