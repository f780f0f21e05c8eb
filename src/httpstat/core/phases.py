"""Turn cumulative curl timings into per-phase durations."""

from ..models import PhaseDurations, TimingReport


def _span(end: float, start: float) -> float:
    # Clock anomalies can make a later marker precede an earlier one
    return max(end - start, 0.0)


def compute_phases(report: TimingReport) -> PhaseDurations:
    """Compute DNS, TCP, TLS, server and transfer durations.

    Without a TLS handshake the TLS phase is zero and server processing is
    measured from the TCP connect.
    """
    tls_end = report.time_appconnect if report.has_tls else report.time_connect
    return PhaseDurations(
        dns=max(report.time_namelookup, 0.0),
        tcp=_span(report.time_connect, report.time_namelookup),
        tls=_span(report.time_appconnect, report.time_connect) if report.has_tls else 0.0,
        server=_span(report.time_starttransfer, tls_end),
        transfer=_span(report.time_total, report.time_starttransfer),
        total=max(report.time_total, 0.0),
        has_tls=report.has_tls,
    )


def throughput(size: float, seconds: float, fallback: float = 0.0) -> float:
    """Bytes per second over ``seconds``, or ``fallback`` for a zero duration."""
    if seconds <= 0:
        return fallback
    return size / seconds
