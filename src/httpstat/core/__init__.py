"""Core timing logic: report extraction and phase arithmetic."""

from .extractor import extract_timing, parse_timing_report
from .phases import compute_phases, throughput

__all__ = [
    "compute_phases",
    "extract_timing",
    "parse_timing_report",
    "throughput",
]
