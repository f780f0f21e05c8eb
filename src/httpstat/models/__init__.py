"""Data models for httpstat.

- TimingReport: cumulative timings parsed from curl's write-out
- PhaseDurations: per-phase durations derived from a TimingReport
- CommandResult: exit status and captured streams of one curl run
"""

from .result import CommandResult
from .timing import Phase, PhaseDurations, TimingReport

__all__ = [
    "CommandResult",
    "Phase",
    "PhaseDurations",
    "TimingReport",
]
