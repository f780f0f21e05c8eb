"""Timing models for curl's write-out report and the derived phases."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Phase(str, Enum):
    """Request phases in the order they happen."""

    DNS = "dns"
    TCP = "tcp"
    TLS = "tls"
    SERVER = "server"
    TRANSFER = "transfer"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def marker(self) -> str:
        """Name of the cumulative field that closes this phase."""
        return _MARKERS[self]


_LABELS = {
    Phase.DNS: "DNS Lookup",
    Phase.TCP: "TCP Connection",
    Phase.TLS: "TLS Handshake",
    Phase.SERVER: "Server Processing",
    Phase.TRANSFER: "Content Transfer",
}

_MARKERS = {
    Phase.DNS: "namelookup",
    Phase.TCP: "connect",
    Phase.TLS: "appconnect",
    Phase.SERVER: "starttransfer",
    Phase.TRANSFER: "total",
}


class TimingReport(BaseModel):
    """Cumulative timings reported by curl, in seconds from request start.

    Missing fields default to zero so older curl builds that omit a
    variable still produce a report. Unknown fields are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    time_namelookup: float = 0.0
    time_connect: float = 0.0
    time_appconnect: float = 0.0
    time_pretransfer: float = 0.0
    time_redirect: float = 0.0
    time_starttransfer: float = 0.0
    time_total: float = 0.0
    speed_download: float = Field(default=0.0, description="Average download speed, bytes/s")
    speed_upload: float = Field(default=0.0, description="Average upload speed, bytes/s")
    size_download: float = Field(default=0.0, description="Body bytes downloaded")
    remote_ip: str = ""
    remote_port: str = ""
    local_ip: str = ""
    local_port: str = ""

    @property
    def has_tls(self) -> bool:
        """True when curl completed a TLS handshake."""
        return self.time_appconnect > 0

    def cumulative(self, phase: Phase) -> float:
        """Elapsed seconds from request start to the end of ``phase``."""
        return getattr(self, f"time_{phase.marker}")


class PhaseDurations(BaseModel):
    """Per-phase durations in seconds. All values are non-negative."""

    model_config = ConfigDict(frozen=True)

    dns: float = Field(default=0.0, ge=0)
    tcp: float = Field(default=0.0, ge=0)
    tls: float = Field(default=0.0, ge=0)
    server: float = Field(default=0.0, ge=0)
    transfer: float = Field(default=0.0, ge=0)
    total: float = Field(default=0.0, ge=0)
    has_tls: bool = False

    def seconds(self, phase: Phase) -> float:
        return getattr(self, phase.value)

    def milliseconds(self, phase: Phase) -> int:
        """Duration of ``phase`` rounded to whole milliseconds."""
        return round(self.seconds(phase) * 1000)

    def visible_phases(self) -> list[Phase]:
        """Phases to display; TLS is left out for plain HTTP."""
        return [p for p in Phase if p is not Phase.TLS or self.has_tls]
