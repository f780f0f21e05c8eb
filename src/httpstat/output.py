"""Output formatting for httpstat.

Sections are printed in a fixed order, each one optional:
IP info, response headers, body, phase timings, throughput.
"""

from dataclasses import dataclass, field

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .config import Layout, RenderConfig
from .constants import BODY_PREVIEW_LIMIT
from .core.phases import throughput
from .models import CommandResult, Phase, PhaseDurations, TimingReport

PHASE_STYLES = {
    Phase.DNS: "cyan",
    Phase.TCP: "blue",
    Phase.TLS: "magenta",
    Phase.SERVER: "yellow",
    Phase.TRANSFER: "green",
}


def make_console(color: bool, stderr: bool = False) -> Console:
    """Create a console; ``color`` is decided once by the caller."""
    return Console(
        stderr=stderr,
        color_system="auto" if color else None,
        highlight=False,
        soft_wrap=True,
    )


def _ms(seconds: float) -> str:
    return f"{round(seconds * 1000)}ms"


@dataclass
class ReportPrinter:
    """Render a curl run to the terminal."""

    console: Console
    config: RenderConfig
    err_console: Console = field(default_factory=lambda: Console(stderr=True, highlight=False))

    def render(self, result: CommandResult, report: TimingReport, phases: PhaseDurations) -> None:
        """Print every enabled section."""
        if self.config.show_ip:
            self.print_connection_info(report)
        self.print_headers(result.headers)
        self.print_body(result)
        if self.config.layout is Layout.TABLE:
            self.print_timing_table(report, phases)
        else:
            self.print_timeline(report, phases)
        if self.config.show_speed:
            self.print_speed(report, phases)

    def print_connection_info(self, report: TimingReport) -> None:
        self.console.print(
            Text.assemble(
                ("IP Info:", "blue"),
                f" {report.local_ip}:{report.local_port}  ⇄  "
                f"{report.remote_ip}:{report.remote_port}",
            )
        )

    def print_headers(self, headers: str) -> None:
        """Print status lines in green, header names dim and values cyan."""
        for line in headers.splitlines():
            line = line.rstrip("\r")
            name, sep, value = line.partition(":")
            if sep and not line.startswith("HTTP/"):
                self.console.print(Text.assemble((name + sep, "bright_black"), (value, "cyan")))
            else:
                self.console.print(Text(line, style="green"))

    def print_body(self, result: CommandResult) -> None:
        if self.config.show_body and result.body:
            body = result.body.decode("utf-8", errors="replace")
            preview = Text(body[:BODY_PREVIEW_LIMIT])
            if len(body) > BODY_PREVIEW_LIMIT:
                preview.append("...", style="cyan")
            self.console.print(preview)
        elif result.body_path is not None:
            # Kept on disk for the user to inspect; never cleaned up here
            self.console.print(
                Text.assemble(("Body", "green"), f" stored in: {result.body_path}")
            )

    def timeline_lines(self, report: TimingReport, phases: PhaseDurations) -> list[Text]:
        """Build the bracket timeline.

        Each column is as wide as its title plus two. Cumulative markers are
        written so their colon lines up with the column's closing separator.
        """
        shown = phases.visible_phases()
        widths = [len(p.label) + 2 for p in shown]
        separators = []
        pos = 0
        for width in widths:
            pos += width + 1
            separators.append(pos)

        titles = Text(" " + " ".join(p.label.center(w) for p, w in zip(shown, widths)))

        bracket = Text("[")
        for i, (phase, width) in enumerate(zip(shown, widths)):
            bracket.append(f"{phases.milliseconds(phase)}ms".center(width), PHASE_STYLES[phase])
            bracket.append("]" if i == len(shown) - 1 else "|")

        ruler = [" "] * (separators[-1] + 1)
        for sep in separators:
            ruler[sep] = "|"

        lines = [Text(""), titles, bracket, Text("".join(ruler))]
        for i, phase in enumerate(shown):
            start = max(separators[i] - len(phase.marker), 0)
            value = _ms(report.cumulative(phase))
            line = Text(" " * start + phase.marker + ":")
            line.append(value, PHASE_STYLES[phase])
            cursor = start + len(phase.marker) + 1 + len(value)
            for sep in separators[i + 1 :]:
                if sep > cursor:
                    line.append(" " * (sep - cursor) + "|")
                    cursor = sep + 1
            lines.append(line)
        return lines

    def print_timeline(self, report: TimingReport, phases: PhaseDurations) -> None:
        for line in self.timeline_lines(report, phases):
            self.console.print(line)

    def print_timing_table(self, report: TimingReport, phases: PhaseDurations) -> None:
        table = Table(title="Timing Breakdown")
        table.add_column("Phase")
        table.add_column("Duration", justify="right")
        table.add_column("Cumulative", justify="right")
        for phase in phases.visible_phases():
            style = PHASE_STYLES[phase]
            table.add_row(
                Text(phase.label, style=style),
                Text(f"{phases.milliseconds(phase)}ms", style=style),
                f"{phase.marker}: {_ms(report.cumulative(phase))}",
            )
        table.add_row(Text("Total", style="bold"), Text(_ms(phases.total), style="bold"), "")
        self.console.print()
        self.console.print(table)

    def print_speed(self, report: TimingReport, phases: PhaseDurations) -> None:
        download = throughput(report.size_download, phases.transfer, report.speed_download)
        upload = report.speed_upload
        self.console.print(
            Text.assemble(
                ("Download:", "bright_green"),
                f" {download / 1024:.1f} KiB/s, ",
                ("Upload:", "bright_green"),
                f" {upload / 1024:.1f} KiB/s",
            )
        )

    def error(self, message: str) -> None:
        self.err_console.print(Text(f"Error: {message}", style="red"))
