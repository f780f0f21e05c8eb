"""httpstat CLI: curl timing breakdown."""

import sys

import typer

from httpstat import __version__

from .config import RenderConfig
from .core.runner import run_httpstat
from .errors import HttpstatError
from .logging import configure_logging
from .output import ReportPrinter, make_console

ENV_HELP = """
Environment options:

  HTTPSTAT_SHOW_BODY=true       Show response body

  HTTPSTAT_SHOW_IP=false        Disable IP info

  HTTPSTAT_SHOW_SPEED=true      Show download and upload speed

  HTTPSTAT_SAVE_BODY=false      Don't keep the body in a temp file

  HTTPSTAT_CURL_BIN=/my/curl    Use custom curl

  HTTPSTAT_DEBUG=true           Enable debug log

  HTTPSTAT_TIMEOUT=10           Request timeout in seconds

  HTTPSTAT_LAYOUT=table         Show timings as a table instead of a timeline
"""


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"httpstat {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="httpstat",
    help="Visualize curl request timings",
    no_args_is_help=True,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.command(
    epilog=ENV_HELP,
    no_args_is_help=True,
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def main(
    url: str = typer.Argument(..., help="URL to request"),
    curl_args: list[str] | None = typer.Argument(
        None,
        metavar="[CURL_OPTIONS]...",
        help="Extra options passed through to curl",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Request URL with curl and show where the time went."""
    color = sys.stdout.isatty()
    printer_console = make_console(color)
    err_console = make_console(sys.stderr.isatty(), stderr=True)

    try:
        config = RenderConfig.from_env()
    except HttpstatError as e:
        err_console.print(f"Error: {e}", style="red", markup=False)
        raise typer.Exit(e.exit_code) from None

    configure_logging(debug=config.debug, no_color=not color)
    printer = ReportPrinter(console=printer_console, config=config, err_console=err_console)

    try:
        returncode = run_httpstat(url, curl_args or [], config, printer)
    except HttpstatError as e:
        printer.error(str(e))
        raise typer.Exit(e.exit_code) from None

    if returncode != 0:
        raise typer.Exit(returncode)
