"""CLI entry point for panmon.

Running `panmon` launches the dashboard against the configured endpoint.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from textual.logging import TextualHandler

from panmon import __version__
from panmon.models.state.config_manager import ConfigLoadError, ConfigManager

app = typer.Typer(
    name="panmon",
    help="Terminal dashboard for a Panchaea server",
    add_completion=False,
)

console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"panmon {__version__}")
        raise typer.Exit()


def configure_logging(log_file: Optional[Path], verbose: bool) -> None:
    """Route logs to a file, or to the Textual devtools console."""
    level = logging.DEBUG if verbose else logging.WARNING
    if log_file is not None:
        logging.basicConfig(
            filename=str(log_file),
            level=level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    else:
        logging.basicConfig(level=level, handlers=[TextualHandler()])


@app.command()
def main(
    endpoint: Optional[str] = typer.Option(
        None,
        "--endpoint",
        "-e",
        help="Status endpoint URL, e.g. http://host:8080/api",
    ),
    interval: Optional[float] = typer.Option(
        None,
        "--interval",
        "-i",
        help="Seconds to wait after each poll before the next one",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Settings JSON file",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Write logs to this file",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Launch the dashboard."""
    configure_logging(log_file, verbose)
    try:
        settings = ConfigManager.load(
            config,
            overrides={"endpoint": endpoint, "poll_interval": interval},
        )
    except ConfigLoadError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    from panmon.app import PanmonApp

    PanmonApp(settings=settings).run()


if __name__ == "__main__":
    app()
