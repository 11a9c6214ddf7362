"""Weather report CLI application.

This module provides the command-line interface for the postal-code
weather report: fetching a batch of locations sequentially, concurrently
or both (to compare timings), and configuration utilities.
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Any, Final

import typer
import yaml
from pydantic import ValidationError

from zipweather.controller import ReportRun, WeatherReport
from zipweather.settings.user import DEFAULT_LOCATIONS, UserSettings
from zipweather.weather.batch import FetchMode

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Postal-code weather report CLI", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "zipweather.cli"


class ReportMode(str, Enum):
    SEQUENTIAL = "sequential"
    CONCURRENT = "concurrent"
    BOTH = "both"

    @property
    def fetch_modes(self) -> list[FetchMode]:
        if self is ReportMode.BOTH:
            return [FetchMode.SEQUENTIAL, FetchMode.CONCURRENT]
        return [FetchMode(self.value)]


# Options for the main command
LOCATIONS_ARGUMENT = typer.Argument(None, help="Postal codes (default: from config)")
CONFIG_OPTION = typer.Option(None, "--config", "-c", exists=True, dir_okay=False)
MODE_OPTION = typer.Option(ReportMode.BOTH, "--mode", "-m", help="Fetch strategy")
DETAIL_OPTION = typer.Option(False, "--detail", "-d", help="Print the full report")
WORKERS_OPTION = typer.Option(None, "--workers", "-w", min=1, help="Concurrent fetch cap")
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
DST_ARGUMENT = typer.Argument(..., help="Output config.yaml")


def _print_run(report: WeatherReport, run: ReportRun, full: bool) -> None:
    typer.echo(f"Elapsed time ({run.mode.value}): {run.elapsed_ms:.0f} ms")
    rendered = report.render(run, full=full)
    if rendered:
        typer.echo(rendered)
    for outcome in run.failures:
        assert outcome.error is not None
        typer.secho(
            f"{outcome.location_id}: {outcome.error.kind} {outcome.error}",
            fg=typer.colors.RED,
            err=True,
        )


@app.command()
def report(
    locations: list[str] | None = LOCATIONS_ARGUMENT,
    config: Path | None = CONFIG_OPTION,
    mode: ReportMode = MODE_OPTION,
    full: bool = DETAIL_OPTION,
    workers: int | None = WORKERS_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Fetch current weather for each location and print it."""
    try:
        weather_report = WeatherReport(config, max_workers=workers, debug=debug)
    except (FileNotFoundError, RuntimeError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    runs = weather_report.run_modes(locations, mode.fetch_modes)
    for run in runs:
        _print_run(weather_report, run, full)

    if all(not run.successes for run in runs):
        raise typer.Exit(code=1)


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    try:
        UserSettings.load(file)
        typer.echo("✅ Config valid")
    except RuntimeError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@config_app.command("wizard")
def wizard(dst: Path = DST_ARGUMENT):
    """Interactive prompt to create a config file."""
    typer.echo("Interactive config builder - press Enter for defaults.")

    while True:
        zips = typer.prompt("Postal codes (comma separated)", default=",".join(DEFAULT_LOCATIONS))
        data: dict[str, Any] = {
            "api_key": typer.prompt("OpenWeather API key", hide_input=True),
            "locations": [z.strip() for z in zips.split(",") if z.strip()],
        }
        timezone = typer.prompt("Timezone (blank for system)", default="", show_default=False)
        if timezone:
            data["timezone"] = timezone
        try:
            cfg = UserSettings(**data)
            break  # valid → exit loop
        except ValidationError as err:
            typer.secho("\nConfig error(s):", fg=typer.colors.RED, err=True)
            for e in err.errors():
                typer.secho(f"  • {e['loc'][0]} - {e['msg']}", fg=typer.colors.RED, err=True)
            typer.echo("Please re-enter the values.\n")

    dst.write_text(
        yaml.safe_dump(cfg.model_dump(exclude_none=True), sort_keys=False), encoding="utf-8"
    )
    typer.secho(f"Config written to {dst}", fg=typer.colors.GREEN)


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
