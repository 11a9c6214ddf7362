# filepath: src/zipweather/controller.py
"""Core controller for the weather report."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from zipweather.settings import UserSettings
from zipweather.utils.formatting import detail, summary
from zipweather.utils.timing import timed
from zipweather.weather.api import WeatherAPI
from zipweather.weather.batch import BatchFetcher, FetchMode, FetchOutcome, WeatherFetcher

logger: Final = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportRun:
    """Outcomes of one batch together with its wall-clock cost."""

    mode: FetchMode
    elapsed_ms: float
    outcomes: list[FetchOutcome]

    @property
    def successes(self) -> list[FetchOutcome]:
        return [o for o in self.outcomes if o.ok]

    @property
    def failures(self) -> list[FetchOutcome]:
        return [o for o in self.outcomes if not o.ok]


class WeatherReport:
    """Main controller class for the weather report.

    Loads configuration, builds the API client and batch fetcher, runs
    one batch per requested mode under timing and renders the results.
    Dependencies can be injected for testing.
    """

    def __init__(
        self,
        config_path: Path | None = None,
        settings: UserSettings | None = None,
        weather_api: WeatherFetcher | None = None,
        max_workers: int | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the report controller.

        Args:
            config_path: Path to config.yaml (default search paths if None)
            settings: Already loaded settings; skips reading config_path
            weather_api: Optional custom single-location fetcher
            max_workers: Override for the configured concurrency cap
            debug: Enable debug logging

        Raises:
            ConfigurationError: If the API key or endpoint is missing
        """
        # Configure logging
        logging.basicConfig(
            level=logging.DEBUG if debug else logging.INFO,
            format="%(asctime)s [%(levelname)s] %(message)s",
        )

        self.config: UserSettings = settings or UserSettings.load(config_path)

        # Allow dependency injection or create defaults
        self.weather_api: WeatherFetcher = weather_api or WeatherAPI.from_settings(self.config)
        self.batch = BatchFetcher(
            self.weather_api,
            max_workers=max_workers or self.config.max_workers,
            batch_timeout=self.config.batch_timeout,
        )

    def run(
        self,
        locations: Sequence[str] | None = None,
        mode: FetchMode = FetchMode.SEQUENTIAL,
    ) -> ReportRun:
        """Fetch every location with one strategy and time the batch.

        Args:
            locations: Postal codes; the configured list when None or empty
            mode: Sequential or concurrent

        Returns:
            ReportRun with elapsed time and ordered outcomes
        """
        ids = list(locations or self.config.locations)
        elapsed_ms, outcomes = timed(lambda: self.batch.fetch_all(ids, mode))
        logger.info("Elapsed time (%s): %.0f ms", mode.value, elapsed_ms)
        for outcome in outcomes:
            if outcome.error is not None:
                logger.error(
                    "%s failed (%s): %s",
                    outcome.location_id,
                    outcome.error.kind,
                    outcome.error.message,
                )
        return ReportRun(mode, elapsed_ms, outcomes)

    def run_modes(
        self, locations: Sequence[str] | None, modes: Sequence[FetchMode]
    ) -> list[ReportRun]:
        return [self.run(locations, mode) for mode in modes]

    def render(self, run: ReportRun, full: bool = False) -> str:
        """Render every successful outcome of a run, in input order."""
        blocks = []
        for outcome in run.successes:
            record = outcome.unwrap()
            if full:
                blocks.append(
                    detail(record, self.config.timezone, self.config.time_format)
                )
            else:
                blocks.append(summary(record))
        return "\n\n".join(blocks) if full else "\n".join(blocks)
