"""Batch retrieval of weather for many locations.

Two strategies produce the same ordered list of outcomes:

- sequential: one request at a time, in input order
- concurrent: every request submitted to a thread pool, results put back
  by their original index regardless of completion order

A failure for one location is recorded in its outcome and never stops
or cancels the others.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from concurrent.futures import ALL_COMPLETED, Future, ThreadPoolExecutor, wait
from dataclasses import dataclass
from enum import Enum
from typing import Final, Protocol

from .errors import BatchTimeoutError, WeatherAPIError
from .models import WeatherRecord

logger: Final = logging.getLogger(__name__)


class FetchMode(str, Enum):
    """Execution policy for a batch of fetches."""

    SEQUENTIAL = "sequential"
    CONCURRENT = "concurrent"


class WeatherFetcher(Protocol):
    """Anything that can fetch one location, e.g. WeatherAPI."""

    def fetch_weather(self, location_id: str) -> WeatherRecord: ...


@dataclass(frozen=True)
class FetchOutcome:
    """Result of fetching one location: a record or the error it raised."""

    index: int
    location_id: str
    record: WeatherRecord | None = None
    error: WeatherAPIError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> WeatherRecord:
        """Return the record, raising the captured error for failures."""
        if self.error is not None:
            raise self.error
        assert self.record is not None
        return self.record


class BatchFetcher:
    """Fetch weather for many locations with a chosen strategy.

    The fetcher passed in is shared by every worker thread and must not
    keep per-request state.
    """

    def __init__(
        self,
        api: WeatherFetcher,
        max_workers: int | None = None,
        batch_timeout: float | None = None,
    ) -> None:
        """Initialize the batch fetcher.

        Args:
            api: Single-location fetcher
            max_workers: Cap on concurrent requests (one per location if None)
            batch_timeout: Seconds to wait for a concurrent batch before
                reporting unfinished locations as timed out
        """
        if max_workers is not None and max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        if batch_timeout is not None and batch_timeout <= 0:
            raise ValueError("batch_timeout must be positive")
        self.api = api
        self.max_workers = max_workers
        self.batch_timeout = batch_timeout

    def fetch_all(
        self, location_ids: Sequence[str], mode: FetchMode = FetchMode.SEQUENTIAL
    ) -> list[FetchOutcome]:
        """Fetch every location and return outcomes in input order.

        Args:
            location_ids: Location identifiers, in the order results are wanted
            mode: Sequential or concurrent execution

        Returns:
            One FetchOutcome per identifier, same length and order as the input
        """
        ids = list(location_ids)
        if not ids:
            return []
        mode = FetchMode(mode)
        if mode is FetchMode.CONCURRENT:
            outcomes = self.fetch_concurrent(ids)
        else:
            outcomes = self.fetch_sequential(ids)

        failed = sum(1 for o in outcomes if not o.ok)
        if failed:
            logger.info("%d of %d locations failed (%s)", failed, len(ids), mode.value)
        return outcomes

    def fetch_sequential(self, location_ids: Sequence[str]) -> list[FetchOutcome]:
        return [self._fetch_one(i, loc) for i, loc in enumerate(location_ids)]

    def fetch_concurrent(self, location_ids: Sequence[str]) -> list[FetchOutcome]:
        """Fan out to a thread pool and reassemble results by index."""
        count = len(location_ids)
        workers = min(self.max_workers or count, count)
        outcomes: list[FetchOutcome | None] = [None] * count

        pool = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="zipweather")
        futures: dict[Future[FetchOutcome], tuple[int, str]] = {
            pool.submit(self._fetch_one, i, loc): (i, loc)
            for i, loc in enumerate(location_ids)
        }
        pending: set[Future[FetchOutcome]] = set()
        try:
            done, pending = wait(
                futures, timeout=self.batch_timeout, return_when=ALL_COMPLETED
            )
            for future in done:
                outcome = future.result()
                outcomes[outcome.index] = outcome
            for future in pending:
                future.cancel()
                index, loc = futures[future]
                logger.warning("Batch timeout reached before %s finished", loc)
                outcomes[index] = FetchOutcome(
                    index, loc, error=BatchTimeoutError(loc, self.batch_timeout or 0)
                )
        finally:
            # stragglers past the deadline are left to finish on their own
            pool.shutdown(wait=not pending, cancel_futures=True)

        return [o for o in outcomes if o is not None]

    def _fetch_one(self, index: int, location_id: str) -> FetchOutcome:
        logger.debug(
            "Fetching %s on %s", location_id, threading.current_thread().name
        )
        try:
            record = self.api.fetch_weather(location_id)
        except WeatherAPIError as err:
            return FetchOutcome(index, location_id, error=err)
        return FetchOutcome(index, location_id, record=record)
