"""StyleAggregator: fetches external style sheets concurrently and joins them in request order."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass

from queryback.collect.collector import CollectedSources
from queryback.fetch.local import StyleFetcher
from queryback.model.diagnostic import FETCH_FAILURE, Diagnostic, Severity

__all__ = ["AggregationResult", "FetchOutcome", "StyleAggregator"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchOutcome:
    """What one external locator produced."""

    locator: str
    text: str | None = None
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class AggregationResult:
    """The combined style text of one run plus what happened to each fetch."""

    combined_text: str
    outcomes: tuple[FetchOutcome, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def failed_count(self) -> int:
        return sum(1 for o in self.outcomes if not o.succeeded)


class _FanIn:
    """Join point for one run's fetches.

    Holds the pending count; every finished fetch decrements it once and
    the last one resolves ``future`` with the outcomes in request order.
    """

    def __init__(self, inline_text: str, locators: tuple[str, ...]) -> None:
        self.inline_text = inline_text
        self.locators = locators
        self.future: Future[AggregationResult] = Future()
        self._outcomes: list[FetchOutcome | None] = [None] * len(locators)
        self._pending = len(locators)
        self._lock = threading.Lock()

    def arrive(self, index: int, outcome: FetchOutcome) -> None:
        with self._lock:
            if self._outcomes[index] is not None:
                return
            self._outcomes[index] = outcome
            self._pending -= 1
            done = self._pending == 0
        if not done:
            return
        try:
            result = self._combine()
        except Exception as exc:
            self.future.set_exception(exc)
        else:
            self.future.set_result(result)

    def _combine(self) -> AggregationResult:
        outcomes = tuple(o for o in self._outcomes if o is not None)
        diagnostics = tuple(
            Diagnostic(
                rule=FETCH_FAILURE,
                severity=Severity.WARNING,
                message=f"Could not fetch style sheet: {o.error}",
                locator=o.locator,
            )
            for o in outcomes
            if not o.succeeded
        )
        parts = [self.inline_text]
        parts.extend(o.text for o in outcomes if o.text)
        return AggregationResult(
            combined_text="".join(parts),
            outcomes=outcomes,
            diagnostics=diagnostics,
        )


class StyleAggregator:
    """Combines inline text with fetched external style sheets.

    Fetches run concurrently on a thread pool. Failures are best effort:
    a failed fetch contributes no text and a ``fetch_failure`` diagnostic,
    and the join still completes once every fetch has finished.
    """

    def __init__(self, fetcher: StyleFetcher, max_workers: int = 8) -> None:
        self.fetcher = fetcher
        self.max_workers = max_workers

    def fetch_all(self, collected: CollectedSources) -> Future[AggregationResult]:
        """Start every fetch and return a future for the combined result.

        With no external locators the returned future is already resolved.
        """
        locators = collected.external_locators
        fan_in = _FanIn(collected.inline_text, locators)
        if not locators:
            fan_in.future.set_result(AggregationResult(combined_text=collected.inline_text))
            return fan_in.future

        logger.debug("Fetching %d external style sheet(s)", len(locators))
        pool = ThreadPoolExecutor(
            max_workers=min(self.max_workers, len(locators)),
            thread_name_prefix="queryback-fetch",
        )
        for index, locator in enumerate(locators):
            task = pool.submit(self.fetcher.fetch, locator)
            task.add_done_callback(self._on_done(fan_in, index, locator))
        pool.shutdown(wait=False)
        return fan_in.future

    def aggregate(self, collected: CollectedSources) -> AggregationResult:
        """Blocking form of :meth:`fetch_all`."""
        return self.fetch_all(collected).result()

    @staticmethod
    def _on_done(fan_in: _FanIn, index: int, locator: str):
        def callback(task: Future[str]) -> None:
            try:
                text = task.result()
            except Exception as exc:
                logger.warning("Failed to fetch %s: %s", locator, exc)
                fan_in.arrive(index, FetchOutcome(locator=locator, error=str(exc) or type(exc).__name__))
            else:
                if text is not None and not isinstance(text, str):
                    logger.warning("Fetcher returned %s for %s, expected text", type(text).__name__, locator)
                    fan_in.arrive(
                        index,
                        FetchOutcome(locator=locator, error=f"expected text, got {type(text).__name__}"),
                    )
                    return
                fan_in.arrive(index, FetchOutcome(locator=locator, text=text or ""))

        return callback
