"""Queryback pipeline: collect, aggregate, parse and publish breakpoints for one document."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable
from concurrent.futures import Future
from dataclasses import dataclass, field

from queryback.collect.collector import collect_sources
from queryback.collect.html import discover_styles
from queryback.config import QuerybackConfig
from queryback.events.bus import EventBus
from queryback.events.types import (
    BreakpointEntered,
    BreakpointExited,
    ExtractionCompleted,
    ExtractionFailed,
    ExtractionStarted,
    StylesAggregated,
)
from queryback.fetch.aggregator import AggregationResult, StyleAggregator
from queryback.fetch.local import StyleFetcher, default_fetcher
from queryback.matcher import MatchDelta, ViewportMatcher
from queryback.model.constraint import Constraint
from queryback.model.diagnostic import EMPTY_INPUT, PIPELINE_ERROR, Diagnostic, Severity
from queryback.model.source import StyleHandle
from queryback.parser.document import parse_breakpoints
from queryback.registry import BreakpointRegistry

__all__ = ["ExtractionResult", "Queryback"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of one extraction run.

    ``stale`` is set when a newer run started before this one finished;
    a stale result never reaches the registry.
    """

    run: int
    generation: int
    breakpoints: dict[str, tuple[Constraint, ...]] = field(default_factory=dict)
    diagnostics: tuple[Diagnostic, ...] = ()
    stale: bool = False

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self.breakpoints)

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_error]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_warning]


class Queryback:
    """One breakpoint extraction session.

    Each :meth:`start` resets the registry and the matcher, then runs the
    pipeline again. External style sheets are fetched concurrently; parsing
    happens once, after the last fetch has finished.
    """

    def __init__(
        self,
        config: QuerybackConfig | None = None,
        *,
        fetcher: StyleFetcher | None = None,
        event_bus: EventBus | None = None,
        registry: BreakpointRegistry | None = None,
    ) -> None:
        self.config = config or QuerybackConfig()
        self.config.validate()
        self.registry = registry or BreakpointRegistry()
        self.matcher = ViewportMatcher(
            self.registry,
            base_font_size=self.config.base_font_size,
            media_types=self.config.media_types,
        )
        self.event_bus = event_bus or EventBus()
        self._fetcher = fetcher
        self._owns_fetcher = fetcher is None
        self._run = 0
        self._lock = threading.Lock()

    # --- extraction ---------------------------------------------------------

    def start(self, handles: Iterable[StyleHandle]) -> Future[ExtractionResult]:
        """Begin a run over *handles* and return a future for its result.

        When every handle is inline the future is already resolved on return.
        """
        run = self._cleanup()
        result_future: Future[ExtractionResult] = Future()

        def begin() -> ExtractionResult | None:
            collected = collect_sources(handles)
            logger.info(
                "Run %d: %d inline and %d external style source(s)",
                run,
                len(collected.sources) - len(collected.external_locators),
                len(collected.external_locators),
            )
            self.event_bus.emit(ExtractionStarted(run=run, source_count=len(collected.sources)))
            if collected.is_empty:
                notice = Diagnostic(
                    rule=EMPTY_INPUT,
                    severity=Severity.INFO,
                    message="No style sources found",
                )
                return self._publish(run, AggregationResult(combined_text=""), extra=(notice,))
            aggregation = self._aggregator().fetch_all(collected)
            aggregation.add_done_callback(
                lambda done: self._run_guarded(run, result_future, lambda: self._finish(run, done))
            )
            return None

        self._run_guarded(run, result_future, begin)
        return result_future

    def run(self, handles: Iterable[StyleHandle], timeout: float | None = None) -> ExtractionResult:
        """Blocking form of :meth:`start`."""
        return self.start(handles).result(timeout=timeout)

    def run_html(self, html: str, base_url: str | None = None, timeout: float | None = None) -> ExtractionResult:
        """Discover the document's style elements with the configured selector and run."""
        handles = discover_styles(html, selector=self.config.selector, base_url=base_url)
        return self.run(handles, timeout=timeout)

    def _cleanup(self) -> int:
        with self._lock:
            self._run += 1
            self.registry.reset()
            self.matcher.reset()
            return self._run

    def _aggregator(self) -> StyleAggregator:
        with self._lock:
            if self._fetcher is None:
                self._fetcher = default_fetcher(self.config)
        return StyleAggregator(self._fetcher, max_workers=self.config.max_workers)

    def _finish(self, run: int, done: Future[AggregationResult]) -> ExtractionResult:
        aggregation = done.result()
        self.event_bus.emit(
            StylesAggregated(
                run=run,
                external_count=len(aggregation.outcomes),
                failed_count=aggregation.failed_count,
            )
        )
        return self._publish(run, aggregation)

    def _publish(
        self,
        run: int,
        aggregation: AggregationResult,
        extra: tuple[Diagnostic, ...] = (),
    ) -> ExtractionResult:
        parsed = parse_breakpoints(aggregation.combined_text, keyword=self.config.annotation_keyword)
        diagnostics = aggregation.diagnostics + parsed.diagnostics + extra

        with self._lock:
            if run != self._run:
                logger.info("Run %d superseded by run %d; discarding its result", run, self._run)
                return ExtractionResult(
                    run=run,
                    generation=self.registry.generation,
                    diagnostics=diagnostics,
                    stale=True,
                )
            self.registry.replace(parsed.entries)
            generation, breakpoints = self.registry.snapshot()

        logger.info(
            "Run %d: %d breakpoint(s), %d diagnostic(s)",
            run,
            len(breakpoints),
            len(diagnostics),
        )
        self.event_bus.emit(
            ExtractionCompleted(
                run=run,
                generation=generation,
                breakpoint_count=len(breakpoints),
                diagnostic_count=len(diagnostics),
            )
        )
        return ExtractionResult(
            run=run,
            generation=generation,
            breakpoints=breakpoints,
            diagnostics=diagnostics,
        )

    def _run_guarded(
        self,
        run: int,
        result_future: Future[ExtractionResult],
        step: Callable[[], ExtractionResult | None],
    ) -> None:
        """Catch-and-log boundary: a failing run resolves with no breakpoints."""
        try:
            result = step()
        except Exception as exc:
            logger.exception("Breakpoint extraction run %d failed", run)
            with self._lock:
                if run == self._run:
                    self.registry.reset()
                generation = self.registry.generation
            result = ExtractionResult(
                run=run,
                generation=generation,
                diagnostics=(
                    Diagnostic(
                        rule=PIPELINE_ERROR,
                        severity=Severity.ERROR,
                        message=f"Extraction failed: {exc}",
                    ),
                ),
            )
            try:
                self.event_bus.emit(ExtractionFailed(run=run, error=str(exc)))
            except Exception:
                logger.exception("ExtractionFailed listener raised for run %d", run)
        if result is not None and not result_future.done():
            result_future.set_result(result)

    # --- viewport -----------------------------------------------------------

    def evaluate(self, width: float) -> MatchDelta:
        """Evaluate a viewport width and emit exit, then enter, events for the changes."""
        delta = self.matcher.evaluate(width)
        for name in sorted(delta.exited):
            self.event_bus.emit(BreakpointExited(name=name, width=width))
        for name in sorted(delta.entered):
            self.event_bus.emit(BreakpointEntered(name=name, width=width))
        return delta

    def on_enter(self, name: str, callback: Callable) -> None:
        self.event_bus.on(f"breakpoint:{name}:enter", callback)

    def on_exit(self, name: str, callback: Callable) -> None:
        self.event_bus.on(f"breakpoint:{name}:exit", callback)

    # --- lifecycle ----------------------------------------------------------

    def close(self) -> None:
        """Close the default fetcher if this session created it."""
        if self._owns_fetcher and self._fetcher is not None:
            close = getattr(self._fetcher, "close", None)
            if close is not None:
                close()
            self._fetcher = None

    def __enter__(self) -> Queryback:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
