"""Shared fixtures: in-memory fetchers for pipeline and aggregator tests."""
from __future__ import annotations

import threading

import pytest

from queryback.errors import FetchError


class StubFetcher:
    """Serves style sheets from a dict; unknown locators fail."""

    def __init__(self, sheets: dict[str, str]) -> None:
        self.sheets = sheets
        self.requested: list[str] = []
        self._lock = threading.Lock()

    def fetch(self, locator: str) -> str:
        with self._lock:
            self.requested.append(locator)
        if locator not in self.sheets:
            raise FetchError(f"404 for {locator}", locator=locator, status_code=404)
        return self.sheets[locator]


class GatedFetcher(StubFetcher):
    """Blocks each fetch until its gate is released by the test."""

    def __init__(self, sheets: dict[str, str], failing: tuple[str, ...] = ()) -> None:
        super().__init__({k: v for k, v in sheets.items() if k not in failing})
        locators = list(sheets) + [f for f in failing if f not in sheets]
        self.gates = {locator: threading.Event() for locator in locators}
        self.started = {locator: threading.Event() for locator in locators}

    def fetch(self, locator: str) -> str:
        if locator in self.started:
            self.started[locator].set()
        gate = self.gates.get(locator)
        if gate is not None:
            assert gate.wait(timeout=5), f"gate for {locator} never released"
        return super().fetch(locator)

    def release(self, locator: str) -> None:
        self.gates[locator].set()


@pytest.fixture
def stub_fetcher():
    return StubFetcher


@pytest.fixture
def gated_fetcher():
    return GatedFetcher
