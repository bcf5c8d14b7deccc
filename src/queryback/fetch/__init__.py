"""Fetching and joining external style sheets."""

from queryback.fetch.aggregator import AggregationResult, FetchOutcome, StyleAggregator
from queryback.fetch.http import HttpStyleFetcher
from queryback.fetch.local import FileStyleFetcher, RoutingFetcher, StyleFetcher, default_fetcher

__all__ = [
    "AggregationResult",
    "FetchOutcome",
    "FileStyleFetcher",
    "HttpStyleFetcher",
    "RoutingFetcher",
    "StyleAggregator",
    "StyleFetcher",
    "default_fetcher",
]
