from queryback.collect.collector import CollectedSources, collect_sources
from queryback.collect.html import discover_styles

__all__ = ["CollectedSources", "collect_sources", "discover_styles"]
