"""Tests for BreakpointRegistry."""

from queryback.model import Constraint, Measurement
from queryback.registry import BreakpointRegistry


SMALL = Constraint(max_width=Measurement(480))
LARGE = Constraint(min_width=Measurement(1200))


class TestAddAndGet:
    def test_add_creates_entry(self):
        registry = BreakpointRegistry()
        registry.add("small", SMALL)
        assert registry.get("small") == (SMALL,)
        assert "small" in registry
        assert len(registry) == 1

    def test_duplicate_names_accumulate(self):
        registry = BreakpointRegistry()
        registry.add("Z", SMALL)
        registry.add("Z", LARGE)
        assert registry.get("Z") == (SMALL, LARGE)
        assert registry.names() == ("Z",)

    def test_unknown_name(self):
        assert BreakpointRegistry().get("nope") == ()


class TestGenerations:
    def test_reset_clears_and_bumps(self):
        registry = BreakpointRegistry()
        registry.add("small", SMALL)
        before = registry.generation
        registry.reset()
        assert len(registry) == 0
        assert registry.generation == before + 1

    def test_replace_is_one_generation(self):
        registry = BreakpointRegistry()
        registry.add("old", SMALL)
        generation = registry.replace([("a", SMALL), ("b", LARGE), ("a", LARGE)])
        assert generation == registry.generation == 1
        assert "old" not in registry
        assert registry.get("a") == (SMALL, LARGE)

    def test_snapshot_is_a_copy(self):
        registry = BreakpointRegistry()
        registry.add("a", SMALL)
        generation, mapping = registry.snapshot()
        registry.add("a", LARGE)
        assert mapping == {"a": (SMALL,)}
        assert generation == registry.generation
