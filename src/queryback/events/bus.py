"""Simple synchronous event bus for extraction and viewport events."""

from typing import Any, Callable


class EventBus:
    """Synchronous publish-subscribe event bus.

    Listeners can subscribe to an event type, to an event name such as
    ``breakpoint:tablet:enter``, or receive all events. Events are
    dispatched synchronously in registration order.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[Callable]] = {}
        self._named_listeners: dict[str, list[Callable]] = {}
        self._global_listeners: list[Callable] = []

    def subscribe(self, event_type: type, callback: Callable) -> None:
        """Register a callback for a specific event type."""
        self._listeners.setdefault(event_type, []).append(callback)

    def on(self, event_name: str, callback: Callable) -> None:
        """Register a callback for events whose ``event_name`` equals *event_name*."""
        self._named_listeners.setdefault(event_name, []).append(callback)

    def on_all(self, callback: Callable) -> None:
        """Register a callback that receives every event."""
        self._global_listeners.append(callback)

    def emit(self, event: Any) -> None:
        """Dispatch an event to all matching listeners."""
        for cb in self._global_listeners:
            cb(event)
        for cb in self._listeners.get(type(event), []):
            cb(event)
        name = getattr(event, "event_name", None)
        if name:
            for cb in self._named_listeners.get(name, []):
                cb(event)
