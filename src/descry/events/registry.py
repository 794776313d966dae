"""Listener registry — priority-ordered callables per event name.

Stores what would be dispatched; dispatching itself is out of scope.
"""

from collections.abc import Callable
from typing import Any


class ListenerRegistry:
    """Listeners registered against named events.

    Within one event, higher priorities come first; listeners sharing a
    priority keep their registration order.

    Usage::

        registry = ListenerRegistry()
        registry.add_listener("kernel.request", (router, "on_request"), priority=32)
        registry.get_listeners("kernel.request")  # {32: [(router, "on_request")]}
    """

    __slots__ = ("_listeners",)

    def __init__(self) -> None:
        # event -> priority -> listeners
        self._listeners: dict[str, dict[int, list[Any]]] = {}

    def add_listener(
        self,
        event: str,
        listener: Callable[..., Any] | tuple[Any, str] | str,
        priority: int = 0,
    ) -> None:
        self._listeners.setdefault(event, {}).setdefault(priority, []).append(listener)

    def remove_listener(self, event: str, listener: Any) -> None:
        by_priority = self._listeners.get(event)
        if by_priority is None:
            return
        for priority, listeners in list(by_priority.items()):
            if listener in listeners:
                listeners.remove(listener)
            if not listeners:
                del by_priority[priority]
        if not by_priority:
            del self._listeners[event]

    def get_listeners(self, event: str) -> dict[int, list[Any]]:
        """Return priority -> listeners for *event*, highest priority first.

        Unknown events yield an empty mapping.
        """
        by_priority = self._listeners.get(event, {})
        return {
            priority: list(by_priority[priority])
            for priority in sorted(by_priority, reverse=True)
        }

    def get_all_listeners(self) -> dict[str, dict[int, list[Any]]]:
        """Return event -> (priority -> listeners) in registration order of events."""
        return {event: self.get_listeners(event) for event in self._listeners}

    def events(self) -> list[str]:
        return list(self._listeners)

    def has_listeners(self, event: str | None = None) -> bool:
        if event is None:
            return bool(self._listeners)
        return bool(self._listeners.get(event))
