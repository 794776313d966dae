"""Event listener registry."""

from descry.events.registry import ListenerRegistry

__all__ = ["ListenerRegistry"]
