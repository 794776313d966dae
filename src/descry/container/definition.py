"""Service definitions, aliases and references.

Plain data describing how the container would build a service. Nothing
here instantiates anything.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeAlias


@dataclass(frozen=True, slots=True)
class Reference:
    """A pointer to another service, used as a factory target or argument."""

    id: str

    def __str__(self) -> str:
        return self.id


@dataclass(frozen=True, slots=True)
class Alias:
    """A named pointer to another service id, with no construction logic."""

    id: str
    public: bool = True

    def __str__(self) -> str:
        return self.id


# A unified factory: (target, method) or a bare callable name.
# The target is a Reference, a class name, or a nested Definition.
Factory: TypeAlias = "tuple[Reference | str | Definition, str] | str"


@dataclass(slots=True)
class Definition:
    """A compiled description of how to construct a service instance.

    ``shared`` and ``synchronized`` are ``None`` when the container does
    not support the capability; reports omit them in that case.

    Usage::

        definition = Definition("app.mailer.Mailer")
        definition.add_tag("kernel.event_listener", event="user.created", priority=10)
    """

    class_name: str | None = None
    public: bool = True
    tags: dict[str, list[dict[str, Any]]] = field(default_factory=dict)
    scope: str = "container"
    lazy: bool = False
    synthetic: bool = False
    abstract: bool = False
    shared: bool | None = True
    synchronized: bool | None = None
    file: str | None = None

    # Legacy factory accessors, each independently optional
    factory_class: str | None = None
    factory_service: str | None = None
    factory_method: str | None = None

    factory: Factory | None = None

    def add_tag(self, name: str, **attributes: Any) -> Definition:
        """Add one occurrence of tag *name*. Returns self for chaining."""
        self.tags.setdefault(name, []).append(attributes)
        return self

    def get_tag(self, name: str) -> list[dict[str, Any]]:
        """Return every attribute mapping for *name*, empty when untagged."""
        return self.tags.get(name, [])

    def has_tag(self, name: str) -> bool:
        return name in self.tags
