"""ContainerBuilder — the service registry the reports read from.

Holds definitions, aliases, services that already exist as objects, and
the parameter bag. Answers lookups only; it never builds a service.
"""

from typing import Any

from descry.container.definition import Alias, Definition
from descry.container.parameters import ParameterBag
from descry.errors import ServiceNotFoundError


class ContainerBuilder:
    """Registry of service definitions, aliases and instantiated services.

    The builder registers itself as the ``service_container`` service.

    Usage::

        builder = ContainerBuilder()
        builder.set_definition("mailer", Definition("app.mailer.Mailer"))
        builder.set_alias("app.mailer", "mailer")
        builder.parameters.set("mailer.transport", "smtp")
    """

    __slots__ = ("_aliases", "_definitions", "_services", "parameters")

    def __init__(self, parameters: ParameterBag | None = None) -> None:
        self._definitions: dict[str, Definition] = {}
        self._aliases: dict[str, Alias] = {}
        self._services: dict[str, Any] = {"service_container": self}
        self.parameters = parameters if parameters is not None else ParameterBag()

    # -- Registration ------------------------------------------------------

    def set_definition(self, service_id: str, definition: Definition) -> Definition:
        self._aliases.pop(service_id, None)
        self._definitions[service_id] = definition
        return definition

    def register(self, service_id: str, class_name: str | None = None) -> Definition:
        """Create, register and return a new Definition."""
        return self.set_definition(service_id, Definition(class_name))

    def set_alias(self, alias: str, target: str | Alias) -> Alias:
        if isinstance(target, str):
            target = Alias(target)
        if alias == target.id:
            msg = f"An alias can not reference itself, got a circular reference on {alias!r}."
            raise ValueError(msg)
        self._definitions.pop(alias, None)
        self._aliases[alias] = target
        return target

    def set(self, service_id: str, service: Any) -> None:
        """Register an already-instantiated service."""
        self._services[service_id] = service

    # -- Lookup ------------------------------------------------------------

    def service_ids(self) -> list[str]:
        """Every known id: definitions, then aliases, then instantiated services."""
        ids = dict.fromkeys(self._definitions)
        ids.update(dict.fromkeys(self._aliases))
        ids.update(dict.fromkeys(self._services))
        return list(ids)

    def has_definition(self, service_id: str) -> bool:
        return service_id in self._definitions

    def get_definition(self, service_id: str) -> Definition:
        try:
            return self._definitions[service_id]
        except KeyError:
            raise ServiceNotFoundError(service_id) from None

    def get_definitions(self) -> dict[str, Definition]:
        return dict(self._definitions)

    def has_alias(self, service_id: str) -> bool:
        return service_id in self._aliases

    def get_alias(self, service_id: str) -> Alias:
        try:
            return self._aliases[service_id]
        except KeyError:
            raise ServiceNotFoundError(service_id) from None

    def get_aliases(self) -> dict[str, Alias]:
        return dict(self._aliases)

    def has(self, service_id: str) -> bool:
        return (
            service_id in self._definitions
            or service_id in self._aliases
            or service_id in self._services
        )

    def get(self, service_id: str) -> Any:
        """Return an already-instantiated service.

        Raises ``ServiceNotFoundError`` when no such object was registered.
        """
        try:
            return self._services[service_id]
        except KeyError:
            raise ServiceNotFoundError(service_id) from None

    def get_parameter(self, name: str) -> Any:
        return self.parameters.get(name)

    # -- Tags --------------------------------------------------------------

    def find_tagged_service_ids(self, tag: str) -> dict[str, list[dict[str, Any]]]:
        """Map each definition id carrying *tag* to its attribute mappings."""
        return {
            service_id: definition.get_tag(tag)
            for service_id, definition in self._definitions.items()
            if definition.has_tag(tag)
        }

    def find_tags(self) -> list[str]:
        """Every tag name in use, in first-seen order."""
        tags: dict[str, None] = {}
        for definition in self._definitions.values():
            tags.update(dict.fromkeys(definition.tags))
        return list(tags)
