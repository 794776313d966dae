"""Route, CompiledRoute and RouteCollection."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed piece of a route pattern.

    Static:  ``/users``    (is_param=False)
    Param:   ``{id}``      (is_param=True, param_name="id")
    Typed:   ``{id:int}``  (is_param=True, param_name="id", param_type="int")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    param_type: str | None = None


@dataclass(frozen=True, slots=True)
class CompiledRoute:
    """Regular expressions and variable names derived from a Route."""

    regex: str
    host_regex: str | None
    path_variables: tuple[str, ...] = ()
    host_variables: tuple[str, ...] = ()

    @property
    def variables(self) -> tuple[str, ...]:
        return self.host_variables + tuple(
            v for v in self.path_variables if v not in self.host_variables
        )


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    ``methods`` and ``schemes`` are empty when the route accepts any.
    ``defaults`` carries the controller under ``_controller``.
    """

    path: str
    host: str = ""
    methods: frozenset[str] = frozenset()
    schemes: frozenset[str] = frozenset()
    defaults: Mapping[str, Any] = field(default_factory=dict)
    requirements: Mapping[str, str] = field(default_factory=dict)
    options: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "methods", frozenset(m.upper() for m in self.methods))
        object.__setattr__(self, "schemes", frozenset(s.lower() for s in self.schemes))

    @property
    def controller(self) -> Any:
        return self.defaults.get("_controller")

    def get_default(self, name: str) -> Any:
        return self.defaults.get(name)

    def compile(self) -> CompiledRoute:
        """Compile the path and host patterns into regular expressions.

        Raises ``ConfigurationError`` for malformed patterns.
        """
        from descry.routing.compiler import compile_route

        return compile_route(self)


class RouteCollection:
    """Ordered mapping of route name to Route.

    Iteration yields names in insertion order. Adding an existing name
    replaces the route and moves it to the end.

    Usage::

        routes = RouteCollection()
        routes.add("user_show", Route("/users/{id:int}", methods=frozenset({"GET"})))
    """

    __slots__ = ("_routes",)

    def __init__(self) -> None:
        self._routes: dict[str, Route] = {}

    def add(self, name: str, route: Route) -> None:
        self._routes.pop(name, None)
        self._routes[name] = route

    def get(self, name: str) -> Route | None:
        """Look up a route by name. Returns ``None`` if not found."""
        return self._routes.get(name)

    def all(self) -> dict[str, Route]:
        """Return a name -> Route copy in insertion order."""
        return dict(self._routes)

    def __iter__(self) -> Iterator[str]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __contains__(self, name: object) -> bool:
        return name in self._routes
