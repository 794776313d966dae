"""Tests for descry.routing.route — Route, CompiledRoute, RouteCollection."""

import pytest

from descry.routing.route import CompiledRoute, PathSegment, Route, RouteCollection


def _handler() -> str:
    return "ok"


class TestPathSegment:
    def test_static(self) -> None:
        seg = PathSegment(value="/users")
        assert seg.is_param is False
        assert seg.param_name is None
        assert seg.param_type is None

    def test_frozen(self) -> None:
        seg = PathSegment(value="users")
        with pytest.raises(AttributeError):
            seg.value = "other"  # type: ignore[misc]


class TestRoute:
    def test_defaults(self) -> None:
        route = Route("/users")
        assert route.host == ""
        assert route.methods == frozenset()
        assert route.schemes == frozenset()
        assert dict(route.defaults) == {}
        assert dict(route.requirements) == {}
        assert dict(route.options) == {}

    def test_methods_upper_cased(self) -> None:
        route = Route("/users", methods=frozenset({"get", "Post"}))
        assert route.methods == frozenset({"GET", "POST"})

    def test_schemes_lower_cased(self) -> None:
        route = Route("/users", schemes=frozenset({"HTTPS"}))
        assert route.schemes == frozenset({"https"})

    def test_controller(self) -> None:
        route = Route("/", defaults={"_controller": _handler})
        assert route.controller is _handler
        assert route.get_default("missing") is None

    def test_frozen(self) -> None:
        route = Route("/")
        with pytest.raises(AttributeError):
            route.path = "/other"  # type: ignore[misc]

    def test_compile(self) -> None:
        compiled = Route("/users/{id:int}").compile()
        assert isinstance(compiled, CompiledRoute)
        assert compiled.regex == r"^/users/(?P<id>\d+)$"


class TestCompiledRoute:
    def test_variables_host_first(self) -> None:
        compiled = CompiledRoute(
            regex="^/$",
            host_regex="^(?P<sub>[^.]+)$",
            path_variables=("id", "sub"),
            host_variables=("sub",),
        )
        assert compiled.variables == ("sub", "id")


class TestRouteCollection:
    def test_insertion_order(self) -> None:
        routes = RouteCollection()
        routes.add("b", Route("/b"))
        routes.add("a", Route("/a"))
        routes.add("c", Route("/c"))
        assert list(routes) == ["b", "a", "c"]
        assert list(routes.all()) == ["b", "a", "c"]

    def test_readd_moves_to_end(self) -> None:
        routes = RouteCollection()
        routes.add("a", Route("/a"))
        routes.add("b", Route("/b"))
        routes.add("a", Route("/a2"))
        assert list(routes) == ["b", "a"]
        assert routes.get("a") == Route("/a2")

    def test_lookup(self) -> None:
        routes = RouteCollection()
        routes.add("home", Route("/"))
        assert "home" in routes
        assert "missing" not in routes
        assert routes.get("missing") is None
        assert len(routes) == 1

    def test_all_is_a_copy(self) -> None:
        routes = RouteCollection()
        routes.add("home", Route("/"))
        routes.all().clear()
        assert len(routes) == 1
