"""Routing — route definitions, named collections and pattern compilation.

Routes are plain data. Compilation only derives the regular expressions
shown in route detail reports; matching requests is out of scope.
"""

from descry.routing.compiler import compile_route, parse_pattern
from descry.routing.route import CompiledRoute, PathSegment, Route, RouteCollection

__all__ = [
    "CompiledRoute",
    "PathSegment",
    "Route",
    "RouteCollection",
    "compile_route",
    "parse_pattern",
]
