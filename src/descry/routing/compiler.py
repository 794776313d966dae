"""Route pattern compilation.

Turns ``/users/{id:int}`` style patterns into anchored regular
expressions. Only the textual regex is produced; nothing here matches
requests.
"""

import re

from descry.errors import ConfigurationError
from descry.routing.params import variable_pattern
from descry.routing.route import CompiledRoute, PathSegment, Route

_PLACEHOLDER = re.compile(r"\{([^{}]*)\}")
_VARIABLE_NAME = re.compile(r"^[A-Za-z_]\w*$")
_ANGLE_PARAM = re.compile(r"<[^<>/]+>")


def parse_pattern(pattern: str) -> list[PathSegment]:
    """Split a route pattern into static text and placeholder segments.

    Examples::

        "/users"              -> [PathSegment("/users")]
        "/users/{id}"         -> [PathSegment("/users/"), PathSegment("{id}", is_param=True, ...)]
        "/users/{id:int}"     -> [..., PathSegment("{id:int}", is_param=True, param_type="int")]
        "{sub}.example.com"   -> [PathSegment("{sub}", is_param=True, ...), PathSegment(".example.com")]

    Raises ``ConfigurationError`` for unbalanced braces, empty or invalid
    placeholder names, and ``<param>`` style placeholders.
    """
    segments: list[PathSegment] = []
    position = 0
    for match in _PLACEHOLDER.finditer(pattern):
        if match.start() > position:
            segments.append(_static(pattern, pattern[position : match.start()]))
        inner = match.group(1)
        name, _, param_type = inner.partition(":")
        if not _VARIABLE_NAME.match(name):
            msg = f"Invalid placeholder {match.group(0)!r} in route pattern {pattern!r}."
            raise ConfigurationError(msg)
        segments.append(
            PathSegment(
                value=match.group(0),
                is_param=True,
                param_name=name,
                param_type=param_type or None,
            )
        )
        position = match.end()
    if position < len(pattern):
        segments.append(_static(pattern, pattern[position:]))
    return segments


def _static(pattern: str, text: str) -> PathSegment:
    if "{" in text or "}" in text:
        msg = f"Unbalanced brace in route pattern {pattern!r}."
        raise ConfigurationError(msg)
    if _ANGLE_PARAM.search(text):
        msg = (
            f"Route pattern {pattern!r} uses <param> placeholders. "
            "Use {param} instead."
        )
        raise ConfigurationError(msg)
    return PathSegment(value=text)


def _compile_pattern(
    pattern: str,
    requirements: dict[str, str],
    *,
    host: bool,
) -> tuple[str, tuple[str, ...]]:
    parts = ["^"]
    names: list[str] = []
    for seg in parse_pattern(pattern):
        if not seg.is_param:
            parts.append(re.escape(seg.value))
            continue
        name = seg.param_name or ""
        if name in names:
            msg = f"Route pattern {pattern!r} uses the variable {name!r} more than once."
            raise ConfigurationError(msg)
        names.append(name)
        try:
            regex = variable_pattern(name, seg.param_type, requirements, host=host)
        except KeyError:
            msg = f"Unknown converter {seg.param_type!r} in route pattern {pattern!r}."
            raise ConfigurationError(msg) from None
        parts.append(f"(?P<{name}>{regex})")
    parts.append("$")
    return "".join(parts), tuple(names)


def compile_route(route: Route) -> CompiledRoute:
    """Compile a route's path and host into a ``CompiledRoute``.

    The host regex is ``None`` when the route accepts any host.
    Raises ``ConfigurationError`` for malformed patterns.
    """
    requirements = dict(route.requirements)
    path = route.path if route.path.startswith("/") else f"/{route.path}"
    regex, path_variables = _compile_pattern(path, requirements, host=False)

    host_regex: str | None = None
    host_variables: tuple[str, ...] = ()
    if route.host:
        host_regex, host_variables = _compile_pattern(route.host, requirements, host=True)

    return CompiledRoute(
        regex=regex,
        host_regex=host_regex,
        path_variables=path_variables,
        host_variables=host_variables,
    )
