"""Pure formatting and sorting helpers shared by the descriptors.

Every function here is a pure function of its arguments.
"""

import json
import types
from collections.abc import Iterable, Mapping
from typing import Any

from descry.container.builder import ContainerBuilder
from descry.container.definition import Definition
from descry.container.parameters import ParameterBag
from descry.describe.callables import (
    ClosureCallable,
    FunctionCallable,
    InvokableCallable,
    MethodCallable,
    class_name,
    classify_callable,
    is_closure,
    is_method_pair,
    qualified_name,
)

# JSON encodings of parameters longer than this are cut
PARAMETER_PREVIEW_LENGTH = 60


def format_section(section: str, message: str) -> str:
    """``<info>[section]</info> message``"""
    return f"<info>[{section}]</info> {message}"


def format_callable(value: Any) -> str:
    """Render a callable as ``Owner::method()``, ``name()`` or ``\\Closure()``.

    Raises ``NotDescribableError`` for values that are not callables.
    """
    match classify_callable(value):
        case MethodCallable(owner, method):
            return f"{owner}::{method}()"
        case FunctionCallable(name):
            return f"{name}()"
        case ClosureCallable():
            return "\\Closure()"
        case InvokableCallable(owner):
            return f"{owner}::__invoke()"


def format_controller(controller: Any) -> Any:
    """Controller cell for route listings.

    Closures render as ``Closure``, functions by their dotted name,
    ``(target, "method")`` pairs as ``Target::method``, other objects by
    class name. Strings and scalars pass through unchanged.
    """
    if controller is None or isinstance(controller, (str, int, float)):
        return controller
    if is_closure(controller):
        return "Closure"
    if is_method_pair(controller):
        ref = classify_callable(controller)
        return f"{ref.owner}::{ref.method}"  # type: ignore[union-attr]
    if isinstance(controller, (types.FunctionType, types.BuiltinFunctionType, types.MethodType)):
        return qualified_name(controller)
    if isinstance(controller, type):
        return class_name(controller)
    return class_name(type(controller))


def format_value(value: Any) -> str:
    """Deterministic single-line rendering of an arbitrary value.

    ``None`` -> ``null``, booleans -> ``true``/``false``, numbers and
    strings as-is, sequences ``[a, b]``, mappings ``{k: v}``, functions
    via ``format_callable``, other objects ``object(Class)``.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    if isinstance(value, Mapping):
        items = ", ".join(f"{format_value(k)}: {format_value(v)}" for k, v in value.items())
        return "{" + items + "}"
    if isinstance(value, (set, frozenset)):
        return "[" + ", ".join(sorted(format_value(v) for v in value)) + "]"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(format_value(v) for v in value) + "]"
    if isinstance(value, (types.FunctionType, types.MethodType, types.BuiltinFunctionType)):
        return format_callable(value)
    return f"object({class_name(type(value))})"


def _json_key(key: Any) -> Any:
    if key is None or isinstance(key, (str, int, float)):
        return key
    return format_value(key)


def _encodable(value: Any) -> Any:
    """Copy of *value* that ``json.dumps`` accepts, with sets in sorted order."""
    if isinstance(value, Mapping):
        return {_json_key(key): _encodable(item) for key, item in value.items()}
    if isinstance(value, (set, frozenset)):
        return [_encodable(item) for item in sorted(value, key=format_value)]
    if isinstance(value, (list, tuple)):
        return [_encodable(item) for item in value]
    return value


def format_parameter(value: Any) -> str:
    """Render a container parameter value.

    Booleans, ``None``, sequences, sets and mappings are JSON encoded;
    encodings longer than 60 characters are cut and suffixed with ``...``.
    """
    if value is None or isinstance(value, (bool, list, tuple, set, frozenset, Mapping)):
        encoded = json.dumps(_encodable(value), default=format_value)
        if len(encoded) > PARAMETER_PREVIEW_LENGTH:
            return encoded[:PARAMETER_PREVIEW_LENGTH] + "..."
        return encoded
    return str(value)


def format_router_config(config: Mapping[str, Any]) -> str:
    """Sorted ``key: value`` lines, or ``NONE`` for an empty mapping."""
    if not config:
        return "NONE"
    lines = [f"{key}: {format_value(config[key])}" for key in sorted(config)]
    return "\n".join(lines).strip()


def sort_parameters(parameters: ParameterBag | Mapping[str, Any]) -> dict[str, Any]:
    """Parameters ordered by key, case-insensitive, descending."""
    items = parameters.all() if isinstance(parameters, ParameterBag) else dict(parameters)
    return dict(sorted(items.items(), key=lambda item: item[0].lower(), reverse=True))


def sort_service_ids(service_ids: Iterable[str]) -> list[str]:
    return sorted(service_ids)


def resolve_service_definition(builder: ContainerBuilder, service_id: str) -> Any:
    """The Definition for *service_id*, else its Alias, else the service object.

    Raises ``ServiceNotFoundError`` when none exists.
    """
    if builder.has_definition(service_id):
        return builder.get_definition(service_id)
    # Some ids have no definition, they are simply an alias
    if builder.has_alias(service_id):
        return builder.get_alias(service_id)
    # Registered as an object, e.g. service_container
    return builder.get(service_id)


def find_definitions_by_tag(
    builder: ContainerBuilder,
    show_private: bool,
) -> dict[str, dict[str, Definition]]:
    """Group tagged definitions by tag name, in tag index order.

    Private definitions are left out unless *show_private* is set.
    """
    grouped: dict[str, dict[str, Definition]] = {}
    for tag in builder.find_tags():
        for service_id in builder.find_tagged_service_ids(tag):
            definition = resolve_service_definition(builder, service_id)
            if not isinstance(definition, Definition):
                continue
            if not show_private and not definition.public:
                continue
            grouped.setdefault(tag, {})[service_id] = definition
    return grouped
