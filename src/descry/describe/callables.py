"""Callable classification.

Every callable shape the reports know how to print is resolved once into
one of four variants::

    (obj, "handle") / ("app.Listener", "handle") / obj.handle  -> MethodCallable
    "strtolower" / module-level function / class               -> FunctionCallable
    lambda / nested function                                   -> ClosureCallable
    object defining __call__                                   -> InvokableCallable

Anything else is not describable.
"""

import inspect
import types
from dataclasses import dataclass
from typing import Any, TypeAlias

from descry.errors import NotDescribableError


@dataclass(frozen=True, slots=True)
class MethodCallable:
    owner: str
    method: str


@dataclass(frozen=True, slots=True)
class FunctionCallable:
    name: str


@dataclass(frozen=True, slots=True)
class ClosureCallable:
    pass


@dataclass(frozen=True, slots=True)
class InvokableCallable:
    owner: str


CallableRef: TypeAlias = MethodCallable | FunctionCallable | ClosureCallable | InvokableCallable


def class_name(cls: type) -> str:
    """Dotted name of a class; builtins keep their bare name."""
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def qualified_name(func: Any) -> str:
    """Dotted name of a function or builtin."""
    module = getattr(func, "__module__", None)
    name = getattr(func, "__qualname__", None) or func.__name__
    if module in (None, "builtins"):
        return name
    return f"{module}.{name}"


def is_closure(value: Any) -> bool:
    """True for lambdas and functions defined inside another function."""
    if not isinstance(value, types.FunctionType):
        return False
    return value.__name__ == "<lambda>" or "<locals>" in value.__qualname__


def is_method_pair(value: Any) -> bool:
    """True for a two-item ``(target, "method")`` pair."""
    return (
        isinstance(value, (tuple, list))
        and len(value) == 2
        and isinstance(value[1], str)
    )


def classify_callable(value: Any) -> CallableRef:
    """Resolve *value* into its callable variant.

    Raises ``NotDescribableError`` for anything that is not a recognized
    callable shape (numbers, ``None``, arbitrary non-callable objects).
    """
    if is_method_pair(value):
        target, method = value
        if isinstance(target, str):
            return MethodCallable(target, method)
        if isinstance(target, type):
            return MethodCallable(class_name(target), method)
        return MethodCallable(class_name(type(target)), method)

    if isinstance(value, str):
        return FunctionCallable(value)

    if is_closure(value):
        return ClosureCallable()

    if inspect.ismethod(value):
        owner = value.__self__
        owner_cls = owner if isinstance(owner, type) else type(owner)
        return MethodCallable(class_name(owner_cls), value.__name__)

    if isinstance(value, (types.FunctionType, types.BuiltinFunctionType)):
        return FunctionCallable(qualified_name(value))

    if isinstance(value, type):
        return FunctionCallable(class_name(value))

    if callable(value):
        return InvokableCallable(class_name(type(value)))

    msg = "Callable is not describable."
    raise NotDescribableError(msg)
