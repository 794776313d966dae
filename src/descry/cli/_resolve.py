"""Kernel import resolution — resolves ``"module:attribute"`` strings.

Shared utility used by every ``descry`` sub-command to locate the object
holding the routes, the container and the listener registry.
"""

import argparse
import importlib
import inspect
from typing import Any

from descry.console.output import Output


def resolve_kernel(import_string: str) -> Any:
    """Resolve an import string to a kernel object.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"kernel"`` (e.g. ``"myapp"`` resolves to
    ``myapp.kernel``).

    Supports factory functions: if the resolved object is a plain
    function, it is called with no arguments.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the factory function raises.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "kernel"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if inspect.isfunction(obj):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    return obj


def load_component(import_string: str, attribute: str, expected: type) -> Any:
    """Resolve the kernel and return its *attribute*, checking the type.

    The kernel itself is returned when it already is an *expected* instance,
    so ``descry routes myapp:routes`` works as well as ``myapp:kernel``.

    Raises ``TypeError`` when the resolved object does not fit.
    """
    kernel = resolve_kernel(import_string)
    if isinstance(kernel, expected):
        return kernel

    component = getattr(kernel, attribute, None)
    if not isinstance(component, expected):
        msg = (
            f"{import_string!r} resolved to {type(kernel).__name__}, which has no "
            f"{attribute!r} attribute of type {expected.__name__}"
        )
        raise TypeError(msg)
    return component


def build_output(args: argparse.Namespace) -> Output:
    """Output for a sub-command, honoring ``--no-color``."""
    return Output(decorated=False if args.no_color else None)
