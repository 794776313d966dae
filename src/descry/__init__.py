"""Descry — text reports for a web framework's internal state.

Renders the routing table, the service container and the event-listener
registry as console tables and labeled text blocks.

Basic usage::

    from descry import DescribeOptions, Output, TextDescriptor

    descriptor = TextDescriptor(Output())
    descriptor.describe(routes, DescribeOptions(show_controllers=True))

Or from the command line::

    descry routes myapp:kernel --show-controllers
"""

__version__ = "0.1.0"
__all__ = [
    "Alias",
    "BufferedOutput",
    "ContainerBuilder",
    "Definition",
    "DescribeOptions",
    "DescryError",
    "ListenerRegistry",
    "NotDescribableError",
    "Output",
    "ParameterBag",
    "Reference",
    "Route",
    "RouteCollection",
    "Table",
    "TextDescriptor",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import descry`` fast while providing a clean top-level API.
    """
    if name == "TextDescriptor":
        from descry.describe.text import TextDescriptor

        return TextDescriptor

    if name == "DescribeOptions":
        from descry.config import DescribeOptions

        return DescribeOptions

    if name in ("Output", "BufferedOutput", "Table"):
        from descry import console as _console

        return getattr(_console, name)

    if name in ("Route", "RouteCollection"):
        from descry import routing as _routing

        return getattr(_routing, name)

    if name in ("Alias", "ContainerBuilder", "Definition", "ParameterBag", "Reference"):
        from descry import container as _container

        return getattr(_container, name)

    if name == "ListenerRegistry":
        from descry.events import ListenerRegistry

        return ListenerRegistry

    if name in ("DescryError", "NotDescribableError"):
        from descry import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
