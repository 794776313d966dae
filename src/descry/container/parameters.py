"""Container parameter bag."""

from collections.abc import Iterator, Mapping
from typing import Any

from descry.errors import ParameterNotFoundError


class ParameterBag:
    """Mapping of parameter name to an arbitrary value.

    Values may be scalars, lists or nested mappings.
    """

    __slots__ = ("_parameters",)

    def __init__(self, parameters: Mapping[str, Any] | None = None) -> None:
        self._parameters: dict[str, Any] = dict(parameters or {})

    def all(self) -> dict[str, Any]:
        return dict(self._parameters)

    def get(self, name: str) -> Any:
        """Return the value for *name*.

        Raises ``ParameterNotFoundError`` if the bag has no such name.
        """
        try:
            return self._parameters[name]
        except KeyError:
            raise ParameterNotFoundError(name) from None

    def set(self, name: str, value: Any) -> None:
        self._parameters[name] = value

    def has(self, name: str) -> bool:
        return name in self._parameters

    def __iter__(self) -> Iterator[str]:
        return iter(self._parameters)

    def __len__(self) -> int:
        return len(self._parameters)
