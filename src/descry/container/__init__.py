"""Service container model — definitions, aliases, parameters and the builder."""

from descry.container.builder import ContainerBuilder
from descry.container.definition import Alias, Definition, Factory, Reference
from descry.container.parameters import ParameterBag

__all__ = [
    "Alias",
    "ContainerBuilder",
    "Definition",
    "Factory",
    "ParameterBag",
    "Reference",
]
