"""Console primitives — a styled output sink and text tables."""

from descry.console.output import BufferedOutput, Output, strip_tags, visible_length
from descry.console.table import STYLES, Table, TableStyle

__all__ = [
    "STYLES",
    "BufferedOutput",
    "Output",
    "Table",
    "TableStyle",
    "strip_tags",
    "visible_length",
]
