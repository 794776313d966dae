"""Describe options.

DescribeOptions is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class DescribeOptions:
    """Options recognized by the describe operations. Immutable after creation.

    All fields have neutral defaults. Override what you need::

        options = DescribeOptions(show_private=True, tag="kernel.event_listener")
    """

    # Subject selection
    name: str | None = None  # Route name shown in the route detail table
    id: str | None = None  # Service id for single-service output
    event: str | None = None  # Restrict listener output to one event
    tag: str | None = None  # Filter the service list by tag
    parameter: str | None = None  # Describe a single container parameter
    group_by: str | None = None  # "tags" groups container output by tag

    # Display
    show_controllers: bool = False
    show_private: bool = False

    # Table sink with a ``table(headers, rows)`` method; replaces the built-in table
    output: Any = None

    # Writing
    raw_text: bool = False  # Strip inline markup before writing
    raw_output: bool = False  # Do not append a newline to text writes

    def replace(self, **changes: Any) -> DescribeOptions:
        """Return a copy with *changes* applied."""
        return replace(self, **changes)
