"""Describe — render framework state as text reports.

``TextDescriptor`` holds one method per subject kind; ``describe()``
classifies an arbitrary subject and calls the right one.
"""

from descry.describe.callables import (
    CallableRef,
    ClosureCallable,
    FunctionCallable,
    InvokableCallable,
    MethodCallable,
    classify_callable,
)
from descry.describe.dispatch import SubjectKind, classify_subject
from descry.describe.formatting import (
    find_definitions_by_tag,
    format_callable,
    format_controller,
    format_parameter,
    format_router_config,
    format_section,
    format_value,
    resolve_service_definition,
    sort_parameters,
    sort_service_ids,
)
from descry.describe.text import TextDescriptor

__all__ = [
    "CallableRef",
    "ClosureCallable",
    "FunctionCallable",
    "InvokableCallable",
    "MethodCallable",
    "SubjectKind",
    "TextDescriptor",
    "classify_callable",
    "classify_subject",
    "find_definitions_by_tag",
    "format_callable",
    "format_controller",
    "format_parameter",
    "format_router_config",
    "format_section",
    "format_value",
    "resolve_service_definition",
    "sort_parameters",
    "sort_service_ids",
]
