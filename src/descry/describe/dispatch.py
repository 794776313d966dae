"""Subject dispatch — pick the describe operation for an arbitrary subject.

The subject is classified once into a ``SubjectKind``; the kind alone
decides which ``TextDescriptor`` method renders it.
"""

from enum import Enum
from typing import TYPE_CHECKING, Any

from descry.config import DescribeOptions
from descry.container.builder import ContainerBuilder
from descry.container.definition import Alias, Definition
from descry.container.parameters import ParameterBag
from descry.describe.callables import class_name, is_method_pair
from descry.describe.formatting import resolve_service_definition
from descry.errors import NotDescribableError
from descry.events.registry import ListenerRegistry
from descry.routing.route import Route, RouteCollection

if TYPE_CHECKING:
    from descry.describe.text import TextDescriptor


class SubjectKind(Enum):
    """What a describe subject is, given its options."""

    ROUTE_COLLECTION = "route_collection"
    ROUTE = "route"
    PARAMETERS = "parameters"
    CONTAINER_TAGS = "container_tags"
    CONTAINER_SERVICE = "container_service"
    CONTAINER_PARAMETER = "container_parameter"
    CONTAINER_SERVICES = "container_services"
    DEFINITION = "definition"
    ALIAS = "alias"
    EVENT_LISTENERS = "event_listeners"
    CALLABLE = "callable"


def classify_subject(subject: Any, options: DescribeOptions) -> SubjectKind:
    """Resolve *subject* into its SubjectKind.

    Raises ``NotDescribableError`` for unsupported subjects.
    """
    match subject:
        case RouteCollection():
            return SubjectKind.ROUTE_COLLECTION
        case Route():
            return SubjectKind.ROUTE
        case ParameterBag():
            return SubjectKind.PARAMETERS
        case ContainerBuilder() if options.group_by == "tags":
            return SubjectKind.CONTAINER_TAGS
        case ContainerBuilder() if options.id is not None:
            return SubjectKind.CONTAINER_SERVICE
        case ContainerBuilder() if options.parameter is not None:
            return SubjectKind.CONTAINER_PARAMETER
        case ContainerBuilder():
            return SubjectKind.CONTAINER_SERVICES
        case Definition():
            return SubjectKind.DEFINITION
        case Alias():
            return SubjectKind.ALIAS
        case ListenerRegistry():
            return SubjectKind.EVENT_LISTENERS
        case _ if callable(subject) or is_method_pair(subject):
            return SubjectKind.CALLABLE

    msg = f'Object of type "{class_name(type(subject))}" is not describable.'
    raise NotDescribableError(msg)


def describe(descriptor: "TextDescriptor", subject: Any, options: DescribeOptions) -> None:
    """Render *subject* through *descriptor* according to its kind."""
    match classify_subject(subject, options):
        case SubjectKind.ROUTE_COLLECTION:
            descriptor.describe_route_collection(subject, options)
        case SubjectKind.ROUTE:
            descriptor.describe_route(subject, options)
        case SubjectKind.PARAMETERS:
            descriptor.describe_container_parameters(subject, options)
        case SubjectKind.CONTAINER_TAGS:
            descriptor.describe_container_tags(subject, options)
        case SubjectKind.CONTAINER_SERVICE:
            service = resolve_service_definition(subject, options.id)
            descriptor.describe_container_service(service, options)
        case SubjectKind.CONTAINER_PARAMETER:
            value = subject.get_parameter(options.parameter)
            descriptor.describe_container_parameter(value, options)
        case SubjectKind.CONTAINER_SERVICES:
            descriptor.describe_container_services(subject, options)
        case SubjectKind.DEFINITION:
            descriptor.describe_container_definition(subject, options)
        case SubjectKind.ALIAS:
            descriptor.describe_container_alias(subject, options)
        case SubjectKind.EVENT_LISTENERS:
            descriptor.describe_event_listeners(subject, options)
        case SubjectKind.CALLABLE:
            descriptor.describe_callable(subject, options)
