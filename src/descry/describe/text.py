"""Text descriptor — renders routes, services and listeners as text and tables.

Labeled blocks carry inline style tags (``<info>``, ``<comment>``) that the
Output turns into color or strips. ``raw_text`` strips them before
writing; ``raw_output`` suppresses the newline appended to each text write.

Example output for ``describe_container_definition``::

    [container] Information for service mailer
    Service Id       mailer
    Class            app.mailer.Mailer
    Tags
        - kernel.event_listener          (event: user.created, priority: 10)
    Scope            container
    Public           yes
    ...
"""

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from descry.config import DescribeOptions
from descry.console.output import Output, strip_tags, visible_length
from descry.console.table import Table
from descry.container.builder import ContainerBuilder
from descry.container.definition import Alias, Definition, Reference
from descry.container.parameters import ParameterBag
from descry.describe.callables import class_name, qualified_name
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
from descry.errors import MissingOptionError, NotDescribableError
from descry.events.registry import ListenerRegistry
from descry.routing.route import Route, RouteCollection

logger = logging.getLogger("descry.describe")

# Labels in definition blocks are padded so values line up at this column
_LABEL_WIDTH = 17

# First cell of a repeated tag row for the same service
_CONTINUATION = '  "'

_DEFAULT_OPTIONS = DescribeOptions()


def _any(values: frozenset[str]) -> str:
    return "|".join(sorted(values)) if values else "ANY"


def _yes_no(flag: bool | None) -> str:
    return "yes" if flag else "no"


def _field(label: str, value: Any) -> str:
    pad = " " * max(_LABEL_WIDTH - len(label), 1)
    return f"<comment>{label}</comment>{pad}{value}"


class TextDescriptor:
    """Writes text reports to an Output.

    Usage::

        descriptor = TextDescriptor(Output())
        descriptor.describe_route_collection(routes, DescribeOptions(show_controllers=True))
    """

    __slots__ = ("output",)

    def __init__(self, output: Output | None = None) -> None:
        self.output = output if output is not None else Output()

    def describe(self, subject: Any, options: DescribeOptions | None = None) -> None:
        """Render *subject* with the operation matching its kind.

        Raises ``NotDescribableError`` for unsupported subjects.
        """
        from descry.describe.dispatch import describe

        describe(self, subject, options or _DEFAULT_OPTIONS)

    # -- Routes ------------------------------------------------------------

    def describe_route_collection(
        self,
        routes: RouteCollection,
        options: DescribeOptions = _DEFAULT_OPTIONS,
    ) -> None:
        headers = ["Name", "Method", "Scheme", "Host", "Path"]
        if options.show_controllers:
            headers.append("Controller")

        rows: list[list[Any]] = []
        for name, route in routes.all().items():
            row: list[Any] = [
                name,
                _any(route.methods),
                _any(route.schemes),
                route.host or "ANY",
                route.path,
            ]
            if options.show_controllers:
                row.append(format_controller(route.controller))
            rows.append(row)

        logger.debug("Describing %d routes", len(rows))
        if options.output is not None:
            options.output.table(headers, rows)
        else:
            Table(self.output).set_headers(headers).set_rows(rows).render()

    def describe_route(self, route: Route, options: DescribeOptions = _DEFAULT_OPTIONS) -> None:
        requirements = {
            k: v for k, v in route.requirements.items() if k not in ("_scheme", "_method")
        }
        compiled = route.compile()

        rows = [
            ["Route Name", options.name or ""],
            ["Path", route.path],
            ["Path Regex", compiled.regex],
            ["Host", route.host or "ANY"],
            ["Host Regex", compiled.host_regex if route.host else ""],
            ["Scheme", _any(route.schemes)],
            ["Method", _any(route.methods)],
            ["Requirements", format_router_config(requirements) if requirements else "NO CUSTOM"],
            ["Class", class_name(type(route))],
            ["Defaults", format_router_config(route.defaults)],
            ["Options", format_router_config(route.options)],
        ]

        Table(self.output).set_headers(["Property", "Value"]).set_rows(rows).render()

    # -- Container ---------------------------------------------------------

    def describe_container_parameters(
        self,
        parameters: ParameterBag | Mapping[str, Any],
        options: DescribeOptions = _DEFAULT_OPTIONS,
    ) -> None:
        headers = ["Parameter", "Value"]
        rows = [
            [name, format_parameter(value)]
            for name, value in sort_parameters(parameters).items()
        ]

        self._write_text(format_section("container", "List of parameters") + "\n", options)
        if options.output is not None:
            options.output.table(headers, rows)
        else:
            Table(self.output).set_style("compact").set_headers(headers).set_rows(rows).render()

    def describe_container_parameter(
        self,
        parameter: Any,
        options: DescribeOptions = _DEFAULT_OPTIONS,
    ) -> None:
        self._write_text(format_parameter(parameter), options)

    def describe_container_tags(
        self,
        builder: ContainerBuilder,
        options: DescribeOptions = _DEFAULT_OPTIONS,
    ) -> None:
        description = [format_section("container", "Tagged services")]
        for tag, definitions in find_definitions_by_tag(builder, options.show_private).items():
            description.append(format_section("tag", tag))
            description.extend(definitions)
            description.append("")

        self._write_text("\n".join(description), options)

    def describe_container_service(
        self,
        service: Any,
        options: DescribeOptions = _DEFAULT_OPTIONS,
    ) -> None:
        """Describe one resolved service: an Alias, a Definition or a plain object.

        Raises ``MissingOptionError`` when ``options.id`` is not set.
        """
        if options.id is None:
            raise MissingOptionError("id")

        match service:
            case Alias():
                self.describe_container_alias(service, options)
            case Definition():
                self.describe_container_definition(service, options)
            case _:
                self.describe_generic_service(service, options)

    def describe_generic_service(
        self,
        service: Any,
        options: DescribeOptions = _DEFAULT_OPTIONS,
    ) -> None:
        service_id = options.id or "-"
        description = [
            format_section("container", f"Information for service <info>{service_id}</info>"),
            _field("Service Id", service_id),
            _field("Class", class_name(type(service))),
        ]
        self._write_text("\n".join(description), options)

    def describe_container_services(
        self,
        builder: ContainerBuilder,
        options: DescribeOptions = _DEFAULT_OPTIONS,
    ) -> None:
        show_private = options.show_private
        tag = options.tag or None

        if show_private:
            label = "<comment>Public</comment> and <comment>private</comment> services"
        else:
            label = "<comment>Public</comment> services"
        if tag:
            label += f" with tag <info>{tag}</info>"
        self._write_text(format_section("container", label) + "\n", options)

        if tag:
            service_ids = list(builder.find_tagged_service_ids(tag))
        else:
            service_ids = builder.service_ids()

        visible: list[str] = []
        # tag attribute name -> widest display width, in first-seen order
        tag_widths: dict[str, int] = {}
        for service_id in service_ids:
            definition = resolve_service_definition(builder, service_id)
            if isinstance(definition, Definition):
                if not show_private and not definition.public:
                    continue
                if tag:
                    for attributes in definition.get_tag(tag):
                        for key, value in attributes.items():
                            width = max(len(key), visible_length(format_value(value)))
                            tag_widths[key] = max(tag_widths.get(key, 0), width)
            visible.append(service_id)

        tag_names = list(tag_widths)
        blanks = [""] * len(tag_names)

        table = Table(self.output).set_style("compact")
        table.set_headers(["Service ID", *tag_names, "Class name"])
        table.set_column_widths([0, *tag_widths.values(), 0])

        for service_id in sort_service_ids(visible):
            definition = resolve_service_definition(builder, service_id)
            match definition:
                case Definition() if tag:
                    for is_first, values in self._tag_rows(definition, tag, tag_names):
                        if is_first:
                            table.add_row([service_id, *values, definition.class_name])
                        else:
                            table.add_row([_CONTINUATION, *values, ""])
                case Definition():
                    table.add_row([service_id, definition.class_name])
                case Alias():
                    table.add_row([service_id, *blanks, f'alias for "{definition}"'])
                case _:
                    # no definition, e.g. service_container
                    table.add_row([service_id, *blanks, class_name(type(definition))])

        logger.debug("Describing %d services", len(visible))
        table.render()

    @staticmethod
    def _tag_rows(
        definition: Definition,
        tag: str,
        tag_names: list[str],
    ) -> Iterator[tuple[bool, list[str]]]:
        """Yield ``(is_first, attribute cells)`` per occurrence of *tag*."""
        for index, attributes in enumerate(definition.get_tag(tag)):
            values = [
                format_value(attributes[name]) if name in attributes else ""
                for name in tag_names
            ]
            yield index == 0, values

    def describe_container_definition(
        self,
        definition: Definition,
        options: DescribeOptions = _DEFAULT_OPTIONS,
    ) -> None:
        """Describe a Definition as a labeled block.

        Raises ``NotDescribableError`` when the factory targets an inline
        Definition instead of a reference or class.
        """
        description: list[str] = []
        if options.id is not None:
            description.append(
                format_section("container", f"Information for service <info>{options.id}</info>")
            )

        description.append(_field("Service Id", options.id or "-"))
        description.append(_field("Class", definition.class_name or "-"))

        if definition.tags:
            description.append("<comment>Tags</comment>")
            for tag_name, occurrences in definition.tags.items():
                for attributes in occurrences:
                    pairs = ", ".join(
                        f"<info>{key}</info>: {format_value(value)}"
                        for key, value in attributes.items()
                    )
                    description.append(f"    - {tag_name:<30} ({pairs})")
        else:
            description.append(_field("Tags", "-"))

        description.append(_field("Scope", definition.scope))
        description.append(_field("Public", _yes_no(definition.public)))
        description.append(_field("Synthetic", _yes_no(definition.synthetic)))
        description.append(_field("Lazy", _yes_no(definition.lazy)))
        if definition.shared is not None:
            description.append(_field("Shared", _yes_no(definition.shared)))
        if definition.synchronized is not None:
            description.append(_field("Synchronized", _yes_no(definition.synchronized)))
        description.append(_field("Abstract", _yes_no(definition.abstract)))

        if definition.file:
            description.append(_field("Required File", definition.file))

        if definition.factory_class:
            description.append(_field("Factory Class", definition.factory_class))
        if definition.factory_service:
            description.append(_field("Factory Service", definition.factory_service))
        if definition.factory_method:
            description.append(_field("Factory Method", definition.factory_method))

        if definition.factory:
            description.extend(self._factory_lines(definition.factory))

        self._write_text("\n".join(description) + "\n", options)

    @staticmethod
    def _factory_lines(factory: Any) -> list[str]:
        if isinstance(factory, (tuple, list)):
            target, method = factory
            match target:
                case Reference():
                    lines = [_field("Factory Service", target)]
                case Definition():
                    msg = "Factory is not describable."
                    raise NotDescribableError(msg)
                case type():
                    lines = [_field("Factory Class", class_name(target))]
                case _:
                    lines = [_field("Factory Class", target)]
            lines.append(_field("Factory Method", method))
            return lines
        if callable(factory):
            return [_field("Factory Function", qualified_name(factory))]
        return [_field("Factory Function", factory)]

    def describe_container_alias(
        self,
        alias: Alias,
        options: DescribeOptions = _DEFAULT_OPTIONS,
    ) -> None:
        self._write_text(f"This service is an alias for the service <info>{alias}</info>\n", options)

    # -- Event listeners ---------------------------------------------------

    def describe_event_listeners(
        self,
        registry: ListenerRegistry,
        options: DescribeOptions = _DEFAULT_OPTIONS,
    ) -> None:
        event = options.event
        if event is not None:
            label = f"Registered listeners for event <info>{event}</info>"
        else:
            label = "Registered listeners by event"
        self._write_text(format_section("event_dispatcher", label) + "\n", options)

        if event is not None:
            self._write_text("\n", _DEFAULT_OPTIONS)
            self._render_listener_table(registry.get_listeners(event))
            return

        listeners = registry.get_all_listeners()
        for name in sorted(listeners):
            self._write_text(f"\n<info>[Event]</info> {name}\n", options)
            self._render_listener_table(listeners[name])

    def _render_listener_table(self, listeners: Mapping[int, list[Any]]) -> None:
        table = Table(self.output)
        table.style = table.style.replace(cell_header_format="{}")
        table.set_headers(["Order", "Callable", "Priority"])

        order = 1
        for priority in sorted(listeners, reverse=True):
            for listener in listeners[priority]:
                table.add_row([f"#{order}", format_callable(listener), priority])
                order += 1

        table.render()

    def describe_callable(self, callable_: Any, options: DescribeOptions = _DEFAULT_OPTIONS) -> None:
        self._write_text(format_callable(callable_), options)

    # -- Writing -----------------------------------------------------------

    def _write_text(self, content: str, options: DescribeOptions) -> None:
        if options.raw_text:
            content = strip_tags(content)
        self.output.write(content, newline=not options.raw_output)
