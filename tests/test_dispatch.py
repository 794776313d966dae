"""Tests for subject classification and TextDescriptor.describe routing."""

import pytest

from descry.config import DescribeOptions
from descry.console.output import BufferedOutput
from descry.container.builder import ContainerBuilder
from descry.container.definition import Alias, Definition
from descry.container.parameters import ParameterBag
from descry.describe.dispatch import SubjectKind, classify_subject
from descry.describe.text import TextDescriptor
from descry.errors import NotDescribableError, ParameterNotFoundError, ServiceNotFoundError
from descry.events.registry import ListenerRegistry
from descry.routing.route import Route, RouteCollection


def handler() -> None:
    pass


class Service:
    pass


@pytest.fixture
def builder() -> ContainerBuilder:
    builder = ContainerBuilder()
    builder.register("mailer", "app.Mailer").add_tag("kernel.listener")
    builder.set_alias("app.mailer", "mailer")
    builder.set("cache", Service())
    builder.parameters.set("locale", "en")
    return builder


def _describe(subject: object, **options: object) -> str:
    output = BufferedOutput()
    TextDescriptor(output).describe(subject, DescribeOptions(**options))
    return output.fetch()


class TestClassifySubject:
    @pytest.mark.parametrize(
        ("subject", "kind"),
        [
            (RouteCollection(), SubjectKind.ROUTE_COLLECTION),
            (Route("/"), SubjectKind.ROUTE),
            (ParameterBag(), SubjectKind.PARAMETERS),
            (Definition(), SubjectKind.DEFINITION),
            (Alias("mailer"), SubjectKind.ALIAS),
            (ListenerRegistry(), SubjectKind.EVENT_LISTENERS),
            (handler, SubjectKind.CALLABLE),
            ((Service(), "handle"), SubjectKind.CALLABLE),
            (["app.Service", "handle"], SubjectKind.CALLABLE),
            (Service, SubjectKind.CALLABLE),
        ],
    )
    def test_kinds(self, subject: object, kind: SubjectKind) -> None:
        assert classify_subject(subject, DescribeOptions()) is kind

    def test_container_by_options(self, builder: ContainerBuilder) -> None:
        assert classify_subject(builder, DescribeOptions()) is SubjectKind.CONTAINER_SERVICES
        assert classify_subject(builder, DescribeOptions(id="mailer")) is SubjectKind.CONTAINER_SERVICE
        assert (
            classify_subject(builder, DescribeOptions(parameter="locale"))
            is SubjectKind.CONTAINER_PARAMETER
        )
        assert (
            classify_subject(builder, DescribeOptions(group_by="tags"))
            is SubjectKind.CONTAINER_TAGS
        )

    def test_tags_take_precedence(self, builder: ContainerBuilder) -> None:
        options = DescribeOptions(group_by="tags", id="mailer", parameter="locale")
        assert classify_subject(builder, options) is SubjectKind.CONTAINER_TAGS

    def test_id_before_parameter(self, builder: ContainerBuilder) -> None:
        options = DescribeOptions(id="mailer", parameter="locale")
        assert classify_subject(builder, options) is SubjectKind.CONTAINER_SERVICE

    @pytest.mark.parametrize(
        ("subject", "name"),
        [(42, "int"), ("mailer", "str"), (None, "NoneType"), ((1, 2), "tuple")],
    )
    def test_not_describable(self, subject: object, name: str) -> None:
        with pytest.raises(NotDescribableError, match=f'Object of type "{name}" is not describable.'):
            classify_subject(subject, DescribeOptions())


class TestDescribe:
    def test_route_collection(self) -> None:
        routes = RouteCollection()
        routes.add("home", Route("/"))
        assert "| home |" in _describe(routes)

    def test_container_services(self, builder: ContainerBuilder) -> None:
        assert _describe(builder).startswith("[container] Public services\n")

    def test_container_tags(self, builder: ContainerBuilder) -> None:
        assert _describe(builder, group_by="tags") == (
            "[container] Tagged services\n[tag] kernel.listener\nmailer\n\n"
        )

    def test_container_service_definition(self, builder: ContainerBuilder) -> None:
        text = _describe(builder, id="mailer")
        assert text.startswith("[container] Information for service mailer\n")
        assert "Class            app.Mailer\n" in text

    def test_container_service_alias(self, builder: ContainerBuilder) -> None:
        assert _describe(builder, id="app.mailer") == "This service is an alias for the service mailer\n\n"

    def test_container_service_object(self, builder: ContainerBuilder) -> None:
        text = _describe(builder, id="cache")
        assert f"Class            {__name__}.Service\n" in text

    def test_container_service_missing(self, builder: ContainerBuilder) -> None:
        with pytest.raises(ServiceNotFoundError):
            _describe(builder, id="nope")

    def test_container_parameter(self, builder: ContainerBuilder) -> None:
        assert _describe(builder, parameter="locale") == "en\n"

    def test_container_parameter_missing(self, builder: ContainerBuilder) -> None:
        with pytest.raises(ParameterNotFoundError):
            _describe(builder, parameter="nope")

    def test_parameter_bag(self) -> None:
        text = _describe(ParameterBag({"locale": "en"}))
        assert text.startswith("[container] List of parameters\n")

    def test_callable(self) -> None:
        assert _describe(handler) == f"{__name__}.handler()\n"

    def test_event_listeners(self) -> None:
        registry = ListenerRegistry()
        registry.add_listener("e", "listener")
        assert "| listener() |" in _describe(registry, event="e")

    def test_default_options(self) -> None:
        output = BufferedOutput()
        TextDescriptor(output).describe(Alias("mailer"))
        assert output.fetch() == "This service is an alias for the service mailer\n\n"

    def test_not_describable_writes_nothing(self) -> None:
        output = BufferedOutput()
        with pytest.raises(NotDescribableError):
            TextDescriptor(output).describe(42)
        assert output.fetch() == ""
