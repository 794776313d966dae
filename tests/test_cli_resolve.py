"""Tests for descry.cli._resolve — kernel import resolution."""

import argparse
import types

import pytest

from descry.cli._resolve import build_output, load_component, resolve_kernel
from descry.container.builder import ContainerBuilder
from descry.routing.route import RouteCollection


def _failing_factory() -> object:
    raise RuntimeError("boom")


@pytest.fixture
def _fake_kernel_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register a fake module with a kernel on sys.modules."""
    mod = types.ModuleType("_fake_descry_kernel")
    mod.kernel = types.SimpleNamespace(  # type: ignore[attr-defined]
        routes=RouteCollection(),
        container=ContainerBuilder(),
        dispatcher="not a registry",
    )
    mod.routes = RouteCollection()  # type: ignore[attr-defined]
    mod.make_kernel = lambda: mod.kernel  # type: ignore[attr-defined]
    mod.create_kernel = lambda: None  # type: ignore[attr-defined]
    mod.broken = _failing_factory  # type: ignore[attr-defined]
    monkeypatch.setitem(__import__("sys").modules, "_fake_descry_kernel", mod)


@pytest.mark.usefixtures("_fake_kernel_module")
class TestResolveKernel:
    def test_explicit_attribute(self) -> None:
        kernel = resolve_kernel("_fake_descry_kernel:kernel")
        assert isinstance(kernel.routes, RouteCollection)

    def test_default_attribute(self) -> None:
        """Omitting :attr defaults to 'kernel'."""
        kernel = resolve_kernel("_fake_descry_kernel")
        assert isinstance(kernel.container, ContainerBuilder)

    def test_factory_function(self) -> None:
        kernel = resolve_kernel("_fake_descry_kernel:make_kernel")
        assert isinstance(kernel.routes, RouteCollection)

    def test_factory_error(self) -> None:
        with pytest.raises(TypeError, match="raised an error: boom"):
            resolve_kernel("_fake_descry_kernel:broken")

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            resolve_kernel("nonexistent_module_xyz:kernel")

    def test_missing_attribute(self) -> None:
        with pytest.raises(AttributeError):
            resolve_kernel("_fake_descry_kernel:does_not_exist")


@pytest.mark.usefixtures("_fake_kernel_module")
class TestLoadComponent:
    def test_attribute_of_kernel(self) -> None:
        builder = load_component("_fake_descry_kernel", "container", ContainerBuilder)
        assert isinstance(builder, ContainerBuilder)

    def test_direct_instance(self) -> None:
        routes = load_component("_fake_descry_kernel:routes", "routes", RouteCollection)
        assert isinstance(routes, RouteCollection)

    def test_wrong_type(self) -> None:
        with pytest.raises(TypeError, match="'dispatcher' attribute of type ContainerBuilder"):
            load_component("_fake_descry_kernel", "dispatcher", ContainerBuilder)

    def test_factory_returning_nothing(self) -> None:
        with pytest.raises(TypeError, match="resolved to NoneType"):
            load_component("_fake_descry_kernel:create_kernel", "routes", RouteCollection)


class TestBuildOutput:
    def test_no_color(self) -> None:
        output = build_output(argparse.Namespace(no_color=True))
        assert output.decorated is False

    def test_auto_detect_without_tty(self, capsys: pytest.CaptureFixture[str]) -> None:
        output = build_output(argparse.Namespace(no_color=False))
        assert output.decorated is False
