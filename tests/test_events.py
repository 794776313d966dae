"""Tests for descry.events — ListenerRegistry."""

from descry.events.registry import ListenerRegistry


def _a() -> None: ...


def _b() -> None: ...


def _c() -> None: ...


class TestAddAndGet:
    def test_empty(self) -> None:
        registry = ListenerRegistry()
        assert registry.events() == []
        assert registry.get_listeners("kernel.request") == {}
        assert registry.has_listeners() is False

    def test_default_priority(self) -> None:
        registry = ListenerRegistry()
        registry.add_listener("kernel.request", _a)
        assert registry.get_listeners("kernel.request") == {0: [_a]}

    def test_highest_priority_first(self) -> None:
        registry = ListenerRegistry()
        registry.add_listener("e", _a, priority=-5)
        registry.add_listener("e", _b, priority=10)
        registry.add_listener("e", _c, priority=0)
        assert list(registry.get_listeners("e")) == [10, 0, -5]

    def test_registration_order_within_priority(self) -> None:
        registry = ListenerRegistry()
        registry.add_listener("e", _b, priority=5)
        registry.add_listener("e", _a, priority=5)
        assert registry.get_listeners("e") == {5: [_b, _a]}

    def test_get_listeners_returns_copies(self) -> None:
        registry = ListenerRegistry()
        registry.add_listener("e", _a)
        registry.get_listeners("e")[0].append(_b)
        assert registry.get_listeners("e") == {0: [_a]}

    def test_all_listeners_keyed_by_event(self) -> None:
        registry = ListenerRegistry()
        registry.add_listener("b.event", _a)
        registry.add_listener("a.event", _b, priority=3)
        assert registry.get_all_listeners() == {
            "b.event": {0: [_a]},
            "a.event": {3: [_b]},
        }
        assert registry.events() == ["b.event", "a.event"]

    def test_has_listeners(self) -> None:
        registry = ListenerRegistry()
        registry.add_listener("e", _a)
        assert registry.has_listeners()
        assert registry.has_listeners("e")
        assert not registry.has_listeners("other")

    def test_tuple_and_string_listeners(self) -> None:
        registry = ListenerRegistry()
        registry.add_listener("e", ("app.Listener", "on_event"))
        registry.add_listener("e", "strtolower")
        assert registry.get_listeners("e") == {0: [("app.Listener", "on_event"), "strtolower"]}


class TestRemove:
    def test_remove_drops_empty_priority_and_event(self) -> None:
        registry = ListenerRegistry()
        registry.add_listener("e", _a, priority=1)
        registry.remove_listener("e", _a)
        assert registry.events() == []

    def test_remove_keeps_others(self) -> None:
        registry = ListenerRegistry()
        registry.add_listener("e", _a, priority=1)
        registry.add_listener("e", _b, priority=1)
        registry.remove_listener("e", _a)
        assert registry.get_listeners("e") == {1: [_b]}

    def test_remove_unknown_event_is_noop(self) -> None:
        ListenerRegistry().remove_listener("missing", _a)
