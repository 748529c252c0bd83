"""
Tests for start/stop observers and reset.

Tests cover:
- handler ordering, duplicates and removal
- transitions firing handlers exactly once
- handler failures propagating after the state change
- reset restoring constructor inputs
"""

import pytest

from entity_attribute import EntityAttribute, UpdateType
from entity_attribute.core.exceptions import InvalidAttributeValue
from entity_attribute.core.handlers import HandlerRegistry


class Recorder:
    def __init__(self):
        self.calls = []

    def on_start(self):
        self.calls.append("start")

    def on_stop(self):
        self.calls.append("stop")


def _health(clock, **overrides) -> EntityAttribute:
    options = dict(value=100, update_type=UpdateType.SET, update_value=100, update_speed=1000)
    options.update(overrides)
    return EntityAttribute("health", clock=clock, **options)


class TestHandlerRegistry:
    """Tests for HandlerRegistry."""

    def test_trigger_in_registration_order_with_duplicates(self):
        calls = []
        first = lambda: calls.append(1)  # noqa: E731
        second = lambda: calls.append(2)  # noqa: E731
        registry = HandlerRegistry()
        registry.add(first)
        registry.add(second)
        registry.add(first)

        registry.trigger()

        assert calls == [1, 2, 1]
        assert len(registry) == 3

    def test_remove_drops_every_copy(self):
        calls = []
        handler = lambda: calls.append("x")  # noqa: E731
        registry = HandlerRegistry()
        registry.add(handler)
        registry.add(print)
        registry.add(handler)

        registry.remove(handler)

        assert list(registry) == [print]

    def test_remove_bound_method(self):
        recorder = Recorder()
        registry = HandlerRegistry()
        registry.add(recorder.on_start)
        registry.remove(recorder.on_start)
        assert len(registry) == 0

    def test_failure_stops_remaining_handlers(self):
        calls = []

        def boom():
            raise RuntimeError("boom")

        registry = HandlerRegistry()
        registry.add(boom)
        registry.add(lambda: calls.append("late"))

        with pytest.raises(RuntimeError):
            registry.trigger()
        assert calls == []


@pytest.mark.asyncio
async def test_start_and_stop_fire_each_handler_once_in_order(clock):
    calls = []
    attr = _health(clock)
    attr.add_start_handler(lambda: calls.append("start-a"))
    attr.add_start_handler(lambda: calls.append("start-b"))
    attr.register_stop_handler(lambda: calls.append("stop-a"))
    attr.register_stop_handler(lambda: calls.append("stop-b"))

    attr.start_update_handler()
    assert calls == ["start-a", "start-b"]

    attr.start_update_handler()
    assert calls == ["start-a", "start-b"]

    attr.stop_update_handler()
    attr.stop_update_handler()
    assert calls == ["start-a", "start-b", "stop-a", "stop-b"]


@pytest.mark.asyncio
async def test_restart_fires_handlers_again(clock):
    recorder = Recorder()
    attr = _health(clock)
    attr.add_start_handler(recorder.on_start)
    attr.register_stop_handler(recorder.on_stop)

    for _ in range(2):
        attr.start_update_handler()
        attr.stop_update_handler()

    assert recorder.calls == ["start", "stop", "start", "stop"]


@pytest.mark.asyncio
async def test_removed_handlers_are_not_called(clock):
    recorder = Recorder()
    attr = _health(clock)
    attr.add_start_handler(recorder.on_start)
    attr.register_stop_handler(recorder.on_stop)
    attr.remove_start_handler(recorder.on_start)
    attr.remove_stop_handler(recorder.on_stop)

    attr.start_update_handler()
    attr.stop_update_handler()

    assert recorder.calls == []


def test_stop_when_idle_is_noop(clock):
    recorder = Recorder()
    attr = _health(clock)
    attr.register_stop_handler(recorder.on_stop)

    attr.stop_update_handler()

    assert recorder.calls == []


@pytest.mark.asyncio
async def test_failing_start_handler_propagates_after_start(clock):
    attr = _health(clock)

    def boom():
        raise RuntimeError("start failed")

    attr.add_start_handler(boom)
    with pytest.raises(RuntimeError, match="start failed"):
        attr.start_update_handler()
    assert attr.is_running

    attr.remove_start_handler(boom)
    attr.stop_update_handler()
    assert not attr.is_running


@pytest.mark.asyncio
async def test_failing_stop_handler_propagates_after_stop(clock, spin):
    attr = _health(clock, value=40, update_speed=0)

    def boom():
        raise RuntimeError("stop failed")

    attr.register_stop_handler(boom)
    attr.start_update_handler()
    with pytest.raises(RuntimeError, match="stop failed"):
        attr.stop_update_handler()
    assert not attr.is_running

    clock.advance(10)
    await spin()
    assert attr.get_value() == 40


class TestReset:
    """Tests for reset()."""

    def test_reset_restores_constructor_inputs(self, clock):
        attr = _health(clock, value=80, update_speed=-500)
        attr.set_value(3.5)
        attr.set_update_type(UpdateType.SUM)
        attr.set_update_speed(1)
        attr.set_update_value(7)

        attr.reset()

        assert attr.get_value() == 80
        assert attr.get_update_type() is UpdateType.SET
        assert attr.get_update_speed() == -500
        assert attr.get_update_value() == 100

    def test_reset_without_recharge(self, clock):
        attr = EntityAttribute("title", "Wanderer", clock=clock)
        attr.set_value("Hero")
        attr.reset()
        assert attr.get_value() == "Wanderer"
        assert attr.get_update_type() is UpdateType.NONE

    def test_reset_replays_validation(self, clock):
        inventory = ["sword"]
        attr = EntityAttribute("inventory", inventory, clock=clock)
        attr.set_value(["shield"])
        inventory.append("bow")

        attr.reset()

        assert attr.get_value() == ["sword", "bow"]
        with pytest.raises(InvalidAttributeValue):
            attr.set_value("sword")

    @pytest.mark.asyncio
    async def test_reset_keeps_scheduler_and_handlers(self, clock, spin):
        recorder = Recorder()
        attr = _health(clock, value=100, update_type=UpdateType.SUM, update_value=1, update_speed=0)
        attr.register_stop_handler(recorder.on_stop)
        attr.start_update_handler()
        clock.advance(1)
        await spin()
        assert attr.get_value() == 101

        attr.reset()
        assert attr.is_running
        assert attr.get_value() == 100

        clock.advance(1)
        await spin()
        assert attr.get_value() == 101

        attr.stop_update_handler()
        assert recorder.calls == ["stop"]
