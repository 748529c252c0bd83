"""
Entity Attributes

An ``EntityAttribute`` is one mutable quantity of a simulation entity, such as
health, mana or an inventory list. It guarantees that its value keeps the same
kind for its whole lifetime and can recharge itself on a timer.

Key concepts:
- The first value fixes the kind (number, text, mapping, ...); later values
  must match it
- The recharge policy (type, speed, operand) is validated on every change
- ``start_update_handler``/``stop_update_handler`` run and cancel the
  recurring recharge task and notify registered observers
- ``reset`` replays construction with the original inputs
"""

from __future__ import annotations

import asyncio
import logging
import math
from collections.abc import Mapping
from numbers import Real
from typing import Any, Optional, Union

from .config import AttributeConfig, SchedulerSettings
from .exceptions import (
    InvalidAttributeValue,
    InvalidName,
    InvalidRechargeSpeed,
    InvalidRechargeType,
    InvalidRechargeValue,
    InvalidStartHandler,
    InvalidStopHandler,
)
from .handlers import Handler, HandlerRegistry
from .scheduler import Clock, RechargeScheduler, apply_recharge, monotonic_ms
from .update_type import UpdateType
from .value_kind import value_kind

logger = logging.getLogger(__name__)

_UNSET = object()


class EntityAttribute:
    """
    A typed, optionally self-recharging attribute.

    Examples:
        Health that refills to 100 once a second while running:
            EntityAttribute("health", 100, update_type=UpdateType.SET,
                            update_value=100, update_speed=1000)
        Gold that grows by 5 every 2 seconds:
            EntityAttribute("gold", 0, update_type=UpdateType.SUM,
                            update_value=5, update_speed=2000)

    Attributes are not thread-safe; drive them from a single event loop.
    """

    def __init__(
        self,
        name: str,
        value: Any,
        update_value: Any = None,
        update_speed: Optional[float] = None,
        update_type: Union[UpdateType, int] = UpdateType.NONE,
        *,
        clock: Optional[Clock] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
        settings: Optional[SchedulerSettings] = None,
    ):
        if not isinstance(name, str) or not name:
            raise InvalidName(name)

        self._name = name
        self._value: Any = _UNSET
        self._update_type = UpdateType.NONE
        self._update_speed: Optional[float] = None
        self._update_value: Any = None

        self._clock: Clock = clock or monotonic_ms
        self._loop = loop
        self._settings = settings or SchedulerSettings()
        self._scheduler: Optional[RechargeScheduler] = None
        self._start_handlers = HandlerRegistry()
        self._stop_handlers = HandlerRegistry()

        self._initial_value = value
        self.set_value(value)

        self._initial_update_type = update_type
        self.set_update_type(update_type)

        self._initial_update_speed = update_speed
        self.set_update_speed(update_speed)

        self._initial_update_value = update_value
        self.set_update_value(update_value)

    @classmethod
    def from_config(
        cls,
        config: Union[AttributeConfig, Mapping[str, Any]],
        **kwargs: Any,
    ) -> "EntityAttribute":
        """Build an attribute from an ``AttributeConfig`` or a mapping of the same options.

        Keyword arguments (``clock``, ``loop``, ``settings``) are passed through.
        """
        if not isinstance(config, AttributeConfig):
            config = AttributeConfig.model_validate(dict(config))
        return cls(
            name=config.name,
            value=config.value,
            update_value=config.update_value,
            update_speed=config.update_speed,
            update_type=config.update_type,
            **kwargs,
        )

    # ------------------------------------------------------------------
    # Value and policy

    @property
    def name(self) -> str:
        return self._name

    def get_name(self) -> str:
        return self._name

    def get_value(self) -> Any:
        return self._value

    def set_value(self, value: Any) -> None:
        """Validate and store a new value.

        Raises:
            InvalidAttributeValue: If ``value`` is None or its kind differs
                from the current value's kind.
        """
        if value is None:
            raise InvalidAttributeValue("accepts any value except None")
        if self._value is not _UNSET:
            expected, got = value_kind(self._value), value_kind(value)
            if expected != got:
                raise InvalidAttributeValue(f"type mismatch, expected {expected} got {got}")
        self._value = value

    def get_update_type(self) -> UpdateType:
        return self._update_type

    def set_update_type(self, update_type: Union[UpdateType, int]) -> None:
        """Set the recharge policy.

        Raises:
            InvalidRechargeType: Unless ``update_type`` is an ``UpdateType`` or its integer code.
        """
        if isinstance(update_type, bool) or not isinstance(update_type, int):
            raise InvalidRechargeType(update_type)
        try:
            self._update_type = UpdateType(update_type)
        except ValueError:
            raise InvalidRechargeType(update_type) from None

    def get_update_speed(self) -> Optional[float]:
        return self._update_speed

    def set_update_speed(self, update_speed: Optional[float]) -> None:
        """Set the minimum time between recharges, in clock units.

        Ignored while the update type is ``NONE``. ``None`` leaves the speed
        unset, so every tick is due. Only the magnitude is validated; the sign
        is kept as given.
        """
        if not self.is_updatable():
            return
        if update_speed is not None and (
            isinstance(update_speed, bool)
            or not isinstance(update_speed, Real)
            or math.isnan(abs(update_speed))
        ):
            raise InvalidRechargeSpeed(update_speed)
        self._update_speed = update_speed

    def get_update_value(self) -> Any:
        return self._update_value

    def set_update_value(self, update_value: Any) -> None:
        """Set the operand used by the recharge policy.

        Ignored while the update type is ``NONE``. ``PUSH`` expects the value
        to be a list or tuple, which is checked only when a recharge applies.
        ``SUM`` requires the operand to be addable to the current value.
        """
        if not self.is_updatable():
            return
        expected = value_kind(self._value)
        got = "None" if update_value is None else value_kind(update_value)
        if expected != got:
            raise InvalidRechargeValue(f"expected {expected} got {got}")
        if self._update_type is UpdateType.SUM:
            try:
                apply_recharge(UpdateType.SUM, self._value, update_value)
            except (TypeError, ValueError, ArithmeticError) as exc:
                raise InvalidRechargeValue(f"cannot add {got} operand to the value: {exc}") from exc
        self._update_value = update_value

    def is_updatable(self) -> bool:
        return self._update_type is not UpdateType.NONE

    def should_update(self) -> bool:
        """Whether a due recharge may fire. Override to add conditions, e.g. "not at maximum"."""
        return True

    # ------------------------------------------------------------------
    # Scheduler lifecycle

    @property
    def is_running(self) -> bool:
        return self._scheduler is not None and self.is_updatable()

    def start_update_handler(self) -> None:
        """Start recharging and notify start handlers.

        No-op when the update type is ``NONE`` or the scheduler is already
        running. Uses the loop given at construction, else the running loop.

        Raises:
            RuntimeError: If no loop was given and none is running.
        """
        if not self.is_updatable():
            return
        if self._scheduler is not None:
            logger.debug("Attribute %s already recharging", self._name)
            return

        loop = self._loop or asyncio.get_running_loop()
        scheduler = RechargeScheduler(self, loop, self._clock, self._settings.tick_interval)
        scheduler.arm()
        self._scheduler = scheduler
        logger.debug("Started recharge of %s (%s)", self._name, self._update_type.name.lower())

        self._start_handlers.trigger()

    def stop_update_handler(self) -> None:
        """Cancel recharging and notify stop handlers. No-op when idle."""
        scheduler = self._scheduler
        if scheduler is None:
            return

        self._scheduler = None
        scheduler.cancel()
        logger.debug("Stopped recharge of %s", self._name)

        self._stop_handlers.trigger()

    def _scheduler_failed(self, scheduler: RechargeScheduler) -> None:
        if self._scheduler is scheduler:
            self._scheduler = None

    # ------------------------------------------------------------------
    # Observers

    def add_start_handler(self, callback: Handler) -> None:
        if not callable(callback):
            raise InvalidStartHandler(f"must be callable, got {type(callback).__name__}")
        self._start_handlers.add(callback)

    def remove_start_handler(self, callback: Handler) -> None:
        self._start_handlers.remove(callback)

    def register_stop_handler(self, callback: Handler) -> None:
        if not callable(callback):
            raise InvalidStopHandler(f"must be callable, got {type(callback).__name__}")
        self._stop_handlers.add(callback)

    def remove_stop_handler(self, callback: Handler) -> None:
        self._stop_handlers.remove(callback)

    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Restore the constructor's value and policy through the validating setters.

        The scheduler state and registered handlers are left untouched.
        """
        self.set_value(self._initial_value)

        self.set_update_type(self._initial_update_type)
        self.set_update_speed(self._initial_update_speed)
        self.set_update_value(self._initial_update_value)

    def describe(self) -> str:
        if not self.is_updatable():
            return f"{self._name}={self._value!r}"
        return (
            f"{self._name}={self._value!r} "
            f"({self._update_type.name.lower()} {self._update_value!r} every {self._update_speed})"
        )

    def __repr__(self) -> str:
        return (
            f"EntityAttribute(name={self._name!r}, value={self._value!r}, "
            f"update_type={self._update_type.name}, running={self.is_running})"
        )


__all__ = ["EntityAttribute"]
