"""
Recharge scheduler

A cooperative recurring task that drives one attribute's recharge policy on an
asyncio event loop. Each tick checks whether the attribute is due, applies the
policy if so, and re-arms itself. The scheduler does not sleep for the
recharge speed; it re-checks on every loop iteration so that cancellation and
speed changes are picked up immediately.

Cancellation is cooperative: ``cancel()`` raises a flag that the next tick
observes before doing anything else.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Callable, Optional

from .exceptions import InvalidAttributeValue
from .update_type import UpdateType

if TYPE_CHECKING:
    from .attribute import EntityAttribute

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


def monotonic_ms() -> float:
    """Default clock: monotonic milliseconds."""
    return time.monotonic() * 1000.0


def apply_recharge(update_type: UpdateType, value: Any, operand: Any) -> Any:
    """Return the value produced by applying ``update_type`` with ``operand`` to ``value``."""
    if update_type is UpdateType.SET:
        return operand
    if update_type is UpdateType.SUM:
        return _add(value, operand)
    if update_type is UpdateType.PUSH:
        if isinstance(value, list):
            return [*value, operand]
        if isinstance(value, tuple):
            return (*value, operand)
        raise InvalidAttributeValue(f"push recharge needs a list or tuple value, got {type(value).__name__}")
    return value


def _add(value: Any, operand: Any) -> Any:
    if isinstance(value, Mapping):
        return {**value, **operand}
    # list and tuple share a kind; concatenate in the value's own type.
    if isinstance(value, (list, tuple)):
        return value + type(value)(operand)
    try:
        return value + operand
    except TypeError:
        # e.g. Decimal + float
        return value + type(value)(operand)


class RechargeScheduler:
    """One run of the recurring recharge check for a single attribute.

    A scheduler is armed once and cancelled once; restarting an attribute
    creates a new scheduler so a stale tick can never resume.
    """

    def __init__(
        self,
        attribute: "EntityAttribute",
        loop: asyncio.AbstractEventLoop,
        clock: Clock,
        tick_interval: float = 0.0,
    ):
        self.attribute = attribute
        self.loop = loop
        self.clock = clock
        self.tick_interval = tick_interval
        self.last_applied = clock()
        self.prevented = False
        self._handle: Optional[asyncio.Handle] = None

    def arm(self) -> None:
        if self.tick_interval > 0:
            self._handle = self.loop.call_later(self.tick_interval, self.tick)
        else:
            self._handle = self.loop.call_soon(self.tick)

    def cancel(self) -> None:
        self.prevented = True
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def tick(self) -> None:
        self._handle = None
        if self.prevented:
            return

        attribute = self.attribute
        try:
            if attribute.should_update() and self._due(attribute.get_update_speed()):
                self._apply(attribute)
                self.last_applied = self.clock()
        except Exception:
            logger.error("Recharge of %s failed; scheduler stopped", attribute.get_name())
            self.prevented = True
            attribute._scheduler_failed(self)
            raise

        self.arm()

    def _due(self, speed: Optional[float]) -> bool:
        # An unset speed never holds a recharge back.
        if speed is None:
            return True
        return speed < self.clock() - self.last_applied

    def _apply(self, attribute: "EntityAttribute") -> None:
        update_type = attribute.get_update_type()
        if update_type is UpdateType.NONE:
            return
        before = attribute.get_value()
        after = apply_recharge(update_type, before, attribute.get_update_value())
        attribute.set_value(after)
        logger.debug(
            "Recharged %s (%s): %r -> %r", attribute.get_name(), update_type.name.lower(), before, after
        )


__all__ = ["Clock", "RechargeScheduler", "apply_recharge", "monotonic_ms"]
