"""Typed, self-recharging attributes for simulation entities."""

from entity_attribute.core import (
    AttributeConfig,
    EntityAttribute,
    EntityAttributeError,
    SchedulerSettings,
    UpdateType,
)

__all__ = [
    "AttributeConfig",
    "EntityAttribute",
    "EntityAttributeError",
    "SchedulerSettings",
    "UpdateType",
]
