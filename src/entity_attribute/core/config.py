from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from .update_type import UpdateType


class AttributeConfig(BaseModel):
    """Construction options for an entity attribute.

    Fields are untyped here; EntityAttribute validates them and raises
    the ``EntityAttributeError`` family.
    """

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    name: Any = None
    value: Any = None
    update_value: Any = Field(default=None, validation_alias=AliasChoices("update_value", "updateValue"))
    update_speed: Any = Field(default=None, validation_alias=AliasChoices("update_speed", "updateSpeed"))
    update_type: Any = Field(
        default=UpdateType.NONE, validation_alias=AliasChoices("update_type", "updateType")
    )

    @field_validator("update_type", mode="before")
    @classmethod
    def _coerce_update_type(cls, v: Any) -> Any:
        # Unknown names pass through so the attribute raises InvalidRechargeType.
        if isinstance(v, str):
            try:
                return UpdateType.parse(v)
            except ValueError:
                return v
        return v


class SchedulerSettings(BaseModel):
    """Timing knobs for the recharge scheduler."""

    # Seconds between ticks; 0 re-arms on the next loop iteration.
    tick_interval: float = Field(default=0.0, ge=0.0)


__all__ = ["AttributeConfig", "SchedulerSettings"]
