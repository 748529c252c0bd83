from __future__ import annotations

"""Validation errors raised by entity attributes."""

from enum import Enum
from typing import Any


class EntityAttributeErrorCode(str, Enum):
    INVALID_NAME = "invalid_name"
    INVALID_ATTRIBUTE_VALUE = "invalid_attribute_value"
    INVALID_RECHARGE_TYPE = "invalid_recharge_type"
    INVALID_RECHARGE_SPEED = "invalid_recharge_speed"
    INVALID_RECHARGE_VALUE = "invalid_recharge_value"
    INVALID_START_HANDLER = "invalid_start_handler"
    INVALID_STOP_HANDLER = "invalid_stop_handler"


class EntityAttributeError(ValueError):
    """Base class for attribute validation failures; carries a code and the offending detail."""

    code: EntityAttributeErrorCode
    title = "Invalid entity attribute"

    def __init__(self, detail: Any = None):
        self.detail = detail
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        if self.detail is None:
            return self.title
        if isinstance(self.detail, str):
            return f"{self.title}: {self.detail}"
        return f"{self.title}: {self.detail!r}"


class InvalidName(EntityAttributeError):
    code = EntityAttributeErrorCode.INVALID_NAME
    title = "Attribute name must be a non-empty string"


class InvalidAttributeValue(EntityAttributeError):
    code = EntityAttributeErrorCode.INVALID_ATTRIBUTE_VALUE
    title = "Invalid attribute value"


class InvalidRechargeType(EntityAttributeError):
    code = EntityAttributeErrorCode.INVALID_RECHARGE_TYPE
    title = "Invalid recharge type"


class InvalidRechargeSpeed(EntityAttributeError):
    code = EntityAttributeErrorCode.INVALID_RECHARGE_SPEED
    title = "Invalid recharge speed"


class InvalidRechargeValue(EntityAttributeError):
    code = EntityAttributeErrorCode.INVALID_RECHARGE_VALUE
    title = "Invalid recharge value"


class InvalidStartHandler(EntityAttributeError, TypeError):
    code = EntityAttributeErrorCode.INVALID_START_HANDLER
    title = "Invalid start handler"


class InvalidStopHandler(EntityAttributeError, TypeError):
    code = EntityAttributeErrorCode.INVALID_STOP_HANDLER
    title = "Invalid stop handler"


__all__ = [
    "EntityAttributeError",
    "EntityAttributeErrorCode",
    "InvalidAttributeValue",
    "InvalidName",
    "InvalidRechargeSpeed",
    "InvalidRechargeType",
    "InvalidRechargeValue",
    "InvalidStartHandler",
    "InvalidStopHandler",
]
