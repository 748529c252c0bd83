from .attribute import EntityAttribute
from .config import AttributeConfig, SchedulerSettings
from .exceptions import (
    EntityAttributeError,
    EntityAttributeErrorCode,
    InvalidAttributeValue,
    InvalidName,
    InvalidRechargeSpeed,
    InvalidRechargeType,
    InvalidRechargeValue,
    InvalidStartHandler,
    InvalidStopHandler,
)
from .handlers import HandlerRegistry
from .scheduler import RechargeScheduler, apply_recharge
from .update_type import UpdateType
from .value_kind import value_kind

__all__ = [
    "AttributeConfig",
    "EntityAttribute",
    "EntityAttributeError",
    "EntityAttributeErrorCode",
    "HandlerRegistry",
    "InvalidAttributeValue",
    "InvalidName",
    "InvalidRechargeSpeed",
    "InvalidRechargeType",
    "InvalidRechargeValue",
    "InvalidStartHandler",
    "InvalidStopHandler",
    "RechargeScheduler",
    "SchedulerSettings",
    "UpdateType",
    "apply_recharge",
    "value_kind",
]
