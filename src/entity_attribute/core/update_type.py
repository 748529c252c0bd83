from __future__ import annotations

from enum import IntEnum
from typing import Any


class UpdateType(IntEnum):
    """How the recharge scheduler mutates an attribute value on each trigger."""

    NONE = 0  # no recharge
    SUM = 1  # add the recharge value to the current value
    SET = 2  # replace the current value with the recharge value
    PUSH = 3  # append the recharge value (current value must be a sequence)

    @classmethod
    def parse(cls, raw: Any) -> "UpdateType":
        """Coerce a member, integer code or case-insensitive name into a member.

        Raises:
            ValueError: If ``raw`` does not name one of the members.
        """
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            try:
                return cls[raw.strip().upper()]
            except KeyError:
                raise ValueError(f"Unknown update type: {raw!r} (known: {cls.names()})") from None
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise ValueError(f"Unknown update type: {raw!r} (known: {cls.names()})")
        return cls(raw)

    @classmethod
    def names(cls) -> list[str]:
        return [member.name.lower() for member in cls]


__all__ = ["UpdateType"]
