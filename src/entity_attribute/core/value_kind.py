"""
Value kinds

An attribute keeps the *kind* of its first value for its whole lifetime. Kinds
are coarser than Python types so that, e.g., ``100`` and ``99.5`` are both
numbers, while a ``bool`` is never mistaken for one.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from numbers import Number
from typing import Any


BOOLEAN = "boolean"
NUMBER = "number"
TEXT = "text"
BINARY = "binary"
SEQUENCE = "sequence"
MAPPING = "mapping"


def value_kind(value: Any) -> str:
    """Return the kind of ``value``.

    Unknown objects fall back to their class's qualified name, so two
    instances of the same custom class share a kind.

    Raises:
        ValueError: For ``None``, which has no kind.
    """
    if value is None:
        raise ValueError("None has no value kind")
    if isinstance(value, bool):
        return BOOLEAN
    if isinstance(value, Number):
        return NUMBER
    if isinstance(value, str):
        return TEXT
    if isinstance(value, (bytes, bytearray)):
        return BINARY
    if isinstance(value, Mapping):
        return MAPPING
    if isinstance(value, Sequence):
        return SEQUENCE
    return type(value).__qualname__


__all__ = [
    "BINARY",
    "BOOLEAN",
    "MAPPING",
    "NUMBER",
    "SEQUENCE",
    "TEXT",
    "value_kind",
]
