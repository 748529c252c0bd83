"""Errors raised while loading attribute definition files.

A ``LoaderError`` names the offending file (relative to the working
directory when possible) and summarizes what went wrong in it:

- schema failures list the first few pydantic error locations
- attribute construction failures carry their error code
- anything else (YAML syntax, unreadable files) is appended as text
"""

from __future__ import annotations

import os
from typing import Any, Dict, List, Optional, Sequence

from pydantic import ValidationError

from entity_attribute.core.exceptions import EntityAttributeError

SHOWN_SCHEMA_ERRORS = 3


def display_path(path: str) -> str:
    """``path`` relative to the working directory, or unchanged if that is impossible."""
    try:
        return os.path.relpath(path)
    except ValueError:  # pragma: no cover - different drive on Windows
        return path


def summarize_schema_errors(errors: Sequence[Dict[str, Any]], limit: int = SHOWN_SCHEMA_ERRORS) -> str:
    parts: List[str] = []
    for err in errors[:limit]:
        where = ".".join(map(str, err.get("loc", ()))) or "<root>"
        parts.append(f"{where}: {err.get('msg') or err.get('type') or 'validation error'}")
    hidden = len(errors) - limit
    if hidden > 0:
        parts.append(f"... ({hidden} more)")
    return "; ".join(parts)


def describe_cause(cause: Optional[Exception]) -> Optional[str]:
    if cause is None:
        return None
    if isinstance(cause, ValidationError):
        return summarize_schema_errors(cause.errors())
    if isinstance(cause, EntityAttributeError):
        return f"[{cause.code.value}] {cause}"
    return str(cause)


class LoaderError(RuntimeError):
    """An attribute definition file could not be turned into attributes."""

    def __init__(self, file_path: str, message: str, *, cause: Optional[Exception] = None):
        self.file_path = file_path
        self.message = message
        self.cause = cause
        summary = f"{message} ({display_path(file_path)})"
        detail = describe_cause(cause)
        super().__init__(summary if detail is None else f"{summary}: {detail}")


__all__ = ["LoaderError", "describe_cause", "display_path", "summarize_schema_errors"]
