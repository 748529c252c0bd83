from __future__ import annotations

"""Utilities for resolving attribute definition paths."""

from pathlib import Path


def kb_dir() -> Path:
    return Path.cwd() / "kb"


def kb_attributes_path(path: str | None) -> str:
    return path or str(kb_dir() / "attributes")


__all__ = ["kb_attributes_path", "kb_dir"]
