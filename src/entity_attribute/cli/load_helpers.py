from __future__ import annotations

"""Load attribute definitions for CLI commands, turning loader failures into exit codes."""

from pathlib import Path
from typing import Any, Callable, Dict

import typer
from rich.console import Console
from rich.markup import escape

from entity_attribute.core.attribute import EntityAttribute
from entity_attribute.io.loaders import LoaderError

Loader = Callable[..., Dict[str, EntityAttribute]]


def load_or_exit(
    loader_fn: Loader,
    path: str,
    *,
    console: Console,
    verbose_errors: bool = False,
    **kwargs: Any,
) -> Dict[str, EntityAttribute]:
    """Run ``loader_fn(path, **kwargs)``; exit 1 on a missing path or a loader error."""
    if not Path(path).exists():
        console.print(f"[red]Path not found:[/red] {escape(path)}")
        raise typer.Exit(code=1)
    try:
        return loader_fn(path, **kwargs)
    except LoaderError as err:
        console.print(f"[red]Failed to load data:[/red] {escape(str(err))}")
        if verbose_errors and err.cause is not None:
            console.print(f"[dim]{type(err.cause).__name__}: {escape(repr(err.cause))}[/dim]")
        raise typer.Exit(code=1)


__all__ = ["load_or_exit"]
