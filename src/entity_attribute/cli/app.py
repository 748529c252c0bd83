"""
Entity attribute CLI: validate attribute definitions and watch them recharge.

- `validate` loads YAML definitions and lists them
- `run` starts one attribute's recharge scheduler for a while and prints
  its value over time
"""

from __future__ import annotations

import asyncio
import json
from typing import Any, Dict, List, Tuple

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from entity_attribute.cli.load_helpers import load_or_exit
from entity_attribute.cli.paths import kb_attributes_path
from entity_attribute.core.attribute import EntityAttribute
from entity_attribute.core.config import SchedulerSettings
from entity_attribute.core.exceptions import EntityAttributeError
from entity_attribute.io.loaders import load_attributes
from entity_attribute.utils.logging import configure_logging

app = typer.Typer(help="Entity attribute CLI: validate definitions and run recharge schedulers.")
console = Console()

TimelineRow = Tuple[float, str, Any]


def _policy_cells(attribute: EntityAttribute) -> Tuple[str, str, str]:
    if not attribute.is_updatable():
        return ("none", "-", "-")
    return (
        attribute.get_update_type().name.lower(),
        str(attribute.get_update_speed()),
        repr(attribute.get_update_value()),
    )


def _render_attributes(attributes: Dict[str, EntityAttribute]) -> None:
    table = Table(title="Attributes")
    table.add_column("Name")
    table.add_column("Value")
    table.add_column("Recharge")
    table.add_column("Speed")
    table.add_column("Operand")

    for name in sorted(attributes):
        attribute = attributes[name]
        table.add_row(escape(name), escape(repr(attribute.get_value())), *map(escape, _policy_cells(attribute)))

    console.print(table)


def _render_timeline(attribute: EntityAttribute, rows: List[TimelineRow]) -> None:
    table = Table(title=f"{attribute.get_name()} timeline")
    table.add_column("t (s)", justify="right")
    table.add_column("Event")
    table.add_column("Value")

    for elapsed, event, value in rows:
        style = "" if event == "sample" else "bold"
        table.add_row(f"{elapsed:.3f}", event, escape(repr(value)), style=style)

    console.print(table)


def _parse_override(raw: str) -> Any:
    """Interpret --set-value as JSON, falling back to plain text."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


async def _drive(attribute: EntityAttribute, duration: float, sample: float) -> List[TimelineRow]:
    loop = asyncio.get_running_loop()
    started = loop.time()
    rows: List[TimelineRow] = []

    def on_start() -> None:
        rows.append((loop.time() - started, "start", attribute.get_value()))

    def on_stop() -> None:
        rows.append((loop.time() - started, "stop", attribute.get_value()))

    attribute.add_start_handler(on_start)
    attribute.register_stop_handler(on_stop)
    attribute.start_update_handler()
    try:
        while loop.time() - started < duration:
            await asyncio.sleep(sample)
            rows.append((loop.time() - started, "sample", attribute.get_value()))
    finally:
        attribute.stop_update_handler()
        attribute.remove_start_handler(on_start)
        attribute.remove_stop_handler(on_stop)
    return rows


@app.command()
def validate(
    path: str | None = typer.Argument(None, help="Attribute YAML file or folder (default: kb/attributes)"),
    verbose: bool = typer.Option(False, "--verbose-load", help="Display full validation trace on loader errors"),
) -> None:
    """Validate attribute definitions."""
    attributes = load_or_exit(load_attributes, kb_attributes_path(path), console=console, verbose_errors=verbose)

    _render_attributes(attributes)
    console.print(f"[green]OK[/green] Loaded {len(attributes)} attribute(s)")


@app.command()
def run(
    name: str = typer.Argument(..., help="Attribute name"),
    path: str | None = typer.Option(None, help="Attribute YAML file or folder (default: kb/attributes)"),
    duration: float = typer.Option(2.0, min=0.0, help="Seconds to keep the scheduler running"),
    sample: float = typer.Option(0.25, min=0.001, help="Seconds between value samples"),
    set_value: str | None = typer.Option(None, "--set-value", help="Starting value override (JSON literal)"),
    tick_interval: float = typer.Option(0.0, min=0.0, help="Seconds between scheduler ticks (0 = every loop turn)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Run one attribute's recharge scheduler and print its value over time."""
    configure_logging(verbose)
    settings = SchedulerSettings(tick_interval=tick_interval)
    attributes = load_or_exit(load_attributes, kb_attributes_path(path), console=console, settings=settings)

    attribute = attributes.get(name)
    if attribute is None:
        available = ", ".join(sorted(attributes)) or "none"
        console.print(f"[red]Attribute not found[/red]: {escape(name)} (available: {escape(available)})")
        raise typer.Exit(code=2)

    if set_value is not None:
        try:
            attribute.set_value(_parse_override(set_value))
        except EntityAttributeError as err:
            console.print(f"[red]Bad --set-value[/red]: {escape(str(err))}")
            raise typer.Exit(code=2)

    if not attribute.is_updatable():
        value = escape(repr(attribute.get_value()))
        console.print(f"[yellow]{escape(name)} does not recharge[/yellow]; value stays {value}")
        return

    console.print(f"[cyan]Running[/cyan] {escape(attribute.describe())} for {duration:g}s")
    rows = asyncio.run(_drive(attribute, duration, sample))
    _render_timeline(attribute, rows)


if __name__ == "__main__":
    app()
