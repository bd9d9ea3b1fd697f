"""Helpers shared by CLI commands."""

from pathlib import Path
from typing import Any, List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..config import Config, load_entities, load_ordering

console = Console()


def resolve_ordering_path(config: Config, ordering: Optional[Path]) -> Path:
    """Use ``ordering`` if given, else the ordering file from the settings."""
    if ordering is not None:
        return ordering
    path = config.ordering_path
    if path is None:
        console.print(
            "[red]No ordering file given and none configured. "
            "Pass --ordering or run 'samplerank init'.[/red]"
        )
        raise typer.Exit(1)
    return path


def load_ordering_or_exit(path: Path):
    try:
        return load_ordering(path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(1)


def load_entities_or_exit(path: Path) -> List[Any]:
    try:
        return load_entities(path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(1)


def entity_label(entity: Any, index: int) -> str:
    """Short label for an entity: its code, id or name if it has one."""
    if isinstance(entity, dict):
        for key in ("code", "id", "name"):
            if entity.get(key) not in (None, ""):
                return str(entity[key])
    return f"#{index + 1}"
