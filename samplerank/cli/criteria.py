"""Criteria inspection commands."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from ..config import Config
from .common import console, load_ordering_or_exit, resolve_ordering_path

criteria_app = typer.Typer(help="Inspect ordering criteria")


def _describe_normalization(criterion) -> str:
    params = criterion.normalization_config
    if criterion.type == "numeric":
        return f"{params.min:g}-{params.max:g}, default {params.fallback:g}"
    if criterion.type == "date":
        return f"{params.max:g} day window"
    if criterion.type == "enum":
        return f"{' < '.join(criterion.options)}, default {params.default_value:g}%"
    return f"default {'true' if params.default_value else 'false'}"


@criteria_app.command("list")
def criteria_list(
    ordering: Optional[Path] = typer.Argument(
        None, help="Ordering configuration file (default: from settings)"
    ),
) -> None:
    """List the criteria of an ordering configuration."""
    config = Config()
    ordering_config = load_ordering_or_exit(resolve_ordering_path(config, ordering))

    if not ordering_config.criteria:
        console.print("[yellow]No criteria configured.[/yellow]")
        return

    table = Table(title=f"Criteria - {escape(ordering_config.name or ordering_config.id)}")
    table.add_column("Name", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Weight", style="green", justify="right")
    table.add_column("Direction")
    table.add_column("Active", style="yellow")
    table.add_column("Path", style="blue")
    table.add_column("Normalization", style="dim")

    for criterion in ordering_config.criteria:
        table.add_row(
            escape(criterion.name or criterion.id),
            criterion.type,
            str(criterion.weight),
            "↓ desc" if criterion.direction == "desc" else "↑ asc",
            "✓" if criterion.is_active else "✗",
            escape(criterion.data_path or "-"),
            escape(_describe_normalization(criterion)),
        )

    console.print(table)

    total = ordering_config.total_active_weight
    target = config.config.weight_sum_target
    style = "green" if total == target else "yellow"
    console.print(f"[{style}]Active weight total: {total} (recommended {target})[/{style}]")
