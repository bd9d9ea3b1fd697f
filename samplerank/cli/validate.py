"""Validate command implementation."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from ..config import Config, load_ordering_data
from ..ordering import has_errors, validate
from .common import console, resolve_ordering_path


def validate_command(
    ordering: Optional[Path] = typer.Argument(
        None, help="Ordering configuration file (default: from settings)"
    ),
) -> None:
    """Check an ordering configuration and list every problem."""
    config = Config()
    path = resolve_ordering_path(config, ordering)

    try:
        data = load_ordering_data(path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(1)

    issues = validate(data, weight_sum_target=config.config.weight_sum_target)
    if not issues:
        console.print(f"[green]✅ {escape(path.name)}: no problems found[/green]")
        return

    table = Table(title=f"Issues in {escape(path.name)}")
    table.add_column("Severity", style="bold")
    table.add_column("Code", style="cyan")
    table.add_column("Criterion", style="magenta")
    table.add_column("Message")

    for issue in issues:
        severity = "[red]error[/red]" if issue.is_error else "[yellow]warning[/yellow]"
        table.add_row(
            severity, issue.code, escape(issue.criterion_id or "-"), escape(issue.message)
        )

    console.print(table)

    if has_errors(issues):
        raise typer.Exit(1)
