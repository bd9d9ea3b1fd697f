"""Rank and preview command implementations."""

import json
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import pendulum
import typer
from rich.markup import escape
from rich.table import Table

from ..config import Config
from ..ordering import OrderingError, RankedResult, preview_subset, rank
from .common import (
    console,
    entity_label,
    load_entities_or_exit,
    load_ordering_or_exit,
    resolve_ordering_path,
)


def _parse_now(now: Optional[str]) -> Optional[datetime]:
    if now is None:
        return None
    try:
        moment = pendulum.parse(now)
    except ValueError as e:
        console.print(f"[red]❌ Invalid --now value '{escape(now)}': {escape(str(e))}[/red]")
        raise typer.Exit(1)
    if not isinstance(moment, datetime):
        console.print(f"[red]❌ --now must be a date or date-time, got '{escape(now)}'[/red]")
        raise typer.Exit(1)
    return moment


def print_ranking(results: List[RankedResult], title: str) -> None:
    """Print ranked results as a table."""
    table = Table(title=title)
    table.add_column("#", style="bold", justify="right")
    table.add_column("Sample", style="cyan")
    table.add_column("Score", style="green", justify="right")
    table.add_column("Breakdown", style="magenta")
    table.add_column("Reason", style="dim")

    for result in results:
        breakdown = " ".join(
            f"{c.criterion_name or c.criterion_id}:{c.oriented_score:.0f}"
            + ("*" if c.used_default else "")
            for c in result.breakdown
        )
        table.add_row(
            str(result.position),
            escape(entity_label(result.entity, result.input_index)),
            f"{result.aggregate_score:.1f}",
            escape(breakdown),
            escape(result.reason),
        )

    console.print(table)
    if any(c.used_default for r in results for c in r.breakdown):
        console.print("[dim]* default value used[/dim]")


def _emit(results: List[RankedResult], title: str, as_json: bool) -> None:
    if as_json:
        payload = [r.model_dump(mode="json") for r in results]
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print_ranking(results, title)


def rank_command(
    entities: Path = typer.Argument(..., help="YAML or JSON file with the samples"),
    ordering: Optional[Path] = typer.Option(
        None, "--ordering", "-o", help="Ordering configuration file"
    ),
    now: Optional[str] = typer.Option(
        None, "--now", help="Reference time for date criteria (ISO 8601). Default: now"
    ),
    top: Optional[int] = typer.Option(None, "--top", "-t", help="Only show the first N", min=1),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
) -> None:
    """Rank every sample in ENTITIES."""
    config = Config()
    ordering_config = load_ordering_or_exit(resolve_ordering_path(config, ordering))
    records = load_entities_or_exit(entities)

    try:
        results = rank(
            records,
            ordering_config,
            now=_parse_now(now),
            weight_sum_target=config.config.weight_sum_target,
        )
    except OrderingError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if top is not None:
        results = results[:top]
    _emit(results, f"Ranking - {escape(ordering_config.name or ordering_config.id)}", as_json)


def preview_command(
    entities: Path = typer.Argument(..., help="YAML or JSON file with the samples"),
    ordering: Optional[Path] = typer.Option(
        None, "--ordering", "-o", help="Ordering configuration file"
    ),
    limit: Optional[int] = typer.Option(
        None, "--limit", "-l", help="Samples to rank (default: preview_limit setting)", min=0
    ),
    now: Optional[str] = typer.Option(
        None, "--now", help="Reference time for date criteria (ISO 8601). Default: now"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
) -> None:
    """Rank only the first samples in ENTITIES."""
    config = Config()
    if limit is None:
        limit = config.config.preview_limit

    ordering_config = load_ordering_or_exit(resolve_ordering_path(config, ordering))
    records = load_entities_or_exit(entities)

    try:
        results = preview_subset(
            records,
            ordering_config,
            limit,
            now=_parse_now(now),
            weight_sum_target=config.config.weight_sum_target,
        )
    except OrderingError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(1)

    _emit(results, f"Preview ({len(results)} of {len(records)})", as_json)
