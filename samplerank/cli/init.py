"""Init command implementation."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel

from ..config import ConfigModel, save_config, save_ordering
from ..config.loader import default_config_path
from ..ordering import default_configuration

console = Console()


def init_command(
    config_dir: Optional[Path] = typer.Option(
        None,
        "--config-dir",
        "-c",
        help="Configuration directory (default: ~/.config/samplerank)",
    ),
    preview_limit: int = typer.Option(
        10, "--preview-limit", help="Entities ranked by 'preview'", min=1, max=1000
    ),
    with_ordering: bool = typer.Option(
        True,
        "--with-ordering/--no-ordering",
        help="Write the stock ordering criteria to ordering.yaml",
    ),
    force: bool = typer.Option(False, "--force", help="Overwrite existing files"),
) -> None:
    """Initialize samplerank configuration."""
    console.print(Panel.fit("Samplerank - Initialization", style="bold blue"))

    if config_dir is None:
        config_path = default_config_path()
        config_dir = config_path.parent
    else:
        config_path = config_dir / "config.yaml"
    ordering_path = config_dir / "ordering.yaml"

    if config_path.exists() and not force:
        console.print(f"[red]❌ {config_path} already exists (use --force to overwrite)[/red]")
        raise typer.Exit(1)

    config = ConfigModel(
        preview_limit=preview_limit,
        ordering_path=ordering_path.name if with_ordering else None,
    )
    save_config(config, config_path)
    console.print(f"✅ Created config: {config_path}")

    if with_ordering:
        save_ordering(default_configuration(), ordering_path)
        console.print(f"✅ Created ordering: {ordering_path}")

    console.print(
        Panel(
            f"[green]✅ Samplerank initialized![/green]\n\n"
            f"Configuration: {config_path}\n\n"
            f"Next steps:\n"
            f"1. Review the criteria: [bold]samplerank criteria list[/bold]\n"
            f"2. Rank a batch: [bold]samplerank rank samples.json[/bold]",
            style="green",
        )
    )
