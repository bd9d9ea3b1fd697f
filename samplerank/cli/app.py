"""Main CLI application."""

import logging

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

# Load .env file if it exists
load_dotenv()

from ..config import Config
from .criteria import criteria_app
from .init import init_command
from .rank import preview_command, rank_command
from .validate import validate_command

console = Console(stderr=True)

app = typer.Typer(
    name="samplerank",
    help="Samplerank - weighted, explainable ordering of samples",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level"),
) -> None:
    """Configure logging before any command runs."""
    try:
        level = "DEBUG" if verbose else Config().config.log_level
    except ValueError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(1)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


# Register commands
app.command("init")(init_command)
app.command("validate")(validate_command)
app.command("rank")(rank_command)
app.command("preview")(preview_command)
app.add_typer(criteria_app, name="criteria", help="Inspect ordering criteria")


if __name__ == "__main__":
    app()
