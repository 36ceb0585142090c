"""Command-line interface for mangashelf.

Built with Typer for commands and Rich for beautiful output.
"""

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from . import __version__
from .config import get_config

# Create the main app
app = typer.Typer(
    name="mangashelf",
    help="Check manga library backups before restoring them.",
    no_args_is_help=True,
)

# Create sub-apps for command groups
backup_app = typer.Typer(help="Inspect backup files.")
app.add_typer(backup_app, name="backup")

# Rich console for pretty output
console = Console()


# ============================================================================
# Helper Functions
# ============================================================================


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def setup_logging() -> None:
    """Send debug logs through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Check manga library backups before restoring them."""
    if verbose:
        setup_logging()


@app.command()
def version() -> None:
    """Show the mangashelf version."""
    console.print(f"mangashelf {__version__}")


# ============================================================================
# Backup Commands
# ============================================================================


@backup_app.command("validate")
def backup_validate(
    backup_path: Path = typer.Argument(..., help="Path to backup file"),
    sources: Optional[Path] = typer.Option(None, "--sources", "-s", help="Installed sources file"),
    trackers: Optional[Path] = typer.Option(None, "--trackers", "-t", help="Tracker login state file"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Check whether a backup can be restored and what will be missing."""
    from .backup import BackupRestoreValidator, BackupValidationError
    from .registry import RegistryError, load_source_registry, load_tracking_registry

    if not backup_path.exists():
        print_error(f"Backup file not found: {backup_path}")
        raise typer.Exit(1)

    config = get_config()
    for problem in config.validate():
        print_warning(problem)

    try:
        source_registry = load_source_registry(sources or config.sources_file)
        tracking_registry = load_tracking_registry(trackers or config.trackers_file)
    except RegistryError as e:
        print_error(str(e))
        raise typer.Exit(1)

    validator = BackupRestoreValidator(source_registry, tracking_registry)
    try:
        result = validator.validate_file(backup_path)
    except BackupValidationError as e:
        if as_json:
            typer.echo(json.dumps({"error": e.message, "kind": type(e).__name__}))
        else:
            print_error(e.message)
        raise typer.Exit(1)
    except OSError as e:
        message = f"Cannot read backup file {backup_path}: {e.strerror or e}"
        if as_json:
            typer.echo(json.dumps({"error": message, "kind": type(e).__name__}))
        else:
            print_error(message)
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
        return

    if result.is_clean:
        print_success("Backup can be restored with all sources and trackers available.")
        return

    console.print(Panel("[bold]Backup can be restored with missing data[/bold]", style="yellow"))

    if result.missing_sources:
        console.print(f"\n[bold]Missing sources ({len(result.missing_sources)}):[/bold]")
        for name in result.missing_sources:
            console.print(f"  - {name}")
        console.print("[dim]Install these sources to restore their manga.[/dim]")

    if result.missing_trackers:
        console.print(f"\n[bold]Trackers not logged in ({len(result.missing_trackers)}):[/bold]")
        for name in result.missing_trackers:
            console.print(f"  - {name}")
        console.print("[dim]Log in to these trackers to restore tracking data.[/dim]")
