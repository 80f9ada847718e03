"""CLI entry point for PocketPal."""

import typer

from pocketpal.handlers import (
    add_command,
    config_command,
    delete_command,
    edit_command,
    init_command,
    reset_command,
    shell_command,
    view_command,
)
from pocketpal.logs import configure_logging

app = typer.Typer(
    name="pocketpal",
    help="PocketPal - track your expenses from the command line",
    add_completion=False,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """PocketPal - track your expenses from the command line."""
    configure_logging(verbose)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Create the config file and an empty entries file."""
    init_command(force)


@app.command()
def add(
    description: str,
    amount: str,
    category: str,
    date: str = typer.Option(None, "--date", "-t", help="When it was spent (default: now)"),
) -> None:
    """Record an expense."""
    add_command(description, amount, category, date)


@app.command()
def delete(
    entry_id: int = typer.Argument(..., help="Entry ID as shown by 'pocketpal view'"),
) -> None:
    """Delete an expense."""
    delete_command(entry_id)


@app.command()
def edit(
    entry_id: int = typer.Argument(..., help="Entry ID as shown by 'pocketpal view'"),
    description: str = typer.Option(None, "--description", "-d", help="New description"),
    amount: str = typer.Option(None, "--amount", "-p", help="New price"),
    category: str = typer.Option(None, "--category", "-c", help="New category"),
) -> None:
    """Change the description, price or category of an expense."""
    edit_command(entry_id, description, amount, category)


@app.command(name="view")
def view(
    count: int = typer.Argument(None, help="Show only the most recent N matches"),
    category: str = typer.Option(None, "--category", "-c", help="Only this category"),
    since: str = typer.Option(None, "--from", help="Earliest date (inclusive)"),
    until: str = typer.Option(None, "--to", help="Latest date (inclusive)"),
    min_amount: str = typer.Option(None, "--min", help="Minimum price"),
    max_amount: str = typer.Option(None, "--max", help="Maximum price"),
) -> None:
    """List your expenses with totals."""
    view_command(count, category, since, until, min_amount, max_amount)


@app.command()
def reset(
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
) -> None:
    """Delete all stored expenses."""
    reset_command(yes)


@app.command()
def shell() -> None:
    """Start an interactive session that accepts /add, /delete, /edit, /view, /help and /bye."""
    shell_command()


@app.command(name="config")
def config(
    delimiter: str = typer.Option(None, "--delimiter", help="Field delimiter for the entries file"),
    storage_path: str = typer.Option(None, "--storage-path", help="Location of the entries file"),
) -> None:
    """Show or change the configuration."""
    config_command(delimiter, storage_path)


if __name__ == "__main__":
    app()
