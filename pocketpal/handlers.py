"""CLI command handlers: load entries, run a command, save, report.

Each handler prints its outcome and exits with status 1 on failure.
"""

import logging
import sys
from collections.abc import Callable
from typing import Any, NoReturn

import typer
from rich.markup import escape

from pocketpal.commands import AddCommand, Command, DeleteCommand, EditCommand, ViewCommand, parse_command
from pocketpal.config import (
    create_default_config,
    get_config_path,
    get_storage_path,
    load_config,
    save_config,
    validate_delimiter,
)
from pocketpal.dates import parse_user_date
from pocketpal.domain.entry_log import EntryLog
from pocketpal.exceptions import ConfigError, PocketPalError
from pocketpal.render import console, report_result
from pocketpal.store.storage import Storage

logger = logging.getLogger(__name__)


def open_storage() -> Storage:
    """Build a Storage from the user's configuration."""
    config = load_config()
    return Storage(get_storage_path(config), config["delimiter"])


def load_session() -> tuple[Storage, EntryLog]:
    """Open storage and read every entry into a fresh log."""
    storage = open_storage()
    return storage, EntryLog(storage.read_from_database())


def execute_and_save(command: Command, storage: Storage, entry_log: EntryLog) -> Any:
    """Run a command and persist the log if the command changed it.

    Returns:
        Whatever the command's execute() returned.
    """
    result = command.execute(entry_log)
    if command.mutates:
        storage.write_to_database(entry_log.entries)
    return result


def fail(error: PocketPalError) -> NoReturn:
    """Print an error and exit with status 1."""
    console.print(f"[red]Error: {escape(str(error))}[/red]", style="bold")
    sys.exit(1)


def run_single(build: Callable[[EntryLog], Command]) -> None:
    """Load entries, build a command against them, run it and report.

    Args:
        build: Receives the loaded log and returns the command to run.
    """
    try:
        storage, entry_log = load_session()
        command = build(entry_log)
        result = execute_and_save(command, storage, entry_log)
    except PocketPalError as e:
        fail(e)
    report_result(command, result)


def add_command(description: str, amount: str, category: str, date: str | None = None) -> None:
    """Add an expense."""

    def build(entry_log: EntryLog) -> Command:
        timestamp = parse_user_date(date) if date else None
        return AddCommand(description, amount, category, timestamp)

    run_single(build)


def delete_command(entry_id: int) -> None:
    """Delete an expense by its id."""
    run_single(lambda entry_log: DeleteCommand(entry_id, entry_log))


def edit_command(
    entry_id: int,
    description: str | None = None,
    amount: str | None = None,
    category: str | None = None,
) -> None:
    """Change fields of an expense."""
    run_single(lambda entry_log: EditCommand(entry_id, entry_log, description, amount, category))


def view_command(
    count: int | None = None,
    category: str | None = None,
    since: str | None = None,
    until: str | None = None,
    min_amount: str | None = None,
    max_amount: str | None = None,
) -> None:
    """List expenses matching the filters."""

    def build(entry_log: EntryLog) -> Command:
        return ViewCommand(
            count=count,
            category=category,
            start=parse_user_date(since) if since else None,
            end=parse_user_date(until, end_of_day=True) if until else None,
            min_amount=min_amount,
            max_amount=max_amount,
        )

    run_single(build)


def shell_command() -> None:
    """Read slash commands until /bye or end of input."""
    try:
        storage, entry_log = load_session()
    except PocketPalError as e:
        fail(e)

    console.print(f"[cyan]PocketPal[/cyan] [dim]{len(entry_log)} entries loaded. Type /help for commands.[/dim]")

    while True:
        try:
            line = console.input("[bold cyan]>[/bold cyan] ")
        except EOFError:
            console.print()
            break

        if not line.strip():
            continue

        try:
            command = parse_command(line, entry_log)
            result = execute_and_save(command, storage, entry_log)
        except PocketPalError as e:
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            continue

        report_result(command, result)
        if command.is_exit:
            break


def reset_command(yes: bool = False) -> None:
    """Delete every stored entry."""
    try:
        storage = open_storage()
    except PocketPalError as e:
        fail(e)

    if not yes and not typer.confirm(f"Delete all entries in {storage.file_path}?", default=False):
        console.print("[dim]Nothing was deleted[/dim]")
        return

    try:
        storage.reset()
    except PocketPalError as e:
        fail(e)
    console.print(f"[green]✓[/green] All entries deleted from {storage.file_path}")


def init_command(force: bool = False) -> None:
    """Create the config file and an empty entries file."""
    config_path = get_config_path()

    if config_path.exists() and not force:
        console.print("[red]Initialization failed:[/red]", style="bold")
        console.print(f"  Config already exists: {config_path}")
        console.print("\n[yellow]Use 'pocketpal init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
        create_default_config(config_path)
        console.print("[green]✓[/green] Config file created (permissions: 600)")

        storage = open_storage()
        storage.read_from_database()
        console.print(f"[green]✓[/green] Entries file ready at {storage.file_path}")
    except OSError as e:
        console.print(f"[red]Filesystem error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
    except PocketPalError as e:
        fail(e)

    console.print("\n[green]Initialization complete![/green]", style="bold")


def config_command(delimiter: str | None = None, storage_path: str | None = None) -> None:
    """Show the configuration, or change it and rewrite existing entries to match."""
    config_path = get_config_path()

    try:
        config = load_config(config_path)
        if delimiter is None and storage_path is None:
            console.print(f"[dim]Config: {config_path}[/dim]")
            console.print(f"  storage_path: {escape(config['storage_path'])}")
            console.print(f"  delimiter: {escape(repr(config['delimiter']))}")
            return

        old_storage = Storage(get_storage_path(config), config["delimiter"])
        entries = old_storage.read_from_database()

        if delimiter is not None:
            config["delimiter"] = validate_delimiter(delimiter)
        if storage_path is not None:
            if not storage_path.strip():
                raise ConfigError("storage_path must be a non-empty string")
            config["storage_path"] = storage_path

        new_storage = Storage(get_storage_path(config), config["delimiter"])
        new_storage.write_to_database(entries)
        save_config(config, config_path)
    except PocketPalError as e:
        fail(e)
    except OSError as e:
        console.print(f"[red]Filesystem error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    logger.info("Rewrote %d entries to %s", len(entries), new_storage.file_path)
    console.print(f"[green]✓[/green] Config saved to {config_path}")
    console.print(f"[dim]{len(entries)} entries written to {new_storage.file_path}[/dim]")
