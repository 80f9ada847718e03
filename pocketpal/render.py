"""Console rendering of entries and command results."""

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pocketpal.commands import AddCommand, Command, DeleteCommand, EditCommand, HelpCommand, ViewCommand
from pocketpal.dates import format_timestamp
from pocketpal.domain.filters import total_amount, totals_by_category
from pocketpal.domain.models import Entry, format_amount

console = Console()


def format_money(amount: Any) -> str:
    return f"${format_amount(amount)}"


def describe_entry(entry: Entry) -> str:
    """One-line summary of an entry, safe to print as rich markup."""
    when = format_timestamp(entry.timestamp) or "-"
    return (
        f"{escape(entry.description)} [magenta]({entry.category.label})[/magenta] "
        f"{format_money(entry.amount)} [dim]{when}[/dim]"
    )


def render_entries(rows: list[tuple[int, Entry]], show_summary: bool = True) -> None:
    """Print entries as a table followed by totals.

    Args:
        rows: (entry_id, entry) pairs as returned by the view command.
        show_summary: Print the overall and per-category totals.
    """
    if not rows:
        console.print("[yellow]No entries found[/yellow]")
        return

    table = Table(title=f"Entries (showing {len(rows)})")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Date", style="dim")
    table.add_column("Description", style="white")
    table.add_column("Category", style="magenta")
    table.add_column("Amount", justify="right", style="green")

    for entry_id, entry in rows:
        table.add_row(
            str(entry_id),
            format_timestamp(entry.timestamp) or "-",
            escape(entry.description),
            entry.category.label,
            format_money(entry.amount),
        )

    console.print(table)

    if show_summary:
        entries = [entry for _, entry in rows]
        console.print(f"[bold]Total:[/bold] {format_money(total_amount(entries))}")
        for category, amount in totals_by_category(entries).items():
            console.print(f"  {category.label:15} {format_money(amount):>12}")


def report_result(command: Command, result: Any) -> None:
    """Print what a command did."""
    if isinstance(command, AddCommand):
        console.print(f"[green]✓[/green] Added: {describe_entry(result)}")
    elif isinstance(command, DeleteCommand):
        console.print(f"[green]✓[/green] Deleted: {describe_entry(result)}")
    elif isinstance(command, EditCommand):
        console.print(f"[green]✓[/green] Updated entry {command.entry_id + 1}: {describe_entry(result)}")
    elif isinstance(command, ViewCommand):
        render_entries(result)
    elif isinstance(command, HelpCommand):
        console.print(escape(result))
    elif command.is_exit:
        console.print("[cyan]Bye. Your entries are saved.[/cyan]")
