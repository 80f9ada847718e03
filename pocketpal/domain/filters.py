"""Pure functions for selecting and summing entries.

This module contains the functional core for the view command:
- No I/O operations (no files, no console)
- No side effects
- Entry ids returned here are 1-based, matching what users type
"""

from collections.abc import Iterable, Sequence
from datetime import datetime
from decimal import Decimal

from pocketpal.domain.models import Category, Entry


def in_date_range(entry: Entry, start: datetime | None, end: datetime | None) -> bool:
    """Check whether an entry falls inside an inclusive date range.

    Entries without a timestamp only match when no range is given.

    Args:
        entry: Entry to check.
        start: Earliest timestamp, or None for no lower bound.
        end: Latest timestamp, or None for no upper bound.

    Returns:
        True if the entry is inside the range.
    """
    if start is None and end is None:
        return True
    if entry.timestamp is None:
        return False
    if start is not None and entry.timestamp < start:
        return False
    if end is not None and entry.timestamp > end:
        return False
    return True


def in_amount_range(entry: Entry, min_amount: Decimal | None, max_amount: Decimal | None) -> bool:
    """Check whether an entry amount lies inside an inclusive range."""
    if min_amount is not None and entry.amount < min_amount:
        return False
    if max_amount is not None and entry.amount > max_amount:
        return False
    return True


def filter_entries(
    entries: Sequence[Entry],
    category: Category | None = None,
    start: datetime | None = None,
    end: datetime | None = None,
    min_amount: Decimal | None = None,
    max_amount: Decimal | None = None,
    count: int | None = None,
) -> list[tuple[int, Entry]]:
    """Select entries matching every given criterion.

    Args:
        entries: Entries in log order.
        category: Only keep entries of this category.
        start: Only keep entries at or after this time.
        end: Only keep entries at or before this time.
        min_amount: Only keep entries costing at least this much.
        max_amount: Only keep entries costing at most this much.
        count: Keep only the most recent matches (the last ones in the log).

    Returns:
        List of (entry_id, entry) pairs in log order, entry_id being 1-based.
    """
    matches = [
        (entry_id, entry)
        for entry_id, entry in enumerate(entries, start=1)
        if (category is None or entry.category is category)
        and in_date_range(entry, start, end)
        and in_amount_range(entry, min_amount, max_amount)
    ]
    if count is not None:
        matches = matches[-count:] if count > 0 else []
    return matches


def total_amount(entries: Iterable[Entry]) -> Decimal:
    """Sum of the entry amounts."""
    return sum((entry.amount for entry in entries), start=Decimal("0.00"))


def totals_by_category(entries: Iterable[Entry]) -> dict[Category, Decimal]:
    """Sum amounts per category, largest total first.

    Args:
        entries: Entries to summarise.

    Returns:
        Dictionary of category to total, ordered by total descending.
    """
    totals: dict[Category, Decimal] = {}
    for entry in entries:
        totals[entry.category] = totals.get(entry.category, Decimal("0.00")) + entry.amount
    return dict(sorted(totals.items(), key=lambda item: item[1], reverse=True))
