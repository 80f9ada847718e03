"""View command: list entries, optionally filtered."""

from datetime import datetime
from decimal import Decimal

from pocketpal.commands.base import Command, validate_category
from pocketpal.domain.entry_log import EntryLog
from pocketpal.domain.filters import filter_entries
from pocketpal.domain.models import Category, Entry, parse_amount
from pocketpal.exceptions import InvalidAmountError, InvalidCommandError, InvalidDateError


class ViewCommand(Command):
    """Select entries for display without touching the log."""

    def __init__(
        self,
        count: int | None = None,
        category: str | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
        min_amount: object | None = None,
        max_amount: object | None = None,
    ) -> None:
        """Validate the filters.

        Args:
            count: Show only this many of the most recent matches.
            category: Only show this category.
            start: Only show entries at or after this time.
            end: Only show entries at or before this time.
            min_amount: Only show entries costing at least this much.
            max_amount: Only show entries costing at most this much.

        Raises:
            InvalidCommandError: If count is below 1.
            InvalidCategoryError: If the category label is unknown.
            InvalidDateError: If start is after end.
            InvalidAmountError: If an amount is invalid or min exceeds max.
        """
        if count is not None and count < 1:
            raise InvalidCommandError("Number of entries to view must be at least 1")
        if start is not None and end is not None and start > end:
            raise InvalidDateError("Start date must not be after end date")

        self.count = count
        self.category: Category | None = validate_category(category) if category is not None else None
        self.start = start
        self.end = end
        self.min_amount: Decimal | None = parse_amount(min_amount) if min_amount is not None else None
        self.max_amount: Decimal | None = parse_amount(max_amount) if max_amount is not None else None

        for bound in (self.min_amount, self.max_amount):
            if bound is not None and bound < 0:
                raise InvalidAmountError("Price bounds cannot be negative")
        if self.min_amount is not None and self.max_amount is not None and self.min_amount > self.max_amount:
            raise InvalidAmountError("Minimum price must not exceed maximum price")

    def execute(self, entry_log: EntryLog) -> list[tuple[int, Entry]]:
        return filter_entries(
            entry_log.entries,
            category=self.category,
            start=self.start,
            end=self.end,
            min_amount=self.min_amount,
            max_amount=self.max_amount,
            count=self.count,
        )
