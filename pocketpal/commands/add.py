"""Add command: record a new expense, e.g. /add -d Rice -c Food -p 8.50."""

from datetime import datetime

from pocketpal.commands.base import Command, validate_category, validate_description, validate_price
from pocketpal.dates import now
from pocketpal.domain.entry_log import EntryLog
from pocketpal.domain.models import Entry


class AddCommand(Command):
    """Append one entry to the log."""

    mutates = True

    def __init__(
        self,
        description: str,
        amount: object,
        category: str,
        timestamp: datetime | None = None,
    ) -> None:
        """Validate the new entry.

        Args:
            description: What the money was spent on.
            amount: Price as a string or number, must be positive.
            category: Category label, case-insensitive.
            timestamp: When it was spent. Defaults to now (minute precision).

        Raises:
            InvalidDescriptionError: If the description is empty or multi-line.
            InvalidAmountError: If the amount is not a positive number.
            InvalidCategoryError: If the category label is unknown.
        """
        self._entry = Entry(
            description=validate_description(description),
            amount=validate_price(amount),
            category=validate_category(category),
            timestamp=timestamp if timestamp is not None else now(),
        )

    @property
    def entry(self) -> Entry:
        return self._entry

    def execute(self, entry_log: EntryLog) -> Entry:
        entry_log.append(self._entry)
        return self._entry
