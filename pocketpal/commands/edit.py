"""Edit command: change fields of an existing entry, e.g. /edit 2 -p 9.90."""

from dataclasses import replace

from pocketpal.commands.base import (
    Command,
    validate_category,
    validate_description,
    validate_entry_id,
    validate_price,
)
from pocketpal.domain.entry_log import EntryLog
from pocketpal.domain.models import Entry
from pocketpal.exceptions import InvalidCommandError


class EditCommand(Command):
    """Replace one entry with an updated copy. The timestamp is kept."""

    mutates = True

    def __init__(
        self,
        entry_id: int,
        entry_log: EntryLog,
        description: str | None = None,
        amount: object | None = None,
        category: str | None = None,
    ) -> None:
        """Validate the id and every field that is being changed.

        Raises:
            InvalidEntryIdError: If entry_id is not between 1 and the log size.
            InvalidCommandError: If no field to change was given.
            InvalidDescriptionError: If the new description is empty or multi-line.
            InvalidAmountError: If the new amount is not a positive number.
            InvalidCategoryError: If the new category label is unknown.
        """
        self._index = validate_entry_id(entry_id, entry_log)
        if description is None and amount is None and category is None:
            raise InvalidCommandError("Nothing to edit: give a new description, amount or category")

        self._changes: dict[str, object] = {}
        if description is not None:
            self._changes["description"] = validate_description(description)
        if amount is not None:
            self._changes["amount"] = validate_price(amount)
        if category is not None:
            self._changes["category"] = validate_category(category)

    @property
    def entry_id(self) -> int:
        """0-based index of the entry that will be changed."""
        return self._index

    def execute(self, entry_log: EntryLog) -> Entry:
        updated = replace(entry_log.get(self._index), **self._changes)
        entry_log.replace(self._index, updated)
        return updated
