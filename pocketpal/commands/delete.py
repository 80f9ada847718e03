"""Delete command: remove an entry by its id, e.g. /delete 10."""

from pocketpal.commands.base import Command, validate_entry_id
from pocketpal.domain.entry_log import EntryLog
from pocketpal.domain.models import Entry


class DeleteCommand(Command):
    """Remove the entry at a 1-based id from the log."""

    mutates = True

    def __init__(self, entry_id: int, entry_log: EntryLog) -> None:
        """Check the id against the current log.

        Raises:
            InvalidEntryIdError: If entry_id is not between 1 and the log size.
        """
        self._index = validate_entry_id(entry_id, entry_log)

    @property
    def entry_id(self) -> int:
        """0-based index of the entry that will be removed."""
        return self._index

    def execute(self, entry_log: EntryLog) -> Entry:
        return entry_log.delete(self._index)
