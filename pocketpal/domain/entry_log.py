"""In-memory ordered collection of entries for the active session."""

from collections.abc import Iterable, Iterator

from pocketpal.domain.models import Entry


class EntryLog:
    """Ordered list of entries. Indexes here are 0-based."""

    def __init__(self, entries: Iterable[Entry] = ()) -> None:
        self._entries: list[Entry] = list(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(tuple(self._entries))

    @property
    def size(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple[Entry, ...]:
        """Snapshot of the entries in insertion order."""
        return tuple(self._entries)

    def append(self, entry: Entry) -> None:
        self._entries.append(entry)

    def get(self, index: int) -> Entry:
        self._check_index(index)
        return self._entries[index]

    def delete(self, index: int) -> Entry:
        """Remove the entry at a position.

        Args:
            index: 0-based position.

        Returns:
            The removed entry.

        Raises:
            IndexError: If index is negative or past the end.
        """
        self._check_index(index)
        return self._entries.pop(index)

    def replace(self, index: int, entry: Entry) -> Entry:
        """Swap the entry at a position for another one and return the old entry."""
        self._check_index(index)
        old = self._entries[index]
        self._entries[index] = entry
        return old

    def _check_index(self, index: int) -> None:
        # Python would happily accept negative indexes, the log does not
        if not 0 <= index < len(self._entries):
            raise IndexError(f"Entry index {index} out of range for log of size {len(self._entries)}")
