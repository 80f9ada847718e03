"""Flat file persistence for entries.

One entry per line, fields joined by a delimiter in the order
description, amount, category label, timestamp. Reading is strict: the
first malformed line aborts the whole load.
"""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from pocketpal.dates import format_timestamp, parse_timestamp
from pocketpal.domain.models import Category, Entry, format_amount, parse_amount
from pocketpal.exceptions import (
    ConfigError,
    InvalidAmountError,
    InvalidDateError,
    InvalidReadFileError,
    ReadFileErrorReason,
    StorageError,
)

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = ","
FIELD_COUNT = 4

# Characters that can occur in stored amounts and timestamps. Letters are
# refused as well because every category label is made of them.
RESERVED_DELIMITER_CHARS = set("0123456789./:+- \r\n")


def validate_delimiter(delimiter: object) -> str:
    """Check that a delimiter can separate stored fields unambiguously.

    Raises:
        ConfigError: If the delimiter is empty, holds a letter or a reserved character.
    """
    if not isinstance(delimiter, str) or not delimiter:
        raise ConfigError("delimiter must be a non-empty string")
    clashing = {c for c in delimiter if c.isalpha() or c in RESERVED_DELIMITER_CHARS}
    if clashing:
        raise ConfigError(
            f"delimiter must not contain letters, digits or any of '.', '/', ':', '+', '-', space; "
            f"got {' '.join(sorted(repr(c) for c in clashing))}"
        )
    return delimiter


def get_xdg_data_home() -> Path:
    """Get XDG data directory, with fallback to ~/.local/share."""
    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data)
    return Path.home() / ".local" / "share"


def get_default_storage_path() -> Path:
    """Get the default entries file path (XDG compliant)."""
    return get_xdg_data_home() / "pocketpal" / "entries.txt"


class Storage:
    """Reads and writes entries to a delimiter separated text file."""

    def __init__(self, file_path: Path | str | None = None, delimiter: str = DEFAULT_DELIMITER) -> None:
        if file_path is None:
            file_path = get_default_storage_path()
        self.file_path = Path(file_path)
        self.delimiter = validate_delimiter(delimiter)

    def _make_file_if_not_exists(self) -> None:
        """Create the file and its parent directories if they are missing.

        Raises:
            StorageError: If the directories or file cannot be created.
        """
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            self.file_path.touch(exist_ok=True)
        except OSError as e:
            raise StorageError(f"Unable to create {self.file_path}: {e}") from e

    def read_entry_line(self, line: str) -> Entry:
        """Turn one stored line back into an Entry.

        Fields are split from the right, so the description may itself
        contain the delimiter.

        Args:
            line: Stored line without its line separator.

        Returns:
            The entry the line describes.

        Raises:
            InvalidReadFileError: If a field is missing or cannot be parsed.
        """
        fields = line.rsplit(self.delimiter, FIELD_COUNT - 1)
        if len(fields) < FIELD_COUNT:
            raise InvalidReadFileError(line, ReadFileErrorReason.MISSING_FIELDS)

        description, amount_string, category_string, timestamp_string = fields
        try:
            amount = parse_amount(amount_string)
        except InvalidAmountError as e:
            raise InvalidReadFileError(line, ReadFileErrorReason.AMOUNT) from e
        # Stored labels must match exactly
        try:
            category = Category(category_string)
        except ValueError as e:
            raise InvalidReadFileError(line, ReadFileErrorReason.CATEGORY) from e
        try:
            timestamp = parse_timestamp(timestamp_string)
        except InvalidDateError as e:
            raise InvalidReadFileError(line, ReadFileErrorReason.DATE) from e

        return Entry(description, amount, category, timestamp)

    def write_entry_line(self, entry: Entry) -> str:
        """Serialize an entry to a single line, without the line separator.

        The amount is truncated to two decimals, never rounded up.
        """
        return self.delimiter.join(
            [
                entry.description,
                format_amount(entry.amount),
                entry.category.label,
                format_timestamp(entry.timestamp),
            ]
        )

    def read_from_database(self) -> list[Entry]:
        """Load every stored entry, creating an empty file on first use.

        Returns:
            Entries in file order.

        Raises:
            InvalidReadFileError: On the first malformed line.
            StorageError: If the file cannot be created or read.
        """
        self._make_file_if_not_exists()
        entries: list[Entry] = []
        try:
            with self.file_path.open("r", encoding="utf-8") as handle:
                for line in handle:
                    entries.append(self.read_entry_line(line.rstrip("\r\n")))
        except InvalidReadFileError as e:
            logger.warning("Aborting load of %s: %s", self.file_path, e)
            raise
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Unable to read from {self.file_path}: {e}") from e

        logger.debug("Loaded %d entries from %s", len(entries), self.file_path)
        return entries

    def write_to_database(self, entries: Iterable[Entry]) -> None:
        """Replace the file contents with the given entries.

        Raises:
            StorageError: If the file cannot be written.
        """
        self._make_file_if_not_exists()
        lines = [self.write_entry_line(entry) for entry in entries]
        try:
            # Text mode turns "\n" into the platform line separator
            with self.file_path.open("w", encoding="utf-8") as handle:
                for line in lines:
                    handle.write(line + "\n")
        except OSError as e:
            raise StorageError(f"Unable to write to {self.file_path}: {e}") from e

        logger.debug("Wrote %d entries to %s", len(lines), self.file_path)

    def reset(self) -> None:
        """Delete the file and recreate it empty.

        Raises:
            StorageError: If the file cannot be removed or recreated.
        """
        try:
            self.file_path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Unable to delete {self.file_path}: {e}") from e
        self._make_file_if_not_exists()
        logger.info("Reset storage file %s", self.file_path)
