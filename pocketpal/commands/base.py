"""Base class and shared validation for PocketPal commands.

A command checks its arguments when it is built and touches the entry log
only in execute(). A command that failed validation never exists, so it can
never run half way.
"""

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any

from pocketpal.domain.entry_log import EntryLog
from pocketpal.domain.models import Category, parse_amount, truncate_amount
from pocketpal.exceptions import InvalidAmountError, InvalidDescriptionError, InvalidEntryIdError

logger = logging.getLogger(__name__)


class Command(ABC):
    """A single user action against an entry log."""

    # Whether execute() changes the log, telling the caller to persist afterwards
    mutates: bool = False
    # Whether the interactive shell should stop after this command
    is_exit: bool = False

    @abstractmethod
    def execute(self, entry_log: EntryLog) -> Any:
        """Run the command against the log."""


def validate_description(description: str) -> str:
    """Strip a description and make sure it fits on one stored line.

    Raises:
        InvalidDescriptionError: If empty or containing a line break.
    """
    cleaned = description.strip()
    if not cleaned:
        raise InvalidDescriptionError("Description cannot be empty")
    if "\n" in cleaned or "\r" in cleaned:
        raise InvalidDescriptionError("Description must fit on a single line")
    return cleaned


def validate_price(raw: object) -> Decimal:
    """Parse a price and require it to be at least one cent once truncated.

    Raises:
        InvalidAmountError: If not a number or below 0.01.
    """
    amount = parse_amount(raw)
    if truncate_amount(amount) <= 0:
        raise InvalidAmountError("Amount must be at least 0.01")
    return amount


def validate_category(label: str) -> Category:
    """Resolve a category label. Raises InvalidCategoryError for unknown labels."""
    return Category.from_label(label)


def validate_entry_id(entry_id: int, entry_log: EntryLog) -> int:
    """Check a 1-based entry id against the log and convert it to a 0-based index.

    Args:
        entry_id: Id as shown to the user.
        entry_log: Log the id must refer into.

    Returns:
        The 0-based index.

    Raises:
        InvalidEntryIdError: If entry_id is not between 1 and the log size.
    """
    if entry_id <= 0 or entry_id > entry_log.size:
        logger.warning("Input entry ID %s is invalid for a log of %d entries", entry_id, entry_log.size)
        raise InvalidEntryIdError(f"Entry ID must be between 1 and {entry_log.size}, got {entry_id}")
    return entry_id - 1
