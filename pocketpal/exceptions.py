"""Exception types raised by PocketPal.

Every error the application reports to the user derives from PocketPalError,
so the CLI can catch a single type and print the message.
"""

from enum import Enum


class PocketPalError(Exception):
    """Base class for all PocketPal errors."""


class InvalidEntryIdError(PocketPalError):
    """Raised when an entry id does not refer to an entry in the log."""


class InvalidCategoryError(PocketPalError, ValueError):
    """Raised when a category label is not one of the known categories."""


class InvalidAmountError(PocketPalError, ValueError):
    """Raised when an amount is not a positive decimal number."""


class InvalidDateError(PocketPalError, ValueError):
    """Raised when a date string cannot be parsed."""


class InvalidDescriptionError(PocketPalError, ValueError):
    """Raised when a description is empty or spans several lines."""


class InvalidCommandError(PocketPalError, ValueError):
    """Raised when a slash command cannot be parsed."""


class ConfigError(PocketPalError, ValueError):
    """Raised when the configuration file holds invalid values."""


class StorageError(PocketPalError, OSError):
    """Raised when the storage file cannot be created, read or written."""


class ReadFileErrorReason(Enum):
    """Why a stored line could not be turned back into an entry."""

    MISSING_FIELDS = "Missing fields in stored entry: "
    AMOUNT = "Invalid amount in stored entry: "
    CATEGORY = "Invalid category in stored entry: "
    DATE = "Invalid date in stored entry: "


class InvalidReadFileError(PocketPalError):
    """Raised when a line of the storage file is malformed.

    Attributes:
        line: The offending line, without its line separator.
        reason: Which field made the line unreadable.
    """

    def __init__(self, line: str, reason: ReadFileErrorReason) -> None:
        super().__init__(f"{reason.value}{line}")
        self.line = line
        self.reason = reason
