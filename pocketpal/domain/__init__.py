"""Domain models and types for PocketPal.

This package contains the functional core:
- Pure functions and value objects
- No file or console I/O
- Easy to test
"""

from pocketpal.domain.entry_log import EntryLog
from pocketpal.domain.models import Category, Entry

__all__ = ["Category", "Entry", "EntryLog"]
