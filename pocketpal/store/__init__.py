"""Storage layer - provides persistence for the application.

This module re-exports the public storage API for easy importing.
"""

from pocketpal.store.storage import (
    DEFAULT_DELIMITER,
    Storage,
    get_default_storage_path,
    get_xdg_data_home,
    validate_delimiter,
)

__all__ = [
    "DEFAULT_DELIMITER",
    "Storage",
    "get_default_storage_path",
    "get_xdg_data_home",
    "validate_delimiter",
]
