"""PocketPal - a command line expense tracker."""

__version__ = "0.1.0"
