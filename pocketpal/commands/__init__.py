"""Command objects that act on an entry log."""

from pocketpal.commands.add import AddCommand
from pocketpal.commands.base import Command
from pocketpal.commands.delete import DeleteCommand
from pocketpal.commands.edit import EditCommand
from pocketpal.commands.parser import parse_command
from pocketpal.commands.session import ExitCommand, HelpCommand
from pocketpal.commands.view import ViewCommand

__all__ = [
    "AddCommand",
    "Command",
    "DeleteCommand",
    "EditCommand",
    "ExitCommand",
    "HelpCommand",
    "ViewCommand",
    "parse_command",
]
