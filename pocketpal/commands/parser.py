"""Turn slash command lines typed in the shell into Command objects.

Flag values run until the next flag, so descriptions need no quoting:
    /add -d chicken rice -c Food -p 5.50
Shell style quotes are honoured as well.
"""

import re
import shlex

from pocketpal.commands.add import AddCommand
from pocketpal.commands.base import Command
from pocketpal.commands.delete import DeleteCommand
from pocketpal.commands.edit import EditCommand
from pocketpal.commands.session import ExitCommand, HelpCommand
from pocketpal.commands.view import ViewCommand
from pocketpal.dates import parse_user_date
from pocketpal.domain.entry_log import EntryLog
from pocketpal.exceptions import InvalidCommandError

FLAG_PATTERN = re.compile(r"^-[a-z]+$")

ADD_FLAGS = {"-d", "-c", "-p"}
EDIT_FLAGS = {"-d", "-c", "-p"}
VIEW_FLAGS = {"-c", "-sd", "-ed", "-min", "-max"}


def tokenize(line: str) -> list[str]:
    """Split a line with shell quoting rules.

    Raises:
        InvalidCommandError: On unbalanced quotes.
    """
    try:
        return shlex.split(line)
    except ValueError as e:
        raise InvalidCommandError(f"Could not parse command: {e}") from e


def split_flags(tokens: list[str], allowed: set[str]) -> tuple[list[str], dict[str, str]]:
    """Separate leading positional arguments from flag values.

    Args:
        tokens: Tokens after the command word.
        allowed: Flags this command accepts.

    Returns:
        Tuple of (positionals, flags) where flags maps each flag to its
        value, the tokens up to the next flag joined by single spaces.

    Raises:
        InvalidCommandError: On unknown, repeated or empty flags.
    """
    positionals: list[str] = []
    flags: dict[str, list[str]] = {}
    current: str | None = None

    for token in tokens:
        if FLAG_PATTERN.match(token):
            if token not in allowed:
                raise InvalidCommandError(f"Unknown flag '{token}'. Allowed: {' '.join(sorted(allowed))}")
            if token in flags:
                raise InvalidCommandError(f"Flag '{token}' given more than once")
            flags[token] = []
            current = token
        elif current is None:
            positionals.append(token)
        else:
            flags[current].append(token)

    values: dict[str, str] = {}
    for flag, parts in flags.items():
        if not parts:
            raise InvalidCommandError(f"Flag '{flag}' needs a value")
        values[flag] = " ".join(parts)
    return positionals, values


def parse_int(raw: str, what: str) -> int:
    try:
        return int(raw)
    except ValueError as e:
        raise InvalidCommandError(f"{what} must be a whole number, got '{raw}'") from e


def _expect_positionals(name: str, positionals: list[str], minimum: int, maximum: int) -> None:
    if not minimum <= len(positionals) <= maximum:
        if minimum == maximum:
            expected = f"exactly {minimum}"
        else:
            expected = f"{minimum} to {maximum}"
        raise InvalidCommandError(f"/{name} takes {expected} argument(s) before its flags, got {len(positionals)}")


def _require(name: str, flags: dict[str, str], required: set[str]) -> None:
    missing = sorted(required - flags.keys())
    if missing:
        raise InvalidCommandError(f"/{name} is missing {' '.join(missing)}")


def parse_add(args: list[str], entry_log: EntryLog) -> Command:
    positionals, flags = split_flags(args, ADD_FLAGS)
    _expect_positionals("add", positionals, 0, 0)
    _require("add", flags, ADD_FLAGS)
    return AddCommand(flags["-d"], flags["-p"], flags["-c"])


def parse_delete(args: list[str], entry_log: EntryLog) -> Command:
    positionals, _ = split_flags(args, set())
    _expect_positionals("delete", positionals, 1, 1)
    return DeleteCommand(parse_int(positionals[0], "Entry ID"), entry_log)


def parse_edit(args: list[str], entry_log: EntryLog) -> Command:
    positionals, flags = split_flags(args, EDIT_FLAGS)
    _expect_positionals("edit", positionals, 1, 1)
    return EditCommand(
        parse_int(positionals[0], "Entry ID"),
        entry_log,
        description=flags.get("-d"),
        amount=flags.get("-p"),
        category=flags.get("-c"),
    )


def parse_view(args: list[str], entry_log: EntryLog) -> Command:
    positionals, flags = split_flags(args, VIEW_FLAGS)
    _expect_positionals("view", positionals, 0, 1)
    count = parse_int(positionals[0], "Number of entries") if positionals else None
    start = parse_user_date(flags["-sd"]) if "-sd" in flags else None
    end = parse_user_date(flags["-ed"], end_of_day=True) if "-ed" in flags else None
    return ViewCommand(
        count=count,
        category=flags.get("-c"),
        start=start,
        end=end,
        min_amount=flags.get("-min"),
        max_amount=flags.get("-max"),
    )


def parse_help(args: list[str], entry_log: EntryLog) -> Command:
    return HelpCommand()


def parse_exit(args: list[str], entry_log: EntryLog) -> Command:
    return ExitCommand()


PARSERS = {
    "/add": parse_add,
    "/delete": parse_delete,
    "/edit": parse_edit,
    "/view": parse_view,
    "/help": parse_help,
    "/bye": parse_exit,
}


def parse_command(line: str, entry_log: EntryLog) -> Command:
    """Build the Command a slash command line describes.

    Args:
        line: Raw input such as "/delete 3".
        entry_log: Current log, used to validate entry ids.

    Returns:
        A validated Command ready to execute.

    Raises:
        InvalidCommandError: If the line is not a known, well formed command.
        PocketPalError: Any validation error raised by the command itself.
    """
    tokens = tokenize(line)
    if not tokens:
        raise InvalidCommandError("Please enter a command. Type /help to see the available commands")

    name, args = tokens[0].lower(), tokens[1:]
    parser = PARSERS.get(name)
    if parser is None:
        raise InvalidCommandError(f"Unknown command '{tokens[0]}'. Type /help to see the available commands")
    return parser(args, entry_log)
