"""Commands that only matter inside the interactive shell."""

from pocketpal.commands.base import Command
from pocketpal.domain.entry_log import EntryLog
from pocketpal.domain.models import category_labels

HELP_TEXT = f"""\
/add -d <description> -c <category> -p <price>   Record an expense
/delete <id>                                     Remove the entry with this id
/edit <id> [-d <description>] [-c <category>] [-p <price>]
                                                 Change fields of an entry
/view [count] [-c <category>] [-sd <start date>] [-ed <end date>] [-min <price>] [-max <price>]
                                                 List entries, newest last
/help                                            Show this message
/bye                                             Leave the shell

Categories: {", ".join(category_labels())}"""


class HelpCommand(Command):
    """Return the list of available slash commands."""

    def execute(self, entry_log: EntryLog) -> str:
        return HELP_TEXT


class ExitCommand(Command):
    """End the shell session."""

    is_exit = True

    def execute(self, entry_log: EntryLog) -> None:
        return None
