"""
Command-word dispatcher for user input lines.
"""

import logging
import re

from cerebro.commands import (
    ClearCommand,
    Command,
    ExitCommand,
    HelpCommand,
    ListCommand,
    MetricsCommand,
)
from cerebro.commands.messages import MESSAGE_UNKNOWN_COMMAND, invalid_format
from cerebro.exceptions import ParseError
from cerebro.parsing.command_parsers import (
    AddCommandParser,
    DeleteCommandParser,
    EditCommandParser,
    FilterCommandParser,
    FindCommandParser,
    RemarkCommandParser,
    StatusCommandParser,
)

logger = logging.getLogger(__name__)


class CommandParser:
    """Splits the command word from its arguments and hands off to the matching parser."""

    COMMAND_PATTERN = re.compile(r"^(?P<word>\S+)(?P<arguments>.*)$", re.DOTALL)

    ARGUMENT_PARSERS = {
        "add": AddCommandParser,
        "edit": EditCommandParser,
        "delete": DeleteCommandParser,
        "filter": FilterCommandParser,
        "find": FindCommandParser,
        "status": StatusCommandParser,
        "remark": RemarkCommandParser,
    }

    # Trailing text after these words is ignored
    NO_ARGUMENT_COMMANDS: dict[str, type[Command]] = {
        "list": ListCommand,
        "clear": ClearCommand,
        "help": HelpCommand,
        "metrics": MetricsCommand,
        "exit": ExitCommand,
    }

    def parse(self, user_input: str) -> Command:
        """
        Parse one line of user input into a command.

        Params:
            user_input: Full command line, e.g. ``edit 1,3 s/applied``

        Returns:
            Command ready to execute

        Raises:
            ParseError: If the command word is unknown or its arguments are invalid
        """
        match = self.COMMAND_PATTERN.match(user_input.strip())
        if not match:
            raise ParseError(invalid_format(HelpCommand.MESSAGE_USAGE))

        word = match.group("word")
        arguments = match.group("arguments")
        logger.debug("Dispatching command word %r with arguments %r", word, arguments)

        if word in self.NO_ARGUMENT_COMMANDS:
            return self.NO_ARGUMENT_COMMANDS[word]()
        if word in self.ARGUMENT_PARSERS:
            return self.ARGUMENT_PARSERS[word]().parse(arguments)
        raise ParseError(MESSAGE_UNKNOWN_COMMAND)


def parse_command(user_input: str) -> Command:
    """
    Convenience function to parse a command line.

    Raises:
        ParseError: If the command is malformed or invalid
    """
    return CommandParser().parse(user_input)
