"""
Session: the single entry point that turns a command line into a result.
"""

import logging

from cerebro.commands import CommandResult
from cerebro.exceptions import CerebroError
from cerebro.model.book import RecordCollection
from cerebro.parsing import CommandParser
from cerebro.ui.confirm import Confirmer, StaticConfirmer
from cerebro.ui.history import CommandHistory

logger = logging.getLogger(__name__)


class Session:
    """
    Owns one record collection and executes command lines against it.

    Params:
        book: Collection the commands read and mutate
        confirmer: Asked before destructive commands; approves when omitted
        history: Receives every submitted line, successful or not
    """

    def __init__(
        self,
        book: RecordCollection,
        confirmer: Confirmer | None = None,
        history: CommandHistory | None = None,
    ):
        self.book = book
        self.confirmer = confirmer if confirmer is not None else StaticConfirmer(True)
        self.history = history if history is not None else CommandHistory()
        self._parser = CommandParser()

    def execute(self, command_text: str) -> CommandResult:
        """
        Parse and execute one command line.

        Returns:
            CommandResult from the executed command

        Raises:
            ParseError: If the line does not parse; nothing is executed
            CommandError: If the command cannot be applied; nothing is changed
        """
        logger.info("Executing %r", command_text)
        if command_text.strip():
            self.history.add(command_text)
        try:
            command = self._parser.parse(command_text)
            result = command.execute(self.book, self.confirmer)
        except CerebroError as e:
            logger.info("Command %r failed: %s", command_text, e)
            raise
        logger.debug("Result: %r", result)
        return result
