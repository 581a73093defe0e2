"""
Commands that take no arguments: list, clear, help, metrics and exit.
"""

import logging

from cerebro.commands.base import Command, CommandResult
from cerebro.model.book import RecordCollection
from cerebro.model.predicates import show_all_companies
from cerebro.ui.confirm import Confirmer

logger = logging.getLogger(__name__)


class ListCommand(Command):
    COMMAND_WORD = "list"
    MESSAGE_USAGE = "list\n---------\nShow every company."
    MESSAGE_SUCCESS = "Listed all companies"

    def execute(
        self, book: RecordCollection, confirmer: Confirmer | None = None
    ) -> CommandResult:
        book.set_display_filter(show_all_companies)
        return CommandResult(self.MESSAGE_SUCCESS)


class ClearCommand(Command):
    """Removes every company after confirmation."""

    COMMAND_WORD = "clear"
    MESSAGE_USAGE = "clear\n---------\nDelete every company."
    MESSAGE_SUCCESS = "Address book has been cleared!"
    MESSAGE_CANCELLED = "Clear cancelled."

    def execute(
        self, book: RecordCollection, confirmer: Confirmer | None = None
    ) -> CommandResult:
        approved = self._confirmer_or_default(confirmer).confirm(
            "Confirm Clear",
            "Delete all companies?",
            "This action cannot be undone.",
        )
        if not approved:
            return CommandResult(self.MESSAGE_CANCELLED, cancelled=True)
        book.clear()
        book.set_display_filter(show_all_companies)
        logger.info("Cleared all companies")
        return CommandResult(self.MESSAGE_SUCCESS)


class HelpCommand(Command):
    COMMAND_WORD = "help"
    MESSAGE_USAGE = "help\n---------\nShow usage for every command."
    SHOWING_HELP_MESSAGE = "Opened help window."

    def execute(
        self, book: RecordCollection, confirmer: Confirmer | None = None
    ) -> CommandResult:
        return CommandResult(self.SHOWING_HELP_MESSAGE, show_help=True)


class MetricsCommand(Command):
    COMMAND_WORD = "metrics"
    MESSAGE_USAGE = "metrics\n---------\nShow how many companies are at each status."
    SHOWING_METRICS_MESSAGE = "Opened metrics window."

    def execute(
        self, book: RecordCollection, confirmer: Confirmer | None = None
    ) -> CommandResult:
        return CommandResult(self.SHOWING_METRICS_MESSAGE, show_metrics=True)


class ExitCommand(Command):
    COMMAND_WORD = "exit"
    MESSAGE_USAGE = "exit\n---------\nLeave Cerebro."
    MESSAGE_EXIT_ACKNOWLEDGEMENT = "Exiting Cerebro as requested ..."

    def execute(
        self, book: RecordCollection, confirmer: Confirmer | None = None
    ) -> CommandResult:
        return CommandResult(self.MESSAGE_EXIT_ACKNOWLEDGEMENT, exit=True)
