"""
Status command: change the application status of one company.
"""

import logging

import attrs

from cerebro.commands.base import Command, CommandResult, check_bounds
from cerebro.commands.messages import format_company
from cerebro.core.index import Index
from cerebro.model.book import RecordCollection
from cerebro.model.predicates import show_all_companies
from cerebro.model.status import Stage, Status
from cerebro.ui.confirm import Confirmer

logger = logging.getLogger(__name__)


class StatusCommand(Command):
    """Sets the status of the company at index, leaving other fields alone."""

    COMMAND_WORD = "status"
    MESSAGE_USAGE = (
        "status INDEX s/STATUS\n"
        "---------\n"
        "Change the application status of the company at INDEX "
        f"(one of: {', '.join(stage.value for stage in Stage)}).\n"
        "---------\n"
        "Example:\n"
        "status 1 s/in-process"
    )
    MESSAGE_UPDATE_STATUS_SUCCESS = "Updated status of Company: {company}"

    def __init__(self, index: Index, status: Status):
        self.index = index
        self.status = status

    def execute(
        self, book: RecordCollection, confirmer: Confirmer | None = None
    ) -> CommandResult:
        displayed = book.current_displayed_list()
        check_bounds([self.index], len(displayed))

        original = displayed[self.index.zero_based]
        edited = attrs.evolve(original, status=self.status)
        book.replace(original, edited)
        book.set_display_filter(show_all_companies)
        logger.info("Status of %s set to %s", edited.name, self.status)
        return CommandResult(
            self.MESSAGE_UPDATE_STATUS_SUCCESS.format(company=format_company(edited))
        )

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, StatusCommand)
            and self.index == other.index
            and self.status == other.status
        )

    def __repr__(self) -> str:
        return f"StatusCommand(index={self.index.one_based}, status={self.status})"
