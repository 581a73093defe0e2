"""
Remark command: set or clear the remark of one company.
"""

import logging

import attrs

from cerebro.commands.base import Command, CommandResult, check_bounds
from cerebro.commands.messages import format_company
from cerebro.core.index import Index
from cerebro.model.book import RecordCollection
from cerebro.model.fields import Remark
from cerebro.model.predicates import show_all_companies
from cerebro.ui.confirm import Confirmer

logger = logging.getLogger(__name__)


class RemarkCommand(Command):
    COMMAND_WORD = "remark"
    MESSAGE_USAGE = (
        "remark INDEX r/[REMARK]\n"
        "---------\n"
        "Set the remark of the company at INDEX. An empty remark clears it.\n"
        "---------\n"
        "Example:\n"
        "remark 1 r/Follow up after the career fair"
    )
    MESSAGE_ADD_REMARK_SUCCESS = "Added remark to Company: {company}"
    MESSAGE_DELETE_REMARK_SUCCESS = "Removed remark from Company: {company}"

    def __init__(self, index: Index, remark: Remark):
        self.index = index
        self.remark = remark

    def execute(
        self, book: RecordCollection, confirmer: Confirmer | None = None
    ) -> CommandResult:
        displayed = book.current_displayed_list()
        check_bounds([self.index], len(displayed))

        original = displayed[self.index.zero_based]
        edited = attrs.evolve(original, remark=self.remark)
        book.replace(original, edited)
        book.set_display_filter(show_all_companies)
        logger.info("Remark of %s updated", edited.name)

        template = (
            self.MESSAGE_DELETE_REMARK_SUCCESS
            if self.remark.is_absent
            else self.MESSAGE_ADD_REMARK_SUCCESS
        )
        return CommandResult(template.format(company=format_company(edited)))

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, RemarkCommand)
            and self.index == other.index
            and self.remark == other.remark
        )

    def __repr__(self) -> str:
        return f"RemarkCommand(index={self.index.one_based}, remark={self.remark!r})"
