"""
Add command: insert a new company.
"""

import logging

from cerebro.commands.base import Command, CommandResult
from cerebro.commands.messages import format_company
from cerebro.exceptions import DuplicateRecordError
from cerebro.model.book import RecordCollection
from cerebro.model.company import Company
from cerebro.ui.confirm import Confirmer

logger = logging.getLogger(__name__)


class AddCommand(Command):
    """Adds a company unless one with the same name (ignoring case) exists."""

    COMMAND_WORD = "add"
    MESSAGE_USAGE = (
        "add n/NAME [p/PHONE] [e/EMAIL] [a/ADDRESS] [r/REMARK] [s/STATUS] [t/TAG]...\n"
        "---------\n"
        "Add a company to Cerebro.\n"
        "---------\n"
        "Examples:\n"
        "add n/Google Inc\n"
        "add n/Meta p/65432100 e/careers@meta.com s/applied\n"
        "add n/Google p/67676767 e/google@example.com a/311, Clementi Ave 2, #02-25 "
        "r/FAANG Jackpot s/in-process t/good-pay t/good-location"
    )
    MESSAGE_SUCCESS = "New company added: {company}"
    MESSAGE_DUPLICATE_COMPANY = "This company already exists in the address book"

    def __init__(self, company: Company):
        self.to_add = company

    def execute(
        self, book: RecordCollection, confirmer: Confirmer | None = None
    ) -> CommandResult:
        if book.exists(self.to_add.identity_key):
            raise DuplicateRecordError(
                self.to_add.name.full_name, self.MESSAGE_DUPLICATE_COMPANY
            )

        book.insert(self.to_add)
        logger.info("Added company %s", self.to_add.name)
        return CommandResult(self.MESSAGE_SUCCESS.format(company=format_company(self.to_add)))

    def __eq__(self, other) -> bool:
        return isinstance(other, AddCommand) and self.to_add == other.to_add

    def __repr__(self) -> str:
        return f"AddCommand(to_add={self.to_add!r})"
