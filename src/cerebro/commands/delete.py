"""
Delete command: remove one or more companies by displayed index.

Every index is checked against the displayed list before anything happens,
then the user is asked to confirm. Records are removed from the highest
index down so earlier removals cannot shift later targets, while the
feedback lists the removed companies in ascending index order.
"""

import logging
from collections.abc import Iterable

from cerebro.commands.base import Command, CommandResult, check_bounds
from cerebro.core.index import Index
from cerebro.model.book import RecordCollection
from cerebro.ui.confirm import Confirmer

logger = logging.getLogger(__name__)


class DeleteCommand(Command):
    """Deletes the companies at the given indices, all or nothing."""

    COMMAND_WORD = "delete"
    MESSAGE_USAGE = (
        "delete <INDEX|START-END> [,INDEX]... [,START-END]...\n"
        "---------\n"
        "Delete one or more companies.\n"
        "---------\n"
        "Examples:\n"
        "delete 2\n"
        "delete 1,3,5-8\n"
        "delete 1 3 5-8"
    )
    MESSAGE_DELETE_COMPANY_SUCCESS = "Deleted Company: {names}"
    MESSAGE_DELETE_CANCELLED = "Deletion cancelled."
    CONFIRM_TITLE = "Confirm Deletion"

    def __init__(self, target_indices: Iterable[Index]):
        self.target_indices = sorted(target_indices)
        if not self.target_indices:
            raise ValueError("DeleteCommand needs at least one index")

    def execute(
        self, book: RecordCollection, confirmer: Confirmer | None = None
    ) -> CommandResult:
        displayed = book.current_displayed_list()
        check_bounds(self.target_indices, len(displayed))

        count = len(self.target_indices)
        plural = count > 1
        approved = self._confirmer_or_default(confirmer).confirm(
            self.CONFIRM_TITLE,
            f"Delete selected compan{'ies' if plural else 'y'}?",
            "This action cannot be undone.\n"
            f"You are about to delete {count} entr{'ies' if plural else 'y'}.",
        )
        if not approved:
            logger.info("Deletion of %d companies cancelled", count)
            return CommandResult(self.MESSAGE_DELETE_CANCELLED, cancelled=True)

        to_delete = [displayed[index.zero_based] for index in self.target_indices]
        for index in reversed(self.target_indices):
            book.remove(displayed[index.zero_based])
        logger.info("Deleted %d companies", count)

        names = ", ".join(company.name.full_name for company in to_delete)
        return CommandResult(self.MESSAGE_DELETE_COMPANY_SUCCESS.format(names=names))

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, DeleteCommand)
            and self.target_indices == other.target_indices
        )

    def __repr__(self) -> str:
        return f"DeleteCommand(target_indices={[i.one_based for i in self.target_indices]})"
