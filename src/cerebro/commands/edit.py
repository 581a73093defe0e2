"""
Edit command: apply an edit descriptor to one or many companies.

A batch edit is atomic. Bounds, the batch field restriction and identity
collisions are all checked for every addressed company before the first
company is replaced.
"""

import logging
from collections.abc import Iterable

from cerebro.commands.base import Command, CommandResult, check_bounds
from cerebro.commands.messages import format_company
from cerebro.core.index import Index
from cerebro.exceptions import BatchEditError, DuplicateRecordError
from cerebro.model.book import RecordCollection
from cerebro.model.company import Company
from cerebro.model.descriptor import EditCompanyDescriptor
from cerebro.model.predicates import show_all_companies
from cerebro.ui.confirm import Confirmer

logger = logging.getLogger(__name__)


class EditCommand(Command):
    """
    Edits the companies at the given indices.

    Params:
        indices: Target indices in the displayed list; one index is a single edit
        descriptor: Fields to change; must edit at least one field
    """

    COMMAND_WORD = "edit"
    MESSAGE_USAGE = (
        "edit INDEX[,INDEX|START-END]... [n/NAME] [p/PHONE] [e/EMAIL] [a/ADDRESS] "
        "[r/REMARK] [s/STATUS] [t/TAG]...\n"
        "---------\n"
        "Edit the companies identified by their index in the displayed list. "
        "Existing values are overwritten; a prefix with no value clears that field.\n"
        "---------\n"
        "Examples:\n"
        "edit 1 p/91234567 e/googlehr@gmail.com s/applied\n"
        "edit 1,2,4-8 s/applied t/FAANG"
    )
    MESSAGE_EDIT_SUCCESS_SINGLE = "Edited Company: {company}"
    MESSAGE_EDIT_SUCCESS_MULTIPLE = "Edited {count} companies successfully"
    MESSAGE_NOT_EDITED = "At least one field to edit must be provided."
    MESSAGE_DUPLICATE_COMPANY = "This company already exists in the address book."
    MESSAGE_INVALID_BATCH_EDIT_FIELD = (
        "Batch editing is not allowed for Name as duplicate company entries are not allowed."
    )

    def __init__(self, indices: Iterable[Index], descriptor: EditCompanyDescriptor):
        self.indices = list(indices)
        if not self.indices:
            raise ValueError("EditCommand needs at least one index")
        self.descriptor = descriptor

    @property
    def is_batch(self) -> bool:
        return len(self.indices) > 1

    def execute(
        self, book: RecordCollection, confirmer: Confirmer | None = None
    ) -> CommandResult:
        displayed = book.current_displayed_list()
        check_bounds(self.indices, len(displayed))
        if self.is_batch and self.descriptor.edits_name():
            raise BatchEditError(self.MESSAGE_INVALID_BATCH_EDIT_FIELD)

        edits = [
            (displayed[index.zero_based], self.descriptor.apply_to(displayed[index.zero_based]))
            for index in self.indices
        ]
        self._check_no_collisions(book, edits)

        for original, edited in edits:
            book.replace(original, edited)
        book.set_display_filter(show_all_companies)

        if self.is_batch:
            logger.info("Batch edited %d companies", len(edits))
            return CommandResult(self.MESSAGE_EDIT_SUCCESS_MULTIPLE.format(count=len(edits)))
        logger.info("Edited company %s", edits[0][1].name)
        return CommandResult(self.MESSAGE_EDIT_SUCCESS_SINGLE.format(company=format_company(edits[0][1])))

    def _check_no_collisions(
        self, book: RecordCollection, edits: list[tuple[Company, Company]]
    ) -> None:
        """Reject edits whose result shares an identity with another company."""
        claimed: dict[str, Company] = {}
        for original, edited in edits:
            if not original.is_same_company(edited) and book.exists(edited.identity_key):
                raise DuplicateRecordError(edited.name.full_name, self.MESSAGE_DUPLICATE_COMPANY)
            if edited.identity_key in claimed:
                raise DuplicateRecordError(edited.name.full_name, self.MESSAGE_DUPLICATE_COMPANY)
            claimed[edited.identity_key] = edited

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, EditCommand)
            and self.indices == other.indices
            and self.descriptor == other.descriptor
        )

    def __repr__(self) -> str:
        return (
            f"EditCommand(indices={[i.one_based for i in self.indices]}, "
            f"descriptor={self.descriptor!r})"
        )
