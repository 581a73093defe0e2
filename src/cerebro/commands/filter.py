"""
Filter command: narrow the displayed list by status and/or tag keywords.
"""

import logging
from collections.abc import Iterable

from cerebro.commands.base import Command, CommandResult
from cerebro.commands.messages import MESSAGE_COMPANIES_LISTED_OVERVIEW
from cerebro.model.book import RecordCollection
from cerebro.model.predicates import FilterPredicate
from cerebro.model.status import Stage, Status
from cerebro.ui.confirm import Confirmer

logger = logging.getLogger(__name__)


class FilterCommand(Command):
    """Replaces the display filter; the underlying collection is untouched."""

    COMMAND_WORD = "filter"
    MESSAGE_USAGE = (
        "filter [s/STATUS] [t/TAG_KEYWORD]...\n"
        "---------\n"
        "Filter companies by application status and/or tags. "
        "At least one filter criterion must be provided.\n"
        f"Status values: {', '.join(stage.value for stage in Stage)}\n"
        "---------\n"
        "Examples:\n"
        "filter s/applied\n"
        "filter t/java t/remote\n"
        "filter s/offered t/good"
    )

    def __init__(self, status: Status | None, tag_keywords: Iterable[str] = ()):
        self.predicate = FilterPredicate(status, tuple(tag_keywords))

    @property
    def status(self) -> Status | None:
        return self.predicate.status

    @property
    def tag_keywords(self) -> tuple[str, ...]:
        return self.predicate.tag_keywords

    def execute(
        self, book: RecordCollection, confirmer: Confirmer | None = None
    ) -> CommandResult:
        book.set_display_filter(self.predicate)
        count = len(book.current_displayed_list())
        logger.debug("Filter %r matched %d companies", self.predicate, count)
        return CommandResult(self._success_message(count))

    def _success_message(self, count: int) -> str:
        message = MESSAGE_COMPANIES_LISTED_OVERVIEW.format(count=count)
        keywords = list(self.tag_keywords)
        if self.status is not None and keywords:
            return f"{message}\nFiltered by status: {self.status} and tags containing: {keywords}"
        if self.status is not None:
            return f"{message}\nFiltered by status: {self.status}"
        return f"{message}\nFiltered by tags containing: {keywords}"

    def __eq__(self, other) -> bool:
        return isinstance(other, FilterCommand) and self.predicate == other.predicate

    def __repr__(self) -> str:
        return f"FilterCommand(status={self.status!r}, tag_keywords={self.tag_keywords!r})"
