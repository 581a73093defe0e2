"""
Find command: show companies whose name contains any of the keywords.
"""

import logging
from collections.abc import Iterable

from cerebro.commands.base import Command, CommandResult
from cerebro.commands.messages import MESSAGE_COMPANIES_LISTED_OVERVIEW
from cerebro.model.book import RecordCollection
from cerebro.model.predicates import NameContainsKeywordsPredicate
from cerebro.ui.confirm import Confirmer

logger = logging.getLogger(__name__)


class FindCommand(Command):
    COMMAND_WORD = "find"
    MESSAGE_USAGE = (
        "find KEYWORD [MORE_KEYWORDS]...\n"
        "---------\n"
        "Find companies whose names contain any of the keywords (case-insensitive).\n"
        "---------\n"
        "Example:\n"
        "find goo bank"
    )

    def __init__(self, keywords: Iterable[str]):
        self.predicate = NameContainsKeywordsPredicate(tuple(keywords))

    def execute(
        self, book: RecordCollection, confirmer: Confirmer | None = None
    ) -> CommandResult:
        book.set_display_filter(self.predicate)
        count = len(book.current_displayed_list())
        logger.debug("Find %r matched %d companies", self.predicate.keywords, count)
        return CommandResult(MESSAGE_COMPANIES_LISTED_OVERVIEW.format(count=count))

    def __eq__(self, other) -> bool:
        return isinstance(other, FindCommand) and self.predicate == other.predicate

    def __repr__(self) -> str:
        return f"FindCommand(keywords={self.predicate.keywords!r})"
