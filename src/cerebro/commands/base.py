"""
Command base class and the result type every command returns.

Commands are constructed by the parsers already holding validated input;
``execute`` only checks that input against the live collection and applies
it. Failures are raised as CommandError subclasses. A declined confirmation
is not a failure: it returns a result with ``cancelled`` set.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass

from cerebro.core.index import Index
from cerebro.exceptions import IndexOutOfBoundsError
from cerebro.model.book import RecordCollection
from cerebro.ui.confirm import Confirmer, StaticConfirmer


@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of executing a command.

    Params:
        feedback: Message shown to the user
        show_help: The help view should be opened
        show_metrics: The metrics view should be opened
        exit: The session should end
        cancelled: The user declined a destructive confirmation; nothing changed
    """

    feedback: str
    show_help: bool = False
    show_metrics: bool = False
    exit: bool = False
    cancelled: bool = False


class Command(ABC):
    """A parsed, executable unit of work."""

    COMMAND_WORD: str = ""
    MESSAGE_USAGE: str = ""

    @abstractmethod
    def execute(
        self, book: RecordCollection, confirmer: Confirmer | None = None
    ) -> CommandResult:
        """
        Apply this command to the record collection.

        Params:
            book: Collection to read and mutate
            confirmer: Asked before destructive changes; approves when omitted

        Returns:
            CommandResult describing the outcome

        Raises:
            CommandError: If the command cannot be applied
        """

    @staticmethod
    def _confirmer_or_default(confirmer: Confirmer | None) -> Confirmer:
        return confirmer if confirmer is not None else StaticConfirmer(True)


def check_bounds(indices: Iterable[Index], list_size: int) -> None:
    """
    Ensure every index addresses a record in a list of list_size records.

    Raises:
        IndexOutOfBoundsError: For the first index, in the given order, that is out of bounds
    """
    for index in indices:
        if index.zero_based >= list_size:
            raise IndexOutOfBoundsError(index.one_based, list_size)
