"""
Cerebro command objects.

Each command holds validated input produced by a parser and applies it to a
record collection, returning a CommandResult or raising a CommandError.
"""

from cerebro.commands.add import AddCommand
from cerebro.commands.base import Command, CommandResult, check_bounds
from cerebro.commands.delete import DeleteCommand
from cerebro.commands.edit import EditCommand
from cerebro.commands.filter import FilterCommand
from cerebro.commands.find import FindCommand
from cerebro.commands.remark import RemarkCommand
from cerebro.commands.simple import (
    ClearCommand,
    ExitCommand,
    HelpCommand,
    ListCommand,
    MetricsCommand,
)
from cerebro.commands.status import StatusCommand

__all__ = [
    "AddCommand",
    "ClearCommand",
    "Command",
    "CommandResult",
    "DeleteCommand",
    "EditCommand",
    "ExitCommand",
    "FilterCommand",
    "FindCommand",
    "HelpCommand",
    "ListCommand",
    "MetricsCommand",
    "RemarkCommand",
    "StatusCommand",
    "check_bounds",
]
