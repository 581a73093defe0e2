"""
Cerebro - A command interpreter for tracking company applications

Cerebro parses terse prefixed commands such as ``edit 1,3-5 s/applied`` into
validated command objects and applies them to a list of company records.
"""

from importlib.metadata import version

from cerebro.commands import CommandResult
from cerebro.logic import Session
from cerebro.model import Company, CompanyBook
from cerebro.parsing import parse_command

__version__ = version("cerebro")

__all__ = [
    "__version__",
    "Company",
    "CompanyBook",
    "CommandResult",
    "Session",
    "parse_command",
]
