"""
Cerebro command-line parsing.

This package provides prefix tokenization, the index expression grammars,
field parsers, and one parser per command word behind a single dispatcher.
"""

from cerebro.parsing.book_parser import CommandParser, parse_command
from cerebro.parsing.command_parsers import (
    AddCommandParser,
    DeleteCommandParser,
    EditCommandParser,
    FilterCommandParser,
    FindCommandParser,
    RemarkCommandParser,
    StatusCommandParser,
)
from cerebro.parsing.indices import (
    parse_index,
    resolve_comma_indices,
    resolve_whitespace_indices,
)
from cerebro.parsing.syntax import Prefix
from cerebro.parsing.tokenizer import ArgumentMultimap, tokenize

__all__ = [
    "AddCommandParser",
    "ArgumentMultimap",
    "CommandParser",
    "DeleteCommandParser",
    "EditCommandParser",
    "FilterCommandParser",
    "FindCommandParser",
    "Prefix",
    "RemarkCommandParser",
    "StatusCommandParser",
    "parse_command",
    "parse_index",
    "resolve_comma_indices",
    "resolve_whitespace_indices",
    "tokenize",
]
