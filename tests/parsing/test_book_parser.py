"""
Tests for the command-word dispatcher.
"""

import pytest

from cerebro.commands import (
    AddCommand,
    ClearCommand,
    DeleteCommand,
    EditCommand,
    ExitCommand,
    FilterCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    MetricsCommand,
    RemarkCommand,
    StatusCommand,
)
from cerebro.core import Index
from cerebro.exceptions import ParseError
from cerebro.parsing import CommandParser, parse_command


class TestCommandParser:
    """Test suite for the CommandParser dispatcher."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = CommandParser()

    def test_dispatches_argument_commands(self):
        """Test each command word reaches its parser."""
        cases = [
            ("add n/Google", AddCommand),
            ("edit 1 s/applied", EditCommand),
            ("delete 1,2", DeleteCommand),
            ("filter s/applied", FilterCommand),
            ("find google", FindCommand),
            ("status 1 s/oa", StatusCommand),
            ("remark 1 r/hi", RemarkCommand),
        ]
        for line, expected in cases:
            assert isinstance(self.parser.parse(line), expected), line

    def test_no_argument_commands_ignore_trailing_text(self):
        """Test list, clear, help, metrics and exit ignore extra text."""
        cases = [
            ("list", ListCommand),
            ("clear", ClearCommand),
            ("help", HelpCommand),
            ("metrics", MetricsCommand),
            ("metrics 3", MetricsCommand),
            ("metrics -a -b --verbose", MetricsCommand),
            ("exit now please", ExitCommand),
        ]
        for line, expected in cases:
            assert isinstance(self.parser.parse(line), expected), line

    def test_surrounding_whitespace_ignored(self):
        """Test leading and trailing whitespace around the line."""
        assert self.parser.parse("   delete 2   ") == DeleteCommand([Index(2)])

    def test_empty_input(self):
        """Test empty input is a format error."""
        for line in ("", "    "):
            with pytest.raises(ParseError, match="Invalid command format!"):
                self.parser.parse(line)

    def test_unknown_command(self):
        """Test unknown and wrongly-cased words are rejected."""
        for line in ("undo", "ADD n/Google", "lists"):
            with pytest.raises(ParseError, match="Unknown command"):
                self.parser.parse(line)

    def test_argument_errors_propagate(self):
        """Test a parser's own error reaches the caller unchanged."""
        with pytest.raises(ParseError, match="Duplicate indices found: 1."):
            parse_command("edit 1,1 s/applied")
