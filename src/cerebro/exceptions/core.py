"""
Exception classes for Cerebro command interpretation.

This module defines specific exception types for the failures that can occur
while tokenizing and validating a command line (parse time) and while applying
a command to the record collection (execution time). Parse-time failures and
execution-time failures never share a base below CerebroError, so callers can
tell whether the syntax or the chosen index was at fault.
"""

from collections.abc import Iterable


class CerebroError(Exception):
    """Base exception for all Cerebro errors."""

    pass


class ParseError(CerebroError):
    """Raised when raw command text cannot be turned into a command."""

    pass


class ParseIndicesError(ParseError):
    """Raised when an index expression is malformed or contains duplicates."""

    def __init__(self, message: str, duplicates: Iterable[str] | None = None):
        """
        Initialize the exception.

        Params:
            message: User-facing description of the index problem
            duplicates: Offending duplicate tokens, when duplicates caused the failure
        """
        self.duplicates = list(duplicates or [])
        super().__init__(message)


class DuplicatePrefixError(ParseError):
    """Raised when single-valued prefixes were supplied more than once."""

    MESSAGE_DUPLICATE_FIELDS = (
        "Multiple values specified for the following single-valued field(s): "
    )

    def __init__(self, prefixes: list[str]):
        """
        Initialize the exception.

        Params:
            prefixes: Every offending prefix, in first-occurrence order
        """
        self.prefixes = list(prefixes)
        super().__init__(self.MESSAGE_DUPLICATE_FIELDS + " ".join(self.prefixes))


class FieldValidationError(ParseError):
    """Raised when a field value violates its constraint."""

    def __init__(self, field_name: str, message: str):
        """
        Initialize the exception.

        Params:
            field_name: Name of the field that failed validation (e.g. "tag")
            message: The violated constraint, surfaced verbatim to the user
        """
        self.field_name = field_name
        super().__init__(message)


class CommandError(CerebroError):
    """Raised when a parsed command cannot be applied to the collection."""

    pass


class IndexOutOfBoundsError(CommandError):
    """Raised when a resolved index falls outside the displayed list."""

    def __init__(self, invalid_index: int, list_size: int):
        """
        Initialize the exception.

        Params:
            invalid_index: The 1-based index that was out of bounds
            list_size: Number of records in the displayed list
        """
        self.invalid_index = invalid_index
        self.list_size = list_size
        super().__init__(self._create_message(invalid_index, list_size))

    @staticmethod
    def _create_message(invalid_index: int, list_size: int) -> str:
        if list_size == 0:
            return "Index out of bounds: The company list is empty."
        if invalid_index <= 0:
            return (
                f"Index out of bounds: {invalid_index}. Index must be greater than 0. "
                f"Valid range: 1 to {list_size}."
            )
        return f"Index out of bounds: {invalid_index}. Valid range: 1 to {list_size}."


class DuplicateRecordError(CommandError):
    """Raised when a command would produce two records with the same identity."""

    def __init__(self, name: str, message: str | None = None):
        """
        Initialize the exception.

        Params:
            name: Name of the record that would collide
            message: Override for the default message
        """
        self.name = name
        super().__init__(message or "This company already exists in the address book.")


class BatchEditError(CommandError):
    """Raised when a batch edit requests a change that cannot apply to many records."""

    pass
