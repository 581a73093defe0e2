"""
Cerebro exception classes.

This package provides all exception types used throughout Cerebro for
consistent error handling and reporting.
"""

from cerebro.exceptions.core import (
    BatchEditError,
    CerebroError,
    CommandError,
    DuplicatePrefixError,
    DuplicateRecordError,
    FieldValidationError,
    IndexOutOfBoundsError,
    ParseError,
    ParseIndicesError,
)

__all__ = [
    "CerebroError",
    "ParseError",
    "ParseIndicesError",
    "DuplicatePrefixError",
    "FieldValidationError",
    "CommandError",
    "IndexOutOfBoundsError",
    "DuplicateRecordError",
    "BatchEditError",
]
