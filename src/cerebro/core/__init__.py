"""
Core Cerebro components.

This package provides the fundamental building blocks shared by the parsing
layer, the model and the commands.
"""

from cerebro.core.index import Index
from cerebro.core.types import UNSET, DuplicatePolicy, Settable

__all__ = [
    "Index",
    "UNSET",
    "Settable",
    "DuplicatePolicy",
]
