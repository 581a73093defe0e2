"""
Core type definitions for Cerebro.

This module contains type aliases and markers shared by the parsing layer,
the model and the commands.
"""

from enum import Enum
from typing import Literal, TypeVar

T = TypeVar("T")


class _Unset(Enum):
    """Marker type for a descriptor slot that was never supplied."""

    UNSET = "unset"

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = _Unset.UNSET

# A slot that is either left alone (UNSET) or carries a replacement value
Settable = T | Literal[_Unset.UNSET]

# Index grammar duplicate handling
DuplicatePolicy = Literal["drop", "reject"]
