"""
Terminal-facing helpers: destructive-action confirmation and command history.
"""

from cerebro.ui.confirm import ConsoleConfirmer, Confirmer, StaticConfirmer
from cerebro.ui.history import CommandHistory

__all__ = [
    "CommandHistory",
    "ConsoleConfirmer",
    "Confirmer",
    "StaticConfirmer",
]
