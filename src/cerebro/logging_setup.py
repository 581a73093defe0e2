"""
Console logging for Cerebro, rendered through rich.
"""

import logging

from rich.logging import RichHandler

_INITIALIZED = False


def setup_logging(level: str = "WARNING", force: bool = False) -> None:
    """
    Install a RichHandler on the root logger.

    Repeated calls are no-ops unless force is set.

    Params:
        level: Logging level name, e.g. ``"DEBUG"``
        force: Replace a handler installed by an earlier call
    """
    global _INITIALIZED
    if _INITIALIZED and not force:
        return
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(name)s: %(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
    _INITIALIZED = True
