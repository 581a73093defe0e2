"""
Confirmation for destructive actions.

Commands that delete records ask a Confirmer before mutating anything. The
console implementation blocks on the user's answer with no timeout; it
auto-approves when prompts are disabled through configuration or when there
is no interactive terminal to ask on.
"""

import logging
import sys
from typing import Protocol

from rich.console import Console
from rich.prompt import Confirm

logger = logging.getLogger(__name__)


class Confirmer(Protocol):
    """Answers yes/no for a destructive action."""

    def confirm(self, title: str, header: str, body: str) -> bool: ...


class StaticConfirmer:
    """Confirmer with a fixed answer, for scripted and test contexts."""

    def __init__(self, answer: bool = True):
        self.answer = answer
        self.requests: list[tuple[str, str, str]] = []

    def confirm(self, title: str, header: str, body: str) -> bool:
        self.requests.append((title, header, body))
        return self.answer


class ConsoleConfirmer:
    """
    Asks on the terminal via rich's Confirm prompt.

    Params:
        skip_prompts: Approve every request without asking
        console: Console to prompt on; a new one is created when omitted
    """

    def __init__(self, skip_prompts: bool = False, console: Console | None = None):
        self.skip_prompts = skip_prompts
        self.console = console or Console()

    def is_headless(self) -> bool:
        return not sys.stdin.isatty()

    def confirm(self, title: str, header: str, body: str) -> bool:
        if self.skip_prompts or self.is_headless():
            logger.debug("Auto-approving '%s'", title)
            return True

        self.console.print(f"[bold]{title}[/bold]")
        self.console.print(header)
        self.console.print(f"[dim]{body}[/dim]")
        return Confirm.ask("Continue?", console=self.console, default=False)

