"""
Bounded history of submitted command lines with previous/next navigation.
"""

from collections import deque

DEFAULT_MAX_HISTORY_SIZE = 50


class CommandHistory:
    """Keeps the most recent commands and a navigation cursor.

    Navigating backwards first saves whatever the user was typing, so that
    stepping forward past the newest entry restores it.
    """

    def __init__(self, max_size: int = DEFAULT_MAX_HISTORY_SIZE):
        self._commands: deque[str] = deque(maxlen=max_size)
        self._pointer = -1
        self._saved_input = ""

    def add(self, command: str) -> None:
        self._commands.append(command)
        self.reset()

    def previous(self, current_input: str) -> str | None:
        if not self._commands:
            return None
        if self._pointer == -1:
            self._saved_input = current_input
            self._pointer = len(self._commands)
        if self._pointer > 0:
            self._pointer -= 1
            return self._commands[self._pointer]
        return None

    def next(self) -> str | None:
        if self._pointer == -1:
            return None
        self._pointer += 1
        if self._pointer >= len(self._commands):
            restored = self._saved_input
            self.reset()
            return restored
        return self._commands[self._pointer]

    def reset(self) -> None:
        self._pointer = -1
        self._saved_input = ""

    @property
    def is_navigating(self) -> bool:
        return self._pointer != -1

    def entries(self) -> list[str]:
        return list(self._commands)

    def __len__(self) -> int:
        return len(self._commands)
