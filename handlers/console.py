"""Terminal implementations of the input and display collaborators."""
from __future__ import annotations

import sys
from typing import Callable, Optional, TextIO

from app.config import CLEAR_SCREEN

CLEAR_SEQUENCE = "\033[H\033[2J"


class ConsoleInput:
    """Read answers from stdin.

    ``EOFError`` is not caught here; the menu loop treats it as the user
    leaving the game.
    """

    def __init__(self, reader: Callable[[str], str] = input) -> None:
        self._reader = reader

    def ask(self, prompt: str) -> str:
        return self._reader(prompt)


class ConsoleDisplay:
    def __init__(self, stream: Optional[TextIO] = None, *, clear_screen: bool = CLEAR_SCREEN) -> None:
        self.stream = stream or sys.stdout
        self.clear_screen = clear_screen

    def show(self, text: str) -> None:
        print(text, file=self.stream)

    def clear(self) -> None:
        if not self.clear_screen:
            return
        self.stream.write(CLEAR_SEQUENCE)
        self.stream.flush()
