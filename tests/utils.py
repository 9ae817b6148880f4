from collections import deque

from logic.placement import place_ship
from models import Player


class ScriptedInput:
    """Answer prompts from a fixed list, raising ``EOFError`` when it runs out."""

    def __init__(self, answers=()):
        self.answers = deque(answers)
        self.prompts = []

    def ask(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.popleft()


class RecordingDisplay:
    def __init__(self):
        self.lines = []
        self.clears = 0

    def show(self, text):
        self.lines.append(text)

    def clear(self):
        self.clears += 1

    @property
    def text(self):
        return "\n".join(self.lines)


def _stacked_player(name="P", is_bot=False):
    """Player with the fleet placed horizontally on rows 1-3 from column A."""
    player = Player(name=name, is_bot=is_bot)
    for row, ship in enumerate(player.ships, start=1):
        assert place_ship(player.board, ship, f"A{row}", True)
    return player
