from __future__ import annotations

import logging
import random
import time
from typing import Callable, Optional

from app.config import SEED, SETUP_DELAY, TURN_DELAY
from logic.match import Display, InputProvider, MatchController
from logic.render import render_heading, render_welcome
from models import Match, Player


logger = logging.getLogger(__name__)

CHOICE_INVALID = -1
CHOICE_PLAY = 1
CHOICE_EXIT = 3

DEFAULT_PLAYER_NAME = "Player"
BOT_NAME = "AI Opponent"


def parse_menu_choice(line: Optional[str]) -> int:
    """Map a raw menu answer to a choice.

    An empty line plays, a whitespace-only line or ``esc``/``exit`` quits,
    numbers are taken as they are and anything else is invalid.
    """
    if line is None:
        return CHOICE_INVALID
    if line == "":
        return CHOICE_PLAY
    trimmed = line.strip()
    if not trimmed:
        return CHOICE_EXIT
    if trimmed.lower() in ("esc", "exit"):
        return CHOICE_EXIT
    try:
        return int(trimmed)
    except ValueError:
        return CHOICE_INVALID


def show_menu(display: Display) -> None:
    display.show("\n" + render_heading("MAIN MENU") + "\n")
    display.show("Press Enter to PLAY\n")
    display.show("Press whitespace then Enter to EXIT")
    display.show("\n" + "⫘" * 29 + "\n")


def newgame(
    human_input: InputProvider,
    display: Display,
    *,
    rng: Optional[random.Random] = None,
    turn_delay: float = TURN_DELAY,
    setup_delay: float = SETUP_DELAY,
    sleep: Callable[[float], None] = time.sleep,
) -> Match:
    """Ask for the player's name and play one match against the bot."""
    display.clear()
    name = human_input.ask("\nEnter your name: ").strip() or DEFAULT_PLAYER_NAME
    player = Player(name=name)
    opponent = Player(name=BOT_NAME, is_bot=True)
    controller = MatchController(
        player,
        opponent,
        human_input=human_input,
        display=display,
        rng=rng or random.Random(SEED),
        turn_delay=turn_delay,
        setup_delay=setup_delay,
        sleep=sleep,
    )
    logger.info("Starting match %s for %s", controller.match.match_id, name)
    match = controller.play()
    human_input.ask("\nPress Enter to return to main menu...")
    return match


def start(human_input: InputProvider, display: Display, **game_options) -> None:
    """Run the main menu until the player leaves."""
    display.clear()
    display.show(render_welcome())
    while True:
        show_menu(display)
        try:
            choice = parse_menu_choice(human_input.ask("Your input: "))
            if choice == CHOICE_PLAY:
                newgame(human_input, display, **game_options)
                continue
        except EOFError:
            logger.info("Input closed, leaving the game")
            choice = CHOICE_EXIT
        if choice == CHOICE_EXIT:
            display.show("\nThank you for playing SHIPS HUNTER!")
            return
        display.show("Invalid choice. Please Try again.")
