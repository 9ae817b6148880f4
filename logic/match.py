"""Setup and battle flow of a single match."""
from __future__ import annotations

import logging
import random
import time
from typing import Callable, Dict, Optional, Protocol

from models import (
    STATUS_BATTLE,
    STATUS_FINISHED,
    STATUS_SETUP,
    Match,
    Player,
)
from logic.battle import HIT, INVALID, REPEAT, ShotResult, resolve_shot
from logic.bot_targeting import BotTargeting
from logic.parser import parse_orientation
from logic.placement import place_ship, random_fleet
from logic.render import (
    render_board_enemy,
    render_board_own,
    render_heading,
    render_summary,
    render_winner,
)

logger = logging.getLogger(__name__)


class InputProvider(Protocol):
    """Source of the human player's answers."""

    def ask(self, prompt: str) -> str:
        ...


class Display(Protocol):
    """Sink for everything the match wants to show."""

    def show(self, text: str) -> None:
        ...

    def clear(self) -> None:
        ...


class MatchController:
    """Drive a match through setup, battle and the final report.

    Human players are asked through ``human_input``; every bot player gets
    its own :class:`BotTargeting`.  Turns alternate starting with ``first``.
    """

    def __init__(
        self,
        first: Player,
        second: Player,
        *,
        human_input: InputProvider,
        display: Display,
        rng: Optional[random.Random] = None,
        turn_delay: float = 0.0,
        setup_delay: float = 0.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.match = Match.new(first, second)
        self.input = human_input
        self.display = display
        self.rng = rng or random.Random()
        self.turn_delay = turn_delay
        self.setup_delay = setup_delay
        self.sleep = sleep
        self.targeting: Dict[int, BotTargeting] = {
            idx: BotTargeting(rng=self.rng)
            for idx, player in enumerate(self.match.players)
            if player.is_bot
        }

    def play(self) -> Match:
        self.setup()
        return self.battle()

    def setup(self) -> None:
        self.match.status = STATUS_SETUP
        self.display.clear()
        self.display.show("\n" + render_heading("SETUP PHASE"))
        for player in self.match.players:
            if player.is_bot:
                random_fleet(player.board, player.ships, self.rng)
                logger.info("Fleet placed for %s", player.name)
            else:
                self.display.show(f"\n{player.name}, deploy your fleet!")
                self._place_human_fleet(player)
        self.display.show("\nAll ships placed!")
        if any(not player.is_bot for player in self.match.players):
            self.input.ask("Press Enter to continue...")
        self.match.status = STATUS_BATTLE

    def _place_human_fleet(self, player: Player) -> None:
        for ship in player.ships:
            while True:
                self.display.clear()
                self.display.show(render_board_own(player.board))
                self.display.show(f"\nPlace your {ship.name} (Length: {ship.length})")
                start = self.input.ask("\nEnter your starting coordinate (A1): ").strip()
                direction = self.input.ask("Horizontal or Vertical? (H/V): ")
                horizontal = parse_orientation(direction)
                if horizontal is not None and place_ship(player.board, ship, start, horizontal):
                    break
                logger.debug("Rejected placement of %s at %r/%r", ship.name, start, direction)
                self.display.show("\nInvalid placement! Try again.")
                self.input.ask("Press Enter to continue...")

        self.display.clear()
        self.display.show(f"\n{player.name}'s final board:")
        self.display.show(render_board_own(player.board))
        self.sleep(self.setup_delay)

    def battle(self) -> Match:
        match = self.match
        match.status = STATUS_BATTLE
        self.display.clear()
        self.display.show("\n" + render_heading("BATTLE PHASE"))

        current, opponent = 0, 1
        while match.status == STATUS_BATTLE:
            shooter = match.players[current]
            target = match.players[opponent]
            if shooter.is_bot:
                self.sleep(self.turn_delay)
                shot = self._bot_turn(current, shooter, target)
            else:
                shot = self._human_turn(shooter, target)

            if shot is not None:
                match.turn_count += 1
                if target.all_ships_sunk():
                    self._finish(shooter, target)
                    break
            current, opponent = opponent, current
        return match

    def _show_turn_header(self, shooter: Player) -> None:
        # only turns that end in a shot get a number
        self.display.clear()
        self.display.show("\n" + render_heading(f"TURN {self.match.turn_count + 1}"))
        self.display.show(f"         {shooter.name}'s turn")

    def _human_turn(self, shooter: Player, target: Player) -> ShotResult:
        self._show_turn_header(shooter)
        self.display.show("\nYour board:")
        self.display.show(render_board_own(shooter.board))
        self.display.show("\nOpponent's board:")
        self.display.show(render_board_enemy(target.board))

        while True:
            label = self.input.ask("\nEnter your target (A1): ").strip()
            shot = resolve_shot(shooter, target, label)
            if shot.result == INVALID:
                self.display.show("Invalid target! Try again.")
                continue
            if shot.result == REPEAT:
                self.display.show("You already shot there! Try again.")
                continue
            break

        if shot.result == HIT:
            self.display.show("\n*** HIT! ***")
            self._announce_sunk(shot)
        else:
            self.display.show("\n*** MISS! ***")
        self.display.show("\nOpponent's board after your shot:")
        self.display.show(render_board_enemy(target.board))
        return shot

    def _bot_turn(self, idx: int, shooter: Player, target: Player) -> Optional[ShotResult]:
        """Fire the bot's next shot; ``None`` when the turn is skipped.

        The shot is resolved before anything is shown, so a skipped turn
        leaves no header behind.
        """
        targeting = self.targeting[idx]
        label = targeting.pick_next_shot()
        if label is None:
            logger.warning("%s has no targets left, skipping turn", shooter.name)
            return None

        shot = resolve_shot(shooter, target, label)
        if not shot.valid:
            logger.warning("%s picked unusable target %s (%s)", shooter.name, label, shot.result)
            return None
        targeting.record_outcome(shot.label, shot.result)

        self._show_turn_header(shooter)
        self.display.show("\nAI is thinking...")
        self.display.show(f"\nAI shoots at {shot.label}...")
        if shot.result == HIT:
            whose = f"{target.name}'s" if target.is_bot else "your"
            self.display.show(f"*** AI HIT {whose} ship at {shot.label}! ***")
            self._announce_sunk(shot)
        else:
            self.display.show(f"AI missed at {shot.label}.")

        if target.is_bot:
            self.display.show(f"\n{target.name}'s board after AI's shot:")
            self.display.show(render_board_enemy(target.board))
        else:
            self.display.show("\nYour board after AI's shot:")
            self.display.show(render_board_own(target.board))
        return shot

    def _announce_sunk(self, shot: ShotResult) -> None:
        if shot.sunk and shot.ship is not None:
            self.display.show(f"*** {shot.ship.name} has been SUNK! ***")

    def _finish(self, winner: Player, loser: Player) -> None:
        match = self.match
        match.status = STATUS_FINISHED
        match.winner = winner
        match.loser = loser
        logger.info(
            "Match %s won by %s after %d turns", match.match_id, winner.name, match.turn_count
        )
        self.display.clear()
        self.display.show(render_winner(match))
        self.display.show(render_summary(match))
