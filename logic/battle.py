from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional

from models import Board, CellState, Coord, Player, Ship
from logic.parser import format_coord, parse_coord

logger = logging.getLogger(__name__)


INVALID, REPEAT, HIT, MISS = 'invalid', 'repeat', 'hit', 'miss'


@dataclass
class ShotResult:
    result: str
    label: str
    coord: Optional[Coord] = None
    ship: Optional[Ship] = None
    sunk: bool = False

    @property
    def valid(self) -> bool:
        return self.result in (HIT, MISS)


def shoot(board: Board, label: str) -> str:
    """Fire at ``label`` and return one of ``INVALID``, ``REPEAT``, ``HIT``, ``MISS``.

    A cell that already shows a hit or a miss is left untouched.
    """
    coord = parse_coord(label)
    if coord is None:
        return INVALID
    state = board.state_at(coord)
    if state in (CellState.HIT, CellState.MISS):
        return REPEAT
    if board.is_occupied(coord):
        board.set_state(coord, CellState.HIT)
        return HIT
    board.set_state(coord, CellState.MISS)
    return MISS


def resolve_shot(shooter: Player, target: Player, label: str) -> ShotResult:
    """Apply a shot from ``shooter`` to ``target``'s board.

    Statistics and ship damage are only updated for a fresh, valid cell;
    ``INVALID`` and ``REPEAT`` results leave both players untouched.
    """
    result = shoot(target.board, label)
    if result in (INVALID, REPEAT):
        return ShotResult(result=result, label=label)

    coord = parse_coord(label)
    label = format_coord(coord)
    shooter.shots_fired += 1
    if result == MISS:
        logger.debug("%s missed at %s", shooter.name, label)
        return ShotResult(result=MISS, label=label, coord=coord)

    shooter.shots_hit += 1
    ship = target.find_ship(coord)
    sunk = False
    if ship is not None:
        ship.register_hit()
        sunk = ship.is_sunk()
    logger.debug("%s hit %s at %s", shooter.name, ship.name if ship else "?", label)
    return ShotResult(result=HIT, label=label, coord=coord, ship=ship, sunk=sunk)
