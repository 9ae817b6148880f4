from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum
from typing import List, Optional, Tuple
import uuid


Coord = Tuple[int, int]  # row, col indexes

BOARD_SIZE = 10

# name and length of every ship each side has to place
FLEET: Tuple[Tuple[str, int], ...] = (
    ("Carrier", 5),
    ("Battleship", 4),
    ("Destroyer", 3),
)

STATUS_SETUP = "setup"
STATUS_BATTLE = "battle"
STATUS_FINISHED = "finished"


class CellState(IntEnum):
    EMPTY = 0
    SHIP = 1
    MISS = 2
    HIT = 3


def _empty_grid() -> List[List[CellState]]:
    return [[CellState.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]


def _empty_mask() -> List[List[bool]]:
    return [[False] * BOARD_SIZE for _ in range(BOARD_SIZE)]


@dataclass
class Ship:
    name: str
    length: int
    cells: List[Coord] = field(default_factory=list)
    hits: int = 0

    def contains(self, coord: Coord) -> bool:
        return coord in self.cells

    def register_hit(self) -> None:
        # callers only report each occupied cell once
        self.hits += 1

    def is_sunk(self) -> bool:
        return self.hits >= self.length


@dataclass
class Board:
    """10×10 playing field of a single player.

    ``grid`` holds what every cell currently shows while ``occupied`` is the
    parallel ship mask used for placement checks and hit testing.  Both are
    only mutated through :func:`logic.placement.place_ship` and
    :func:`logic.battle.shoot`.
    """

    grid: List[List[CellState]] = field(default_factory=_empty_grid)
    occupied: List[List[bool]] = field(default_factory=_empty_mask)

    @staticmethod
    def in_bounds(coord: Coord) -> bool:
        r, c = coord
        return 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE

    def state_at(self, coord: Coord) -> CellState:
        r, c = coord
        return self.grid[r][c]

    def set_state(self, coord: Coord, state: CellState) -> None:
        r, c = coord
        self.grid[r][c] = state

    def is_occupied(self, coord: Coord) -> bool:
        r, c = coord
        return self.occupied[r][c]

    def all_ships_sunk(self) -> bool:
        return not any(cell == CellState.SHIP for row in self.grid for cell in row)


@dataclass
class PlayerStats:
    name: str
    shots_fired: int
    shots_hit: int
    accuracy: float


@dataclass
class Player:
    name: str
    is_bot: bool = False
    board: Board = field(default_factory=Board)
    ships: List[Ship] = field(
        default_factory=lambda: [Ship(name=name, length=length) for name, length in FLEET]
    )
    shots_fired: int = 0
    shots_hit: int = 0

    def all_ships_sunk(self) -> bool:
        return all(ship.is_sunk() for ship in self.ships)

    def find_ship(self, coord: Coord) -> Optional[Ship]:
        for ship in self.ships:
            if ship.contains(coord):
                return ship
        return None

    def accuracy(self) -> float:
        """Percentage of fired shots that hit, ``0.0`` before the first shot."""
        if self.shots_fired == 0:
            return 0.0
        return self.shots_hit / self.shots_fired * 100.0

    def stats(self) -> PlayerStats:
        return PlayerStats(
            name=self.name,
            shots_fired=self.shots_fired,
            shots_hit=self.shots_hit,
            accuracy=self.accuracy(),
        )


@dataclass
class Match:
    match_id: str
    players: Tuple[Player, Player]
    status: str = STATUS_SETUP  # setup|battle|finished
    created_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    turn_count: int = 0
    winner: Optional[Player] = None
    loser: Optional[Player] = None

    @staticmethod
    def new(first: Player, second: Player) -> 'Match':
        return Match(match_id=uuid.uuid4().hex, players=(first, second))
