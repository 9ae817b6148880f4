from __future__ import annotations
import logging
import random
from typing import Iterable, List, Optional

from models import BOARD_SIZE, Board, CellState, Coord, Ship
from logic.parser import format_coord, parse_coord

logger = logging.getLogger(__name__)

# random trials per ship before falling back to a deterministic scan
MAX_PLACEMENT_ATTEMPTS = 200


def ship_cells(start: Coord, length: int, horizontal: bool) -> List[Coord]:
    r, c = start
    cells = []
    for i in range(length):
        rr = r + (0 if horizontal else i)
        cc = c + (i if horizontal else 0)
        cells.append((rr, cc))
    return cells


def can_place(board: Board, cells: List[Coord]) -> bool:
    for coord in cells:
        if not board.in_bounds(coord):
            return False
        if board.is_occupied(coord):
            return False
    return True


def place_ship(board: Board, ship: Ship, start: str, horizontal: bool) -> bool:
    """Place ``ship`` on ``board`` starting at label ``start``.

    Horizontal ships keep the row and grow to the right, vertical ones keep
    the column and grow downwards.  Nothing is changed unless every cell is
    inside the board and free.  A ship that already has cells is never placed
    a second time.
    """
    if ship.cells:
        return False
    coord = parse_coord(start)
    if coord is None:
        return False
    cells = ship_cells(coord, ship.length, horizontal)
    if not can_place(board, cells):
        return False
    for rr, cc in cells:
        board.grid[rr][cc] = CellState.SHIP
        board.occupied[rr][cc] = True
        ship.cells.append((rr, cc))
    logger.debug("Placed %s at %s (%s)", ship.name, start, "h" if horizontal else "v")
    return True


def _scan_positions() -> Iterable[tuple[str, bool]]:
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            label = format_coord((r, c))
            yield label, True
            yield label, False


def place_ship_randomly(
    board: Board,
    ship: Ship,
    rng: Optional[random.Random] = None,
) -> None:
    """Put ``ship`` on a random free spot of ``board``.

    Up to :data:`MAX_PLACEMENT_ATTEMPTS` random start cells and orientations
    are tried.  When all of them collide the first legal position of a
    row-major scan is used instead.
    """
    rng = rng or random.Random()
    for _ in range(MAX_PLACEMENT_ATTEMPTS):
        label = format_coord((rng.randrange(BOARD_SIZE), rng.randrange(BOARD_SIZE)))
        horizontal = rng.choice([True, False])
        if place_ship(board, ship, label, horizontal):
            return
    logger.warning(
        "Random placement of %s failed %d times, scanning the board",
        ship.name,
        MAX_PLACEMENT_ATTEMPTS,
    )
    for label, horizontal in _scan_positions():
        if place_ship(board, ship, label, horizontal):
            return
    raise RuntimeError(f"Failed to place {ship.name} on the board")


def random_fleet(board: Board, ships: List[Ship], rng: Optional[random.Random] = None) -> None:
    rng = rng or random.Random()
    for ship in ships:
        place_ship_randomly(board, ship, rng)
