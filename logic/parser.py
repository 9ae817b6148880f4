from __future__ import annotations
import re
from typing import List, Optional

from models import BOARD_SIZE, Coord

# Columns are lettered, rows are numbered from 1: "A1" is the top-left cell
# and "J10" the bottom-right one.
COLS = "ABCDEFGHIJ"

_COORD_RE = re.compile(r"([A-J])([0-9]{1,2})")

HORIZONTAL_WORDS = {"h", "horizontal"}
VERTICAL_WORDS = {"v", "vertical"}


def normalize(cell: str) -> str:
    return cell.upper()


def parse_coord(cell: Optional[str]) -> Optional[Coord]:
    """Parse a label like ``'B7'`` or ``'j10'`` into ``(row, col)``.

    Returns ``None`` for anything that is not exactly a letter ``A``..``J``
    followed by a row number ``1``..``10``; surrounding whitespace is not
    stripped here.
    """
    if cell is None:
        return None
    cell = normalize(cell)
    if not 2 <= len(cell) <= 3:
        return None
    match = _COORD_RE.fullmatch(cell)
    if not match:
        return None
    letter, digits = match.groups()
    row = int(digits)
    if not 1 <= row <= BOARD_SIZE:
        return None
    return row - 1, COLS.index(letter)


def format_coord(coord: Coord) -> str:
    """Convert internal ``(row, col)`` into the user-facing label."""
    r, c = coord
    if not (0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE):
        raise ValueError(f"Coordinate {coord!r} is outside the board")
    return f"{COLS[c]}{r + 1}"


def parse_orientation(text: Optional[str]) -> Optional[bool]:
    """Return ``True`` for horizontal, ``False`` for vertical, ``None`` otherwise."""
    if text is None:
        return None
    word = text.strip().lower()
    if word in HORIZONTAL_WORDS:
        return True
    if word in VERTICAL_WORDS:
        return False
    return None


def all_coords() -> List[str]:
    """Every label on the board, column by column."""
    return [f"{letter}{row}" for letter in COLS for row in range(1, BOARD_SIZE + 1)]
