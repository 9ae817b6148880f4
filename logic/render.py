from __future__ import annotations
from typing import Iterable, List

from wcwidth import wcswidth

from models import Board, CellState, Match
from logic.parser import COLS

# fixed-width layout for board cells
#
# The glyphs used for ships and shots are not guaranteed to be one column
# wide on every terminal font, so every cell is padded to ``CELL_WIDTH``
# display columns as measured by ``wcswidth``.
CELL_WIDTH = 2
ROW_LABEL_WIDTH = 3

# text symbols for board rendering
WATER_SYMBOL = "☐"
SHIP_SYMBOL = "⬤"
HIT_SYMBOL = "◉"
MISS_SYMBOL = "☒"

RULE = "⫘" * 9


def display_width(text: str) -> int:
    width = wcswidth(text)
    # ``wcswidth`` returns ``-1`` for non-printable strings
    return len(text) if width < 0 else width


def format_cell(symbol: str, width: int = CELL_WIDTH) -> str:
    """Pad ``symbol`` on the right until it fills ``width`` columns."""
    slack = width - display_width(symbol)
    if slack <= 0:
        return symbol
    return symbol + " " * slack


def _symbol(state: CellState, reveal: bool) -> str:
    if state == CellState.SHIP:
        return SHIP_SYMBOL if reveal else WATER_SYMBOL
    if state == CellState.HIT:
        return HIT_SYMBOL
    if state == CellState.MISS:
        return MISS_SYMBOL
    return WATER_SYMBOL


def _render(board: Board, reveal: bool) -> str:
    inner = len(COLS) * CELL_WIDTH + 1
    header = " " * (ROW_LABEL_WIDTH + 2) + "".join(format_cell(letter) for letter in COLS)
    lines = [header, " " * ROW_LABEL_WIDTH + "┌" + "─" * inner + "┐"]
    for r_idx, row in enumerate(board.grid):
        cells = "".join(format_cell(_symbol(state, reveal)) for state in row)
        row_label = f"{r_idx + 1:>2} "
        lines.append(f"{row_label}│ {cells}│")
    lines.append(" " * ROW_LABEL_WIDTH + "└" + "─" * inner + "┘")
    return "\n".join(lines)


def render_board_own(board: Board) -> str:
    return _render(board, reveal=True)


def render_board_enemy(board: Board) -> str:
    return _render(board, reveal=False)


def render_box(lines: Iterable[str], *, min_width: int = 20, padding: int = 4) -> str:
    """Centre ``lines`` inside a double-lined box."""
    lines = list(lines)
    inner = max([min_width] + [display_width(line) + padding * 2 for line in lines])
    out = ["╔" + "═" * inner + "╗", "║" + " " * inner + "║"]
    for line in lines:
        slack = inner - display_width(line)
        left = slack // 2
        out.append("║" + " " * left + line + " " * (slack - left) + "║")
    out.append("║" + " " * inner + "║")
    out.append("╚" + "═" * inner + "╝")
    return "\n".join(out)


def render_heading(title: str) -> str:
    return f"{RULE}  {title} {RULE}"


def render_welcome() -> str:
    return render_box(["S H I P S  H U N T E R", "Deploy Your Fleet, Sink All Ships"])


def render_winner(match: Match) -> str:
    winner = match.winner
    if winner is None:
        return render_box(["NO WINNER"], padding=0)
    message = "CONGRATS YOU WIN!" if not winner.is_bot else f"*** {winner.name} WINS! ***"
    return render_box([message], padding=0)


def render_summary(match: Match) -> str:
    lines: List[str] = [render_heading("GAME STATISTICS")]
    for player in match.players:
        stats = player.stats()
        lines.append(f"{stats.name}:")
        lines.append(f"  Shots Fired: {stats.shots_fired}")
        lines.append(f"  Shots Hit: {stats.shots_hit}")
        lines.append(f"  Accuracy: {stats.accuracy:.2f}%")
    label = "Turns to Win" if match.winner is not None else "Turns"
    lines.append(f"{label}: {match.turn_count}")
    return "\n".join(lines)
