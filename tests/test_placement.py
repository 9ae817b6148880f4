import random

from logic import placement
from logic.placement import place_ship, random_fleet, ship_cells
from models import Board, CellState, Player, Ship


def test_ship_cells_orientation():
    assert ship_cells((2, 3), 3, True) == [(2, 3), (2, 4), (2, 5)]
    assert ship_cells((2, 3), 3, False) == [(2, 3), (3, 3), (4, 3)]


def test_place_ship_horizontal_marks_board_and_ship():
    board = Board()
    ship = Ship(name="Destroyer", length=3)
    assert place_ship(board, ship, "C2", True)
    assert ship.cells == [(1, 2), (1, 3), (1, 4)]
    for r, c in ship.cells:
        assert board.grid[r][c] == CellState.SHIP
        assert board.occupied[r][c]
    assert sum(cell == CellState.SHIP for row in board.grid for cell in row) == 3


def test_place_ship_vertical_to_edge():
    board = Board()
    ship = Ship(name="Carrier", length=5)
    assert place_ship(board, ship, "J6", False)
    assert ship.cells == [(5, 9), (6, 9), (7, 9), (8, 9), (9, 9)]


def test_place_ship_out_of_bounds_leaves_board_untouched():
    board = Board()
    ship = Ship(name="Carrier", length=5)
    assert not place_ship(board, ship, "G1", True)
    assert not place_ship(board, ship, "A7", False)
    assert ship.cells == []
    assert not any(any(row) for row in board.occupied)
    assert all(cell == CellState.EMPTY for row in board.grid for cell in row)


def test_place_ship_overlap_is_rejected_without_partial_update():
    board = Board()
    first = Ship(name="Battleship", length=4)
    second = Ship(name="Destroyer", length=3)
    assert place_ship(board, first, "B3", True)
    assert not place_ship(board, second, "D1", False)
    assert second.cells == []
    assert not board.occupied[0][3]
    assert not board.occupied[1][3]


def test_place_ship_invalid_label():
    board = Board()
    ship = Ship(name="Destroyer", length=3)
    assert not place_ship(board, ship, "K1", True)
    assert not place_ship(board, ship, "", True)
    assert ship.cells == []


def test_place_ship_twice_is_rejected():
    board = Board()
    ship = Ship(name="Destroyer", length=3)
    assert place_ship(board, ship, "A1", True)
    assert not place_ship(board, ship, "A5", True)
    assert ship.cells == [(0, 0), (0, 1), (0, 2)]
    assert not board.occupied[4][0]
    assert sum(cell == CellState.SHIP for row in board.grid for cell in row) == 3


def test_random_fleet_is_in_bounds_and_exclusive():
    for seed in range(25):
        player = Player(name="bot", is_bot=True)
        random_fleet(player.board, player.ships, random.Random(seed))
        seen = set()
        for ship in player.ships:
            assert len(ship.cells) == ship.length
            for r, c in ship.cells:
                assert 0 <= r < 10 and 0 <= c < 10
                assert (r, c) not in seen
                seen.add((r, c))
        assert len(seen) == 12
        assert sum(cell == CellState.SHIP for row in player.board.grid for cell in row) == 12


def test_random_fleet_falls_back_to_scan(monkeypatch):
    monkeypatch.setattr(placement, "MAX_PLACEMENT_ATTEMPTS", 0)
    player = Player(name="bot", is_bot=True)
    random_fleet(player.board, player.ships, random.Random(0))
    carrier, battleship, destroyer = player.ships
    assert carrier.cells == [(0, c) for c in range(5)]
    assert battleship.cells == [(0, c) for c in range(5, 9)]
    assert destroyer.cells == [(0, 9), (1, 9), (2, 9)]
