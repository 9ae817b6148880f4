import pytest
from logic.parser import all_coords, format_coord, parse_coord, parse_orientation

@pytest.mark.parametrize(
    "text,expected",
    [
        ("A1", (0, 0)),
        ("a1", (0, 0)),
        ("J10", (9, 9)),
        ("j10", (9, 9)),
        ("B5", (4, 1)),
        ("C7", (6, 2)),
        ("A01", (0, 0)),
    ],
)
def test_parse_coord_valid(text, expected):
    assert parse_coord(text) == expected

@pytest.mark.parametrize(
    "text",
    [
        "K1", "A11", "A0", "", "A", "A100", "1A", "AA", "A+1", "Z5", "A-1", None,
        " e3 ", " A1", "A1 ", "B1\n", "\tC4",
    ],
)
def test_parse_coord_invalid(text):
    assert parse_coord(text) is None


def test_format_coord_roundtrip_edges():
    assert format_coord((0, 0)) == "A1"
    assert format_coord((9, 9)) == "J10"
    assert format_coord((4, 1)) == "B5"


@pytest.mark.parametrize("coord", [(-1, 0), (0, 10), (10, 0)])
def test_format_coord_outside_board(coord):
    with pytest.raises(ValueError):
        format_coord(coord)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("H", True),
        ("h", True),
        ("horizontal", True),
        ("V", False),
        (" v ", False),
        ("Vertical", False),
        ("", None),
        ("d", None),
        (None, None),
    ],
)
def test_parse_orientation(text, expected):
    assert parse_orientation(text) is expected


def test_all_coords_cover_board_once():
    labels = all_coords()
    assert len(labels) == 100
    assert len(set(labels)) == 100
    assert {parse_coord(label) for label in labels} == {
        (r, c) for r in range(10) for c in range(10)
    }
