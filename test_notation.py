"""
Tests for algebraic notation helpers.
"""
import sys
from pathlib import Path

import pytest

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from othebot.game import parse_algebraic, to_algebraic, mask_to_coords, coords_to_mask
from othebot.game.errors import IllegalMoveError, OutOfBoundsError


def test_parse_corners():
    assert parse_algebraic("a1") == (0, 0)
    assert parse_algebraic("h8") == (7, 7)
    assert parse_algebraic("h1") == (7, 0)
    assert parse_algebraic("a8") == (0, 7)


def test_parse_opening_moves():
    assert [parse_algebraic(m) for m in ("d3", "c4", "f5", "e6")] == [(3, 2), (2, 3), (5, 4), (4, 5)]


@pytest.mark.parametrize("text", ["i1", "a9", "", "abc", "a0", "A1", "1a", "a", " a1"])
def test_parse_rejects(text):
    with pytest.raises(IllegalMoveError):
        parse_algebraic(text)


def test_to_algebraic():
    assert to_algebraic(0, 0) == "a1"
    assert to_algebraic(3, 2) == "d3"
    with pytest.raises(OutOfBoundsError):
        to_algebraic(8, 0)


def test_mask_helpers():
    coords = [(0, 0), (7, 0), (3, 4), (7, 7)]
    mask = coords_to_mask(coords)
    assert mask == (1 << 0) | (1 << 7) | (1 << 35) | (1 << 63)
    assert mask_to_coords(mask) == coords
    assert mask_to_coords(0) == []


if __name__ == "__main__":
    sys.exit(pytest.main([__file__]))
