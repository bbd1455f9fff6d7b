"""Single-ply hint lookup for the human side."""

from Gomoku_AI.Board import Board, Cell
from Gomoku_AI.Move import Move
from Gomoku_AI.ai.hint import hint


def test_no_hint_when_every_cell_scores_zero():
    assert hint(Board(size=15), Cell.BLACK) is None

    # Lone white stone: black gains nothing anywhere.
    b = Board(size=15)
    b.set(7, 7, Cell.WHITE)
    assert hint(b, Cell.BLACK) is None


def test_hint_extends_open_three_and_breaks_ties_row_major():
    b = Board(size=15)
    for x in (6, 7, 8):
        b.set(x, 7, Cell.BLACK)
    # (5, 7) and (9, 7) both make an open four at equal centre distance.
    assert hint(b, Cell.BLACK) == Move(5, 7, Cell.BLACK)


def test_hint_prefers_cell_closer_to_centre():
    b = Board(size=15)
    b.set(7, 7, Cell.WHITE)
    assert hint(b, Cell.WHITE) == Move(7, 6, Cell.WHITE)


def test_hint_does_not_touch_board():
    b = Board(size=9)
    b.set(4, 4, Cell.BLACK)
    b.set(5, 5, Cell.WHITE)
    before = [row[:] for row in b.cells]
    hint(b, Cell.BLACK)
    assert b.cells == before
