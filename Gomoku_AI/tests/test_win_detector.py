"""Five-or-more detection along all four axes; overlines still win."""

from Gomoku_AI.Board import Board, Cell
from Gomoku_AI.Move import Move
from Gomoku_AI.engine import win_detector


def _place(board, coords, color):
    for x, y in coords:
        board.set(x, y, color)


def test_five_wins_and_overline_still_wins():
    b = Board(size=15)
    _place(b, [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0)], Cell.BLACK)
    result = win_detector.check_win(b, 4, 0)
    assert result.won
    assert result.line == tuple(Move(x, 0, Cell.BLACK) for x in range(5))

    # add one more to create an overline
    b.set(5, 0, Cell.BLACK)
    result = win_detector.check_win(b, 5, 0)
    assert result.won
    assert len(result.line) == 6
    assert [m.x for m in result.line] == [0, 1, 2, 3, 4, 5]


def test_win_from_middle_stone_on_both_diagonals():
    b = Board(size=15)
    _place(b, [(1, 1), (2, 2), (3, 3), (4, 4), (5, 5)], Cell.WHITE)
    result = win_detector.check_win(b, 3, 3)
    assert result.won
    assert {m.pos for m in result.line} == {(i, i) for i in range(1, 6)}

    b = Board(size=15)
    _place(b, [(1, 5), (2, 4), (3, 3), (4, 2), (5, 1)], Cell.BLACK)
    result = win_detector.check_win(b, 3, 3)
    assert result.won
    assert result.line[0] == Move(1, 5, Cell.BLACK)
    assert result.line[-1] == Move(5, 1, Cell.BLACK)


def test_four_or_broken_line_does_not_win():
    b = Board(size=15)
    _place(b, [(0, 7), (1, 7), (2, 7), (3, 7), (5, 7)], Cell.BLACK)
    b.set(4, 7, Cell.WHITE)
    assert win_detector.check_win(b, 3, 7) == (False, None)
    assert not win_detector.check_win(b, 5, 7).won


def test_empty_origin_never_wins():
    b = Board(size=15)
    _place(b, [(0, 0), (1, 0), (3, 0), (4, 0)], Cell.BLACK)
    assert not win_detector.check_win(b, 2, 0).won


def test_draw_only_on_full_board_without_win():
    # Five in a row is impossible on a 4x4 board, so filling it is a draw.
    b = Board(size=4)
    for y in range(4):
        for x in range(4):
            assert not win_detector.is_draw(b, 0, 0)
            b.set(x, y, Cell.BLACK if (x // 2 + y) % 2 else Cell.WHITE)
    assert win_detector.is_draw(b, 3, 3)
