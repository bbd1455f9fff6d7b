"""Versioned JSON save/load of a game."""

import json

import pytest

from Gomoku_AI.Board import Cell
from Gomoku_AI.Gomokugame import Gomokugame
from Gomoku_AI.ai.search_minimax import Difficulty
from Gomoku_AI.engine import snapshot


def _game(**kwargs):
    return Gomokugame(logger=lambda *_: None, **kwargs)


def test_save_and_load_restore_game(tmp_path):
    game = _game(board_size=9, ai_mode=True, difficulty=Difficulty.HARD)
    for x, y in [(4, 4), (5, 5), (4, 5)]:
        game.place_stone(x, y)
    path = snapshot.save_game(game, tmp_path / "game.json")

    loaded = _game(board_size=9)
    snapshot.load_game(loaded, path)

    assert loaded.board.cells == game.board.cells
    assert list(loaded.history) == list(game.history)
    assert loaded.board.stone_count == 3
    assert loaded.current_player == Cell.WHITE
    assert loaded.ai_mode is True
    assert loaded.difficulty == Difficulty.HARD
    assert loaded.hint_move is None
    assert loaded.last_move.pos == (4, 5)


def test_finished_game_keeps_winner_and_line():
    game = _game(board_size=7)
    for x in range(4):
        game.place_stone(x, 0)
        game.place_stone(x, 1)
    game.place_stone(4, 0)

    data = json.loads(json.dumps(snapshot.to_dict(game)))
    assert data["version"] == snapshot.SNAPSHOT_VERSION
    assert data["grid"][0] == "BBBBB.."
    assert data["winner"] == "B"

    loaded = snapshot.from_dict(_game(board_size=7), data)
    assert loaded.game_over
    assert loaded.winner == Cell.BLACK
    assert [m.pos for m in loaded.winning_line] == [(x, 0) for x in range(5)]


def test_hint_survives_round_trip():
    game = _game(board_size=15)
    game.place_stone(7, 7)
    game.place_stone(0, 0)
    hint = game.show_hint()

    loaded = snapshot.from_dict(_game(board_size=15), snapshot.to_dict(game))
    assert loaded.hint_move == hint


def test_rejects_unknown_version_and_mismatched_grid():
    game = _game(board_size=5)
    game.place_stone(2, 2)
    data = snapshot.to_dict(game)

    with pytest.raises(ValueError, match="version"):
        snapshot.from_dict(_game(board_size=5), dict(data, version=99))

    bad_grid = list(data["grid"])
    bad_grid[0] = "W...."
    with pytest.raises(ValueError, match="move list"):
        snapshot.from_dict(_game(board_size=5), dict(data, grid=bad_grid))

    with pytest.raises(ValueError, match="board_size"):
        snapshot.from_dict(_game(board_size=7), data)

    with pytest.raises(ValueError):
        snapshot.from_dict(_game(board_size=5), dict(data, difficulty=7))


def test_failed_load_leaves_game_untouched():
    game = _game(board_size=5)
    game.place_stone(1, 1)
    data = dict(snapshot.to_dict(_game(board_size=5)), current_player="?")
    with pytest.raises(ValueError):
        snapshot.from_dict(game, data)
    assert game.board.get(1, 1) == Cell.BLACK
    assert len(game.history) == 1


def test_load_game_rejects_bad_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{", encoding="utf-8")
    with pytest.raises(ValueError):
        snapshot.load_game(_game(board_size=5), path)

    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        snapshot.load_game(_game(board_size=5), path)


@pytest.mark.parametrize(
    "field, value",
    [
        ("moves", None),
        ("grid", [1] * 5),
        ("winning_line", 5),
        ("hint", "B"),
        ("current_player", ["B"]),
        ("winner", {"B": 1}),
    ],
)
def test_wrong_field_types_raise_value_error(field, value):
    game = _game(board_size=5)
    game.place_stone(2, 2)
    data = dict(snapshot.to_dict(game), **{field: value})

    target = _game(board_size=5)
    with pytest.raises(ValueError):
        snapshot.from_dict(target, data)
    assert target.board.stone_count == 0


def test_load_game_with_wrong_types_raises_value_error(tmp_path):
    data = dict(snapshot.to_dict(_game(board_size=5)), moves=None)
    path = tmp_path / "typed.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    with pytest.raises(ValueError):
        snapshot.load_game(_game(board_size=5), path)
