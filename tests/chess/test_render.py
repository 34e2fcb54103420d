"""Unit tests for /rookmate/chess/render.py"""

from typing import Callable

from rookmate.chess.board import Board
from rookmate.chess.moves import MoveRecord
from rookmate.chess.pieces import BLACK_KING, WHITE_KING, WHITE_ROOK, Color, PieceType
from rookmate.chess.render import render_board, render_stats
from rookmate.chess.square import Square
from rookmate.chess.stats import GameStats

MakeBoard = Callable[..., Board]


def test_render_board(make_board: MakeBoard) -> None:
    board = make_board(
        4, {(0, 2): BLACK_KING, (2, 0): WHITE_ROOK, (3, 0): WHITE_KING, (3, 3): WHITE_ROOK}
    )
    assert render_board(board).splitlines() == [
        "   a b c d",
        " 4 · · ♔ · 4",
        " 3 · · · · 3",
        " 2 ♜ · · · 2",
        " 1 ♚ · · ♜ 1",
        "   a b c d",
    ]


def test_render_large_board() -> None:
    """Two digit ranks stay aligned with the single digit ones"""
    lines = render_board(Board(12)).splitlines()
    assert len(lines) == 14
    assert lines[0] == "   a b c d e f g h i j k l"
    assert lines[1].startswith("12 ·")
    assert lines[1].endswith("· 12")
    assert lines[-2].startswith(" 1 ·")
    assert all(line[3] == "·" for line in lines[1:-1])


def test_render_does_not_modify_board(make_board: MakeBoard) -> None:
    board = make_board(4, {(0, 2): BLACK_KING})
    before = dict(board.position)
    render_board(board)
    assert board.position == before


def test_render_stats() -> None:
    stats = GameStats(white_king_moves=1, white_rook_moves=2, checks_given=2, black_king_moves=2)
    history = [
        MoveRecord(PieceType.ROOK, Color.WHITE, Square(7, 0), Square(0, 0)),
        MoveRecord(PieceType.KING, Color.BLACK, Square(0, 4), Square(1, 5)),
    ]
    assert render_stats(stats, history, 8).splitlines() == [
        "--- Game Over ---",
        "Total moves: 5",
        "King moves: 1",
        "Rook moves: 2",
        "Checks given: 2",
        "Moves played:",
        " 1. Rook a1 -> a8",
        " 2. King e8 -> f7",
    ]
