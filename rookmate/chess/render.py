"""Text rendering of the board and the end-of-game summary"""

from string import ascii_lowercase
from typing import Iterable

from rookmate.chess.board import Board
from rookmate.chess.move_log import format_move_log, format_replay
from rookmate.chess.moves import MoveRecord
from rookmate.chess.square import Square
from rookmate.chess.stats import GameStats

EMPTY_GLYPH = "·"


def render_board(board: Board) -> str:
    """
    Column letters above and below, rank numbers on both sides.
    The top row (row index 0) carries the highest rank number.

    ex) 4x4 board
       a b c d
     4 · · ♔ · 4
     3 · · · · 3
     2 ♜ · · · 2
     1 ♚ · · ♜ 1
       a b c d
    """
    letters = "   " + " ".join(ascii_lowercase[: board.size])
    lines = [letters]
    for row in range(board.size):
        rank = board.size - row
        cells = [_glyph(board, Square(row, column)) for column in range(board.size)]
        lines.append(f"{rank:>2} {' '.join(cells)} {rank}")
    lines.append(letters)
    return "\n".join(lines)


def _glyph(board: Board, square: Square) -> str:
    piece = board.occupant_at(square)
    return piece.glyph() if piece else EMPTY_GLYPH


def render_stats(
    stats: GameStats, history: Iterable[MoveRecord], board_size: int
) -> str:
    """Summary printed when the game is over"""
    lines = [
        "--- Game Over ---",
        f"Total moves: {stats.total_moves}",
        f"King moves: {stats.white_king_moves}",
        f"Rook moves: {stats.white_rook_moves}",
        f"Checks given: {stats.checks_given}",
        "Moves played:",
    ]
    lines.extend(format_replay(format_move_log(history, board_size)))
    return "\n".join(lines)
