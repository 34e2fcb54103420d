"""
The computer plays the black king.

Greedy, one-ply heuristic: of all squares the king can safely stand on after this move (incl. staying put),
pick the one that is farthest away from the white pieces (sum of Manhattan distances).
It never looks at how white could reply.
"""

import logging
from typing import Optional

from rookmate.chess.attacks import is_safe_square
from rookmate.chess.board import Board
from rookmate.chess.moves import Move, MoveRecord
from rookmate.chess.pieces import Color, PieceType
from rookmate.chess.square import KING_DELTAS, Square, Vector
from rookmate.chess.stats import GameStats
from rookmate.core.exceptions import NoSafeMoveError

logger = logging.getLogger(__name__)

# Staying put comes first: on equal scores the king prefers not to move.
CANDIDATE_DELTAS: list[Vector] = [(0, 0)] + KING_DELTAS


def candidate_squares(king_square: Square) -> list[Square]:
    """All 9 squares the king could end up on, in the order used for breaking ties (NOT filtered on bounds)"""
    return [king_square.offset(delta) for delta in CANDIDATE_DELTAS]


def distance_score(board: Board, square: Square) -> int:
    """Sum of the Manhattan distances from the square to every white piece"""
    return sum(
        square.manhattan_distance(white_square)
        for white_square, _ in board.locate_color(Color.WHITE)
    )


def choose_black_king_move(board: Board) -> Move:
    """
    Pick the move for the black king
    ----

    1. Take the 9 candidates (stay + 8 neighbors)
    2. Drop the ones that are off the board, occupied, or attacked (with the king already gone from its square)
    3. Highest score wins. Only a strictly higher score replaces the best so far, so ties go to the earliest candidate.

    Must only be called when the king is not checkmated. If nothing survives, the board is inconsistent.
    """
    king_square = board.find(Color.BLACK, PieceType.KING)

    best_square: Optional[Square] = None
    best_score = -1
    for candidate in candidate_squares(king_square):
        if not is_safe_square(board, candidate, king_square):
            continue
        score = distance_score(board, candidate)
        logger.debug("Black king candidate %s scores %d", candidate, score)
        if score > best_score:
            best_square, best_score = candidate, score

    if best_square is None:
        logger.error("Black king on %s has no safe square to go to", king_square)
        raise NoSafeMoveError(
            f"Black king on {king_square} has no safe square, but it is not checkmated."
        )
    return Move(king_square, best_square)


def play_black_king_move(
    board: Board, history: list[MoveRecord], stats: GameStats
) -> MoveRecord:
    """Choose the black king's move, apply it to the board and log it. Staying put also counts as a move."""
    move = choose_black_king_move(board)
    black_king = board.occupant_at(move.source)
    # for the typechecker: find() above already guarantees the king is there
    assert black_king is not None

    if not move.is_null_move:
        board.move_piece(move)

    record = MoveRecord.from_move(black_king, move)
    history.append(record)
    stats.black_king_moves += 1
    logger.info("Black king moves %s -> %s", move.source, move.destination)
    return record
