"""
Attacking rules, check and checkmate detection.

Only white pieces ever attack: black owns nothing but its king, so 'is this square attacked?' always means 'attacked by white'.
"""

import logging
from typing import Callable, Optional, Protocol

from rookmate.chess.moves import is_path_clear
from rookmate.chess.pieces import Color, Piece, PieceType
from rookmate.chess.square import Square

logger = logging.getLogger(__name__)


class Board(Protocol):
    """Just the parts the attack strategies need"""

    size: int

    def occupant_at(self, square: Square) -> Optional[Piece]: ...
    def is_empty(self, square: Square) -> bool: ...
    def find(self, color: Color, piece_type: PieceType) -> Square: ...
    def locate_color(self, color: Color) -> list[tuple[Square, Piece]]: ...


# --- CAPTURING RULES / ATTACKING RULES ---
def is_attacked_by_rook(
    attacker: Square, target: Square, board: Board, vacated: Optional[Square]
) -> bool:
    """Rook on the same row or column, with nothing in between (except possibly the vacated square)"""
    if attacker == target:
        return False
    if attacker.row != target.row and attacker.column != target.column:
        return False
    return is_path_clear(board, attacker, target, vacated)


def is_attacked_by_king(
    attacker: Square, target: Square, board: Board, vacated: Optional[Square]
) -> bool:
    """The king covers every square around it"""
    return attacker.chebyshev_distance(target) <= 1


# --- STRATEGY PATTERN: ATTACKING RULES ---
IsAttackedFn = Callable[[Square, Square, Board, Optional[Square]], bool]
ATTACK_RULES: dict[PieceType, IsAttackedFn] = {
    PieceType.KING: is_attacked_by_king,
    PieceType.ROOK: is_attacked_by_rook,
}


def is_attacked(board: Board, target: Square, vacated: Optional[Square] = None) -> bool:
    """
    Is the target square in the line-of-sight of any white piece?
    ---

    Full scan over the white pieces (no incremental attack map; boards are at most 26x26).

    `vacated`: evaluate the position 'as if' that square were empty. Pass the black king's current square to test
    an escape square without the king shielding itself, i.e. without having to move it on the board.
    """
    for square, piece in board.locate_color(Color.WHITE):
        if square == vacated:
            continue
        attack_rule = ATTACK_RULES.get(piece.type)
        if attack_rule is not None and attack_rule(square, target, board, vacated):
            return True
    return False


def is_check(board: Board) -> bool:
    """Black king currently under attack"""
    return is_attacked(board, board.find(Color.BLACK, PieceType.KING))


def is_safe_square(board: Board, square: Square, king_square: Square) -> bool:
    """
    Could the black king (standing on king_square) stand on `square` without being attacked?

    The square must lie on the board and be empty, except for the king's own square (staying put is allowed).
    """
    if not square.is_within_bounds(board.size):
        return False
    if square != king_square and not board.is_empty(square):
        return False
    return not is_attacked(board, square, vacated=king_square)


def is_checkmate(board: Board) -> bool:
    """
    Black king is attacked and has no empty, unattacked square around it to escape to.
    ---

    1. Find the black king (missing king is a corrupt board -> PieceNotFoundError propagates)
    2. Not in check? Then not checkmate either.
    3. Any neighbor that is safe once the king left its square? Then it can escape.
    """
    king_square = board.find(Color.BLACK, PieceType.KING)
    if not is_attacked(board, king_square):
        return False

    for neighbor in king_square.neighbors():
        if is_safe_square(board, neighbor, king_square):
            logger.debug("Black king in check but can escape to %s", neighbor)
            return False
    return True
