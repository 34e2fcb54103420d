"""
Geometry/Base movement rules

Key idea: Use strategy pattern to define the movement shape for each piece type.

Shape legality only! Whose piece it is and whether the destination is free is checked later by Game.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Self

from rookmate.chess.pieces import Color, Piece, PieceType
from rookmate.chess.square import Square


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def occupant_at(self, square: Square) -> Optional[Piece]: ...
    def is_empty(self, square: Square) -> bool: ...


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made (a move request, before it is checked)"""

    source: Square
    destination: Square

    @classmethod
    def from_notation(cls, source: str, destination: str, board_size: int) -> Self:
        """ex. ('a7', 'a6') on an 8x8 board"""
        return cls(
            Square.from_notation(source, board_size),
            Square.from_notation(destination, board_size),
        )

    def to_notation(self, board_size: int) -> tuple[str, str]:
        return (
            self.source.to_notation(board_size),
            self.destination.to_notation(board_size),
        )

    @property
    def is_null_move(self) -> bool:
        return self.source == self.destination


@dataclass(frozen=True)
class MoveRecord:
    """
    Log entry of an accepted move (white or black).
    The ordered list of these is the move history of a game: only ever appended to.
    """

    piece: PieceType
    color: Color
    source: Square
    destination: Square

    @classmethod
    def from_move(cls, piece: Piece, move: Move) -> Self:
        return cls(piece.type, piece.color, move.source, move.destination)

    @property
    def move(self) -> Move:
        return Move(self.source, self.destination)


# --- LINE OF SIGHT ---
def squares_between(source: Square, destination: Square) -> list[Square]:
    """
    The squares strictly in between two squares on the same row or column.

    Needed for checking if the path of a rook is clear (the Board will check which of those are empty).
    """
    if source.row != destination.row and source.column != destination.column:
        raise ValueError(
            f"squares_between requires both squares to lie on the same row or column. \n from: {source}\n to:{destination}"
        )

    dr = _sign(destination.row - source.row)
    dc = _sign(destination.column - source.column)
    squares_found: list[Square] = []
    square = source.offset((dr, dc))
    while square != destination:
        squares_found.append(square)
        square = square.offset((dr, dc))
    return squares_found


def is_path_clear(
    board: Board,
    source: Square,
    destination: Square,
    vacated: Optional[Square] = None,
) -> bool:
    """
    Nothing blocks the straight line between source and destination (end points excluded).
    The `vacated` square counts as empty, even if a piece currently stands there (used for 'what if the king moved away').
    """
    return all(
        square == vacated or board.is_empty(square)
        for square in squares_between(source, destination)
    )


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


# --- MOVEMENT RULES ---
def is_legal_king_move(move: Move, board: Board) -> bool:
    """
    The king can move by a single square at the time, in any direction.

    NOTE: an occupied destination does not make the shape illegal.
    """
    return move.source.chebyshev_distance(move.destination) <= 1


def is_legal_rook_move(move: Move, board: Board) -> bool:
    """Rooks move either horizontally or vertically, and cannot jump over anything (friend or foe)"""
    same_row = move.source.row == move.destination.row
    same_column = move.source.column == move.destination.column
    if same_row == same_column:
        # diagonal/knight-like jump, or not moving at all
        return False
    return is_path_clear(board, move.source, move.destination)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
IsLegalFn = Callable[[Move, Board], bool]
MOVEMENT_RULES: dict[PieceType, IsLegalFn] = {
    PieceType.KING: is_legal_king_move,
    PieceType.ROOK: is_legal_rook_move,
}


def is_legal(board: Board, move: Move) -> bool:
    """
    Does the move match the movement pattern of the piece standing on the source square?
    ----

    * Not moving at all is never legal.
    * No piece on the source square: nothing to move.
    * Otherwise defer to the rule of that piece type (unknown piece types are never legal).

    Pure function: the board is not modified.
    """
    if move.is_null_move:
        return False

    piece = board.occupant_at(move.source)
    if piece is None:
        return False

    movement_rule = MOVEMENT_RULES.get(piece.type)
    if movement_rule is None:
        return False
    return movement_rule(move, board)
