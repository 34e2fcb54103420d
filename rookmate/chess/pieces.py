"""Defines the types of pieces in the variant: white has a king and two rooks, black only a king."""

from dataclasses import dataclass
from enum import Enum, auto


class PieceType(Enum):
    KING = auto()
    ROOK = auto()


class Color(Enum):
    WHITE = auto()
    BLACK = auto()


# Names as they appear in the move log
PIECE_NAMES: dict[PieceType, str] = {
    PieceType.KING: "King",
    PieceType.ROOK: "Rook",
}

NAME_TO_PIECE: dict[str, PieceType] = {value: key for key, value in PIECE_NAMES.items()}

# NOTE: filled glyphs for white, hollow for black (reads better on a dark terminal)
PIECE_GLYPHS: dict[tuple[PieceType, Color], str] = {
    (PieceType.KING, Color.WHITE): "♚",
    (PieceType.ROOK, Color.WHITE): "♜",
    (PieceType.KING, Color.BLACK): "♔",
    (PieceType.ROOK, Color.BLACK): "♖",
}


@dataclass(frozen=True)
class Piece:
    """What can stand on a square. An empty square is simply absent from the board."""

    type: PieceType
    color: Color

    @property
    def name(self) -> str:
        return PIECE_NAMES[self.type]

    def glyph(self) -> str:
        return PIECE_GLYPHS[(self.type, self.color)]


WHITE_KING = Piece(PieceType.KING, Color.WHITE)
WHITE_ROOK = Piece(PieceType.ROOK, Color.WHITE)
BLACK_KING = Piece(PieceType.KING, Color.BLACK)

# Order in which pieces are dropped on a fresh board
STARTING_PIECES: list[Piece] = [WHITE_KING, WHITE_ROOK, WHITE_ROOK, BLACK_KING]
