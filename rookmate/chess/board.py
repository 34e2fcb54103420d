"""The Game board owns the placement of pieces on the grid and guards the 'one piece per square' rule"""

import logging
import random
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Self

from rookmate.chess.moves import Move
from rookmate.chess.pieces import STARTING_PIECES, Color, Piece, PieceType
from rookmate.chess.square import MAX_BOARD_SIZE, MIN_BOARD_SIZE, Square
from rookmate.core.exceptions import (
    InvalidBoardSizeError,
    OccupiedSquareError,
    OutOfBoundsError,
    PieceNotFoundError,
    PlacementError,
)

logger = logging.getLogger(__name__)

DEFAULT_PLACEMENT_ATTEMPTS = 10_000


@dataclass
class Board:
    size: int
    position: dict[Square, Piece] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not MIN_BOARD_SIZE <= self.size <= MAX_BOARD_SIZE:
            raise InvalidBoardSizeError(
                f"Board size must lie within {MIN_BOARD_SIZE}-{MAX_BOARD_SIZE}. Got {self.size}."
            )
        # pieces handed to the constructor go through the same checks as place()
        pieces, self.position = self.position, {}
        for square, piece in pieces.items():
            self.place(square, piece)

    @classmethod
    def random_setup(
        cls,
        size: int,
        rng: Optional[random.Random] = None,
        max_attempts: int = DEFAULT_PLACEMENT_ATTEMPTS,
    ) -> Self:
        """
        Fresh board for a new game
        ----

        Drop the white king, both white rooks and the black king (in that order) on random squares.
        Rejection sampling: keep drawing squares until one is empty and (for kings) not next to the other king.

        NOTE: the adjacency rule only applies here. Later moves are not restricted by it.
        """
        rng = rng or random.Random()
        board = cls(size)
        for piece in STARTING_PIECES:
            board._place_randomly(piece, rng, max_attempts)
        logger.debug("Random setup on %dx%d board: %s", size, size, board.position)
        return board

    def _place_randomly(
        self, piece: Piece, rng: random.Random, max_attempts: int
    ) -> Square:
        for attempt in range(1, max_attempts + 1):
            square = Square(rng.randrange(self.size), rng.randrange(self.size))
            if not self.is_empty(square):
                continue
            if piece.type == PieceType.KING and self.is_king_adjacent(square):
                continue
            self.place(square, piece)
            logger.debug("Placed %s on %s after %d attempt(s)", piece, square, attempt)
            return square

        raise PlacementError(
            f"Could not place {piece} on the {self.size}x{self.size} board within {max_attempts} attempts."
        )

    # -- QUERIES --
    def occupant_at(self, square: Square) -> Optional[Piece]:
        """The piece standing on the square, None for an empty square"""
        self._assert_within_bounds(square)
        return self.position.get(square)

    def is_empty(self, square: Square) -> bool:
        return self.occupant_at(square) is None

    def find(self, color: Color, piece_type: PieceType) -> Square:
        """
        Square of the first piece found with the given color and type.
        Only meant for unique pieces (the kings). A missing king means the board is corrupt.
        """
        for square, piece in self.position.items():
            if piece.color == color and piece.type == piece_type:
                return square
        raise PieceNotFoundError(
            f"No {color.name.lower()} {piece_type.name.lower()} on the board."
        )

    def locate_color(self, color: Color) -> list[tuple[Square, Piece]]:
        return [
            (square, piece)
            for square, piece in self.position.items()
            if piece.color == color
        ]

    def is_king_adjacent(self, square: Square) -> bool:
        """Does any of the 8 surrounding squares hold a king (of either color)?"""
        for neighbor in square.neighbors():
            piece = self.position.get(neighbor)
            if piece is not None and piece.type == PieceType.KING:
                return True
        return False

    def snapshot(self) -> Mapping[Square, Piece]:
        """Read-only view for renderers (empty squares are absent)"""
        return MappingProxyType(dict(self.position))

    # -- MUTATIONS --
    def place(self, square: Square, piece: Piece) -> None:
        self._assert_within_bounds(square)
        if square in self.position:
            raise OccupiedSquareError(
                f"Cannot place {piece.name} on {square}. Square already holds a {self.position[square].name}."
            )
        self.position[square] = piece

    def remove(self, square: Square) -> None:
        """Clear a square. Nothing happens if it was empty already."""
        self._assert_within_bounds(square)
        self.position.pop(square, None)

    def move_piece(self, move: Move) -> None:
        """
        Update the position on the board.
        NOTE: legality (and occupancy of the destination) is the caller's responsibility.
        """
        self._assert_within_bounds(move.destination)
        moving_piece = self.occupant_at(move.source)
        if moving_piece is None:
            raise PieceNotFoundError(f"No piece on {move.source} to move.")
        del self.position[move.source]
        self.position[move.destination] = moving_piece

    def _assert_within_bounds(self, square: Square) -> None:
        if not square.is_within_bounds(self.size):
            raise OutOfBoundsError(
                f"{square} lies outside of the {self.size}x{self.size} board."
            )
