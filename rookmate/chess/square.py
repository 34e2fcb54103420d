"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_lowercase

from rookmate.core.exceptions import InvalidNotationError, OutOfBoundsError

# Board is always square. Column letters limit the size to 26.
MIN_BOARD_SIZE = 4
MAX_BOARD_SIZE = 26

Vector = tuple[int, int]

# The 8 unit steps a king can make (row delta, column delta)
KING_DELTAS: list[Vector] = [
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
]


@dataclass(frozen=True)
class Square:
    """Grid coordinate. Row 0 is the TOP edge of the board (as printed), column 0 is the a-file."""

    row: int
    column: int

    @classmethod
    def from_notation(cls, token: str, board_size: int) -> Square:
        """
        File-rank notation: 'a1' is the bottom left corner, so it maps to (board_size - 1, 0).
        Ranks can have two digits on larger boards ('c12').
        """
        if not 2 <= len(token) <= 3:
            raise InvalidNotationError(
                f"Cannot interpret {token!r} as a square. Use a column letter followed by a row number, ex. 'a7'."
            )

        letter, digits = token[0], token[1:]
        if letter not in ascii_lowercase or not (digits.isascii() and digits.isdigit()) or digits[0] == "0":
            raise InvalidNotationError(
                f"Cannot interpret {token!r} as a square. Use a column letter followed by a row number, ex. 'a7'."
            )

        column = ascii_lowercase.index(letter)
        rank = int(digits)
        if column >= board_size or not 1 <= rank <= board_size:
            raise OutOfBoundsError(
                f"Square {token!r} is not on a {board_size}x{board_size} board."
            )
        return cls(row=board_size - rank, column=column)

    def to_notation(self, board_size: int) -> str:
        return f"{ascii_lowercase[self.column]}{board_size - self.row}"

    def is_within_bounds(self, board_size: int) -> bool:
        return (0 <= self.row < board_size) and (0 <= self.column < board_size)

    def offset(self, delta: Vector) -> Square:
        dr, dc = delta
        return Square(self.row + dr, self.column + dc)

    def neighbors(self) -> list[Square]:
        """The 8 surrounding squares (NOTE: not filtered on board bounds)"""
        return [self.offset(delta) for delta in KING_DELTAS]

    def chebyshev_distance(self, other: Square) -> int:
        """King's metric: number of king steps needed on an empty board"""
        return max(abs(self.row - other.row), abs(self.column - other.column))

    def manhattan_distance(self, other: Square) -> int:
        return abs(self.row - other.row) + abs(self.column - other.column)
