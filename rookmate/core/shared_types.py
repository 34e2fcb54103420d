"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    WHITE_WINS = "white wins by checkmate"
    ABANDONED = "abandoned"


# --- NOTE the domain layer has its own Color / PieceType enums (rookmate/chess/pieces.py). These are the transport-safe string versions.
class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class PieceType(StrEnum):
    KING = "king"
    ROOK = "rook"
