"""Tally of what happened during a game (printed when the game is over)"""

from dataclasses import asdict, dataclass


@dataclass
class GameStats:
    white_king_moves: int = 0
    white_rook_moves: int = 0
    checks_given: int = 0
    black_king_moves: int = 0

    @property
    def total_moves(self) -> int:
        return self.white_king_moves + self.white_rook_moves + self.black_king_moves

    def to_dict(self) -> dict[str, int]:
        return asdict(self)
