"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play a turn:
the human's white move, followed (if the game is not over) by the black king's reply.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional, Self

from rookmate.chess.attacks import is_check, is_checkmate
from rookmate.chess.board import DEFAULT_PLACEMENT_ATTEMPTS, Board
from rookmate.chess.move_log import format_move_log
from rookmate.chess.moves import Move, MoveRecord, is_legal
from rookmate.chess.opponent import play_black_king_move
from rookmate.chess.pieces import Color, Piece, PieceType
from rookmate.chess.stats import GameStats
from rookmate.core.exceptions import (
    EmptySquareError,
    GameStateError,
    IllegalMoveError,
    OccupiedSquareError,
    OutOfBoundsError,
    WrongOwnerError,
)
from rookmate.core.models import GameModel
from rookmate.core.shared_types import Status

logger = logging.getLogger(__name__)


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    moves: list[MoveRecord] = field(default_factory=list)
    stats: GameStats = field(default_factory=GameStats)
    status: Status = Status.IN_PROGRESS

    @classmethod
    def new_game(
        cls,
        board_size: int,
        rng: Optional[random.Random] = None,
        max_placement_attempts: int = DEFAULT_PLACEMENT_ATTEMPTS,
    ) -> Self:
        """Start a game on a freshly (randomly) set up board"""
        board = Board.random_setup(board_size, rng, max_placement_attempts)
        logger.info("New game on a %dx%d board", board_size, board_size)
        return cls(board)

    @classmethod
    def from_board(cls, board: Board) -> Self:
        """Start playing from a given position (ex. a hand-built board)"""
        return cls(board)

    @property
    def board_size(self) -> int:
        return self.board.size

    @property
    def history(self) -> tuple[MoveRecord, ...]:
        """Read-only view on the moves played so far"""
        return tuple(self.moves)

    @property
    def is_over(self) -> bool:
        return self.status != Status.IN_PROGRESS

    @property
    def winner(self) -> Optional[str]:
        """Only black can be cornered, so a finished game is always won by white."""
        if self.status != Status.WHITE_WINS:
            return None
        return Color.WHITE.name.lower()

    def to_model(self) -> GameModel:
        """Encode into a format the Service layer uses"""
        return GameModel(
            board_size=self.board_size,
            move_log=format_move_log(self.moves, self.board_size),
            status=self.status.value,
            stats=self.stats.to_dict(),
        )

    def make_move(self, move: Move) -> Status:
        """
        The human (white) attempts a move
        -----

        1. make sure the game is still in progress
        2. validate the move (any rejection leaves the board and the move history untouched)
        3. update the board, the history of moves and the stats
        4. checkmate? --> game over
        5. otherwise black replies, and we check again
        """
        # make sure the game is (still) in progress
        if self.is_over:
            raise GameStateError(f"Game is not in progress. status: {self.status}")

        moving_piece = self._validate_white_move(move)

        self._update_board(move)
        self._update_moves(MoveRecord.from_move(moving_piece, move))
        self._update_stats(moving_piece)
        logger.info("White %s moves %s -> %s", moving_piece.name, move.source, move.destination)

        if self._update_game_status():
            return self.status

        play_black_king_move(self.board, self.moves, self.stats)
        self._update_game_status()
        return self.status

    def abandon(self) -> None:
        """Stop a game before it was decided (ex. player restarts with a different board size)"""
        if not self.is_over:
            self._change_status(Status.ABANDONED)

    # -- PRIVATE HELPERS ---
    def _validate_white_move(self, move: Move) -> Piece:
        """Return the piece that is about to move, or raise the reason the move gets rejected."""
        for square in (move.source, move.destination):
            if not square.is_within_bounds(self.board_size):
                raise OutOfBoundsError(
                    f"{square} lies outside of the {self.board_size}x{self.board_size} board."
                )

        moving_piece = self.board.occupant_at(move.source)
        if moving_piece is None:
            raise EmptySquareError(
                f"No piece on {move.source.to_notation(self.board_size)}."
            )

        if moving_piece.color != Color.WHITE:
            raise WrongOwnerError(
                f"No white piece on {move.source.to_notation(self.board_size)}."
            )

        if not is_legal(self.board, move):
            raise IllegalMoveError(
                f"A {moving_piece.name} cannot move from {move.source.to_notation(self.board_size)} to {move.destination.to_notation(self.board_size)}."
            )

        # Nothing ever gets captured: a destination holding any piece is simply off limits.
        if not self.board.is_empty(move.destination):
            raise OccupiedSquareError(
                f"{move.destination.to_notation(self.board_size)} is already occupied."
            )
        return moving_piece

    def _update_board(self, move: Move) -> None:
        self.board.move_piece(move)

    def _update_moves(self, record: MoveRecord) -> None:
        self.moves.append(record)

    def _update_stats(self, moving_piece: Piece) -> None:
        if moving_piece.type == PieceType.KING:
            self.stats.white_king_moves += 1
        elif moving_piece.type == PieceType.ROOK:
            self.stats.white_rook_moves += 1

        if is_check(self.board):
            self.stats.checks_given += 1
            logger.info("Check on the black king")

    def _update_game_status(self) -> bool:
        """Performs checks to see if game has ended and changes status accordingly. Returns True when it is over."""
        if is_checkmate(self.board):
            logger.info("Checkmate after %d moves. White wins.", len(self.moves))
            self._change_status(Status.WHITE_WINS)
            return True
        return False

    def _change_status(self, new_status: Status) -> None:
        self.status = new_status
