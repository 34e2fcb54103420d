"""Orchestration of communication from the driver (CLI) to business logic and persistence layers (and the reverse direction)."""

import logging
import random
from typing import Optional, TextIO
from uuid import UUID, uuid4

from rookmate.api.models import (
    CreateGameRequest,
    EndGameRequest,
    GameResponse,
    GetGameRequest,
    MoveRequest,
    PieceResponse,
    ReplayRequest,
    ReplayResponse,
    ReplaySummary,
    RestartGameRequest,
)
from rookmate.chess.game import Game
from rookmate.chess.move_log import dump_move_log, format_replay
from rookmate.chess.moves import Move
from rookmate.chess.render import render_board, render_stats
from rookmate.core.config import Settings, get_settings
from rookmate.core.exceptions import (
    GameStateError,
    InternalConsistencyError,
    RepositoryError,
)
from rookmate.core.models import GameModel
from rookmate.core.shared_types import Color, PieceType, Status
from rookmate.db.repository import GameRepository

logger = logging.getLogger(__name__)


class ChessService:
    """
    Orchestration of layers.

    Active games live in memory (one Board per game, owned by its Game). Only played games end up in the repository,
    as an archive to replay them.
    """

    def __init__(
        self,
        repository: GameRepository,
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.repo = repository
        self.settings = settings or get_settings()
        self.rng = rng or random.Random(self.settings.random_seed)
        self._games: dict[UUID, Game] = {}
        self._replay_ids: dict[UUID, UUID] = {}

    # -- DRIVER LOGIC ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Set up a random board of the requested (or default) size."""
        game_id = uuid4()
        self._games[game_id] = self._new_game(request.board_size)
        logger.info("Created game %s", game_id)
        return self._create_game_response(game_id)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """Retrieve current game state (board snapshot, status, moves)."""
        self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id)

    def make_move(self, request: MoveRequest) -> GameResponse:
        """
        White's move attempt. If accepted, black has replied by the time this returns.

        User errors propagate as they are (nothing changed, driver can ask again).
        Internal consistency errors are fatal for the game: it gets dropped.
        """
        game = self._fetch_game(request.game_id)
        move = Move.from_notation(request.from_square, request.to_square, game.board_size)

        try:
            game.make_move(move)
        except InternalConsistencyError:
            logger.exception("Game %s is corrupt and gets dropped", request.game_id)
            del self._games[request.game_id]
            raise

        if game.is_over:
            self._archive(request.game_id, game)
        return self._create_game_response(request.game_id)

    def write_move_log(self, request: GetGameRequest, stream: TextIO) -> None:
        """Dump the moves of an active game to a text stream supplied by the driver (one line per move)."""
        game = self._fetch_game(request.game_id)
        dump_move_log(game.moves, game.board_size, stream)

    def restart_game(self, request: RestartGameRequest) -> GameResponse:
        """Throw away the current board and start over (possibly with another size) under the same game ID."""
        game = self._fetch_game(request.game_id)
        self._close(request.game_id, game)

        board_size = request.board_size or game.board_size
        self._games[request.game_id] = self._new_game(board_size)
        self._replay_ids.pop(request.game_id, None)
        logger.info("Restarted game %s on a %dx%d board", request.game_id, board_size, board_size)
        return self._create_game_response(request.game_id)

    def end_game(self, request: EndGameRequest) -> Optional[UUID]:
        """Stop playing. Returns the ID the game was archived under (None if no move was played)."""
        game = self._fetch_game(request.game_id)
        self._close(request.game_id, game)
        del self._games[request.game_id]
        return self._replay_ids.pop(request.game_id, None)

    def replay(self, request: ReplayRequest) -> ReplayResponse:
        """Retrieve an archived game, move by move."""
        model = self.repo.get_game(request.replay_id)
        if model is None:
            raise RepositoryError(f"Replay with {request.replay_id=} not found.")
        return ReplayResponse(
            replay_id=request.replay_id,
            board_size=model.board_size,
            status=Status(model.status),
            move_history=model.move_log,
            replay=format_replay(model.move_log),
            stats=model.stats,
        )

    def list_replays(self) -> list[ReplaySummary]:
        return [
            ReplaySummary(
                replay_id=replay_id,
                board_size=model.board_size,
                status=Status(model.status),
                num_moves=len(model.move_log),
            )
            for replay_id, model in self.repo.list_games()
        ]

    # -- Internal helpers --
    def _new_game(self, board_size: Optional[int]) -> Game:
        return Game.new_game(
            board_size=board_size or self.settings.default_board_size,
            rng=self.rng,
            max_placement_attempts=self.settings.max_placement_attempts,
        )

    def _fetch_game(self, game_id: UUID) -> Game:
        """Attempt to find the game among the active games and raise error if it fails."""
        game = self._games.get(game_id)
        if game is None:
            raise GameStateError(f"Game with {game_id=} not found.")
        return game

    def _close(self, game_id: UUID, game: Game) -> None:
        """Abandon an undecided game. Anything with moves on the record goes to the archive."""
        game.abandon()
        if game.moves:
            self._archive(game_id, game)

    def _archive(self, game_id: UUID, game: Game) -> None:
        """Store the game in the repository (only once per game)."""
        if game_id in self._replay_ids:
            return
        _, replay_id = self.repo.create_game(game.to_model())
        self._replay_ids[game_id] = replay_id
        logger.info("Game %s archived as replay %s", game_id, replay_id)

    def _create_game_response(self, game_id: UUID) -> GameResponse:
        """Convert the state of the Game to a GameResponse (for game with given ID.)"""
        game = self._games[game_id]
        model: GameModel = game.to_model()
        pieces = {
            square.to_notation(game.board_size): PieceResponse(
                piece=PieceType[piece.type.name], color=Color[piece.color.name]
            )
            for square, piece in game.board.snapshot().items()
        }
        return GameResponse(
            game_id=game_id,
            board_size=model.board_size,
            status=Status(model.status),
            winner=game.winner,
            pieces=pieces,
            board=render_board(game.board),
            move_history=model.move_log,
            stats=model.stats,
            replay_id=self._replay_ids.get(game_id),
            summary=(
                render_stats(game.stats, game.moves, game.board_size)
                if game.is_over
                else None
            ),
        )
