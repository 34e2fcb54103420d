"""Protocol repository (SQLAlchemy implementation in sql_repository.py, a dict works just as well for tests)"""

from typing import Protocol
from uuid import UUID

from rookmate.core.models import GameModel


class GameRepository(Protocol):
    """Persistence layer orchestration: archive of played games"""

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Get game by ID, if record exists."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store new game and return the stored data + newly created game ID."""
        ...

    def list_games(self) -> list[tuple[UUID, GameModel]]:
        """All stored games, oldest first."""
        ...
