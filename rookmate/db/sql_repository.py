"""Implementation of (Game)Repository using SQLAlchemy"""

from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.orm import Session

from rookmate.core.models import GameModel
from rookmate.db.schema import DBReplay


class SQLGameRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Get game by ID, if record exists."""
        game_db = self._fetch_game(game_id)
        if game_db:
            return self._to_model(game_db)
        return None

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store new game and return the stored data + newly created game ID."""

        new_id = uuid4()
        game_db = DBReplay(
            id=new_id,
            board_size=game.board_size,
            move_log=list(game.move_log),
            status=game.status,
            stats=dict(game.stats),
        )
        self.db.add(game_db)
        self.db.commit()
        self.db.refresh(game_db)
        return self._to_model(game_db), new_id

    def list_games(self) -> list[tuple[UUID, GameModel]]:
        """All stored games, oldest first."""
        query = select(DBReplay).order_by(DBReplay.created_at)
        return [(game_db.id, self._to_model(game_db)) for game_db in self.db.scalars(query)]

    def _fetch_game(self, game_id: UUID) -> DBReplay | None:
        query = select(DBReplay).where(DBReplay.id == game_id)
        return self.db.scalar(query)

    def _to_model(self, game_db: DBReplay) -> GameModel:
        """Convert SQLAlchemy model to data transfer model."""
        return GameModel(
            board_size=game_db.board_size,
            move_log=list(game_db.move_log),
            status=game_db.status,
            stats=dict(game_db.stats),
        )
