"""Database engine for the replay archive"""

from sqlalchemy import Engine, create_engine

from rookmate.core.config import get_settings
from rookmate.db.schema import Base


def create_db_engine(database_url: str | None = None) -> Engine:
    """Engine for the configured database. Tables get created if they do not exist yet."""
    settings = get_settings()
    engine = create_engine(
        database_url or settings.database_url, echo=settings.database_echo
    )
    Base.metadata.create_all(bind=engine)
    return engine
