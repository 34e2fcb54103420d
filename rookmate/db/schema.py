"""Database tables / schema"""

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import JSON
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBReplay(Base):
    """A played game: enough to replay it move by move (the board itself is never stored)"""

    __tablename__ = "replays"
    id: Mapped[UUID] = mapped_column(primary_key=True)
    board_size: Mapped[int]
    move_log: Mapped[list[str]] = mapped_column(JSON, default=list)
    status: Mapped[str]
    stats: Mapped[dict[str, int]] = mapped_column(JSON, default=dict)
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
