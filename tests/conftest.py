"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable, Generator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from rookmate.chess.board import Board
from rookmate.chess.pieces import Piece
from rookmate.chess.square import Square
from rookmate.db.schema import Base

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)

# (row, column) -> piece
Placement = dict[tuple[int, int], Piece]


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def make_board() -> Callable[[int, Placement], Board]:
    """Call the inner function with the board size and the pieces to put on it"""

    def _create_board(size: int, placement: Placement) -> Board:
        board = Board(size)
        for (row, column), piece in placement.items():
            board.place(Square(row, column), piece)
        return board

    return _create_board
