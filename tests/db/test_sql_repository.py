"""Unit tests for rookmate/db/sql_repository.py"""

from uuid import uuid4

import pytest
from sqlalchemy.orm import Session

from rookmate.core.shared_types import Status
from rookmate.db.sql_repository import GameModel, SQLGameRepository


@pytest.fixture
def finished_game() -> GameModel:
    return GameModel(
        board_size=4,
        move_log=["Rook d1 d4"],
        status=Status.WHITE_WINS.value,
        stats={
            "white_king_moves": 0,
            "white_rook_moves": 1,
            "checks_given": 1,
            "black_king_moves": 0,
        },
    )


@pytest.fixture
def abandoned_game() -> GameModel:
    return GameModel(
        board_size=8,
        move_log=["Rook a1 a8", "King e8 f7", "King e1 e2", "King f7 g6"],
        status=Status.ABANDONED.value,
        stats={
            "white_king_moves": 1,
            "white_rook_moves": 1,
            "checks_given": 1,
            "black_king_moves": 2,
        },
    )


def test_create_game(db_session_repo: Session, finished_game: GameModel) -> None:
    """Conversion from a GameModel to DBReplay for a new entry to the database."""
    repo = SQLGameRepository(db_session_repo)
    record_in_db, _ = repo.create_game(finished_game)
    assert isinstance(record_in_db, GameModel)
    assert record_in_db == finished_game


def test_get_game_by_id(db_session_repo: Session, abandoned_game: GameModel) -> None:
    """Create a game, then fetch it from db. The move log comes back in the same order."""
    repo = SQLGameRepository(db_session_repo)
    expected_game, game_id = repo.create_game(abandoned_game)
    game_found = repo.get_game(game_id)
    assert isinstance(game_found, GameModel)
    assert game_found == expected_game
    assert game_found.move_log == abandoned_game.move_log


def test_get_unknown_game(db_session_repo: Session, finished_game: GameModel) -> None:
    """
    Should return None if ID does not match anything in database.

    NOTE with an empty database, any id is a valid test case.
    """
    repo = SQLGameRepository(db_session_repo)
    assert repo.get_game(uuid4()) is None

    # Now do it with creating a game, but retrieving from the wrong ID
    repo.create_game(finished_game)
    assert repo.get_game(uuid4()) is None


def test_list_games(
    db_session_repo: Session, finished_game: GameModel, abandoned_game: GameModel
) -> None:
    repo = SQLGameRepository(db_session_repo)
    assert repo.list_games() == []

    _, first_id = repo.create_game(finished_game)
    _, second_id = repo.create_game(abandoned_game)

    stored = dict(repo.list_games())
    assert stored == {first_id: finished_game, second_id: abandoned_game}


def test_archive_is_append_only(db_session_repo: Session, finished_game: GameModel) -> None:
    """Archived games are never changed or removed, only added"""
    repo = SQLGameRepository(db_session_repo)
    _, game_id = repo.create_game(finished_game)
    assert not hasattr(repo, "update_game")
    assert not hasattr(repo, "delete_game")
    assert repo.get_game(game_id) == finished_game
