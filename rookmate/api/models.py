"""Requests and Response models"""

import re
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from rookmate.chess.square import MAX_BOARD_SIZE, MIN_BOARD_SIZE
from rookmate.core.exceptions import InvalidRequestError
from rookmate.core.shared_types import Color, PieceType, Status

SquareName = str

# column letter + rank number without leading zero, ex. 'a7', 'c12'
SQUARE_PATTERN = re.compile(r"^[a-z][1-9][0-9]?$")


def _validate_board_size(value: Optional[int]) -> Optional[int]:
    if value is None:
        return value
    if not MIN_BOARD_SIZE <= value <= MAX_BOARD_SIZE:
        raise InvalidRequestError(
            f"Board size must lie within {MIN_BOARD_SIZE}-{MAX_BOARD_SIZE}. Got {value}."
        )
    return value


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    # None: use the configured default size
    board_size: Optional[int] = None

    @field_validator("board_size")
    @classmethod
    def validate_board_size(cls, value: Optional[int]) -> Optional[int]:
        return _validate_board_size(value)


class RestartGameRequest(BaseModel):
    game_id: UUID
    # None: keep the size of the current game
    board_size: Optional[int] = None

    @field_validator("board_size")
    @classmethod
    def validate_board_size(cls, value: Optional[int]) -> Optional[int]:
        return _validate_board_size(value)


class MoveRequest(BaseModel):
    game_id: UUID
    from_square: SquareName
    to_square: SquareName

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        value = value.strip()
        if not SQUARE_PATTERN.match(value):
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a valid square name."
            )
        return value


class GetGameRequest(BaseModel):
    game_id: UUID


class EndGameRequest(BaseModel):
    game_id: UUID


class ReplayRequest(BaseModel):
    replay_id: UUID


# --- RESPONSE MODELS ---
class PieceResponse(BaseModel):
    piece: PieceType
    color: Color


class GameResponse(BaseModel):
    game_id: UUID
    board_size: int
    status: Status
    winner: Optional[str]
    pieces: dict[SquareName, PieceResponse]
    board: str
    move_history: list[str]
    stats: dict[str, int]
    # set once a finished game has been stored in the replay archive
    replay_id: Optional[UUID] = None
    # end-of-game summary (stats + moves played), only once the game is over
    summary: Optional[str] = None


class ReplayResponse(BaseModel):
    replay_id: UUID
    board_size: int
    status: Status
    move_history: list[str]
    replay: list[str]
    stats: dict[str, int]


class ReplaySummary(BaseModel):
    replay_id: UUID
    board_size: int
    status: Status
    num_moves: int
