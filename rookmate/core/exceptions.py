"""
Custom exceptions shared by all layers.

Three families:
* UserInputError: the human (or the driver) supplied something we reject. Board is untouched, just ask again.
* InternalConsistencyError: an invariant was already broken before this call. Never recover from these.
* Everything else (game state, persistence, move log): raised where the offending request is handled.

NOTE: None of these subclass ValueError, so pydantic validators can raise them without being wrapped into a ValidationError.
"""


class GameError(Exception):
    """Top level exception of the project. Service / driver can catch this one."""


# --- USER INPUT ---
class UserInputError(GameError):
    """Recoverable: the request gets rejected with a reason and the board is left unmodified."""


class InvalidRequestError(UserInputError):
    """Request model failed validation."""


class InvalidNotationError(UserInputError):
    """Cannot interpret a token like 'a7' as a square."""


class InvalidBoardSizeError(UserInputError):
    """Board dimensions outside of the supported range."""


class OutOfBoundsError(UserInputError):
    """Square lies outside of the board. We reject, never clamp."""


class EmptySquareError(UserInputError):
    """There is no piece to move on the source square."""


class WrongOwnerError(UserInputError):
    """The piece on the source square does not belong to the player making the move."""


class IllegalMoveError(UserInputError):
    """The move does not match the movement pattern of the piece."""


class OccupiedSquareError(UserInputError):
    """Destination (or placement) square already holds a piece."""


# --- GAME STATE ---
class GameStateError(GameError):
    """Request does not fit the current state of the game (ex. moving after checkmate, unknown session)."""


# --- INTERNAL CONSISTENCY ---
class InternalConsistencyError(GameError):
    """Fatal: board state can no longer be trusted."""


class PieceNotFoundError(InternalConsistencyError):
    """A piece that must be on the board (one of the kings) is missing."""


class NoSafeMoveError(InternalConsistencyError):
    """The black king has no safe square although it was not checkmated."""


class PlacementError(InternalConsistencyError):
    """Random initial placement did not find a valid square within the allowed attempts."""


# --- PERSISTENCE / MOVE LOG ---
class RepositoryError(GameError):
    """Record not found / could not be stored."""


class InvalidMoveLogError(GameError):
    """A line of the move log does not consist of <piece> <from> <to>."""
