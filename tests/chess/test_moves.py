"""Unit tests for /rookmate/chess/moves.py"""

from typing import Callable
from unittest.mock import Mock, patch

import pytest

from rookmate.chess.board import Board
from rookmate.chess.moves import (
    Move,
    MoveRecord,
    is_legal,
    is_path_clear,
    squares_between,
)
from rookmate.chess.pieces import (
    BLACK_KING,
    WHITE_KING,
    WHITE_ROOK,
    Color,
    PieceType,
)
from rookmate.chess.square import KING_DELTAS, Square

MakeBoard = Callable[..., Board]


# -- MOVE CREATION, NOTATION ---
@pytest.mark.parametrize(
    "source, destination, expected",
    [
        ("a1", "a8", Move(Square(7, 0), Square(0, 0))),
        ("e1", "e2", Move(Square(7, 4), Square(6, 4))),
        ("h8", "a8", Move(Square(0, 7), Square(0, 0))),
    ],
)
def test_creating_move_from_notation(source: str, destination: str, expected: Move) -> None:
    assert Move.from_notation(source, destination, 8) == expected
    assert expected.to_notation(8) == (source, destination)


def test_move_record_from_move() -> None:
    move = Move(Square(7, 0), Square(0, 0))
    record = MoveRecord.from_move(WHITE_ROOK, move)
    assert record == MoveRecord(PieceType.ROOK, Color.WHITE, Square(7, 0), Square(0, 0))
    assert record.move == move


# --- LINE OF SIGHT ---
@pytest.mark.parametrize(
    "source, destination, expected",
    [
        (Square(0, 0), Square(0, 3), [Square(0, 1), Square(0, 2)]),
        (Square(0, 3), Square(0, 0), [Square(0, 2), Square(0, 1)]),
        (Square(1, 2), Square(4, 2), [Square(2, 2), Square(3, 2)]),
        (Square(4, 2), Square(3, 2), []),
    ],
)
def test_squares_between(source: Square, destination: Square, expected: list[Square]) -> None:
    """End points are never included"""
    assert squares_between(source, destination) == expected


def test_squares_between_not_on_a_line() -> None:
    with pytest.raises(ValueError):
        squares_between(Square(0, 0), Square(2, 3))


def test_path_clear_with_vacated_square(make_board: MakeBoard) -> None:
    """A vacated square no longer blocks, even though the board still shows a piece there"""
    board = make_board(8, {(0, 0): WHITE_ROOK, (0, 3): BLACK_KING})
    assert not is_path_clear(board, Square(0, 0), Square(0, 5))
    assert is_path_clear(board, Square(0, 0), Square(0, 5), vacated=Square(0, 3))
    # board did not change
    assert board.occupant_at(Square(0, 3)) == BLACK_KING


# --- KING ---
@pytest.mark.parametrize("delta", KING_DELTAS)
def test_king_moves_to_neighbors(make_board: MakeBoard, delta: tuple[int, int]) -> None:
    """King on (4,4): all 8 neighbors are legal"""
    board = make_board(8, {(4, 4): WHITE_KING})
    source = Square(4, 4)
    assert is_legal(board, Move(source, source.offset(delta)))


@pytest.mark.parametrize(
    "destination", [Square(4, 4), Square(4, 6), Square(2, 4), Square(6, 6), Square(0, 0)]
)
def test_king_cannot_move_further(make_board: MakeBoard, destination: Square) -> None:
    board = make_board(8, {(4, 4): WHITE_KING})
    assert not is_legal(board, Move(Square(4, 4), destination))


def test_king_shape_ignores_occupied_destination(make_board: MakeBoard) -> None:
    """Occupancy of the destination is checked by the caller, not by the shape rule"""
    board = make_board(8, {(4, 4): WHITE_KING, (4, 5): WHITE_ROOK, (3, 3): BLACK_KING})
    assert is_legal(board, Move(Square(4, 4), Square(4, 5)))
    assert is_legal(board, Move(Square(4, 4), Square(3, 3)))


def test_black_king_follows_the_same_shape(make_board: MakeBoard) -> None:
    """Owner is not checked here either"""
    board = make_board(8, {(0, 4): BLACK_KING})
    assert is_legal(board, Move(Square(0, 4), Square(1, 5)))
    assert not is_legal(board, Move(Square(0, 4), Square(2, 4)))


# --- ROOK ---
@pytest.mark.parametrize(
    "destination, expected",
    [
        (Square(0, 5), False),
        (Square(0, 7), False),
        (Square(0, 2), True),
        (Square(0, 1), True),
        (Square(7, 0), True),
        (Square(1, 1), False),
        (Square(3, 4), False),
    ],
)
def test_rook_blocked_by_any_piece(
    make_board: MakeBoard, destination: Square, expected: bool
) -> None:
    """Rook on (0,0), blocker on (0,3): cannot slide past it (or through it)"""
    board = make_board(8, {(0, 0): WHITE_ROOK, (0, 3): WHITE_KING})
    assert is_legal(board, Move(Square(0, 0), destination)) == expected


@pytest.mark.parametrize("blocker", [WHITE_KING, WHITE_ROOK, BLACK_KING])
def test_rook_blocker_owner_does_not_matter(make_board: MakeBoard, blocker) -> None:
    board = make_board(8, {(0, 0): WHITE_ROOK, (3, 0): blocker})
    assert not is_legal(board, Move(Square(0, 0), Square(5, 0)))
    assert is_legal(board, Move(Square(0, 0), Square(2, 0)))


def test_rook_shape_ignores_occupied_destination(make_board: MakeBoard) -> None:
    """The destination itself is not 'in between'"""
    board = make_board(8, {(0, 0): WHITE_ROOK, (0, 3): BLACK_KING})
    assert is_legal(board, Move(Square(0, 0), Square(0, 3)))


# --- GENERAL ---
def test_no_piece_on_source(make_board: MakeBoard) -> None:
    board = make_board(8, {(0, 0): WHITE_ROOK})
    assert not is_legal(board, Move(Square(1, 1), Square(1, 2)))


@pytest.mark.parametrize("piece", [WHITE_KING, WHITE_ROOK])
def test_not_moving_is_illegal(make_board: MakeBoard, piece) -> None:
    board = make_board(8, {(4, 4): piece})
    assert not is_legal(board, Move(Square(4, 4), Square(4, 4)))


def test_is_legal_uses_movement_rules(make_board: MakeBoard) -> None:
    """Strategy pattern: the rule of the moving piece type gets called with the move and the board"""
    board = make_board(8, {(0, 0): WHITE_ROOK})
    move = Move(Square(0, 0), Square(5, 5))
    mock_rule = Mock(return_value=True)
    with patch.dict("rookmate.chess.moves.MOVEMENT_RULES", {PieceType.ROOK: mock_rule}):
        assert is_legal(board, move)
    mock_rule.assert_called_once_with(move, board)


def test_unknown_piece_type_is_never_legal(make_board: MakeBoard) -> None:
    """Without a movement rule for the piece, nothing is legal"""
    board = make_board(8, {(4, 4): WHITE_KING})
    with patch.dict("rookmate.chess.moves.MOVEMENT_RULES", {}, clear=True):
        assert not is_legal(board, Move(Square(4, 4), Square(4, 5)))


def test_is_legal_does_not_modify_board(make_board: MakeBoard) -> None:
    board = make_board(8, {(0, 0): WHITE_ROOK, (4, 4): WHITE_KING})
    before = dict(board.position)
    is_legal(board, Move(Square(0, 0), Square(0, 7)))
    is_legal(board, Move(Square(4, 4), Square(5, 5)))
    assert board.position == before
