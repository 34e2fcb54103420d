"""
Move log encoding.

Every accepted move is written as one line with 3 whitespace separated tokens:
<piece name> <from square> <to square>
ex) "Rook a1 a8"

The core only works on text streams: the caller decides which file (if any) they belong to.
"""

from typing import Iterable, TextIO

from rookmate.chess.moves import MoveRecord
from rookmate.chess.pieces import NAME_TO_PIECE, PIECE_NAMES, Color, PieceType
from rookmate.chess.square import Square
from rookmate.core.exceptions import InvalidMoveLogError, UserInputError


def format_record(record: MoveRecord, board_size: int) -> str:
    return " ".join(
        [
            PIECE_NAMES[record.piece],
            record.source.to_notation(board_size),
            record.destination.to_notation(board_size),
        ]
    )


def parse_record(line: str, board_size: int) -> MoveRecord:
    """
    Reverse operation of `format_record()`.

    NOTE: The line does not say who moved. Rooks are always white; for a king we can infer it from
    the order of the log (see `load_move_log()`), so here it defaults to white.
    """
    return _parse_record(line, board_size, Color.WHITE)


def _parse_record(line: str, board_size: int, king_color: Color) -> MoveRecord:
    tokens = line.split()
    if len(tokens) != 3:
        raise InvalidMoveLogError(
            f"Expected '<piece> <from> <to>' but got {line!r}."
        )

    piece_name, source, destination = tokens
    if piece_name not in NAME_TO_PIECE:
        raise InvalidMoveLogError(
            f"Unknown piece {piece_name!r}. Pick one from {','.join(NAME_TO_PIECE)}"
        )
    piece_type = NAME_TO_PIECE[piece_name]

    try:
        source_square = Square.from_notation(source, board_size)
        destination_square = Square.from_notation(destination, board_size)
    except UserInputError as err:
        raise InvalidMoveLogError(f"Cannot read move {line!r}: {err}") from err

    color = king_color if piece_type == PieceType.KING else Color.WHITE
    return MoveRecord(piece_type, color, source_square, destination_square)


def format_move_log(records: Iterable[MoveRecord], board_size: int) -> list[str]:
    return [format_record(record, board_size) for record in records]


def dump_move_log(
    records: Iterable[MoveRecord], board_size: int, stream: TextIO
) -> None:
    """Write one line per record"""
    for line in format_move_log(records, board_size):
        stream.write(f"{line}\n")


def load_move_log(stream: TextIO, board_size: int) -> list[MoveRecord]:
    """
    Read the records back (blank lines are skipped).

    White and black alternate: white moves first, so every 2nd record belongs to the black king.
    """
    records: list[MoveRecord] = []
    for line in stream:
        if not line.strip():
            continue
        king_color = Color.WHITE if len(records) % 2 == 0 else Color.BLACK
        records.append(_parse_record(line, board_size, king_color))
    return records


def format_replay(lines: Iterable[str]) -> list[str]:
    """Numbered listing for replaying a game: ' 1. Rook a1 -> a8'"""
    replay: list[str] = []
    for count, line in enumerate(lines, start=1):
        tokens = line.split()
        if len(tokens) != 3:
            raise InvalidMoveLogError(
                f"Expected '<piece> <from> <to>' but got {line!r}."
            )
        piece_name, source, destination = tokens
        if piece_name not in NAME_TO_PIECE:
            raise InvalidMoveLogError(
                f"Unknown piece {piece_name!r}. Pick one from {','.join(NAME_TO_PIECE)}"
            )
        replay.append(f"{count:2d}. {piece_name} {source} -> {destination}")
    return replay
