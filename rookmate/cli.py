"""
Console driver: menu, reading moves from the keyboard and writing the replay file.

All game logic lives behind ChessService; this module only talks to the player.
"""

import logging
from pathlib import Path
from typing import Optional
from uuid import UUID

import click
from sqlalchemy.orm import Session

from rookmate.api.models import (
    CreateGameRequest,
    EndGameRequest,
    GameResponse,
    GetGameRequest,
    MoveRequest,
    ReplayRequest,
)
from rookmate.chess.move_log import format_move_log, format_replay, load_move_log
from rookmate.chess.square import MAX_BOARD_SIZE, MIN_BOARD_SIZE
from rookmate.core.config import get_settings
from rookmate.core.exceptions import GameError, UserInputError
from rookmate.core.logger import LOG_LEVELS, configure_logging
from rookmate.core.shared_types import Status
from rookmate.db.database import create_db_engine
from rookmate.db.sql_repository import SQLGameRepository
from rookmate.services.chess_service import ChessService

logger = logging.getLogger(__name__)

MENU = """
Menu:
1. Start a game
2. Change the board size ({min}-{max}) and start a new game
3. Replay a game
4. Exit"""

QUIT_COMMANDS = {"q", "quit", "exit"}


@click.group()
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False), default=None, help="Overrides ROOKMATE_LOG_LEVEL")
def main(log_level: Optional[str]) -> None:
    """King and two rooks against a lone king, on a board of any size from 4x4 to 26x26."""
    configure_logging(log_level or get_settings().log_level)


@main.command()
@click.option("--size", type=click.IntRange(MIN_BOARD_SIZE, MAX_BOARD_SIZE), default=None, help="Board size")
@click.option("--database-url", type=str, default=None, help="Where played games are archived")
@click.option("--replay-file", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Move log of the current game")
def play(size: Optional[int], database_url: Optional[str], replay_file: Optional[Path]) -> None:
    """Play white against the computer."""
    settings = get_settings()
    board_size = size or settings.default_board_size
    replay_path = replay_file or Path(settings.replay_file)

    engine = create_db_engine(database_url)
    with Session(engine) as db:
        service = ChessService(SQLGameRepository(db), settings=settings)
        while True:
            click.echo(MENU.format(min=MIN_BOARD_SIZE, max=MAX_BOARD_SIZE))
            choice = click.prompt("Choose an option", type=str).strip()
            if choice == "1":
                play_game(service, board_size, replay_path)
            elif choice == "2":
                board_size = ask_board_size(board_size)
                play_game(service, board_size, replay_path)
            elif choice == "3":
                replay_archived_game(service)
            elif choice == "4":
                break
            else:
                click.echo("Invalid choice")


@main.command()
@click.argument("move_log", type=click.File("r"))
@click.option("--size", type=click.IntRange(MIN_BOARD_SIZE, MAX_BOARD_SIZE), default=None, help="Also check every square against a board of this size")
def replay(move_log, size: Optional[int]) -> None:
    """
    Print the moves stored in a move log file.

    The file does not say which board it was played on, so squares are only checked when --size is given.
    """
    try:
        if size is None:
            lines = [line for line in move_log if line.strip()]
        else:
            lines = format_move_log(load_move_log(move_log, size), size)
        replay_lines = format_replay(lines)
    except GameError as err:
        raise click.ClickException(str(err)) from err
    for line in replay_lines:
        click.echo(line)


def ask_board_size(current: int) -> int:
    new_size = click.prompt(
        f"Enter the new board size ({MIN_BOARD_SIZE}-{MAX_BOARD_SIZE})", type=int
    )
    if not MIN_BOARD_SIZE <= new_size <= MAX_BOARD_SIZE:
        click.echo(f"Invalid size! Continuing with the old size {current}.")
        return current
    click.echo(f"Board size changed to {new_size} x {new_size}")
    return new_size


def play_game(service: ChessService, board_size: int, replay_path: Path) -> None:
    """Game loop: one white move per prompt until checkmate (or the player quits)."""
    response = service.create_new_game(CreateGameRequest(board_size=board_size))
    write_replay_file(service, replay_path, response)
    click.echo(response.board)

    while response.status == Status.IN_PROGRESS:
        line = click.prompt("\nYour move (ex. a7 a6)", type=str).strip()
        if line.lower() in QUIT_COMMANDS:
            replay_id = service.end_game(EndGameRequest(game_id=response.game_id))
            if replay_id:
                click.echo(f"Game stored as {replay_id}")
            return

        parts = line.split()
        if len(parts) != 2:
            click.echo("Invalid move format.")
            continue

        previous_moves = len(response.move_history)
        previous_checks = response.stats["checks_given"]
        try:
            response = service.make_move(
                MoveRequest(
                    game_id=response.game_id, from_square=parts[0], to_square=parts[1]
                )
            )
        except UserInputError as err:
            click.echo(f"Invalid move: {err}")
            continue

        write_replay_file(service, replay_path, response)
        report_moves(response, previous_moves, previous_checks)
        click.echo(response.board)

    click.echo("\nCheckmate! White wins!")
    if response.summary:
        click.echo(response.summary)
    service.end_game(EndGameRequest(game_id=response.game_id))


def report_moves(
    response: GameResponse, previous_moves: int, previous_checks: int
) -> None:
    """Tell the player what happened since the last prompt (check, black's reply)."""
    if response.stats["checks_given"] > previous_checks:
        click.echo("Check on the black king!")
    new_moves = response.move_history[previous_moves:]
    if len(new_moves) == 2:
        _, source, destination = new_moves[1].split()
        click.echo(f"Black King moves {source} -> {destination}")


def replay_archived_game(service: ChessService) -> None:
    replays = service.list_replays()
    if not replays:
        click.echo("No games played yet.")
        return

    for number, summary in enumerate(replays, start=1):
        click.echo(
            f"{number:2d}. {summary.board_size}x{summary.board_size}, {summary.num_moves} moves, {summary.status}"
        )
    number = click.prompt("Which game", type=click.IntRange(1, len(replays)))
    replay_id: UUID = replays[number - 1].replay_id
    for line in service.replay(ReplayRequest(replay_id=replay_id)).replay:
        click.echo(line)


def write_replay_file(service: ChessService, path: Path, response: GameResponse) -> None:
    """The move log of the current game is rewritten after every move."""
    with path.open("w") as stream:
        service.write_move_log(GetGameRequest(game_id=response.game_id), stream)
    logger.debug("Replay file %s updated (%d moves)", path, len(response.move_history))


if __name__ == "__main__":
    main()
