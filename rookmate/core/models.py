"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
The domain layer (Game) produces them, the DB layer stores them and the Service turns them into responses.
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field


@dataclass
class GameModel:
    """Transport-safe representation of a finished (or abandoned) game, as stored in the replay archive."""

    board_size: int
    move_log: list[str]
    status: str
    stats: dict[str, int] = field(default_factory=dict)
