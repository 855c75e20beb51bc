"""Services d'application pour orchestrer le moteur de morpion."""

from .event_bus import EventBus
from .events import (
    GameStartedEvent,
    MoveAppliedEvent,
    RoundEndedEvent,
    RoundRestartedEvent,
    ScoreResetEvent,
)
from .game_service import GameService

__all__ = [
    "EventBus",
    "GameService",
    "GameStartedEvent",
    "MoveAppliedEvent",
    "RoundEndedEvent",
    "RoundRestartedEvent",
    "ScoreResetEvent",
]
