"""Évènements publiés par la couche application (`tictactoe.app`)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tictactoe.engine.state import GameState, Outcome, WinningLine


@dataclass(frozen=True)
class GameStartedEvent:
    """Émis lorsqu'une nouvelle session est initialisée."""

    state: GameState


@dataclass(frozen=True)
class MoveAppliedEvent:
    """Émis après qu'un coup a été accepté par le moteur."""

    index: int
    previous_state: GameState
    new_state: GameState


@dataclass(frozen=True)
class RoundEndedEvent:
    """Émis quand une manche passe d'en cours à une issue terminale."""

    state: GameState
    outcome: Outcome
    winning_line: Optional[WinningLine]


@dataclass(frozen=True)
class RoundRestartedEvent:
    """Émis après `restart()` (scores conservés)."""

    previous_state: GameState
    new_state: GameState


@dataclass(frozen=True)
class ScoreResetEvent:
    """Émis après `reset_all()` (plateau et scores remis à zéro)."""

    previous_state: GameState
    new_state: GameState
