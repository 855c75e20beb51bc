"""Service d'orchestration pour une session de morpion à deux joueurs."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from tictactoe.app.event_bus import EventBus
from tictactoe.app.events import (
    GameStartedEvent,
    MoveAppliedEvent,
    RoundEndedEvent,
    RoundRestartedEvent,
    ScoreResetEvent,
)
from tictactoe.engine.actions import Action, PlaceMark, ResetAll, Restart
from tictactoe.engine.serialize import state_to_snapshot
from tictactoe.engine.state import GameState

logger = logging.getLogger(__name__)


class GameService:
    """Wrappe `GameState` et publie les évènements nécessaires à la GUI.

    Le service est l'unique propriétaire de l'état courant (et donc du score
    de la session). Les intentions sont traitées une à une, de façon
    synchrone.
    """

    def __init__(self, *, event_bus: EventBus | None = None) -> None:
        self._event_bus = event_bus or EventBus()
        self._state: GameState | None = None

    @property
    def event_bus(self) -> EventBus:
        """Retourne le bus d'évènements utilisé par le service."""

        return self._event_bus

    @property
    def state(self) -> GameState:
        """État courant de la partie (erreur si aucune partie lancée)."""

        if self._state is None:
            raise RuntimeError("Aucune partie initialisée. Utiliser start_new_game().")
        return self._state

    def start_new_game(self) -> GameState:
        """Initialise une nouvelle session (scores à zéro) et publie l'évènement."""

        state = GameState.new_game()
        self._state = state
        logger.info("Nouvelle partie, %s commence", state.current_player.value)
        self._event_bus.publish(GameStartedEvent(state=state))
        return state

    def legal_moves(self) -> List[int]:
        """Retourne les cases jouables pour l'état courant."""

        return self.state.legal_moves()

    def apply_move(self, index: int) -> GameState:
        """Joue la case `index` pour le joueur courant.

        Un coup ignoré par le moteur (case occupée, manche décidée) ne
        publie aucun évènement.

        Raises:
            InvalidCellError: Si l'index n'est pas une case du plateau
        """

        current_state = self.state
        new_state = current_state.apply_move(index)
        if new_state is current_state:
            logger.debug(
                "Coup ignoré en %s (case %s, issue %s)",
                index,
                current_state.board[index],
                current_state.outcome.value,
            )
            return current_state

        self._state = new_state
        logger.debug(
            "%s joue en %d", current_state.current_player.value, index
        )
        self._event_bus.publish(
            MoveAppliedEvent(
                index=index,
                previous_state=current_state,
                new_state=new_state,
            )
        )

        if new_state.is_terminal and not current_state.is_terminal:
            logger.info(
                "Manche terminée: %s (ligne %s), score %s",
                new_state.outcome.value,
                new_state.winning_line,
                new_state.score.as_dict(),
            )
            self._event_bus.publish(
                RoundEndedEvent(
                    state=new_state,
                    outcome=new_state.outcome,
                    winning_line=new_state.winning_line,
                )
            )

        return new_state

    def restart(self) -> GameState:
        """Recommence la manche en conservant le score."""

        current_state = self.state
        new_state = current_state.restart()
        self._state = new_state
        logger.info("Nouvelle manche, score %s", new_state.score.as_dict())
        self._event_bus.publish(
            RoundRestartedEvent(previous_state=current_state, new_state=new_state)
        )
        return new_state

    def reset_all(self) -> GameState:
        """Recommence la manche et remet les scores à zéro."""

        current_state = self.state
        new_state = current_state.reset_all()
        self._state = new_state
        logger.info("Scores remis à zéro")
        self._event_bus.publish(
            ScoreResetEvent(previous_state=current_state, new_state=new_state)
        )
        return new_state

    def dispatch(self, action: Action) -> GameState:
        """Route une action du moteur vers l'opération correspondante."""

        if isinstance(action, PlaceMark):
            return self.apply_move(action.index)
        if isinstance(action, Restart):
            return self.restart()
        if isinstance(action, ResetAll):
            return self.reset_all()
        raise TypeError(f"Action non supportée: {action!r}")

    def snapshot(self) -> Dict[str, Any]:
        """Snapshot JSON-friendly de l'état courant."""

        return state_to_snapshot(self.state)
