"""Contrôleur HUD pour la GUI morpion.

Responsabilités:
- Fournir le texte du bandeau de statut (trait, victoire, nul)
- Fournir les compteurs du tableau des scores

La logique reste headless: aucun rendu pygame, uniquement des structures de
données prêtes à consommer par la couche de présentation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pygame

from tictactoe.app.game_service import GameService
from tictactoe.engine.state import GameState, Mark, Outcome


@dataclass(frozen=True)
class StatusBanner:
    """Données du bandeau de statut.

    `mark` est la marque à colorer: joueur au trait, gagnant, ou None
    pour un nul.
    """

    text: str
    mark: Optional[Mark]
    is_final: bool


@dataclass(frozen=True)
class ScorePanel:
    """Compteurs affichés dans le tableau des scores."""

    x: int
    o: int
    draws: int


class HUDController:
    """Contrôleur fournissant les données du HUD GUI."""

    def __init__(
        self,
        game_service: GameService,
        screen: Optional[pygame.Surface] = None,
    ) -> None:
        self.game_service = game_service
        self.screen = screen
        self.state: GameState = game_service.state

    def refresh_state(self) -> None:
        """Synchronise le contrôleur avec l'état courant du GameService."""

        self.state = self.game_service.state

    def get_status(self) -> StatusBanner:
        """Retourne le bandeau correspondant à l'issue courante."""

        outcome = self.state.outcome
        if outcome is Outcome.DRAW:
            return StatusBanner(text="It's a Draw!", mark=None, is_final=True)

        winner = outcome.winner
        if winner is not None:
            return StatusBanner(
                text=f"Player {winner.value} Wins!", mark=winner, is_final=True
            )

        player = self.state.current_player
        return StatusBanner(
            text=f"Player {player.value}'s Turn", mark=player, is_final=False
        )

    def get_score_panel(self) -> ScorePanel:
        score = self.state.score
        return ScorePanel(x=score.x, o=score.o, draws=score.draws)


__all__ = ["HUDController", "StatusBanner", "ScorePanel"]
