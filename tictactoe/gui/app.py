"""Orchestrateur principal de la GUI morpion.

Ce module relie le GameService au rendu pygame et fournit un modèle
testable indépendant de la boucle d'évènements. Il expose:
- un objet `TicTacToeApp` transformant clics et boutons en intentions
  (`apply_move`, `restart`, `reset_all`),
- un état d'interface (`UIState`) synthétisant plateau, bandeau, scores,
  cases actives et surbrillance de la ligne gagnante.

Aucune règle de victoire n'est évaluée ici: tout est lu dans `GameState`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional, Tuple

import pygame

from tictactoe.app.game_service import GameService
from tictactoe.engine.state import Cell, GameState, Mark, Outcome, WinningLine
from tictactoe.gui.hud_controller import HUDController, ScorePanel, StatusBanner
from tictactoe.gui.renderer import BoardRenderer

__all__ = ["ButtonState", "UIState", "TicTacToeApp"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ButtonState:
    """Représente l'état d'un bouton/action dans l'interface."""

    label: str
    enabled: bool


@dataclass(frozen=True)
class UIState:
    """Données agrégées pour la couche de présentation GUI."""

    board: Tuple[Cell, ...]
    current_player: Mark
    outcome: Outcome
    winning_line: Optional[WinningLine]
    status: StatusBanner
    score: ScorePanel
    highlight_cells: FrozenSet[int]
    enabled_cells: FrozenSet[int]
    buttons: Dict[str, ButtonState]


class TicTacToeApp:
    """Orchestrateur principal de la GUI H2H.

    Cette classe ne gère pas la boucle pygame directement. Sans surface
    `screen`, aucun renderer n'est créé et le modèle fonctionne en headless.
    """

    def __init__(
        self,
        *,
        game_service: Optional[GameService] = None,
        screen: Optional[pygame.Surface] = None,
    ) -> None:
        self.game_service = game_service or GameService()
        self.screen = screen

        self._board_renderer: Optional[BoardRenderer] = None
        self.hud_controller: Optional[HUDController] = None

    # ------------------------------------------------------------------
    # Initialisation & synchronisation
    # ------------------------------------------------------------------

    def start_new_game(self) -> None:
        """Initialise une nouvelle session et (ré)instancie les contrôleurs."""

        self.game_service.start_new_game()

        if self.screen is not None:
            self._board_renderer = BoardRenderer(self.screen)
        self.hud_controller = HUDController(self.game_service, self.screen)
        self.refresh_state()

    @property
    def state(self) -> GameState:
        """Accès direct à l'état courant de la partie."""

        return self.game_service.state

    @property
    def renderer(self) -> BoardRenderer:
        """Retourne le renderer pygame associé (initialisé après start)."""

        if self._board_renderer is None:
            raise RuntimeError("BoardRenderer indisponible (partie non démarrée ou mode headless)")
        return self._board_renderer

    def refresh_state(self) -> None:
        """Resynchronise les contrôleurs avec l'état courant."""

        if self.hud_controller is None:
            return
        self.hud_controller.refresh_state()

    def _require_started(self) -> None:
        if self.hud_controller is None:
            raise RuntimeError("App non initialisée: start_new_game() requis")

    # ------------------------------------------------------------------
    # Intentions utilisateur
    # ------------------------------------------------------------------

    def handle_cell_click(self, index: int) -> bool:
        """Transmet un clic de case au moteur.

        Returns:
            True si le coup a été joué, False si la case est inactive
            (occupée, hors plateau, ou manche terminée)
        """
        self._require_started()

        if not self.state.is_move_legal(index):
            logger.debug("Clic ignoré sur la case %r", index)
            return False

        self.game_service.apply_move(index)
        self.refresh_state()
        return True

    def trigger_action(self, action: str) -> bool:
        """Déclenche une action de haut niveau (bouton)."""

        self._require_started()

        button = self._build_buttons().get(action)
        if button is None or not button.enabled:
            return False

        if action == "restart":
            self.game_service.restart()
        elif action == "reset_all":
            self.game_service.reset_all()
        self.refresh_state()
        return True

    # ------------------------------------------------------------------
    # État d'interface
    # ------------------------------------------------------------------

    def get_ui_state(self) -> UIState:
        self._require_started()
        self.refresh_state()
        assert self.hud_controller is not None

        state = self.state
        highlight = frozenset(state.winning_line or ())

        return UIState(
            board=state.board,
            current_player=state.current_player,
            outcome=state.outcome,
            winning_line=state.winning_line,
            status=self.hud_controller.get_status(),
            score=self.hud_controller.get_score_panel(),
            highlight_cells=highlight,
            enabled_cells=frozenset(state.legal_moves()),
            buttons=self._build_buttons(),
        )

    def _build_buttons(self) -> Dict[str, ButtonState]:
        state = self.state
        score = state.score

        buttons: Dict[str, ButtonState] = {}
        buttons["restart"] = ButtonState("Restart", state.move_count > 0)
        has_score = score.x + score.o + score.draws > 0
        buttons["reset_all"] = ButtonState("Reset All", state.move_count > 0 or has_score)
        return buttons
