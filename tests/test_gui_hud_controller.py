"""Tests unitaires pour HUDController.

Ces tests valident:
- Le texte du bandeau selon l'issue (trait, victoire, nul)
- La synchronisation des compteurs de score via refresh_state()
"""

from __future__ import annotations

from typing import Iterable

import pytest

from tictactoe.app.game_service import GameService
from tictactoe.engine.state import Mark
from tictactoe.gui.hud_controller import HUDController, ScorePanel, StatusBanner


@pytest.fixture
def service() -> GameService:
    service = GameService()
    service.start_new_game()
    return service


def _play(service: GameService, moves: Iterable[int]) -> None:
    for index in moves:
        service.apply_move(index)


def test_initial_banner_shows_x_turn(service: GameService) -> None:
    hud = HUDController(service)

    assert hud.get_status() == StatusBanner(text="Player X's Turn", mark=Mark.X, is_final=False)
    assert hud.get_score_panel() == ScorePanel(x=0, o=0, draws=0)


def test_banner_requires_refresh(service: GameService) -> None:
    hud = HUDController(service)
    service.apply_move(0)

    assert hud.get_status().mark is Mark.X  # état non synchronisé

    hud.refresh_state()
    assert hud.get_status().text == "Player O's Turn"


def test_banner_on_win(service: GameService) -> None:
    hud = HUDController(service)
    _play(service, (0, 2, 1, 4, 8, 6))
    hud.refresh_state()

    status = hud.get_status()
    assert status.text == "Player O Wins!"
    assert status.mark is Mark.O
    assert status.is_final
    assert hud.get_score_panel() == ScorePanel(x=0, o=1, draws=0)


def test_banner_on_draw(service: GameService) -> None:
    hud = HUDController(service)
    _play(service, (0, 1, 2, 4, 3, 5, 7, 6, 8))
    hud.refresh_state()

    assert hud.get_status() == StatusBanner(text="It's a Draw!", mark=None, is_final=True)
    assert hud.get_score_panel().draws == 1
