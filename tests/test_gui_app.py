"""Tests d'intégration légère pour tictactoe.gui.app.

Ces tests valident le modèle d'orchestration de la GUI (sans boucle
pygame):
- l'application démarre avec toutes les cases actives,
- les clics de case deviennent des coups du moteur,
- les cases inactives ne transmettent rien,
- les boutons Restart / Reset All pilotent le score,
- la surbrillance correspond à la ligne gagnante.
"""

from __future__ import annotations

import pytest

from tictactoe.app.event_bus import EventBus
from tictactoe.app.events import MoveAppliedEvent
from tictactoe.app.game_service import GameService
from tictactoe.engine.state import Mark, Outcome
from tictactoe.gui.app import TicTacToeApp


@pytest.fixture
def gui_app() -> TicTacToeApp:
    """Construit l'application GUI headless et démarre une partie."""

    app = TicTacToeApp(game_service=GameService())
    app.start_new_game()
    return app


def _click_all(app: TicTacToeApp, cells) -> None:
    for index in cells:
        assert app.handle_cell_click(index)


def test_app_requires_start() -> None:
    app = TicTacToeApp()

    with pytest.raises(RuntimeError):
        app.get_ui_state()
    with pytest.raises(RuntimeError):
        app.handle_cell_click(0)


def test_app_starts_with_all_cells_enabled(gui_app: TicTacToeApp) -> None:
    ui_state = gui_app.get_ui_state()

    assert ui_state.board == (None,) * 9
    assert ui_state.current_player is Mark.X
    assert ui_state.outcome is Outcome.IN_PROGRESS
    assert ui_state.enabled_cells == frozenset(range(9))
    assert not ui_state.highlight_cells
    assert ui_state.status.text == "Player X's Turn"
    assert not ui_state.buttons["restart"].enabled
    assert not ui_state.buttons["reset_all"].enabled


def test_headless_app_has_no_renderer(gui_app: TicTacToeApp) -> None:
    with pytest.raises(RuntimeError):
        _ = gui_app.renderer


def test_cell_click_plays_move(gui_app: TicTacToeApp) -> None:
    assert gui_app.handle_cell_click(4)

    ui_state = gui_app.get_ui_state()
    assert ui_state.board[4] is Mark.X
    assert 4 not in ui_state.enabled_cells
    assert ui_state.current_player is Mark.O
    assert ui_state.buttons["restart"].enabled


def test_disabled_cells_do_not_reach_engine() -> None:
    bus = EventBus()
    moves: list[object] = []
    bus.subscribe(lambda event: moves.append(event) if isinstance(event, MoveAppliedEvent) else None)
    app = TicTacToeApp(game_service=GameService(event_bus=bus))
    app.start_new_game()

    assert app.handle_cell_click(0)
    assert not app.handle_cell_click(0)  # occupée
    assert not app.handle_cell_click(42)  # hors plateau
    assert len(moves) == 1


def test_win_highlights_line_and_locks_board(gui_app: TicTacToeApp) -> None:
    _click_all(gui_app, (0, 3, 1, 4, 2))

    ui_state = gui_app.get_ui_state()
    assert ui_state.outcome is Outcome.X_WINS
    assert ui_state.winning_line == (0, 1, 2)
    assert ui_state.highlight_cells == frozenset({0, 1, 2})
    assert ui_state.enabled_cells == frozenset()
    assert ui_state.status.text == "Player X Wins!"
    assert ui_state.score.x == 1
    assert not gui_app.handle_cell_click(8)


def test_restart_keeps_score_and_reset_all_clears_it(gui_app: TicTacToeApp) -> None:
    _click_all(gui_app, (0, 3, 1, 4, 2))

    assert gui_app.trigger_action("restart")
    ui_state = gui_app.get_ui_state()
    assert ui_state.board == (None,) * 9
    assert ui_state.score.x == 1
    assert not ui_state.highlight_cells
    assert not ui_state.buttons["restart"].enabled
    assert ui_state.buttons["reset_all"].enabled

    assert gui_app.trigger_action("reset_all")
    ui_state = gui_app.get_ui_state()
    assert ui_state.score.x == 0
    assert not ui_state.buttons["reset_all"].enabled


def test_unknown_or_disabled_actions_are_refused(gui_app: TicTacToeApp) -> None:
    assert not gui_app.trigger_action("undo")
    assert not gui_app.trigger_action("restart")  # rien à recommencer


def test_draw_round(gui_app: TicTacToeApp) -> None:
    _click_all(gui_app, (0, 1, 2, 4, 3, 5, 7, 6, 8))

    ui_state = gui_app.get_ui_state()
    assert ui_state.outcome is Outcome.DRAW
    assert ui_state.winning_line is None
    assert not ui_state.highlight_cells
    assert ui_state.status.mark is None
    assert ui_state.score.draws == 1
