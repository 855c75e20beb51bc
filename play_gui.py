#!/usr/bin/env python3
"""Lance la GUI morpion H2H (deux joueurs sur le même écran, pygame).

Ce script fournit une boucle d'évènements minimale s'appuyant sur
`tictactoe.gui.app.TicTacToeApp`.

Raccourcis clavier:
- clic gauche : jouer la case
- R           : nouvelle manche (scores conservés)
- A           : tout remettre à zéro
- ESC         : quitter
"""

from __future__ import annotations

import logging
import sys
from typing import Dict, Tuple

import pygame

from tictactoe.app.game_service import GameService
from tictactoe.gui.app import TicTacToeApp, UIState
from tictactoe.gui.renderer import (
    COLOR_ACCENT,
    COLOR_BG,
    COLOR_BG_SECONDARY,
    COLOR_PRIMARY,
    COLOR_SECONDARY,
    COLOR_TEXT,
    COLOR_TEXT_MUTED,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    BoardRenderer,
)


KEY_BINDINGS: Tuple[Tuple[str, int, str], ...] = (
    ("R", pygame.K_r, "restart"),
    ("A", pygame.K_a, "reset_all"),
)

BUTTON_RECTS: Dict[str, pygame.Rect] = {
    "restart": pygame.Rect(SCREEN_WIDTH // 2 - 150, SCREEN_HEIGHT - 110, 135, 40),
    "reset_all": pygame.Rect(SCREEN_WIDTH // 2 + 15, SCREEN_HEIGHT - 110, 135, 40),
}
BUTTON_COLORS: Dict[str, Tuple[int, int, int]] = {
    "restart": COLOR_ACCENT,
    "reset_all": COLOR_PRIMARY,
}


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.display.set_caption("Tic Tac Toe")

    app = TicTacToeApp(game_service=GameService(), screen=screen)
    app.start_new_game()

    clock = pygame.time.Clock()
    pygame.font.init()
    title_font = pygame.font.SysFont("Arial", 34, bold=True)
    font = pygame.font.SysFont("Arial", 24, bold=True)
    small_font = pygame.font.SysFont("Arial", 16)

    def render_status(ui_state: UIState) -> None:
        color = BoardRenderer.mark_color(ui_state.status.mark)
        surf = font.render(ui_state.status.text, True, color)
        screen.blit(surf, surf.get_rect(center=(SCREEN_WIDTH // 2, 70)))

    def render_scoreboard(ui_state: UIState) -> None:
        panel = pygame.Rect(SCREEN_WIDTH // 2 - 170, SCREEN_HEIGHT - 170, 340, 44)
        pygame.draw.rect(screen, COLOR_BG_SECONDARY, panel, border_radius=9)
        entries = (
            (f"X: {ui_state.score.x}", COLOR_PRIMARY, panel.left + 50),
            (f"Draws: {ui_state.score.draws}", COLOR_ACCENT, panel.centerx),
            (f"O: {ui_state.score.o}", COLOR_SECONDARY, panel.right - 50),
        )
        for text, color, center_x in entries:
            surf = font.render(text, True, color)
            screen.blit(surf, surf.get_rect(center=(center_x, panel.centery)))

    def render_buttons(ui_state: UIState) -> None:
        for action, rect in BUTTON_RECTS.items():
            button = ui_state.buttons[action]
            color = BUTTON_COLORS[action] if button.enabled else COLOR_TEXT_MUTED
            pygame.draw.rect(screen, color, rect, border_radius=6)
            label = small_font.render(button.label, True, (255, 255, 255))
            screen.blit(label, label.get_rect(center=rect.center))

    running = True
    ui_state = app.get_ui_state()

    while running:
        ui_state_changed = False

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                    continue
                for _label, key, action in KEY_BINDINGS:
                    if event.key == key and app.trigger_action(action):
                        ui_state_changed = True
                        break
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                pos = event.pos

                clicked_button = next(
                    (action for action, rect in BUTTON_RECTS.items() if rect.collidepoint(pos)),
                    None,
                )
                if clicked_button is not None:
                    if app.trigger_action(clicked_button):
                        ui_state_changed = True
                    continue

                index = app.renderer.get_cell_at_position(pos)
                if index is not None and index in ui_state.enabled_cells:
                    if app.handle_cell_click(index):
                        ui_state_changed = True

        if ui_state_changed:
            ui_state = app.get_ui_state()

        # Rendu principal
        screen.fill(COLOR_BG)
        title = title_font.render("Tic Tac Toe", True, COLOR_TEXT)
        screen.blit(title, title.get_rect(center=(SCREEN_WIDTH // 2, 30)))
        render_status(ui_state)

        renderer = app.renderer
        renderer.render_board()
        renderer.render_marks(app.state)
        if ui_state.highlight_cells:
            renderer.render_winning_line(sorted(ui_state.highlight_cells))

        render_scoreboard(ui_state)
        render_buttons(ui_state)

        hint = small_font.render("[R] Restart   [A] Reset All   [ESC] Quit", True, COLOR_TEXT_MUTED)
        screen.blit(hint, hint.get_rect(center=(SCREEN_WIDTH // 2, SCREEN_HEIGHT - 30)))

        pygame.display.flip()
        clock.tick(30)

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
