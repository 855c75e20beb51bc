"""BoardRenderer: rendu pygame de la grille et des marques.

Responsabilités:
- Dessiner la grille 3x3 à partir de GridGeometry
- Dessiner les marques X (croix) et O (cercle) depuis GameState
- Mettre en évidence les trois cases de la ligne gagnante

Conventions visuelles:
- X en couleur primaire (bleu), O en couleur secondaire (vert)
- Couleur d'accent (ambre) pour les nuls et la ligne gagnante
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

import pygame

from tictactoe.engine.rules import CELL_COUNT
from tictactoe.engine.state import GameState, Mark
from tictactoe.gui.geometry import GridGeometry


# Constantes écran
SCREEN_WIDTH = 480
SCREEN_HEIGHT = 640

# Constantes grille
CELL_SIZE = 100
BOARD_MARGIN = 20
BOARD_OFFSET_X = (SCREEN_WIDTH - 3 * CELL_SIZE) // 2 - BOARD_MARGIN
BOARD_OFFSET_Y = 90

# Palette (tokens de couleur)
COLOR_PRIMARY = (0x21, 0x96, 0xF3)  # #2196F3
COLOR_SECONDARY = (0x4C, 0xAF, 0x50)  # #4CAF50
COLOR_ACCENT = (0xFF, 0xC1, 0x07)  # #FFC107
COLOR_BG = (255, 255, 255)
COLOR_BG_SECONDARY = (0xF8, 0xF9, 0xFA)
COLOR_BORDER = (0xE9, 0xEC, 0xEF)
COLOR_TEXT = (0x28, 0x2C, 0x34)
COLOR_TEXT_MUTED = (0xBB, 0xBB, 0xBB)
COLOR_CELL = (255, 255, 255)

# Tailles pièces
MARK_WIDTH = 8
MARK_PADDING = 22
GRID_LINE_WIDTH = 2
HIGHLIGHT_WIDTH = 4


class BoardRenderer:
    """Rendu de la grille et des marques."""

    # Map marque -> couleur
    _MARK_COLORS: Dict[Mark, Tuple[int, int, int]] = {
        Mark.X: COLOR_PRIMARY,
        Mark.O: COLOR_SECONDARY,
    }

    def __init__(
        self,
        screen: pygame.Surface,
        geometry: Optional[GridGeometry] = None,
    ) -> None:
        """Initialize renderer with pygame surface and grid geometry.

        Args:
            screen: pygame surface to draw on
            geometry: grid layout (default: centered layout from constants)
        """
        self.screen = screen
        self.geometry = geometry or GridGeometry(
            CELL_SIZE, margin=BOARD_MARGIN, origin=(BOARD_OFFSET_X, BOARD_OFFSET_Y)
        )

    @staticmethod
    def mark_color(mark: Optional[Mark]) -> Tuple[int, int, int]:
        """Couleur associée à une marque (accent pour un nul)."""
        if mark is None:
            return COLOR_ACCENT
        return BoardRenderer._MARK_COLORS[mark]

    def _cell_rect(self, index: int) -> pygame.Rect:
        left, top, width, height = self.geometry.cell_rect(index)
        return pygame.Rect(int(left), int(top), int(width), int(height))

    def render_board(self) -> None:
        """Render the empty grid: background panel, cells and separators."""
        width, height = self.geometry.surface_size
        panel = pygame.Rect(
            int(self.geometry.origin[0]), int(self.geometry.origin[1]), int(width), int(height)
        )
        pygame.draw.rect(self.screen, COLOR_BORDER, panel, border_radius=12)

        for index in range(CELL_COUNT):
            rect = self._cell_rect(index)
            pygame.draw.rect(self.screen, COLOR_CELL, rect)
            pygame.draw.rect(self.screen, COLOR_BORDER, rect, width=GRID_LINE_WIDTH)

    def render_marks(self, state: GameState) -> None:
        """Render X and O marks from the board of `state`."""
        for index, cell in enumerate(state.board):
            if cell is Mark.X:
                self._draw_x(index)
            elif cell is Mark.O:
                self._draw_o(index)

    def _draw_x(self, index: int) -> None:
        rect = self._cell_rect(index).inflate(-2 * MARK_PADDING, -2 * MARK_PADDING)
        color = self._MARK_COLORS[Mark.X]
        pygame.draw.line(self.screen, color, rect.topleft, rect.bottomright, MARK_WIDTH)
        pygame.draw.line(self.screen, color, rect.topright, rect.bottomleft, MARK_WIDTH)

    def _draw_o(self, index: int) -> None:
        rect = self._cell_rect(index)
        radius = rect.width // 2 - MARK_PADDING
        pygame.draw.circle(
            self.screen, self._MARK_COLORS[Mark.O], rect.center, radius, width=MARK_WIDTH
        )

    def render_winning_line(self, cells: Iterable[int]) -> None:
        """Render an accent outline around each cell of the winning line.

        Args:
            cells: Cell indexes to highlight (empty -> nothing drawn)
        """
        for index in cells:
            rect = self._cell_rect(index).inflate(-HIGHLIGHT_WIDTH, -HIGHLIGHT_WIDTH)
            pygame.draw.rect(self.screen, COLOR_ACCENT, rect, width=HIGHLIGHT_WIDTH)

    def get_cell_at_position(self, pos: Tuple[int, int]) -> Optional[int]:
        """Find cell index at given screen position, None outside the grid."""
        return self.geometry.cell_at_position(pos)


__all__ = [
    "BoardRenderer",
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
    "COLOR_BG",
    "COLOR_BG_SECONDARY",
    "COLOR_TEXT",
    "COLOR_TEXT_MUTED",
    "COLOR_PRIMARY",
    "COLOR_SECONDARY",
    "COLOR_ACCENT",
]
