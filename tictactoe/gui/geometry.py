"""Geometry utilities for grid rendering.

Ce module fournit la classe GridGeometry qui calcule les coordonnées écran
des cases (rectangles, centres) et retrouve la case sous un point écran.

Utilisé par BoardRenderer et par la boucle pygame pour convertir un clic en
index de case, sans dépendre de pygame.
"""

from __future__ import annotations

from typing import Optional, Tuple

from tictactoe.engine.rules import BOARD_SIZE, CELL_COUNT

Rect = Tuple[float, float, float, float]


class GridGeometry:
    """Compute screen coordinates from logical cell indexes.

    Les cases sont carrées, numérotées 0-8 ligne par ligne; `margin` est
    l'espace laissé autour de la grille et `origin` le coin haut-gauche de la
    zone occupée (marge comprise).
    """

    def __init__(
        self,
        cell_size: float,
        margin: float = 0.0,
        origin: Tuple[float, float] = (0.0, 0.0),
    ) -> None:
        """Initialize geometry calculator.

        Args:
            cell_size: Side of a cell in pixels
            margin: Margin around the grid in pixels
            origin: Top-left corner of the area in screen coordinates
        """
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        self.cell_size = cell_size
        self.margin = margin
        self.origin = origin

    @property
    def grid_origin(self) -> Tuple[float, float]:
        """Top-left corner of cell 0."""
        return (self.origin[0] + self.margin, self.origin[1] + self.margin)

    @property
    def grid_size(self) -> float:
        return self.cell_size * BOARD_SIZE

    def cell_rect(self, index: int) -> Rect:
        """Get screen rectangle for a cell.

        Args:
            index: Cell index (0-8)

        Returns:
            (left, top, width, height) in pixels
        """
        if not 0 <= index < CELL_COUNT:
            raise IndexError(f"cell index out of range: {index}")
        row, col = divmod(index, BOARD_SIZE)
        left, top = self.grid_origin
        return (
            left + col * self.cell_size,
            top + row * self.cell_size,
            self.cell_size,
            self.cell_size,
        )

    def cell_center(self, index: int) -> Tuple[float, float]:
        left, top, width, height = self.cell_rect(index)
        return (left + width / 2, top + height / 2)

    def cell_at_position(self, pos: Tuple[float, float]) -> Optional[int]:
        """Find the cell index under a screen position.

        Returns:
            Cell index, or None if the position is outside the grid
        """
        left, top = self.grid_origin
        x = pos[0] - left
        y = pos[1] - top
        if not (0 <= x < self.grid_size and 0 <= y < self.grid_size):
            return None
        col = int(x // self.cell_size)
        row = int(y // self.cell_size)
        return row * BOARD_SIZE + col

    @property
    def surface_size(self) -> Tuple[float, float]:
        """Get the required surface size to contain the grid.

        Returns:
            (width, height) in pixels
        """
        side = self.grid_size + 2 * self.margin
        return (side, side)


__all__ = ["GridGeometry"]
