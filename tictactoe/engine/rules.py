"""Règles et constantes du morpion 3x3.

Ce module expose le contrat minimal attendu par le moteur et les tests:
- dimensions du plateau (`BOARD_SIZE`, `CELL_COUNT`)
- lignes gagnantes `WIN_LINES` dans l'ordre de priorité d'évaluation
- clés du tableau des scores `SCORE_KEYS`
"""

from typing import Tuple

BOARD_SIZE: int = 3
CELL_COUNT: int = BOARD_SIZE * BOARD_SIZE

# Ordre fixe: lignes (haut -> bas), colonnes (gauche -> droite),
# diagonale principale puis anti-diagonale.
WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),              # diagonals
)

SCORE_KEYS: Tuple[str, str, str] = ("X", "O", "Draws")

__all__ = [
    "BOARD_SIZE",
    "CELL_COUNT",
    "WIN_LINES",
    "SCORE_KEYS",
]
