"""Actions du jeu.

Chaque intention de l'utilisateur (clic sur une case, bouton Restart,
bouton Reset All) est représentée par une dataclass immuable.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Action:
    """Action de base."""

    pass


@dataclass(frozen=True)
class PlaceMark(Action):
    """Pose la marque du joueur courant sur une case.

    Args:
        index: Index de la case (0-8, ordre ligne par ligne)
    """

    index: int


@dataclass(frozen=True)
class Restart(Action):
    """Recommence la manche en conservant les scores."""

    pass


@dataclass(frozen=True)
class ResetAll(Action):
    """Recommence la manche et remet les scores à zéro."""

    pass


__all__ = [
    "Action",
    "PlaceMark",
    "Restart",
    "ResetAll",
]
