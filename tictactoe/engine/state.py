"""État du jeu et logique de transition.

Ce module définit l'état immuable d'une manche de morpion (plateau, trait,
issue, ligne gagnante) ainsi que le score de la session, et les transitions
d'état correspondant aux trois intentions utilisateur:
- `apply_move(index)` : pose une marque,
- `restart()` : nouvelle manche, scores conservés,
- `reset_all()` : nouvelle manche, scores remis à zéro.

L'issue est toujours recalculée explicitement via `evaluate()` à l'intérieur
de `apply_move`. Le score n'est incrémenté que lors du passage d'une manche
en cours à une issue terminale.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from tictactoe.engine.actions import Action, PlaceMark, ResetAll, Restart
from tictactoe.engine.rules import CELL_COUNT, WIN_LINES


class Mark(Enum):
    """Marque posée par un joueur."""

    X = "X"
    O = "O"


class Outcome(Enum):
    """Issue d'une manche, dérivée du plateau."""

    IN_PROGRESS = "IN_PROGRESS"
    X_WINS = "X_WINS"
    O_WINS = "O_WINS"
    DRAW = "DRAW"

    @property
    def is_terminal(self) -> bool:
        return self is not Outcome.IN_PROGRESS

    @property
    def winner(self) -> Optional[Mark]:
        """Marque gagnante, ou None pour une manche nulle ou en cours."""

        if self is Outcome.X_WINS:
            return Mark.X
        if self is Outcome.O_WINS:
            return Mark.O
        return None

    @classmethod
    def win_for(cls, mark: Mark) -> "Outcome":
        return cls.X_WINS if mark is Mark.X else cls.O_WINS


Cell = Optional[Mark]
Board = Tuple[Cell, ...]
WinningLine = Tuple[int, int, int]

EMPTY_BOARD: Board = (None,) * CELL_COUNT


class InvalidCellError(ValueError):
    """Index de case hors de l'intervalle 0-8 (violation de contrat)."""

    def __init__(self, index: object) -> None:
        self.index = index
        super().__init__(
            f"Case invalide: {index!r} (entier attendu entre 0 et {CELL_COUNT - 1})"
        )


@dataclass(frozen=True)
class Score:
    """Tableau des scores de la session."""

    x: int = 0
    o: int = 0
    draws: int = 0

    def record(self, outcome: Outcome) -> "Score":
        """Retourne un score incrémenté de 1 pour l'issue donnée.

        Raises:
            ValueError: Si l'issue n'est pas terminale
        """
        if outcome is Outcome.X_WINS:
            return replace(self, x=self.x + 1)
        if outcome is Outcome.O_WINS:
            return replace(self, o=self.o + 1)
        if outcome is Outcome.DRAW:
            return replace(self, draws=self.draws + 1)
        raise ValueError(f"Issue non terminale: {outcome}")

    def as_dict(self) -> Dict[str, int]:
        return {"X": self.x, "O": self.o, "Draws": self.draws}


@dataclass(frozen=True)
class Evaluation:
    """Résultat de `evaluate()`."""

    outcome: Outcome
    winning_line: Optional[WinningLine] = None


def evaluate(board: Sequence[Cell]) -> Evaluation:
    """Calcule l'issue d'un plateau (fonction pure, sans effet de bord).

    Les lignes sont examinées dans l'ordre de `WIN_LINES`; la première ligne
    complète l'emporte.

    Raises:
        ValueError: Si le plateau ne contient pas exactement 9 cases
    """
    if len(board) != CELL_COUNT:
        raise ValueError(f"Plateau de {len(board)} cases (attendu {CELL_COUNT})")

    for line in WIN_LINES:
        a, b, c = line
        mark = board[a]
        if mark is not None and mark == board[b] and mark == board[c]:
            return Evaluation(Outcome.win_for(mark), line)

    if all(cell is not None for cell in board):
        return Evaluation(Outcome.DRAW)
    return Evaluation(Outcome.IN_PROGRESS)


def _is_valid_index(index: object) -> bool:
    # bool est une sous-classe d'int: on le refuse explicitement
    return (
        isinstance(index, int)
        and not isinstance(index, bool)
        and 0 <= index < CELL_COUNT
    )


@dataclass(frozen=True)
class GameState:
    """État immuable du jeu.

    Toutes les modifications doivent retourner un nouvel état. Un coup
    ignoré (case occupée, manche terminée) retourne l'instance elle-même.
    """

    board: Board = EMPTY_BOARD
    x_is_next: bool = True
    outcome: Outcome = Outcome.IN_PROGRESS
    winning_line: Optional[WinningLine] = None
    score: Score = field(default_factory=Score)

    def __post_init__(self) -> None:
        # Accepter une liste en entrée (snapshots, tests)
        object.__setattr__(self, "board", tuple(self.board))
        if self.winning_line is not None:
            object.__setattr__(self, "winning_line", tuple(self.winning_line))
        self._check_integrity()

    @classmethod
    def new_game(cls, score: Score | None = None) -> "GameState":
        """Crée une manche vierge (X commence).

        Args:
            score: Score de session à conserver (par défaut 0-0-0)
        """
        return cls(score=score if score is not None else Score())

    # ------------------------------------------------------------------
    # Requêtes
    # ------------------------------------------------------------------

    @property
    def current_player(self) -> Mark:
        return Mark.X if self.x_is_next else Mark.O

    @property
    def is_terminal(self) -> bool:
        return self.outcome.is_terminal

    @property
    def winner(self) -> Optional[Mark]:
        return self.outcome.winner

    @property
    def move_count(self) -> int:
        return sum(1 for cell in self.board if cell is not None)

    def legal_moves(self) -> List[int]:
        """Retourne les index des cases jouables (vide si manche terminée)."""

        if self.is_terminal:
            return []
        return [index for index, cell in enumerate(self.board) if cell is None]

    def is_move_legal(self, index: int) -> bool:
        """Vérifie qu'un coup serait accepté (sans lever d'exception)."""

        if not _is_valid_index(index):
            return False
        return not self.is_terminal and self.board[index] is None

    def legal_actions(self) -> List[Action]:
        """Retourne la liste des actions légales pour l'état courant."""

        actions: List[Action] = [PlaceMark(index) for index in self.legal_moves()]
        actions.append(Restart())
        actions.append(ResetAll())
        return actions

    def is_action_legal(self, action: Action) -> bool:
        if isinstance(action, PlaceMark):
            return self.is_move_legal(action.index)
        return isinstance(action, (Restart, ResetAll))

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def apply_move(self, index: int) -> "GameState":
        """Pose la marque du joueur courant sur la case `index`.

        Args:
            index: Case ciblée (0-8)

        Returns:
            Nouvel état, ou `self` si le coup est ignoré (case occupée ou
            manche déjà décidée)

        Raises:
            InvalidCellError: Si l'index n'est pas un entier entre 0 et 8
        """
        if not _is_valid_index(index):
            raise InvalidCellError(index)

        if not self.is_move_legal(index):
            return self

        board = list(self.board)
        board[index] = self.current_player
        evaluation = evaluate(board)

        score = self.score
        # Seule transition qui modifie le score: en cours -> terminal
        if evaluation.outcome.is_terminal:
            score = score.record(evaluation.outcome)

        return replace(
            self,
            board=tuple(board),
            x_is_next=not self.x_is_next,
            outcome=evaluation.outcome,
            winning_line=evaluation.winning_line,
            score=score,
        )

    def restart(self) -> "GameState":
        """Vide le plateau, rend le trait à X; le score est conservé."""

        return GameState.new_game(score=self.score)

    def reset_all(self) -> "GameState":
        """Comme `restart()`, et remet les trois compteurs à zéro."""

        return GameState.new_game()

    def apply_action(self, action: Action) -> "GameState":
        """Applique une action et retourne le nouvel état.

        Raises:
            InvalidCellError: Si `PlaceMark` vise une case hors plateau
            TypeError: Si le type d'action est inconnu
        """
        if isinstance(action, PlaceMark):
            return self.apply_move(action.index)
        if isinstance(action, Restart):
            return self.restart()
        if isinstance(action, ResetAll):
            return self.reset_all()
        raise TypeError(f"Action non supportée: {action!r}")

    # ------------------------------------------------------------------
    # Invariants
    # ------------------------------------------------------------------

    def _check_integrity(self) -> None:
        if len(self.board) != CELL_COUNT:
            raise ValueError(
                f"Plateau de {len(self.board)} cases (attendu {CELL_COUNT})"
            )
        if any(cell is not None and not isinstance(cell, Mark) for cell in self.board):
            raise ValueError(f"Case inconnue dans le plateau: {self.board!r}")

        x_count = sum(1 for cell in self.board if cell is Mark.X)
        o_count = sum(1 for cell in self.board if cell is Mark.O)
        if x_count not in (o_count, o_count + 1):
            raise ValueError(f"Plateau déséquilibré: {x_count} X pour {o_count} O")
        if self.x_is_next != (x_count == o_count):
            raise ValueError("Le trait ne correspond pas au nombre de marques")

        evaluation = evaluate(self.board)
        if (self.outcome, self.winning_line) != (
            evaluation.outcome,
            evaluation.winning_line,
        ):
            raise ValueError(
                f"Issue incohérente: {self.outcome} / {self.winning_line} "
                f"(plateau: {evaluation.outcome} / {evaluation.winning_line})"
            )
        # Le gagnant est forcément celui qui vient de jouer
        winner = self.outcome.winner
        if winner is not None and winner is self.current_player:
            raise ValueError(f"{winner.value} gagne mais a encore le trait")

        if min(self.score.x, self.score.o, self.score.draws) < 0:
            raise ValueError(f"Score négatif: {self.score}")


__all__ = [
    "Mark",
    "Outcome",
    "Cell",
    "Board",
    "WinningLine",
    "EMPTY_BOARD",
    "InvalidCellError",
    "Score",
    "Evaluation",
    "evaluate",
    "GameState",
]
