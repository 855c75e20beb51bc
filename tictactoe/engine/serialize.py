"""Outils de sérialisation pour GameState.

Le snapshot est la vue sortante publiée après chaque intention:
- structure JSON-friendly (listes/dicts primitifs)
- restauration complète d'un GameState, vérifiée par ses invariants
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from tictactoe.engine.rules import SCORE_KEYS
from tictactoe.engine.state import Cell, GameState, Mark, Outcome, Score

SCHEMA_VERSION = "0.1.0"


def state_to_snapshot(state: GameState) -> Dict[str, Any]:
    """Convertit un GameState en snapshot JSON-friendly."""

    snapshot: Dict[str, Any] = {
        "schema_version": SCHEMA_VERSION,
        "board": [_serialize_cell(cell) for cell in state.board],
        "current_player": state.current_player.value,
        "outcome": state.outcome.value,
        "winning_line": list(state.winning_line) if state.winning_line else None,
        "score": state.score.as_dict(),
    }
    return snapshot


def snapshot_to_state(snapshot: Mapping[str, Any]) -> GameState:
    """Reconstruit un GameState à partir d'un snapshot.

    Raises:
        ValueError: Version de schéma non supportée, valeur inconnue ou
            état incohérent
    """

    version = snapshot.get("schema_version")
    if version != SCHEMA_VERSION:
        raise ValueError(f"Unsupported schema_version: {version!r}")

    board = [_deserialize_cell(value) for value in snapshot["board"]]
    current_player = Mark(snapshot["current_player"])
    outcome = Outcome(snapshot.get("outcome", Outcome.IN_PROGRESS.value))

    line_payload = snapshot.get("winning_line")
    winning_line = tuple(int(i) for i in line_payload) if line_payload else None

    return GameState(
        board=tuple(board),
        x_is_next=current_player is Mark.X,
        outcome=outcome,
        winning_line=winning_line,  # type: ignore[arg-type]
        score=_deserialize_score(snapshot.get("score", {})),
    )


def _serialize_cell(cell: Cell) -> Optional[str]:
    return cell.value if cell is not None else None


def _deserialize_cell(value: Optional[str]) -> Cell:
    if value is None:
        return None
    try:
        return Mark(value)
    except ValueError:
        raise ValueError(f"Unknown mark: {value!r}") from None


def _deserialize_score(payload: Mapping[str, Any]) -> Score:
    unknown: List[str] = [key for key in payload if key not in SCORE_KEYS]
    if unknown:
        raise ValueError(f"Unknown score keys: {unknown}")
    return Score(
        x=int(payload.get("X", 0)),
        o=int(payload.get("O", 0)),
        draws=int(payload.get("Draws", 0)),
    )


__all__ = ["SCHEMA_VERSION", "state_to_snapshot", "snapshot_to_state"]
