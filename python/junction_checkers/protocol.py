"""Roster summaries and JSON-compatible snapshots of session state for front ends."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional

from .game.pieces import PLAYER_ONE, PLAYER_TWO, Piece, PlayerId

if TYPE_CHECKING:
    from .game.session import GameSession


Message = Dict[str, Any]


def player_number(turn: PlayerId) -> int:
    return 1 if turn == PLAYER_ONE else 2


def turn_banner(turn: PlayerId) -> str:
    return f"Player {player_number(turn)}'s Turn"


def _status_label(piece: Piece) -> str:
    if not piece.alive:
        return "dead"
    return "wounded" if piece.wounded else "alive"


def roster_summary(pieces: Iterable[Piece]) -> List[Dict[str, str]]:
    # Locations are shown 1-based
    return [
        {
            "location": (
                f"i: {piece.location.i + 1}, j: {piece.location.j + 1}" if piece.location is not None else "unknown"
            ),
            "status": _status_label(piece),
        }
        for piece in pieces
    ]


def dump_roster(pieces: Iterable[Piece]) -> str:
    return json.dumps(roster_summary(pieces), indent=2)


def _ids(pieces: Iterable[Piece]) -> List[int]:
    return [piece.piece_id for piece in pieces]


def _coord(piece: Optional[Piece]) -> Optional[List[int]]:
    if piece is None or piece.location is None:
        return None
    return [piece.location.i, piece.location.j]


def snapshot(session: "GameSession") -> Message:
    """Describe the session state as a JSON-compatible dictionary."""

    controller = session.controller
    selected = controller.selected_piece
    return {
        "type": "snapshot",
        "turn": controller.turn,
        "phase": controller.phase.value,
        "winner": controller.winner,
        "selected": selected.piece_id if selected is not None else None,
        "options": [
            {
                "cell": [option.cell.i, option.cell.j],
                "piece": option.piece.piece_id if option.piece is not None else None,
            }
            for option in controller.options
        ],
        "clickable": _ids(controller.clickable_pieces),
        "forced": _ids(controller.forced_pieces),
        "pieces": [
            {
                "id": piece.piece_id,
                "player": piece.player,
                "location": _coord(piece),
                "status": piece.status,
            }
            for piece in session.pieces
        ],
        "rosters": {
            str(player_number(turn)): roster_summary(session.roster(turn)) for turn in (PLAYER_ONE, PLAYER_TWO)
        },
    }
