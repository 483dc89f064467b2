"""Option generation for a single piece.

``compute_options`` is a pure query: it reads the board and the piece set
and returns a fresh list every call.  Nothing is cached between calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .board import Board, Cell
from .pieces import Piece, PieceSet, PlayerId


@dataclass(frozen=True)
class Option:
    """A candidate destination.

    ``piece`` is the piece jumped over to reach ``cell``, or ``None`` for a
    simple step.  Jumping a friendly piece is allowed but captures nothing.
    """

    cell: Cell
    piece: Optional[Piece] = None

    def captures(self, player: PlayerId) -> bool:
        return self.piece is not None and self.piece.player != player


def compute_options(
    board: Board,
    pieces: PieceSet,
    cell: Cell,
    direction: int,
    forced: bool = False,
) -> List[Option]:
    options: List[Option] = []

    for edge in board.forward_edges(cell, direction):
        neighbor = board.cell(*edge.neighbor)
        blocker = pieces.piece_at(neighbor)
        if blocker is None:
            options.append(Option(cell=neighbor))
            continue

        # Occupied: jump if the landing exists and is free, else nothing on this line
        if edge.landing is None:
            continue
        landing = board.cell(*edge.landing)
        if pieces.piece_at(landing) is None:
            options.append(Option(cell=landing, piece=blocker))

    if forced:
        # The mover's sign is its direction
        options = [option for option in options if option.captures(direction)]
    return options


def capture_options(board: Board, pieces: PieceSet, piece: Piece) -> List[Option]:
    if not piece.alive:
        return []
    assert piece.location is not None
    return compute_options(board, pieces, piece.location, piece.player, forced=True)


def legal_options(board: Board, pieces: PieceSet, piece: Piece, forced: bool = False) -> List[Option]:
    if not piece.alive:
        return []
    assert piece.location is not None
    return compute_options(board, pieces, piece.location, piece.player, forced=forced)
