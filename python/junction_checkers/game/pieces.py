"""Pieces, player rosters and the occupancy index."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

from ..adjacency import Coord
from .board import Board, Cell


PlayerId = int

PLAYER_ONE: PlayerId = 1
PLAYER_TWO: PlayerId = -1
REMOVAL_THRESHOLD = 0

START_CELLS: Dict[PlayerId, Tuple[Coord, ...]] = {
    PLAYER_ONE: ((0, 0), (0, 2), (0, 4), (1, 1), (1, 3)),
    PLAYER_TWO: ((8, 0), (8, 2), (8, 4), (7, 1), (7, 3)),
}


# Flip between players
def opponent(player: PlayerId) -> PlayerId:
    return -player


class PieceStatus(Enum):
    ALIVE = "alive"
    CAPTURED = "captured"


@dataclass(eq=False)
class Piece:
    """A single piece.

    ``status`` is a health counter: it starts at the configured health and
    drops by one per capture.  At or below ``REMOVAL_THRESHOLD`` the piece
    is off the board and ``location`` is ``None``.
    """

    piece_id: int
    player: PlayerId
    location: Optional[Cell]
    status: int = 1
    health: int = 1

    @property
    def state(self) -> PieceStatus:
        if self.location is None or self.status <= REMOVAL_THRESHOLD:
            return PieceStatus.CAPTURED
        return PieceStatus.ALIVE

    @property
    def alive(self) -> bool:
        return self.state is PieceStatus.ALIVE

    @property
    def wounded(self) -> bool:
        return self.alive and self.status < self.health

    def __repr__(self) -> str:
        where = self.location.coord if self.location is not None else None
        return f"Piece(id={self.piece_id}, player={self.player}, at={where}, status={self.status})"


@dataclass
class Player:
    turn: PlayerId
    pieces: List[Piece] = field(default_factory=list)


class PieceSet:
    """Every piece in a session plus a cell -> piece index."""

    def __init__(self, board: Board, pieces: Iterable[Piece] = ()) -> None:
        self.board = board
        self._pieces: List[Piece] = []
        self._by_cell: Dict[Cell, Piece] = {}
        for piece in pieces:
            self.add(piece)

    @classmethod
    def from_layout(
        cls,
        board: Board,
        layout: Mapping[PlayerId, Sequence[Coord]],
        health: int = 1,
    ) -> "PieceSet":
        # Pieces are numbered in layout order, player one first
        pieces: List[Piece] = []
        for player in sorted(layout, reverse=True):
            for coord in layout[player]:
                pieces.append(
                    Piece(
                        piece_id=len(pieces) + 1,
                        player=player,
                        location=board.cell(*coord),
                        status=health,
                        health=health,
                    )
                )
        return cls(board, pieces)

    def __iter__(self) -> Iterator[Piece]:
        return iter(self._pieces)

    def __len__(self) -> int:
        return len(self._pieces)

    def add(self, piece: Piece) -> None:
        if piece.location is not None:
            self._require_owned(piece.location)
            if piece.location in self._by_cell:
                raise ValueError(f"Cell {piece.location.coord} is already occupied")
            self._by_cell[piece.location] = piece
        self._pieces.append(piece)

    def _require_owned(self, cell: Cell) -> None:
        # Locations must be the board's own cell instances
        if not self.board.owns(cell):
            raise ValueError(f"{cell!r} does not belong to this board")

    def piece_at(self, cell: Optional[Cell]) -> Optional[Piece]:
        if cell is None:
            return None
        return self._by_cell.get(cell)

    def for_player(self, player: PlayerId) -> List[Piece]:
        return [piece for piece in self._pieces if piece.player == player]

    def alive_for(self, player: PlayerId) -> List[Piece]:
        return [piece for piece in self.for_player(player) if piece.alive]

    def remaining(self, player: PlayerId) -> int:
        return len(self.alive_for(player))

    def move_piece(self, piece: Piece, destination: Cell) -> None:
        if not piece.alive:
            raise ValueError(f"Cannot move a removed piece: {piece!r}")
        self._require_owned(destination)
        occupant = self._by_cell.get(destination)
        if occupant is not None and occupant is not piece:
            raise ValueError(f"Cell {destination.coord} is already occupied")
        assert piece.location is not None
        del self._by_cell[piece.location]
        piece.location = destination
        self._by_cell[destination] = piece

    def capture(self, piece: Piece) -> None:
        # One decrement per capturing jump
        if not piece.alive:
            raise ValueError(f"Piece already removed: {piece!r}")
        piece.status -= 1
        if piece.status <= REMOVAL_THRESHOLD:
            assert piece.location is not None
            del self._by_cell[piece.location]
            piece.location = None
