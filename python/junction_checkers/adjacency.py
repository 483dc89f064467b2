"""Board adjacency definitions for the 9x5 junction board.

Every cell moves along its player's forward direction: one row forward and
one column sideways.  The six junction cells additionally link across the
central hub to their partner cell.  The table below is computed once at
import time so move generation never repeats the coordinate arithmetic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple


Coord = Tuple[int, int]

ROWS = 9
COLUMNS = 5
DIRECTIONS = (1, -1)
HUB: Coord = (4, 2)
JUNCTION_ROWS = (2, 4, 6)
JUNCTION_COLUMNS = (0, 4)

# Partners share a letter; the hub is marked X.
CELL_LABELS: Dict[Coord, str] = {
    (2, 0): "A",
    (6, 4): "A",
    (2, 4): "B",
    (6, 0): "B",
    (4, 0): "C",
    (4, 4): "C",
    HUB: "X",
}


@dataclass(frozen=True)
class Edge:
    """Represents a directed neighbor relationship on the board.

    Attributes
    ----------
    neighbor:
        The cell reached with a simple step.
    landing:
        The cell reached when jumping over a piece sitting on ``neighbor``.
        ``None`` indicates the jump would leave the board.
    """

    neighbor: Coord
    landing: Optional[Coord]


def in_bounds(coord: Coord) -> bool:
    i, j = coord
    return 0 <= i < ROWS and 0 <= j < COLUMNS


def is_junction(coord: Coord) -> bool:
    return coord[0] in JUNCTION_ROWS and coord[1] in JUNCTION_COLUMNS


def junction_partner(coord: Coord) -> Coord:
    """Return the junction on the opposite side of the hub from ``coord``."""

    if not is_junction(coord):
        raise ValueError(f"Not a junction cell: {coord}")
    i, j = coord
    return (ROWS - 1 - i, COLUMNS - 1 - j)


def _landing(coord: Coord) -> Optional[Coord]:
    return coord if in_bounds(coord) else None


def _build_edges(coord: Coord, direction: int) -> List[Edge]:
    i, j = coord
    edges: List[Edge] = []

    for shift in (1, -1):
        neighbor = (i + direction, j + shift)
        if not in_bounds(neighbor):
            continue
        # Regular steps never land on the hub; only junction diagonals reach it.
        if neighbor == HUB and not is_junction(coord):
            continue
        landing = (i + 2 * direction, j + 2 * shift)
        edges.append(Edge(neighbor=neighbor, landing=_landing(landing)))

    if is_junction(coord):
        partner = junction_partner(coord)
        landing = (partner[0] + direction, 3 if partner[1] == COLUMNS - 1 else 1)
        edges.append(Edge(neighbor=partner, landing=_landing(landing)))

    return edges


RAW_ADJACENCY: Dict[Tuple[Coord, int], List[Edge]] = {
    ((i, j), direction): _build_edges((i, j), direction)
    for i in range(ROWS)
    for j in range(COLUMNS)
    for direction in DIRECTIONS
}


def neighbors(coord: Coord, direction: int) -> List[Edge]:
    """Return the outgoing edges from ``coord`` for a player moving ``direction``."""

    try:
        return list(RAW_ADJACENCY[(coord, direction)])
    except KeyError as exc:
        raise ValueError(f"Unknown cell or direction: {coord}, {direction}") from exc


def all_edges() -> Iterator[Tuple[Coord, int, Edge]]:
    """Iterate over every ``(coord, direction, edge)`` triple on the board."""

    for (coord, direction), edges in RAW_ADJACENCY.items():
        for edge in edges:
            yield coord, direction, edge
