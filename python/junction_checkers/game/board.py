from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional

from ..adjacency import (
    CELL_LABELS,
    COLUMNS,
    ROWS,
    Coord,
    Edge,
    in_bounds,
    is_junction,
    junction_partner,
    neighbors,
)


class OutOfBoundsCoordinate(ValueError):
    pass


# Cells compare by identity: the board owns exactly one instance per coordinate.
@dataclass(frozen=True, eq=False)
class Cell:
    i: int
    j: int

    @property
    def coord(self) -> Coord:
        return (self.i, self.j)

    @property
    def label(self) -> Optional[str]:
        return CELL_LABELS.get(self.coord)

    def __repr__(self) -> str:
        return f"Cell({self.i}, {self.j})"


class Board:
    """Static topology of the 9x5 grid."""

    def __init__(self) -> None:
        self._cells: List[List[Cell]] = [[Cell(i, j) for j in range(COLUMNS)] for i in range(ROWS)]

    def __iter__(self) -> Iterator[Cell]:
        for row in self._cells:
            yield from row

    def cell_at(self, i: int, j: int) -> Optional[Cell]:
        # Bounds-checked lookup; off-grid means "no cell"
        if not in_bounds((i, j)):
            return None
        return self._cells[i][j]

    def cell(self, i: int, j: int) -> Cell:
        found = self.cell_at(i, j)
        if found is None:
            raise OutOfBoundsCoordinate(f"No cell at ({i}, {j})")
        return found

    def is_junction(self, cell: Cell) -> bool:
        return is_junction(cell.coord)

    def junction_partner(self, cell: Cell) -> Cell:
        i, j = junction_partner(cell.coord)
        return self._cells[i][j]

    def forward_edges(self, cell: Cell, direction: int) -> List[Edge]:
        return neighbors(cell.coord, direction)

    def owns(self, cell: Cell) -> bool:
        return self.cell_at(cell.i, cell.j) is cell
