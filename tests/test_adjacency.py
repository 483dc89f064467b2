import pytest

from junction_checkers import adjacency
from junction_checkers.adjacency import Edge


def test_junction_cells_are_the_six_side_cells():
    junctions = {
        (i, j) for i in range(adjacency.ROWS) for j in range(adjacency.COLUMNS) if adjacency.is_junction((i, j))
    }
    assert junctions == {(2, 0), (2, 4), (4, 0), (4, 4), (6, 0), (6, 4)}
    assert not adjacency.is_junction(adjacency.HUB)


def test_junction_partner_crosses_the_hub():
    assert adjacency.junction_partner((2, 0)) == (6, 4)
    assert adjacency.junction_partner((6, 0)) == (2, 4)
    assert adjacency.junction_partner((4, 4)) == (4, 0)
    for coord in [(2, 0), (2, 4), (4, 0), (4, 4), (6, 0), (6, 4)]:
        assert adjacency.junction_partner(adjacency.junction_partner(coord)) == coord


def test_junction_partner_rejects_regular_cells():
    with pytest.raises(ValueError):
        adjacency.junction_partner((3, 1))


def test_partners_share_a_label():
    for coord in [(2, 0), (2, 4), (4, 0)]:
        assert adjacency.CELL_LABELS[coord] == adjacency.CELL_LABELS[adjacency.junction_partner(coord)]
    assert adjacency.CELL_LABELS[adjacency.HUB] == "X"


def test_regular_step_onto_hub_is_suppressed():
    assert adjacency.neighbors((3, 1), 1) == [Edge(neighbor=(4, 0), landing=None)]
    assert adjacency.neighbors((5, 3), -1) == [Edge(neighbor=(4, 4), landing=None)]


def test_corner_cell_has_single_forward_edge():
    assert adjacency.neighbors((0, 0), 1) == [Edge(neighbor=(1, 1), landing=(2, 2))]


def test_junction_cell_adds_partner_edge():
    assert adjacency.neighbors((2, 0), 1) == [
        Edge(neighbor=(3, 1), landing=(4, 2)),
        Edge(neighbor=(6, 4), landing=(7, 3)),
    ]
    assert adjacency.neighbors((6, 0), -1) == [
        Edge(neighbor=(5, 1), landing=(4, 2)),
        Edge(neighbor=(2, 4), landing=(1, 3)),
    ]


def test_last_row_has_no_forward_edges():
    assert adjacency.neighbors((8, 0), 1) == []
    assert adjacency.neighbors((0, 2), -1) == []


def test_every_edge_stays_on_the_board():
    for _coord, _direction, edge in adjacency.all_edges():
        assert adjacency.in_bounds(edge.neighbor)
        assert edge.landing is None or adjacency.in_bounds(edge.landing)


def test_unknown_cell_raises():
    with pytest.raises(ValueError):
        adjacency.neighbors((9, 0), 1)
    with pytest.raises(ValueError):
        adjacency.neighbors((0, 0), 2)
