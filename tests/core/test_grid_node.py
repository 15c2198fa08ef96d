import math

import pytest

from grid_astar.core import node as node_module
from grid_astar.core.node import GridNode


def test_node_identity_is_read_only():
    n = GridNode(2, 3, 1)
    assert (n.x, n.y) == (2, 3)
    assert n.coords == (2, 3)
    with pytest.raises(AttributeError):
        n.x = 5  # type: ignore[misc]


def test_new_node_is_clean():
    n = GridNode(0, 0, 4)
    assert (n.f, n.g, n.h) == (0, 0, 0)
    assert not n.visited and not n.closed
    assert n.parent is None


def test_clean_resets_search_state():
    n = GridNode(0, 0, 1)
    n.f, n.g, n.h = 5, 3, 2
    n.visited = n.closed = True
    n.parent = GridNode(1, 0, 1)
    n.clean()
    assert (n.f, n.g, n.h) == (0, 0, 0)
    assert not n.visited and not n.closed
    assert n.parent is None
    assert n.weight == 1


def test_axis_aligned_cost_is_weight():
    n = GridNode(1, 1, 3)
    assert n.get_cost(GridNode(0, 1, 1)) == 3
    assert n.get_cost(GridNode(1, 2, 1)) == 3
    assert n.get_cost(None) == 3


def test_diagonal_cost_uses_reference_factor():
    n = GridNode(1, 1, 2)
    assert n.get_cost(GridNode(0, 0, 1)) == pytest.approx(2 * 1.41421)


def test_diagonal_cost_follows_module_constant(monkeypatch):
    monkeypatch.setattr(node_module, "DIAGONAL_COST", math.sqrt(2))
    n = GridNode(1, 1, 1)
    assert n.get_cost(GridNode(2, 2, 1)) == math.sqrt(2)


def test_is_wall():
    assert GridNode(0, 0, 0).is_wall()
    assert not GridNode(0, 0, 0.5).is_wall()


def test_string_forms():
    n = GridNode(3, 4, 7)
    assert str(n) == "[3 4]"
    assert "x=3" in repr(n) and "weight=7" in repr(n)
