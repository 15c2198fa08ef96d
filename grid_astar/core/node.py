"""Grid cell with per-search A* state."""

from __future__ import annotations

from typing import Optional, Tuple

from ..config import CONFIG


Coord = Tuple[int, int]

# Cost factor applied to a node's weight when it is entered diagonally.
DIAGONAL_COST: float = CONFIG.search.diagonal_cost


class GridNode:
    """A single cell of a :class:`~grid_astar.core.grid.Grid`.

    ``x`` and ``y`` identify the cell and never change. The remaining fields
    hold the state of the search currently (or most recently) run on the
    owning grid and are reset through :meth:`clean`.
    """

    __slots__ = ("_x", "_y", "weight", "f", "g", "h", "visited", "closed", "parent")

    def __init__(self, x: int, y: int, weight: float) -> None:
        self._x = x
        self._y = y
        self.weight = weight
        self.f: float = 0
        self.g: float = 0
        self.h: float = 0
        self.visited: bool = False
        self.closed: bool = False
        self.parent: Optional[GridNode] = None

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def coords(self) -> Coord:
        return (self._x, self._y)

    def clean(self) -> None:
        """Reset the search state to its initial values."""

        self.f = 0
        self.g = 0
        self.h = 0
        self.visited = False
        self.closed = False
        self.parent = None

    def get_cost(self, from_node: Optional[GridNode]) -> float:
        """Return the cost of stepping onto this node from ``from_node``."""

        if (
            from_node is not None
            and from_node.x != self._x
            and from_node.y != self._y
        ):
            return self.weight * DIAGONAL_COST
        return self.weight

    def is_wall(self) -> bool:
        return self.weight == 0

    def __str__(self) -> str:
        return f"[{self._x} {self._y}]"

    def __repr__(self) -> str:
        return f"GridNode(x={self._x}, y={self._y}, weight={self.weight!r})"


__all__ = ["GridNode", "Coord", "DIAGONAL_COST"]
