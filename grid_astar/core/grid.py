"""2D container of :class:`GridNode` objects with dirty-node tracking."""

from __future__ import annotations

import logging
from numbers import Real
from typing import Iterator, List, Optional, Sequence

from ..config import CONFIG, Config
from .errors import InvalidInput, OutOfBounds
from .node import GridNode

logger = logging.getLogger(__name__)


class Grid:
    """Weighted grid built from a 2D weight matrix.

    ``matrix[x][y]`` becomes the weight of node ``(x, y)``; rows may differ in
    length. A weight of ``0`` marks a wall.
    """

    def __init__(self, matrix: Sequence[Sequence[float]], diagonal: bool = False) -> None:
        rows = _validate_matrix(matrix)

        self.diagonal: bool = bool(diagonal)
        self.grid: List[List[GridNode]] = []
        self.nodes: List[GridNode] = []
        self.dirty_nodes: List[GridNode] = []
        for x, row in enumerate(rows):
            nodes_row = [GridNode(x, y, weight) for y, weight in enumerate(row)]
            self.grid.append(nodes_row)
            self.nodes.extend(nodes_row)

        logger.debug(
            "Built grid with %s nodes (%s rows, diagonal=%s)",
            len(self.nodes),
            len(self.grid),
            self.diagonal,
        )

    @classmethod
    def from_config(
        cls, matrix: Sequence[Sequence[float]], cfg: Optional[Config] = None
    ) -> "Grid":
        """Build a grid using the configured default adjacency."""

        cfg = cfg or CONFIG
        return cls(matrix, diagonal=cfg.search.diagonal)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        """Number of outer rows (the ``x`` extent)."""
        return len(self.grid)

    @property
    def height(self) -> int:
        """Length of the longest row (the ``y`` extent)."""
        return max((len(row) for row in self.grid), default=0)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < len(self.grid) and 0 <= y < len(self.grid[x])

    def node(self, x: int, y: int) -> GridNode:
        """Return the node at ``(x, y)`` or raise :class:`OutOfBounds`."""

        if not self.in_bounds(x, y):
            raise OutOfBounds((x, y))
        return self.grid[x][y]

    def __getitem__(self, x: int) -> "GridRow":
        """Return row ``x``; negative or too large indices raise :class:`OutOfBounds`."""

        if not 0 <= x < len(self.grid):
            raise OutOfBounds((x, None), f"row {x} is outside the grid")
        return GridRow(self.grid[x], x)

    def __iter__(self) -> Iterator[GridNode]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, node: object) -> bool:
        if not isinstance(node, GridNode):
            return False
        return self.in_bounds(node.x, node.y) and self.grid[node.x][node.y] is node

    # ------------------------------------------------------------------
    # Adjacency
    # ------------------------------------------------------------------
    def neighbors(self, node: GridNode) -> List[GridNode]:
        """Return the in-bounds neighbours of ``node``.

        Order is West, East, South, North and, on diagonal grids, Southwest,
        Southeast, Northwest, Northeast. Heap tie-breaks depend on it.
        """

        x, y = node.x, node.y
        offsets = [(-1, 0), (1, 0), (0, -1), (0, 1)]
        if self.diagonal:
            offsets += [(-1, -1), (1, -1), (-1, 1), (1, 1)]

        ret: List[GridNode] = []
        for dx, dy in offsets:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                ret.append(self.grid[nx][ny])
        return ret

    # ------------------------------------------------------------------
    # Dirty tracking
    # ------------------------------------------------------------------
    def mark_dirty(self, node: GridNode) -> None:
        self.dirty_nodes.append(node)

    def clean_dirty(self) -> None:
        """Reset every node touched since the last clean."""

        for node in self.dirty_nodes:
            node.clean()
        self.dirty_nodes = []

    # ------------------------------------------------------------------
    # Debug rendering
    # ------------------------------------------------------------------
    def to_string(self) -> str:
        return "\n".join(
            " ".join(_format_weight(node.weight) for node in row) for row in self.grid
        )

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, diagonal={self.diagonal})"


class GridRow(Sequence[GridNode]):
    """Read-only view of one row with the same bounds rules as :meth:`Grid.node`."""

    __slots__ = ("_nodes", "_x")

    def __init__(self, nodes: List[GridNode], x: int) -> None:
        self._nodes = nodes
        self._x = x

    def __getitem__(self, y):  # type: ignore[override]
        if isinstance(y, slice):
            return self._nodes[y]
        if not 0 <= y < len(self._nodes):
            raise OutOfBounds((self._x, y))
        return self._nodes[y]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[GridNode]:
        return iter(self._nodes)


# ----------------------------------------------------------------------
# Helper functions
# ----------------------------------------------------------------------


def _validate_matrix(matrix: Sequence[Sequence[float]]) -> List[List[float]]:
    """Return ``matrix`` as a list of weight lists or raise :class:`InvalidInput`."""

    if matrix is None or isinstance(matrix, (str, bytes)):
        raise InvalidInput("weight matrix must be a sequence of rows")
    try:
        rows = list(matrix)
    except TypeError as exc:
        raise InvalidInput("weight matrix must be a sequence of rows") from exc
    if not rows:
        raise InvalidInput("weight matrix is empty")

    checked: List[List[float]] = []
    cells = 0
    for x, row in enumerate(rows):
        if isinstance(row, (str, bytes)):
            raise InvalidInput(f"row {x} is not a sequence of weights")
        try:
            weights = list(row)
        except TypeError as exc:
            raise InvalidInput(f"row {x} is not a sequence of weights") from exc
        for y, weight in enumerate(weights):
            if isinstance(weight, bool) or not isinstance(weight, Real):
                raise InvalidInput(f"weight at ({x}, {y}) is not a number: {weight!r}")
            if weight != weight:
                raise InvalidInput(f"weight at ({x}, {y}) is NaN")
            if weight < 0:
                raise InvalidInput(f"weight at ({x}, {y}) is negative: {weight!r}")
        cells += len(weights)
        checked.append(weights)

    if cells == 0:
        raise InvalidInput("weight matrix has no cells")
    return checked


def _format_weight(weight: float) -> str:
    if isinstance(weight, float) and weight.is_integer():
        return str(int(weight))
    return str(weight)


Graph = Grid


__all__ = ["Grid", "GridRow", "Graph"]
