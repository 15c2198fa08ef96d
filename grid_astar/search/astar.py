"""A* search over a :class:`~grid_astar.core.grid.Grid`."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from numbers import Integral
from typing import Any, List, Mapping, Optional, Sequence, Union

from .. import config
from ..core.binary_heap import BinaryHeap
from ..core.errors import InvalidInput, OutOfBounds
from ..core.grid import Grid
from ..core.node import Coord, GridNode
from .heuristics import Heuristic, diagonal, get_heuristic, manhattan

logger = logging.getLogger(__name__)


EndpointLike = Union[GridNode, Sequence[int], "Endpoint"]


# ------------------------------------------------------------------
# Argument types
# ------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class Endpoint:
    """Start or end of a search: either a node or an ``(x, y)`` pair."""

    node: Optional[GridNode] = None
    coords: Optional[Coord] = None

    @classmethod
    def of(cls, value: EndpointLike) -> "Endpoint":
        if isinstance(value, Endpoint):
            return value
        if isinstance(value, GridNode):
            return cls(node=value)
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            raise InvalidInput(f"expected a GridNode or an (x, y) pair, got {value!r}")
        if len(value) != 2 or not all(
            isinstance(v, Integral) and not isinstance(v, bool) for v in value
        ):
            raise InvalidInput(f"expected an (x, y) pair of integers, got {value!r}")
        return cls(coords=(int(value[0]), int(value[1])))

    def resolve(self, grid: Grid) -> GridNode:
        """Return the node of ``grid`` this endpoint refers to."""

        if self.node is not None:
            if self.node not in grid:
                raise OutOfBounds(
                    self.node.coords, f"node {self.node} does not belong to this grid"
                )
            return self.node
        if self.coords is None:
            raise InvalidInput("endpoint has neither a node nor coordinates")
        return grid.node(*self.coords)


@dataclass(slots=True)
class SearchOptions:
    """Optional search behaviour.

    ``closest`` returns the path to the reachable node nearest ``end`` when
    ``end`` itself cannot be reached. ``heuristic`` is a callable or the name
    of a registered heuristic. ``None`` values fall back to the configuration.
    """

    closest: Optional[bool] = None
    heuristic: Union[Heuristic, str, None] = None

    @classmethod
    def of(cls, value: Union["SearchOptions", Mapping[str, Any], None]) -> "SearchOptions":
        if value is None:
            return cls()
        if isinstance(value, SearchOptions):
            return value
        if isinstance(value, Mapping):
            unknown = set(value) - {"closest", "heuristic"}
            if unknown:
                raise InvalidInput(f"unknown search options: {sorted(unknown)}")
            return cls(closest=value.get("closest"), heuristic=value.get("heuristic"))
        raise InvalidInput(f"search options must be a mapping, got {value!r}")


def _pick_heuristic(grid: Grid, heuristic: Union[Heuristic, str, None]) -> Heuristic:
    if heuristic is None:
        heuristic = config.CONFIG.search.heuristic
    if heuristic is None:
        return diagonal if grid.diagonal else manhattan
    if isinstance(heuristic, str):
        return get_heuristic(heuristic)
    if not callable(heuristic):
        raise InvalidInput(f"heuristic must be callable, got {heuristic!r}")
    return heuristic


# ------------------------------------------------------------------
# Search
# ------------------------------------------------------------------
def search(
    grid: Grid,
    start: EndpointLike,
    end: EndpointLike,
    options: Union[SearchOptions, Mapping[str, Any], None] = None,
    *,
    closest: Optional[bool] = None,
    heuristic: Union[Heuristic, str, None] = None,
) -> List[GridNode]:
    """Return the cheapest path from ``start`` to ``end`` on ``grid``.

    The path excludes ``start`` and ends with ``end``. An empty list means no
    path exists, unless ``closest`` is set, in which case the path leads to
    the reachable node with the smallest heuristic distance to ``end``
    (cheaper ``g`` wins ties).

    Keyword arguments take precedence over ``options``.
    """

    opts = SearchOptions.of(options)
    if closest is None:
        closest = opts.closest
    if closest is None:
        closest = config.CONFIG.search.closest
    h_fn = _pick_heuristic(grid, heuristic if heuristic is not None else opts.heuristic)

    grid.clean_dirty()
    start_node = Endpoint.of(start).resolve(grid)
    end_node = Endpoint.of(end).resolve(grid)

    logger.debug(
        "A* search %s -> %s (diagonal=%s, closest=%s)",
        start_node,
        end_node,
        grid.diagonal,
        closest,
    )

    open_heap = BinaryHeap()
    closest_node = start_node

    grid.mark_dirty(start_node)
    start_node.h = h_fn(start_node, end_node)
    open_heap.push(start_node)

    expanded = 0
    while open_heap.size() > 0:
        current = open_heap.pop()

        if current is end_node:
            path = _path_to(current)
            logger.debug(
                "Path found with %s steps after expanding %s nodes", len(path), expanded
            )
            return path

        current.closed = True
        expanded += 1

        for neighbor in grid.neighbors(current):
            if neighbor.closed or neighbor.is_wall():
                continue

            g_score = current.g + neighbor.get_cost(current)
            been_visited = neighbor.visited

            if not been_visited or g_score < neighbor.g:
                # Tracked before any field changes; the heuristic may raise.
                grid.mark_dirty(neighbor)
                if not been_visited:
                    neighbor.h = h_fn(neighbor, end_node)
                neighbor.visited = True
                neighbor.parent = current
                neighbor.g = g_score
                neighbor.f = neighbor.g + neighbor.h
                if closest and (
                    neighbor.h < closest_node.h
                    or (neighbor.h == closest_node.h and neighbor.g < closest_node.g)
                ):
                    closest_node = neighbor

                if been_visited:
                    open_heap.rescore(neighbor)
                else:
                    open_heap.push(neighbor)

    if closest:
        path = _path_to(closest_node)
        logger.debug(
            "End %s unreachable; returning %s steps to closest node %s",
            end_node,
            len(path),
            closest_node,
        )
        return path

    logger.debug("No path to %s after expanding %s nodes", end_node, expanded)
    return []


def _path_to(node: GridNode) -> List[GridNode]:
    path: List[GridNode] = []
    current = node
    while current.parent is not None:
        path.append(current)
        current = current.parent
    path.reverse()
    return path


__all__ = ["search", "SearchOptions", "Endpoint", "EndpointLike"]
