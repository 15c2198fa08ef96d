"""A* shortest paths on weighted 2D grids."""

from .core.binary_heap import BinaryHeap
from .core.errors import EmptyQueueError, GridSearchError, InvalidInput, OutOfBounds
from .core.grid import Graph, Grid
from .core.node import GridNode
from .search.astar import Endpoint, SearchOptions, search
from .search.heuristics import HEURISTICS, diagonal, get_heuristic, manhattan

__all__ = [
    "BinaryHeap",
    "Endpoint",
    "EmptyQueueError",
    "Graph",
    "Grid",
    "GridNode",
    "GridSearchError",
    "HEURISTICS",
    "InvalidInput",
    "OutOfBounds",
    "SearchOptions",
    "diagonal",
    "get_heuristic",
    "manhattan",
    "search",
]
