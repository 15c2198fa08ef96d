"""Distance estimates used to guide the A* search.

See http://theory.stanford.edu/~amitp/GameProgramming/Heuristics.html
"""

from __future__ import annotations

import math
from typing import Callable, Dict

from ..core.errors import InvalidInput
from ..core.node import GridNode


Heuristic = Callable[[GridNode, GridNode], float]


def manhattan(pos0: GridNode, pos1: GridNode) -> float:
    """Return the Manhattan distance between two nodes.

    Admissible on 4-neighbour grids whose weights are at least 1.
    """

    d1 = abs(pos1.x - pos0.x)
    d2 = abs(pos1.y - pos0.y)
    return d1 + d2


def diagonal(pos0: GridNode, pos1: GridNode) -> float:
    """Return the octile distance between two nodes (``D=1``, ``D2=sqrt(2)``)."""

    d = 1
    d2 = math.sqrt(2)
    dx = abs(pos1.x - pos0.x)
    dy = abs(pos1.y - pos0.y)
    return (d * (dx + dy)) + ((d2 - (2 * d)) * min(dx, dy))


HEURISTICS: Dict[str, Heuristic] = {
    "manhattan": manhattan,
    "diagonal": diagonal,
}


def get_heuristic(name: str) -> Heuristic:
    """Return the registered heuristic called ``name``."""

    try:
        return HEURISTICS[name.lower()]
    except (KeyError, AttributeError):
        known = ", ".join(sorted(HEURISTICS))
        raise InvalidInput(f"unknown heuristic {name!r}; expected one of: {known}") from None


__all__ = ["Heuristic", "manhattan", "diagonal", "HEURISTICS", "get_heuristic"]
