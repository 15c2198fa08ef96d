"""Exception types raised by the grid search primitives."""

from __future__ import annotations

from typing import Any


class GridSearchError(Exception):
    """Base class for all errors raised by :mod:`grid_astar`."""


class InvalidInput(GridSearchError, ValueError):
    """A weight matrix or search argument is malformed."""


class OutOfBounds(GridSearchError, IndexError):
    """A coordinate or node does not resolve to a node of the grid."""

    def __init__(self, coords: Any, message: str | None = None) -> None:
        self.coords = coords
        super().__init__(message or f"{coords!r} is outside the grid")


class EmptyQueueError(GridSearchError, IndexError):
    """``pop`` was called on an empty :class:`BinaryHeap`."""


__all__ = ["GridSearchError", "InvalidInput", "OutOfBounds", "EmptyQueueError"]
