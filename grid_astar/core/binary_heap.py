"""Binary min-heap used as the A* open list."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from .errors import EmptyQueueError


ScoreFunction = Callable[[Any], float]


def _default_score(node: Any) -> float:
    return node.f


class BinaryHeap:
    """Min-heap ordered by ``score_function`` (``node.f`` by default).

    Scores are read at comparison time, so a caller that lowers an element's
    key must call :meth:`rescore` to restore the heap property. Element
    positions are tracked by identity which keeps :meth:`rescore` and
    :meth:`remove` logarithmic.
    """

    def __init__(self, score_function: Optional[ScoreFunction] = None) -> None:
        self.content: List[Any] = []
        self.score_function: ScoreFunction = score_function or _default_score
        self._index: Dict[Any, int] = {}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def push(self, element: Any) -> None:
        """Add ``element`` and let it rise to its place."""

        self.content.append(element)
        self._index[element] = len(self.content) - 1
        self._sift_up(len(self.content) - 1)

    def pop(self) -> Any:
        """Remove and return the element with the lowest score."""

        if not self.content:
            raise EmptyQueueError("Heap is empty, cannot pop element.")
        result = self.content[0]
        end = self.content.pop()
        del self._index[result]
        if self.content:
            self.content[0] = end
            self._index[end] = 0
            self._sift_down(0)
        return result

    def rescore(self, element: Any) -> None:
        """Reposition ``element`` after its score changed."""

        n = self._index[element]
        if self._sift_up(n) == n:
            self._sift_down(n)

    def remove(self, element: Any) -> None:
        """Remove ``element`` from anywhere in the heap."""

        n = self._index.pop(element)
        end = self.content.pop()
        if n == len(self.content):
            return
        self.content[n] = end
        self._index[end] = n
        if self._sift_up(n) == n:
            self._sift_down(n)

    def size(self) -> int:
        return len(self.content)

    def __len__(self) -> int:
        return len(self.content)

    def __bool__(self) -> bool:
        return bool(self.content)

    def __contains__(self, element: Any) -> bool:
        return element in self._index

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _place(self, element: Any, n: int) -> None:
        self.content[n] = element
        self._index[element] = n

    def _sift_up(self, n: int) -> int:
        """Move the element at ``n`` towards the root; return its final index."""

        element = self.content[n]
        score = self.score_function(element)
        while n > 0:
            parent_n = ((n + 1) >> 1) - 1
            parent = self.content[parent_n]
            if score < self.score_function(parent):
                self._place(parent, n)
                n = parent_n
            else:
                break
        self._place(element, n)
        return n

    def _sift_down(self, n: int) -> int:
        """Move the element at ``n`` towards the leaves; return its final index."""

        length = len(self.content)
        element = self.content[n]
        elem_score = self.score_function(element)

        while True:
            child2_n = (n + 1) << 1
            child1_n = child2_n - 1
            swap: Optional[int] = None
            child1_score = elem_score
            if child1_n < length:
                child1_score = self.score_function(self.content[child1_n])
                if child1_score < elem_score:
                    swap = child1_n
            if child2_n < length:
                child2_score = self.score_function(self.content[child2_n])
                if child2_score < (elem_score if swap is None else child1_score):
                    swap = child2_n
            if swap is None:
                break
            self._place(self.content[swap], n)
            n = swap

        self._place(element, n)
        return n


__all__ = ["BinaryHeap", "ScoreFunction"]
