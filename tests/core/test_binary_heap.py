import pytest

from grid_astar.core.binary_heap import BinaryHeap
from grid_astar.core.errors import EmptyQueueError


class _Item:
    def __init__(self, name: str, f: float) -> None:
        self.name = name
        self.f = f

    def __repr__(self) -> str:
        return f"_Item({self.name!r}, {self.f})"


def _drain(heap: BinaryHeap) -> list[str]:
    out = []
    while heap.size():
        out.append(heap.pop().name)
    return out


def _assert_heap_property(heap: BinaryHeap) -> None:
    content = heap.content
    for i in range(1, len(content)):
        parent = ((i + 1) >> 1) - 1
        assert content[parent].f <= content[i].f


def test_pop_returns_items_in_score_order():
    heap = BinaryHeap()
    for name, f in [("c", 3), ("a", 1), ("e", 5), ("b", 2), ("d", 4)]:
        heap.push(_Item(name, f))
        _assert_heap_property(heap)
    assert heap.size() == 5
    assert _drain(heap) == ["a", "b", "c", "d", "e"]


def test_pop_empty_raises():
    heap = BinaryHeap()
    with pytest.raises(EmptyQueueError):
        heap.pop()


def test_pop_last_element_empties_heap():
    heap = BinaryHeap()
    item = _Item("only", 1)
    heap.push(item)
    assert heap.pop() is item
    assert len(heap) == 0
    assert not heap
    assert item not in heap


def test_first_child_wins_ties_on_sift_down():
    heap = BinaryHeap()
    a, b, c, d = _Item("a", 0), _Item("b", 5), _Item("c", 5), _Item("d", 9)
    for item in (a, b, c, d):
        heap.push(item)
    assert heap.pop() is a
    assert heap.content[0] is b
    assert heap.pop() is b
    assert heap.pop() is c


def test_equal_scores_do_not_displace_parent_on_push():
    heap = BinaryHeap()
    first, second = _Item("first", 1), _Item("second", 1)
    heap.push(first)
    heap.push(second)
    assert heap.content[0] is first


def test_rescore_after_decrease():
    heap = BinaryHeap()
    items = [_Item(str(i), i) for i in range(1, 8)]
    for item in items:
        heap.push(item)
    items[-1].f = 0
    heap.rescore(items[-1])
    _assert_heap_property(heap)
    assert heap.pop() is items[-1]


def test_rescore_after_increase():
    heap = BinaryHeap()
    items = [_Item(str(i), i) for i in range(1, 8)]
    for item in items:
        heap.push(item)
    items[0].f = 100
    heap.rescore(items[0])
    _assert_heap_property(heap)
    assert _drain(heap) == ["2", "3", "4", "5", "6", "7", "1"]


def test_rescore_unknown_element_raises():
    heap = BinaryHeap()
    heap.push(_Item("a", 1))
    with pytest.raises(KeyError):
        heap.rescore(_Item("b", 0))


def test_remove_arbitrary_element():
    heap = BinaryHeap()
    items = [_Item(str(i), i) for i in range(1, 10)]
    for item in items:
        heap.push(item)
    heap.remove(items[3])
    heap.remove(items[-1])
    _assert_heap_property(heap)
    assert items[3] not in heap
    assert _drain(heap) == ["1", "2", "3", "5", "6", "7", "8"]


def test_custom_score_function():
    heap = BinaryHeap(score_function=lambda item: -item.f)
    for i in range(5):
        heap.push(_Item(str(i), i))
    assert _drain(heap) == ["4", "3", "2", "1", "0"]


def test_scores_are_read_at_comparison_time():
    heap = BinaryHeap()
    a, b = _Item("a", 1), _Item("b", 2)
    heap.push(a)
    a.f = 10
    heap.push(b)
    # a was not rescored, so b only wins if its score is compared to a's new one
    assert heap.content[0] is b
