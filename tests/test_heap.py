import pytest

from arbor.heap import MaxHeap, is_heap
from arbor.tree import Node

SAMPLE = [79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95]


def test_is_heap_none_is_false():
    assert is_heap(None) is False


def test_is_heap_single_node():
    assert is_heap(Node(98)) is True


def test_is_heap_valid_tree():
    root = Node(10)
    root.insert_left(5)
    root.insert_right(3)
    root.left.insert_left(4)
    assert is_heap(root) is True


def test_is_heap_equal_values_allowed():
    root = Node(7)
    root.insert_left(7)
    root.insert_right(7)
    assert is_heap(root) is True


def test_is_heap_child_greater_fails():
    root = Node(10)
    root.insert_left(5)
    root.insert_right(30)
    assert is_heap(root) is False


def test_is_heap_incomplete_fails():
    root = Node(10)
    root.insert_right(5)
    assert is_heap(root) is False


def test_is_heap_deep_violation_fails():
    root = Node(10)
    root.insert_left(5)
    root.insert_right(3)
    root.left.insert_left(6)
    assert is_heap(root) is False


def test_empty_heap():
    heap = MaxHeap()
    assert heap.root is None
    assert len(heap) == 0
    assert not heap


def test_insert_first_becomes_root():
    heap = MaxHeap()
    node = heap.insert(98)
    assert node is heap.root
    assert node.value == 98


def test_insert_returns_node_holding_value():
    heap = MaxHeap([1, 2])
    node = heap.insert(3)
    assert node.value == 3
    assert node is heap.root
    assert list(heap.root.levelorder()) == [3, 1, 2]


def test_insert_small_value_stays_low():
    heap = MaxHeap([50, 40])
    node = heap.insert(10)
    assert node is heap.root.right
    assert node.value == 10


def test_built_heap_is_valid():
    heap = MaxHeap(SAMPLE)
    assert is_heap(heap.root)
    assert len(heap) == len(SAMPLE)
    assert heap.root.value == max(SAMPLE)
    assert sorted(heap.root.levelorder()) == sorted(SAMPLE)


def test_heap_remains_valid_after_each_insert():
    heap = MaxHeap()
    for count, value in enumerate(SAMPLE, start=1):
        heap.insert(value)
        assert is_heap(heap.root)
        assert len(heap) == count


def test_extract_empty_raises():
    with pytest.raises(IndexError):
        MaxHeap().extract()


def test_extract_single_empties_heap():
    heap = MaxHeap([42])
    assert heap.extract() == 42
    assert heap.root is None


def test_extract_small_heap_shape():
    heap = MaxHeap([1, 2, 3])
    assert heap.extract() == 3
    assert list(heap.root.levelorder()) == [2, 1]


def test_extract_keeps_heap_valid():
    heap = MaxHeap(SAMPLE)
    remaining = sorted(SAMPLE, reverse=True)
    while remaining:
        assert heap.extract() == remaining.pop(0)
        if remaining:
            assert is_heap(heap.root)
            assert len(heap) == len(remaining)
    assert heap.root is None


def test_to_sorted_list_descending_and_drains():
    heap = MaxHeap(SAMPLE)
    assert heap.to_sorted_list() == sorted(SAMPLE, reverse=True)
    assert heap.root is None
    assert len(heap) == 0


def test_to_sorted_list_with_duplicates():
    values = [5, 3, 5, 1, 3, 9, 9]
    assert MaxHeap(values).to_sorted_list() == sorted(values, reverse=True)


def test_to_sorted_list_empty():
    assert MaxHeap().to_sorted_list() == []


@pytest.mark.parametrize("count", [1, 2, 3, 7, 8, 15, 16, 31])
def test_ascending_input_sorts(count):
    values = list(range(count))
    heap = MaxHeap(values)
    assert is_heap(heap.root)
    assert heap.to_sorted_list() == values[::-1]