import pytest

from algocraft.insertion_sorts import (
    heap_sort,
    insertion_sort,
    merge_sort,
    selection_sort,
    shell_sort,
)

COMMON_CASES = [
    pytest.param([], [], id="empty"),
    pytest.param([1], [1], id="one_element"),
    pytest.param([1, 2, 3, 4, 5, 6], [1, 2, 3, 4, 5, 6], id="pre_sorted"),
    pytest.param(
        [9, -2, 7, 7, 0, 15, -8, 3, 3, 11, 4, -2, 6],
        [-8, -2, -2, 0, 3, 3, 4, 6, 7, 7, 9, 11, 15],
        id="mixed",
    ),
]


def test_insertion_sort_empty():
    assert insertion_sort([]) == []


def test_insertion_sort_one_element():
    assert insertion_sort(["a"]) == ["a"]


def test_insertion_sort_already_sorted():
    assert insertion_sort(["a", "b", "c"]) == ["a", "b", "c"]


def test_insertion_sort_basic():
    assert insertion_sort(["d", "a", "c", "b"]) == ["a", "b", "c", "d"]


def test_insertion_sort_odd_number_of_elements():
    assert insertion_sort(["d", "a", "c", "e", "b"]) == ["a", "b", "c", "d", "e"]


def test_insertion_sort_repeated_elements():
    assert insertion_sort([542, 542, 542, 542]) == [542, 542, 542, 542]


def test_insertion_sort_leaves_input_untouched():
    source = [3, 1, 2]
    assert insertion_sort(source) == [1, 2, 3]
    assert source == [3, 1, 2]


def test_selection_sort_basic():
    items = ["d", "a", "c", "b"]
    selection_sort(items)
    assert items == ["a", "b", "c", "d"]


def test_selection_sort_pre_sorted():
    items = ["a", "b", "c"]
    selection_sort(items)
    assert items == ["a", "b", "c"]


def test_heap_sort_sorted_array():
    items = [1, 2, 3, 4]
    heap_sort(items)
    assert items == [1, 2, 3, 4]


def test_heap_sort_unsorted_array():
    items = [3, 4, 2, 1]
    heap_sort(items)
    assert items == [1, 2, 3, 4]


def test_heap_sort_odd_number_of_elements():
    items = [3, 4, 2, 1, 7]
    heap_sort(items)
    assert items == [1, 2, 3, 4, 7]


def test_heap_sort_repeated_elements():
    items = [542, 542, 542, 542]
    heap_sort(items)
    assert items == [542, 542, 542, 542]


def test_shell_sort_basic():
    items = [3, 5, 6, 3, 1, 4]
    shell_sort(items)
    assert items == [1, 3, 3, 4, 5, 6]


def test_shell_sort_reverse():
    items = [6, 5, 4, 3, 2, 1]
    shell_sort(items)
    assert items == [1, 2, 3, 4, 5, 6]


def test_merge_sort_basic():
    items = [10, 8, 4, 3, 1, 9, 2, 7, 5, 6]
    merge_sort(items)
    assert items == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]


def test_merge_sort_basic_string():
    items = ["a", "bb", "d", "cc"]
    merge_sort(items)
    assert items == ["a", "bb", "cc", "d"]


def test_merge_sort_reverse_sorted():
    items = [4, 3, 2, 1]
    merge_sort(items)
    assert items == [1, 2, 3, 4]


@pytest.mark.parametrize("items, expected", COMMON_CASES)
def test_selection_sort_common(items, expected):
    data = list(items)
    selection_sort(data)
    assert data == expected


@pytest.mark.parametrize("items, expected", COMMON_CASES)
def test_heap_sort_common(items, expected):
    data = list(items)
    heap_sort(data)
    assert data == expected


@pytest.mark.parametrize("items, expected", COMMON_CASES)
def test_shell_sort_common(items, expected):
    data = list(items)
    shell_sort(data)
    assert data == expected


@pytest.mark.parametrize("items, expected", COMMON_CASES)
def test_merge_sort_common(items, expected):
    data = list(items)
    merge_sort(data)
    assert data == expected


@pytest.mark.parametrize("items, expected", COMMON_CASES)
def test_insertion_sort_common(items, expected):
    assert insertion_sort(list(items)) == expected