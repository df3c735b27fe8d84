import pytest

from algocraft.exchange_sorts import (
    bubble_sort,
    cocktail_shaker_sort,
    comb_sort,
    is_sorted,
    odd_even_sort,
    quick_sort,
    stooge_sort,
)

CASES = [
    pytest.param([6, 5, 4, 3, 2, 1], [1, 2, 3, 4, 5, 6], id="descending"),
    pytest.param([1, 2, 3, 4, 5, 6], [1, 2, 3, 4, 5, 6], id="pre_sorted"),
    pytest.param([], [], id="empty"),
    pytest.param([1], [1], id="one_element"),
    pytest.param([3, 5, 6, 3, 1, 4], [1, 3, 3, 4, 5, 6], id="duplicates"),
    pytest.param(["d", "a", "c", "b"], ["a", "b", "c", "d"], id="strings"),
    pytest.param(
        [9, -2, 7, 7, 0, 15, -8, 3, 3, 11, 4, -2, 6],
        [-8, -2, -2, 0, 3, 3, 4, 6, 7, 7, 9, 11, 15],
        id="mixed",
    ),
]


def test_is_sorted_true_cases():
    assert is_sorted([]) is True
    assert is_sorted(["a"]) is True
    assert is_sorted([1, 2, 3]) is True
    assert is_sorted([0, 1, 1]) is True


def test_is_sorted_false_cases():
    assert is_sorted([1, 0]) is False
    assert is_sorted([2, 3, 1, -1, 5]) is False


@pytest.mark.parametrize("items, expected", CASES)
def test_bubble_sort(items, expected):
    data = list(items)
    bubble_sort(data)
    assert data == expected


@pytest.mark.parametrize("items, expected", CASES)
def test_cocktail_shaker_sort(items, expected):
    data = list(items)
    cocktail_shaker_sort(data)
    assert data == expected


@pytest.mark.parametrize("items, expected", CASES)
def test_comb_sort(items, expected):
    data = list(items)
    comb_sort(data)
    assert data == expected


@pytest.mark.parametrize("items, expected", CASES)
def test_odd_even_sort(items, expected):
    data = list(items)
    odd_even_sort(data)
    assert data == expected


@pytest.mark.parametrize("items, expected", CASES)
def test_quick_sort(items, expected):
    data = list(items)
    quick_sort(data)
    assert data == expected


@pytest.mark.parametrize("items, expected", CASES)
def test_stooge_sort(items, expected):
    data = list(items)
    stooge_sort(data)
    assert data == expected


def test_cocktail_shaker_basic():
    items = [5, 2, 1, 3, 4, 6]
    cocktail_shaker_sort(items)
    assert items == [1, 2, 3, 4, 5, 6]


def test_odd_even_basic():
    items = [3, 5, 1, 2, 4, 6]
    odd_even_sort(items)
    assert items == [1, 2, 3, 4, 5, 6]


def test_odd_even_pre_sorted_long():
    items = list(range(10))
    odd_even_sort(items)
    assert items == list(range(10))


def test_sorted_result_passes_is_sorted():
    items = [9, -2, 7, 7, 0, 15, -8, 3, 3, 11, 4, -2, 6]
    quick_sort(items)
    assert is_sorted(items) is True