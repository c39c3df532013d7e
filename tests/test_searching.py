import pytest

from drillbox.searching import binary_search, largest, linear_search

DATA = [4, 9, -2, 9, 15, 0, 4]


@pytest.mark.parametrize("key", sorted(set(DATA)))
def test_linear_search_finds_first(key):
    index = linear_search(DATA, key)
    assert index == DATA.index(key)


def test_linear_search_missing():
    assert linear_search(DATA, 100) is None
    assert linear_search([], 1) is None


@pytest.mark.parametrize("key", [-5, 0, 3, 8, 21, 34])
def test_binary_search_finds_each(key):
    items = [-5, 0, 3, 8, 21, 34]
    index = binary_search(items, key)
    assert items[index] == key


def test_binary_search_missing():
    items = [1, 3, 5, 7]
    for key in (0, 2, 4, 6, 8):
        assert binary_search(items, key) is None
    assert binary_search([], 1) is None


def test_binary_search_duplicates_lands_on_key():
    items = sorted(DATA)
    assert items[binary_search(items, 9)] == 9


def test_largest_matches_max():
    assert largest(DATA) == max(DATA)
    assert largest(iter(DATA)) == max(DATA)


def test_largest_empty_raises():
    with pytest.raises(ValueError):
        largest([])