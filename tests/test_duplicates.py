import pytest

from algolab.duplicates import get_duplicates, has_duplicates

MODES = [False, True]


@pytest.mark.parametrize("naive", MODES)
def test_empty_array(naive):
    assert not has_duplicates([])
    assert sorted(get_duplicates([], naive)) == []


@pytest.mark.parametrize("naive", MODES)
def test_single_element(naive):
    assert not has_duplicates([1])
    assert sorted(get_duplicates([1], naive)) == []


@pytest.mark.parametrize("naive", MODES)
def test_many_elements(naive):
    data = [2, 1, -4, 7]
    assert not has_duplicates(data)
    assert sorted(get_duplicates(data, naive)) == []


@pytest.mark.parametrize("naive", MODES)
def test_many_elements_one_duplicate(naive):
    data = [2, -3, 0, 2, 7, 1]
    assert has_duplicates(data)
    assert sorted(get_duplicates(data, naive)) == [2]


@pytest.mark.parametrize("naive", MODES)
def test_many_elements_many_duplicates(naive):
    data = [2, -3, 0, 2, 1, -3, 4, 1, -1, 2]
    assert has_duplicates(data)
    assert sorted(get_duplicates(data, naive)) == [-3, 1, 2]


@pytest.mark.parametrize("naive", MODES)
def test_single_duplicated_elem(naive):
    data = [4, 4, 4, 4]
    assert has_duplicates(data)
    assert sorted(get_duplicates(data, naive)) == [4]


def test_all_same_large():
    data = [100000] * 100000
    assert has_duplicates(data)
    assert get_duplicates(data) == [100000]


def test_unique_large():
    data = list(range(100000))
    assert not has_duplicates(data)
    assert get_duplicates(data) == []


def test_sorted_mode_returns_ascending():
    assert get_duplicates([5, 3, 5, 1, 3, 1]) == [1, 3, 5]


def test_naive_mode_keeps_first_appearance_order():
    assert get_duplicates([5, 3, 5, 1, 3, 1], naive=True) == [5, 3, 1]