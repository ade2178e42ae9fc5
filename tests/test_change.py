import pytest

from algolab.change import get_change


def test_zero_amount():
    assert sorted(get_change([1], 0)) == []


def test_one_denomination():
    assert sorted(get_change([1], 3)) == [1, 1, 1]


def test_several_denominations():
    assert sorted(get_change([2, 3, 4], 3)) == [3]


def test_several_denominations_many_coins():
    assert sorted(get_change([3, 2, 4], 5)) == sorted([3, 2])


def test_several_denominations_several_solutions():
    answer = sorted(get_change([1, 2, 3], 7))
    assert answer in (sorted([3, 3, 1]), sorted([2, 2, 3]))


def test_greedy_must_fail():
    assert sorted(get_change([6, 1, 4], 8)) == [4, 4]


def test_greedy_works_too():
    assert sorted(get_change([1, 5, 10], 27)) == sorted([10, 10, 5, 1, 1])


def test_greedy_works_too_2():
    assert sorted(get_change([2, 5, 1, 10], 27)) == sorted([10, 10, 5, 2])


def test_greedy_works_again():
    assert sorted(get_change([9, 5, 1], 27)) == [9, 9, 9]


def test_greedy_fails_again():
    assert sorted(get_change([1, 6, 9], 30)) == sorted([6, 6, 9, 9])


def test_greedy_trap():
    assert sorted(get_change([3, 5, 6], 13)) == sorted([5, 5, 3])


def test_impossible_amount_raises():
    with pytest.raises(ValueError):
        get_change([2], 3)


def test_negative_amount_raises():
    with pytest.raises(ValueError):
        get_change([1], -1)


def test_non_positive_denomination_raises():
    with pytest.raises(ValueError):
        get_change([0, 1], 3)