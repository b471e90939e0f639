import random

import pytest

from rtlab.sum_of_n import four_sum, three_sum, three_sum_closest, two_sum


def _random_lists(seed, count=40):
    rng = random.Random(seed)
    return [[rng.randint(-6, 6) for _ in range(rng.randint(0, 12))] for _ in range(count)]


def test_two_sum_returns_current_and_complement():
    assert two_sum([2, 7, 11, 15], 9) == [7, 2]


def test_two_sum_no_pair():
    assert two_sum([1, 2, 3], 100) == []


@pytest.mark.parametrize("nums", _random_lists(1))
def test_two_sum_pair_sums_to_target(nums):
    result = two_sum(nums, 3)
    if result:
        assert sum(result) == 3
        assert all(value in nums for value in result)
    else:
        assert all(3 - a not in nums[:i] for i, a in enumerate(nums))


def test_three_sum_classic():
    assert three_sum([-1, 0, 1, 2, -1, -4]) == [[-1, -1, 2], [-1, 0, 1]]


def test_three_sum_too_short():
    assert three_sum([0, 0]) == []


def test_three_sum_does_not_mutate_input():
    nums = [3, -1, -2, 0]
    three_sum(nums)
    assert nums == [3, -1, -2, 0]


@pytest.mark.parametrize("nums", _random_lists(2))
def test_three_sum_invariants(nums):
    result = three_sum(nums)
    assert all(sum(t) == 0 for t in result)
    assert all(t == sorted(t) for t in result)
    assert len({tuple(t) for t in result}) == len(result)


def test_three_sum_closest_classic():
    assert three_sum_closest([-1, 2, 1, -4], 1) == 2


def test_three_sum_closest_exact():
    assert three_sum_closest([0, 1, 2, 5], 3) == 3


def test_three_sum_closest_too_short():
    assert three_sum_closest([1, 2], 10) == 0


def test_four_sum_classic():
    assert four_sum([1, 0, -1, 0, -2, 2], 0) == [
        [-2, -1, 1, 2],
        [-2, 0, 0, 2],
        [-1, 0, 0, 1],
    ]


def test_four_sum_empty():
    assert four_sum([], 0) == []


@pytest.mark.parametrize("nums", _random_lists(3))
def test_four_sum_invariants(nums):
    result = four_sum(nums, 2)
    assert all(sum(q) == 2 for q in result)
    assert all(q == sorted(q) for q in result)
    assert len({tuple(q) for q in result}) == len(result)