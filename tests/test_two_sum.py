import pytest
from hypothesis import given, strategies as st

from arrayalgos.two_sum import two_sum, two_sum_brute

int_lists = st.lists(st.integers(min_value=-30, max_value=30), max_size=25)


@pytest.mark.parametrize("func", [two_sum, two_sum_brute])
def test_worked_example(func):
    assert func([2, 7, 11, 15], 9) == (0, 1)


@pytest.mark.parametrize("func", [two_sum, two_sum_brute])
def test_same_value_twice(func):
    assert func([3, 3], 6) == (0, 1)


@pytest.mark.parametrize("func", [two_sum, two_sum_brute])
def test_no_pair(func):
    assert func([1, 2, 4], 100) is None
    assert func([], 0) is None


@given(int_lists, st.integers(min_value=-60, max_value=60))
def test_results_valid_and_consistent(nums, target):
    fast = two_sum(nums, target)
    slow = two_sum_brute(nums, target)
    assert (fast is None) == (slow is None)
    for pair in (fast, slow):
        if pair is not None:
            i, j = pair
            assert i < j
            assert nums[i] + nums[j] == target