from hypothesis import given, strategies as st

from arrayalgos.consecutive import longest_consecutive, longest_consecutive_brute

int_lists = st.lists(st.integers(min_value=-30, max_value=30), max_size=30)


def test_worked_example():
    nums = [100, 4, 200, 1, 3, 2]
    assert longest_consecutive(nums) == 4
    assert longest_consecutive_brute(nums) == 4


def test_empty_is_zero():
    assert longest_consecutive([]) == 0
    assert longest_consecutive_brute([]) == 0


def test_duplicates_do_not_extend_run():
    nums = [1, 2, 2, 3]
    assert longest_consecutive(nums) == 3
    assert longest_consecutive_brute(nums) == 3


@given(int_lists)
def test_approaches_agree(nums):
    assert longest_consecutive(nums) == longest_consecutive_brute(nums)


@given(int_lists)
def test_bounds(nums):
    result = longest_consecutive(nums)
    assert result <= len(set(nums))
    assert (result == 0) == (not nums)


@given(st.integers(min_value=-100, max_value=100), st.integers(min_value=1, max_value=30))
def test_full_range(start, length):
    nums = list(range(start, start + length))[::-1]
    assert longest_consecutive(nums) == length
    assert longest_consecutive_brute(nums) == length