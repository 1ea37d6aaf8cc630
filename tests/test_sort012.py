import pytest
from hypothesis import given, strategies as st

from arrayalgos.sort012 import sort_colors, sort_colors_counting

colors = st.lists(st.sampled_from([0, 1, 2]), max_size=40)


@pytest.mark.parametrize("func", [sort_colors, sort_colors_counting])
def test_worked_example(func):
    nums = [2, 0, 2, 1, 1, 0]
    func(nums)
    assert nums == [0, 0, 1, 1, 2, 2]


@pytest.mark.parametrize("func", [sort_colors, sort_colors_counting])
def test_empty(func):
    nums = []
    func(nums)
    assert nums == []


def test_counting_treats_other_values_as_two():
    nums = [5, 0]
    sort_colors_counting(nums)
    assert nums == [0, 2]


@given(colors)
def test_dutch_flag_sorts(nums):
    expected = sorted(nums)
    sort_colors(nums)
    assert nums == expected


@given(colors)
def test_counting_sorts(nums):
    expected = sorted(nums)
    sort_colors_counting(nums)
    assert nums == expected