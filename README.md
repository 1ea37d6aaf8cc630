# arrayalgos

A small library of classic array algorithms. Most problems come in two or
more versions: a straightforward quadratic one and a faster one. Within the
conditions each fast version states (see below), the versions agree, so the
simple one can serve as a reference for the fast one.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Functions |
| --- | --- |
| `arrayalgos.stock` | `max_profit_brute`, `max_profit` |
| `arrayalgos.subarray_sum` | `max_subarray_brute`, `max_subarray_prefix`, `max_subarray` |
| `arrayalgos.leaders` | `leaders_brute`, `leaders` |
| `arrayalgos.longest_sum_k` | `longest_subarray_sum_k_brute`, `longest_subarray_sum_k` |
| `arrayalgos.majority` | `majority_element_brute`, `majority_element_counting`, `majority_element` |
| `arrayalgos.rearrange` | `rearrange_by_sign` |
| `arrayalgos.matrix_zeroes` | `set_zeroes_brute`, `set_zeroes_marked`, `set_zeroes` |
| `arrayalgos.sort012` | `sort_colors_counting`, `sort_colors` |
| `arrayalgos.two_sum` | `two_sum_brute`, `two_sum` |
| `arrayalgos.consecutive` | `longest_consecutive_brute`, `longest_consecutive` |

## Examples

```python
from arrayalgos.stock import max_profit
from arrayalgos.subarray_sum import max_subarray
from arrayalgos.two_sum import two_sum
from arrayalgos.sort012 import sort_colors
from arrayalgos.matrix_zeroes import set_zeroes

max_profit([7, 1, 5, 3, 6, 4])                 # 5: buy at 1, sell at 6
max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4])  # 6: the run [4, -1, 2, 1]
two_sum([2, 7, 11, 15], 9)                     # (0, 1)

colours = [2, 0, 2, 1, 1, 0]
sort_colors(colours)                           # sorts in place
colours                                        # [0, 0, 1, 1, 2, 2]

grid = [[1, 1, 1], [1, 0, 1], [1, 1, 1]]
set_zeroes(grid)                               # zeroes the row and column of each 0
grid                                           # [[1, 0, 1], [0, 0, 0], [1, 0, 1]]
```

## Behaviour worth knowing

- `max_profit`, `max_subarray`, `max_subarray_brute`, `max_subarray_prefix`
  and `leaders` raise `ValueError` on an empty input. `max_profit_brute`
  returns `0` and `leaders_brute` returns `[]` instead.
- Profits are never negative: if prices only fall, the answer is `0`.
- `longest_subarray_sum_k` uses a sliding window and is correct only when
  every number is non-negative; `longest_subarray_sum_k_brute` works for any
  integers. Both return `0` when no subarray sums to `k`.
- `majority_element_brute` and `majority_element_counting` return `None`
  when no value occurs more than `len(nums) // 2` times.
  `majority_element` (Boyer-Moore voting) assumes a majority exists and
  returns its final candidate; it raises `ValueError` on an empty list.
- `rearrange_by_sign` returns a new list with positives at even positions and
  non-positive numbers (zero included) at odd positions, each group in its
  original order. It raises `ValueError` unless the two groups are equally
  large.
- `two_sum` and `two_sum_brute` return a tuple of two indices, or `None` when
  no pair adds up to the target.
- `longest_consecutive` accepts any iterable of integers; duplicates are
  ignored.

The functions that change their input, `sort_colors`, `sort_colors_counting`
and the `set_zeroes` family, do so in place and return `None`, just as
`list.sort` does. The others return a new value and leave their input as it
was.

## What this package does not do

It is a library only: there is no command-line tool, and nothing reads or
writes files.