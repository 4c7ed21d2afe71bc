# dsakit

Small, dependency-free implementations of classic algorithms. The package covers sorting, searching, recursion, array helpers and string helpers. None of the functions change their input. Functions that produce a sequence return a new list or string.

## Installation

```
pip install .
```

To install and run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.sorting`

`bubble_sort`, `insertion_sort`, `merge_sort`, `quick_sort` and `selection_sort` each take any iterable and return a new list in ascending order.

- `bubble_sort` stops early once a full pass makes no swap.
- `merge_sort` is stable.
- `quick_sort` uses the first element of each range as its pivot.

### `dsakit.searching`

- `binary_search(items, target)` sorts a copy of `items` and searches that copy. It returns the index of `target` in the sorted order, or `None` if `target` is absent.
- `binary_search_recursive(items, target)` expects an already sorted sequence and returns `True` or `False`.
- `linear_search(items, key)` and `linear_search_recursive(items, key)` return whether `key` occurs in `items`.

### `dsakit.recursion`

- `factorial(n)`, `power(base, exponent)`, `fibonacci(n)` and `fibonacci_iterative(n)` raise `ValueError` for negative input.
- `count_distinct_ways(stairs)` counts the ways to climb `stairs` steps, one or two at a time.
- `recursive_sum(items)` returns the sum of `items`.
- `is_sorted(items)` checks for non-decreasing order.
- `say_digits(n)` spells out the decimal digits as words, for example `say_digits(412)` gives `["four", "one", "two"]`. Zero gives an empty list, and a negative number raises `ValueError`.
- `reverse_string(text)` returns `text` reversed.
- `is_palindrome(text)` compares characters exactly.
- `DIGIT_WORDS` is the tuple of words from `"zero"` to `"nine"`.

### `dsakit.arrays`

- `digital_root(n)` returns the result of repeatedly summing the digits of `n`. It raises `ValueError` for a negative number.
- `array_sum(items)` returns the total of `items`.
- `get_min(items)` and `get_max(items)` raise `ValueError` on empty input.
- `reverse_array(items)` returns the elements in reverse order as a new list.
- `swap_alternate(items)` swaps each element at an even index with its right neighbour. An unpaired last element stays where it is.
- `is_binary_palindrome(n)` checks whether the binary digits of a non-negative `n` read the same both ways.

### `dsakit.strings`

- `name_length(name)` counts the characters before the first NUL character, if there is one.
- `reverse_name(name)` returns `name` reversed.
- `change_case(ch)` lower-cases one ASCII capital letter and returns any other character unchanged. It raises `ValueError` unless `ch` is a single character.
- `check_palindrome(text)` considers only ASCII letters and digits, and ignores letter case.

## Example

```python
from dsakit.sorting import merge_sort
from dsakit.searching import binary_search
from dsakit.recursion import fibonacci
from dsakit.strings import check_palindrome

merge_sort([10, 8, 15, 2, 1, 7, 8, 21])   # [1, 2, 7, 8, 8, 10, 15, 21]
binary_search([12, 4, 20, 1], 12)         # 2
binary_search([12, 4, 20, 1], 5)          # None
fibonacci(10)                             # 55
check_palindrome("c1 O$d@eeD o1c")        # True
```

## What it does not do

`dsakit` is a library of functions only. It has no command-line program and does not prompt for or read input.