import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.recursion import (
    count_distinct_ways,
    factorial,
    fibonacci,
    fibonacci_iterative,
    is_palindrome,
    is_sorted,
    power,
    recursive_sum,
    reverse_string,
    say_digits,
)


@pytest.mark.parametrize("n", range(15))
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_negative_raises():
    with pytest.raises(ValueError):
        factorial(-1)


@given(st.integers(-10, 10), st.integers(0, 12))
def test_power_matches_builtin(base, exponent):
    assert power(base, exponent) == base**exponent


def test_power_negative_exponent_raises():
    with pytest.raises(ValueError):
        power(2, -1)


def test_fibonacci_base_cases():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1


@pytest.mark.parametrize("n", range(2, 18))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


@pytest.mark.parametrize("n", range(18))
def test_fibonacci_iterative_agrees(n):
    assert fibonacci_iterative(n) == fibonacci(n)


@pytest.mark.parametrize("func", [fibonacci, fibonacci_iterative])
def test_fibonacci_negative_raises(func):
    with pytest.raises(ValueError):
        func(-3)


def test_count_distinct_ways_base_cases():
    assert count_distinct_ways(-1) == 0
    assert count_distinct_ways(0) == 1


@pytest.mark.parametrize("stairs", range(15))
def test_count_distinct_ways_is_shifted_fibonacci(stairs):
    assert count_distinct_ways(stairs) == fibonacci(stairs + 1)


@given(st.lists(st.integers(-100, 100), max_size=50))
def test_recursive_sum_matches_sum(data):
    assert recursive_sum(data) == sum(data)


def test_recursive_sum_source_example():
    data = [1, 2, 8, 5, 7]
    assert recursive_sum(data) == sum(data)


@given(st.lists(st.integers(-20, 20), max_size=40))
def test_is_sorted_property(data):
    assert is_sorted(data) == (data == sorted(data))


def test_is_sorted_source_example():
    assert is_sorted([1, 2, 3, 4, 8]) is True
    assert is_sorted([1, 3, 2]) is False


def test_say_digits_words():
    assert say_digits(123) == ["one", "two", "three"]
    assert say_digits(0) == []


@given(st.integers(1, 10**12))
def test_say_digits_one_word_per_digit(n):
    words = say_digits(n)
    assert len(words) == len(str(n))
    assert words[-1] == say_digits(n % 10)[0] if n % 10 else words[-1] == "zero"


def test_say_digits_negative_raises():
    with pytest.raises(ValueError):
        say_digits(-5)


@given(st.text(max_size=60))
def test_reverse_string_matches_slice(text):
    assert reverse_string(text) == text[::-1]
    assert reverse_string(reverse_string(text)) == text


def test_is_palindrome_source_example():
    assert is_palindrome("abcdba") is False


@given(st.text(max_size=40))
def test_is_palindrome_mirrored_text(text):
    assert is_palindrome(text + text[::-1]) is True
    assert is_palindrome(text) == (text == text[::-1])