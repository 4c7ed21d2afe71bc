"""Small recursive routines: factorial, powers, Fibonacci and friends."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

DIGIT_WORDS = (
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
)


def factorial(n: int) -> int:
    """Return ``n!`` computed recursively."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    if n == 0:
        return 1
    return n * factorial(n - 1)


def power(base: int, exponent: int) -> int:
    """Return ``base`` raised to the non-negative ``exponent``."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if exponent == 0:
        return 1
    return base * power(base, exponent - 1)


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, naive recursion."""
    if n < 0:
        raise ValueError("position must be non-negative")
    if n == 0:
        return 0
    if n == 1:
        return 1
    return fibonacci(n - 1) + fibonacci(n - 2)


def fibonacci_iterative(n: int) -> int:
    """Return the ``n``-th Fibonacci number with a loop."""
    if n < 0:
        raise ValueError("position must be non-negative")
    previous, current = 0, 1
    if n == 0:
        return previous
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def count_distinct_ways(stairs: int) -> int:
    """Count the ways to climb ``stairs`` steps taking one or two at a time."""
    if stairs < 0:
        return 0
    if stairs == 0:
        return 1
    return count_distinct_ways(stairs - 1) + count_distinct_ways(stairs - 2)


def recursive_sum(items: Iterable[int]) -> int:
    """Sum ``items`` recursively."""
    data = tuple(items)

    def total(index: int) -> int:
        if index == len(data):
            return 0
        return data[index] + total(index + 1)

    return total(0)


def is_sorted(items: Sequence[Any]) -> bool:
    """Report whether ``items`` is in non-decreasing order."""

    def check(index: int) -> bool:
        if index + 1 >= len(items):
            return True
        if items[index] > items[index + 1]:
            return False
        return check(index + 1)

    return check(0)


def say_digits(n: int) -> list[str]:
    """Spell the decimal digits of ``n`` as words, most significant first.

    Zero has no digits to say and yields an empty list.
    """
    if n < 0:
        raise ValueError("number must be non-negative")
    if n == 0:
        return []
    rest, digit = divmod(n, 10)
    return say_digits(rest) + [DIGIT_WORDS[digit]]


def reverse_string(text: str) -> str:
    """Return ``text`` reversed by recursive swapping of its ends."""
    chars = list(text)

    def swap(start: int, end: int) -> None:
        if start > end:
            return
        chars[start], chars[end] = chars[end], chars[start]
        swap(start + 1, end - 1)

    swap(0, len(chars) - 1)
    return "".join(chars)


def is_palindrome(text: str) -> bool:
    """Report whether ``text`` reads the same backwards, character for character."""

    def check(start: int, end: int) -> bool:
        if start > end:
            return True
        if text[start] != text[end]:
            return False
        return check(start + 1, end - 1)

    return check(0, len(text) - 1)