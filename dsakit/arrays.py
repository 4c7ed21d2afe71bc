"""Everyday array utilities."""

from __future__ import annotations

from typing import Any, Iterable


def digital_root(n: int) -> int:
    """Return the result of repeatedly summing the digits of ``n``."""
    if n < 0:
        raise ValueError("number must be non-negative")
    if n == 0:
        return 0
    return 1 + (n - 1) % 9


def array_sum(items: Iterable[int]) -> int:
    """Return the total of ``items``."""
    return sum(items)


def get_min(items: Iterable[Any]) -> Any:
    """Return the smallest element; raise ValueError if there is none."""
    data = list(items)
    if not data:
        raise ValueError("cannot take the minimum of an empty sequence")
    smallest = data[0]
    for value in data[1:]:
        if value < smallest:
            smallest = value
    return smallest


def get_max(items: Iterable[Any]) -> Any:
    """Return the largest element; raise ValueError if there is none."""
    data = list(items)
    if not data:
        raise ValueError("cannot take the maximum of an empty sequence")
    largest = data[0]
    for value in data[1:]:
        if value > largest:
            largest = value
    return largest


def reverse_array(items: Iterable[Any]) -> list[Any]:
    """Return the elements of ``items`` in reverse order as a new list."""
    data = list(items)
    start, end = 0, len(data) - 1
    while start < end:
        data[start], data[end] = data[end], data[start]
        start += 1
        end -= 1
    return data


def swap_alternate(items: Iterable[Any]) -> list[Any]:
    """Swap each element at an even index with its right neighbour.

    A trailing unpaired element stays where it is.
    """
    data = list(items)
    for i in range(0, len(data) - 1, 2):
        data[i], data[i + 1] = data[i + 1], data[i]
    return data


def is_binary_palindrome(n: int) -> bool:
    """Report whether the binary digits of ``n`` read the same both ways."""
    if n < 0:
        raise ValueError("number must be non-negative")
    bits = []
    while n >= 1:
        n, bit = divmod(n, 2)
        bits.append(bit)
    return bits == bits[::-1]