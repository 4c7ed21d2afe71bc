"""Classic comparison sorts.

Every function accepts any iterable, leaves it untouched, and returns a new
list in ascending order.
"""

from __future__ import annotations

from typing import Any, Iterable


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs.

    Stops early once a full pass makes no swap.
    """
    data = list(items)
    n = len(data)
    for pass_number in range(1, n):
        swapped = False
        for j in range(n - pass_number):
            if data[j] > data[j + 1]:
                data[j], data[j + 1] = data[j + 1], data[j]
                swapped = True
        if not swapped:
            break
    return data


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    data = list(items)
    for i in range(1, len(data)):
        current = data[i]
        j = i - 1
        while j >= 0 and data[j] > current:
            data[j + 1] = data[j]
            j -= 1
        data[j + 1] = current
    return data


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] <= right[ri]:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    data = list(items)
    if len(data) <= 1:
        return data
    mid = (len(data) - 1) // 2 + 1
    return _merge(merge_sort(data[:mid]), merge_sort(data[mid:]))


def _partition(data: list[Any], start: int, end: int) -> int:
    """Place ``data[start]`` at its final index and split the range around it."""
    pivot = data[start]
    smaller = sum(1 for value in data[start + 1 : end + 1] if value < pivot)
    pivot_index = start + smaller
    data[pivot_index], data[start] = data[start], data[pivot_index]

    i, j = start, end
    while i < pivot_index and j > pivot_index:
        while i < pivot_index and data[i] < pivot:
            i += 1
        while j > pivot_index and data[j] >= pivot:
            j -= 1
        if i < pivot_index and j > pivot_index:
            data[i], data[j] = data[j], data[i]
            i += 1
            j -= 1
    return pivot_index


def _quick_sort(data: list[Any], start: int, end: int) -> None:
    if start >= end:
        return
    p = _partition(data, start, end)
    _quick_sort(data, start, p - 1)
    _quick_sort(data, p + 1, end)


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Quick sort using the first element of each range as pivot."""
    data = list(items)
    _quick_sort(data, 0, len(data) - 1)
    return data


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly selecting the smallest remaining element."""
    data = list(items)
    n = len(data)
    for i in range(n - 1):
        min_index = min(range(i, n), key=data.__getitem__)
        data[min_index], data[i] = data[i], data[min_index]
    return data