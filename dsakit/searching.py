"""Linear and binary search, iterative and recursive."""

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence


def binary_search(items: Iterable[Any], target: Any) -> Optional[int]:
    """Find ``target`` in a sorted copy of ``items``.

    Returns the index of ``target`` within the sorted order, or ``None`` if
    it is absent. The input itself is not reordered.
    """
    data = sorted(items)
    start, end = 0, len(data) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if data[mid] == target:
            return mid
        if data[mid] > target:
            end = mid - 1
        else:
            start = mid + 1
    return None


def binary_search_recursive(items: Sequence[Any], target: Any) -> bool:
    """Report whether ``target`` is in the already sorted sequence ``items``."""

    def search(start: int, end: int) -> bool:
        if start > end:
            return False
        mid = start + (end - start) // 2
        if items[mid] == target:
            return True
        if items[mid] > target:
            return search(start, mid - 1)
        return search(mid + 1, end)

    return search(0, len(items) - 1)


def linear_search(items: Iterable[Any], key: Any) -> bool:
    """Report whether ``key`` occurs in ``items``, scanning front to back."""
    return any(item == key for item in items)


def linear_search_recursive(items: Sequence[Any], key: Any) -> bool:
    """Recursive front-to-back scan for ``key``."""

    def search(index: int) -> bool:
        if index == len(items):
            return False
        if items[index] == key:
            return True
        return search(index + 1)

    return search(0)