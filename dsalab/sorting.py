"""Heap sort."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any


def heapify(items: MutableSequence[Any], n: int, i: int) -> None:
    """Sift ``items[i]`` down within the max-heap ``items[:n]``."""
    while True:
        largest = i
        left = 2 * i + 1
        right = left + 1
        if left < n and items[left] > items[largest]:
            largest = left
        if right < n and items[right] > items[largest]:
            largest = right
        if largest == i:
            return
        items[i], items[largest] = items[largest], items[i]
        i = largest


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``items`` in ascending order."""
    result = list(items)
    n = len(result)
    for i in range(n // 2 - 1, -1, -1):
        heapify(result, n, i)
    for end in range(n - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        heapify(result, end, 0)
    return result