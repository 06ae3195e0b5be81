"""Classic comparison sorts; each returns a new sorted list."""

from __future__ import annotations

from typing import Callable, Iterable, MutableSequence, TypeVar

T = TypeVar("T")

_Ranges = tuple[tuple[int, int], tuple[int, int]]


def bubble_sort(items: Iterable[T]) -> list[T]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def _bubble_passes(items: MutableSequence, length: int) -> None:
    if length <= 1:
        return
    for i in range(length - 1):
        if items[i] > items[i + 1]:
            items[i], items[i + 1] = items[i + 1], items[i]
    _bubble_passes(items, length - 1)


def bubble_sort_recursive(items: Iterable[T]) -> list[T]:
    """Bubble sort where each pass recurses on the unsorted prefix."""
    result = list(items)
    _bubble_passes(result, len(result))
    return result


def _smallest_from(items: MutableSequence, start: int) -> int:
    return min(range(start, len(items)), key=items.__getitem__)


def selection_sort(items: Iterable[T]) -> list[T]:
    """Sort by moving the smallest remaining element to the front."""
    result = list(items)
    for start in range(len(result) - 1):
        smallest = _smallest_from(result, start)
        result[start], result[smallest] = result[smallest], result[start]
    return result


def _select_from(items: MutableSequence, start: int) -> None:
    if start >= len(items) - 1:
        return
    smallest = _smallest_from(items, start)
    items[start], items[smallest] = items[smallest], items[start]
    _select_from(items, start + 1)


def selection_sort_recursive(items: Iterable[T]) -> list[T]:
    """Selection sort that recurses on the remaining suffix."""
    result = list(items)
    _select_from(result, 0)
    return result


def insertion_sort(items: Iterable[T]) -> list[T]:
    """Sort by shifting larger elements right and dropping each key in place."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def insertion_sort_swapping(items: Iterable[T]) -> list[T]:
    """Insertion sort that moves each element left by adjacent swaps."""
    result = list(items)
    for i in range(1, len(result)):
        j = i
        while j > 0 and result[j] < result[j - 1]:
            result[j], result[j - 1] = result[j - 1], result[j]
            j -= 1
    return result


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[T]) -> list[T]:
    """Stable top-down merge sort."""
    result = list(items)
    if len(result) <= 1:
        return result
    middle = (len(result) - 1) // 2 + 1
    return _merge(merge_sort(result[:middle]), merge_sort(result[middle:]))


def _quick_sort(
    items: Iterable[T], partition: Callable[[MutableSequence, int, int], _Ranges]
) -> list[T]:
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pending.extend(partition(result, low, high))
    return result


def _partition_first(items: MutableSequence, low: int, high: int) -> _Ranges:
    pivot = items[low]
    boundary = high
    for j in range(high, low, -1):
        if items[j] > pivot:
            items[j], items[boundary] = items[boundary], items[j]
            boundary -= 1
    items[boundary], items[low] = items[low], items[boundary]
    return (low, boundary - 1), (boundary + 1, high)


def _partition_last(items: MutableSequence, low: int, high: int) -> _Ranges:
    pivot = items[high]
    boundary = low
    for j in range(low, high):
        if items[j] < pivot:
            items[boundary], items[j] = items[j], items[boundary]
            boundary += 1
    items[boundary], items[high] = items[high], items[boundary]
    return (low, boundary - 1), (boundary + 1, high)


def _partition_middle(items: MutableSequence, low: int, high: int) -> _Ranges:
    pivot = items[(low + high) // 2]
    left, right = low, high
    while left <= right:
        while items[left] < pivot:
            left += 1
        while items[right] > pivot:
            right -= 1
        if left <= right:
            items[left], items[right] = items[right], items[left]
            left += 1
            right -= 1
    return (low, left - 1), (left, high)


def quick_sort_first_pivot(items: Iterable[T]) -> list[T]:
    """Quicksort taking the first element of each range as the pivot."""
    return _quick_sort(items, _partition_first)


def quick_sort_last_pivot(items: Iterable[T]) -> list[T]:
    """Quicksort taking the last element of each range as the pivot."""
    return _quick_sort(items, _partition_last)


def quick_sort_middle_pivot(items: Iterable[T]) -> list[T]:
    """Quicksort taking the middle element of each range as the pivot."""
    return _quick_sort(items, _partition_middle)