"""Assorted algorithms over strings, integers and sequences."""

from __future__ import annotations

import heapq
from collections import Counter, deque
from dataclasses import dataclass
from itertools import islice, zip_longest
from operator import itemgetter
from typing import Hashable, Iterable, Mapping, Sequence, TypeVar

T = TypeVar("T")


def _bit(char: str) -> int:
    if char not in ("0", "1"):
        raise ValueError(f"not a binary digit: {char!r}")
    return int(char)


def add_binary(a: str, b: str) -> str:
    """Add two binary numbers given as strings of '0' and '1'."""
    digits = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        total = carry + _bit(x) + _bit(y)
        digits.append(str(total % 2))
        carry = total // 2
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def equal_sum_xor_count(n: int) -> int:
    """Count the x in [0, n] for which n + x equals n ^ x."""
    if n < 0:
        raise ValueError("n must be non-negative")
    zero_bits = n.bit_length() - bin(n).count("1")
    return 1 << zero_bits


@dataclass(frozen=True)
class Job:
    """A unit-time job with a deadline and a profit."""

    id: Hashable
    deadline: int
    profit: int


def schedule_jobs(jobs: Iterable[Job]) -> list:
    """Greedily schedule jobs by profit; return the ids in slot order."""
    ordered = sorted(jobs, key=lambda job: job.profit, reverse=True)
    slots: list[Job | None] = [None] * len(ordered)
    for job in ordered:
        for slot in range(min(len(ordered), job.deadline) - 1, -1, -1):
            if slots[slot] is None:
                slots[slot] = job
                break
    return [job.id for job in slots if job is not None]


def largest_value(mapping: Mapping[int, int]) -> tuple[int, int]:
    """Return the (key, value) pair with the largest positive value.

    Keys are visited in ascending order, so the smallest key wins a tie.
    When no value exceeds zero, (0, 0) is returned.
    """
    best = (0, 0)
    for key in sorted(mapping):
        if mapping[key] > best[1]:
            best = (key, mapping[key])
    return best


def longest_unique_substring(text: str) -> int:
    """Length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for index, char in enumerate(text):
        start = max(start, last_seen.get(char, -1) + 1)
        best = max(best, index - start + 1)
        last_seen[char] = index
    return best


def min_operations_to_equalize(values: Iterable[int]) -> int:
    """Minimum unit decrements needed to make every value equal."""
    items = list(values)
    if not items:
        return 0
    return sum(items) - len(items) * min(items)


def max_disjoint_intervals(
    intervals: Iterable[tuple[int, int]],
) -> list[tuple[int, int]]:
    """Pick a maximal set of non-overlapping closed intervals by end point."""
    ordered = sorted(intervals, key=itemgetter(1))
    if not ordered:
        return []
    chosen = [tuple(ordered[0])]
    end = ordered[0][1]
    for start, stop in ordered[1:]:
        if start > end:
            chosen.append((start, stop))
            end = stop
    return chosen


def sliding_window_max(values: Iterable[int], k: int) -> list[int]:
    """Maximum of every contiguous window of size k."""
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError("window size must be between 1 and the number of values")
    window: deque[int] = deque()
    maxima = []
    for index, value in enumerate(items):
        while window and window[0] <= index - k:
            window.popleft()
        while window and items[window[-1]] <= value:
            window.pop()
        window.append(index)
        if index >= k - 1:
            maxima.append(items[window[0]])
    return maxima


def median_of_sorted(a: Sequence[int], b: Sequence[int]) -> float:
    """Median of the union of two sorted sequences."""
    total = len(a) + len(b)
    if total == 0:
        raise ValueError("median of no values")
    previous = current = None
    for value in islice(heapq.merge(a, b), total // 2 + 1):
        previous, current = current, value
    if total % 2:
        return float(current)
    return (previous + current) / 2


def _count_power_sums(x: int, n: int, base: int, partial: int) -> int:
    ways = 0
    power = base**n
    while power + partial < x:
        ways += _count_power_sums(x, n, base + 1, partial + power)
        base += 1
        power = base**n
    if power + partial == x:
        ways += 1
    return ways


def count_power_sums(x: int, n: int) -> int:
    """Number of ways to write x as a sum of n-th powers of distinct naturals."""
    if n < 1:
        raise ValueError("the exponent must be at least 1")
    return _count_power_sums(x, n, 1, 0)


def power_set(items: Iterable[T]) -> list[tuple[T, ...]]:
    """Every subset, ordered by the binary counter that selects it."""
    pool = list(items)
    return [
        tuple(item for bit, item in enumerate(pool) if mask >> bit & 1)
        for mask in range(1 << len(pool))
    ]


def min_length_after_replacements(text: str) -> int:
    """Shortest length reachable by replacing two different adjacent letters
    of 'a', 'b', 'c' with the third one."""
    counts = Counter(text)
    unknown = set(counts) - set("abc")
    if unknown:
        raise ValueError(f"only 'a', 'b' and 'c' are allowed, got {sorted(unknown)}")
    if len(counts) == 1:
        return len(text)
    parities = {counts[letter] % 2 for letter in "abc"}
    return 1 if len(parities) == 2 else 2


def primes_up_to(n: int) -> list[int]:
    """All primes p with 2 <= p <= n, by the sieve of Eratosthenes."""
    if n < 2:
        return []
    is_prime = bytearray([1]) * (n + 1)
    factor = 2
    while factor * factor <= n:
        is_prime[factor * factor :: factor] = bytes(
            len(range(factor * factor, n + 1, factor))
        )
        factor += 1
    return [number for number in range(2, n + 1) if is_prime[number]]


def max_window_sum(values: Iterable[int], k: int) -> int:
    """Largest sum of k consecutive values."""
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError("window size must be between 1 and the number of values")
    window = sum(items[:k])
    best = window
    for leaving, entering in zip(items, items[k:]):
        window += entering - leaving
        best = max(best, window)
    return best