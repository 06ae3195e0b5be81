"""Number theory, geometry and matrix helpers."""

from __future__ import annotations

import heapq
import math
from collections import Counter
from typing import Iterable, Iterator, Sequence

FACTORIAL_MODULUS = 1_000_000_009
POWER_MODULUS = 1_000_000_007


def catalan(n: int) -> int:
    """The n-th Catalan number, from the convolution recurrence."""
    if n < 0:
        raise ValueError("n must be non-negative")
    values = [1]
    for _ in range(n):
        values.append(sum(a * b for a, b in zip(values, reversed(values))))
    return values[n]


def max_points_on_line(points: Iterable[tuple[int, int]]) -> int:
    """Largest number of the given integer points that lie on one line."""
    pts = [tuple(point) for point in points]
    if len(pts) < 2:
        return len(pts)
    best = 0
    for index, (x0, y0) in enumerate(pts):
        slopes: Counter[tuple[int, int]] = Counter()
        overlap = vertical = current = 0
        for x, y in pts[index + 1 :]:
            if (x, y) == (x0, y0):
                overlap += 1
            elif x == x0:
                vertical += 1
            else:
                dx, dy = x - x0, y - y0
                divisor = math.gcd(dx, dy)
                dx, dy = dx // divisor, dy // divisor
                if dx < 0:
                    dx, dy = -dx, -dy
                slopes[(dy, dx)] += 1
                current = max(current, slopes[(dy, dx)])
            current = max(current, vertical)
        best = max(best, current + overlap + 1)
    return best


def factorial_mod(n: int) -> int:
    """n! modulo FACTORIAL_MODULUS, computed iteratively."""
    if n < 0:
        raise ValueError("n must be non-negative")
    result = 1
    for factor in range(2, n + 1):
        result = result * factor % FACTORIAL_MODULUS
    return result


def factorial_mod_recursive(n: int) -> int:
    """n! modulo FACTORIAL_MODULUS, computed recursively."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n <= 1:
        return 1
    return (n % FACTORIAL_MODULUS) * factorial_mod_recursive(n - 1) % FACTORIAL_MODULUS


def power_mod(base: int, exponent: int) -> int:
    """base ** exponent modulo POWER_MODULUS, by repeated squaring."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if exponent == 0:
        return 1
    if exponent == 1:
        return base % POWER_MODULUS
    half = power_mod(base, exponent >> 1)
    if exponent & 1:
        return base * half * half % POWER_MODULUS
    return half * half % POWER_MODULUS


def rotate_matrix(matrix: Iterable[Sequence[int]]) -> list[list[int]]:
    """Return a square matrix rotated a quarter turn clockwise."""
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square")
    return [list(column) for column in zip(*reversed(rows))]


def running_medians(values: Iterable[float]) -> Iterator[float]:
    """Yield the median of every prefix of the values, using two heaps."""
    iterator = iter(values)
    try:
        first = next(iterator)
    except StopIteration:
        return
    lower = [-first]  # max-heap of the smaller half, stored negated
    upper: list = []  # min-heap of the larger half
    median = float(first)
    yield median
    for value in iterator:
        if len(lower) > len(upper):
            if value < median:
                heapq.heappush(upper, -heapq.heapreplace(lower, -value))
            else:
                heapq.heappush(upper, value)
            median = (upper[0] - lower[0]) / 2.0
        elif len(lower) == len(upper):
            if value < median:
                heapq.heappush(lower, -value)
                median = float(-lower[0])
            else:
                heapq.heappush(upper, value)
                median = float(upper[0])
        else:
            if value > median:
                heapq.heappush(lower, -heapq.heapreplace(upper, value))
            else:
                heapq.heappush(lower, -value)
            median = (upper[0] - lower[0]) / 2.0
        yield median


def _gap(value: float, low: float, high: float) -> float:
    if value < low:
        return low - value
    if value > high:
        return value - high
    return 0


def distance_point_rectangle(
    x: float, y: float, x_min: float, y_min: float, x_max: float, y_max: float
) -> float:
    """Shortest distance from a point to an axis-aligned rectangle."""
    return math.hypot(_gap(x, x_min, x_max), _gap(y, y_min, y_max))