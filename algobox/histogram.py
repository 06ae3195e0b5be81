"""Largest rectangles in histograms and binary matrices."""

from __future__ import annotations

from typing import Iterable, Sequence


def largest_rectangle_area(heights: Iterable[int]) -> int:
    """Area of the largest rectangle under a histogram of bar heights."""
    bars = list(heights)
    stack: list[int] = []
    best = 0
    for right, height in enumerate([*bars, None]):
        while stack and (height is None or bars[stack[-1]] > height):
            top = stack.pop()
            left = stack[-1] + 1 if stack else 0
            best = max(best, bars[top] * (right - left))
        stack.append(right)
    return best


def max_rectangle_in_binary_matrix(matrix: Iterable[Sequence[int]]) -> int:
    """Area of the largest rectangle made only of non-zero cells."""
    rows = [list(row) for row in matrix]
    if not rows:
        return 0
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all rows must have the same length")
    column_heights = [0] * width
    best = 0
    for row in rows:
        column_heights = [
            0 if cell == 0 else height + 1 for height, cell in zip(column_heights, row)
        ]
        best = max(best, largest_rectangle_area(column_heights))
    return best