"""Dynamic-programming algorithms: coins, tilings, subsets and subarrays."""

from __future__ import annotations

from functools import cache
from itertools import accumulate
from typing import Iterable, Sequence


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative")


def _coin_values(coins: Iterable[int]) -> list[int]:
    denominations = list(coins)
    if any(coin <= 0 for coin in denominations):
        raise ValueError("coin values must be positive")
    return denominations


def binomial_coefficient(n: int, k: int) -> int:
    """Number of ways to choose k items out of n, from Pascal's triangle."""
    _non_negative("n", n)
    _non_negative("k", k)
    if k > n:
        return 0
    row = [1]
    for _ in range(n):
        row = [1, *(left + right for left, right in zip(row, row[1:])), 1]
    return row[k]


def min_coins(coins: Iterable[int], total: int) -> int:
    """Fewest coins, each usable any number of times, that add up to total."""
    denominations = _coin_values(coins)
    _non_negative("total", total)
    best: list[int | None] = [0]
    for amount in range(1, total + 1):
        options = [
            best[amount - coin]
            for coin in denominations
            if coin <= amount and best[amount - coin] is not None
        ]
        best.append(min(options) + 1 if options else None)
    if best[total] is None:
        raise ValueError(f"{total} cannot be made from the given coins")
    return best[total]


def min_coins_recursive(coins: Iterable[int], total: int) -> int:
    """Fewest coins that add up to total, by memoised recursion."""
    denominations = _coin_values(coins)
    _non_negative("total", total)

    @cache
    def solve(amount: int) -> int | None:
        if amount == 0:
            return 0
        options = [
            result
            for result in (solve(amount - coin) for coin in denominations if coin <= amount)
            if result is not None
        ]
        return min(options) + 1 if options else None

    result = solve(total)
    if result is None:
        raise ValueError(f"{total} cannot be made from the given coins")
    return result


def count_coin_sequences(coins: Iterable[int], total: int) -> int:
    """Number of ordered coin sequences that add up to total."""
    denominations = _coin_values(coins)
    _non_negative("total", total)
    ways = [1]
    for amount in range(1, total + 1):
        ways.append(sum(ways[amount - coin] for coin in denominations if coin <= amount))
    return ways[total]


def count_coin_sequences_recursive(coins: Iterable[int], total: int) -> int:
    """Number of ordered coin sequences that add up to total, recursively."""
    denominations = _coin_values(coins)
    _non_negative("total", total)

    @cache
    def solve(amount: int) -> int:
        if amount == 0:
            return 1
        return sum(solve(amount - coin) for coin in denominations if coin <= amount)

    return solve(total)


def count_coin_combinations(coins: Iterable[int], total: int) -> int:
    """Number of unordered coin multisets that add up to total, recursively."""
    denominations = _coin_values(coins)
    _non_negative("total", total)

    @cache
    def solve(used: int, amount: int) -> int:
        if amount == 0:
            return 1
        if amount < 0 or used <= 0:
            return 0
        return solve(used - 1, amount) + solve(used, amount - denominations[used - 1])

    return solve(len(denominations), total)


def count_coin_combinations_table(coins: Iterable[int], total: int) -> int:
    """Number of unordered coin multisets that add up to total, with a 2-D table."""
    denominations = _coin_values(coins)
    _non_negative("total", total)
    if not denominations:
        return 1 if total == 0 else 0
    table = [[1] * len(denominations)]
    for amount in range(1, total + 1):
        row: list[int] = []
        for coin in denominations:
            with_coin = table[amount - coin][len(row)] if coin <= amount else 0
            without_coin = row[-1] if row else 0
            row.append(with_coin + without_coin)
        table.append(row)
    return table[total][-1]


def count_coin_combinations_linear(coins: Iterable[int], total: int) -> int:
    """Number of unordered coin multisets that add up to total, with one row."""
    denominations = _coin_values(coins)
    _non_negative("total", total)
    ways = [1] + [0] * total
    for coin in denominations:
        for amount in range(coin, total + 1):
            ways[amount] += ways[amount - coin]
    return ways[total]


def count_tilings(n: int, m: int) -> int:
    """Ways to tile an n-long strip of width m with 1 x m tiles."""
    _non_negative("n", n)
    if m < 1:
        raise ValueError("tile length must be at least 1")
    counts = [0]
    for length in range(1, n + 1):
        if length > m:
            counts.append(counts[length - 1] + counts[length - m])
        elif length < m or length == 1:
            counts.append(1)
        else:
            counts.append(2)
    return counts[n]


def count_tilings_recursive(n: int, m: int) -> int:
    """Ways to tile an n-long strip with 1 x m tiles, by memoised recursion."""
    _non_negative("n", n)
    if m < 1:
        raise ValueError("tile length must be at least 1")

    @cache
    def solve(length: int) -> int:
        if length < m or length == 1:
            return 1
        if length == m:
            return 2
        return solve(length - 1) + solve(length - m)

    return solve(n)


def count_domino_tilings_3xn(n: int) -> int:
    """Ways to tile a 3 x n board with 2 x 1 dominoes."""
    _non_negative("n", n)
    full = [1, 0]
    partial = [0, 1]
    for length in range(2, n + 1):
        full.append(full[length - 2] + 2 * partial[length - 1])
        partial.append(full[length - 1] + partial[length - 2])
    return full[n]


def subset_sum_table(values: Iterable[int], total: int) -> list[list[bool]]:
    """Row i, column j: can some subset of the first i values sum to j."""
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError("values must be non-negative")
    _non_negative("total", total)
    table = [[sum_ == 0 for sum_ in range(total + 1)]]
    for value in items:
        previous = table[-1]
        table.append(
            [
                reachable or (sum_ >= value and previous[sum_ - value])
                for sum_, reachable in enumerate(previous)
            ]
        )
    return table


def count_possible_sums(values: Iterable[int]) -> int:
    """Number of distinct sums, other than zero, of subsets of the values."""
    items = list(values)
    table = subset_sum_table(items, sum(items))
    return sum(table[-1]) - 1


def longest_increasing_subsequence(values: Iterable[int]) -> int:
    """Length of the longest strictly increasing subsequence, in O(n^2)."""
    items = list(values)
    lengths: list[int] = []
    for value in items:
        lengths.append(
            1
            + max(
                (length for earlier, length in zip(items, lengths) if earlier < value),
                default=0,
            )
        )
    return max(lengths, default=0)


def _lis_from(values: Sequence[int], index: int, previous: int | None) -> int:
    if index == len(values):
        return 0
    exclude = _lis_from(values, index + 1, previous)
    include = 0
    if previous is None or values[index] > previous:
        include = 1 + _lis_from(values, index + 1, values[index])
    return max(include, exclude)


def longest_increasing_subsequence_recursive(values: Iterable[int]) -> int:
    """Length of the longest strictly increasing subsequence, by plain recursion."""
    return _lis_from(list(values), 0, None)


def max_prefix_sum(values: Iterable[int]) -> int:
    """Largest sum of a prefix of the values, the empty prefix included."""
    return max(accumulate(values, initial=0))


def _max_crossing(values: Sequence[int], low: int, mid: int, high: int) -> int:
    left = max(accumulate(reversed(values[low : mid + 1])))
    right = max(accumulate(values[mid + 1 : high + 1]))
    return max(left + right, left, right)


def _max_subarray(values: Sequence[int], low: int, high: int) -> int:
    if low >= high:
        return values[low]
    mid = low + (high - low) // 2
    return max(
        _max_subarray(values, low, mid),
        _max_subarray(values, mid + 1, high),
        _max_crossing(values, low, mid, high),
    )


def max_subarray_sum_divide(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous subarray, by divide and conquer."""
    items = list(values)
    if not items:
        raise ValueError("maximum subarray of no values")
    return _max_subarray(items, 0, len(items) - 1)


def kadane(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous subarray, in linear time."""
    items = list(values)
    if not items:
        raise ValueError("maximum subarray of no values")
    best = items[0]
    running = 0
    for value in items:
        running += value
        best = max(best, running)
        running = max(running, 0)
    return best