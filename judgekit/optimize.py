"""Optimisation problems solved with dynamic programming."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def max_card_purchase(prices: Iterable[int]) -> int:
    """Most money spent buying exactly n cards, where prices[k] buys a pack of k + 1."""
    prices = list(prices)
    best = [0]
    for total in range(1, len(prices) + 1):
        best.append(max(best[used] + prices[total - used - 1] for used in range(total)))
    return best[-1]


def longest_increasing_subsequence(values: Iterable[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    values = list(values)
    lengths: list[int] = []
    for position, value in enumerate(values):
        longest_before = max(
            (length for prior, length in zip(values[:position], lengths) if prior < value),
            default=0,
        )
        lengths.append(longest_before + 1)
    return max(lengths, default=0)


def min_paint_cost(costs: Iterable[Sequence[int]]) -> int:
    """Cheapest way to paint houses red, green or blue with no two neighbours alike."""
    totals: tuple[int, int, int] | None = None
    for red, green, blue in costs:
        if totals is None:
            totals = (red, green, blue)
        else:
            prev_red, prev_green, prev_blue = totals
            totals = (
                min(prev_green, prev_blue) + red,
                min(prev_red, prev_blue) + green,
                min(prev_red, prev_green) + blue,
            )
    if totals is None:
        raise ValueError("at least one house is required")
    return min(totals)


def knapsack(capacity: int, items: Iterable[tuple[int, int]]) -> int:
    """Highest total value of (weight, value) items fitting in the given capacity."""
    if capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")
    best = [0] * (capacity + 1)
    for weight, value in items:
        if weight < 0:
            raise ValueError(f"item weight must not be negative, got {weight}")
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run of values."""
    running = 0
    best: int | None = None
    for value in values:
        running = running + value if running > 0 else value
        best = running if best is None else max(best, running)
    if best is None:
        raise ValueError("at least one value is required")
    return best


def triangle_max_path(rows: Iterable[Sequence[int]]) -> int:
    """Largest sum on a top-to-bottom path through a number triangle."""
    rows = [list(row) for row in rows]
    if not rows:
        raise ValueError("the triangle must have at least one row")
    for depth, row in enumerate(rows):
        if len(row) != depth + 1:
            raise ValueError(f"row {depth} must hold {depth + 1} values, got {len(row)}")
    best = rows[0]
    for row in rows[1:]:
        last = len(row) - 1
        best = [
            value
            + (
                best[0]
                if column == 0
                else best[-1]
                if column == last
                else max(best[column - 1], best[column])
            )
            for column, value in enumerate(row)
        ]
    return max(best)


def max_wine(glasses: Iterable[int]) -> int:
    """Most wine drunk from a row of glasses without taking three in a row."""
    wine = [0, *glasses]
    count = len(wine) - 1
    if count == 0:
        return 0
    best = [0, wine[1]]
    if count >= 2:
        best.append(wine[1] + wine[2])
    for index in range(3, count + 1):
        best.append(
            max(
                best[index - 3] + wine[index - 1] + wine[index],
                best[index - 2] + wine[index],
                best[index - 1],
            )
        )
    return best[count]


def max_stair_score(stairs: Iterable[int]) -> int:
    """Best score climbing stairs one or two at a time, never three in a row, ending on the last."""
    steps = list(stairs)
    if not steps:
        raise ValueError("at least one stair is required")
    best = [steps[0]]
    if len(steps) >= 2:
        best.append(steps[0] + steps[1])
    if len(steps) >= 3:
        best.append(max(steps[0] + steps[2], steps[1] + steps[2]))
    for index in range(3, len(steps)):
        best.append(
            max(
                best[index - 2] + steps[index],
                best[index - 3] + steps[index - 1] + steps[index],
            )
        )
    return best[-1]