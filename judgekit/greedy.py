"""Greedy choices, sorting and small brute-force searches."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate, combinations


def min_product_sum(a: Iterable[int], b: Iterable[int]) -> int:
    """Smallest sum of pairwise products after rearranging `a` against `b`."""
    a = list(a)
    b = list(b)
    if len(a) != len(b):
        raise ValueError(f"both sequences must have the same length, got {len(a)} and {len(b)}")
    return sum(x * y for x, y in zip(sorted(a), sorted(b, reverse=True)))


def min_coins(coins: Iterable[int], target: int) -> int:
    """Coins used when paying `target` greedily, largest denomination first."""
    denominations = sorted(coins, reverse=True)
    if any(coin <= 0 for coin in denominations):
        raise ValueError("every coin value must be positive")
    if target < 0:
        raise ValueError(f"target must not be negative, got {target}")
    count = 0
    remaining = target
    for coin in denominations:
        used, remaining = divmod(remaining, coin)
        count += used
    return count


def sort_points(points: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Points ordered by x, then by y."""
    return sorted((x, y) for x, y in points)


def sort_points_by_y(points: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Points ordered by y, then by x."""
    return sorted(((x, y) for x, y in points), key=lambda point: (point[1], point[0]))


def heard_and_seen(heard: Iterable[str], seen: Iterable[str]) -> list[str]:
    """Names that appear in both lists, in sorted order."""
    seen_names = set(seen)
    return sorted(name for name in heard if name in seen_names)


def blackjack(cards: Sequence[int], limit: int) -> int:
    """Largest sum of three different cards not above `limit`; 0 if there is none."""
    return max(
        (total for total in map(sum, combinations(cards, 3)) if total <= limit),
        default=0,
    )


def bulk_ranks(people: Sequence[tuple[int, int]]) -> list[int]:
    """Rank of each (weight, height): one more than those heavier and taller."""
    return [
        1
        + sum(
            1
            for other_weight, other_height in people
            if other_weight > weight and other_height > height
        )
        for weight, height in people
    ]


def total_wait_time(times: Iterable[int]) -> int:
    """Least total time spent by everyone queueing at a single cash machine."""
    return sum(accumulate(sorted(times)))


def max_passengers(stops: Iterable[tuple[int, int]]) -> int:
    """Most people on board, given (getting off, getting on) at each stop in turn."""
    on_board = 0
    most = 0
    for leaving, boarding in stops:
        on_board += boarding - leaving
        most = max(most, on_board)
    return most