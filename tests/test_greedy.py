from collections import Counter
from itertools import permutations
import random

import pytest

from judgekit.greedy import (
    blackjack,
    bulk_ranks,
    heard_and_seen,
    max_passengers,
    min_coins,
    min_product_sum,
    sort_points,
    sort_points_by_y,
    total_wait_time,
)


def test_min_product_sum_example():
    assert min_product_sum([1, 1, 1, 6, 0], [2, 7, 8, 3, 1]) == 18


def test_min_product_sum_is_minimum_over_arrangements():
    a = [3, -1, 4, 2]
    b = [5, 0, -2, 7]
    best = min(sum(x * y for x, y in zip(a, order)) for order in permutations(b))
    assert min_product_sum(a, b) == best


def test_min_product_sum_length_mismatch():
    with pytest.raises(ValueError):
        min_product_sum([1, 2], [3])


def test_min_coins_example():
    coins = [1, 5, 10, 50, 100, 500, 1000, 5000, 10000, 50000]
    assert min_coins(coins, 4200) == 6


def test_min_coins_unit_coin_counts_target():
    assert min_coins([1], 7) == 7


def test_min_coins_rejects_zero_coin():
    with pytest.raises(ValueError):
        min_coins([0, 1], 5)


def test_sort_points_orders_and_keeps_points():
    points = [(3, 4), (1, 1), (1, -1), (2, 2), (3, 3)]
    result = sort_points(points)
    assert Counter(result) == Counter(points)
    assert all(first <= second for first, second in zip(result, result[1:]))


def test_sort_points_by_y_orders_by_y_then_x():
    points = [(0, 4), (1, 2), (1, -1), (2, 2), (3, 3)]
    result = sort_points_by_y(points)
    assert Counter(result) == Counter(points)
    keys = [(y, x) for x, y in result]
    assert keys == sorted(keys)


def test_heard_and_seen_common_names():
    heard = ["ohhenrie", "charlie", "baesangwook"]
    seen = ["obama", "baesangwook", "ohhenrie", "clinton"]
    assert heard_and_seen(heard, seen) == ["baesangwook", "ohhenrie"]


def test_heard_and_seen_is_sorted_subset():
    heard = ["zed", "amy", "kim", "lee"]
    seen = ["lee", "zed", "bob"]
    result = heard_and_seen(heard, seen)
    assert result == sorted(result)
    assert set(result) <= set(heard) & set(seen)


def test_blackjack_reaches_limit():
    assert blackjack([5, 6, 7, 8, 9], 21) == 21


def test_blackjack_never_exceeds_limit():
    rng = random.Random(7)
    cards = [rng.randint(1, 50) for _ in range(10)]
    limit = 80
    result = blackjack(cards, limit)
    assert result <= limit
    assert result == max(
        (a + b + c for a, b, c in permutations(cards, 3) if a + b + c <= limit), default=0
    )


def test_bulk_ranks_example():
    people = [(55, 185), (58, 183), (88, 186), (60, 175), (46, 155)]
    assert bulk_ranks(people) == [2, 2, 1, 2, 5]


def test_bulk_ranks_within_bounds():
    rng = random.Random(3)
    people = [(rng.randint(1, 100), rng.randint(1, 100)) for _ in range(12)]
    ranks = bulk_ranks(people)
    assert len(ranks) == len(people)
    assert all(1 <= rank <= len(people) for rank in ranks)


def test_total_wait_time_ignores_order():
    times = [3, 1, 4, 3, 2]
    shuffled = list(reversed(times))
    assert total_wait_time(times) == total_wait_time(shuffled)
    assert total_wait_time(times) >= sum(times)


def test_total_wait_time_single_person():
    assert total_wait_time([9]) == 9


def test_max_passengers_single_stop():
    assert max_passengers([(0, 32)]) == 32


def test_max_passengers_never_below_first_load():
    stops = [(0, 32), (3, 13), (28, 25), (39, 0)]
    result = max_passengers(stops)
    assert result >= 32
    assert result >= 32 - 3 + 13