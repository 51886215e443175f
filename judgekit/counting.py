"""Counting problems solved with small dynamic-programming tables."""

from __future__ import annotations

import math

STAIR_MODULUS = 1_000_000_000
TILING_MODULUS = 10_007
ZOO_MODULUS = 9_901
BINARY_TILE_MODULUS = 15_746

MAX_FIBONACCI_CALLS = 40
MAX_BRIDGE_SITES = 30
MAX_STAIR_LENGTH = 100
MAX_TILING_WIDTH = 1000
MAX_ZOO_ROWS = 100_000
MAX_PINARY_LENGTH = 90
MAX_FIBONACCI = 90
MAX_SUM_OF_123 = 10
MAX_PADOVAN = 100


def _check_range(name: str, value: int, low: int, high: int | None = None) -> None:
    if value < low or (high is not None and value > high):
        bound = f"between {low} and {high}" if high is not None else f"at least {low}"
        raise ValueError(f"{name} must be {bound}, got {value}")


def fibonacci_calls(n: int) -> tuple[int, int]:
    """How many times a naive recursive fibonacci(n) reaches fibonacci(0) and fibonacci(1)."""
    _check_range("n", n, 0, MAX_FIBONACCI_CALLS)
    zeros, ones = 1, 0
    for _ in range(n):
        zeros, ones = ones, zeros + ones
    return zeros, ones


def bridge_count(west: int, east: int) -> int:
    """Ways to build `west` non-crossing bridges onto `east` sites."""
    _check_range("west", west, 1, MAX_BRIDGE_SITES)
    _check_range("east", east, west, MAX_BRIDGE_SITES)
    return math.comb(east, west)


def stair_numbers(n: int) -> int:
    """Count of n-digit numbers whose adjacent digits differ by one, modulo 10**9."""
    _check_range("n", n, 1, MAX_STAIR_LENGTH)
    counts = [0] + [1] * 9
    for _ in range(n - 1):
        counts = [
            ((counts[digit - 1] if digit > 0 else 0) + (counts[digit + 1] if digit < 9 else 0))
            % STAIR_MODULUS
            for digit in range(10)
        ]
    return sum(counts) % STAIR_MODULUS


def tiling_count(n: int) -> int:
    """Ways to tile a 2 x n board with 1x2, 2x1 and 2x2 tiles, modulo 10007."""
    _check_range("n", n, 0, MAX_TILING_WIDTH)
    seed = (0, 1, 3)
    if n < len(seed):
        return seed[n]
    before, last = seed[1], seed[2]
    for _ in range(3, n + 1):
        before, last = last, (2 * before + last) % TILING_MODULUS
    return last


def zoo_arrangements(n: int) -> int:
    """Ways to place lions in a 2 x n cage with no two adjacent, modulo 9901."""
    _check_range("n", n, 0, MAX_ZOO_ROWS)
    before, last = 1, 3
    if n == 0:
        return before
    for _ in range(2, n + 1):
        before, last = last, (2 * last + before) % ZOO_MODULUS
    return last


def binary_tiles(n: int) -> int:
    """Binary strings of length n built from '1' and '00' tiles, modulo 15746."""
    _check_range("n", n, 0)
    seed = (0, 1, 2)
    if n < len(seed):
        return seed[n]
    before, last = seed[1], seed[2]
    for _ in range(3, n + 1):
        before, last = last, (before + last) % BINARY_TILE_MODULUS
    return last


def pinary_numbers(n: int) -> int:
    """Count of n-digit binary numbers starting with 1 and without two adjacent 1s."""
    _check_range("n", n, 0, MAX_PINARY_LENGTH)
    if n == 0:
        return 0
    ending_zero, ending_one = 0, 1
    for _ in range(2, n + 1):
        ending_zero, ending_one = ending_zero + ending_one, ending_zero
    return ending_zero + ending_one


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number, with fibonacci(0) == 0."""
    _check_range("n", n, 0, MAX_FIBONACCI)
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def sum_of_123(n: int) -> int:
    """Ways to write n as an ordered sum of 1, 2 and 3."""
    _check_range("n", n, 0, MAX_SUM_OF_123)
    table = [0, 1, 2, 4]
    while len(table) <= n:
        table.append(sum(table[-3:]))
    return table[n]


def padovan(n: int) -> int:
    """The n-th term of the Padovan spiral sequence, with padovan(0) == 0."""
    _check_range("n", n, 0, MAX_PADOVAN)
    table = [0, 1, 1, 1, 2, 2]
    while len(table) <= n:
        table.append(table[-1] + table[-5])
    return table[n]


def min_ops_to_one(n: int) -> int:
    """Steps to reach 1 using 'divide by 3', 'divide by 2' and 'subtract 1'.

    A multiple of three is only ever divided by three, never by two.
    """
    if n <= 1:
        return 0
    steps = [0, 0, 1, 1]
    for value in range(4, n + 1):
        candidate = steps[value - 1] + 1
        if value % 3 == 0:
            candidate = min(candidate, steps[value // 3] + 1)
        elif value % 2 == 0:
            candidate = min(candidate, steps[value // 2] + 1)
        steps.append(candidate)
    return steps[n]