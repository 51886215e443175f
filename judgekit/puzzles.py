"""Small arithmetic and string puzzles."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Sequence
from itertools import combinations

LOTTO_PICK = 6


def tournament_round(n: int, kim: int, lim: int) -> int:
    """Round in which two entrants of a knockout bracket of n first meet."""
    for name, entrant in (("kim", kim), ("lim", lim)):
        if not 1 <= entrant <= n:
            raise ValueError(f"{name} must be between 1 and {n}, got {entrant}")
    if kim == lim:
        raise ValueError("the two entrants must be different")
    round_number = 1
    while True:
        low, high = sorted((kim, lim))
        if high == low + 1 and low % 2 == 1:
            return round_number
        kim, lim = (kim + 1) // 2, (lim + 1) // 2
        round_number += 1


def matches_pattern(word: str) -> bool:
    """Whether a seven-letter word has the shape AABBABB with A different from B."""
    return (
        len(word) == 7
        and word[1] != word[2]
        and word[0] == word[1] == word[4]
        and word[2] == word[3] == word[5] == word[6]
    )


def chocolate_cuts(n: int, m: int) -> int:
    """Cuts needed to split an n x m chocolate bar into single pieces."""
    if n < 1 or m < 1:
        raise ValueError(f"the bar must be at least 1 x 1, got {n} x {m}")
    return n * m - 1


def _truncating_div(x: int, y: int) -> int | None:
    if y == 0:
        return None
    quotient = abs(x) // abs(y)
    return quotient if (x >= 0) == (y >= 0) else -quotient


_OPERATIONS: tuple[tuple[str, Callable[[int, int], int | None]], ...] = (
    ("+", operator.add),
    ("-", operator.sub),
    ("*", operator.mul),
    ("/", _truncating_div),
)


def find_equation(a: int, b: int, c: int) -> str:
    """An equation using a, b and c in order with one operator and one '=' sign.

    Operators are tried from '/' back to '+'; for each, 'a=b?c' comes before 'a?b=c'.
    Division truncates toward zero.
    """
    for symbol, apply in reversed(_OPERATIONS):
        if a == apply(b, c):
            return f"{a}={b}{symbol}{c}"
        if apply(a, b) == c:
            return f"{a}{symbol}{b}={c}"
    raise ValueError(f"no equation joins {a}, {b} and {c}")


def above_average_percent(scores: Iterable[int]) -> float:
    """Percentage of scores strictly above their mean."""
    scores = list(scores)
    if not scores:
        raise ValueError("at least one score is required")
    mean = sum(scores) / len(scores)
    above = sum(1 for score in scores if score > mean)
    return above / len(scores) * 100


def format_percent(value: float) -> str:
    """A percentage with three decimals and a trailing '%'."""
    return f"{value:.3f}%"


def lotto_combinations(numbers: Sequence[int]) -> list[tuple[int, ...]]:
    """Every choice of six numbers, keeping the given order."""
    return list(combinations(numbers, LOTTO_PICK))


def compare(a: int, b: int) -> str:
    """'>', '<' or '==' depending on how a compares with b."""
    if a > b:
        return ">"
    if a < b:
        return "<"
    return "=="