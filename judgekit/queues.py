"""Problems solved with stacks and queues."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


def zero_sum(commands: Iterable[int]) -> int:
    """Sum of the numbers left after each 0 cancels the most recent number."""
    kept: list[int] = []
    for value in commands:
        if value != 0:
            kept.append(value)
        elif kept:
            kept.pop()
        else:
            raise ValueError("a 0 arrived with no number to cancel")
    return sum(kept)


def run_stack_commands(commands: Iterable[str]) -> list[int]:
    """Run push/pop/size/empty/top commands on a stack and collect what they print."""
    stack: list[int] = []
    output: list[int] = []
    for command in commands:
        name, *arguments = command.split()
        if name == "push":
            if len(arguments) != 1:
                raise ValueError(f"push needs exactly one number: {command!r}")
            stack.append(int(arguments[0]))
            continue
        if arguments:
            raise ValueError(f"{name} takes no arguments: {command!r}")
        if name == "pop":
            output.append(stack.pop() if stack else -1)
        elif name == "size":
            output.append(len(stack))
        elif name == "empty":
            output.append(0 if stack else 1)
        elif name == "top":
            output.append(stack[-1] if stack else -1)
        else:
            raise ValueError(f"unknown command: {command!r}")
    return output


def print_order(priorities: Sequence[int], index: int) -> int:
    """Position (from 1) at which the document at `index` leaves a priority printer queue."""
    if not 0 <= index < len(priorities):
        raise ValueError(f"index {index} is outside 0..{len(priorities) - 1}")
    queue = deque(enumerate(priorities))
    pending = sorted(priorities, reverse=True)
    printed = 0
    while True:
        position, priority = queue.popleft()
        if priority == pending[printed]:
            printed += 1
            if position == index:
                return printed
        else:
            queue.append((position, priority))


def last_card(n: int) -> int:
    """Card left after repeatedly discarding the top card and moving the next to the bottom."""
    if n < 1:
        raise ValueError(f"at least one card is required, got {n}")
    cards = deque(range(1, n + 1))
    while len(cards) > 1:
        cards.popleft()
        cards.append(cards.popleft())
    return cards[0]


def is_balanced(text: str) -> bool:
    """Whether a string of parentheses is properly nested."""
    depth = 0
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                return False
        else:
            raise ValueError(f"unexpected character {char!r}")
    return depth == 0