import pytest

from judgekit.queues import (
    is_balanced,
    last_card,
    print_order,
    run_stack_commands,
    zero_sum,
)


def test_zero_sum_example():
    assert zero_sum([1, 3, 5, 4, 0, 0, 7, 0, 0, 6]) == 7


def test_zero_sum_without_zeros_is_plain_sum():
    values = [4, 9, 2, 8]
    assert zero_sum(values) == sum(values)


def test_zero_sum_cancel_on_empty_raises():
    with pytest.raises(ValueError):
        zero_sum([0])


def test_run_stack_commands_example():
    commands = [
        "push 1", "push 2", "top", "size", "empty", "pop", "pop", "pop",
        "size", "empty", "pop", "push 3", "empty", "top",
    ]
    assert run_stack_commands(commands) == [2, 2, 0, 2, 1, -1, 0, 1, -1, 0, 3]


def test_run_stack_commands_push_then_pop_returns_value():
    assert run_stack_commands(["push 42", "pop"]) == [42]


def test_run_stack_commands_unknown_command():
    with pytest.raises(ValueError):
        run_stack_commands(["peek"])


def test_run_stack_commands_push_without_value():
    with pytest.raises(ValueError):
        run_stack_commands(["push"])


def test_print_order_example():
    assert print_order([1, 1, 9, 1, 1, 1], 0) == 5


def test_print_order_positions_form_permutation():
    priorities = [2, 7, 2, 5, 5, 1, 9]
    positions = [print_order(priorities, index) for index in range(len(priorities))]
    assert sorted(positions) == list(range(1, len(priorities) + 1))


def test_print_order_higher_priority_prints_earlier():
    priorities = [1, 2, 3, 4]
    positions = [print_order(priorities, index) for index in range(len(priorities))]
    assert positions == sorted(positions, reverse=True)


def test_print_order_index_out_of_range():
    with pytest.raises(ValueError):
        print_order([1, 2], 2)


def test_last_card_single():
    assert last_card(1) == 1


@pytest.mark.parametrize("power", [1, 2, 5, 8])
def test_last_card_power_of_two_keeps_last(power):
    assert last_card(2**power) == 2**power


def test_last_card_within_deck():
    for n in range(1, 40):
        assert 1 <= last_card(n) <= n


def test_last_card_rejects_empty_deck():
    with pytest.raises(ValueError):
        last_card(0)


@pytest.mark.parametrize("text", ["()", "(())()", "((()))", ""])
def test_is_balanced_true(text):
    assert is_balanced(text) is True


@pytest.mark.parametrize("text", ["(", ")(", "(()", "())(()", "((()"])
def test_is_balanced_false(text):
    assert is_balanced(text) is False


def test_is_balanced_rejects_other_characters():
    with pytest.raises(ValueError):
        is_balanced("(a)")