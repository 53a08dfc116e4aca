import pytest

from pushswap.solver import (
    bring_and_push,
    check_arguments,
    is_unsorted,
    main,
    needs_ra,
    needs_rra,
    needs_sa,
    push_index,
    push_value,
    sa_case,
    solve,
)
from pushswap.stacks import Stacks

ALLOWED = {"sa", "sb", "pa", "pb", "ra", "rb", "rra", "rrb", "rr", "rrr", "ss"}


def replay(values, moves):
    stacks = Stacks(values)
    for move in moves:
        getattr(stacks, move)()
    return stacks


def test_is_unsorted():
    assert is_unsorted([1, 3, 2]) is True
    assert is_unsorted([1, 1, 2]) is False
    assert is_unsorted([]) is False


def test_needs_sa():
    assert needs_sa([1, 3, 2]) is True
    assert needs_sa([2, 1, 3]) is False


def test_sa_case():
    assert sa_case([1, 2, 3]) is True
    assert sa_case([3, 2, 1]) is True
    assert sa_case([1, 3, 2]) is True
    assert sa_case([3, 1, 2]) is False


def test_needs_ra():
    assert needs_ra([3, 1, 2]) is True
    assert needs_ra([2, 1, 3]) is False


def test_needs_rra():
    assert needs_rra([2, 3, 1]) is True
    assert needs_rra([1, 3, 2]) is False


def test_predicates_need_three_values():
    with pytest.raises(IndexError):
        needs_sa([1, 2])


@pytest.mark.parametrize("index", range(6))
def test_push_index_moves_chosen_value(index):
    values = [5, 2, 8, 1, 9, 4]
    stacks = Stacks(values)
    push_index(stacks, index)
    assert stacks.b == [values[index]]
    assert sorted(stacks.a + stacks.b) == sorted(values)
    assert values[index] not in stacks.a


@pytest.mark.parametrize("value", [5, 2, 8, 1, 9, 4])
def test_push_value_moves_value(value):
    values = [5, 2, 8, 1, 9, 4]
    stacks = Stacks(values)
    push_value(stacks, value)
    assert stacks.b == [value]
    assert sorted(stacks.a + [value]) == sorted(values)


def test_push_value_missing_raises():
    with pytest.raises(ValueError):
        push_value(Stacks([1, 2, 3]), 7)


def test_push_index_out_of_range_raises():
    with pytest.raises(IndexError):
        push_index(Stacks([1, 2, 3]), 3)


def test_bring_and_push_last_value():
    stacks = Stacks([4, 6, 2, 9])
    bring_and_push(stacks, 3)
    assert stacks.b == [9]
    assert stacks.a == [4, 6, 2]


def test_bring_and_push_out_of_range_raises():
    with pytest.raises(IndexError):
        bring_and_push(Stacks([1, 2]), -1)


def test_solve_sorted_gives_no_moves():
    assert solve([1, 2, 3]) == []
    assert solve([]) == []
    assert solve([4, 4]) == []


def test_solve_two_values():
    assert solve([2, 1]) == ["ra", "pa", "rb"]


@pytest.mark.parametrize(
    "values",
    [[2, 1], [3, 1, 2], [1, 3, 2], [3, 2, 1], [2, 3, 1], [4, 3, 2, 1], [1, 2, 4, 3], [-1, -3, 2]],
)
def test_solve_moves_sort_the_stack(values):
    moves = solve(values)
    assert moves[-1] == "rb"
    assert set(moves) <= ALLOWED
    stacks = replay(values, moves[:-1])
    assert stacks.a == sorted(values)
    assert stacks.b == []


def test_solve_without_progress_raises():
    with pytest.raises(RuntimeError):
        solve([1, 1, 0, 2])


def test_check_arguments():
    assert check_arguments(["3", "0", "-4"]) is True
    assert check_arguments(["1", "x"]) is False
    assert check_arguments(["-0"]) is False
    assert check_arguments([""]) is False


def test_main_too_few_arguments(capsys):
    assert main(["1"]) == 84
    assert capsys.readouterr().out == "\n"


def test_main_invalid_argument(capsys):
    assert main(["1", "abc"]) == 84
    assert capsys.readouterr().out == "\n"


def test_main_sorted_input(capsys):
    assert main(["0", "1", "2"]) == 0
    assert capsys.readouterr().out == "\n"


def test_main_unsorted_input(capsys):
    assert main(["3", "1", "2"]) == 0
    out = capsys.readouterr().out
    assert out == " ".join(solve([3, 1, 2])) + "\n"
    assert out.endswith("rb\n")


def test_main_without_progress_reports_error(capsys):
    assert main(["1", "1", "0", "2"]) == 84
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "no progress" in captured.err