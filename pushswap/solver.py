"""Sorting driver: parse arguments, sort stack a and report the moves."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from itertools import pairwise

from pushswap.arith import get_number
from pushswap.stacks import Stacks

ERROR_EXIT = 84


def is_unsorted(values: Sequence[int]) -> bool:
    """True when some value is greater than the one after it."""
    return any(left > right for left, right in pairwise(values))


def needs_sa(values: Sequence[int]) -> bool:
    """True when the second value exceeds the third and the first is below the third."""
    return values[1] > values[2] and values[0] < values[2]


def _case_rising_top(values: Sequence[int]) -> bool:
    return values[1] < values[2] and values[0] < values[2]


def _case_falling_top(values: Sequence[int]) -> bool:
    return values[1] > values[2] and values[0] > values[2]


def sa_case(values: Sequence[int]) -> bool:
    """True when any of the three top-of-stack patterns that call for a swap holds."""
    return _case_rising_top(values) or _case_falling_top(values) or needs_sa(values)


def needs_ra(values: Sequence[int]) -> bool:
    """True when the first value is the largest of the top three and the second is the smallest."""
    return values[0] > values[1] and values[1] < values[2] and values[0] > values[2]


def needs_rra(values: Sequence[int]) -> bool:
    """True when the second value is the largest of the top three and the third is the smallest."""
    return values[0] < values[1] and values[1] > values[2] and values[0] > values[2]


def push_value(stacks: Stacks, num: int) -> None:
    """Bring the first occurrence of num in a to the top and push it onto b."""
    try:
        index = stacks.a.index(num)
    except ValueError:
        raise ValueError(f"{num} is not in stack a") from None
    push_index(stacks, index)


def push_index(stacks: Stacks, index: int) -> None:
    """Bring the value at index in a to the top and push it onto b."""
    if not 0 <= index < len(stacks.a):
        raise IndexError(f"index {index} is outside stack a")
    if index == 0:
        stacks.pb()
    elif index == 1:
        stacks.sa()
        stacks.pb()
    else:
        bring_and_push(stacks, index)


def _rotate_until_top(stacks: Stacks, num: int, rotate) -> None:
    while stacks.a[0] != num:
        rotate()
    stacks.pb()


def bring_and_push(stacks: Stacks, index: int) -> None:
    """Rotate a the shorter way until the value at index is on top, then push it onto b."""
    if not 0 <= index < len(stacks.a):
        raise IndexError(f"index {index} is outside stack a")
    if index == len(stacks.a) - 1:
        stacks.rra()
        stacks.pb()
        return
    if index > len(stacks.a) // 2:
        _rotate_until_top(stacks, stacks.a[index], stacks.rra)
    if index <= len(stacks.a) // 2:
        _rotate_until_top(stacks, stacks.a[index], stacks.ra)


def _settle_b(stacks: Stacks, moves: list[str]) -> None:
    a, b = stacks.a, stacks.b
    index = len(b) - 1
    if index < len(a) and b[0] < a[index]:
        stacks.rb()
        moves.append("rb")
    if b[0] < a[1]:
        stacks.sb()
        moves.append("sb")


def _sort(stacks: Stacks) -> list[str]:
    moves: list[str] = []
    seen: set[tuple[tuple[int, ...], tuple[int, ...]]] = set()
    while True:
        state = (tuple(stacks.a), tuple(stacks.b))
        if state in seen:
            raise RuntimeError("sorting makes no progress on this input")
        seen.add(state)
        if stacks.a[0] > stacks.a[-1]:
            stacks.ra()
            moves.append("ra")
        if stacks.a[0] > stacks.a[1]:
            stacks.sa()
            moves.append("sa")
        if is_unsorted(stacks.a) and stacks.a[0] < stacks.a[1]:
            stacks.pb()
            moves.append("pb")
            _settle_b(stacks, moves)
        emptied = False
        while not is_unsorted(stacks.a) and not emptied:
            stacks.pa()
            moves.append("pa")
            emptied = not stacks.b
        if not is_unsorted(stacks.a) and not stacks.b:
            break
    moves.append("rb")
    return moves


def solve(values: Iterable[int]) -> list[str]:
    """Return the words the sorter emits for values.

    Values already in order give no words. Otherwise the list holds every
    operation applied, in order, followed by a closing "rb" that is emitted
    but not applied. RuntimeError is raised for inputs on which the sorter
    would loop forever.
    """
    stacks = Stacks(values)
    if not is_unsorted(stacks.a):
        return []
    return _sort(stacks)


def check_arguments(args: Iterable[str]) -> bool:
    """True unless an argument not starting with '0' parses to zero."""
    return all(arg[:1] == "0" or get_number(arg) != 0 for arg in args)


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the numbers given on the command line and print the moves."""
    args = list(sys.argv[1:] if argv is None else argv)
    out = sys.stdout
    if len(args) < 2 or not check_arguments(args):
        out.write("\n")
        return ERROR_EXIT
    try:
        moves = solve([get_number(arg) for arg in args])
    except RuntimeError as error:
        sys.stderr.write(f"{error}\n")
        return ERROR_EXIT
    out.write(" ".join(moves) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())