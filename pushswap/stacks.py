"""Two integer stacks and the operations that move values between them."""

from __future__ import annotations

from collections.abc import Iterable


class Stacks:
    """Stack ``a`` holds the input values and stack ``b`` starts empty.

    Index 0 of each list is the top of the stack.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: list[int] = list(values)
        self.b: list[int] = []

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"

    def sa(self) -> None:
        """Swap the two top values of a."""
        if len(self.a) > 1:
            self.a[0], self.a[1] = self.a[1], self.a[0]

    def sb(self) -> None:
        """Swap the two top values of b, but only when the top is the larger one."""
        if len(self.b) > 1 and self.b[0] > self.b[1]:
            self.b[0], self.b[1] = self.b[1], self.b[0]

    def ss(self) -> None:
        """Apply sa, then sb."""
        self.sa()
        self.sb()

    def pa(self) -> None:
        """Move the top of b onto a."""
        if self.b:
            self.a.insert(0, self.b.pop(0))

    def pb(self) -> None:
        """Move the top of a onto b."""
        if self.a:
            self.b.insert(0, self.a.pop(0))

    def ra(self) -> None:
        """Rotate a so that its top value goes to the bottom."""
        if len(self.a) > 1:
            self.a.append(self.a.pop(0))

    def rb(self) -> None:
        """Rotate b so that its top value goes to the bottom."""
        if len(self.b) > 1:
            self.b.append(self.b.pop(0))

    def rr(self) -> None:
        """Apply ra, then rb."""
        self.ra()
        self.rb()

    def rra(self) -> None:
        """Rotate a so that its bottom value comes to the top."""
        if len(self.a) > 1:
            self.a.insert(0, self.a.pop())

    def rrb(self) -> None:
        """Rotate b so that its bottom value comes to the top."""
        if len(self.b) > 1:
            self.b.insert(0, self.b.pop())

    def rrr(self) -> None:
        """Apply rra, then rrb."""
        self.rra()
        self.rrb()

    def extremes(self) -> tuple[int, int]:
        """Return the smallest and the biggest value of a."""
        if not self.a:
            raise ValueError("stack a is empty")
        return min(self.a), max(self.a)

    def dump(self) -> str:
        """Return both stacks as two lines, each value followed by a space."""
        line_a = "".join(f"{value} " for value in self.a)
        line_b = "".join(f"{value} " for value in self.b)
        return f"{line_a}\n{line_b}\n"