"""Integer helpers: parsing, powers, roots, primes and small utilities."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable

INT_MIN = -2147483648
INT_MAX = 2147483647


def _fits_int32(value: int) -> bool:
    return INT_MIN <= value <= INT_MAX


def get_number(text: str) -> int:
    """Parse a leading signed decimal integer.

    Any run of leading '+' and '-' characters sets the sign, and every '-'
    flips it. Digits are read until the first non-digit. A magnitude that
    does not fit a signed 32-bit integer gives 0.
    """
    sign = 1
    rest = text
    while rest[:1] in ("+", "-") and rest:
        if rest[0] == "-":
            sign = -sign
        rest = rest[1:]
    digits = []
    for ch in rest:
        if "0" <= ch <= "9":
            digits.append(ch)
        else:
            break
    magnitude = int("".join(digits)) if digits else 0
    if not _fits_int32(magnitude):
        return 0
    return magnitude * sign


def compute_power(nb: int, power: int) -> int:
    """Return nb raised to power, or 0 for a negative power or a 32-bit overflow."""
    if power < 0:
        return 0
    result = nb**power
    return result if _fits_int32(result) else 0


def compute_square_root(nb: int) -> int:
    """Return the positive integer square root of nb, or 0 if nb is not a perfect square."""
    if nb <= 0:
        return 0
    root = math.isqrt(nb)
    return root if root * root == nb else 0


def is_prime(nb: int) -> bool:
    """Primality test that tries the divisors 2 up to, but excluding, nb // 2.

    Because the bound is exclusive, 4 is reported as prime.
    """
    if nb <= 1:
        return False
    return all(nb % divisor for divisor in range(2, nb // 2))


def find_prime_sup(nb: int) -> int:
    """Return the smallest number not below nb that is_prime accepts."""
    while not is_prime(nb):
        nb += 1
    return nb


def sign_letter(nb: int) -> str:
    """Write 'N' for a negative number and 'P' otherwise to stdout, and return the letter."""
    letter = "N" if nb < 0 else "P"
    sys.stdout.write(letter)
    sys.stdout.flush()
    return letter


def sort_ints(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order as a new list."""
    return sorted(values)


def swap(a, b):
    """Return the two values in exchanged order."""
    return b, a