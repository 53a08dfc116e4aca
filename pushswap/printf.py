"""A small printf-style formatter built on the helpers in ``numfmt``.

A directive is a '%' followed by a run of flag characters and one conversion
character. The flags set the field width, zero padding, precision and
alignment; the conversion selects how the next argument is rendered.
"""

from __future__ import annotations

import math
import re
import struct
import sys
from collections.abc import Callable, Iterator
from typing import Any

from pushswap.arith import get_number
from pushswap.numfmt import (
    format_exp,
    format_float,
    format_float_trimmed,
    format_hex,
    format_int,
    format_octal,
    format_printables,
    format_unsigned,
)

_FLAG_CHARS = r"#0-9 *+\-._;,:"
_FLAG_RUN = re.compile(f"[{_FLAG_CHARS}]*")
_DIRECTIVE = re.compile(f"%([{_FLAG_CHARS}]*)(.?)", re.DOTALL)
_SIGN_RUN = re.compile(r"[+-]+")

_ALTERNATE = {"o": "0", "x": "0x", "X": "0X"}
_SPACED = frozenset("aAdeEfFgGi")

# Conversions are resolved through a chain of stages; the space flag is
# applied once per stage visited before the conversion is reached.
_STAGES = ("diu", "eE", "gG", "cs", "pn", "x", "S%", "fF", "X", "o")

_NEGATIVE_UNSIGNED = "4294962729"
_NULL_STRING = "(null)"


def _stage(conversion: str) -> int:
    for depth, group in enumerate(_STAGES, start=1):
        if conversion in group:
            return depth
    return len(_STAGES)


def _single(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _decimal_magnitude(value: float) -> int:
    """Count the steps by ten that bring value into the range [1, 10)."""
    num = _single(value)
    if not math.isfinite(num) or num <= 0:
        raise ValueError(f"cannot format {value!r} in general notation")
    count = 0
    if num < 1:
        while num < 1:
            num = _single(num * 10)
            count += 1
    else:
        while num >= 10:
            num = _single(num / 10)
            count += 1
    return count


def parse_flags(fmt: str, index: int) -> str:
    """Return the flag characters that follow the '%' at index."""
    if not fmt.startswith("%", index):
        raise ValueError(f"no directive at position {index}")
    return _FLAG_RUN.match(fmt, index + 1).group()


def alternate_prefix(spec: str, conversion: str) -> str:
    """Return the '#' prefix for octal and hexadecimal conversions."""
    if not spec.startswith("#"):
        return ""
    return _ALTERNATE.get(conversion, "")


def zero_padding(spec: str) -> bool:
    """True when the width is introduced by a '0' and no '.' or '-' follows it."""
    start = next(
        (pos for pos, ch in enumerate(spec) if "0" <= ch <= ":"), None
    )
    if start is None:
        return False
    lead, rest = spec[start], spec[start + 1:]
    if any(ch in ".-" for ch in rest):
        return False
    return lead == "0" and any("1" <= ch <= "9" for ch in rest)


def field_width(spec: str) -> int:
    """Return the number formed by the digits before the first '.'."""
    head = spec.split(".", 1)[0]
    return get_number("".join(ch for ch in head if "0" <= ch <= "9"))


def precision(spec: str) -> int:
    """Return the digits after the first '.', or 6 when there is no '.'."""
    if "." not in spec:
        return 6
    tail = spec.split(".", 1)[1]
    digits = re.match(r"[0-9]*", tail).group()
    return get_number(digits)


def alignment(spec: str) -> int:
    """Return 1 for a '-' flag, 2 for a '+' flag alone, and 0 otherwise.

    Only the first run of sign characters is considered.
    """
    run = _SIGN_RUN.search(spec)
    if run is None:
        return 0
    return 1 if "-" in run.group() else 2


def space_prefix(spec: str, conversion: str) -> str:
    """Return ' ' when the spec starts with a space and the conversion is numeric."""
    if spec.startswith(" ") and conversion in _SPACED:
        return " "
    return ""


def format_general(value: float, spec: str, conversion: str) -> str:
    """Render value for a 'g' or 'G' conversion.

    Fixed notation is used while the decimal magnitude stays below the
    precision; it is zero-filled only with the '#' flag. Otherwise exponent
    notation is used, uppercase for 'G'.
    """
    if conversion not in ("g", "G"):
        raise ValueError(f"not a general conversion: {conversion!r}")
    if _decimal_magnitude(value) < precision(spec):
        if spec.startswith("#"):
            return format_float(value)
        return format_float_trimmed(value)
    return format_exp(value, conversion == "G")


def _render(conversion: str, spec: str, next_arg: Callable[[], Any]) -> str:
    width = field_width(spec)
    zero = zero_padding(spec)
    pos = alignment(spec)
    match conversion:
        case "d" | "i":
            return format_int(int(next_arg()), width, zero, pos)
        case "u":
            number = int(next_arg())
            if number < 0:
                return _NEGATIVE_UNSIGNED
            return format_unsigned(number, width, zero, pos)
        case "e" | "E":
            return format_exp(float(next_arg()), conversion == "E")
        case "g" | "G":
            return format_general(float(next_arg()), spec, conversion)
        case "c":
            value = next_arg()
            return chr(value) if isinstance(value, int) else str(value)[:1]
        case "s":
            value = next_arg()
            return _NULL_STRING if value is None else str(value)
        case "p":
            next_arg()
            return "0x" + format_hex(0, int(zero), width, pos, False)
        case "n":
            next_arg()
            return ""
        case "x" | "X":
            number = abs(int(next_arg()))
            return format_hex(number, width, zero, pos, conversion == "X")
        case "S":
            return format_printables(str(next_arg()))
        case "%":
            return "%"
        case "f" | "F":
            return format_float(float(next_arg()))
        case "o":
            return format_octal(int(next_arg()), width, zero, pos)
        case _:
            return "%" + conversion


def sprintf(fmt: str, *args: Any) -> str:
    """Return fmt with every directive replaced by its rendered argument."""
    if not isinstance(fmt, str):
        raise TypeError("format must be a string")
    pending: Iterator[Any] = iter(args)

    def next_arg() -> Any:
        try:
            return next(pending)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    def expand(match: re.Match[str]) -> str:
        spec, conversion = match.groups()
        if not conversion:
            return "%"
        prefix = alternate_prefix(spec, conversion)
        spaces = space_prefix(spec, conversion) * _stage(conversion)
        return prefix + spaces + _render(conversion, spec, next_arg)

    return _DIRECTIVE.sub(expand, fmt)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)