"""Text formatting of integers and single-precision floats.

Every function returns the text instead of writing it, so callers decide
where it goes. The ``pos`` argument selects the alignment: 0 pads on the
left, 1 pads on the right, 2 pads on the left and adds a '+' sign. Any
other value disables padding.
"""

from __future__ import annotations

import math
import struct

INT_MIN = -2147483648


def _f32(value: float) -> float:
    """Round a number to single precision, overflowing to infinity."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def pad(width: int, zero: int, pos: int) -> str:
    """Return width fill characters: zeros when zero is set and pos is not 1."""
    if width <= 0:
        return ""
    fill = " " if not zero or pos == 1 else "0"
    return fill * width


def _aligned(digits: str, width: int, zero: int, pos: int) -> str:
    remaining = width - len(digits)
    before = pad(remaining, zero, pos) if pos in (0, 2) else ""
    after = pad(remaining, zero, pos) if pos == 1 else ""
    return before + digits + after


def format_int(nb: int, width: int, zero: int, pos: int) -> str:
    """Format a signed integer in a field of the given width.

    A minus sign is written before any padding and is not counted in the
    width. With pos 2 a '+' is added, before zero padding or after space
    padding.
    """
    if nb == INT_MIN:
        return "-2147483648"
    sign = "-" if nb < 0 else ""
    digits = str(abs(nb))
    remaining = width - len(digits)
    parts = [sign]
    if pos == 0:
        parts.append(pad(remaining, zero, pos))
    elif pos == 2:
        if zero:
            parts.append("+")
        parts.append(pad(remaining - 1, zero, pos))
        if not zero:
            parts.append("+")
    parts.append(digits)
    if pos == 1:
        parts.append(pad(remaining, zero, pos))
    return "".join(parts)


def format_unsigned(nb: int, width: int, zero: int, pos: int) -> str:
    """Format an integer in a field of the given width without a '+' sign."""
    if nb == INT_MIN:
        return "-2147483648"
    sign = "-" if nb < 0 else ""
    return sign + _aligned(str(abs(nb)), width, zero, pos)


def format_plain_int(nb: int) -> str:
    """Format an integer in decimal with no padding."""
    return str(nb)


def format_hex(num: int, width: int, zero: int, pos: int, upper: bool) -> str:
    """Format a non-negative integer in hexadecimal.

    Zero is written as '0' ahead of a full field of padding; a negative
    number yields only the padding.
    """
    prefix = "0" if num == 0 else ""
    digits = format(num, "X" if upper else "x") if num > 0 else ""
    return prefix + _aligned(digits, width, zero, pos)


def format_octal(num: int, width: int, zero: int, pos: int) -> str:
    """Format the magnitude of an integer in octal.

    Zero is written as '0' ahead of a full field of padding.
    """
    num = abs(num)
    prefix = "0" if num == 0 else ""
    digits = format(num, "o") if num > 0 else ""
    return prefix + _aligned(digits, width, zero, pos)


def format_octal_char(num: int) -> str:
    """Format the magnitude of a character code in octal."""
    return format(abs(num), "o")


def format_printables(text: str) -> str:
    """Keep characters with codes 32 to 127; replace others by their octal code."""
    return "".join(
        ch if 32 <= ord(ch) <= 127 else format_octal(ord(ch), 0, 0, 0)
        for ch in text
    )


def _integer_position(nf: float) -> int:
    counter = 0
    num = nf
    divisor = 1
    while num > 1:
        num = _f32(nf / _f32(divisor))
        divisor *= 10
        counter += 1
    return counter - 2


def _shift_to_integer(nf: float) -> float:
    while True:
        nf = _f32(nf * 10)
        if _f32(nf - int(nf)) == 0:
            return nf


def _float_body(value: float) -> tuple[str, int, int]:
    nf = _f32(value)
    if not math.isfinite(nf):
        raise ValueError(f"cannot format non-finite value {value!r}")
    sign = ""
    if nf < 0:
        sign = "-"
        nf = -nf
    point = _integer_position(nf)
    nf = _shift_to_integer(nf)
    divisor = 1
    length = 0
    while _f32(nf / _f32(divisor)) >= 10:
        divisor *= 10
        length += 1
    length += 1
    parts = [sign]
    countdown = point
    while divisor > 0:
        parts.append(str(int(_f32(nf / _f32(divisor))) % 10))
        divisor //= 10
        if countdown == 0:
            parts.append(".")
        countdown -= 1
    return "".join(parts), point, length


def format_float(value: float) -> str:
    """Format a single-precision value in fixed notation, zero-filled to six decimals."""
    body, point, length = _float_body(value)
    gap = abs(length - point)
    if gap < 6:
        body += "0" * (6 - gap) + "0"
    return body


def format_float_trimmed(value: float) -> str:
    """Format a single-precision value in fixed notation without trailing zero fill."""
    return _float_body(value)[0]


def format_exp(value: float, upper: bool) -> str:
    """Format a positive single-precision value in exponent notation."""
    nf = _f32(value)
    if not math.isfinite(nf) or nf <= 0:
        raise ValueError(f"cannot format {value!r} in exponent notation")
    counter = 0
    if nf < 1:
        while nf < 1:
            nf = _f32(nf * 10)
            counter += 1
        sign = "-"
    else:
        while nf >= 10:
            nf = _f32(nf / 10)
            counter += 1
        sign = "+"
    marker = "E" if upper else "e"
    lead = "0" if counter < 10 else ""
    return f"{format_float(nf)}{marker}{sign}{lead}{counter}"