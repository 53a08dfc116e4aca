"""String helpers working on ASCII character classes."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable

_WORD = re.compile(r"[0-9A-Za-z]+")
_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)
_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
_SEPARATORS = " -+"


def _lower_char(ch: str) -> bool:
    return "a" <= ch <= "z"


def _upper_char(ch: str) -> bool:
    return "A" <= ch <= "Z"


def _digit_char(ch: str) -> bool:
    return "0" <= ch <= "9"


def reverse(text: str) -> str:
    """Return text with its characters in reverse order."""
    return text[::-1]


def show_word_array(words: Iterable[str]) -> None:
    """Write every word on a line of its own to standard output."""
    out = sys.stdout
    for word in words:
        out.write(word)
        out.write("\n")


def sort_chars(text: str) -> str:
    """Reorder characters with a pass that swaps neighbours at j and j + 1
    whenever the character at i is greater than the one at j.

    This is a permutation of text, not necessarily a full sort.
    """
    chars = list(text)
    count = len(chars)
    for i in range(count):
        for j in range(count - 1):
            if chars[i] > chars[j]:
                chars[j], chars[j + 1] = chars[j + 1], chars[j]
    return "".join(chars)


def is_alpha(text: str) -> bool:
    """True when every character is an ASCII letter (an empty string qualifies)."""
    return all(_lower_char(ch) or _upper_char(ch) for ch in text)


def is_lower(text: str) -> bool:
    """True when every character is an ASCII lowercase letter."""
    return all(_lower_char(ch) for ch in text)


def is_num(text: str) -> bool:
    """True when every character is an ASCII digit."""
    return all(_digit_char(ch) for ch in text)


def is_printable(text: str) -> bool:
    """True when every character lies in the code range 32 to 127 inclusive."""
    return all(32 <= ord(ch) <= 127 for ch in text)


def is_upper(text: str) -> bool:
    """True when every character is an ASCII uppercase letter."""
    return all(_upper_char(ch) for ch in text)


def is_alphanum(char: str) -> bool:
    """True when the character is an ASCII letter or digit."""
    return _digit_char(char) or _lower_char(char) or _upper_char(char)


def count_words(text: str) -> int:
    """Count words as one plus the number of non-alphanumeric to alphanumeric transitions."""
    pairs = zip(text, text[1:])
    return 1 + sum(
        1 for cur, nxt in pairs if not is_alphanum(cur) and is_alphanum(nxt)
    )


def words(text: str) -> list[str]:
    """Split text into its maximal runs of ASCII letters and digits."""
    return _WORD.findall(text)


def capitalize(text: str) -> str:
    """Uppercase the first letter of each word and lowercase the rest.

    Words are separated by ' ', '-' or '+'; the character right after a
    separator is uppercased if it is a lowercase letter and is otherwise left
    alone. The very first character is only ever uppercased.
    """
    chars = list(text)
    if not chars:
        return ""
    if _lower_char(chars[0]):
        chars[0] = chars[0].upper()
    i = 1
    length = len(chars)
    while i < length:
        ch = chars[i]
        if ch in _SEPARATORS:
            i += 1
            if i < length and _lower_char(chars[i]):
                chars[i] = chars[i].upper()
        elif _upper_char(ch):
            chars[i] = ch.lower()
        i += 1
    return "".join(chars)


def upcase(text: str) -> str:
    """Uppercase the ASCII letters of text."""
    return text.translate(_UPPER)


def lowcase(text: str) -> str:
    """Lowercase the ASCII letters of text."""
    return text.translate(_LOWER)


def concat(dest: str, src: str) -> str:
    """Return dest followed by src."""
    return dest + src


def concat_n(dest: str, src: str, nb: int) -> str:
    """Return dest followed by at most nb characters of src."""
    return dest + src[: max(nb, 0)]


def copy_n(src: str, n: int) -> str:
    """Return at most the first n characters of src."""
    return src[: max(n, 0)]


def compare(s1: str, s2: str) -> int:
    """Return 0 for equal strings; otherwise 1 if s1 is at least as long as s2, else -1."""
    if s1 == s2:
        return 0
    return 1 if len(s1) >= len(s2) else -1


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare the lengths of s1 and s2 within the first n positions.

    Characters themselves are not compared. Returns 1 if s2 ends before the
    checked part of s1, 0 if s2 ends exactly there or n positions were
    checked, and -1 otherwise.
    """
    limit = max(0, min(len(s1), n))
    if len(s2) < limit:
        return 1
    if limit >= len(s2) or limit == n:
        return 0
    return -1


def find(haystack: str, needle: str) -> str:
    """Return haystack from the first occurrence of needle onwards.

    When needle is empty or absent, the last character of haystack is
    returned; an empty haystack gives an empty string.
    """
    index = haystack.find(needle) if needle else -1
    if index >= 0:
        return haystack[index:]
    return haystack[-1:]