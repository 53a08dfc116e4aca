"""Directory listing helpers in the style of a small ``ls``.

Every listing function returns its text instead of writing it.
"""

from __future__ import annotations

import os
import stat
import time
from collections.abc import Iterable, Sequence

from pushswap.strutils import compare

try:
    import grp
    import pwd
except ImportError:  # platforms without a user database
    grp = None
    pwd = None

_MONTH_BY_LETTER = {
    "E": 1,
    "F": 2,
    "M": 3,
    "A": 4,
    "J": 6,
    "S": 9,
    "O": 10,
    "N": 11,
    "D": 12,
}

_MONTH_ABBREV = {
    1: "ene",
    2: "feb",
    3: "mar",
    4: "abr",
    5: "may",
    6: "jun",
    7: "jul",
    8: "ago",
    9: "sep",
    10: "oct",
    11: "nov",
    12: "dic",
}

_PERMISSION_BITS = (
    (stat.S_IFDIR, "d"),
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)


def _join(path, entry: str) -> str:
    return f"{os.fspath(path)}/{entry}"


def name_arguments(argv: Sequence[str]) -> list[str]:
    """Return the arguments from the first one not starting with '-' onwards.

    argv holds the arguments after the program name.
    """
    for index, arg in enumerate(argv):
        if not arg.startswith("-"):
            return list(argv[index:])
    return []


def count_names(argv: Sequence[str]) -> int:
    """Return how many arguments name_arguments keeps."""
    return len(name_arguments(argv))


def heading(names: Sequence[str], index: int, count: int) -> str:
    """Return the heading for names[index] when more than one name is listed."""
    if count > 1:
        return f"{names[index]}: \n"
    return ""


def visible_entries(path) -> list[str]:
    """Return the entries of a directory whose names do not start with '.'."""
    return [name for name in os.listdir(path) if not name.startswith(".")]


def count_entries(path) -> int:
    """Return the number of visible entries of a directory."""
    return len(visible_entries(path))


def block_count(path) -> int:
    """Return the total of allocated blocks of the visible entries of a directory."""
    total = 0
    for name in visible_entries(path):
        try:
            info = os.stat(_join(path, name))
        except FileNotFoundError:
            continue
        total += getattr(info, "st_blocks", 0)
    return max(total, 0)


def _prefix_length(left: str, right: str) -> int:
    length = 0
    for a, b in zip(left, right):
        if a != b:
            break
        length += 1
    return length


def sort_names(names: Iterable[str]) -> list[str]:
    """Order names by repeated neighbour exchanges.

    Neighbours are exchanged when the first character of the left one is
    greater, and also when both start with the same character and the left
    name is not a prefix of the right one.
    """
    items = list(names)
    count = len(items)
    for _ in range(count):
        for j in range(count - 1):
            if items[j][:1] > items[j + 1][:1]:
                items[j], items[j + 1] = items[j + 1], items[j]
            left, right = items[j], items[j + 1]
            if left[:1] == right[:1] and _prefix_length(left, right) < len(left):
                items[j], items[j + 1] = right, left
    return items


def month_number(date: str, index: int) -> int:
    """Return the month number for the month name starting at index in date."""
    letter = date[index:index + 1]
    try:
        month = _MONTH_BY_LETTER[letter]
    except KeyError:
        raise ValueError(f"no month name at position {index} of {date!r}") from None
    if month == 3 and date[index + 2:index + 3] == "y":
        month = 5
    elif month == 4 and date[index + 1:index + 2] == "g":
        month = 8
    elif month == 6 and date[index + 2:index + 3] == "l":
        month = 7
    return month


def month_abbrev(month: int) -> str:
    """Return the three-letter abbreviation of a month, or '' for an unknown number."""
    return _MONTH_ABBREV.get(month, "")


def format_date(date: str) -> str:
    """Turn a ctime-style date into 'day month hh:mm'."""
    try:
        first = date.index(" ")
        month = month_number(date, first + 1)
        second = date.index(" ", first + 1)
        day_end = date.index(" ", second + 1)
    except ValueError:
        raise ValueError(f"malformed date {date!r}") from None
    day = date[second + 1:day_end]
    rest = date[day_end:]
    colons = [pos for pos, ch in enumerate(rest) if ch == ":"]
    if len(colons) < 2:
        raise ValueError(f"malformed date {date!r}")
    return f"{day} {month_abbrev(month)}{rest[:colons[1]]}"


def permissions(mode: int) -> str:
    """Return the ten-character permission string of a file mode."""
    return "".join(mark if mode & bit else "-" for bit, mark in _PERMISSION_BITS)


def list_default(path) -> str:
    """List the visible entries, sorted, each followed by a space."""
    names = sort_names(visible_entries(path))
    return "".join(f"{name} " for name in names) + "\n"


def list_all(path) -> str:
    """List every entry, '.' and '..' included, sorted, each followed by a space."""
    names = sort_names([".", "..", *os.listdir(path)])
    return "".join(f"{name} " for name in names) + "\n"


def list_reverse(path) -> str:
    """List the visible entries in reverse sorted order, one per line."""
    names = sort_names(visible_entries(path))
    return "".join(f"{name}\n" for name in reversed(names))


def _owner(uid: int) -> str:
    if pwd is None:
        return str(uid)
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


def _group(gid: int) -> str:
    if grp is None:
        return str(gid)
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


def list_long(path) -> str:
    """List the visible entries in long format, preceded by the block total."""
    lines = [f"total {block_count(path)}\n"]
    for name in sort_names(visible_entries(path)):
        info = os.stat(_join(path, name))
        lines.append(
            f"{permissions(info.st_mode)} {info.st_nlink} "
            f"{_owner(info.st_uid)} {_group(info.st_gid)} {info.st_size} "
            f"{format_date(time.ctime(info.st_mtime))} {name}\n"
        )
    return "".join(lines)


def list_recursive(path) -> str:
    """List a directory, then every visible subdirectory below it."""
    parts = [list_default(path), "\n"]
    for name in sort_names(visible_entries(path)):
        child = _join(path, name)
        info = os.stat(child)
        if not stat.S_ISDIR(info.st_mode):
            continue
        parts.append(f"{child}:\n")
        if info.st_mode & stat.S_IRUSR:
            parts.append(list_recursive(child))
        else:
            parts.append(f"ls: {child} Permission denied\n\n")
    return "".join(parts)


def list_named(path, name: str) -> str:
    """Return the entries of path, '.' and '..' included, equal to name, each followed by a space."""
    entries = [".", "..", *os.listdir(path)]
    return "".join(f"{entry} " for entry in entries if compare(entry, name) == 0)


def list_by_time(path) -> str:
    """List the visible entries, most recently modified first, each followed by a space."""
    names = visible_entries(path)
    names.sort(key=lambda entry: os.stat(_join(path, entry)).st_mtime, reverse=True)
    return "".join(f"{name} " for name in names)