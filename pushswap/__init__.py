"""Push-swap stack sorter with integer, string, formatting, printf-style and directory listing helpers."""

__version__ = "0.1.0"
__all__ = ["arith", "strutils", "numfmt", "printf", "stacks", "solver", "listing"]