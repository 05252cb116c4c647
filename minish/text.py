"""Small text checks used by the command-line reader."""

from __future__ import annotations

_BLANKS = frozenset("\t ")


def is_blank(char: str) -> bool:
    """True for a tab or a space."""
    return char in _BLANKS and len(char) == 1


def skip_blanks(text: str) -> str:
    """The rest of text after its leading tabs and spaces."""
    return text.lstrip("\t ")


def check_quotes(line: str) -> bool:
    """True when every single or double quote in line is closed.

    A quote of one kind inside a quote of the other kind is literal.
    """
    lock = ""
    for char in line:
        if lock == char:
            lock = ""
        elif char in "\"'" and not lock:
            lock = char
    return not lock