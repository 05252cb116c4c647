"""ASCII character classification and case conversion."""

from __future__ import annotations

_SPACES = frozenset("\t\n\v\f\r ")


def _code(char: str) -> int:
    """Return the code point of a one-character string; the empty string counts as NUL."""
    if not char:
        return 0
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return ord(char)


def is_alpha(char: str) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(char)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(char: str) -> bool:
    """True for the ASCII digits 0-9, ignoring the locale."""
    return ord("0") <= _code(char) <= ord("9")


def is_alnum(char: str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(char) or is_digit(char)


def is_ascii(char: str) -> bool:
    """True for code points 0-127."""
    return 0 <= _code(char) <= 127


def is_print(char: str) -> bool:
    """True for printable ASCII characters, 32-126."""
    return 32 <= _code(char) <= 126


def is_space(char: str) -> bool:
    """True for tab, newline, vertical tab, form feed, carriage return and space."""
    _code(char)
    return char in _SPACES


def to_lower(char: str) -> str:
    """Lower-case an ASCII upper-case letter; any other character is returned as is."""
    code = _code(char)
    if ord("A") <= code <= ord("Z"):
        return chr(code + 32)
    return char


def to_upper(char: str) -> str:
    """Upper-case an ASCII lower-case letter; any other character is returned as is."""
    code = _code(char)
    if ord("a") <= code <= ord("z"):
        return chr(code - 32)
    return char