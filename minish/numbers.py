"""Integer parsing and formatting with 32-bit C integer semantics."""

from __future__ import annotations

from typing import Optional

from minish.chars import is_digit, is_space

INT_MAX = 2147483647
INT_MIN = -2147483648


def atoi(text: Optional[str]) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped and one sign is allowed.  A value above
    INT_MAX gives -1, one below INT_MIN gives 0, and None gives 0.
    """
    if text is None:
        return 0
    pos = 0
    while pos < len(text) and is_space(text[pos]):
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    for char in text[pos:]:
        if not is_digit(char):
            break
        result = result * 10 + int(char)
        if result * sign > INT_MAX:
            return -1
        if result * sign < INT_MIN:
            return 0
    return result * sign


def count_digits(num: int) -> int:
    """Number of characters needed to print num in decimal, sign included."""
    if num == 0:
        return 1
    count = 0
    remaining = abs(num)
    while remaining:
        count += 1
        remaining //= 10
    return count + (num < 0)


def itoa(num: int) -> str:
    """Decimal representation of num."""
    if num == INT_MIN:
        return "-2147483648"
    digits = []
    remaining = abs(num)
    while True:
        digits.append(chr(ord("0") + remaining % 10))
        remaining //= 10
        if not remaining:
            break
    if num < 0:
        digits.append("-")
    return "".join(reversed(digits))


def logn(base: int, num: int) -> int:
    """Floor of the base-`base` logarithm of num; 0 when num is below base."""
    if base < 2:
        raise ValueError(f"logarithm base must be at least 2, got {base}")
    if num < 0:
        raise ValueError(f"logarithm argument must not be negative, got {num}")
    current = base
    steps = 0
    while current <= num:
        current *= base
        steps += 1
    return steps


def itoa_base(num: int, base: str) -> str:
    """Represent num using the characters of base as digits."""
    radix = len(base)
    if radix < 2:
        raise ValueError("a base needs at least two digits")
    negative = num < 0
    remaining = -num if negative else num
    width = logn(radix, remaining) + 1
    digits = []
    for _ in range(width):
        digits.append(base[remaining % radix])
        remaining //= radix
    if negative:
        digits.append("-")
    return "".join(reversed(digits))