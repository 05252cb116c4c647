"""String helpers with the comparison and search rules the shell relies on."""

from __future__ import annotations

from typing import Callable, List, Optional


def _at(text: str, index: int) -> int:
    """Code point at index, with 0 standing for the end of the string."""
    return ord(text[index]) if index < len(text) else 0


def split(text: Optional[str], separator: str) -> List[str]:
    """Split text on separator, dropping empty words.

    Runs of separators and separators at either end produce no empty
    entries.  None yields an empty list.
    """
    if text is None:
        return []
    if len(separator) != 1:
        raise ValueError(f"separator must be a single character, got {separator!r}")
    return [word for word in text.split(separator) if word]


def find_char(text: str, char: str) -> Optional[int]:
    """Index of the first occurrence of char in text, or None.

    An empty char matches the end of the string and gives len(text).
    """
    if not char:
        return len(text)
    index = text.find(char[0] if len(char) == 1 else char)
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return None if index < 0 else index


def rfind_char(text: str, char: str) -> Optional[int]:
    """Index of the last occurrence of char in text, or None.

    An empty char matches the end of the string and gives len(text).
    """
    if not char:
        return len(text)
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    index = text.rfind(char)
    return None if index < 0 else index


def compare(first: Optional[str], second: Optional[str]) -> int:
    """Difference of the code points at the first position where the strings differ.

    The end of a string counts as code point 0, so comparing "NAME=value"
    with "NAME" gives ord("=").  Equal strings give 0; two None values give 1.
    """
    if first is None and second is None:
        return 1
    if first is None or second is None:
        raise TypeError("cannot compare a string with None")
    index = 0
    while True:
        left = _at(first, index)
        right = _at(second, index)
        if left != right or left == 0:
            return left - right
        index += 1


def compare_n(first: Optional[str], second: Optional[str], count: int) -> int:
    """Like compare, but looks at no more than count positions.

    If either string is None the result is 0.
    """
    if first is None or second is None:
        return 0
    for index in range(max(count, 0)):
        left = _at(first, index)
        right = _at(second, index)
        if left == 0 and right == 0:
            break
        if left != right:
            return left - right
    return 0


def find_within(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of needle in the first length characters of haystack, or None.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    size = len(needle)
    for start in range(len(haystack)):
        if size > length - start:
            break
        if haystack.startswith(needle, start):
            return start
    return None


def join(first: str, second: str) -> str:
    """Concatenate two strings."""
    if first is None or second is None:
        raise TypeError("cannot join None")
    return first + second


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string by applying func(index, char) to every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def trim(text: str, charset: str) -> str:
    """Remove every leading and trailing character found in charset."""
    if text is None or charset is None:
        raise TypeError("cannot trim None")
    return text.strip(charset) if charset else text


def substring(text: str, start: int, length: int) -> str:
    """Up to length characters of text beginning at start.

    A start past the end of text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]