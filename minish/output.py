"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

from typing import Optional, TextIO

from minish.numbers import itoa


def put_char(char: str, stream: TextIO) -> None:
    """Write a single character to stream."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    stream.write(char)


def put_str(text: Optional[str], stream: TextIO) -> None:
    """Write text to stream; None writes nothing."""
    if text:
        stream.write(text)


def put_endl(text: Optional[str], stream: TextIO) -> None:
    """Write text followed by a newline."""
    put_str(text, stream)
    put_char("\n", stream)


def put_nbr(num: int, stream: TextIO) -> None:
    """Write num in decimal."""
    put_str(itoa(num), stream)