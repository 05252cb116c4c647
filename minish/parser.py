"""Turning a command line into a list of commands ready to run."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field
from typing import BinaryIO, Callable, Iterator, List, Optional, Tuple

from minish.chars import is_alnum, is_alpha
from minish.environment import Environment
from minish.strings import split
from minish.text import is_blank

Prompt = Callable[[str], Optional[str]]

HEREDOC_PROMPT = ">"
_QUOTES = "\"'"


def _read_line(prompt_text: str) -> Optional[str]:
    """Read one line from the terminal; None at end of input."""
    try:
        return input(prompt_text)
    except EOFError:
        return None


@dataclass(eq=False)
class Command:
    """One stage of a pipeline.

    ``text`` is the raw text of the stage, rewritten by each parsing pass;
    ``argv`` holds the final words and ``path`` the program to start, if any.
    ``stdin`` and ``stdout`` are open files from redirections, or None.
    """

    text: str
    argv: List[str] = field(default_factory=list)
    path: Optional[str] = None
    stdin: Optional[BinaryIO] = None
    stdout: Optional[BinaryIO] = None

    def close(self) -> None:
        """Close any redirection files the command holds."""
        for stream in (self.stdin, self.stdout):
            if stream is not None:
                stream.close()
        self.stdin = None
        self.stdout = None


def _pipe_positions(line: str) -> Iterator[int]:
    """Indices of the pipe characters that are outside quotes."""
    in_single = False
    in_double = False
    for index, char in enumerate(line):
        if char == "'" and not in_double:
            in_single = not in_single
        if char == '"' and not in_single:
            in_double = not in_double
        if char == "|" and not in_single and not in_double:
            yield index


def split_commands(line: str) -> List[Command]:
    """Cut line at every unquoted pipe into one command per stage."""
    commands: List[Command] = []
    start = 0
    for position in _pipe_positions(line):
        commands.append(Command(line[start:position]))
        start = position + 1
    commands.append(Command(line[start:]))
    return commands


def _var_end(text: str, index: int) -> int:
    """Index of the last character of the variable reference starting at index.

    When no reference starts there, index itself is returned.
    """
    if text[index] != "$":
        return index
    following = index + 1
    char = text[following] if following < len(text) else ""
    if char == "?":
        return following
    if not is_alpha(char):
        return index
    while following < len(text) and (is_alnum(text[following]) or text[following] == "_"):
        following += 1
    return following - 1


def replace_vars(command: Command, environment: Environment) -> None:
    """Expand ``$NAME`` and ``$?`` in the command text.

    Text between single quotes is left alone; unset variables expand to nothing.
    """
    text = command.text
    pieces: List[str] = []
    inhibited = False
    index = 0
    while index < len(text):
        char = text[index]
        end = _var_end(text, index)
        if char != "$" or inhibited or end == index:
            pieces.append(char)
        else:
            value = environment.get(text[index + 1:end + 1])
            if value:
                pieces.append(value)
            index = end
        if text[index] == "'":
            inhibited = not inhibited
        index += 1
    command.text = "".join(pieces)


def _read_filename(text: str, index: int) -> Tuple[str, int]:
    """Read the target of a redirection; returns it and the index after it."""
    if index < len(text) and text[index] in "<>":
        index += 1
    while index < len(text) and is_blank(text[index]):
        index += 1
    lock = ""
    chars: List[str] = []
    while index < len(text) and not (not lock and is_blank(text[index])):
        char = text[index]
        if lock == char:
            lock = ""
        elif char in _QUOTES and not lock:
            lock = char
        else:
            chars.append(char)
        index += 1
    return "".join(chars), index


def _set_stdin(command: Command, stream: BinaryIO) -> None:
    if command.stdin is not None:
        command.stdin.close()
    command.stdin = stream


def _set_stdout(command: Command, stream: BinaryIO) -> None:
    if command.stdout is not None:
        command.stdout.close()
    command.stdout = stream


def _heredoc(end: str, prompt: Prompt) -> BinaryIO:
    """Collect lines until one equals end and return them as a readable file."""
    buffer = tempfile.TemporaryFile()
    while True:
        line = prompt(HEREDOC_PROMPT)
        if line is None or line == end:
            break
        buffer.write((line + "\n").encode("utf-8", "surrogateescape"))
    buffer.seek(0)
    return buffer  # type: ignore[return-value]


def _redirect(command: Command, operator: str, doubled: bool, target: str,
              prompt: Prompt) -> None:
    if operator == ">":
        mode = os.O_APPEND if doubled else os.O_TRUNC
        fd = os.open(target, os.O_WRONLY | os.O_CREAT | mode, 0o644)
        _set_stdout(command, os.fdopen(fd, "wb"))
    elif doubled:
        _set_stdin(command, _heredoc(target, prompt))
    else:
        fd = os.open(target, os.O_RDONLY | os.O_CREAT, 0o644)
        _set_stdin(command, os.fdopen(fd, "rb"))


def apply_redirections(command: Command, prompt: Optional[Prompt] = None) -> None:
    """Open the files named by unquoted ``<``, ``<<``, ``>`` and ``>>``.

    The redirections are removed from the command text.  A ``<`` target that
    does not exist is created empty.  ``<<`` reads lines through prompt until
    the delimiter.  Files that cannot be opened raise OSError.
    """
    reader = prompt if prompt is not None else _read_line
    text = command.text
    pieces: List[str] = []
    lock = ""
    index = 0
    while index < len(text):
        char = text[index]
        if lock == char:
            lock = ""
        elif char in _QUOTES and not lock:
            lock = char
        if char in "<>" and not lock:
            doubled = text[index + 1:index + 2] == char
            target, index = _read_filename(text, index + 1)
            _redirect(command, char, doubled, target, reader)
            continue
        pieces.append(char)
        index += 1
    command.text = "".join(pieces)


def build_arguments(command: Command) -> None:
    """Split the command text into words at unquoted blanks, dropping quotes.

    Empty words are left out.
    """
    words: List[str] = []
    current: List[str] = []
    lock = ""
    for char in command.text:
        if lock == char:
            lock = ""
        elif char in _QUOTES and not lock:
            lock = char
        elif is_blank(char) and not lock:
            words.append("".join(current))
            current = []
        else:
            current.append(char)
    words.append("".join(current))
    command.argv.extend(word for word in words if word)


def resolve_path(command: Command, environment: Environment) -> None:
    """Find the program named by the first word.

    A name that is executable as given is used directly; otherwise each
    directory in PATH is tried in order.  ``.`` and ``..`` never resolve.
    """
    command.path = None
    name = command.argv[0] if command.argv else None
    if name is None or name in (".", ".."):
        return
    if os.access(name, os.X_OK):
        command.path = name
        return
    for folder in split(environment.get("PATH"), ":"):
        candidate = f"{folder}/{name}"
        if os.access(candidate, os.F_OK):
            command.path = candidate
            return


def parse(line: str, environment: Environment,
          prompt: Optional[Prompt] = None) -> List[Command]:
    """Run every parsing pass over line and return the pipeline's commands."""
    commands = split_commands(line)
    for command in commands:
        replace_vars(command, environment)
    try:
        for command in commands:
            apply_redirections(command, prompt)
    except OSError:
        close_all(commands)
        raise
    for command in commands:
        build_arguments(command)
    for command in commands:
        resolve_path(command, environment)
    return commands


def close_all(commands: List[Command]) -> None:
    """Close the redirection files of every command."""
    for command in commands:
        command.close()