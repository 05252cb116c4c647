"""Commands the shell runs itself instead of starting a program."""

from __future__ import annotations

import os
import re
from typing import Callable, Dict, Optional, Sequence, TextIO

from minish.environment import Environment, is_valid_identifier
from minish.numbers import atoi

Builtin = Callable[[Sequence[str], Environment, TextIO], int]

_NO_NEWLINE_FLAG = re.compile(r"-n+")
_HIDDEN_PREFIX = "?"


class ShellExit(Exception):
    """Raised by the exit builtin; carries the code the shell ends with."""

    def __init__(self, code: int) -> None:
        super().__init__(f"exit {code}")
        self.code = code


def echo(argv: Sequence[str], environment: Environment, stdout: TextIO) -> int:
    """Print the arguments separated by spaces; a leading -n drops the newline."""
    params = list(argv[1:])
    no_newline = bool(params) and _NO_NEWLINE_FLAG.fullmatch(params[0]) is not None
    if no_newline:
        params = params[1:]
    stdout.write(" ".join(params))
    if not no_newline:
        stdout.write("\n")
    return 0


def _show_vars(environment: Environment, stdout: TextIO) -> None:
    for entry in environment.entries():
        if entry.startswith(_HIDDEN_PREFIX):
            continue
        name, sep, value = entry.partition("=")
        stdout.write(f"declare -x {name}")
        if sep:
            escaped = value.replace('"', '\\"')
            stdout.write(f'="{escaped}"\n')
        else:
            stdout.write("\n")


def export(argv: Sequence[str], environment: Environment, stdout: TextIO) -> int:
    """Set variables given as NAME=value, or list them all when none is given.

    The first malformed argument stops the command with status 1; the
    arguments before it have already been applied.
    """
    params = argv[1:]
    if not params:
        _show_vars(environment, stdout)
    for param in params:
        if param[:1] in ("-", "="):
            return 1
        name, _, content = param.partition("=")
        if not is_valid_identifier(name):
            return 1
        environment.update(name, content)
    return 0


def unset(argv: Sequence[str], environment: Environment, stdout: TextIO) -> int:
    """Remove each named variable; an invalid name stops with status 1."""
    for name in argv[1:]:
        if not is_valid_identifier(name):
            return 1
        if environment.get(name) is not None:
            environment.unset(name)
    return 0


def _record_move(environment: Environment, previous: Optional[str], new: str) -> None:
    if environment.get("OLDPWD") is not None:
        environment.update("OLDPWD", previous)
    if environment.get("PWD") is not None:
        environment.update("PWD", new)
    else:
        environment.update("OLDPWD", "")


def cd(argv: Sequence[str], environment: Environment, stdout: TextIO) -> int:
    """Change directory and keep PWD and OLDPWD up to date.

    With no argument it goes to HOME (status 1 if unset); ``-`` goes to
    OLDPWD and prints it (status -1 if unset).  A failed change gives 1.
    """
    path = argv[1] if len(argv) > 1 else None
    previous = environment.get("PWD")
    if path is None:
        home = environment.get("HOME")
        if home is None:
            return 1
        try:
            os.chdir(home)
        except OSError:
            pass
        _record_move(environment, previous, home)
        return 0
    if path == "-":
        path = environment.get("OLDPWD")
        if path is None:
            return -1
        stdout.write(f"{path}\n")
    try:
        os.chdir(path)
    except OSError:
        return 1
    _record_move(environment, previous, os.getcwd())
    return 0


def pwd(argv: Sequence[str], environment: Environment, stdout: TextIO) -> int:
    """Print the current directory; options are refused with status 1."""
    param = argv[1] if len(argv) > 1 else None
    if param and param.startswith("-") and len(param) > 1:
        return 1
    try:
        current = os.getcwd()
    except FileNotFoundError:
        current = None
    if current is None or not os.path.exists(current):
        stdout.write("You are in The Nothingness\n")
        return 1
    stdout.write(f"{current}\n")
    return 0


def exit_shell(argv: Sequence[str], environment: Environment, stdout: TextIO) -> int:
    """End the shell with the given code, or the last status when none is given."""
    code = atoi(environment.get("?"))
    stdout.write("exit\n")
    if len(argv) > 1:
        raise ShellExit(atoi(argv[1]))
    raise ShellExit(code)


def env(argv: Sequence[str], environment: Environment, stdout: TextIO) -> int:
    """Print every variable that has a value; any argument gives status 127."""
    if len(argv) > 1:
        return 127
    for entry in environment.entries():
        if entry.startswith(_HIDDEN_PREFIX) or "=" not in entry:
            continue
        stdout.write(f"{entry}\n")
    return 0


BUILTINS: Dict[str, Builtin] = {
    "echo": echo,
    "export": export,
    "unset": unset,
    "cd": cd,
    "pwd": pwd,
    "exit": exit_shell,
    "env": env,
}


def find_builtin(name: Optional[str]) -> Optional[Builtin]:
    """The builtin called name, or None."""
    if name is None:
        return None
    return BUILTINS.get(name)