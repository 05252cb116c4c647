"""Running a parsed pipeline: builtins in the shell, programs as child processes."""

from __future__ import annotations

import io
import subprocess
import sys
import tempfile
from typing import IO, List, Optional, Sequence, Tuple

from minish.builtins import Builtin, find_builtin
from minish.environment import Environment
from minish.parser import Command

COMMAND_FAILED = 127


def check_pipeline(commands: Sequence[Command]) -> bool:
    """True when every command has words and is either a builtin or a found program."""
    return all(
        command.argv
        and (command.path is not None or find_builtin(command.argv[0]) is not None)
        for command in commands
    )


def _bytes_file(data: bytes) -> IO[bytes]:
    buffer = tempfile.TemporaryFile()
    buffer.write(data)
    buffer.seek(0)
    return buffer


def _run_builtin(builtin: Builtin, command: Command, environment: Environment,
                 capture: bool) -> Tuple[int, Optional[bytes]]:
    if command.stdout is not None:
        stream = io.TextIOWrapper(command.stdout, encoding="utf-8",
                                  errors="surrogateescape", write_through=True)
        try:
            return builtin(command.argv, environment, stream), None
        finally:
            stream.detach()
            command.stdout.flush()
    if capture:
        buffer = io.StringIO()
        status = builtin(command.argv, environment, buffer)
        return status, buffer.getvalue().encode("utf-8", "surrogateescape")
    try:
        return builtin(command.argv, environment, sys.stdout), None
    finally:
        sys.stdout.flush()


def _spawn(command: Command, environment: Environment, stdin: Optional[IO[bytes]],
           is_last: bool) -> Optional[subprocess.Popen]:
    name = command.argv[0] if command.argv else ""
    if command.path is None or not command.argv:
        sys.stderr.write(f"miniSH: {name}: command not found\n")
        return None
    if command.stdout is not None:
        target = command.stdout
    else:
        target = None if is_last else subprocess.PIPE
    sys.stdout.flush()
    try:
        return subprocess.Popen(command.argv, executable=command.path, stdin=stdin,
                                stdout=target, env=environment.as_dict())
    except (OSError, ValueError) as exc:
        reason = getattr(exc, "strerror", None) or str(exc)
        sys.stderr.write(f"miniSH: {name}: {reason}\n")
        return None


def _exit_status(returncode: int) -> int:
    return -returncode if returncode < 0 else returncode


def _stop(processes: List[subprocess.Popen]) -> None:
    for process in processes:
        if process.poll() is None:
            process.kill()
    for process in processes:
        process.wait()


def run_pipeline(commands: Sequence[Command], environment: Environment) -> int:
    """Run the commands connected by pipes and return the status of the last one.

    Builtins run in the shell itself.  Each stage after the first reads the
    output of the stage before it.  Once the last program finishes, any
    earlier stage still running is killed.  A program killed by a signal
    gives the signal number as its status.
    """
    if not commands:
        raise ValueError("a pipeline needs at least one command")
    processes: List[subprocess.Popen] = []
    last_process: Optional[subprocess.Popen] = None
    upstream: Optional[IO[bytes]] = None
    status = 0
    final = len(commands) - 1
    try:
        for index, command in enumerate(commands):
            is_last = index == final
            stdin = command.stdin if index == 0 else upstream
            upstream = None
            try:
                builtin = find_builtin(command.argv[0]) if command.argv else None
                if builtin is not None:
                    capture = not is_last and command.stdout is None
                    status, captured = _run_builtin(builtin, command, environment, capture)
                    if not is_last:
                        upstream = _bytes_file(captured or b"")
                    continue
                process = _spawn(command, environment, stdin, is_last)
                if process is None:
                    status = COMMAND_FAILED
                    if not is_last:
                        upstream = _bytes_file(b"")
                    continue
                processes.append(process)
                if is_last:
                    last_process = process
                elif process.stdout is not None:
                    upstream = process.stdout
                else:
                    upstream = _bytes_file(b"")
            finally:
                if index > 0 and stdin is not None:
                    stdin.close()
        if last_process is not None:
            status = _exit_status(last_process.wait())
        _stop(processes) if last_process is not None else [p.wait() for p in processes]
    except BaseException:
        _stop(processes)
        raise
    finally:
        if upstream is not None:
            upstream.close()
    return status