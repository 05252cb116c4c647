"""The interactive read-parse-run loop."""

from __future__ import annotations

import signal
import sys
import threading
from typing import Callable, Dict, List, Optional

from minish.builtins import ShellExit
from minish.environment import Environment
from minish.numbers import itoa
from minish.parser import close_all, parse
from minish.pipeline import check_pipeline, run_pipeline
from minish.signals import handle_signal
from minish.text import check_quotes, skip_blanks

try:
    import readline as _readline
except ImportError:  # pragma: no cover - platform without readline
    _readline = None

PROMPT = "miniSH$ "
ERROR_STATUS = 127

Prompt = Callable[[str], Optional[str]]


def _read_line(prompt_text: str) -> Optional[str]:
    try:
        return input(prompt_text)
    except EOFError:
        return None


class Shell:
    """A shell session: its variables and the way it reads lines."""

    def __init__(self, environment: Optional[Environment] = None,
                 prompt: Optional[Prompt] = None) -> None:
        self.environment = environment if environment is not None else Environment.from_environ()
        self.prompt: Prompt = prompt if prompt is not None else _read_line

    def _fail(self, message: str, status: int) -> int:
        print(f"miniSH: {message}")
        self.environment.update("?", itoa(status))
        return status

    def execute_line(self, line: str) -> Optional[int]:
        """Run one command line and return its status.

        A blank line does nothing and gives None.  ShellExit from the exit
        builtin is passed on to the caller.
        """
        if not skip_blanks(line):
            return None
        if not check_quotes(line):
            return self._fail("quotes error", ERROR_STATUS)
        if _readline is not None:
            _readline.add_history(line)
        try:
            commands = parse(line, self.environment, self.prompt)
        except OSError as exc:
            return self._fail(f"{exc.filename}: {exc.strerror}", 1)
        try:
            if not check_pipeline(commands):
                return self._fail("unknown command", ERROR_STATUS)
            status = run_pipeline(commands, self.environment)
        finally:
            close_all(commands)
        self.environment.update("?", itoa(status))
        return status

    def _on_signal(self, sig: int, frame: object) -> None:
        handle_signal(self.environment, sig)

    def _install_handlers(self) -> Dict[int, object]:
        previous: Dict[int, object] = {}
        if threading.current_thread() is not threading.main_thread():
            return previous
        numbers: List[int] = [signal.SIGINT]
        if hasattr(signal, "SIGQUIT"):
            numbers.append(signal.SIGQUIT)
        for number in numbers:
            previous[number] = signal.signal(number, self._on_signal)
        return previous

    def run(self) -> int:
        """Read and run lines until end of input or exit; return the exit code."""
        previous = self._install_handlers()
        try:
            while True:
                line = self.prompt(PROMPT)
                if line is None:
                    return 0
                try:
                    self.execute_line(line)
                except ShellExit as exc:
                    return exc.code & 0xFF
        finally:
            for number, handler in previous.items():
                signal.signal(number, handler if handler is not None else signal.SIG_DFL)


def main(argv: Optional[List[str]] = None) -> int:
    """Start an interactive session on the process environment."""
    return Shell().run()


if __name__ == "__main__":
    sys.exit(main())