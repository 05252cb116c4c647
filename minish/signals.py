"""Reaction to keyboard signals while the shell waits for input."""

from __future__ import annotations

import signal
import sys
from typing import Optional, TextIO

from minish.environment import Environment

CLEAR_LINE = "\x1b[2K"
INTERRUPTED_STATUS = "130"


def handle_signal(environment: Environment, sig: int,
                  stream: Optional[TextIO] = None) -> None:
    """Answer an interrupt or quit signal at the prompt.

    SIGINT moves to a fresh line, SIGQUIT clears the current one.  Either
    way the last status becomes 130.
    """
    out = sys.stdout if stream is None else stream
    if sig == signal.SIGINT:
        out.write("\n")
    elif sig == getattr(signal, "SIGQUIT", None):
        out.write(CLEAR_LINE)
    out.flush()
    environment.update("?", INTERRUPTED_STATUS)