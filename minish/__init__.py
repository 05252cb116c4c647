"""A small interactive shell with pipes, redirections, variables and builtins."""

__version__ = "0.1.0"

__all__ = [
    "builtins",
    "chars",
    "environment",
    "math3d",
    "numbers",
    "output",
    "parser",
    "pipeline",
    "shell",
    "signals",
    "strings",
    "text",
]