"""The shell's own ordered set of environment variables."""

from __future__ import annotations

import os
from typing import Dict, Iterable, List, Mapping, Optional

from minish.chars import is_alnum
from minish.text import is_blank


def is_valid_identifier(name: str) -> bool:
    """True when every character of name is an ASCII letter, a digit or a blank."""
    return all(is_alnum(char) or is_blank(char) for char in name)


class Environment:
    """Ordered list of ``NAME=value`` entries, as handed to child programs."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._entries: List[str] = [str(entry) for entry in entries]

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "Environment":
        """Copy a mapping of variables, the process environment by default."""
        if environ is None:
            environ = os.environ
        return cls(f"{name}={value}" for name, value in environ.items())

    def _index(self, name: str) -> Optional[int]:
        prefix = name + "="
        for index, entry in enumerate(self._entries):
            if entry.startswith(prefix):
                return index
        return None

    def get(self, name: str) -> Optional[str]:
        """Value of name, or None when it is not set."""
        index = self._index(name)
        if index is None:
            return None
        return self._entries[index][len(name) + 1:]

    def update(self, name: str, content: Optional[str]) -> None:
        """Set name to content, or remove it when content is None.

        An existing variable keeps its position; a new one goes at the end.
        """
        index = self._index(name)
        if content is None:
            if index is not None:
                del self._entries[index]
            return
        entry = f"{name}={content}"
        if index is None:
            self._entries.append(entry)
        else:
            self._entries[index] = entry

    def unset(self, name: str) -> None:
        """Remove name if it is set."""
        self.update(name, None)

    def entries(self) -> List[str]:
        """A copy of the entries in order."""
        return list(self._entries)

    def as_dict(self) -> Dict[str, str]:
        """Mapping of every ``NAME=value`` entry."""
        result: Dict[str, str] = {}
        for entry in self._entries:
            name, sep, value = entry.partition("=")
            if sep and name not in result:
                result[name] = value
        return result

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._index(name) is not None