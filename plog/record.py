"""Log records and the rules for turning logged values into text."""

from __future__ import annotations

import os
from collections.abc import Mapping, Set, Sequence
from dataclasses import dataclass, field
from typing import Any

from plog.severity import Severity
from plog.util import Time, current_time, process_func_name, thread_id

__all__ = ["Record", "format_value"]

_NULL = "(null)"


def format_value(data: Any) -> str:
    """Render a value the way the log stream prints it.

    ``None`` becomes "(null)", mappings print their items as "key:value",
    sequences and sets print as "[a, b, c]" (recursively), and file system
    paths and everything else print through ``str``.
    """
    if data is None:
        return _NULL
    if isinstance(data, (str, bytes, bytearray, os.PathLike)):
        return data.decode("utf-8", "replace") if isinstance(data, (bytes, bytearray)) else str(data)
    if isinstance(data, Mapping):
        items = (f"{format_value(key)}:{format_value(value)}" for key, value in data.items())
        return "[" + ", ".join(items) + "]"
    if isinstance(data, (Sequence, Set)):
        return "[" + ", ".join(format_value(item) for item in data) + "]"
    return str(data)


@dataclass(eq=False)
class Record:
    """One log message together with where and when it was produced."""

    severity: Severity
    func: str = ""
    line: int = 0
    file: str = ""
    obj: Any = None
    instance_id: Any = 0
    time: Time = field(default_factory=current_time)
    tid: int = field(default_factory=thread_id)
    _parts: list[str] = field(default_factory=list, init=False, repr=False)

    def __lshift__(self, data: Any) -> Record:
        """Append a value to the message; returns the record for chaining."""
        self._parts.append(format_value(data))
        return self

    def printf(self, fmt: str, *args: Any) -> Record:
        """Append printf-style formatted text to the message."""
        self._parts.append(fmt % args if args else fmt)
        return self

    def message(self) -> str:
        """Return the message text accumulated so far."""
        return "".join(self._parts)

    def func_name(self) -> str:
        """Return the function name stripped of its signature decorations."""
        return process_func_name(self.func)