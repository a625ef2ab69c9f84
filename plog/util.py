"""Time stamps, thread ids, name helpers and a raw append-only file."""

from __future__ import annotations

import os
import threading
import time as _time
from dataclasses import dataclass

__all__ = [
    "Time",
    "File",
    "current_time",
    "thread_id",
    "process_func_name",
    "find_extension_dot",
    "split_file_name",
    "remove_file",
    "rename_file",
]


@dataclass(frozen=True)
class Time:
    """A wall-clock moment: whole seconds since the epoch plus milliseconds."""

    time: int
    millitm: int


def current_time() -> Time:
    """Return the current wall-clock time with millisecond precision."""
    ns = _time.time_ns()
    return Time(ns // 1_000_000_000, (ns // 1_000_000) % 1000)


def thread_id() -> int:
    """Return the operating-system id of the calling thread."""
    return threading.get_native_id()


def process_func_name(func: str) -> str:
    """Strip a decorated function signature down to its qualified name.

    The name is what lies between the last space before the first "(" and
    that "(". Text without a "(" is returned unchanged.
    """
    paren = func.find("(")
    if paren < 0:
        return func
    begin = func.rfind(" ", 0, paren) + 1
    return func[begin:paren]


def find_extension_dot(file_name: str) -> str | None:
    """Return the part of ``file_name`` from its last dot, or None."""
    dot = file_name.rfind(".")
    return None if dot < 0 else file_name[dot:]


def split_file_name(file_name: str) -> tuple[str, str]:
    """Split a file name at its last dot into (name without extension, extension)."""
    stem, dot, ext = file_name.rpartition(".")
    if not dot:
        return file_name, ""
    return stem, ext


def remove_file(file_name: str) -> bool:
    """Delete a file; return False if it did not exist."""
    try:
        os.unlink(file_name)
    except FileNotFoundError:
        return False
    return True


def rename_file(old_name: str, new_name: str) -> bool:
    """Rename a file, replacing any target; return False if the source is missing."""
    try:
        os.replace(old_name, new_name)
    except FileNotFoundError:
        return False
    return True


_OPEN_FLAGS = (
    os.O_CREAT
    | os.O_APPEND
    | os.O_WRONLY
    | getattr(os, "O_CLOEXEC", 0)
    | getattr(os, "O_BINARY", 0)
    | getattr(os, "O_NOINHERIT", 0)
)


class File:
    """A file opened for appending through a raw descriptor."""

    def __init__(self, file_name: str | None = None) -> None:
        self._fd: int | None = None
        if file_name is not None:
            self.open(file_name)

    @property
    def is_open(self) -> bool:
        return self._fd is not None

    def open(self, file_name: str) -> int:
        """Open (creating if needed) for appending; return the current size."""
        self.close()
        self._fd = os.open(file_name, _OPEN_FLAGS, 0o644)
        return self.seek(0, os.SEEK_END)

    def _descriptor(self) -> int:
        if self._fd is None:
            raise OSError("file is not open")
        return self._fd

    def write(self, data: bytes | str) -> int:
        """Write bytes (text is encoded as UTF-8); return the number written."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        return os.write(self._descriptor(), data)

    def seek(self, offset: int, whence: int) -> int:
        """Move the file position; return the new absolute position."""
        return os.lseek(self._descriptor(), offset, whence)

    def close(self) -> None:
        """Close the descriptor; closing a closed file does nothing."""
        if self._fd is not None:
            fd, self._fd = self._fd, None
            os.close(fd)

    def __enter__(self) -> File:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __del__(self) -> None:
        try:
            self.close()
        except OSError:
            pass