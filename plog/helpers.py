"""Helpers that render binary buffers and named variables for the log stream."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from plog.record import format_value

__all__ = ["AscDump", "HexDump", "ascdump", "hexdump", "print_var"]

_MAX_PRINT_VARS = 9


def _as_bytes(data: Any) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return memoryview(data).tobytes()


@dataclass(frozen=True)
class AscDump:
    """A buffer shown as ASCII; unprintable bytes appear as "."."""

    data: bytes

    def __str__(self) -> str:
        return "".join(chr(b) if 0x20 <= b < 0x7F else "." for b in self.data)


class HexDump:
    """A buffer shown as hex digits, split into groups by separators."""

    def __init__(
        self,
        data: bytes,
        group: int = 8,
        digit_separator: str = " ",
        group_separator: str = "  ",
    ) -> None:
        self.data = data
        self._group = 0
        self.group(group)
        self.digit_separator = digit_separator
        self.group_separator = group_separator

    def group(self, group: int) -> HexDump:
        """Set how many bytes form a group (0 disables grouping)."""
        if group < 0:
            raise ValueError("group size must not be negative")
        self._group = group
        return self

    def separator(self, digit_separator: str, group_separator: str | None = None) -> HexDump:
        """Set the separator between bytes and, optionally, between groups."""
        self.digit_separator = digit_separator
        if group_separator is not None:
            self.group_separator = group_separator
        return self

    def __str__(self) -> str:
        parts: list[str] = []
        size = len(self.data)
        for count, byte in enumerate(self.data, start=1):
            parts.append(f"{byte:02x}")
            if count < size:
                at_group_end = self._group > 0 and count % self._group == 0
                parts.append(self.group_separator if at_group_end else self.digit_separator)
        return "".join(parts)


def ascdump(data: Any) -> AscDump:
    """Wrap a bytes-like object (or text, as UTF-8) for ASCII display."""
    return AscDump(_as_bytes(data))


def hexdump(data: Any) -> HexDump:
    """Wrap a bytes-like object (or text, as UTF-8) for hex display."""
    return HexDump(_as_bytes(data))


def print_var(**kwargs: Any) -> str:
    """Render up to nine named values as "name: value, name: value"."""
    if not 1 <= len(kwargs) <= _MAX_PRINT_VARS:
        raise TypeError(f"print_var takes 1 to {_MAX_PRINT_VARS} variables, got {len(kwargs)}")
    return ", ".join(f"{name}: {format_value(value)}" for name, value in kwargs.items())