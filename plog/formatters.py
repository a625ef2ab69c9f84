"""Formatters that turn a record into a line of text."""

from __future__ import annotations

import time
from typing import Any

from plog.record import Record
from plog.severity import severity_to_string

__all__ = [
    "TxtFormatter",
    "TxtFormatterUtcTime",
    "CsvFormatter",
    "CsvFormatterUtcTime",
    "FuncMessageFormatter",
    "MessageOnlyFormatter",
]


def _broken_down(record: Record, utc: bool) -> time.struct_time:
    return time.gmtime(record.time.time) if utc else time.localtime(record.time.time)


def _object_text(obj: Any) -> str:
    return "0" if obj is None else f"{id(obj):#x}"


class TxtFormatter:
    """Human-readable lines: date, time, severity, thread, function, message."""

    use_utc = False

    def header(self) -> str:
        return ""

    def format(self, record: Record) -> str:
        t = _broken_down(record, self.use_utc)
        return (
            f"{t.tm_year}-{t.tm_mon:02d}-{t.tm_mday:02d} "
            f"{t.tm_hour:02d}:{t.tm_min:02d}:{t.tm_sec:02d}.{record.time.millitm:03d} "
            f"{severity_to_string(record.severity):<5} "
            f"[{record.tid}] "
            f"[{record.func_name()}@{record.line}] "
            f"{record.message()}\n"
        )


class TxtFormatterUtcTime(TxtFormatter):
    """TxtFormatter with time stamps in UTC."""

    use_utc = True


class CsvFormatter:
    """Semicolon-separated lines with a quoted, length-limited message."""

    use_utc = False
    MAX_MESSAGE_SIZE = 32000

    def header(self) -> str:
        return "Date;Time;Severity;TID;This;Function;Message\n"

    def format(self, record: Record) -> str:
        t = _broken_down(record, self.use_utc)
        message = record.message()
        if len(message) > self.MAX_MESSAGE_SIZE:
            message = message[: self.MAX_MESSAGE_SIZE] + "..."
        quoted = "".join(f'"{token}"' for token in message.split('"'))
        return (
            f"{t.tm_year}/{t.tm_mon:02d}/{t.tm_mday:02d};"
            f"{t.tm_hour:02d}:{t.tm_min:02d}:{t.tm_sec:02d}.{record.time.millitm:03d};"
            f"{severity_to_string(record.severity)};"
            f"{record.tid};"
            f"{_object_text(record.obj)};"
            f"{record.func_name()}@{record.line};"
            f"{quoted}\n"
        )


class CsvFormatterUtcTime(CsvFormatter):
    """CsvFormatter with time stamps in UTC."""

    use_utc = True


class FuncMessageFormatter:
    """Lines of the form "function@line: message"."""

    def header(self) -> str:
        return ""

    def format(self, record: Record) -> str:
        return f"{record.func_name()}@{record.line}: {record.message()}\n"


class MessageOnlyFormatter:
    """Lines holding only the message."""

    def header(self) -> str:
        return ""

    def format(self, record: Record) -> str:
        return f"{record.message()}\n"