"""Log severity levels and their textual names."""

from __future__ import annotations

import enum

__all__ = ["Severity", "severity_to_string", "severity_from_string"]


class Severity(enum.IntEnum):
    """Severity of a log record; a lower value is more severe."""

    NONE = 0
    FATAL = 1
    ERROR = 2
    WARNING = 3
    INFO = 4
    DEBUG = 5
    VERBOSE = 6


_NAMES = {
    Severity.FATAL: "FATAL",
    Severity.ERROR: "ERROR",
    Severity.WARNING: "WARN",
    Severity.INFO: "INFO",
    Severity.DEBUG: "DEBUG",
    Severity.VERBOSE: "VERB",
}

_BY_INITIAL = {
    "F": Severity.FATAL,
    "E": Severity.ERROR,
    "W": Severity.WARNING,
    "I": Severity.INFO,
    "D": Severity.DEBUG,
    "V": Severity.VERBOSE,
}


def severity_to_string(severity: Severity | int) -> str:
    """Return the short name used in log output, "NONE" for anything unknown."""
    try:
        return _NAMES.get(Severity(severity), "NONE")
    except ValueError:
        return "NONE"


def severity_from_string(text: str) -> Severity:
    """Parse a severity from its name; only the first letter matters."""
    if not text:
        return Severity.NONE
    return _BY_INITIAL.get(text[0].upper(), Severity.NONE)