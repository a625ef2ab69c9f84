"""Converters that turn formatted text into the bytes written to a file."""

from __future__ import annotations

import os
from typing import Protocol

__all__ = ["UTF8Converter", "NativeEOLConverter"]

_BOM = b"\xef\xbb\xbf"


class _Converter(Protocol):
    def header(self, text: str) -> bytes: ...

    def convert(self, text: str) -> bytes: ...


class UTF8Converter:
    """Encodes text as UTF-8; a file header is preceded by a byte order mark."""

    def header(self, text: str) -> bytes:
        """Return the byte order mark followed by the encoded header text."""
        return _BOM + self.convert(text)

    def convert(self, text: str) -> bytes:
        """Return the text encoded as UTF-8."""
        return text.encode("utf-8")


class NativeEOLConverter:
    """Rewrites line endings to the platform's native form, then delegates.

    On Windows every "\\n" becomes "\\r\\n"; elsewhere text passes unchanged.
    """

    def __init__(self, next_converter: _Converter | None = None, eol: str = os.linesep) -> None:
        self.next_converter: _Converter = next_converter if next_converter is not None else UTF8Converter()
        self.eol = eol

    def _fix_line_endings(self, text: str) -> str:
        return text if self.eol == "\n" else text.replace("\n", self.eol)

    def header(self, text: str) -> bytes:
        """Convert a file header with native line endings."""
        return self.next_converter.header(self._fix_line_endings(text))

    def convert(self, text: str) -> bytes:
        """Convert a log line with native line endings."""
        return self.next_converter.convert(self._fix_line_endings(text))