"""Logging building blocks: severities, records, formatters, converters and dump helpers."""

__version__ = "1.1.10"