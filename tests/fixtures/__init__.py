"""Test fixtures: sample values implementing the encoder extension points."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import sqlquote
from sqlquote import QuoteMode


@dataclass
class Money:
    """Appends itself as a fixed two-decimal numeric."""

    cents: int

    def append_sql(self, buf: bytearray, quote: QuoteMode) -> bytearray:
        buf += f"{self.cents // 100}.{self.cents % 100:02d}".encode("ascii")
        return buf


@dataclass
class Point:
    """Appends itself as a PostgreSQL ``point`` built from nested values."""

    x: Any
    y: Any

    def append_sql(self, buf: bytearray, quote: QuoteMode) -> bytearray:
        buf += b"point("
        sqlquote.append_value(buf, self.x, quote)
        buf += b","
        sqlquote.append_value(buf, self.y, quote)
        buf += b")"
        return buf


@dataclass
class FailingAppender:
    """Writes ``partial`` and then raises ``ValueError(message)``."""

    message: str
    partial: bytes = b""

    def append_sql(self, buf: bytearray, quote: QuoteMode) -> bytearray:
        buf += self.partial
        raise ValueError(self.message)


@dataclass
class Wrapped:
    """Yields ``inner`` through the indirect capability."""

    inner: Any

    def sql_value(self) -> Any:
        return self.inner


@dataclass
class FailingValuer:
    message: str

    def sql_value(self) -> Any:
        raise RuntimeError(self.message)


def wrap(value: Any, levels: int) -> Any:
    """Nest ``value`` inside ``levels`` :class:`Wrapped` layers."""
    for _ in range(levels):
        value = Wrapped(value)
    return value
