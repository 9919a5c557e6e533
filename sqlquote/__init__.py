"""sqlquote – typed Python values to safely escaped SQL text.

Turn values into SQL fragments. Don't concatenate them.

Public API
----------
``append_value``
    Append any supported value to a ``bytearray`` in a given quote mode.

``append_null`` / ``append_text`` / ``append_binary`` / ``append_map`` /
``append_identifier``
    Type-specific encoders, for callers that already know the shape.

``encode``
    Encode a value into an :class:`EncodeResult` carrying the bytes and any
    delegate failures.

Quote modes
-----------
``QuoteMode.RAW`` (no wrapping), ``QuoteMode.LITERAL`` (``'text'``) and
``QuoteMode.IDENTIFIER`` (``"col"``).  Plain ints 0/1/2 are accepted.

Extensibility
-------------
Objects take part in encoding by implementing either method below; see
:mod:`sqlquote.encode.protocols`::

    class Money:
        def append_sql(self, buf: bytearray, quote: QuoteMode) -> bytearray:
            ...

    class UserId:
        def sql_value(self) -> int:
            ...

If either raises, the encoder appends ``?!(message)`` in place of the value
(or raises :class:`EncodeError` with ``EncoderConfig(on_failure="raise")``).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlquote.config import DEFAULT_CONFIG, EncoderConfig, FailurePolicy
from sqlquote.encode.binary import Binary
from sqlquote.encode.dispatch import Encoder, default_encoder
from sqlquote.encode.protocols import SQLAppender, SQLValuer
from sqlquote.encode.quote import QuoteMode
from sqlquote.encode.result import EncodeFailure, EncodeResult
from sqlquote.errors import (
    ConfigError,
    EncodeError,
    SQLQuoteError,
    UnsupportedValueError,
)

__version__ = "0.1.0"

__all__ = [
    # Core operations
    "append_value",
    "append_null",
    "append_text",
    "append_binary",
    "append_identifier",
    "append_map",
    "encode",
    "quote_literal",
    "quote_identifier",
    # Types
    "QuoteMode",
    "Encoder",
    "EncodeResult",
    "EncodeFailure",
    "SQLAppender",
    "SQLValuer",
    # Configuration
    "EncoderConfig",
    "FailurePolicy",
    "DEFAULT_CONFIG",
    # Errors
    "SQLQuoteError",
    "EncodeError",
    "UnsupportedValueError",
    "ConfigError",
]


def append_value(buf: bytearray, value: Any, quote: QuoteMode | int) -> bytearray:
    """Append the SQL encoding of ``value`` to ``buf`` and return ``buf``.

    Usage::

        buf = bytearray(b"SELECT * FROM users WHERE name = ")
        sqlquote.append_value(buf, "O'Brien", QuoteMode.LITERAL)
        # b"SELECT * FROM users WHERE name = 'O''Brien'"

    Args:
        buf: Caller-owned output buffer.
        value: ``None``, ``bool``, ``int``, ``float``, ``Decimal``, ``str``,
            ``datetime``, ``date``, a byte sequence, an
            :class:`SQLAppender`, an :class:`SQLValuer`, or anything the
            structural fallback can serialise.
        quote: Quote mode for the fragment.

    Returns:
        ``buf``.  Delegate failures are rendered inline as ``?!(message)``.
    """
    return default_encoder.append_value(buf, value, quote)


def append_null(buf: bytearray, quote: QuoteMode | int) -> bytearray:
    """Append ``NULL`` in literal mode, nothing in raw/identifier mode."""
    return default_encoder.append_null(buf, quote)


def append_text(buf: bytearray, text: str, quote: QuoteMode | int) -> bytearray:
    """Append ``text`` escaped and wrapped for ``quote``."""
    return default_encoder.append_text(buf, text, quote)


def append_binary(buf: bytearray, data: Binary | None, quote: QuoteMode | int) -> bytearray:
    """Append ``data`` as a ``\\x``-prefixed hex literal (``None`` → NULL rule)."""
    return default_encoder.append_binary(buf, data, quote)


def append_identifier(buf: bytearray, path: str | bytes, quote: QuoteMode | int) -> bytearray:
    """Append a dotted identifier path, quoting each segment in identifier mode."""
    return default_encoder.append_identifier(buf, path, quote)


def append_map(
    buf: bytearray,
    mapping: Mapping[str, str | None] | None,
    quote: QuoteMode | int,
) -> bytearray:
    """Append ``mapping`` as a composite ``"k"=>"v",...`` literal."""
    return default_encoder.append_map(buf, mapping, quote)


def encode(value: Any, quote: QuoteMode | int = QuoteMode.LITERAL) -> EncodeResult:
    """Encode ``value`` into a fresh :class:`EncodeResult`."""
    return default_encoder.encode(value, quote)


def quote_literal(value: Any) -> str:
    """Return ``value`` as SQL literal text, e.g. ``'O''Brien'``."""
    return default_encoder.quote_literal(value)


def quote_identifier(path: str | bytes) -> str:
    """Return ``path`` as quoted identifier text, e.g. ``"users"."id"``."""
    return default_encoder.quote_identifier(path)
