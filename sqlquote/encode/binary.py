"""Binary encoder: byte sequences as PostgreSQL hex-format ``bytea``."""
from __future__ import annotations

from typing import Union

from sqlquote.encode.quote import QuoteMode
from sqlquote.encode.scalars import append_null

#: Byte sequences accepted by :func:`append_binary`.
Binary = Union[bytes, bytearray, memoryview]


def append_binary(buf: bytearray, data: Binary | None, quote: QuoteMode) -> bytearray:
    """Append ``\\x`` followed by the lowercase hex of ``data``.

    ``None`` follows the NULL rule; an empty sequence still yields ``\\x``.
    Literal mode wraps the result in single quotes.
    """
    if data is None:
        return append_null(buf, quote)
    if quote == QuoteMode.LITERAL:
        buf += b"'"
    buf += b"\\x"
    buf += bytes(data).hex().encode("ascii")
    if quote == QuoteMode.LITERAL:
        buf += b"'"
    return buf
