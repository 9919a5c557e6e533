"""Extension points for user-defined values.

Any object can take part in encoding by implementing one of these two
methods; no registration or base class is needed::

    class Money:
        def __init__(self, cents: int) -> None:
            self.cents = cents

        def append_sql(self, buf: bytearray, quote: QuoteMode) -> bytearray:
            buf += f"{self.cents / 100:.2f}".encode()
            return buf

    class UserId:
        def sql_value(self) -> int:
            return self._id

Both capabilities signal failure by raising; the encoder turns the
exception into an inline marker or an :class:`~sqlquote.errors.EncodeError`
depending on :attr:`~sqlquote.config.EncoderConfig.on_failure`.
"""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from sqlquote.encode.quote import QuoteMode


@runtime_checkable
class SQLAppender(Protocol):
    """A value that knows how to append its own encoded form.

    ``append_sql`` appends to ``buf`` in place and returns it.  It may
    instead return a new bytes-like buffer that starts with the contents
    ``buf`` had on entry; everything past that prefix is taken as its
    output.  Returning anything else that is not ``None`` is a failure.
    If it raises, whatever it appended before failing is discarded.
    """

    def append_sql(self, buf: bytearray, quote: QuoteMode) -> bytearray: ...


@runtime_checkable
class SQLValuer(Protocol):
    """A value that yields an underlying value to be encoded instead.

    The result is dispatched again, so it may be any supported value,
    including another :class:`SQLValuer`.
    """

    def sql_value(self) -> Any: ...
