"""Value dispatcher and the :class:`Encoder` facade.

Resolution order for :meth:`Encoder.append_value` (first match wins):

1. ``None``                      -> NULL rule
2. ``bool``                      -> ``TRUE`` / ``FALSE``
3. ``int``                       -> base-10 digits
4. ``float`` / ``Decimal``       -> fixed-point digits
5. ``str``                       -> escaped text
6. ``datetime`` / ``date``       -> timestamp / date text
7. ``bytes`` / ``bytearray`` / ``memoryview`` -> ``\\x`` hex
8. :class:`~sqlquote.encode.protocols.SQLAppender`
9. :class:`~sqlquote.encode.protocols.SQLValuer`
10. structural fallback (:mod:`sqlquote.encode.fallback`)

``bool`` must be tested before ``int`` because it is an ``int`` subclass,
and ``datetime`` before ``date`` for the same reason.
"""
from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from sqlquote.config import DEFAULT_CONFIG, EncoderConfig
from sqlquote.encode.binary import Binary, append_binary
from sqlquote.encode.context import EncodeRun, type_name
from sqlquote.encode.fallback import structural_value
from sqlquote.encode.identifier import append_identifier
from sqlquote.encode.mapping import append_map
from sqlquote.encode.protocols import SQLAppender, SQLValuer
from sqlquote.encode.quote import QuoteMode, to_quote_mode
from sqlquote.encode.result import EncodeResult
from sqlquote.encode.scalars import (
    append_bool,
    append_date,
    append_decimal,
    append_float,
    append_int,
    append_null,
    append_time,
)
from sqlquote.encode.text import append_text
from sqlquote.errors import EncodeError, FailureSource, UnsupportedValueError
from sqlquote.log import get_logger

logger = get_logger(__name__)


class Encoder:
    """Encodes Python values into SQL text fragments.

    Instances are immutable and thread-safe; every call gets its own
    :class:`~sqlquote.encode.context.EncodeRun`.  Buffers are not: each
    concurrent caller must append to its own ``bytearray``.

    Args:
        config: Encoding settings; defaults to :data:`DEFAULT_CONFIG`.
    """

    def __init__(self, config: EncoderConfig | None = None) -> None:
        self._config = DEFAULT_CONFIG if config is None else config

    @property
    def config(self) -> EncoderConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def append_value(self, buf: bytearray, value: Any, quote: QuoteMode | int) -> bytearray:
        """Append the encoded form of ``value`` and return ``buf``.

        Never raises under the ``"marker"`` failure policy.

        Raises:
            EncodeError: Under the ``"raise"`` policy, on the first failure.
            ConfigError: If ``quote`` is not a valid quote mode.
        """
        return self._append(buf, value, to_quote_mode(quote), EncodeRun(self._config))

    def encode(self, value: Any, quote: QuoteMode | int = QuoteMode.LITERAL) -> EncodeResult:
        """Encode ``value`` into a fresh buffer and report any failures.

        Under the ``"marker"`` policy the caller decides what to do with a
        failed result: inspect :attr:`EncodeResult.failures`, call
        :meth:`EncodeResult.raise_for_failures`, or use the marker text.
        """
        run = EncodeRun(self._config)
        buf = self._append(bytearray(), value, to_quote_mode(quote), run)
        return EncodeResult(data=bytes(buf), failures=list(run.failures))

    def append_null(self, buf: bytearray, quote: QuoteMode | int) -> bytearray:
        return append_null(buf, to_quote_mode(quote))

    def append_text(self, buf: bytearray, text: str, quote: QuoteMode | int) -> bytearray:
        return append_text(buf, text, to_quote_mode(quote))

    def append_binary(
        self, buf: bytearray, data: Binary | None, quote: QuoteMode | int
    ) -> bytearray:
        return append_binary(buf, data, to_quote_mode(quote))

    def append_identifier(
        self, buf: bytearray, path: str | bytes, quote: QuoteMode | int
    ) -> bytearray:
        return append_identifier(buf, path, to_quote_mode(quote))

    def append_map(
        self,
        buf: bytearray,
        mapping: Mapping[str, str | None] | None,
        quote: QuoteMode | int,
    ) -> bytearray:
        return append_map(
            buf, mapping, to_quote_mode(quote), sort_keys=self._config.sort_map_keys
        )

    def quote_literal(self, value: Any) -> str:
        """Return ``value`` encoded as a SQL literal, as text."""
        return self.encode(value, QuoteMode.LITERAL).sql

    def quote_identifier(self, path: str | bytes) -> str:
        """Return ``path`` as a quoted (possibly dotted) identifier."""
        return append_identifier(bytearray(), path, QuoteMode.IDENTIFIER).decode(
            "utf-8", "surrogateescape"
        )

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _append(self, buf: bytearray, value: Any, quote: QuoteMode, run: EncodeRun) -> bytearray:
        if value is None:
            return append_null(buf, quote)
        if isinstance(value, bool):
            return append_bool(buf, value)
        if isinstance(value, int):
            return append_int(buf, value)
        if isinstance(value, float):
            return append_float(buf, value, quote)
        if isinstance(value, Decimal):
            return append_decimal(buf, value, quote)
        if isinstance(value, str):
            return append_text(buf, value, quote)
        if isinstance(value, datetime):
            return append_time(buf, value, quote)
        if isinstance(value, date):
            return append_date(buf, value, quote)
        if isinstance(value, (bytes, bytearray, memoryview)):
            return append_binary(buf, value, quote)
        if isinstance(value, SQLAppender):
            return self._append_appender(buf, value, quote, run)
        if isinstance(value, SQLValuer):
            return self._append_valuer(buf, value, quote, run)
        return self._append_structural(buf, value, quote, run)

    def _append_appender(
        self, buf: bytearray, value: SQLAppender, quote: QuoteMode, run: EncodeRun
    ) -> bytearray:
        start = len(buf)
        try:
            result = value.append_sql(buf, quote)
            if result is not None and result is not buf:
                # A fresh buffer holding the old prefix plus the new output.
                buf[start:] = memoryview(result)[start:]
        except Exception as exc:
            return run.fail(buf, start, value, exc, "appender")
        return buf

    def _append_valuer(
        self, buf: bytearray, value: SQLValuer, quote: QuoteMode, run: EncodeRun
    ) -> bytearray:
        try:
            underlying = value.sql_value()
        except Exception as exc:
            return run.fail(buf, len(buf), value, exc, "valuer")
        return self._redispatch(buf, value, underlying, quote, run, "valuer")

    def _append_structural(
        self, buf: bytearray, value: Any, quote: QuoteMode, run: EncodeRun
    ) -> bytearray:
        value_type = type_name(value)
        if not self._config.structural_fallback:
            exc = UnsupportedValueError(
                f"unsupported value type {value_type}", value_type=value_type
            )
            return run.fail(buf, len(buf), value, exc, "unsupported")
        try:
            underlying = structural_value(value, value_type)
        except UnsupportedValueError as exc:
            return run.fail(buf, len(buf), value, exc, "unsupported")
        logger.debug(
            "sqlquote.structural_fallback",
            value_type=value_type,
            encoded_as=type_name(underlying),
        )
        return self._redispatch(buf, value, underlying, quote, run, "unsupported")

    def _redispatch(
        self,
        buf: bytearray,
        value: Any,
        underlying: Any,
        quote: QuoteMode,
        run: EncodeRun,
        source: FailureSource,
    ) -> bytearray:
        limit = self._config.max_indirection
        if run.depth >= limit:
            exc = EncodeError(
                f"indirection deeper than {limit} levels",
                value_type=type_name(value),
                source=source,
            )
            return run.fail(buf, len(buf), value, exc, source)
        run.depth += 1
        try:
            return self._append(buf, underlying, quote, run)
        finally:
            run.depth -= 1


#: Shared encoder with the default configuration.
default_encoder = Encoder()
