"""Scalar encoders: NULL, booleans, numbers, timestamps and dates.

All functions append ASCII text to ``buf`` and return it.  Output never
depends on the process locale.
"""
from __future__ import annotations

import math
from datetime import date, datetime, timedelta
from decimal import Context, Decimal

from sqlquote.encode.quote import QuoteMode

# Float digits never exceed 17 significant places, so this context is exact
# and output does not depend on the caller's thread-local decimal context.
_FLOAT_CONTEXT = Context(prec=30, traps=[])


def append_null(buf: bytearray, quote: QuoteMode) -> bytearray:
    """Append ``NULL`` in literal context; nothing otherwise.

    Raw and identifier contexts have no null syntax, so zero bytes are
    appended there.
    """
    if quote == QuoteMode.LITERAL:
        buf += b"NULL"
    return buf


def append_bool(buf: bytearray, value: bool) -> bytearray:
    buf += b"TRUE" if value else b"FALSE"
    return buf


def append_int(buf: bytearray, value: int) -> bytearray:
    # Decimal is not bound by the interpreter's int-to-str digit limit.
    buf += format(Decimal(int(value)), "f").encode("ascii")
    return buf


def _append_non_finite(buf: bytearray, value: float, quote: QuoteMode) -> bytearray:
    # PostgreSQL spelling; only accepted inside quotes.
    if math.isnan(value):
        text = b"NaN"
    elif value > 0:
        text = b"Infinity"
    else:
        text = b"-Infinity"
    if quote == QuoteMode.LITERAL:
        buf += b"'" + text + b"'"
    else:
        buf += text
    return buf


def append_float(buf: bytearray, value: float, quote: QuoteMode) -> bytearray:
    """Append the shortest round-tripping fixed-point form of ``value``.

    ``repr`` already yields the shortest digits that round-trip; routing
    them through :class:`~decimal.Decimal` expands any exponent, and
    ``normalize`` drops the ``.0`` Python adds to integral floats::

        1.5   -> 1.5
        2.0   -> 2
        1e20  -> 100000000000000000000
        -0.0  -> -0
    """
    value = float(value)
    if not math.isfinite(value):
        return _append_non_finite(buf, value, quote)
    digits = Decimal(repr(value)).normalize(_FLOAT_CONTEXT)
    buf += format(digits, "f").encode("ascii")
    return buf


def append_decimal(buf: bytearray, value: Decimal, quote: QuoteMode) -> bytearray:
    """Append ``value`` in fixed-point notation, keeping its scale."""
    if not value.is_finite():
        if value.is_nan():
            return _append_non_finite(buf, math.nan, quote)
        return _append_non_finite(buf, -math.inf if value.is_signed() else math.inf, quote)
    buf += format(value, "f").encode("ascii")
    return buf


def _format_offset(offset: timedelta) -> str:
    sign = "-" if offset < timedelta(0) else "+"
    seconds = int(abs(offset).total_seconds())
    hours, rest = divmod(seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    text = f"{sign}{hours:02d}:{minutes:02d}"
    if seconds:
        text += f":{seconds:02d}"
    return text


def _format_timestamp(value: datetime) -> str:
    offset = value.utcoffset() if value.tzinfo is not None else None
    if offset is None:
        suffix = ""
    else:
        naive = value.replace(tzinfo=None)
        try:
            value = naive - offset
            suffix = "+00:00"
        except OverflowError:
            # UTC falls outside year 1..9999; keep the wall time and its offset.
            value = naive
            suffix = _format_offset(offset)
    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    if value.microsecond:
        text += f".{value.microsecond:06d}".rstrip("0")
    return text + suffix


def append_time(buf: bytearray, value: datetime, quote: QuoteMode) -> bytearray:
    """Append a timestamp as ``YYYY-MM-DD HH:MM:SS[.ffffff][+00:00]``.

    Aware datetimes are converted to UTC; naive ones are written as-is.
    An aware value whose UTC equivalent is out of range keeps its own
    offset, e.g. ``0001-01-01 00:00:00+02:00``.
    """
    if quote == QuoteMode.LITERAL:
        buf += b"'"
    buf += _format_timestamp(value).encode("ascii")
    if quote == QuoteMode.LITERAL:
        buf += b"'"
    return buf


def append_date(buf: bytearray, value: date, quote: QuoteMode) -> bytearray:
    if quote == QuoteMode.LITERAL:
        buf += b"'"
    buf += value.isoformat().encode("ascii")
    if quote == QuoteMode.LITERAL:
        buf += b"'"
    return buf
