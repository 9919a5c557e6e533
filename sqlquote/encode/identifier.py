"""Identifier quoter for dotted column/table paths with wildcards.

The path is walked one byte at a time with a single ``quoted`` flag::

    a.b      ->  "a"."b"
    a.*      ->  "a".*
    *        ->  *
    t.my"col ->  "t"."my""col"

Only IDENTIFIER mode opens and closes quotes; RAW and LITERAL walk the same
path and emit it unchanged.
"""
from __future__ import annotations

from sqlquote.encode.quote import QuoteMode

_DOT = ord(".")
_STAR = ord("*")
_DQUOTE = ord('"')


class _PathReader:
    """Forward-only cursor over the raw bytes of an identifier path."""

    def __init__(self, raw: bytes) -> None:
        self._raw = raw
        self._pos = 0

    def valid(self) -> bool:
        return self._pos < len(self._raw)

    def read(self) -> int:
        c = self._raw[self._pos]
        self._pos += 1
        return c

    def skip(self, c: int) -> bool:
        """Consume the next byte if it equals ``c``."""
        if self.valid() and self._raw[self._pos] == c:
            self._pos += 1
            return True
        return False


def append_identifier(buf: bytearray, path: str | bytes, quote: QuoteMode) -> bytearray:
    """Append ``path`` with each dot-separated segment quoted.

    Args:
        buf: Output buffer.
        path: Raw identifier, e.g. ``"schema.table.col"`` or ``"t.*"``.
            ``bytes`` are walked as-is; ``str`` is UTF-8 encoded first.
        quote: IDENTIFIER quotes segments; other modes pass them through.
    """
    raw = path.encode("utf-8", "surrogatepass") if isinstance(path, str) else bytes(path)
    reader = _PathReader(raw)
    enabled = quote == QuoteMode.IDENTIFIER
    quoted = False

    while reader.valid():
        c = reader.read()

        if c == _STAR and not quoted:
            buf.append(_STAR)
            continue

        if c == _DOT:
            if quoted:
                buf.append(_DQUOTE)
                quoted = False
            buf.append(_DOT)
            if reader.skip(_STAR):
                buf.append(_STAR)
            elif enabled:
                buf.append(_DQUOTE)
                quoted = True
            continue

        if not quoted and enabled:
            buf.append(_DQUOTE)
            quoted = True
        if enabled and c == _DQUOTE:
            buf += b'""'
        else:
            buf.append(c)

    if quoted:
        buf.append(_DQUOTE)
    return buf
