"""Map encoder: ``str -> str`` mappings as a composite ``hstore`` literal.

Each entry is written as ``"key"=>"value"`` with both sides escaped by the
string encoder in identifier mode, whatever the outer quote mode::

    {"a": "b", "c": None}  ->  '"a"=>"b","c"=>NULL'     (LITERAL)
"""
from __future__ import annotations

from collections.abc import Mapping

from sqlquote.encode.quote import QuoteMode
from sqlquote.encode.scalars import append_null
from sqlquote.encode.text import append_text


def append_map(
    buf: bytearray,
    mapping: Mapping[str, str | None] | None,
    quote: QuoteMode,
    sort_keys: bool = False,
) -> bytearray:
    """Append ``mapping`` as comma-separated ``key=>value`` pairs.

    Args:
        buf: Output buffer.
        mapping: Entries to encode; ``None`` follows the NULL rule.
        quote: Only LITERAL adds the surrounding single quotes.
        sort_keys: Emit entries sorted by key instead of iteration order.
    """
    if mapping is None:
        return append_null(buf, quote)

    if quote == QuoteMode.LITERAL:
        buf += b"'"

    keys = sorted(mapping) if sort_keys else list(mapping)
    for key in keys:
        value = mapping[key]
        append_text(buf, key, QuoteMode.IDENTIFIER)
        buf += b"=>"
        if value is None:
            buf += b"NULL"
        else:
            append_text(buf, value, QuoteMode.IDENTIFIER)
        buf += b","
    if keys:
        del buf[-1]  # trailing comma

    if quote == QuoteMode.LITERAL:
        buf += b"'"
    return buf
