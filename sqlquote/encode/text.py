r"""String encoder.

Escaping is a single ``str.translate`` pass with one table per quote mode:

=============  =======  ==========  ==========  ===========
mode           wrapper  NUL         ``'``       ``"`` / ``\``
=============  =======  ==========  ==========  ===========
RAW            none     dropped     unchanged   unchanged
LITERAL        ``'``    dropped     ``''``      unchanged
IDENTIFIER     ``"``    dropped     ``''``      ``\"`` / ``\\``
=============  =======  ==========  ==========  ===========

Doubling ``'`` in identifier mode is historical behaviour and is kept.
"""
from __future__ import annotations

from sqlquote.encode.quote import QuoteMode

_RAW_TABLE = str.maketrans({"\x00": None})
_LITERAL_TABLE = str.maketrans({"\x00": None, "'": "''"})
_IDENTIFIER_TABLE = str.maketrans(
    {"\x00": None, "'": "''", '"': '\\"', "\\": "\\\\"}
)

_TABLES = {
    QuoteMode.RAW: _RAW_TABLE,
    QuoteMode.LITERAL: _LITERAL_TABLE,
    QuoteMode.IDENTIFIER: _IDENTIFIER_TABLE,
}

_WRAPPERS = {
    QuoteMode.RAW: b"",
    QuoteMode.LITERAL: b"'",
    QuoteMode.IDENTIFIER: b'"',
}


def escape_text(text: str, quote: QuoteMode) -> bytes:
    """Return ``text`` escaped for ``quote``, without the wrapper, as UTF-8."""
    # surrogatepass keeps the call total for strings holding lone surrogates.
    return text.translate(_TABLES[quote]).encode("utf-8", "surrogatepass")


def append_text(buf: bytearray, text: str, quote: QuoteMode) -> bytearray:
    """Append ``text`` escaped and wrapped according to ``quote``."""
    wrapper = _WRAPPERS[quote]
    buf += wrapper
    buf += escape_text(text, quote)
    buf += wrapper
    return buf
