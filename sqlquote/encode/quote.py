"""Quote modes selecting which wrapping/escaping ruleset applies."""
from __future__ import annotations

from enum import IntEnum

from sqlquote.errors import ConfigError


class QuoteMode(IntEnum):
    """Output shape of an encoded fragment.

    Attributes:
        RAW: No wrapping; only NUL bytes are dropped from text.
        LITERAL: Single-quoted SQL string literal, ``'text'``.
        IDENTIFIER: Double-quoted SQL identifier, ``"col"``.
    """

    RAW = 0
    LITERAL = 1
    IDENTIFIER = 2


def to_quote_mode(quote: QuoteMode | int) -> QuoteMode:
    """Coerce a plain ``int`` to :class:`QuoteMode`.

    Raises:
        ConfigError: If ``quote`` is not one of 0, 1 or 2.
    """
    if isinstance(quote, QuoteMode):
        return quote
    try:
        return QuoteMode(quote)
    except ValueError as exc:
        raise ConfigError(f"Unknown quote mode: {quote!r}.", field="quote") from exc
