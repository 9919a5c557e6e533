"""sqlquote encoding layer: Python values → escaped SQL text fragments."""
from sqlquote.encode.dispatch import Encoder, default_encoder
from sqlquote.encode.protocols import SQLAppender, SQLValuer
from sqlquote.encode.quote import QuoteMode
from sqlquote.encode.result import EncodeFailure, EncodeResult

__all__ = [
    "Encoder",
    "default_encoder",
    "SQLAppender",
    "SQLValuer",
    "QuoteMode",
    "EncodeFailure",
    "EncodeResult",
]
