"""Unit tests for the binary (bytea hex) encoder."""
from __future__ import annotations

import pytest

from sqlquote import QuoteMode, append_binary, append_value


def test_literal_hex():
    assert append_binary(bytearray(), b"\x00\xffA", QuoteMode.LITERAL) == b"'\\x00ff41'"


def test_raw_hex_has_no_quotes():
    assert append_binary(bytearray(), b"\xde\xad", QuoteMode.RAW) == b"\\xdead"


def test_identifier_mode_has_no_quotes():
    assert append_binary(bytearray(), b"\x01", QuoteMode.IDENTIFIER) == b"\\x01"


def test_empty_but_present():
    assert append_binary(bytearray(), b"", QuoteMode.LITERAL) == b"'\\x'"
    assert append_binary(bytearray(), b"", QuoteMode.RAW) == b"\\x"


def test_absent_follows_null_rule():
    assert append_binary(bytearray(), None, QuoteMode.LITERAL) == b"NULL"
    assert append_binary(bytearray(), None, QuoteMode.RAW) == b""
    assert append_binary(bytearray(), None, QuoteMode.IDENTIFIER) == b""


@pytest.mark.parametrize(
    "data",
    [b"\x0a\x0b", bytearray(b"\x0a\x0b"), memoryview(b"\x0a\x0b")],
)
def test_byte_sequence_types_dispatch_to_hex(data):
    assert append_value(bytearray(), data, QuoteMode.LITERAL) == b"'\\x0a0b'"


def test_hex_is_lowercase():
    out = append_binary(bytearray(), bytes(range(256)), QuoteMode.RAW)
    assert out[2:] == bytes(range(256)).hex().encode("ascii")
    assert out[2:] == out[2:].lower()
