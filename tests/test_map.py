"""Unit tests for the composite (hstore-style) map encoder."""
from __future__ import annotations

from sqlquote import Encoder, QuoteMode, append_map


def _entries(out: bytes) -> set[bytes]:
    inner = out[1:-1] if out.startswith(b"'") else out
    return set(inner.split(b",")) if inner else set()


def test_empty_literal_map():
    assert append_map(bytearray(), {}, QuoteMode.LITERAL) == b"''"


def test_empty_raw_map():
    assert append_map(bytearray(), {}, QuoteMode.RAW) == b""


def test_absent_map_follows_null_rule():
    assert append_map(bytearray(), None, QuoteMode.LITERAL) == b"NULL"
    assert append_map(bytearray(), None, QuoteMode.RAW) == b""


def test_single_entry():
    assert append_map(bytearray(), {"a": "b"}, QuoteMode.LITERAL) == b"'\"a\"=>\"b\"'"


def test_two_entries_in_any_order():
    out = bytes(append_map(bytearray(), {"a": "b", "c": "d"}, QuoteMode.LITERAL))
    assert out.startswith(b"'") and out.endswith(b"'")
    assert _entries(out) == {b'"a"=>"b"', b'"c"=>"d"'}
    assert not out[1:-1].endswith(b",")


def test_raw_mode_has_no_wrapper():
    out = bytes(append_map(bytearray(), {"a": "b"}, QuoteMode.RAW))
    assert out == b'"a"=>"b"'


def test_keys_and_values_use_identifier_escaping():
    out = bytes(append_map(bytearray(), {"k'": 'v"', "x\\": "y\x00"}, QuoteMode.LITERAL))
    assert _entries(out) == {b'"k\'\'"=>"v\\""', b'"x\\\\"=>"y"'}


def test_none_value_is_hstore_null():
    out = bytes(append_map(bytearray(), {"a": None}, QuoteMode.LITERAL))
    assert out == b"'\"a\"=>NULL'"


def test_default_keeps_iteration_order():
    out = bytes(append_map(bytearray(), {"b": "1", "a": "2"}, QuoteMode.RAW))
    assert out == b'"b"=>"1","a"=>"2"'


def test_sorted_keys(sorted_encoder: Encoder):
    out = bytes(sorted_encoder.append_map(bytearray(), {"b": "1", "a": "2"}, QuoteMode.RAW))
    assert out == b'"a"=>"2","b"=>"1"'


def test_appends_after_existing_content():
    buf = bytearray(b"attrs = ")
    append_map(buf, {"a": "b"}, QuoteMode.LITERAL)
    assert buf == b"attrs = '\"a\"=>\"b\"'"
