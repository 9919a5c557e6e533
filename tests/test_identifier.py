"""Unit tests for the dotted identifier quoter."""
from __future__ import annotations

import pytest

from sqlquote import QuoteMode, append_identifier, quote_identifier


def _ident(path, quote: QuoteMode = QuoteMode.IDENTIFIER) -> bytes:
    return bytes(append_identifier(bytearray(), path, quote))


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("a", b'"a"'),
        ("a.b", b'"a"."b"'),
        ("a.*", b'"a".*'),
        ("*", b"*"),
        ("s.t.c", b'"s"."t"."c"'),
        ("s.t.*", b'"s"."t".*'),
        ('my"col', b'"my""col"'),
        ('t.my"col', b'"t"."my""col"'),
        ("a*b", b'"a*b"'),
        ("*.a", b'*."a"'),
        (".a", b'."a"'),
        ("a.", b'"a".""'),
        ("", b""),
    ],
)
def test_identifier_mode(path: str, expected: bytes):
    assert _ident(path) == expected


@pytest.mark.parametrize("path", ["a", "a.b", "a.*", "*", 'my"col', "s.t.c"])
@pytest.mark.parametrize("quote", [QuoteMode.RAW, QuoteMode.LITERAL])
def test_other_modes_pass_path_through(path: str, quote: QuoteMode):
    assert _ident(path, quote) == path.encode("utf-8")


def test_bytes_path():
    assert _ident(b"users.id") == b'"users"."id"'


def test_non_ascii_segments():
    assert _ident("таблица.колонка") == '"таблица"."колонка"'.encode("utf-8")


def test_appends_after_existing_content():
    buf = bytearray(b"SELECT ")
    append_identifier(buf, "u.*", QuoteMode.IDENTIFIER)
    assert buf == b'SELECT "u".*'


def test_quote_identifier_returns_text():
    assert quote_identifier("public.users") == '"public"."users"'


def test_int_quote_mode_is_accepted():
    assert bytes(append_identifier(bytearray(), "a.b", 2)) == b'"a"."b"'
