"""Tests for the JSON parser adapter."""

from __future__ import annotations

import io
import sys
from typing import Any

import pytest

from aurrpc.domain.errors import EncodingError, IoError, ParseError
from aurrpc.platform.http.json_parser import JsonStreamParser


class _FailingStream(io.RawIOBase):
    def readable(self) -> bool:
        return True

    def readinto(self, _buffer: Any) -> int:
        raise OSError("connection reset")


def test_parses_object_with_unsigned_and_null_values() -> None:
    parsed = JsonStreamParser().parse(io.BytesIO(b'{"ID": 18446744073709551615, "License": null}'))

    assert parsed == {"ID": 2**64 - 1, "License": None}


def test_empty_body_reports_first_position() -> None:
    with pytest.raises(ParseError) as excinfo:
        _ = JsonStreamParser().parse(io.BytesIO(b""))

    assert (excinfo.value.line, excinfo.value.column) == (1, 1)


def test_trailing_data_is_a_parse_error() -> None:
    with pytest.raises(ParseError):
        _ = JsonStreamParser().parse(io.BytesIO(b'{"type": "search"} extra'))


@pytest.mark.parametrize("literal", [b"NaN", b"Infinity", b"[-Infinity]"])
def test_non_standard_constants_are_rejected(literal: bytes) -> None:
    with pytest.raises(ParseError):
        _ = JsonStreamParser().parse(io.BytesIO(literal))


def test_invalid_utf8_raises_encoding_error() -> None:
    with pytest.raises(EncodingError):
        _ = JsonStreamParser().parse(io.BytesIO(b'{"Name": "\xff\xfe"}'))


def test_stream_failure_raises_io_error() -> None:
    with pytest.raises(IoError):
        _ = JsonStreamParser().parse(io.BufferedReader(_FailingStream()))


def test_oversized_integer_literal_is_a_parse_error_without_position() -> None:
    original = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(640)
    try:
        body = b'{"ID": ' + b"1" * 641 + b"}"
        with pytest.raises(ParseError) as excinfo:
            _ = JsonStreamParser().parse(io.BytesIO(body))
    finally:
        sys.set_int_max_str_digits(original)

    assert (excinfo.value.line, excinfo.value.column) == (0, 0)


def test_deeply_nested_document_is_a_parse_error() -> None:
    depth = sys.getrecursionlimit() * 10
    body = b'{"type":"search","results":' + b"[" * depth + b"]" * depth + b"}"

    with pytest.raises(ParseError) as excinfo:
        _ = JsonStreamParser().parse(io.BytesIO(body))

    assert (excinfo.value.line, excinfo.value.column) == (0, 0)
