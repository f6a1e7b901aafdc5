"""Tests for the error taxonomy payloads and tags."""

from __future__ import annotations

import pytest

from aurrpc.domain.errors import (
    AurError,
    EncodingError,
    ErrorKind,
    HttpError,
    InvalidResponseError,
    IoError,
    ParseError,
    ServiceError,
    TlsError,
)


@pytest.mark.parametrize(
    ("error", "kind"),
    [
        (IoError("reset"), ErrorKind.IO),
        (TlsError("handshake"), ErrorKind.TLS),
        (EncodingError("bad utf-8"), ErrorKind.ENCODING),
        (HttpError(500, "oops"), ErrorKind.HTTP),
        (ServiceError("boom"), ErrorKind.SERVICE),
        (InvalidResponseError(), ErrorKind.INVALID_RESPONSE),
        (ParseError("Expecting value", 1, 1), ErrorKind.PARSE),
    ],
)
def test_every_error_is_tagged(error: AurError, kind: ErrorKind) -> None:
    assert isinstance(error, AurError)
    assert error.kind is kind


def test_http_error_carries_code_and_message() -> None:
    error = HttpError(404, "not found")

    assert (error.code, error.message) == (404, "not found")
    assert str(error) == "HTTP 404: not found"


def test_parse_error_carries_position() -> None:
    error = ParseError("Expecting value", 3, 7)

    assert (error.code, error.line, error.column) == ("Expecting value", 3, 7)
    assert "line 3, column 7" in str(error)


def test_service_error_message_is_verbatim() -> None:
    assert str(ServiceError("Incorrect request type specified.")) == "Incorrect request type specified."
