"""
Summary: Closed exception taxonomy raised by every RPC operation.
Why: Callers branch on one library-owned hierarchy instead of transport or parser types.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar


class ErrorKind(str, Enum):
    """Tag identifying which failure an ``AurError`` describes."""

    IO = "io"
    TLS = "tls"
    ENCODING = "encoding"
    HTTP = "http"
    SERVICE = "service"
    INVALID_RESPONSE = "invalid_response"
    PARSE = "parse"


class AurError(Exception):
    """Base class for all failures surfaced by the client."""

    kind: ClassVar[ErrorKind]


class IoError(AurError):
    """The transport or the response stream failed while reading."""

    kind = ErrorKind.IO


class TlsError(AurError):
    """The secure connection could not be established."""

    kind = ErrorKind.TLS


class EncodingError(AurError):
    """Response bytes were not valid text where text was required."""

    kind = ErrorKind.ENCODING


class HttpError(AurError):
    """The server answered with a non-success HTTP status.

    Attributes:
        code: HTTP status code of the response.
        message: Fully drained response body.
    """

    kind = ErrorKind.HTTP

    def __init__(self, code: int, message: str) -> None:
        super().__init__(f"HTTP {code}: {message}")
        self.code: int = code
        self.message: str = message


class ServiceError(AurError):
    """The RPC service itself reported a logical error (``type: "error"``)."""

    kind = ErrorKind.SERVICE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message


class InvalidResponseError(AurError):
    """The envelope or a package record did not have the expected shape."""

    kind = ErrorKind.INVALID_RESPONSE

    def __init__(self) -> None:
        super().__init__("invalid response from server")


class ParseError(AurError):
    """The response body was not syntactically valid JSON.

    Attributes:
        code: Parser-reported description of the syntax error.
        line: 1-based line of the error, or 0 when unknown.
        column: 1-based column of the error, or 0 when unknown.
    """

    kind = ErrorKind.PARSE

    def __init__(self, code: str, line: int, column: int) -> None:
        super().__init__(f"{code} (line {line}, column {column})")
        self.code: str = code
        self.line: int = line
        self.column: int = column


__all__ = [
    "AurError",
    "EncodingError",
    "ErrorKind",
    "HttpError",
    "InvalidResponseError",
    "IoError",
    "ParseError",
    "ServiceError",
    "TlsError",
]
