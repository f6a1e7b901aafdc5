"""
Summary: Protocols for the HTTP transport and JSON parser collaborators.
Why: Keep RPC usecases independent of the concrete requests and json adapters.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, BinaryIO, Protocol


@dataclass(slots=True, frozen=True)
class HTTPResponse:
    """Status, headers, and unread body stream of one GET request."""

    status: int
    headers: Mapping[str, str]
    body: BinaryIO

    @property
    def content_length(self) -> int | None:
        """Return the declared body length when the header is usable."""

        for key, value in self.headers.items():
            if key.lower() != "content-length":
                continue
            stripped = value.strip()
            # str.isdigit() alone also accepts non-ASCII digits such as "²".
            if stripped.isascii() and stripped.isdigit():
                return int(stripped)
            return None
        return None


class HTTPTransport(Protocol):
    """Perform a blocking HTTP GET.

    Implementations raise ``IoError`` or ``TlsError`` for transport failures;
    no other exception type may escape.
    """

    def get(self, url: str) -> HTTPResponse:
        ...


class JSONParser(Protocol):
    """Parse a byte stream into generic JSON values (dict, list, str, int, float, bool, None).

    Implementations raise ``ParseError``, ``EncodingError``, or ``IoError``.
    """

    def parse(self, stream: BinaryIO) -> Any:
        ...


__all__ = ["HTTPResponse", "HTTPTransport", "JSONParser"]
