"""
Summary: Unwrap the RPC JSON envelope or raise the matching taxonomy error.
Why: Separate status and envelope checks from record mapping and transport.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, BinaryIO, Final

from aurrpc.domain.errors import (
    EncodingError,
    HttpError,
    InvalidResponseError,
    IoError,
    ServiceError,
)
from aurrpc.platform.logging import logger

from .ports import HTTPResponse, JSONParser

ERROR_TYPE: Final[str] = "error"
_CHUNK_SIZE: Final[int] = 64 * 1024


def is_success_status(status: int) -> bool:
    return 200 <= status < 300


def drain_body(body: BinaryIO, content_length: int | None = None) -> str:
    """Read the whole body and decode it as UTF-8.

    When ``content_length`` is known the declared bytes are read in one call
    before draining whatever remains.

    Raises:
        IoError: The stream failed while reading.
        EncodingError: The bytes are not valid UTF-8.
    """

    buffer = bytearray()
    try:
        if content_length:
            buffer += body.read(content_length)
        while chunk := body.read(_CHUNK_SIZE):
            buffer += chunk
    except OSError as exc:
        raise IoError(str(exc)) from exc

    try:
        return buffer.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise EncodingError(str(exc)) from exc


def render_json(value: Any) -> str:
    """Return the canonical compact JSON text of ``value``."""

    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def unwrap_envelope(document: Any) -> Any:
    """Return ``results`` from a parsed envelope.

    Raises:
        InvalidResponseError: Not an object, missing keys, or non-string ``type``.
        ServiceError: ``type`` is the ``"error"`` sentinel.
    """

    if not isinstance(document, Mapping):
        logger.debug("Got invalid response from server: %r", document)
        raise InvalidResponseError()

    if "type" not in document or "results" not in document:
        logger.debug("Got invalid response from server: %r", document)
        raise InvalidResponseError()

    typ = document["type"]
    results = document["results"]

    if typ == ERROR_TYPE:
        message = results if isinstance(results, str) else render_json(results)
        raise ServiceError(message)

    if not isinstance(typ, str):
        logger.debug("Bad type from server: %r", typ)
        raise InvalidResponseError()

    logger.debug("RPC results (%s): %r", typ, results)
    return results


def interpret_response(response: HTTPResponse, parser: JSONParser) -> Any:
    """Turn an HTTP response into the envelope's ``results`` value.

    Raises:
        HttpError: Non-success status; carries the drained body text.
        ParseError, EncodingError, IoError: Propagated from the parser port.
        InvalidResponseError, ServiceError: See ``unwrap_envelope``.
    """

    if not is_success_status(response.status):
        message = drain_body(response.body, response.content_length)
        raise HttpError(response.status, message)

    return unwrap_envelope(parser.parse(response.body))


__all__ = [
    "ERROR_TYPE",
    "drain_body",
    "interpret_response",
    "is_success_status",
    "render_json",
    "unwrap_envelope",
]
