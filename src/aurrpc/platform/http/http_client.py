"""Where: src/aurrpc/platform/http/http_client.py
What: ``requests``-backed HTTP transport for RPC calls.
Why: Confine connection handling and requests exception types to one adapter.
"""

from __future__ import annotations

import io
import ssl
from typing import Final

import requests

from aurrpc.config.settings import DEFAULT_CONNECT_TIMEOUT, DEFAULT_READ_TIMEOUT
from aurrpc.domain.errors import AurError, IoError, TlsError
from aurrpc.features.rpc.usecases.ports import HTTPResponse
from aurrpc.platform.logging import logger

from .user_agent import default_user_agent

_IO_ERRORS: Final[tuple[type[requests.RequestException], ...]] = (
    requests.exceptions.ConnectionError,
    requests.exceptions.Timeout,
    requests.exceptions.ChunkedEncodingError,
    requests.exceptions.ContentDecodingError,
    requests.exceptions.TooManyRedirects,
    requests.exceptions.RetryError,
)


def translate_transport_error(exc: BaseException) -> AurError:
    """Map a requests or socket failure onto the error taxonomy.

    Raises:
        AssertionError: ``exc`` is a requests variant the client does not support.
    """

    if isinstance(exc, (requests.exceptions.SSLError, ssl.SSLError)):
        return TlsError(str(exc))
    # RequestException derives from OSError; check it before the socket case.
    if isinstance(exc, requests.RequestException):
        if isinstance(exc, _IO_ERRORS):
            return IoError(str(exc))
    elif isinstance(exc, OSError):
        return IoError(str(exc))
    raise AssertionError(f"BUG: unexpected error from requests: {exc!r}") from exc


class RequestsTransport:
    """Perform GET requests through a pooled ``requests.Session``.

    Redirects are always followed. The response body is read completely
    before returning so stream failures surface here as ``IoError``.
    """

    def __init__(
        self,
        *,
        user_agent: str | None = None,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        read_timeout: float = DEFAULT_READ_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.user_agent: str = user_agent or default_user_agent()
        self.timeout: tuple[float, float] = (connect_timeout, read_timeout)
        self._session: requests.Session = session or requests.Session()
        self._session.headers.update(
            {
                "Accept": "application/json",
                "User-Agent": self.user_agent,
            }
        )

    def get(self, url: str) -> HTTPResponse:
        try:
            response = self._session.get(url, timeout=self.timeout, allow_redirects=True)
            content = response.content
        except (requests.RequestException, OSError) as exc:
            error = translate_transport_error(exc)
            logger.debug(
                "%s", error, extra={"rpc_event": "rpc.error", "error_kind": error.kind.value}
            )
            raise error from exc

        headers = {str(key): str(value) for key, value in response.headers.items()}
        return HTTPResponse(
            status=int(response.status_code),
            headers=headers,
            body=io.BytesIO(content),
        )

    def close(self) -> None:
        self._session.close()


__all__ = ["RequestsTransport", "translate_transport_error"]
