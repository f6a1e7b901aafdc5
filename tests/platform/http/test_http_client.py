"""Tests for the requests transport adapter and its error translation."""

from __future__ import annotations

import ssl

import pytest
import requests
from pytest_mock import MockerFixture

from aurrpc.domain.errors import IoError, TlsError
from aurrpc.platform.http.http_client import RequestsTransport, translate_transport_error


def _fake_response(status: int, content: bytes, headers: dict[str, str]) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response._content = content  # pyright: ignore[reportPrivateUsage]
    response.headers.update(headers)
    return response


def test_get_returns_status_headers_and_body(mocker: MockerFixture) -> None:
    transport = RequestsTransport(user_agent="test/1.0")
    get = mocker.patch.object(
        transport._session,  # pyright: ignore[reportPrivateUsage]
        "get",
        return_value=_fake_response(200, b'{"type":"search"}', {"Content-Type": "application/json"}),
    )

    response = transport.get("https://aur.example.org/rpc.php?type=search&arg=x")

    get.assert_called_once_with(
        "https://aur.example.org/rpc.php?type=search&arg=x",
        timeout=transport.timeout,
        allow_redirects=True,
    )
    assert response.status == 200
    assert response.headers["Content-Type"] == "application/json"
    assert response.body.read() == b'{"type":"search"}'


def test_non_success_status_is_not_raised(mocker: MockerFixture) -> None:
    transport = RequestsTransport()
    _ = mocker.patch.object(
        transport._session,  # pyright: ignore[reportPrivateUsage]
        "get",
        return_value=_fake_response(429, b"rate limited", {"Content-Length": "12"}),
    )

    response = transport.get("https://aur.example.org/rpc.php")

    assert response.status == 429
    assert response.content_length == 12


def test_session_sends_user_agent_and_accept() -> None:
    transport = RequestsTransport(user_agent="helper/2.0 (ops@example.org)")
    headers = transport._session.headers  # pyright: ignore[reportPrivateUsage]

    assert headers["User-Agent"] == "helper/2.0 (ops@example.org)"
    assert headers["Accept"] == "application/json"
    transport.close()


@pytest.mark.parametrize(
    ("exc", "expected"),
    [
        (requests.exceptions.SSLError("bad certificate"), TlsError),
        (ssl.SSLError("handshake failure"), TlsError),
        (requests.exceptions.ConnectionError("refused"), IoError),
        (requests.exceptions.ReadTimeout("slow"), IoError),
        (requests.exceptions.ChunkedEncodingError("truncated"), IoError),
        (requests.exceptions.TooManyRedirects("loop"), IoError),
        (ConnectionResetError("reset"), IoError),
    ],
)
def test_transport_errors_are_translated(
    mocker: MockerFixture, exc: Exception, expected: type[Exception]
) -> None:
    transport = RequestsTransport()
    _ = mocker.patch.object(
        transport._session,  # pyright: ignore[reportPrivateUsage]
        "get",
        side_effect=exc,
    )

    with pytest.raises(expected) as excinfo:
        _ = transport.get("https://aur.example.org/rpc.php")

    assert excinfo.value.__cause__ is exc


def test_unsupported_requests_error_is_a_bug() -> None:
    with pytest.raises(AssertionError):
        _ = translate_transport_error(requests.exceptions.InvalidURL("nope"))
