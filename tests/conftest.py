"""Shared pytest fixtures for RPC-focused tests."""

from __future__ import annotations

import io
import json
from collections.abc import Callable
from typing import Any

import pytest

from aurrpc.features.rpc.usecases.ports import HTTPResponse


def _sample_package() -> dict[str, Any]:
    return {
        "PackageBase": "yay",
        "PackageBaseID": 115973,
        "Name": "yay",
        "CategoryID": 1,
        "Description": "Yet another yogurt. Pacman wrapper and AUR helper written in go.",
        "FirstSubmitted": 1475688004,
        "LastModified": 1609459200,
        "ID": 870442,
        "License": "GPL3",
        "Maintainer": "jguer",
        "NumVotes": 1800,
        "OutOfDate": 0,
        "URL": "https://github.com/Jguer/yay",
        "URLPath": "/cgit/aur.git/snapshot/yay.tar.gz",
        "Version": "10.1.2-1",
    }


@pytest.fixture
def package_json() -> Callable[..., dict[str, Any]]:
    """Return a factory producing a valid package object with overrides applied."""

    def _factory(**overrides: Any) -> dict[str, Any]:
        data = _sample_package()
        data.update(overrides)
        return data

    return _factory


def _make_response(
    body: bytes | str | Any,
    *,
    status: int = 200,
    headers: dict[str, str] | None = None,
) -> HTTPResponse:
    """Create an in-memory ``HTTPResponse``; non-bytes bodies are JSON-encoded."""

    if isinstance(body, str):
        raw = body.encode("utf-8")
    elif isinstance(body, bytes):
        raw = body
    else:
        raw = json.dumps(body).encode("utf-8")
    return HTTPResponse(status=status, headers=headers or {}, body=io.BytesIO(raw))


@pytest.fixture
def make_response() -> Callable[..., HTTPResponse]:
    """Expose the in-memory response builder to tests."""

    return _make_response


class FakeTransport:
    """Record requested URLs and replay queued responses."""

    def __init__(self, *responses: HTTPResponse) -> None:
        self.responses: list[HTTPResponse] = list(responses)
        self.urls: list[str] = []
        self.closed: bool = False

    def get(self, url: str) -> HTTPResponse:
        self.urls.append(url)
        return self.responses.pop(0)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_transport() -> FakeTransport:
    """Provide an empty transport; tests queue responses on ``.responses``."""

    return FakeTransport()
