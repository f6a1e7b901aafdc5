"""Where: src/aurrpc/client.py
What: Facade exposing the AUR RPC operations search, msearch, info, and multiinfo.
Why: Compose the query builder, transport, envelope interpreter, and record
     mapper behind one caller-facing object.

Responsibilities are delegated to focused collaborators:
- ``features.rpc.usecases.query_builder`` encodes request URLs
- ``platform.http`` performs the GET and parses JSON
- ``features.rpc.usecases.envelope`` checks status and unwraps results
- ``features.rpc.usecases.record_mapper`` validates package objects
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from types import TracebackType
from typing import Any, Self
from urllib.parse import urlsplit

from aurrpc.config.config import Config
from aurrpc.config.settings import DEFAULT_RPC_URL
from aurrpc.domain.errors import AurError
from aurrpc.domain.package import Package
from aurrpc.features.rpc.usecases import (
    HTTPTransport,
    JSONParser,
    Operation,
    info_url,
    interpret_response,
    msearch_url,
    multiinfo_url,
    package_from_json,
    packages_from_json,
    search_url,
)
from aurrpc.platform.http import JsonStreamParser, RequestsTransport, format_user_agent
from aurrpc.platform.logging import logger


@dataclass(slots=True, frozen=True)
class ClientConfig:
    """Immutable endpoint and collaborator handles shared by every call.

    Raises:
        ValueError: ``base_url`` is not an absolute http(s) URL.
    """

    base_url: str = DEFAULT_RPC_URL
    transport: HTTPTransport = field(default_factory=RequestsTransport)
    parser: JSONParser = field(default_factory=JsonStreamParser)

    def __post_init__(self) -> None:
        parts = urlsplit(self.base_url)
        if parts.scheme not in {"http", "https"} or not parts.netloc:
            raise ValueError(f"Invalid RPC endpoint: {self.base_url!r}")


class AurClient:
    """Synchronous client for the AUR RPC service.

    Every operation performs exactly one GET and raises an ``AurError``
    subclass on failure.
    """

    def __init__(self, config: ClientConfig | None = None) -> None:
        self.config: ClientConfig = config or ClientConfig()

    @classmethod
    def from_config(cls, config: Config) -> "AurClient":
        """Build a client with a requests transport configured from ``config``.

        When ``config.log_file`` is set, library logging is also configured
        through ``Config.setup_logging``.
        """

        transport = RequestsTransport(
            user_agent=format_user_agent(config.app_name, config.app_version, config.contact),
            connect_timeout=config.connect_timeout,
            read_timeout=config.read_timeout,
        )
        if config.log_file is not None:
            _ = config.setup_logging()
        return cls(ClientConfig(base_url=config.rpc_url, transport=transport))

    def search(self, pattern: str) -> list[Package]:
        """Search the AUR by package name and description."""

        results = self._rpc(Operation.SEARCH, search_url(self.config.base_url, pattern))
        return packages_from_json(results)

    def msearch(self, author: str) -> list[Package]:
        """Search the AUR by maintainer."""

        results = self._rpc(Operation.MSEARCH, msearch_url(self.config.base_url, author))
        return packages_from_json(results)

    def info(self, name: str) -> Package | None:
        """Retrieve information for the named package; ``None`` when not found."""

        results = self._rpc(Operation.INFO, info_url(self.config.base_url, name))
        if isinstance(results, list) and not results:
            return None
        return package_from_json(results)

    def multiinfo(self, names: Iterable[str]) -> list[Package]:
        """Retrieve information for each named package.

        Raises:
            TypeError: ``names`` is a single string rather than a collection.
        """

        if isinstance(names, (str, bytes)):
            raise TypeError("multiinfo expects an iterable of names, not a single string")

        results = self._rpc(Operation.MULTIINFO, multiinfo_url(self.config.base_url, names))
        return packages_from_json(results)

    def _rpc(self, operation: Operation, url: str) -> Any:
        logger.debug(
            "RPC request %s",
            url,
            extra={"rpc_event": "rpc.request", "operation": operation.value, "url": url},
        )
        response = self.config.transport.get(url)
        try:
            results = interpret_response(response, self.config.parser)
        except AurError as exc:
            logger.debug(
                "%s",
                exc,
                extra={
                    "rpc_event": "rpc.error",
                    "operation": operation.value,
                    "error_kind": exc.kind.value,
                },
            )
            raise

        logger.debug(
            "RPC response %s",
            response.status,
            extra={
                "rpc_event": "rpc.response",
                "operation": operation.value,
                "status": response.status,
                "result_count": len(results) if isinstance(results, list) else None,
            },
        )
        return results

    def close(self) -> None:
        """Release transport resources when the transport supports it."""

        close = getattr(self.config.transport, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


__all__ = ["AurClient", "ClientConfig"]
