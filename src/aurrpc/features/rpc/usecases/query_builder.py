"""
Summary: Build RPC request URLs for the four supported operations.
Why: Keep query encoding deterministic and separate from transport concerns.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from urllib.parse import urlencode, urlsplit, urlunsplit


class Operation(str, Enum):
    """RPC ``type`` values understood by the service."""

    SEARCH = "search"
    MSEARCH = "msearch"
    INFO = "info"
    MULTIINFO = "multiinfo"


def _with_query(base_url: str, pairs: list[tuple[str, str]]) -> str:
    """Replace the query of ``base_url`` with the encoded ``pairs``."""

    parts = urlsplit(base_url)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(pairs), ""))


def build_single_arg_url(base_url: str, operation: Operation, arg: str) -> str:
    """Return ``base_url?type=<op>&arg=<arg>`` with ``arg`` query-encoded."""

    return _with_query(base_url, [("type", operation.value), ("arg", arg)])


def build_multi_arg_url(base_url: str, operation: Operation, args: Iterable[str]) -> str:
    """Return ``base_url?type=<op>`` followed by one ``arg[]`` pair per value.

    Values keep their input order; an empty iterable yields no ``arg[]`` pairs.
    """

    pairs = [("type", operation.value)]
    pairs.extend(("arg[]", arg) for arg in args)
    return _with_query(base_url, pairs)


def search_url(base_url: str, pattern: str) -> str:
    return build_single_arg_url(base_url, Operation.SEARCH, pattern)


def msearch_url(base_url: str, author: str) -> str:
    return build_single_arg_url(base_url, Operation.MSEARCH, author)


def info_url(base_url: str, name: str) -> str:
    return build_single_arg_url(base_url, Operation.INFO, name)


def multiinfo_url(base_url: str, names: Iterable[str]) -> str:
    return build_multi_arg_url(base_url, Operation.MULTIINFO, names)


__all__ = [
    "Operation",
    "build_multi_arg_url",
    "build_single_arg_url",
    "info_url",
    "msearch_url",
    "multiinfo_url",
    "search_url",
]
