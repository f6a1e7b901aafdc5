"""
Summary: Public surface for RPC query, envelope, and record usecases.
Why: Let the client facade import usecases without reaching into modules.
"""

from .envelope import drain_body, interpret_response, unwrap_envelope
from .ports import HTTPResponse, HTTPTransport, JSONParser
from .query_builder import (
    Operation,
    info_url,
    msearch_url,
    multiinfo_url,
    search_url,
)
from .record_mapper import package_from_json, packages_from_json

__all__ = [
    "HTTPResponse",
    "HTTPTransport",
    "JSONParser",
    "Operation",
    "drain_body",
    "info_url",
    "interpret_response",
    "msearch_url",
    "multiinfo_url",
    "package_from_json",
    "packages_from_json",
    "search_url",
    "unwrap_envelope",
]
