"""HTTP transport and JSON parser adapters.

This package provides the default collaborators behind the RPC ports:
a ``requests`` transport and a standard-library JSON parser.
"""

from .http_client import RequestsTransport, translate_transport_error
from .json_parser import JsonStreamParser
from .user_agent import default_user_agent, format_user_agent

__all__ = [
    "JsonStreamParser",
    "RequestsTransport",
    "default_user_agent",
    "format_user_agent",
    "translate_transport_error",
]
