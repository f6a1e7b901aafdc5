"""AUR RPC client package.

Builds RPC queries, interprets the service's JSON envelope, and maps
package objects into validated ``Package`` records.
"""

from aurrpc.client import AurClient, ClientConfig
from aurrpc.config import Config
from aurrpc.domain import (
    AurError,
    EncodingError,
    ErrorKind,
    HttpError,
    InvalidResponseError,
    IoError,
    Package,
    ParseError,
    ServiceError,
    TlsError,
)
from aurrpc.platform.logging import setup_logger

__all__ = [
    "AurClient",
    "AurError",
    "ClientConfig",
    "Config",
    "EncodingError",
    "ErrorKind",
    "HttpError",
    "InvalidResponseError",
    "IoError",
    "Package",
    "ParseError",
    "ServiceError",
    "TlsError",
    "setup_logger",
]
