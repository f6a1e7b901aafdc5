# Where: aurrpc.domain.__init__
# What: Expose the package record and the error taxonomy.
# Why: Give feature and platform layers one import path for core types.

"""Domain types shared by the RPC feature and the platform adapters."""

from .errors import (
    AurError,
    EncodingError,
    ErrorKind,
    HttpError,
    InvalidResponseError,
    IoError,
    ParseError,
    ServiceError,
    TlsError,
)
from .package import Package

__all__ = [
    "AurError",
    "EncodingError",
    "ErrorKind",
    "HttpError",
    "InvalidResponseError",
    "IoError",
    "Package",
    "ParseError",
    "ServiceError",
    "TlsError",
]
