"""
Summary: Validate one decoded JSON object and convert it into a Package.
Why: Reject any missing key or mistyped value before a record can exist.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Final

from aurrpc.domain.errors import InvalidResponseError
from aurrpc.domain.package import Package
from aurrpc.platform.logging import logger

U64_MAX: Final[int] = 2**64 - 1
I64_MAX: Final[int] = 2**63 - 1


def _lookup(obj: Mapping[str, Any], key: str) -> Any:
    if key not in obj:
        logger.debug("Package object is missing '%s'", key)
        raise InvalidResponseError()
    return obj[key]


def _reject(key: str, value: Any) -> InvalidResponseError:
    logger.debug("Package field '%s' has unexpected value: %r", key, value)
    return InvalidResponseError()


def _is_unsigned(value: Any) -> bool:
    # bool is an int subclass; JSON true/false are never numbers here.
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= U64_MAX


def read_str(obj: Mapping[str, Any], key: str) -> str:
    value = _lookup(obj, key)
    if not isinstance(value, str):
        raise _reject(key, value)
    return value


def read_optional_str(obj: Mapping[str, Any], key: str) -> str | None:
    """Accept a string or JSON null; the key itself must be present."""

    value = _lookup(obj, key)
    if value is None or isinstance(value, str):
        return value
    raise _reject(key, value)


def read_u64(obj: Mapping[str, Any], key: str) -> int:
    value = _lookup(obj, key)
    if not _is_unsigned(value):
        raise _reject(key, value)
    return value


def read_timestamp(obj: Mapping[str, Any], key: str) -> datetime:
    """Convert a unix-epoch integer into an aware UTC datetime."""

    value = read_u64(obj, key)
    if value > I64_MAX:
        raise _reject(key, value)
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        raise _reject(key, value) from None


def package_from_json(value: Any) -> Package:
    """Map one JSON object onto a ``Package``.

    Unknown keys are ignored and ``value`` is never modified.

    Raises:
        InvalidResponseError: ``value`` is not an object, or any field is
            missing or has the wrong JSON type.
    """

    if not isinstance(value, Mapping):
        logger.debug("Expected object, got: %r", value)
        raise InvalidResponseError()

    return Package(
        base_name=read_str(value, "PackageBase"),
        base_id=read_u64(value, "PackageBaseID"),
        name=read_str(value, "Name"),
        version=read_str(value, "Version"),
        homepage=read_str(value, "URL"),
        description=read_str(value, "Description"),
        out_of_date=read_u64(value, "OutOfDate") != 0,
        created=read_timestamp(value, "FirstSubmitted"),
        modified=read_timestamp(value, "LastModified"),
        license=read_optional_str(value, "License"),
        maintainer=read_optional_str(value, "Maintainer"),
        votes=read_u64(value, "NumVotes"),
        id=read_u64(value, "ID"),
        category_id=read_u64(value, "CategoryID"),
        download=read_str(value, "URLPath"),
    )


def packages_from_json(value: Any) -> list[Package]:
    """Map a JSON array element-wise, preserving order.

    Raises:
        InvalidResponseError: ``value`` is not an array or any element fails.
    """

    if not isinstance(value, list):
        logger.debug("Expected array, got: %r", value)
        raise InvalidResponseError()
    return [package_from_json(item) for item in value]


__all__ = [
    "I64_MAX",
    "U64_MAX",
    "package_from_json",
    "packages_from_json",
    "read_optional_str",
    "read_str",
    "read_timestamp",
    "read_u64",
]
