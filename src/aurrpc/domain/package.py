"""Package record returned by the AUR RPC operations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class Package:
    """One repository entry decoded from the RPC service.

    Timestamps are timezone-aware UTC datetimes with second precision.
    ``license`` and ``maintainer`` are ``None`` when the service sends null.
    """

    base_name: str
    base_id: int
    name: str
    version: str
    homepage: str
    description: str
    out_of_date: bool
    created: datetime
    modified: datetime
    license: str | None
    maintainer: str | None
    votes: int
    id: int
    category_id: int
    download: str


__all__ = ["Package"]
