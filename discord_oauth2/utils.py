# SPDX-License-Identifier: MIT

from __future__ import annotations

import datetime
from typing import Iterable, Optional, Tuple
from urllib.parse import quote

__all__ = (
    "utcnow",
    "urlencode",
)


def utcnow() -> datetime.datetime:
    """A helper function to return an aware UTC datetime representing the current time."""
    return datetime.datetime.now(datetime.timezone.utc)


def urlencode(fields: Iterable[Tuple[str, Optional[str]]]) -> str:
    """Renders ``(key, value)`` pairs as a query string, in the order given.

    Values are percent-encoded per :rfc:`3986`, so a space becomes ``%20``
    rather than ``+``. Pairs whose value is ``None`` or empty are left out.
    """
    return "&".join(f"{key}={quote(value, safe='')}" for key, value in fields if value)
