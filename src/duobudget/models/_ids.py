"""Column default helpers."""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4


def new_id() -> str:
    """Return an opaque string identifier."""

    return uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
