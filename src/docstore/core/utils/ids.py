"""Identifier and timestamp generation for new documents"""

from datetime import datetime, timezone
from uuid import uuid4


def new_id() -> str:
    """Return a random UUID4 string."""
    return str(uuid4())


def utcnow() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)
