"""Utility functions for the in-memory adapter."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime


def generate_uuid() -> str:
    """Generate a new UUID as string.

    Returns:
        UUID string (e.g., "123e4567-e89b-12d3-a456-426614174000")
    """
    return str(uuid.uuid4())


def now_utc() -> datetime:
    """Get the current timezone-aware UTC timestamp."""
    return datetime.now(UTC)
