"""Timestamp (de)serialization for persisted records."""
from datetime import datetime
from typing import Any, Optional


def format_timestamp(value: Optional[datetime]) -> str:
    return value.isoformat() if isinstance(value, datetime) else ""


def parse_timestamp(value: Any, default: Optional[datetime] = None) -> Optional[datetime]:
    '''Accepts a datetime or an ISO-8601 string. Unparseable values yield ``default``.'''
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return default
    return default
