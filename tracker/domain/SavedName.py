"""SavedName domain entity: a remembered name offered as a suggestion, ordered by recency."""
from datetime import datetime
from typing import Optional
from uuid import uuid4

from tracker.utilities.timestamps import format_timestamp, parse_timestamp


class SavedName:
    def __init__(self, value: str = "", last_used: Optional[datetime] = None, id: Optional[str] = None):
        self.id = id or uuid4().hex
        self.value = value
        self.last_used = last_used or datetime.now()

    def __str__(self) -> str:
        return f"{self.value} - Last used: {self.last_used:%d-%m-%Y %H:%M}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return SavedName(
            value=d.get("value", ""),
            last_used=parse_timestamp(d.get("last_used"), datetime.min),
            id=d.get("id"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "value": self.value,
            "last_used": format_timestamp(self.last_used),
        }
