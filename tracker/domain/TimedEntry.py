"""TimedEntry base entity: a named record that expires a fixed number of days after creation."""
import logging
import math
from datetime import datetime, timedelta
from typing import Optional
from uuid import uuid4

from tracker.utilities.config import EXPIRATION_DAYS
from tracker.utilities.timestamps import format_timestamp, parse_timestamp

SECONDS_IN_DAY = 60 * 60 * 24
# Stored records without a readable created_at load as already expired
UNKNOWN_CREATED_AT = datetime.min

logger = logging.getLogger(__name__)


class TimedEntry:
    expiration_days: int = EXPIRATION_DAYS

    def __init__(self, name: str = "", created_at: Optional[datetime] = None, id: Optional[str] = None):
        self.id = id or uuid4().hex
        self.name = name
        self.created_at = created_at or datetime.now()

    @property
    def expiration_date(self) -> datetime:
        return self.created_at + timedelta(days=self.expiration_days)

    def days_remaining(self, now: Optional[datetime] = None) -> int:
        '''Whole days left before expiry, rounded up and never negative.'''
        now = now or datetime.now()
        remaining = (self.expiration_date - now).total_seconds()
        if remaining <= 0:
            return 0
        return math.ceil(remaining / SECONDS_IN_DAY)

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.now()
        return now >= self.expiration_date

    def __str__(self) -> str:
        return f"{self.name} - Exp: {self.expiration_date:%d-%m-%Y %H:%M}"

    __repr__ = __str__

    @classmethod
    def _fields_from_dict(cls, data):
        d = dict(data) if isinstance(data, dict) else {}
        created_at = parse_timestamp(d.get("created_at"))
        if created_at is None:
            logger.warning("Entry %r has no valid created_at (%r); treating it as expired",
                           d.get("name", ""), d.get("created_at"))
            created_at = UNKNOWN_CREATED_AT
        return {
            "name": d.get("name", ""),
            "created_at": created_at,
            "id": d.get("id"),
        }

    @classmethod
    def from_dict(cls, data):
        '''Creates an entry from a persisted dictionary. Ignores unknown keys.'''
        return cls(**cls._fields_from_dict(data))

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "created_at": format_timestamp(self.created_at),
        }
