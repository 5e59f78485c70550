"""ChecklistItem domain entity: reusable item toggled between available and used."""
from datetime import datetime
from typing import Optional
from uuid import uuid4

from tracker.utilities.constants import STATUS_AVAILABLE, STATUS_USED
from tracker.utilities.timestamps import format_timestamp, parse_timestamp


class ChecklistItem:
    STATUSES = (STATUS_AVAILABLE, STATUS_USED)

    def __init__(self, name: str = "", status: str = STATUS_AVAILABLE,
                 created_at: Optional[datetime] = None, id: Optional[str] = None):
        if status not in self.STATUSES:
            raise ValueError(f"Unknown checklist status: {status}")
        self.id = id or uuid4().hex
        self.name = name
        self.status = status
        self.created_at = created_at or datetime.now()

    @property
    def is_available(self) -> bool:
        return self.status == STATUS_AVAILABLE

    def toggled_status(self) -> str:
        '''Returns the status this item would have after a toggle.'''
        return STATUS_USED if self.is_available else STATUS_AVAILABLE

    def __str__(self) -> str:
        return f"{self.name} - {self.status}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a ChecklistItem from a persisted dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        status = d.get("status") if d.get("status") in ChecklistItem.STATUSES else STATUS_AVAILABLE
        return ChecklistItem(
            name=d.get("name", ""),
            status=status,
            created_at=parse_timestamp(d.get("created_at"), datetime.min),
            id=d.get("id"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "status": self.status,
            "created_at": format_timestamp(self.created_at),
        }
