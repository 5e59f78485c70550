"""DeliveryEntry domain entity: a delivery order with an amount (0 marks a blocked restaurant)."""
from datetime import datetime
from typing import Optional

from tracker.domain.TimedEntry import TimedEntry


class DeliveryEntry(TimedEntry):
    def __init__(self, name: str = "", amount: float = 0.0,
                 created_at: Optional[datetime] = None, id: Optional[str] = None):
        super().__init__(name, created_at, id)
        self.amount = float(amount)

    @property
    def is_blocked_marker(self) -> bool:
        '''True for the zero-amount entries created from the Dine-In list.'''
        return self.amount == 0

    def __str__(self) -> str:
        return f"{self.name} - {self.amount:g} - Exp: {self.expiration_date:%d-%m-%Y %H:%M}"

    __repr__ = __str__

    @classmethod
    def _fields_from_dict(cls, data):
        fields = super()._fields_from_dict(data)
        raw = data.get("amount", 0) if isinstance(data, dict) else 0
        try:
            fields["amount"] = float(raw)
        except (TypeError, ValueError):
            fields["amount"] = 0.0
        return fields

    def to_dict(self):
        d = super().to_dict()
        d["amount"] = self.amount
        return d
