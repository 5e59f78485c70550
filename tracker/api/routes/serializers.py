"""JSON shapes returned by the API routes."""
from datetime import datetime
from typing import Any, Dict

from tracker.domain.ChecklistItem import ChecklistItem
from tracker.domain.DeliveryEntry import DeliveryEntry
from tracker.domain.SavedName import SavedName
from tracker.domain.TimedEntry import TimedEntry
from tracker.logic.reporting.summary import days_left_label, format_amount


def checklist_item_out(item: ChecklistItem) -> Dict[str, Any]:
    return item.to_dict()


def timed_entry_out(entry: TimedEntry, now: datetime) -> Dict[str, Any]:
    data = entry.to_dict()
    days = entry.days_remaining(now)
    data.update({
        'expiration_date': entry.expiration_date.isoformat(),
        'days_remaining': days,
        'days_left_label': days_left_label(days),
        'is_expired': entry.is_expired(now),
    })
    if isinstance(entry, DeliveryEntry):
        data['amount_formatted'] = format_amount(entry.amount)
    return data


def saved_name_out(name: SavedName) -> Dict[str, Any]:
    return name.to_dict()
