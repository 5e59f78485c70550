"""List summaries: totals, expiring-soon snapshots and display formatting."""
from __future__ import annotations
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from tracker.domain.ChecklistItem import ChecklistItem
from tracker.domain.DeliveryEntry import DeliveryEntry
from tracker.domain.TimedEntry import TimedEntry
from tracker.utilities.config import EXPIRING_SOON_DAYS

__all__ = ["active_entries", "total_amount", "partition_checklist", "compute_expiring_soon",
           "days_left_label", "format_amount"]


def active_entries(entries: Iterable[TimedEntry], now: Optional[datetime] = None) -> List[TimedEntry]:
    now = now or datetime.now()
    return [e for e in entries if not e.is_expired(now)]


def total_amount(entries: Iterable[DeliveryEntry], now: Optional[datetime] = None) -> float:
    """Sum of amounts over non-expired delivery entries."""
    return sum((e.amount for e in active_entries(entries, now)), 0.0)


def partition_checklist(items: Sequence[ChecklistItem]) -> Tuple[List[ChecklistItem], List[ChecklistItem]]:
    """Split items into (available, used), each keeping the input order."""
    available = [i for i in items if i.is_available]
    used = [i for i in items if not i.is_available]
    return available, used


def compute_expiring_soon(entries: Iterable[TimedEntry], now: Optional[datetime] = None, *,
                          window: int | None = None) -> List[Dict[str, Any]]:
    """Return active entries with at most ``window`` days left, soonest first."""
    expiring_window = window if window is not None else EXPIRING_SOON_DAYS
    now = now or datetime.now()
    result: List[Dict[str, Any]] = []
    for e in active_entries(entries, now):
        days_left = e.days_remaining(now)
        if days_left <= expiring_window:
            result.append({
                'id': e.id,
                'name': e.name,
                'days_left': days_left,
                'expires': e.expiration_date.isoformat(),
            })
    result.sort(key=lambda x: (x['days_left'], x['name'].lower()))
    return result


def days_left_label(days: int) -> str:
    return f"{days} day{'' if days == 1 else 's'} left"


def format_amount(amount: float) -> str:
    """Amount with up to two fraction digits and no trailing zeros."""
    text = f"{amount:.2f}".rstrip('0').rstrip('.')
    return "0" if text in ("", "-0") else text
