from typing import Optional

from fastapi import APIRouter, Depends, Query

from tracker.api.deps import get_store
from tracker.api.routes.serializers import timed_entry_out
from tracker.domain.EntryStore import EntryStore
from tracker.logic.reporting.summary import compute_expiring_soon, format_amount
from tracker.utilities.validators import DeliveryEntryInput

router = APIRouter(prefix="/api/delivery", tags=["delivery"])


@router.get("")
def list_delivery(store: EntryStore = Depends(get_store)):
    """Active delivery entries (newest first) and their total. Expired entries are pruned first."""
    entries = store.list_delivery()
    now = store.now()
    total = store.total_amount()
    return {
        "entries": [timed_entry_out(e, now) for e in entries],
        "count": len(entries),
        "total": total,
        "total_formatted": format_amount(total),
    }


@router.post("")
def add_delivery_entry(payload: DeliveryEntryInput, store: EntryStore = Depends(get_store)):
    entry = store.add_delivery_entry(payload.name, payload.amount)
    return {"entry": timed_entry_out(entry, store.now()), "total": store.total_amount()}


@router.get("/expiring")
def delivery_expiring(window: Optional[int] = Query(default=None, ge=0), store: EntryStore = Depends(get_store)):
    return {"items": compute_expiring_soon(store.list_delivery(), store.now(), window=window)}
