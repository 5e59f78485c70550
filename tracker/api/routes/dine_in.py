from typing import Optional

from fastapi import APIRouter, Depends, Query

from tracker.api.deps import get_store
from tracker.api.routes.serializers import timed_entry_out
from tracker.domain.EntryStore import EntryStore
from tracker.logic.reporting.summary import compute_expiring_soon
from tracker.utilities.validators import DineInEntryInput

router = APIRouter(prefix="/api/dine-in", tags=["dine-in"])


@router.get("")
def list_dine_in(store: EntryStore = Depends(get_store)):
    entries = store.list_dine_in()
    now = store.now()
    return {"entries": [timed_entry_out(e, now) for e in entries], "count": len(entries)}


@router.post("")
def add_dine_in_entry(payload: DineInEntryInput, store: EntryStore = Depends(get_store)):
    """Add a restaurant; a zero-amount delivery entry is created when none is active."""
    entry = store.add_dine_in_entry(payload.name)
    return {"entry": timed_entry_out(entry, store.now())}


@router.get("/expiring")
def dine_in_expiring(window: Optional[int] = Query(default=None, ge=0), store: EntryStore = Depends(get_store)):
    return {"items": compute_expiring_soon(store.list_dine_in(), store.now(), window=window)}
