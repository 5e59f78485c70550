from fastapi import APIRouter, Depends, Query

from tracker.api.deps import get_store
from tracker.api.routes.serializers import saved_name_out
from tracker.domain.EntryStore import EntryStore
from tracker.utilities.validators import SavedNameInput

router = APIRouter(prefix="/api/names", tags=["names"])


@router.get("")
def suggest_names(q: str = Query(default=""), store: EntryStore = Depends(get_store)):
    """Saved names matching q (all when q is empty) and whether q can be remembered."""
    matches, can_save = store.suggestions(q)
    return {"suggestions": [saved_name_out(n) for n in matches], "can_save": can_save}


@router.post("")
def save_name(payload: SavedNameInput, store: EntryStore = Depends(get_store)):
    return {"name": saved_name_out(store.save_name(payload.value))}
