from fastapi import APIRouter, Depends

from tracker.api.deps import get_store
from tracker.api.routes.serializers import checklist_item_out
from tracker.domain.EntryStore import EntryStore
from tracker.logic.reporting.summary import partition_checklist
from tracker.utilities.constants import COMPLETION_MESSAGE
from tracker.utilities.validators import ChecklistItemInput

router = APIRouter(prefix="/api/checklist", tags=["checklist"])


def _checklist_state(store: EntryStore):
    available, used = partition_checklist(store.list_checklist())
    return {
        "available": [checklist_item_out(i) for i in available],
        "used": [checklist_item_out(i) for i in used],
        "count": len(available) + len(used),
        "completion": COMPLETION_MESSAGE if store.completion_active else None,
    }


@router.get("")
def list_checklist(store: EntryStore = Depends(get_store)):
    return _checklist_state(store)


@router.post("")
def add_checklist_item(payload: ChecklistItemInput, store: EntryStore = Depends(get_store)):
    item = store.add_checklist_item(payload.name)
    # Blank names are ignored rather than rejected
    return {"added": checklist_item_out(item) if item else None, **_checklist_state(store)}


@router.post("/{item_id}/toggle")
def toggle_checklist_item(item_id: str, store: EntryStore = Depends(get_store)):
    item = store.toggle_status(item_id)
    return {"item": checklist_item_out(item), **_checklist_state(store)}
