"""
deps.py - the entry store singleton used by the routes.

Created lazily on first request; tests swap it through app.dependency_overrides.
"""
from threading import Lock
from typing import Optional

from tracker.domain.EntryStore import EntryStore
from tracker.infra.Record_Repository import Repositories
from tracker.utilities.config import DATA_DIR

_store: Optional[EntryStore] = None
_store_lock = Lock()


def get_store() -> EntryStore:
    global _store
    with _store_lock:
        if _store is None:
            _store = EntryStore(Repositories(DATA_DIR))
        return _store
