"""Record repositories (JSON file persistence).

Each collection lives in its own JSON file as a list of dictionaries. Reads
always go back to the file and return fresh domain objects, so callers hold
snapshots that never alias stored state. Writes replace the file atomically.
"""
import json
import logging
import os
import shutil
import tempfile
from json import JSONDecodeError
from pathlib import Path
from typing import Callable, Generic, Iterable, List, Optional, TypeVar

from tracker.domain.ChecklistItem import ChecklistItem
from tracker.domain.DeliveryEntry import DeliveryEntry
from tracker.domain.DineInEntry import DineInEntry
from tracker.domain.SavedName import SavedName
from tracker.infra.paths import DATA_DIR, collection_paths

logger = logging.getLogger(__name__)

T = TypeVar('T')


class RecordRepository(Generic[T]):
    def __init__(self, path: Path, factory: Callable[[dict], T], sort_key: Callable[[T], object],
                 newest_first: bool = False):
        self.path = Path(path)
        self._factory = factory
        self._sort_key = sort_key
        self._newest_first = newest_first

    # --- Raw file access ---------------------------------------------------
    def _load_raw(self) -> List[dict]:
        if not self.path.exists():
            return []
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, JSONDecodeError) as e:
            logger.error("Failed to read %s: %s", self.path.name, e)
            return []
        if not isinstance(data, list):
            logger.warning("Ignoring %s: expected a list, got %s", self.path.name, type(data).__name__)
            return []
        return [rec for rec in data if isinstance(rec, dict)]

    def _atomic_write(self, records: List[dict]):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.stem}_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(records, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, self.path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    # --- Collection operations ---------------------------------------------
    def all(self) -> List[T]:
        '''Returns every record, ordered by the collection's timestamp field.'''
        records = [self._factory(rec) for rec in self._load_raw()]
        records.sort(key=self._sort_key, reverse=self._newest_first)
        return records

    def get(self, record_id: str) -> Optional[T]:
        for rec in self._load_raw():
            if rec.get('id') == record_id:
                return self._factory(rec)
        return None

    def insert(self, record: T) -> T:
        raw = self._load_raw()
        raw.append(record.to_dict())
        self._atomic_write(raw)
        return self._factory(record.to_dict())

    def update(self, record: T) -> bool:
        '''Replaces the stored record with the same id. Returns False when it is absent.'''
        raw = self._load_raw()
        for i, rec in enumerate(raw):
            if rec.get('id') == record.id:
                raw[i] = record.to_dict()
                self._atomic_write(raw)
                return True
        return False

    def replace_all(self, records: Iterable[T]):
        self._atomic_write([r.to_dict() for r in records])

    def delete_many(self, record_ids: Iterable[str]) -> int:
        ids = set(record_ids)
        if not ids:
            return 0
        raw = self._load_raw()
        kept = [rec for rec in raw if rec.get('id') not in ids]
        removed = len(raw) - len(kept)
        if removed:
            self._atomic_write(kept)
        return removed

    def __len__(self) -> int:
        return len(self._load_raw())


class Repositories:
    """The four collections backing the entry store."""

    def __init__(self, data_dir: Path = DATA_DIR):
        self.data_dir = Path(data_dir)
        paths = collection_paths(self.data_dir)
        self.checklist: RecordRepository[ChecklistItem] = RecordRepository(
            paths['checklist'], ChecklistItem.from_dict, lambda r: r.created_at)
        self.delivery: RecordRepository[DeliveryEntry] = RecordRepository(
            paths['delivery'], DeliveryEntry.from_dict, lambda r: r.created_at, newest_first=True)
        self.dine_in: RecordRepository[DineInEntry] = RecordRepository(
            paths['dine_in'], DineInEntry.from_dict, lambda r: r.created_at, newest_first=True)
        self.saved_names: RecordRepository[SavedName] = RecordRepository(
            paths['saved_names'], SavedName.from_dict, lambda r: r.last_used, newest_first=True)
