"""EntryStore aggregate: the checklist, delivery, dine-in and saved-name collections and their rules.

Every read returns freshly loaded records, so changing a returned object never
changes stored state; the only way to write is through the methods below.
Validation failures raise ValidationError whose message is shown verbatim.
"""
import logging
import math
from datetime import datetime
from threading import RLock
from typing import Callable, List, Optional, Tuple, Union

from tracker.domain.ChecklistItem import ChecklistItem
from tracker.domain.DeliveryEntry import DeliveryEntry
from tracker.domain.DineInEntry import DineInEntry
from tracker.domain.SavedName import SavedName
from tracker.events.Event_Bus import GLOBAL_EVENT_BUS
from tracker.events.event_helpers import (
    publish_checklist_completed, publish_checklist_reset, publish_delivery_blocked, publish_pruned
)
from tracker.infra.Record_Repository import RecordRepository, Repositories
from tracker.logic.names.matching import allows_multiple, clean_name, find_by_name
from tracker.logic.names.suggestions import can_offer_save, filter_suggestions
from tracker.logic.reporting.summary import active_entries, total_amount
from tracker.utilities.config import CHECKLIST_RESET_DELAY
from tracker.utilities.constants import (
    STATUS_AVAILABLE,
    ERR_NAME_REQUIRED, ERR_AMOUNT_NOT_POSITIVE, ERR_DELIVERY_DUPLICATE, ERR_DINE_IN_DUPLICATE,
    ERR_SAVED_NAME_EMPTY, ERR_CHECKLIST_DUPLICATE, ERR_ITEM_NOT_FOUND
)
from tracker.utilities.errors import ValidationError
from tracker.utilities.scheduler import TimerScheduler

logger = logging.getLogger(__name__)


class EntryStore:
    def __init__(self, repositories: Optional[Repositories] = None, *,
                 clock: Optional[Callable[[], datetime]] = None,
                 scheduler=None,
                 reset_delay: float = CHECKLIST_RESET_DELAY):
        self.repos = repositories or Repositories()
        self._clock = clock or datetime.now
        self._scheduler = scheduler or TimerScheduler()
        self.reset_delay = reset_delay
        self._event_bus = GLOBAL_EVENT_BUS
        self._lock = RLock()
        self.completion_active = False
        self.last_reset_handle = None

    # --- Observer helpers -------------------------------------------------
    def set_event_bus(self, bus):
        self._event_bus = bus
        return self

    def now(self) -> datetime:
        return self._clock()

    # --- Checklist ----------------------------------------------------------
    def list_checklist(self) -> List[ChecklistItem]:
        '''Checklist items, oldest first.'''
        return self.repos.checklist.all()

    def add_checklist_item(self, name: str) -> Optional[ChecklistItem]:
        '''
        Adds an available item. A blank name is ignored and returns None.
        '''
        trimmed = clean_name(name)
        if not trimmed:
            return None
        with self._lock:
            if find_by_name(self.repos.checklist.all(), trimmed) is not None:
                raise ValidationError(ERR_CHECKLIST_DUPLICATE)
            now = self.now()
            item = self.repos.checklist.insert(
                ChecklistItem(name=trimmed, status=STATUS_AVAILABLE, created_at=now))
            self._upsert_saved_name(trimmed, now)
        logger.info("Checklist item added: %s", item.name)
        return item

    def toggle_status(self, item: Union[ChecklistItem, str]) -> ChecklistItem:
        '''
        Flips an item between available and used, then checks whether every item is used.
        '''
        item_id = item.id if isinstance(item, ChecklistItem) else item
        with self._lock:
            current = self.repos.checklist.get(item_id)
            if current is None:
                raise ValidationError(ERR_ITEM_NOT_FOUND)
            current.status = current.toggled_status()
            self.repos.checklist.update(current)
            self.check_all_used()
        return current

    def check_all_used(self) -> bool:
        '''
        When the checklist is non-empty and nothing is available, raises the completion
        signal and schedules the bulk reset. Returns True when that happened.
        '''
        with self._lock:
            items = self.repos.checklist.all()
            if not items or any(i.is_available for i in items):
                return False
            self.completion_active = True
        logger.info("All %d checklist items used; resetting in %.1fs", len(items), self.reset_delay)
        publish_checklist_completed(len(items), self.reset_delay, bus=self._event_bus)
        self.last_reset_handle = self._scheduler.schedule(self.reset_delay, self.reset_all_available)
        return True

    def reset_all_available(self) -> int:
        '''
        Marks every checklist item available (whatever the set is now) and clears the
        completion signal. Returns the number of items that changed.
        '''
        with self._lock:
            items = self.repos.checklist.all()
            changed = 0
            for item in items:
                if item.status != STATUS_AVAILABLE:
                    item.status = STATUS_AVAILABLE
                    changed += 1
            if changed:
                self.repos.checklist.replace_all(items)
            self.completion_active = False
        logger.info("Checklist reset: %d item(s) made available", changed)
        publish_checklist_reset(changed, bus=self._event_bus)
        return changed

    # --- Delivery -----------------------------------------------------------
    def add_delivery_entry(self, name: str, amount) -> DeliveryEntry:
        trimmed = clean_name(name)
        if not trimmed:
            raise ValidationError(ERR_NAME_REQUIRED)
        try:
            amount = float(amount)
        except (TypeError, ValueError):
            raise ValidationError(ERR_AMOUNT_NOT_POSITIVE) from None
        if not amount > 0 or math.isinf(amount):
            raise ValidationError(ERR_AMOUNT_NOT_POSITIVE)
        with self._lock:
            now = self.now()
            active = active_entries(self.repos.delivery.all(), now)
            if find_by_name(active, trimmed) is not None and not allows_multiple(trimmed):
                raise ValidationError(ERR_DELIVERY_DUPLICATE)
            entry = self.repos.delivery.insert(DeliveryEntry(name=trimmed, amount=amount, created_at=now))
            self._upsert_saved_name(trimmed, now)
        logger.info("Delivery entry added: %s (%s)", entry.name, entry.amount)
        return entry

    def list_delivery(self) -> List[DeliveryEntry]:
        '''Prunes expired entries, then returns the active ones, newest first.'''
        self.prune_expired_delivery()
        return active_entries(self.repos.delivery.all(), self.now())

    def total_amount(self) -> float:
        return total_amount(self.repos.delivery.all(), self.now())

    def prune_expired_delivery(self) -> int:
        return self._prune(self.repos.delivery, 'delivery')

    # --- Dine-In ------------------------------------------------------------
    def add_dine_in_entry(self, name: str) -> DineInEntry:
        '''
        Adds a restaurant to Dine-In. When no active delivery entry has the same name,
        a zero-amount delivery entry is added too, blocking delivery orders from it
        until that entry expires on its own.
        '''
        trimmed = clean_name(name)
        if not trimmed:
            raise ValidationError(ERR_NAME_REQUIRED)
        blocked = None
        with self._lock:
            now = self.now()
            if find_by_name(active_entries(self.repos.dine_in.all(), now), trimmed) is not None:
                raise ValidationError(ERR_DINE_IN_DUPLICATE)
            entry = self.repos.dine_in.insert(DineInEntry(name=trimmed, created_at=now))
            self._upsert_saved_name(trimmed, now)
            if find_by_name(active_entries(self.repos.delivery.all(), now), trimmed) is None:
                blocked = self.repos.delivery.insert(DeliveryEntry(name=trimmed, amount=0, created_at=now))
        logger.info("Dine-In entry added: %s", entry.name)
        if blocked is not None:
            logger.info("Delivery blocked for %s (zero-amount entry)", blocked.name)
            publish_delivery_blocked(blocked, bus=self._event_bus)
        return entry

    def list_dine_in(self) -> List[DineInEntry]:
        self.prune_expired_dine_in()
        return active_entries(self.repos.dine_in.all(), self.now())

    def prune_expired_dine_in(self) -> int:
        return self._prune(self.repos.dine_in, 'dine_in')

    # --- Saved names --------------------------------------------------------
    def save_name(self, value: str) -> SavedName:
        '''
        Remembers a name. An existing case-insensitive match only has last_used refreshed.
        '''
        trimmed = clean_name(value)
        if not trimmed:
            raise ValidationError(ERR_SAVED_NAME_EMPTY)
        with self._lock:
            return self._upsert_saved_name(trimmed, self.now())

    def list_saved_names(self) -> List[SavedName]:
        '''Saved names, most recently used first.'''
        return self.repos.saved_names.all()

    def suggestions(self, query: str = "") -> Tuple[List[SavedName], bool]:
        '''Returns (matching saved names, whether query can be saved as a new name).'''
        saved = self.list_saved_names()
        return filter_suggestions(query, saved), can_offer_save(query, saved)

    # --- Internals ----------------------------------------------------------
    def _upsert_saved_name(self, trimmed: str, now: datetime) -> SavedName:
        # last_used matches the created_at of the record being added
        existing = find_by_name(self.repos.saved_names.all(), trimmed, attr='value')
        if existing is not None:
            existing.last_used = now
            self.repos.saved_names.update(existing)
            return existing
        return self.repos.saved_names.insert(SavedName(value=trimmed, last_used=now))

    def _prune(self, repo: RecordRepository, list_name: str) -> int:
        with self._lock:
            now = self.now()
            expired = [e for e in repo.all() if e.is_expired(now)]
            removed = repo.delete_many(e.id for e in expired)
        if removed:
            logger.info("Pruned %d expired %s entr%s", removed, list_name, "y" if removed == 1 else "ies")
            publish_pruned(list_name, [e.name for e in expired], bus=self._event_bus)
        return removed

    def __str__(self) -> str:
        return (f"EntryStore({self.repos.data_dir}: checklist={len(self.repos.checklist)}, "
                f"delivery={len(self.repos.delivery)}, dine_in={len(self.repos.dine_in)}, "
                f"saved_names={len(self.repos.saved_names)})")

    def __repr__(self) -> str:
        return self.__str__()
