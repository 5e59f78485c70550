"""Web-facing observers for entry store events.

Subscribes to a bus (the global one by default) for every store event and
keeps a ring buffer of recent events that the web layer exposes for polling,
so a client can show the "you did that" banner and pruning notices without
reloading.

Design:
  * Each event gets an auto-increment integer id (cursor); clients ask only
    for newer events with since=<last_id_seen>.
  * A Lock guards the buffer: the checklist reset fires on a timer thread.
  * MAX_EVENTS caps memory.
"""
from __future__ import annotations
import logging
from typing import List, Dict, Any, Optional
from threading import Lock
from datetime import datetime, timezone

from .Event_Bus import (
    EventBus, GLOBAL_EVENT_BUS,
    CHECKLIST_COMPLETED, CHECKLIST_RESET, DELIVERY_BLOCKED, DELIVERY_PRUNED, DINE_IN_PRUNED
)

logger = logging.getLogger(__name__)

WATCHED_EVENTS = (CHECKLIST_COMPLETED, CHECKLIST_RESET, DELIVERY_BLOCKED, DELIVERY_PRUNED, DINE_IN_PRUNED)
MAX_EVENTS = 300

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
_subscribed_to: List[EventBus] = []


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    with _lock:
        evt: Dict[str, Any] = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat()
        }
        if isinstance(payload, dict):
            entry = payload.get('entry')
            if entry is not None and hasattr(entry, 'name'):
                evt['name'] = entry.name
                evt['amount'] = getattr(entry, 'amount', None)
            for k in ('count', 'reset_in', 'message', 'removed', 'names', 'source'):
                if k in payload:
                    evt[k] = payload[k]
        _events.append(evt)
        _next_id += 1
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]


def start(bus: Optional[EventBus] = None):
    """Idempotent start: subscribe the recorder once per bus."""
    bus = bus if bus is not None else GLOBAL_EVENT_BUS
    if any(b is bus for b in _subscribed_to):
        return
    for name in WATCHED_EVENTS:
        bus.subscribe(name, _record)
    _subscribed_to.append(bus)
    logger.info("Web observers subscribed to %d event types", len(WATCHED_EVENTS))


def get_events(since: int | None = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive), plus next_cursor for the following poll."""
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


def clear():
    """Drop buffered events (cursor keeps counting)."""
    with _lock:
        _events.clear()


__all__ = ['start', 'get_events', 'clear', 'WATCHED_EVENTS']
