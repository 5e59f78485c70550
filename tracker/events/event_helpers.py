"""Event helper utilities.

Helpers that build the payloads of entry store events and publish them on a
bus (the global one unless another is passed).

Quick import:
    from tracker.events.event_helpers import (
        publish_checklist_completed, publish_checklist_reset,
        publish_delivery_blocked, publish_pruned
    )
"""
from __future__ import annotations
from typing import Any, Iterable, Optional
from .Event_Bus import (
    EventBus, GLOBAL_EVENT_BUS,
    CHECKLIST_COMPLETED, CHECKLIST_RESET, DELIVERY_BLOCKED, DELIVERY_PRUNED, DINE_IN_PRUNED
)
from tracker.utilities.constants import COMPLETION_MESSAGE

__all__ = [
    'publish_checklist_completed', 'publish_checklist_reset',
    'publish_delivery_blocked', 'publish_pruned'
]


def _bus(bus: Optional[EventBus]) -> EventBus:
    return bus if bus is not None else GLOBAL_EVENT_BUS


def publish_checklist_completed(count: int, reset_in: float, bus: Optional[EventBus] = None):
    """Publish a checklist.completed event (every item used)."""
    _bus(bus).publish(CHECKLIST_COMPLETED, {
        'count': count,
        'reset_in': reset_in,
        'message': COMPLETION_MESSAGE
    })


def publish_checklist_reset(count: int, bus: Optional[EventBus] = None):
    _bus(bus).publish(CHECKLIST_RESET, {'count': count})


def publish_delivery_blocked(entry: Any, bus: Optional[EventBus] = None):
    """Publish a delivery.blocked event for a zero-amount entry created from Dine-In."""
    _bus(bus).publish(DELIVERY_BLOCKED, {'entry': entry, 'source': 'dine_in'})


def publish_pruned(list_name: str, names: Iterable[str], bus: Optional[EventBus] = None):
    """Publish delivery.pruned or dine_in.pruned.

    Payload structure:
        {'removed': <int>, 'names': [<str>, ...]}
    """
    event_name = DELIVERY_PRUNED if list_name == 'delivery' else DINE_IN_PRUNED
    names_list = list(names)
    _bus(bus).publish(event_name, {'removed': len(names_list), 'names': names_list})
