"""Simple Event Bus / Observer implementation for entry store notifications.

Event names:
  checklist.completed -> payload {"count": int, "reset_in": float, "message": str}
  checklist.reset     -> payload {"count": int}
  delivery.blocked    -> payload {"entry": DeliveryEntry, "source": "dine_in"}
  delivery.pruned     -> payload {"removed": int, "names": [str]}
  dine_in.pruned      -> payload {"removed": int, "names": [str]}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
CHECKLIST_COMPLETED = "checklist.completed"
CHECKLIST_RESET = "checklist.reset"
DELIVERY_BLOCKED = "delivery.blocked"
DELIVERY_PRUNED = "delivery.pruned"
DINE_IN_PRUNED = "dine_in.pruned"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except ValueError:
			pass

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				# A broken subscriber must not undo a store write that already happened
				logger.exception("Error delivering %s to %r", event_name, cb)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS',
	'CHECKLIST_COMPLETED', 'CHECKLIST_RESET', 'DELIVERY_BLOCKED', 'DELIVERY_PRUNED', 'DINE_IN_PRUNED'
]
