"""Simple Event Bus / Observer implementation for menu events.

Event names used so far:
  menu.generated -> payload {"menu": dict}
  menu.day_revealed -> payload {"menu_id": str, "token": int, "index": int, "day": dict}
  menu.reveal_complete -> payload {"menu_id": str, "token": int}
  history.appended -> payload {"menu_id": str, "size": int}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
MENU_GENERATED = "menu.generated"
MENU_DAY_REVEALED = "menu.day_revealed"
MENU_REVEAL_COMPLETE = "menu.reveal_complete"
HISTORY_APPENDED = "history.appended"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:  # one failing observer must not block the others
				logger.exception(f"Error delivering {event_name} to {cb}")


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS',
	'MENU_GENERATED', 'MENU_DAY_REVEALED', 'MENU_REVEAL_COMPLETE', 'HISTORY_APPENDED'
]
