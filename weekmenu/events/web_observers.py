"""Web-facing observers for menu events.

This module subscribes to the GLOBAL_EVENT_BUS for the menu reveal and history
events and stores a lightweight in-memory ring buffer of recent events that the
web layer can poll to animate the day-by-day reveal.

Design:
  * Each event stored with an auto-increment integer id (cursor) so clients
    can request only newer events (since=<last_id_seen>).
  * Reveal timers fire on their own threads, so access is guarded by a Lock.
  * A MAX_EVENTS cap prevents unbounded memory growth.
"""
from __future__ import annotations
from typing import List, Dict, Any
from threading import Lock
from datetime import datetime, timezone

from .Event_Bus import (
    EventBus, GLOBAL_EVENT_BUS, MENU_GENERATED, MENU_DAY_REVEALED, MENU_REVEAL_COMPLETE, HISTORY_APPENDED
)

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
MAX_EVENTS = 300
_started = False

_WATCHED = (MENU_GENERATED, MENU_DAY_REVEALED, MENU_REVEAL_COMPLETE, HISTORY_APPENDED)


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    with _lock:
        evt = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat()
        }
        if isinstance(payload, dict):
            for k in ('menu_id', 'token', 'index', 'day', 'size'):
                if k in payload:
                    evt[k] = payload[k]
            if isinstance(payload.get('menu'), dict):
                evt['menu_id'] = payload['menu'].get('id')
        _events.append(evt)
        _next_id += 1
        # Trim buffer
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]


def start(bus: EventBus = GLOBAL_EVENT_BUS):
    """Idempotent start: subscribe observers once."""
    global _started
    if _started:
        return
    for name in _WATCHED:
        bus.subscribe(name, _record)
    _started = True


def get_events(since: int | None = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive).

    If since is None, returns every buffered event.
    Response includes next_cursor (largest id) so client can poll with since=next_cursor.
    """
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


def clear():
    with _lock:
        _events.clear()


__all__ = ['start', 'get_events', 'clear']
