"""Event helper utilities.

Thin publishers for menu-related events. Every helper takes the bus explicitly
so tests can pass a private EventBus; production callers pass GLOBAL_EVENT_BUS.
"""
from __future__ import annotations
from typing import Any, Dict
from .Event_Bus import (
    EventBus, MENU_GENERATED, MENU_DAY_REVEALED, MENU_REVEAL_COMPLETE, HISTORY_APPENDED
)

__all__ = [
    'publish_menu_generated', 'publish_day_revealed', 'publish_reveal_complete',
    'publish_history_appended'
]


def publish_menu_generated(bus: EventBus, menu: Dict[str, Any]):
    """Publish a menu.generated event."""
    bus.publish(MENU_GENERATED, {'menu': menu})


def publish_day_revealed(bus: EventBus, menu_id: str, token: int, index: int, day: Dict[str, Any]):
    bus.publish(MENU_DAY_REVEALED, {
        'menu_id': menu_id,
        'token': token,
        'index': index,
        'day': day
    })


def publish_reveal_complete(bus: EventBus, menu_id: str, token: int):
    bus.publish(MENU_REVEAL_COMPLETE, {'menu_id': menu_id, 'token': token})


def publish_history_appended(bus: EventBus, menu_id: str, size: int):
    bus.publish(HISTORY_APPENDED, {'menu_id': menu_id, 'size': size})
