"""Staggered day-by-day reveal of an already generated menu.

The menu is computed synchronously before the reveal starts; timers only decide
when each day is announced on the event bus. Starting a new reveal cancels the
previous one (last writer wins): its pending timers are cancelled and any of its
callbacks already running are ignored because their token is stale.
"""
import logging
import threading
from typing import Callable, List

from weekmenu.domain.Menu import WeeklyMenu
from weekmenu.events.Event_Bus import EventBus, GLOBAL_EVENT_BUS
from weekmenu.events.event_helpers import publish_day_revealed, publish_reveal_complete
from weekmenu.utilities.config import REVEAL_DELAY_SECONDS

logger = logging.getLogger(__name__)


class RevealScheduler:
    def __init__(self, delay: float = REVEAL_DELAY_SECONDS, bus: EventBus = GLOBAL_EVENT_BUS,
                 timer_factory: Callable = threading.Timer):
        self.delay = delay
        self.bus = bus
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._token = 0
        self._timers: List = []

    @property
    def token(self) -> int:
        return self._token

    @property
    def pending(self) -> int:
        with self._lock:
            return len(self._timers)

    def start(self, menu: WeeklyMenu) -> int:
        """Schedule one reveal per day, delay seconds apart. Returns the reveal token."""
        with self._lock:
            self._cancel_locked()
            token = self._token
            days = [d.to_dict() for d in menu.days]
            for index, day in enumerate(days):
                timer = self._timer_factory(
                    self.delay * index, self._reveal, args=(token, menu.id, index, day, len(days))
                )
                timer.daemon = True
                self._timers.append(timer)
            timers = list(self._timers)
        for timer in timers:
            timer.start()
        logger.info(f"Reveal {token} scheduled for menu {menu.id} ({len(timers)} days)")
        return token

    def cancel(self) -> None:
        with self._lock:
            self._cancel_locked()

    def _cancel_locked(self) -> None:
        for timer in self._timers:
            timer.cancel()
        self._timers = []
        self._token += 1

    def _reveal(self, token: int, menu_id: str, index: int, day: dict, total: int) -> None:
        last = index == total - 1
        with self._lock:
            if token != self._token:
                logger.debug(f"Dropping stale reveal {token} (current {self._token})")
                return
            if last:
                self._timers = []
        # Published outside the lock so subscribers may start or cancel reveals
        publish_day_revealed(self.bus, menu_id, token, index, day)
        if last:
            publish_reveal_complete(self.bus, menu_id, token)
