"""Menu history: append-only, newest-first log of finalized weekly menus."""
import logging
from typing import List, Optional

from weekmenu.domain.Menu import WeeklyMenu
from weekmenu.infra.Key_Value_Store import KeyValueStore
from weekmenu.utilities.config import HISTORY_LIMIT
from weekmenu.utilities.constants import HISTORY_KEY

logger = logging.getLogger(__name__)


class HistoryRepository:
    def __init__(self, store: KeyValueStore, limit: int = HISTORY_LIMIT):
        self.store = store
        self.limit = limit

    def list(self) -> List[WeeklyMenu]:
        """Stored menus, newest first. Entries that are not a valid seven-day week are dropped."""
        data = self.store.get(HISTORY_KEY, [])
        if not isinstance(data, list):
            return []
        history: List[WeeklyMenu] = []
        for entry in data:
            if not isinstance(entry, dict):
                continue
            menu = WeeklyMenu.from_dict(entry)
            try:
                menu.validate()
            except ValueError as e:
                logger.warning(f"Dropping malformed history entry {menu.id}: {e}")
                continue
            history.append(menu)
        return history

    def get(self, menu_id: str) -> Optional[WeeklyMenu]:
        for menu in self.list():
            if menu.id == menu_id:
                return menu
        return None

    def add(self, menu: WeeklyMenu) -> WeeklyMenu:
        """Append a snapshot of menu. Raises ValueError on a malformed week."""
        snapshot = menu.copy().validate()
        history = self.list()
        history.insert(0, snapshot)
        self.store.put(HISTORY_KEY, [m.to_dict() for m in history[:self.limit]])
        return snapshot

    def clear(self) -> None:
        self.store.put(HISTORY_KEY, [])
