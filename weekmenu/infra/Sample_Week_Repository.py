"""Sample week repository: newest-first list capped at SAMPLE_WEEK_LIMIT entries."""
import logging
from typing import List

from weekmenu.domain.SampleWeek import SampleWeek
from weekmenu.infra.Key_Value_Store import KeyValueStore
from weekmenu.utilities.config import SAMPLE_WEEK_LIMIT
from weekmenu.utilities.constants import SAMPLE_WEEKS_KEY

logger = logging.getLogger(__name__)


class SampleWeekRepository:
    def __init__(self, store: KeyValueStore, limit: int = SAMPLE_WEEK_LIMIT):
        self.store = store
        self.limit = limit

    def list(self) -> List[SampleWeek]:
        data = self.store.get(SAMPLE_WEEKS_KEY, [])
        if not isinstance(data, list):
            return []
        return [SampleWeek.from_dict(entry) for entry in data if isinstance(entry, dict)]

    def add(self, sample: SampleWeek) -> SampleWeek:
        sample.validate()
        samples = self.list()
        samples.insert(0, sample)
        evicted = samples[self.limit:]
        if evicted:
            logger.info(f"Sample week cap reached; evicting {len(evicted)} oldest")
        self.store.put(SAMPLE_WEEKS_KEY, [s.to_dict() for s in samples[:self.limit]])
        return sample

    def delete(self, sample_id: str) -> bool:
        samples = self.list()
        remaining = [s for s in samples if s.id != sample_id]
        self.store.put(SAMPLE_WEEKS_KEY, [s.to_dict() for s in remaining])
        return len(remaining) != len(samples)
