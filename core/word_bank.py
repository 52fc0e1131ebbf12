"""
Tracking of dictionary words already used in previous games.

History is stored as a JSON list of {"id": int, "date": "YYYY-MM-DD"}, one
record per id. Recording an id again refreshes its date.
"""

from __future__ import annotations

from datetime import date
from typing import Callable, Iterable, Optional
import json
import logging

from core.config import USED_WORDS_KEY
from utils.storage import KeyValueStore

logger = logging.getLogger(__name__)


class WordBankTracker:
    """
    Used-word history backed by a key/value store.

    Attributes:
        storage: Durable store holding the history
        key: Storage key of the history
        today: Callable returning the current date
    """

    def __init__(
        self,
        storage: KeyValueStore,
        key: str = USED_WORDS_KEY,
        today: Optional[Callable[[], date]] = None
    ):
        self.storage = storage
        self.key = key
        self.today = today or date.today

    def records(self) -> dict[int, str]:
        """
        Get stored records.

        Returns:
            Mapping id -> ISO date it was last used. Missing or unreadable
            history yields an empty mapping.
        """
        raw = self.storage.get(self.key)
        if not raw:
            return {}

        try:
            items = json.loads(raw)
            return {int(item["id"]): str(item["date"]) for item in items}
        except (ValueError, TypeError, KeyError) as exc:
            logger.warning(f"Used-word history is unreadable, ignoring it: {exc}")
            return {}

    def load_used_ids(self) -> set[int]:
        """Get the set of ids drawn in previous games."""
        return set(self.records())

    def record_used(self, ids: Iterable[int]) -> None:
        """
        Merge ids into the history, dated today.

        Args:
            ids: Dictionary ids drawn for a new game
        """
        records = self.records()
        stamp = self.today().isoformat()
        for word_id in ids:
            records[int(word_id)] = stamp

        payload = [{"id": word_id, "date": day} for word_id, day in records.items()]
        self.storage.set(self.key, json.dumps(payload))

    def clear(self) -> None:
        """Forget every used word."""
        self.storage.remove(self.key)
        logger.info("Used-word history cleared")
