"""
Player preferences and bulk cleanup of stored game data.

The turn-pass preference only seeds the rule of the next new game; a running
game carries its own rule inside the snapshot.
"""

from __future__ import annotations

import logging

from core.config import GAME_STATE_KEY, RULE_TURN_PASS_KEY, USED_WORDS_KEY
from utils.storage import KeyValueStore

logger = logging.getLogger(__name__)


def load_rule_preference(storage: KeyValueStore, default: bool = True) -> bool:
    """Preferred turn-pass-on-miss rule, or default when unset or unreadable."""
    value = storage.get(RULE_TURN_PASS_KEY)
    if value == "true":
        return True
    if value == "false":
        return False
    return default


def save_rule_preference(storage: KeyValueStore, turn_pass_on_miss: bool) -> None:
    storage.set(RULE_TURN_PASS_KEY, "true" if turn_pass_on_miss else "false")


def clear_all_game_data(storage: KeyValueStore) -> None:
    """Remove the saved game, the used-word history and the rule preference."""
    for key in (GAME_STATE_KEY, USED_WORDS_KEY, RULE_TURN_PASS_KEY):
        storage.remove(key)
    logger.info("All stored game data cleared")
