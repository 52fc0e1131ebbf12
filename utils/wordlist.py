"""
Word dictionary utilities.

The dictionary is an ordered list of {id, word} entries. Ids are what gets
persisted (snapshots, used-word history); words are looked up from them.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Union
import json
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DictionaryEntry:
    """A dictionary word and its stable id."""
    id: int
    word: str


def build_dictionary(words: Iterable[str], start_id: int = 1) -> list[DictionaryEntry]:
    """
    Number a plain word list.

    Args:
        words: Words in order (blank entries are skipped)
        start_id: Id given to the first word

    Returns:
        List of entries in uppercase
    """
    entries = []
    next_id = start_id
    for word in words:
        word = word.strip()
        if word:
            entries.append(DictionaryEntry(id=next_id, word=word.upper()))
            next_id += 1
    return entries


def build_lookup(entries: Iterable[DictionaryEntry]) -> dict[int, str]:
    """
    Build the id -> word lookup for a dictionary.

    Raises:
        ValueError: If an id appears twice
    """
    lookup: dict[int, str] = {}
    for entry in entries:
        if entry.id in lookup:
            raise ValueError(f"Duplicate dictionary id: {entry.id}")
        lookup[entry.id] = entry.word
    return lookup


def load_dictionary(filepath: Union[str, Path]) -> list[DictionaryEntry]:
    """
    Load a dictionary from file.

    JSON files must hold a list of {"id": int, "word": str} objects. Any other
    file is read as one word per line, numbered from 1.

    Args:
        filepath: Path to dictionary file

    Returns:
        List of entries (words uppercased)

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If a JSON file has the wrong shape or repeats an id
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Dictionary file not found: {filepath}")

    if path.suffix.lower() == ".json":
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
        if not isinstance(raw, list):
            raise ValueError(f"{filepath}: expected a JSON list of {{id, word}} objects")
        try:
            entries = [DictionaryEntry(id=int(item["id"]), word=str(item["word"]).strip().upper()) for item in raw]
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"{filepath}: invalid dictionary entry ({exc})") from exc
    else:
        with open(path, "r", encoding="utf-8") as f:
            entries = build_dictionary(f)

    build_lookup(entries)
    logger.debug(f"Loaded {len(entries)} words from {filepath}")
    return entries


DEFAULT_WORDS = [
    "ACORN", "ANCHOR", "ANTHEM", "APRON", "ARCADE", "ARROW", "ATLAS", "AVALANCHE",
    "BADGE", "BALLOON", "BAMBOO", "BANJO", "BARREL", "BEACON", "BEETLE", "BISCUIT",
    "BLIZZARD", "BONFIRE", "BRACELET", "BRIDGE", "BROOM", "BUBBLE", "BUCKET", "CACTUS",
    "CAMERA", "CANDLE", "CANNON", "CANYON", "CARPET", "CASTLE", "CAVE", "CHAMPION",
    "CHIMNEY", "CIRCUS", "CLOCK", "COMET", "COMPASS", "CORAL", "CRATER", "CROWN",
    "CRYSTAL", "CURTAIN", "DAGGER", "DESERT", "DIAMOND", "DOLPHIN", "DRAGON", "DRUM",
    "EAGLE", "ECHO", "ECLIPSE", "ENGINE", "FALCON", "FEATHER", "FERRY", "FIDDLE",
    "FLAG", "FOREST", "FOSSIL", "FOUNTAIN", "GALAXY", "GARDEN", "GEYSER", "GHOST",
    "GLACIER", "GLOVE", "HAMMER", "HARBOR", "HARP", "HELMET", "HONEY", "HORIZON",
    "ICEBERG", "ISLAND", "IVORY", "JACKET", "JUNGLE", "KETTLE", "KEY", "KNIGHT",
    "LADDER", "LANTERN", "LASER", "LEMON", "LIBRARY", "LIGHTHOUSE", "LION", "MAGNET",
    "MAPLE", "MARBLE", "MASK", "MEADOW", "MERMAID", "METEOR", "MIRROR", "MONSOON",
    "MOUNTAIN", "MUSEUM", "NEEDLE", "NEST", "OASIS", "OCTOPUS", "ORBIT", "ORCHARD",
    "PALACE", "PARACHUTE", "PEARL", "PENGUIN", "PEPPER", "PIANO", "PILOT", "PIRATE",
    "PLANET", "PRISM", "PUZZLE", "PYRAMID", "QUARTZ", "RADAR", "RAINBOW", "RAVEN",
    "RIBBON", "ROBOT", "ROCKET", "SADDLE", "SAPPHIRE", "SCARF", "SCROLL", "SHADOW",
    "SHIELD", "SILK", "SKELETON", "SPIDER", "STATUE", "SUBMARINE", "SWORD", "TELESCOPE",
    "TEMPLE", "THUNDER", "TIGER", "TORNADO", "TORCH", "TOWER", "TRUMPET", "TUNNEL",
    "UMBRELLA", "VALLEY", "VELVET", "VOLCANO", "WAGON", "WALRUS", "WHISTLE", "WINDMILL",
]

DEFAULT_DICTIONARY = build_dictionary(DEFAULT_WORDS)
