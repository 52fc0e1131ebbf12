"""
Utility functions and constants for Codenames.
"""

from utils.wordlist import (
    DictionaryEntry,
    build_dictionary,
    build_lookup,
    load_dictionary,
    DEFAULT_DICTIONARY,
)
from utils.storage import KeyValueStore, MemoryStore, FileStore

__all__ = [
    "DictionaryEntry",
    "build_dictionary",
    "build_lookup",
    "load_dictionary",
    "DEFAULT_DICTIONARY",
    "KeyValueStore",
    "MemoryStore",
    "FileStore",
]
