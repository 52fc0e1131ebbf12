"""
Word view for mapping board positions to dictionary entries.

This module provides the WordView class that translates between board
positions, dictionary ids and word strings.
"""

from __future__ import annotations

from typing import Optional, Sequence
import random

from utils.wordlist import DictionaryEntry


class WordView:
    """
    Maps board positions to dictionary entries.

    Provides bidirectional mapping between positions (0..N-1) and words.

    Attributes:
        entries: List of N dictionary entries (one per position)
        words: List of N uppercase word strings
        ids: List of N dictionary ids
        board_size: Number of positions (N)
    """

    def __init__(self, entries: Sequence[DictionaryEntry]):
        """
        Initialize word view.

        Args:
            entries: Dictionary entries in display order
        """
        self.entries = list(entries)
        self.words = [e.word.upper() for e in self.entries]
        self.ids = [e.id for e in self.entries]
        self.board_size = len(self.entries)

        # Create reverse mapping
        self._word_to_index = {w: i for i, w in enumerate(self.words)}

    def get_word(self, index: int) -> str:
        """
        Get word at a board position.

        Raises:
            IndexError: If index out of range
        """
        return self.words[index]

    def get_id(self, index: int) -> int:
        """Get dictionary id at a board position."""
        return self.ids[index]

    def get_index(self, word: str) -> int:
        """
        Get board position for a word.

        Args:
            word: Word string (case-insensitive)

        Returns:
            Board position

        Raises:
            ValueError: If word not found
        """
        word_upper = word.strip().upper()
        if word_upper not in self._word_to_index:
            raise ValueError(f"Word '{word}' not found on board")
        return self._word_to_index[word_upper]

    @staticmethod
    def create_random(
        pool: Sequence[DictionaryEntry],
        board_size: int = 25,
        seed: Optional[int] = None
    ) -> WordView:
        """
        Create a random word view by sampling a pool without replacement.

        Args:
            pool: Candidate dictionary entries
            board_size: Number of entries to sample
            seed: Random seed

        Returns:
            WordView instance

        Raises:
            ValueError: If pool too small
        """
        if len(pool) < board_size:
            raise ValueError(
                f"Word pool size {len(pool)} < board size {board_size}"
            )

        rng = random.Random(seed)
        entries = rng.sample(list(pool), board_size)

        return WordView(entries)
