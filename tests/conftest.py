"""
Pytest configuration for the Codenames board.

Points the default data directory at a throwaway location so no test writes
into the user's home directory, and provides shared fixtures.
"""

import os
import tempfile

import pytest

# Keep CLI runs without --data-dir away from ~/.codenames_board
os.environ.setdefault("CODENAMES_BOARD_DATA_DIR", tempfile.mkdtemp(prefix="codenames-board-tests-"))

from utils.storage import MemoryStore  # noqa: E402
from utils.wordlist import build_dictionary  # noqa: E402


@pytest.fixture
def dictionary():
    """Sixty numbered words, ids 1..60."""
    return build_dictionary(f"word{i}" for i in range(1, 61))


@pytest.fixture
def storage():
    return MemoryStore()
