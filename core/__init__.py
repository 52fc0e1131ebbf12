"""
Core game logic for Codenames.

This module provides the single-board game engine: colours, board generation,
the turn/reveal state machine and snapshot persistence.
"""

from core.team_color import TeamColor, active_teams, next_team
from core.config import GameConfig
from core.errors import GameDataError, DecodeFailure, MalformedSnapshot, NoActiveGame
from core.codec import XorCodec
from core.board import Board, Card
from core.word_bank import WordBankTracker
from core.board_generator import BoardGenerator
from core.leader_view import LeaderView
from core.snapshot import PersistedSnapshot, SnapshotStore
from core.game_state import GameState, GamePhase, GameOutcome, RevealResult

__all__ = [
    "TeamColor",
    "active_teams",
    "next_team",
    "GameConfig",
    "GameDataError",
    "DecodeFailure",
    "MalformedSnapshot",
    "NoActiveGame",
    "XorCodec",
    "Board",
    "Card",
    "WordBankTracker",
    "BoardGenerator",
    "LeaderView",
    "PersistedSnapshot",
    "SnapshotStore",
    "GameState",
    "GamePhase",
    "GameOutcome",
    "RevealResult",
]
