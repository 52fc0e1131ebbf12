"""
Persisted snapshots of a game and the store that reads and writes them.

A PersistedSnapshot is the only representation that crosses the codec
boundary: card ids with single-letter colour codes and revealed flags, plus
turn, terminal flag, team count and turn-pass rule. The same encoded value
is kept in durable storage and handed out as a share token.

Wire format (JSON before encoding):

    {"board": [{"id": 12, "type": "B", "revealed": false}, ...25 entries],
     "turn": "blue", "terminated": false, "numTeams": 2, "turnPassRule": true}
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Literal, Mapping, Optional
from urllib.parse import parse_qs, quote, urlsplit
import logging

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from core.board import Board
from core.board_generator import THREE_TEAM_COUNTS, TWO_TEAM_COUNTS
from core.codec import XorCodec
from core.config import BOARD_SIZE, GAME_STATE_KEY, SHARE_QUERY_PARAM, GameConfig
from core.errors import DecodeFailure, MalformedSnapshot, NoActiveGame
from core.leader_view import LeaderView
from core.team_color import TeamColor, active_teams
from utils.storage import KeyValueStore
from utils.wordlist import DictionaryEntry
from views.word_view import WordView

logger = logging.getLogger(__name__)


class SnapshotCard(BaseModel):
    """One board entry: dictionary id, colour code, revealed flag."""
    model_config = ConfigDict(extra="ignore")

    id: int
    type: Literal["R", "B", "G", "N", "A"]
    revealed: bool = False


class PersistedSnapshot(BaseModel):
    """
    Durable and shareable projection of a game.

    Missing optional fields fall back to a blue turn, an unfinished two-team
    game and the turn-pass rule switched on.
    """
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    board: list[SnapshotCard] = Field(min_length=BOARD_SIZE, max_length=BOARD_SIZE)
    turn: Literal["blue", "red", "green"] = "blue"
    terminated: bool = False
    num_teams: Literal[2, 3] = Field(2, alias="numTeams")
    turn_pass_rule: bool = Field(True, alias="turnPassRule")

    @model_validator(mode="after")
    def check_teams(self) -> PersistedSnapshot:
        teams = active_teams(self.num_teams)
        if TeamColor.from_name(self.turn) not in teams:
            raise ValueError(f"turn {self.turn!r} is not playing in a {self.num_teams}-team game")
        if self.num_teams == 2 and any(c.type == TeamColor.GREEN.code for c in self.board):
            raise ValueError("green cards on a two-team board")
        ids = [c.id for c in self.board]
        if len(set(ids)) != len(ids):
            raise ValueError("card ids repeat on the board")

        counts = Counter(c.type for c in self.board)
        assassins = counts[TeamColor.ASSASSIN.code]
        if assassins != 1:
            raise ValueError(f"expected one assassin, found {assassins}")

        team_counts = sorted((counts[t.code] for t in teams), reverse=True)
        if self.num_teams == 2:
            first, second, neutral, _ = TWO_TEAM_COUNTS
            expected_teams, expected_neutral = [first, second], neutral
        else:
            per_team, _ = THREE_TEAM_COUNTS
            expected_teams, expected_neutral = [per_team] * 3, 0
        if team_counts != expected_teams or counts[TeamColor.NEUTRAL.code] != expected_neutral:
            raise ValueError(
                f"colour counts {dict(counts)} do not match a {self.num_teams}-team board"
            )
        return self

    @classmethod
    def from_game(
        cls,
        board: Board,
        current_team: TeamColor,
        config: GameConfig,
        finished: bool
    ) -> PersistedSnapshot:
        """Project live game state into a snapshot."""
        return cls(
            board=[
                SnapshotCard(id=card.id, type=card.type.code, revealed=card.revealed)
                for card in board.cards()
            ],
            turn=current_team.name.lower(),
            terminated=finished,
            num_teams=config.team_count,
            turn_pass_rule=config.turn_pass_on_miss,
        )

    @classmethod
    def parse(cls, text: str) -> PersistedSnapshot:
        """
        Validate snapshot JSON.

        Raises:
            MalformedSnapshot: If the text is not JSON or has the wrong shape
        """
        try:
            return cls.model_validate_json(text)
        except ValidationError as exc:
            raise MalformedSnapshot(f"Invalid snapshot: {exc.error_count()} error(s)\n{exc}") from exc

    def to_json(self) -> str:
        """Canonical compact JSON."""
        return self.model_dump_json(by_alias=True)

    @property
    def current_team(self) -> TeamColor:
        return TeamColor.from_name(self.turn)

    @property
    def config(self) -> GameConfig:
        return GameConfig(team_count=self.num_teams, turn_pass_on_miss=self.turn_pass_rule)

    def to_board(self, lookup: Mapping[int, str], reveal_all: bool = False) -> Board:
        """
        Rebuild a board, looking words up by id.

        Args:
            lookup: Dictionary id -> word
            reveal_all: Mark every card revealed regardless of stored flags

        Raises:
            MalformedSnapshot: If a card id is not in the dictionary
        """
        missing = [c.id for c in self.board if c.id not in lookup]
        if missing:
            raise MalformedSnapshot(f"Unknown word ids in snapshot: {missing}")

        word_view = WordView([DictionaryEntry(id=c.id, word=lookup[c.id]) for c in self.board])
        colors = [TeamColor.from_code(c.type) for c in self.board]
        board = Board(word_view, colors, [c.revealed for c in self.board])
        if reveal_all:
            board.reveal_all()
        return board


@dataclass
class SavedGame:
    """Game restored from durable storage."""
    board: Board
    current_team: TeamColor
    config: GameConfig
    finished: bool


class SnapshotStore:
    """
    Reads and writes encoded snapshots.

    Attributes:
        storage: Durable key/value store
        lookup: Dictionary id -> word, used to rebuild boards
        codec: Token codec
        key: Storage key of the current game
    """

    def __init__(
        self,
        storage: KeyValueStore,
        lookup: Mapping[int, str],
        codec: Optional[XorCodec] = None,
        key: str = GAME_STATE_KEY
    ):
        self.storage = storage
        self.lookup = lookup
        self.codec = codec or XorCodec()
        self.key = key

    def export_token(self, snapshot: PersistedSnapshot) -> str:
        """Encode a snapshot into a shareable token."""
        return self.codec.encode(snapshot.to_json())

    def parse_token(self, token: str) -> PersistedSnapshot:
        """
        Decode and validate a token.

        Raises:
            DecodeFailure: If the token is not codec output
            MalformedSnapshot: If it decodes to an invalid snapshot
        """
        return PersistedSnapshot.parse(self.codec.decode(token))

    def save(self, snapshot: PersistedSnapshot) -> None:
        """Encode a snapshot and write it to storage."""
        self.storage.set(self.key, self.export_token(snapshot))
        logger.info("Game saved")

    def load(self) -> Optional[SavedGame]:
        """
        Restore the stored game.

        Returns:
            SavedGame, or None when nothing is stored. A stored value that
            fails to decode or validate is logged, removed and reported as
            None.
        """
        token = self.storage.get(self.key)
        if not token:
            return None

        try:
            snapshot = self.parse_token(token)
            board = snapshot.to_board(self.lookup)
        except (DecodeFailure, MalformedSnapshot) as exc:
            logger.warning(f"Discarding corrupted saved game: {exc}")
            self.clear()
            return None

        return SavedGame(
            board=board,
            current_team=snapshot.current_team,
            config=snapshot.config,
            finished=snapshot.terminated,
        )

    def clear(self) -> None:
        """Remove the stored game."""
        self.storage.remove(self.key)
        logger.info("Saved game cleared")

    def read_token(self) -> str:
        """
        Get the stored token as-is, for sharing.

        Raises:
            NoActiveGame: If no game is stored
        """
        token = self.storage.get(self.key)
        if not token:
            raise NoActiveGame("No game in progress to share")
        return token

    def import_token(self, token: str) -> LeaderView:
        """
        Build the spy-leader view from a shared token.

        Local storage is neither read nor written.

        Raises:
            DecodeFailure: If the token is not codec output
            MalformedSnapshot: If it decodes to an invalid snapshot
        """
        snapshot = self.parse_token(token)
        return LeaderView(
            board=snapshot.to_board(self.lookup, reveal_all=True),
            team_count=snapshot.num_teams,
            turn_pass_on_miss=snapshot.turn_pass_rule,
        )


def build_share_link(base_url: str, token: str) -> str:
    """
    Link carrying a token as its query parameter.

    Args:
        base_url: Address of the leader view (without query string)
        token: Encoded snapshot
    """
    separator = "&" if "?" in base_url else "?"
    return f"{base_url}{separator}{SHARE_QUERY_PARAM}={quote(token, safe='')}"


def extract_token(text: str) -> str:
    """
    Pull a token out of a share link, or return a bare token unchanged.

    Args:
        text: Share link or token
    """
    text = text.strip()
    if "://" not in text and not text.startswith("?"):
        return text

    query = urlsplit(text).query if "://" in text else text[1:]
    values = parse_qs(query).get(SHARE_QUERY_PARAM)
    if not values:
        raise DecodeFailure(f"Link has no '{SHARE_QUERY_PARAM}' parameter")
    # Base64 never contains spaces; a raw "+" in a pasted link decodes to one
    return values[0].replace(" ", "+")
