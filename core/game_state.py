"""
Game state machine for a single Codenames board.

GameState owns the board, the current turn and the rules of one game. Every
action re-derives the remaining counts and terminal status, persists a
snapshot and notifies the attached observers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence
import logging

from core.board import Board, Card
from core.board_generator import BoardGenerator
from core.config import GameConfig
from core.errors import NoActiveGame
from core.snapshot import PersistedSnapshot, SnapshotStore
from core.team_color import TeamColor, active_teams, next_team
from core.word_bank import WordBankTracker
from utils.storage import KeyValueStore
from utils.wordlist import DictionaryEntry, build_lookup

logger = logging.getLogger(__name__)

GAME_OVER_MESSAGE = "GAME OVER!"


class GamePhase(Enum):
    UNINITIALIZED = "uninitialized"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


@dataclass(frozen=True)
class GameOutcome:
    """
    How a finished game ended.

    Attributes:
        winners: Winning team(s)
        loser: Team that revealed the assassin, if any
        assassinated: Whether the assassin ended the game
        message: Announcement text
    """
    winners: tuple[TeamColor, ...]
    loser: Optional[TeamColor]
    assassinated: bool
    message: str


@dataclass(frozen=True)
class RevealResult:
    """
    Result of a reveal action.

    Attributes:
        index: Board position targeted
        applied: False when the action was ignored (game over or card
            already revealed)
        card_type: Colour of the card (None when not applied)
        just_finished: Whether this reveal ended the game
        must_advance_turn: Whether the miss passed the turn
        end_message: Announcement when the game ended
    """
    index: int
    applied: bool
    card_type: Optional[TeamColor] = None
    just_finished: bool = False
    must_advance_turn: bool = False
    end_message: Optional[str] = None


def _team_text(team: TeamColor) -> str:
    return f"{team.label} {team.emoji}"


def evaluate_outcome(board: Board, current_team: TeamColor, team_count: int) -> Optional[GameOutcome]:
    """
    Decide whether a board is finished and who won.

    The assassin is checked first: the team whose turn it is loses and every
    other playing team wins. Otherwise the first team (blue, red, green) with
    no unrevealed cards left wins, even if an opponent uncovered its last card.

    Args:
        board: Board after the latest reveal
        current_team: Team whose turn it is
        team_count: 2 or 3

    Returns:
        GameOutcome, or None while the game goes on
    """
    teams = active_teams(team_count)

    if board.is_assassin_revealed():
        winners = tuple(t for t in teams if t != current_team)
        if team_count == 2:
            winner_text = _team_text(winners[0])
        else:
            winner_text = "Remaining teams: " + " and ".join(t.emoji for t in winners)
        return GameOutcome(
            winners=winners,
            loser=current_team,
            assassinated=True,
            message=f"GAME OVER! ASSASSINATED. Winners: {winner_text}",
        )

    for team in teams:
        if board.remaining(team) == 0:
            return GameOutcome(
                winners=(team,),
                loser=None,
                assassinated=False,
                message=f"{team.label.upper()} VICTORY! \N{TROPHY}",
            )
    return None


class GameState:
    """
    Single-game Codenames engine.

    Attributes:
        board: Current board (None before a game starts or is loaded)
        current_team: Team whose turn it is
        config: Rules of the current game
        finished: Whether the game is over (never reverts)
        outcome: How the game ended, once finished
        store: Snapshot store used for persistence
        generator: Board generator for new games
        observers: Display collaborators notified after each action
    """

    def __init__(
        self,
        dictionary: Sequence[DictionaryEntry],
        storage: KeyValueStore,
        observers: Optional[Iterable] = None,
        seed: Optional[int] = None
    ):
        """
        Initialize game engine.

        Args:
            dictionary: Word dictionary ({id, word} entries)
            storage: Durable store for the snapshot and used-word history
            observers: GameObserver instances to notify
            seed: Random seed for board generation
        """
        self.dictionary = list(dictionary)
        self.lookup = build_lookup(self.dictionary)
        self.word_bank = WordBankTracker(storage)
        self.generator = BoardGenerator(self.dictionary, self.word_bank, seed=seed)
        self.store = SnapshotStore(storage, self.lookup)
        self.observers = list(observers or [])

        self.board: Optional[Board] = None
        self.current_team = TeamColor.BLUE
        self.config = GameConfig()
        self.finished = False
        self.outcome: Optional[GameOutcome] = None
        self._remaining: dict[TeamColor, int] = {}

    @property
    def phase(self) -> GamePhase:
        if self.board is None:
            return GamePhase.UNINITIALIZED
        if self.finished:
            return GamePhase.FINISHED
        return GamePhase.IN_PROGRESS

    @property
    def team_count(self) -> int:
        return self.config.team_count

    @property
    def end_message(self) -> Optional[str]:
        return self.outcome.message if self.outcome is not None else None

    def start_new_game(self, starting_team: TeamColor, config: Optional[GameConfig] = None) -> None:
        """
        Start a new game on a freshly generated board.

        Args:
            starting_team: Team that plays first (gets 9 cards with two teams)
            config: Rules for the game (default two teams, turn passes on miss)

        Raises:
            ValueError: If starting_team is not playing under config
        """
        config = config or GameConfig()
        board = self.generator.generate(starting_team, config.team_count)

        self.store.clear()
        self.board = board
        self.current_team = starting_team
        self.config = config
        self.finished = False
        self.outcome = None

        logger.info(
            f"New {config.team_count}-team game, {starting_team.label} starts, "
            f"turn passes on miss: {config.turn_pass_on_miss}"
        )
        self._recalculate()
        self._notify_turn()
        self._notify_board()
        self._notify_key()

    def load_saved_game(self) -> bool:
        """
        Restore the game kept in durable storage.

        Returns:
            True if a game was loaded. Missing or corrupted data leaves the
            engine uninitialized and returns False.
        """
        saved = self.store.load()
        if saved is None:
            return False

        self.board = saved.board
        self.current_team = saved.current_team
        self.config = saved.config
        self.finished = saved.finished
        self.outcome = None

        self._recalculate()
        if self.finished and self.outcome is None:
            # Stored as terminated without a winning condition on the board
            self.outcome = GameOutcome(winners=(), loser=None, assassinated=False, message=GAME_OVER_MESSAGE)
        self._notify_turn()
        self._notify_board()
        self._notify_key()
        return True

    def reveal_card(self, index: int) -> RevealResult:
        """
        Reveal the card at a board position.

        Ignored when the game is not in progress or the card is already
        revealed. Revealing the assassin ends the game; revealing another
        colour passes the turn when turn_pass_on_miss is set; revealing a
        team's last card ends the game.

        Args:
            index: Board position (0..24)

        Returns:
            RevealResult describing the effect

        Raises:
            IndexError: If index is out of range
        """
        if self.phase != GamePhase.IN_PROGRESS:
            return RevealResult(index=index, applied=False)
        if not 0 <= index < self.board.size:
            raise IndexError(f"Card index {index} out of range 0..{self.board.size - 1}")
        if self.board.is_revealed(index):
            return RevealResult(index=index, applied=False)

        card_type = self.board.reveal(index)
        must_advance = False
        if card_type == TeamColor.ASSASSIN:
            self.finished = True
        elif card_type != self.current_team and self.config.turn_pass_on_miss:
            must_advance = True

        logger.info(
            f"{self.current_team.label} revealed {self.board.word_view.get_word(index)} "
            f"({card_type.label})"
        )
        self._recalculate()
        self._notify_board()

        just_finished = self.finished
        if just_finished:
            self._notify_turn()
        elif must_advance:
            self.pass_turn()

        return RevealResult(
            index=index,
            applied=True,
            card_type=card_type,
            just_finished=just_finished,
            must_advance_turn=must_advance and not just_finished,
            end_message=self.end_message,
        )

    def pass_turn(self) -> None:
        """Hand the turn to the next team. Ignored unless a game is in progress."""
        if self.phase != GamePhase.IN_PROGRESS:
            return

        self.current_team = next_team(self.current_team, self.team_count)
        self._persist()
        self._notify_turn()
        logger.info(f"Turn passed, now playing: {self.current_team.label}")

    def reset(self) -> None:
        """Discard the current game and its saved snapshot."""
        self.store.clear()
        self.board = None
        self.finished = False
        self.outcome = None
        self._remaining = {}

    def remaining_counts(self) -> dict[TeamColor, int]:
        """Unrevealed cards per playing team."""
        return dict(self._remaining)

    def cards(self) -> list[Card]:
        if self.board is None:
            return []
        return self.board.cards()

    def key_grid(self) -> str:
        """
        Emoji grid of the secret key.

        Raises:
            NoActiveGame: If there is no board
        """
        if self.board is None:
            raise NoActiveGame("No game loaded")
        return self.board.key_grid()

    def to_snapshot(self) -> PersistedSnapshot:
        """
        Project the current game for persistence or sharing.

        Raises:
            NoActiveGame: If there is no board
        """
        if self.board is None:
            raise NoActiveGame("No game loaded")
        return PersistedSnapshot.from_game(self.board, self.current_team, self.config, self.finished)

    def export_token(self) -> str:
        """
        Token for the spy-leader view of the current game.

        Raises:
            NoActiveGame: If no game is in progress
        """
        if self.phase != GamePhase.IN_PROGRESS:
            raise NoActiveGame("No game in progress to share")
        return self.store.export_token(self.to_snapshot())

    def _recalculate(self) -> None:
        """Recompute counts and terminal status, then persist."""
        self._remaining = {
            team: self.board.remaining(team) for team in active_teams(self.team_count)
        }

        outcome = evaluate_outcome(self.board, self.current_team, self.team_count)
        if outcome is not None:
            self.finished = True
            if self.outcome is None:
                self.outcome = outcome
                logger.info(outcome.message)

        self._persist()
        for observer in self.observers:
            observer.on_scores(self.remaining_counts(), self.team_count)

    def _persist(self) -> None:
        # A finished game is never left in storage
        if self.finished:
            self.store.clear()
        else:
            self.store.save(self.to_snapshot())

    def _notify_turn(self) -> None:
        for observer in self.observers:
            observer.on_turn(self.current_team, self.finished, self.end_message)

    def _notify_board(self) -> None:
        cards = self.cards()
        for observer in self.observers:
            observer.on_board(cards, self.finished)

    def _notify_key(self) -> None:
        grid = self.key_grid()
        for observer in self.observers:
            observer.on_key(grid)
