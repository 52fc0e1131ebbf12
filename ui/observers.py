"""
Display collaborators for the game engine.

The engine calls an observer after every action; observers own all rendering.
ConsoleObserver draws the board as text, RecordingObserver keeps the calls for
inspection.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, TextIO
import logging
import sys

from core.board import Card
from core.config import GRID_WIDTH
from core.leader_view import LeaderView
from core.team_color import TeamColor

logger = logging.getLogger(__name__)


class GameObserver(ABC):
    """
    Abstract base class for game displays.

    Observers receive callbacks from the engine:
    - on_board: Board redrawn after a change
    - on_scores: Remaining cards per team
    - on_turn: Current turn, or the end-of-game announcement
    - on_key: Secret key grid for the spy leader (optional)
    - on_leader_view: Full key decoded from a share token (optional)
    """

    @abstractmethod
    def on_board(self, cards: list[Card], finished: bool) -> None:
        """
        Called when the board changes.

        Args:
            cards: All cards in display order
            finished: Whether the game is over (cards no longer clickable)
        """
        pass

    @abstractmethod
    def on_scores(self, remaining: dict[TeamColor, int], team_count: int) -> None:
        """
        Called after counts are recomputed.

        Args:
            remaining: Unrevealed cards per playing team
            team_count: 2 or 3
        """
        pass

    @abstractmethod
    def on_turn(self, current_team: TeamColor, finished: bool, end_message: Optional[str] = None) -> None:
        """
        Called when the turn changes or the game ends.

        Args:
            current_team: Team whose turn it is
            finished: Whether the game is over
            end_message: Announcement once finished
        """
        pass

    def on_key(self, key_grid: str) -> None:
        """Secret key grid, by default written to the log."""
        logger.info(f"\n--- SECRET KEY (SPY LEADER) ---\n{key_grid}\n-------------------------------")

    def on_leader_view(self, view: LeaderView) -> None:
        """Called when a share token was decoded (optional)."""
        pass


def format_scores(remaining: dict[TeamColor, int]) -> str:
    return " | ".join(f"{team.label} {team.emoji}: {count}" for team, count in remaining.items())


def format_board(cards: list[Card], width: int = GRID_WIDTH) -> str:
    """
    Text grid of the board.

    Hidden cards show their position so players can pick them; revealed
    cards show their colour instead.
    """
    cell_width = max((len(c.word) for c in cards), default=0) + 4
    lines = []
    for row_start in range(0, len(cards), width):
        cells = []
        for offset, card in enumerate(cards[row_start:row_start + width]):
            marker = card.type.emoji if card.revealed else f"{row_start + offset:2d}"
            cells.append(f"{marker} {card.word}".ljust(cell_width))
        lines.append(" ".join(cells).rstrip())
    return "\n".join(lines)


class ConsoleObserver(GameObserver):
    """
    Draws the game as text.

    Attributes:
        stream: Output stream (default stdout)
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout

    def _print(self, text: str = "") -> None:
        print(text, file=self.stream)

    def on_board(self, cards: list[Card], finished: bool) -> None:
        self._print(format_board(cards))
        self._print()

    def on_scores(self, remaining: dict[TeamColor, int], team_count: int) -> None:
        self._print(format_scores(remaining))

    def on_turn(self, current_team: TeamColor, finished: bool, end_message: Optional[str] = None) -> None:
        if finished:
            self._print(end_message or "Game over")
        else:
            self._print(f"Turn: {current_team.label} {current_team.emoji}")

    def on_key(self, key_grid: str) -> None:
        self._print("--- SECRET KEY (SPY LEADER) ---")
        self._print(key_grid)
        self._print()

    def on_leader_view(self, view: LeaderView) -> None:
        self._print("*** SPY LEADER MODE ***")
        self._print(format_scores(view.team_counts()))
        self._print(format_board(view.cards))
        self._print()
        self._print(view.key_grid())


class RecordingObserver(GameObserver):
    """
    Observer that stores every callback.

    Attributes:
        events: List of (callback name, payload dict) in call order
    """

    def __init__(self):
        self.events: list[tuple[str, dict[str, Any]]] = []

    def on_board(self, cards: list[Card], finished: bool) -> None:
        self.events.append(("board", {"cards": cards, "finished": finished}))

    def on_scores(self, remaining: dict[TeamColor, int], team_count: int) -> None:
        self.events.append(("scores", {"remaining": dict(remaining), "team_count": team_count}))

    def on_turn(self, current_team: TeamColor, finished: bool, end_message: Optional[str] = None) -> None:
        self.events.append(("turn", {"current_team": current_team, "finished": finished, "end_message": end_message}))

    def on_key(self, key_grid: str) -> None:
        self.events.append(("key", {"key_grid": key_grid}))

    def on_leader_view(self, view: LeaderView) -> None:
        self.events.append(("leader_view", {"view": view}))

    def last(self, name: str) -> Optional[dict[str, Any]]:
        """Payload of the most recent callback with this name."""
        for event_name, payload in reversed(self.events):
            if event_name == name:
                return payload
        return None

    def reset(self) -> None:
        self.events = []
