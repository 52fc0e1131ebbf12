"""
Spy-leader view of a shared board.

A LeaderView is rebuilt from a token on a second device. Every card is shown
revealed so the leader sees the whole key; it never touches the local game.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.board import Board, Card
from core.team_color import TeamColor, active_teams


@dataclass
class LeaderView:
    """
    Fully revealed board decoded from a token.

    Attributes:
        board: Board with every card revealed
        team_count: Number of playing teams
        turn_pass_on_miss: Rule the game was created with
    """
    board: Board
    team_count: int
    turn_pass_on_miss: bool

    @property
    def cards(self) -> list[Card]:
        return self.board.cards()

    def team_counts(self) -> dict[TeamColor, int]:
        """Cards per playing team on the full board."""
        return {team: self.board.count(team) for team in active_teams(self.team_count)}

    def key_grid(self) -> str:
        return self.board.key_grid()
