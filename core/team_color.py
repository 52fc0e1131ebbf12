"""
Card and team colours for Codenames.

TeamColor is an IntEnum so colours can be stored directly in integer tensors
on the board. All per-colour lookups (wire code, emoji, label) are tables keyed
by member and checked for completeness at import time.
"""

from __future__ import annotations

from enum import IntEnum


class TeamColor(IntEnum):
    """
    Type of a card on the board.

    RED, BLUE and GREEN are team colours (GREEN only exists in 3-team games),
    NEUTRAL cards belong to nobody and revealing the ASSASSIN ends the game.
    """

    RED = 0
    BLUE = 1
    NEUTRAL = 2
    ASSASSIN = 3
    GREEN = 4

    @property
    def code(self) -> str:
        """Single-letter code used in persisted snapshots."""
        return _CODES[self]

    @property
    def emoji(self) -> str:
        """Emoji used when printing the key grid."""
        return _EMOJI[self]

    @property
    def label(self) -> str:
        """Human-readable colour name ("Blue", "Red", ...)."""
        return self.name.capitalize()

    @classmethod
    def from_code(cls, code: str) -> TeamColor:
        """
        Look up a colour by its snapshot code.

        Args:
            code: Single-letter code ("R", "B", "G", "N" or "A")

        Returns:
            Matching TeamColor

        Raises:
            ValueError: If the code is unknown
        """
        try:
            return _FROM_CODE[code]
        except KeyError:
            raise ValueError(f"Unknown card code: {code!r}") from None

    @classmethod
    def from_name(cls, name: str) -> TeamColor:
        """Look up a colour by case-insensitive name ("blue", "RED", ...)."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown colour: {name!r}") from None


_CODES = {
    TeamColor.RED: "R",
    TeamColor.BLUE: "B",
    TeamColor.GREEN: "G",
    TeamColor.NEUTRAL: "N",
    TeamColor.ASSASSIN: "A",
}

_EMOJI = {
    TeamColor.RED: "\N{LARGE RED CIRCLE}",
    TeamColor.BLUE: "\N{LARGE BLUE CIRCLE}",
    TeamColor.GREEN: "\N{LARGE GREEN CIRCLE}",
    TeamColor.NEUTRAL: "\N{LARGE YELLOW CIRCLE}",
    TeamColor.ASSASSIN: "\N{MEDIUM BLACK CIRCLE}",
}

# Turn order; two-team games use the first two entries
_TURN_ORDER = (TeamColor.BLUE, TeamColor.RED, TeamColor.GREEN)

for _table in (_CODES, _EMOJI):
    assert set(_table) == set(TeamColor), "colour table is missing a member"

_FROM_CODE = {code: color for color, code in _CODES.items()}


def active_teams(team_count: int) -> tuple[TeamColor, ...]:
    """
    Get the playing teams for a team count, in turn order.

    Args:
        team_count: 2 or 3

    Returns:
        (BLUE, RED) or (BLUE, RED, GREEN)

    Raises:
        ValueError: If team_count is not 2 or 3
    """
    if team_count not in (2, 3):
        raise ValueError(f"team_count must be 2 or 3, got {team_count}")
    return _TURN_ORDER[:team_count]


def next_team(current: TeamColor, team_count: int) -> TeamColor:
    """
    Team that plays after `current`.

    Two teams alternate BLUE <-> RED; three teams cycle BLUE -> RED -> GREEN.

    Raises:
        ValueError: If `current` is not an active team for team_count
    """
    teams = active_teams(team_count)
    if current not in teams:
        raise ValueError(f"{current.label} is not playing in a {team_count}-team game")
    return teams[(teams.index(current) + 1) % len(teams)]
