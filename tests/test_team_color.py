"""
Tests for core.team_color module.
"""

import pytest

from core.team_color import TeamColor, active_teams, next_team


def test_codes_round_trip():
    """Every colour maps to a unique code and back."""
    codes = {color.code for color in TeamColor}
    assert len(codes) == len(TeamColor)

    for color in TeamColor:
        assert TeamColor.from_code(color.code) is color


def test_known_codes():
    """Codes used in snapshots."""
    assert TeamColor.RED.code == "R"
    assert TeamColor.BLUE.code == "B"
    assert TeamColor.GREEN.code == "G"
    assert TeamColor.NEUTRAL.code == "N"
    assert TeamColor.ASSASSIN.code == "A"


def test_unknown_code():
    """Unknown codes are rejected."""
    with pytest.raises(ValueError):
        TeamColor.from_code("X")


def test_from_name():
    """Names are case-insensitive."""
    assert TeamColor.from_name("blue") is TeamColor.BLUE
    assert TeamColor.from_name(" Green ") is TeamColor.GREEN

    with pytest.raises(ValueError):
        TeamColor.from_name("purple")


def test_every_colour_has_emoji():
    """Emoji lookup covers every member."""
    emoji = [color.emoji for color in TeamColor]
    assert len(set(emoji)) == len(TeamColor)


def test_active_teams():
    """Playing teams in turn order."""
    assert active_teams(2) == (TeamColor.BLUE, TeamColor.RED)
    assert active_teams(3) == (TeamColor.BLUE, TeamColor.RED, TeamColor.GREEN)

    with pytest.raises(ValueError):
        active_teams(4)


def test_next_team_two_teams():
    """Two teams alternate."""
    assert next_team(TeamColor.BLUE, 2) is TeamColor.RED
    assert next_team(TeamColor.RED, 2) is TeamColor.BLUE


def test_next_team_three_teams():
    """Three teams cycle blue -> red -> green -> blue."""
    assert next_team(TeamColor.BLUE, 3) is TeamColor.RED
    assert next_team(TeamColor.RED, 3) is TeamColor.GREEN
    assert next_team(TeamColor.GREEN, 3) is TeamColor.BLUE


def test_next_team_rejects_inactive_team():
    """Green has no turn in a two-team game."""
    with pytest.raises(ValueError):
        next_team(TeamColor.GREEN, 2)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
