"""
Exceptions for stored and shared game data.
"""


class GameDataError(ValueError):
    """Base class for unusable snapshot or token data."""


class DecodeFailure(GameDataError):
    """Token or stored value is not valid codec output."""


class MalformedSnapshot(GameDataError):
    """Token decoded fine but does not describe a valid board."""


class NoActiveGame(Exception):
    """An action needs a game in progress and there is none."""
