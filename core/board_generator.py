"""
Board generation with non-repeating word selection.

Words are sampled from the dictionary entries not used in earlier games; the
colour layout for the requested team count is shuffled independently and
zipped onto the chosen words.
"""

from __future__ import annotations

from typing import Optional, Sequence
import logging
import random
import torch

from core.board import Board
from core.config import BOARD_SIZE
from core.team_color import TeamColor, active_teams
from core.word_bank import WordBankTracker
from utils.wordlist import DictionaryEntry
from views.word_view import WordView

logger = logging.getLogger(__name__)

# Two-team layout: starting team, other team, neutral, assassin
TWO_TEAM_COUNTS = (9, 8, 7, 1)
# Three-team layout: cards per team, assassin
THREE_TEAM_COUNTS = (8, 1)


def color_layout(starting_team: TeamColor, team_count: int) -> list[TeamColor]:
    """
    Build the unshuffled colour labels for a board.

    Two teams: the starting team gets 9 cards, the other 8, neutral 7 and one
    assassin. Three teams: 8 cards each and one assassin, no neutral cards.

    Args:
        starting_team: Team that plays first
        team_count: 2 or 3

    Returns:
        List of BOARD_SIZE colours

    Raises:
        ValueError: If starting_team is not playing with team_count teams
    """
    teams = active_teams(team_count)
    if starting_team not in teams:
        raise ValueError(
            f"{starting_team.label} cannot start a {team_count}-team game"
        )

    if team_count == 2:
        first, second, neutral, assassin = TWO_TEAM_COUNTS
        other = next(t for t in teams if t != starting_team)
        layout = (
            [starting_team] * first
            + [other] * second
            + [TeamColor.NEUTRAL] * neutral
            + [TeamColor.ASSASSIN] * assassin
        )
    else:
        per_team, assassin = THREE_TEAM_COUNTS
        layout = [t for t in teams for _ in range(per_team)] + [TeamColor.ASSASSIN] * assassin

    assert len(layout) == BOARD_SIZE
    return layout


class BoardGenerator:
    """
    Generates fresh boards from a dictionary.

    Attributes:
        dictionary: All available dictionary entries
        word_bank: Used-word history consulted and updated per board
        board_size: Cards per board
    """

    def __init__(
        self,
        dictionary: Sequence[DictionaryEntry],
        word_bank: WordBankTracker,
        seed: Optional[int] = None
    ):
        """
        Initialize board generator.

        Args:
            dictionary: Dictionary entries (at least BOARD_SIZE of them)
            word_bank: Used-word tracker
            seed: Random seed for reproducible boards

        Raises:
            ValueError: If the dictionary is smaller than a board
        """
        if len(dictionary) < BOARD_SIZE:
            raise ValueError(
                f"Dictionary has {len(dictionary)} words, need at least {BOARD_SIZE}"
            )
        self.dictionary = list(dictionary)
        self.word_bank = word_bank
        self.board_size = BOARD_SIZE
        self.rng = random.Random(seed)

    def candidate_pool(self) -> list[DictionaryEntry]:
        """
        Dictionary entries eligible for the next board.

        When fewer than board_size unused entries remain, the used-word history
        is cleared and the whole dictionary becomes eligible again.
        """
        used = self.word_bank.load_used_ids()
        candidates = [e for e in self.dictionary if e.id not in used]

        if len(candidates) < self.board_size:
            logger.warning(
                f"Only {len(candidates)} unused words left, resetting used-word history"
            )
            self.word_bank.clear()
            candidates = list(self.dictionary)

        return candidates

    def shuffle_colors(self, layout: Sequence[TeamColor], seed: int) -> torch.Tensor:
        """
        Uniformly permute colour labels.

        Args:
            layout: Unshuffled colours
            seed: Seed for the permutation

        Returns:
            [N] int64 tensor of shuffled colour values
        """
        generator = torch.Generator().manual_seed(seed)
        colors = torch.tensor([int(c) for c in layout], dtype=torch.int64)

        # Shuffle using torch.rand + argsort
        rand_vals = torch.rand(colors.shape[0], generator=generator)
        perm_indices = torch.argsort(rand_vals)
        return colors[perm_indices]

    def generate(self, starting_team: TeamColor, team_count: int) -> Board:
        """
        Generate a new board and record its words as used.

        Args:
            starting_team: Team that plays first
            team_count: 2 or 3

        Returns:
            Board with every card hidden
        """
        layout = color_layout(starting_team, team_count)

        candidates = self.candidate_pool()
        word_view = WordView.create_random(
            candidates,
            board_size=self.board_size,
            seed=self.rng.randint(0, 2**31 - 1)
        )
        self.word_bank.record_used(word_view.ids)

        colors = self.shuffle_colors(layout, seed=self.rng.randint(0, 2**31 - 1))

        logger.debug(
            f"Generated {team_count}-team board, {starting_team.label} starts, "
            f"{len(candidates)} candidate words"
        )
        return Board(word_view, colors)
