"""
Board representation for a single Codenames game.

Words live in a WordView; colours and revealed flags are tensors indexed by
board position, so per-colour counts are simple masked sums.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence
import torch

from core.config import GRID_WIDTH
from core.team_color import TeamColor
from views.word_view import WordView


@dataclass(frozen=True)
class Card:
    """Read-only view of one board position."""
    id: int
    word: str
    type: TeamColor
    revealed: bool


class Board:
    """
    Fixed-order board of cards.

    Attributes:
        word_view: Position -> dictionary entry mapping
        colors: [N] int64 tensor of TeamColor values
        revealed: [N] bool tensor
        size: Number of cards (N)
    """

    def __init__(
        self,
        word_view: WordView,
        colors: Sequence[TeamColor] | torch.Tensor,
        revealed: Sequence[bool] | torch.Tensor | None = None
    ):
        """
        Initialize board.

        Args:
            word_view: Words in display order
            colors: One colour per word
            revealed: Initial revealed flags (default all hidden)
        """
        self.word_view = word_view
        self.size = word_view.board_size

        self.colors = torch.as_tensor(
            [int(c) for c in colors], dtype=torch.int64
        ).reshape(-1)
        if self.colors.shape[0] != self.size:
            raise ValueError(
                f"Got {self.colors.shape[0]} colours for {self.size} words"
            )

        if revealed is None:
            self.revealed = torch.zeros(self.size, dtype=torch.bool)
        else:
            self.revealed = torch.as_tensor(revealed, dtype=torch.bool).reshape(-1).clone()
            if self.revealed.shape[0] != self.size:
                raise ValueError(
                    f"Got {self.revealed.shape[0]} revealed flags for {self.size} words"
                )

    def __len__(self) -> int:
        return self.size

    def card(self, index: int) -> Card:
        """
        Get the card at a position.

        Raises:
            IndexError: If index out of range
        """
        if not 0 <= index < self.size:
            raise IndexError(f"Card index {index} out of range 0..{self.size - 1}")
        return Card(
            id=self.word_view.get_id(index),
            word=self.word_view.get_word(index),
            type=self.color_at(index),
            revealed=bool(self.revealed[index].item()),
        )

    def cards(self) -> list[Card]:
        """All cards in display order."""
        return [self.card(i) for i in range(self.size)]

    def color_at(self, index: int) -> TeamColor:
        return TeamColor(int(self.colors[index].item()))

    def is_revealed(self, index: int) -> bool:
        return bool(self.revealed[index].item())

    def reveal(self, index: int) -> TeamColor:
        """
        Mark a card revealed.

        Returns:
            Colour of the revealed card
        """
        self.revealed[index] = True
        return self.color_at(index)

    def reveal_all(self) -> None:
        self.revealed.fill_(True)

    def count(self, color: TeamColor) -> int:
        """Total cards of a colour, revealed or not."""
        return int(torch.sum(self.colors == int(color)).item())

    def remaining(self, color: TeamColor) -> int:
        """Unrevealed cards of a colour."""
        return int(torch.sum((self.colors == int(color)) & ~self.revealed).item())

    def is_assassin_revealed(self) -> bool:
        return bool(torch.any((self.colors == int(TeamColor.ASSASSIN)) & self.revealed).item())

    def key_grid(self, width: int = GRID_WIDTH) -> str:
        """
        Emoji grid of every card's colour, one board row per line.

        Args:
            width: Cards per row

        Returns:
            Multi-line string
        """
        emoji = [self.color_at(i).emoji for i in range(self.size)]
        rows = ["".join(emoji[i:i + width]) for i in range(0, self.size, width)]
        return "\n".join(rows)
