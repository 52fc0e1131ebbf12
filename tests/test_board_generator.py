"""
Tests for core.board_generator module.
"""

import pytest

from core.board_generator import BoardGenerator, color_layout
from core.team_color import TeamColor
from core.word_bank import WordBankTracker
from utils.storage import MemoryStore
from utils.wordlist import build_dictionary

B, R, G = TeamColor.BLUE, TeamColor.RED, TeamColor.GREEN
N, A = TeamColor.NEUTRAL, TeamColor.ASSASSIN


def _generator(dictionary, storage=None, seed=42):
    tracker = WordBankTracker(storage if storage is not None else MemoryStore())
    return BoardGenerator(dictionary, tracker, seed=seed)


@pytest.mark.parametrize("starting_team, other", [(B, R), (R, B)])
def test_two_team_layout(starting_team, other):
    """Starting team gets 9, other 8, neutral 7, one assassin."""
    layout = color_layout(starting_team, 2)

    assert len(layout) == 25
    assert layout.count(starting_team) == 9
    assert layout.count(other) == 8
    assert layout.count(N) == 7
    assert layout.count(A) == 1
    assert G not in layout


@pytest.mark.parametrize("starting_team", [B, R, G])
def test_three_team_layout(starting_team):
    """Each team gets 8, one assassin, no neutral cards."""
    layout = color_layout(starting_team, 3)

    assert len(layout) == 25
    for team in (B, R, G):
        assert layout.count(team) == 8
    assert layout.count(A) == 1
    assert N not in layout


def test_layout_invalid_starting_team():
    """Green cannot start a two-team game."""
    with pytest.raises(ValueError):
        color_layout(G, 2)
    with pytest.raises(ValueError):
        color_layout(N, 3)


def test_layout_invalid_team_count():
    """Only 2 or 3 teams are supported."""
    with pytest.raises(ValueError):
        color_layout(B, 4)


@pytest.mark.parametrize("starting_team, team_count", [(B, 2), (R, 2), (B, 3), (R, 3), (G, 3)])
def test_generate_distribution(dictionary, starting_team, team_count):
    """Generated boards follow the layout for their team count."""
    board = _generator(dictionary).generate(starting_team, team_count)

    assert len(board) == 25
    assert sorted(board.colors.tolist()) == sorted(int(c) for c in color_layout(starting_team, team_count))
    assert len(set(board.word_view.ids)) == 25
    assert not any(card.revealed for card in board.cards())


def test_generate_records_used_words(dictionary, storage):
    """Drawn words are added to the used-word history."""
    generator = _generator(dictionary, storage)
    board = generator.generate(B, 2)

    assert generator.word_bank.load_used_ids() == set(board.word_view.ids)


def test_consecutive_boards_do_not_repeat(dictionary, storage):
    """With 60 words, the second board avoids the first board's 25."""
    generator = _generator(dictionary, storage)

    first = generator.generate(B, 2)
    second = generator.generate(R, 2)

    assert set(first.word_view.ids).isdisjoint(second.word_view.ids)
    assert len(generator.word_bank.load_used_ids()) == 50


def test_history_resets_when_exhausted(storage):
    """Fewer than 25 unused words clears the history and uses the full dictionary."""
    dictionary = build_dictionary(f"word{i}" for i in range(45))
    generator = _generator(dictionary, storage)
    generator.word_bank.record_used(range(1, 26))

    board = generator.generate(B, 2)

    # History now holds only the new board
    assert generator.word_bank.load_used_ids() == set(board.word_view.ids)
    assert len(set(board.word_view.ids)) == 25


def test_history_keeps_going_with_enough_words(storage):
    """Exactly 25 unused words are enough, no reset."""
    dictionary = build_dictionary(f"word{i}" for i in range(45))
    generator = _generator(dictionary, storage)
    generator.word_bank.record_used(range(1, 21))

    board = generator.generate(B, 2)

    assert set(board.word_view.ids) == set(range(21, 46))
    assert len(generator.word_bank.load_used_ids()) == 45


def test_seed_reproducibility(dictionary):
    """Same seed and history give the same board."""
    board1 = _generator(dictionary, seed=7).generate(B, 2)
    board2 = _generator(dictionary, seed=7).generate(B, 2)

    assert board1.word_view.ids == board2.word_view.ids
    assert board1.colors.tolist() == board2.colors.tolist()


def test_dictionary_too_small():
    """A dictionary smaller than a board is rejected."""
    with pytest.raises(ValueError):
        _generator(build_dictionary(f"word{i}" for i in range(24)))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
