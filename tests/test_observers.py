"""
Tests for ui.observers module.
"""

import io
import logging

import pytest

from core.board import Card
from core.board_generator import BoardGenerator
from core.leader_view import LeaderView
from core.team_color import TeamColor
from core.word_bank import WordBankTracker
from ui.observers import ConsoleObserver, GameObserver, RecordingObserver, format_board, format_scores
from utils.storage import MemoryStore

B, R = TeamColor.BLUE, TeamColor.RED


def _cards():
    return [
        Card(id=i, word=f"W{i}", type=B if i % 2 else R, revealed=i < 2)
        for i in range(10)
    ]


def test_game_observer_is_abstract():
    """GameObserver cannot be instantiated directly."""
    with pytest.raises(TypeError):
        GameObserver()


def test_format_scores():
    """Scores list each team with its count."""
    text = format_scores({B: 9, R: 8})

    assert text == f"Blue {B.emoji}: 9 | Red {R.emoji}: 8"


def test_format_board():
    """Hidden cards show positions, revealed cards show colours."""
    lines = format_board(_cards(), width=5).split("\n")

    assert len(lines) == 2
    assert lines[0].startswith(f"{R.emoji} W0")
    assert f"{B.emoji} W1" in lines[0]
    assert " 2 W2" in lines[0]
    assert " 9 W9" in lines[1]


def test_console_observer_turn():
    """Turn line, or the end message once finished."""
    stream = io.StringIO()
    console = ConsoleObserver(stream)

    console.on_turn(B, finished=False)
    console.on_turn(R, finished=True, end_message="BLUE VICTORY!")

    assert stream.getvalue().splitlines() == [f"Turn: Blue {B.emoji}", "BLUE VICTORY!"]


def test_console_observer_key():
    """The spy key is printed, not only logged."""
    stream = io.StringIO()

    ConsoleObserver(stream).on_key("AB\nCD")

    lines = stream.getvalue().splitlines()
    assert lines[0] == "--- SECRET KEY (SPY LEADER) ---"
    assert lines[1:3] == ["AB", "CD"]


def test_console_observer_leader_view(dictionary):
    """Leader mode prints counts, the board and the key grid."""
    board = BoardGenerator(dictionary, WordBankTracker(MemoryStore()), seed=1).generate(B, 2)
    board.reveal_all()
    stream = io.StringIO()

    ConsoleObserver(stream).on_leader_view(LeaderView(board, team_count=2, turn_pass_on_miss=True))

    output = stream.getvalue()
    assert output.startswith("*** SPY LEADER MODE ***")
    assert f"Blue {B.emoji}: 9" in output
    assert output.rstrip().endswith(board.key_grid())


def test_default_on_key_logs(caplog):
    """Observers without a key display log the grid."""
    class Quiet(GameObserver):
        def on_board(self, cards, finished):
            pass

        def on_scores(self, remaining, team_count):
            pass

        def on_turn(self, current_team, finished, end_message=None):
            pass

    with caplog.at_level(logging.INFO, logger="ui.observers"):
        Quiet().on_key("GRID")

    assert "SECRET KEY" in caplog.text
    assert "GRID" in caplog.text


def test_recording_observer():
    """Events are kept in order and the latest one is easy to find."""
    observer = RecordingObserver()

    observer.on_scores({B: 9, R: 8}, 2)
    observer.on_turn(B, False)
    observer.on_turn(R, False)

    assert [name for name, _ in observer.events] == ["scores", "turn", "turn"]
    assert observer.last("turn")["current_team"] is R
    assert observer.last("board") is None

    observer.reset()
    assert observer.events == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
