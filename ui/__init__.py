"""
Display collaborators driven by the game engine.
"""

from ui.observers import GameObserver, ConsoleObserver, RecordingObserver

__all__ = ["GameObserver", "ConsoleObserver", "RecordingObserver"]
