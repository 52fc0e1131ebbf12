"""
Views for mapping board positions to dictionary words.
"""

from views.word_view import WordView

__all__ = ["WordView"]
