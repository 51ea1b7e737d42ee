"""
NoteMind - heuristic note analysis and learning mentor.

Derives topics, sentiment, complexity and action items from free-form notes,
then builds flashcards, mind maps, note connections and mentor guidance.
"""

from notemind.config import Config
from notemind.services import AIService, MentorSystem

__version__ = "0.1.0"

__all__ = ["AIService", "MentorSystem", "Config", "__version__"]
