"""Flashcard generation: question synthesis, card batches, review scheduling."""

from notemind.core.flashcards.generator import STYLE_HINTS, FlashcardGenerator
from notemind.core.flashcards.questions import QuestionSynthesizer

__all__ = ["FlashcardGenerator", "QuestionSynthesizer", "STYLE_HINTS"]
