"""
Flashcard models with spaced-repetition state.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from notemind.models.note import NoteCategory


class QuestionCard(BaseModel):
    """Question, answer and hint produced by the question synthesizer."""

    question: str
    answer: str
    hint: str = ""


class Flashcard(BaseModel):
    """
    Study card derived from a note.

    The card references its note by id only; deleting cards along with their
    note is the caller's job.
    """

    id: str = Field(..., description="flashcard_<note id>_<ms>_<index>_<suffix>")
    note_id: str
    question: str
    answer: str
    hint: str = ""
    difficulty: int = Field(default=1, ge=1, le=5)
    learned: bool = False
    last_reviewed: datetime | None = None
    review_count: int = Field(default=0, ge=0)
    mastery_level: int = Field(default=0, ge=0, le=5)
    next_review_due: datetime
    category: NoteCategory = NoteCategory.GENERAL
    tags: list[str] = Field(default_factory=list)
