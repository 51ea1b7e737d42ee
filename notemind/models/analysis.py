"""
Content analysis record derived from a note's text.
"""

from enum import Enum

from pydantic import BaseModel, Field


class EmotionalTone(str, Enum):
    """Tone label derived from the sentiment score."""

    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class ContentAnalysis(BaseModel):
    """
    Feature vector derived from a note's content.

    Every field is a pure function of the analysed text, so analysing the same
    text twice yields equal records.
    """

    key_topics: list[str] = Field(
        default_factory=list, description="Top keywords, most frequent first (max 5)"
    )
    keyword_scores: dict[str, float] = Field(
        default_factory=dict, description="Keyword -> normalized frequency score in [0, 1]"
    )
    complexity: float = Field(default=0.0, ge=0.0, le=1.0, description="Unique/total token ratio")
    word_count: int = Field(default=0, ge=0, description="Whitespace token count")
    emotional_tone: EmotionalTone = Field(default=EmotionalTone.NEUTRAL)
    action_items: list[str] = Field(default_factory=list, description="Short clauses (max 4)")
    sentiment: float = Field(default=0.0, ge=-1.0, le=1.0, description="Lexicon sentiment")
