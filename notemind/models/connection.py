"""Ranked relatedness between a target note and another note."""

from pydantic import BaseModel, Field


class NoteConnection(BaseModel):
    """A note related to the target, with its raw score and normalized strength."""

    id: str = Field(..., description="Related note ID")
    title: str = Field(default="", description="Title or first 30 chars of content")
    excerpt: str = Field(default="", description="First 160 chars of content")
    strength: float = Field(..., ge=0.0, le=1.0, description="score / 100, clamped")
    score: float = Field(..., ge=0.0, description="Raw additive relatedness score")
