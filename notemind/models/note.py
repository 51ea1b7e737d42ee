"""
Note model for user-authored text.

Notes are owned by the caller. The library only reads them and, when asked,
returns a copy with a computed analysis attached.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from notemind.models.analysis import ContentAnalysis


class NoteCategory(str, Enum):
    """User-selected note category."""

    GENERAL = "general"
    IDEA = "idea"
    RESEARCH = "research"
    PROJECT = "project"
    PERSONAL = "personal"
    TECHNICAL = "technical"
    BUSINESS = "business"


class Note(BaseModel):
    """A unit of user-authored text subject to analysis."""

    id: str = Field(..., description="Opaque unique note ID")
    title: str | None = Field(default=None, description="Optional title")
    content: str = Field(default="", description="Note body")
    category: NoteCategory = Field(default=NoteCategory.GENERAL)
    tags: list[str] = Field(default_factory=list, description="User-defined tags")
    created_at: datetime = Field(default_factory=datetime.now, description="Creation timestamp")
    updated_at: datetime = Field(default_factory=datetime.now, description="Last update timestamp")
    analysis: ContentAnalysis | None = Field(
        default=None, description="Cached analysis; recomputed on demand when absent"
    )

    def with_analysis(self, analysis: ContentAnalysis) -> "Note":
        """
        Return a copy of this note carrying the given analysis.

        Args:
            analysis: Analysis to attach

        Returns:
            New Note instance; this one is left untouched
        """
        return self.model_copy(update={"analysis": analysis})

    @property
    def content_preview(self) -> str:
        """First 50 characters of content, with an ellipsis when truncated."""
        return self.content[:50] + ("..." if len(self.content) > 50 else "")
