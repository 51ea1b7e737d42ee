"""Shared fixtures for NoteMind tests.

Time and randomness are pinned so ids, due dates and challenge picks are
reproducible.
"""

from datetime import datetime, timedelta

import pytest

from notemind.core.analysis import ContentAnalyzer
from notemind.models import Note, NoteCategory
from notemind.utils import FallbackReporter, FixedClock, RandomSource

NOW = datetime(2024, 3, 4, 9, 30)


@pytest.fixture
def clock() -> FixedClock:
    """Clock frozen on a Monday morning."""
    return FixedClock(NOW)


@pytest.fixture
def rng() -> RandomSource:
    """Seeded random source."""
    return RandomSource(seed=42)


@pytest.fixture
def fallback_events() -> list:
    """Collects every fallback event reported during a test."""
    return []


@pytest.fixture
def reporter(fallback_events) -> FallbackReporter:
    return FallbackReporter(listener=fallback_events.append)


@pytest.fixture
def analyzer(reporter) -> ContentAnalyzer:
    return ContentAnalyzer(reporter=reporter)


def make_note(
    note_id: str,
    content: str,
    title: str | None = None,
    category: NoteCategory = NoteCategory.GENERAL,
    tags: list[str] | None = None,
    age: timedelta = timedelta(hours=1),
) -> Note:
    """Build a note created `age` before NOW."""
    created = NOW - age
    return Note(
        id=note_id,
        title=title,
        content=content,
        category=category,
        tags=tags or [],
        created_at=created,
        updated_at=created,
    )


@pytest.fixture
def sample_notes() -> list[Note]:
    """A small mixed history, most recent first."""
    return [
        make_note(
            "n1",
            "Python testing needs careful review. Python fixtures make testing simpler.",
            title="Testing in Python",
            category=NoteCategory.TECHNICAL,
            tags=["python", "testing"],
        ),
        make_note(
            "n2",
            "Python packaging is difficult. The build backend caused an error today.",
            title="Packaging woes",
            category=NoteCategory.TECHNICAL,
            age=timedelta(days=1),
        ),
        make_note(
            "n3",
            "A great idea for a garden journal app with photo diagrams and color charts.",
            title="Garden app",
            category=NoteCategory.IDEA,
            age=timedelta(days=2),
        ),
        make_note(
            "n4",
            "Read the paper on spaced repetition. Memory improves with spaced review sessions.",
            title="Spaced repetition",
            category=NoteCategory.RESEARCH,
            age=timedelta(days=3),
        ),
    ]


@pytest.fixture
def note_factory():
    """Factory for notes timestamped relative to the fixed clock."""
    return make_note
