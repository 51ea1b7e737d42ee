"""
Tests for learner profiling.

Tests cover:
1. Writing-pattern scores
2. Learning style and cognitive pattern selection
3. Numeric profile fields
4. Defaults and fallbacks
"""

import pytest

from notemind.models import (
    CognitivePattern,
    LearningPatterns,
    LearningStyle,
    MotivationPattern,
    UserProfile,
)
from notemind.services.mentor import ProfileBuilder


@pytest.fixture
def profiles(analyzer, reporter) -> ProfileBuilder:
    return ProfileBuilder(analyzer, reporter=reporter)


@pytest.mark.unit
class TestWritingPatterns:
    """Tests for word-list hit rates."""

    def test_empty(self, profiles):
        assert profiles.analyze_writing_patterns([]) == LearningPatterns()

    def test_scores_are_clamped(self, profiles, note_factory):
        note = note_factory("n1", "I see the diagram and chart, look at the picture")
        patterns = profiles.analyze_writing_patterns([note])

        assert patterns.visual_score == 1.0
        assert patterns.verbal_score == 0.0
        for value in patterns.model_dump().values():
            assert 0.0 <= value <= 1.0

    def test_normalized_per_hundred_words(self, profiles, note_factory):
        filler = " ".join(["filler"] * 398)
        note = note_factory("n1", f"diagram chart {filler}")

        # Two hits over four hundred words
        assert profiles.analyze_writing_patterns([note]).visual_score == pytest.approx(0.5)

    def test_question_frequency_per_note(self, profiles, note_factory):
        notes = [note_factory("a", "why does this work?"), note_factory("b", "plain statement")]
        assert profiles.analyze_writing_patterns(notes).question_frequency == pytest.approx(0.5)

    def test_action_orientation_per_note(self, profiles, note_factory):
        notes = [note_factory("a", "build it and practice"), note_factory("b", "nothing here")]
        assert profiles.analyze_writing_patterns(notes).action_orientation == pytest.approx(1.0)


@pytest.mark.unit
class TestLearningStyle:
    """Tests for dominant-style selection."""

    @pytest.mark.parametrize(
        "content,style",
        [
            ("I see the diagram and chart, look at the picture", LearningStyle.VISUAL),
            ("Explain and discuss the topic, then tell a friend", LearningStyle.AUDITORY),
            ("Build and make a small practice project", LearningStyle.KINESTHETIC),
            ("plain notes without cues", LearningStyle.BALANCED),
        ],
    )
    def test_style(self, profiles, note_factory, content, style):
        profile = profiles.initialize_user_profile([note_factory("n1", content)])
        assert profile.learning_style == style


@pytest.mark.unit
class TestProfileFields:
    """Tests for numeric and categorical profile fields."""

    def test_default_profile(self, profiles):
        profile = profiles.initialize_user_profile([])

        assert profile == UserProfile()
        assert profile.learning_style == LearningStyle.BALANCED
        assert profile.consistency_score == 0.3
        assert profile.engagement_level == 0.5
        assert profile.motivation_pattern == MotivationPattern.EXPLORATORY

    def test_consistency_and_engagement(self, profiles, note_factory):
        notes = [note_factory(f"n{i}", "short note") for i in range(4)]
        notes.append(note_factory("long", "word " * 30))

        profile = profiles.initialize_user_profile(notes)

        assert profile.consistency_score == pytest.approx(5 / 20)
        assert profile.engagement_level == pytest.approx(1 / 5)

    def test_consistency_capped(self, profiles, note_factory):
        notes = [note_factory(f"n{i}", "short note") for i in range(30)]
        assert profiles.initialize_user_profile(notes).consistency_score == 1.0

    def test_analytical_pattern(self, profiles, note_factory):
        notes = [note_factory("n1", "every single word differs completely")]
        profile = profiles.initialize_user_profile(notes)

        assert profile.cognitive_pattern == CognitivePattern.ANALYTICAL
        assert profile.knowledge_depth == 1.0

    def test_practical_pattern(self, profiles, note_factory):
        profile = profiles.initialize_user_profile([note_factory("n1", "go go go go")])
        assert profile.cognitive_pattern == CognitivePattern.PRACTICAL

    def test_growth_rate(self, profiles, note_factory):
        notes = [note_factory("n1", "go go go go"), note_factory("n2", "alpha beta")]
        # First five and last five overlap: (0.25 + 1.0) / max(1, 1.25) = 1.0
        assert profiles.initialize_user_profile(notes).growth_rate == pytest.approx(1.0)

    def test_achievement_motivation(self, profiles, note_factory):
        notes = [note_factory("n1", "great success, another win")]
        profile = profiles.initialize_user_profile(notes)

        assert profile.motivation_pattern == MotivationPattern.ACHIEVEMENT
        assert profile.preferred_topics[0] == "great"

    def test_failure_returns_default(self, profiles, fallback_events, note_factory, monkeypatch):
        def boom(text):
            raise RuntimeError("analysis offline")

        monkeypatch.setattr(profiles.analyzer, "analyze", boom)

        profile = profiles.initialize_user_profile([note_factory("n1", "anything")])

        assert profile == UserProfile()
        assert fallback_events[-1].operation == "mentor.profile"
