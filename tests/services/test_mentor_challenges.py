"""
Tests for adaptive challenges and XP bookkeeping.
"""

from datetime import timedelta
from decimal import Decimal

import pytest

from notemind.models import (
    ChallengeDifficulty,
    ChallengeFocus,
    ChallengeStatus,
    MentorProgress,
    MessageType,
    NoteCategory,
    ProgressScores,
    RecentPerformance,
    UserProfile,
)
from notemind.services.mentor import CHALLENGE_TEMPLATES, ChallengeEngine
from notemind.services.mentor.challenges import difficulty_for, round_half_up
from notemind.utils import RandomSource, timestamp_ms

SIMPLE = "data data data data"
COMPLEX = "every single word here differs"


@pytest.fixture
def engine(analyzer, clock, rng, reporter) -> ChallengeEngine:
    return ChallengeEngine(analyzer, clock=clock, rng=rng, reporter=reporter)


def template_for(title: str):
    return next(t for group in CHALLENGE_TEMPLATES.values() for t in group if t.title == title)


@pytest.mark.unit
class TestFirstNoteChallenge:
    """Tests for the challenge offered before any notes exist."""

    def test_no_notes(self, engine, clock):
        challenge = engine.generate_adaptive_challenge(UserProfile(), None, [])

        assert challenge.title == "First Note Creation"
        assert challenge.difficulty == ChallengeDifficulty.BEGINNER
        assert challenge.xp == 10
        assert challenge.time_estimate == "10 minutes"
        assert challenge.success_criteria == "Create one note with at least 50 words"
        assert challenge.tags == ["foundation", "getting-started"]
        assert challenge.focus_area == ChallengeFocus.GENERAL
        assert challenge.id == f"challenge_{timestamp_ms(clock.now())}"
        assert challenge.assigned_at == clock.now()
        assert challenge.due_date == clock.now() + timedelta(hours=24)
        assert challenge.status == ChallengeStatus.ACTIVE
        assert challenge.progress == 0


@pytest.mark.unit
class TestFocusSelection:
    """Tests for challenge category selection."""

    def test_research_notes_choose_analysis(self, engine, note_factory):
        notes = [note_factory(f"n{i}", SIMPLE, category=NoteCategory.RESEARCH) for i in range(5)]
        assert engine.select_focus(notes) == ChallengeFocus.ANALYSIS

    def test_complex_notes_choose_synthesis(self, engine, note_factory):
        notes = [note_factory(f"n{i}", COMPLEX) for i in range(5)]
        assert engine.select_focus(notes) == ChallengeFocus.SYNTHESIS

    def test_idea_notes_choose_creativity(self, engine, note_factory):
        notes = [note_factory(f"n{i}", SIMPLE, category=NoteCategory.IDEA) for i in range(5)]
        assert engine.select_focus(notes) == ChallengeFocus.CREATIVITY

    def test_tie_defaults_to_creativity(self, engine, note_factory):
        """Test a category needs a strict majority to win."""
        notes = [note_factory(f"n{i}", COMPLEX, category=NoteCategory.TECHNICAL) for i in range(3)]
        assert engine.select_focus(notes) == ChallengeFocus.CREATIVITY

    def test_only_recent_five_count(self, engine, note_factory):
        recent = [note_factory(f"r{i}", SIMPLE, category=NoteCategory.IDEA) for i in range(5)]
        older = [note_factory(f"o{i}", SIMPLE, category=NoteCategory.RESEARCH) for i in range(10)]
        assert engine.select_focus(recent + older) == ChallengeFocus.CREATIVITY


@pytest.mark.unit
class TestScaling:
    """Tests for difficulty and XP/time scaling."""

    @pytest.mark.parametrize(
        "consistency,difficulty",
        [
            (0.1, ChallengeDifficulty.BEGINNER),
            (0.3, ChallengeDifficulty.MEDIUM),
            (0.7, ChallengeDifficulty.MEDIUM),
            (0.8, ChallengeDifficulty.HARD),
        ],
    )
    def test_difficulty_for(self, consistency, difficulty):
        assert difficulty_for(UserProfile(consistency_score=consistency)) == difficulty

    def test_round_half_up(self):
        assert round_half_up(Decimal("24.5")) == 25
        assert round_half_up(Decimal(35) * Decimal("0.7")) == 25
        assert round_half_up(Decimal("24.4")) == 24

    @pytest.mark.parametrize(
        "consistency,xp_factor,time_factor",
        [(0.1, Decimal("0.7"), Decimal("0.8")), (0.5, 1, 1), (0.9, Decimal("1.3"), Decimal("1.2"))],
    )
    def test_scaled_challenge(self, engine, note_factory, consistency, xp_factor, time_factor):
        notes = [note_factory(f"n{i}", SIMPLE, category=NoteCategory.RESEARCH) for i in range(5)]
        profile = UserProfile(consistency_score=consistency)

        challenge = engine.generate_adaptive_challenge(profile, RecentPerformance(), notes)
        template = template_for(challenge.title)

        assert challenge.focus_area == ChallengeFocus.ANALYSIS
        assert template in CHALLENGE_TEMPLATES[ChallengeFocus.ANALYSIS]
        assert challenge.xp == round_half_up(template.xp * Decimal(xp_factor))
        assert challenge.time_estimate == f"{round_half_up(template.minutes * Decimal(time_factor))} minutes"
        assert challenge.tags == list(template.tags)

    def test_seeded_selection_is_reproducible(self, analyzer, clock, sample_notes):
        picks = []
        for _ in range(2):
            engine = ChallengeEngine(analyzer, clock=clock, rng=RandomSource(seed=3))
            picks.append([engine.generate_adaptive_challenge(None, None, sample_notes).title for _ in range(5)])

        assert picks[0] == picks[1]

    def test_failure_returns_first_note_challenge(self, engine, fallback_events, note_factory, monkeypatch):
        def boom(notes):
            raise RuntimeError("selection failed")

        monkeypatch.setattr(engine, "select_focus", boom)

        challenge = engine.generate_adaptive_challenge(UserProfile(), None, [note_factory("n1", SIMPLE)])

        assert challenge.title == "First Note Creation"
        assert fallback_events[-1].operation == "mentor.generate_adaptive_challenge"


@pytest.mark.unit
class TestChallengeLifecycle:
    """Tests for starting and completing challenges."""

    def test_start_message(self, engine, clock):
        challenge = engine.generate_adaptive_challenge(UserProfile(), None, [])
        message = engine.start_challenge_message(challenge)

        assert message.type == MessageType.SYSTEM
        assert message.text.startswith('🎯 New challenge started: "First Note Creation"')
        assert "XP Reward: 10" in message.text
        assert message.timestamp == clock.now()

    def test_complete_current_challenge(self, engine, clock):
        challenge = engine.generate_adaptive_challenge(UserProfile(), None, [])
        progress = MentorProgress(
            xp=95, level=1, streak=2, progress=ProgressScores(overall=96), current_challenge=challenge
        )

        updated, message = engine.complete_challenge(progress)

        assert updated.xp == 105
        assert updated.level == 2
        assert updated.streak == 3
        assert updated.progress.overall == 100
        assert updated.badges == ["beginner_challenge"]
        assert updated.current_challenge is None
        assert updated.completed_challenges[0].status == ChallengeStatus.COMPLETED
        assert updated.completed_challenges[0].completed_at == clock.now()
        assert message.type == MessageType.SYSTEM
        assert "+10 XP" in message.text
        assert "foundation, getting-started" in message.text
        assert "Level up to 2" in message.text
        # Caller's state is untouched
        assert progress.xp == 95
        assert progress.current_challenge is challenge

    def test_complete_without_level_up(self, engine):
        challenge = engine.generate_adaptive_challenge(UserProfile(), None, [])
        updated, message = engine.complete_challenge(MentorProgress(), challenge)

        assert updated.level == 1
        assert "Level up" not in message.text

    def test_nothing_to_complete(self, engine):
        progress = MentorProgress()
        assert engine.complete_challenge(progress) == (progress, None)

    def test_record_note_created(self, engine):
        progress = MentorProgress(progress=ProgressScores(overall=99, knowledge=10, consistency=0))
        updated = engine.record_note_created(progress)

        assert updated.xp == 10
        assert updated.progress.overall == 100
        assert updated.progress.knowledge == 15
        assert updated.progress.consistency == 2
        assert progress.xp == 0

    def test_start_message_fallback(self, engine, fallback_events, clock):
        message = engine.start_challenge_message(None)

        assert message.id == "fallback"
        assert message.type == MessageType.SYSTEM
        assert message.text.startswith("🎯 New challenge started!")
        assert message.timestamp == clock.now()
        assert fallback_events[-1].operation == "mentor.start_challenge_message"

    def test_record_note_created_fallback(self, engine, fallback_events):
        assert engine.record_note_created(None) == MentorProgress()
        assert fallback_events[-1].operation == "mentor.record_note_created"
