"""
Tests for intent classification and conversational replies.
"""

from datetime import datetime

import pytest

from notemind.models import (
    Goal,
    GoalStatus,
    Intent,
    LearningStyle,
    MentorContext,
    MessageType,
    ProgressScores,
    UserProfile,
)
from notemind.services.mentor import DialogueEngine, determine_intent
from notemind.services.mentor.dialogue import GENERIC_REPLY, SHORT_INPUT_ACTIONS, greeting_for_hour
from notemind.services.mentor.intents import (
    ADVISOR_ACTIONS,
    ADVISOR_FOLLOW_UPS,
    FOLLOW_UP_QUESTIONS,
    SUGGESTED_ACTIONS,
)
from notemind.utils import FixedClock


@pytest.fixture
def dialogue(analyzer, clock, reporter) -> DialogueEngine:
    return DialogueEngine(analyzer, clock, reporter)


@pytest.mark.unit
class TestDetermineIntent:
    """Tests for ordered keyword rules."""

    @pytest.mark.parametrize(
        "message,intent",
        [
            ("How can I study better?", Intent.LEARNING_METHOD),
            ("I have a problem with my code", Intent.PROBLEM_SOLVING),
            ("My goal is to finish the thesis", Intent.GOAL_ACHIEVEMENT),
            ("How should I organize my notes?", Intent.NOTE_ORGANIZATION),
            ("I'm so busy lately", Intent.TIME_MANAGEMENT),
            ("Feeling tired today", Intent.MOTIVATION),
            ("These ideas relate somehow", Intent.CONNECTION_MAKING),
            ("I want to innovate", Intent.CREATIVITY),
            ("I keep forgetting names", Intent.MEMORY),
            ("I can't grasp recursion", Intent.COMPREHENSION),
            ("Hello there", Intent.GENERAL_ADVICE),
            ("", Intent.GENERAL_ADVICE),
            (None, Intent.GENERAL_ADVICE),
        ],
    )
    def test_intents(self, message, intent):
        assert determine_intent(message) == intent

    def test_first_match_wins(self):
        """Test learning rules are checked before goal rules."""
        assert determine_intent("How do I learn to achieve my goal?") == Intent.LEARNING_METHOD

    def test_case_insensitive(self):
        assert determine_intent("HOW DO I STUDY") == Intent.LEARNING_METHOD

    def test_how_alone_is_not_learning(self):
        assert determine_intent("How are you?") == Intent.GENERAL_ADVICE


@pytest.mark.unit
class TestIntentTables:
    """Tests that every lookup table covers every intent."""

    @pytest.mark.parametrize(
        "table", [SUGGESTED_ACTIONS, FOLLOW_UP_QUESTIONS, ADVISOR_ACTIONS, ADVISOR_FOLLOW_UPS]
    )
    def test_exhaustive(self, table):
        assert set(table) == set(Intent)
        assert all(table[intent] for intent in Intent)


@pytest.mark.unit
class TestGreeting:
    """Tests for time and streak aware greetings."""

    @pytest.mark.parametrize(
        "hour,greeting",
        [(0, "Good morning"), (11, "Good morning"), (12, "Good afternoon"), (16, "Good afternoon"), (17, "Good evening")],
    )
    def test_greeting_for_hour(self, hour, greeting):
        assert greeting_for_hour(hour) == greeting

    def test_greeting_uses_clock(self, analyzer):
        engine = DialogueEngine(analyzer, FixedClock(datetime(2024, 3, 4, 18, 0)))
        assert engine.process_user_message("Hello there").text.startswith("Good evening! 👋")

    def test_streak_and_progress_remarks(self, dialogue):
        context = MentorContext(streak=5, progress=ProgressScores(overall=80))
        text = dialogue.process_user_message("Hello there", context).text

        assert "5-day streak" in text
        assert "leveling up" in text

    def test_no_remarks_for_new_users(self, dialogue):
        text = dialogue.process_user_message("Hello there", MentorContext()).text
        assert "streak" not in text
        assert "leveling up" not in text


@pytest.mark.unit
class TestProcessUserMessage:
    """Tests for reply bodies, suggestions and fallbacks."""

    @pytest.mark.parametrize("message", ["", "  ", "hi", None])
    def test_short_input(self, dialogue, message):
        reply = dialogue.process_user_message(message, MentorContext())

        assert reply.suggested_actions == SHORT_INPUT_ACTIONS
        assert reply.follow_up_questions == ["What's on your mind?", "Need a nudge?"]
        assert "1. Review your latest note?" in reply.text
        assert reply.type == MessageType.MENTOR

    def test_learning_method(self, dialogue, sample_notes):
        context = MentorContext(
            notes=sample_notes, user_profile=UserProfile(learning_style=LearningStyle.VISUAL)
        )
        reply = dialogue.process_user_message("How can I study better?", context)

        assert reply.intent == Intent.LEARNING_METHOD
        assert "**python**" in reply.text
        assert "**visual** styles" in reply.text
        assert reply.suggested_actions == ["Test myself", "Space my review", "Teach it out loud"]
        assert reply.follow_up_questions == ["What topic are you focusing on?", "Want a custom study plan?"]
        assert reply.confidence == 0.95

    def test_learning_method_without_notes(self, dialogue):
        reply = dialogue.process_user_message("How do I learn faster?", MentorContext())
        assert "**your current focus**" in reply.text

    @pytest.mark.parametrize(
        "progress,phrase",
        [(10, "tiniest possible win"), (50, "messy middle"), (90, "so close")],
    )
    def test_goal_progress_bands(self, dialogue, progress, phrase):
        goals = [
            Goal(id="g0", name="Old", status=GoalStatus.COMPLETED, progress=100),
            Goal(id="g1", name="Ship the app", progress=progress),
        ]
        reply = dialogue.process_user_message("I want to reach my goal", MentorContext(goals=goals))

        assert '"Ship the app"' in reply.text
        assert phrase in reply.text

    def test_goal_without_active_goal(self, dialogue):
        reply = dialogue.process_user_message("I want to reach my goal", MentorContext())
        assert "Goals thrive on clarity" in reply.text

    def test_note_organization_variants(self, dialogue, note_factory):
        many = [note_factory(f"n{i}", "text") for i in range(11)]
        few = many[:3]

        organize_many = dialogue.process_user_message(
            "I should organize each note", MentorContext(notes=many)
        )
        organize_few = dialogue.process_user_message(
            "I should organize each note", MentorContext(notes=few)
        )

        assert organize_many.intent == Intent.NOTE_ORGANIZATION
        assert "Archive or delete" in organize_many.text
        assert "clear **title**" in organize_few.text

    def test_default_body_uses_message_topics(self, dialogue):
        reply = dialogue.process_user_message("Quantum mechanics lectures", MentorContext())

        assert reply.intent == Intent.GENERAL_ADVICE
        assert "*quantum, mechanics, lectures*" in reply.text
        assert reply.suggested_actions == ["Ask about learning", "Review my notes", "Set a tiny goal"]

    def test_default_body_sentiment_remarks(self, dialogue):
        sad = dialogue.process_user_message("Everything is bad and full of loss", MentorContext())
        happy = dialogue.process_user_message("Everything is great, a real success", MentorContext())

        assert "This sounds tough" in sad.text
        assert "Your energy is contagious" in happy.text

    def test_unlisted_intent_uses_general_tables(self, dialogue):
        reply = dialogue.process_user_message("I keep forgetting names", MentorContext())

        assert reply.intent == Intent.MEMORY
        assert reply.suggested_actions == ["Ask about learning", "Review my notes", "Set a tiny goal"]
        assert reply.follow_up_questions == ["What's on your mind?", "How can I support you today?"]

    def test_missing_context(self, dialogue):
        reply = dialogue.process_user_message("How can I study better?")
        assert reply.intent == Intent.LEARNING_METHOD

    def test_timestamp_and_id_from_clock(self, dialogue, clock):
        reply = dialogue.process_user_message("Hello there")
        assert reply.timestamp == clock.now()
        assert reply.id.startswith("resp_")

    def test_failure_returns_generic_reply(self, dialogue, fallback_events, monkeypatch):
        def boom(*args):
            raise RuntimeError("template error")

        monkeypatch.setattr(dialogue, "_body", boom)

        reply = dialogue.process_user_message("How can I study better?", MentorContext())

        assert reply.text == GENERIC_REPLY
        assert reply.suggested_actions == ["Ask about learning", "Organize notes", "Set a goal"]
        assert fallback_events[-1].operation == "mentor.process_user_message"
