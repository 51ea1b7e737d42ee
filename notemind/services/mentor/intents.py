"""
Intent classification and the per-intent lookup tables.

Every table is keyed by every Intent member; a module-level check fails the
import if one falls out of step with the enum.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import NamedTuple

from notemind.models import Intent


class IntentRule(NamedTuple):
    """Matches when all `required` and at least one `any_of` substring occur."""

    intent: Intent
    any_of: tuple[str, ...]
    required: tuple[str, ...] = ()

    def matches(self, message: str) -> bool:
        return all(w in message for w in self.required) and any(w in message for w in self.any_of)


# Order matters: the first matching rule wins.
INTENT_RULES: tuple[IntentRule, ...] = (
    IntentRule(Intent.LEARNING_METHOD, ("learn", "study"), required=("how",)),
    IntentRule(Intent.GOAL_ACHIEVEMENT, ("goal", "achieve", "target")),
    IntentRule(Intent.PROBLEM_SOLVING, ("problem", "stuck", "help")),
    IntentRule(Intent.NOTE_ORGANIZATION, ("organize", "manage"), required=("note",)),
    IntentRule(Intent.TIME_MANAGEMENT, ("time", "busy", "schedule")),
    IntentRule(Intent.MOTIVATION, ("motivat", "energy", "tired")),
    IntentRule(Intent.CONNECTION_MAKING, ("connect", "relate", "link")),
    IntentRule(Intent.CREATIVITY, ("create", "idea", "innovate")),
    IntentRule(Intent.SKILL_IMPROVEMENT, ("improve", "better", "enhance")),
    IntentRule(Intent.MEMORY, ("remember", "forget", "recall")),
    IntentRule(Intent.COMPREHENSION, ("understand", "comprehend", "grasp")),
)


def determine_intent(message: str | None) -> Intent:
    """
    Classify a chat message.

    Args:
        message: Raw user message

    Returns:
        Intent of the first matching rule, GENERAL_ADVICE otherwise
    """
    text = (message or "").lower()
    for rule in INTENT_RULES:
        if rule.matches(text):
            return rule.intent
    return Intent.GENERAL_ADVICE


_GENERAL_ACTIONS = ("Ask about learning", "Review my notes", "Set a tiny goal")
_GENERAL_FOLLOW_UPS = ("What's on your mind?", "How can I support you today?")

SUGGESTED_ACTIONS: Mapping[Intent, tuple[str, ...]] = MappingProxyType(
    {
        Intent.LEARNING_METHOD: ("Test myself", "Space my review", "Teach it out loud"),
        Intent.GOAL_ACHIEVEMENT: ("Define tiny step", "Track progress", "Review weekly"),
        Intent.PROBLEM_SOLVING: ("Simplify the problem", "Try one small fix", "Take a breath"),
        Intent.NOTE_ORGANIZATION: ("Add tags", "Archive old notes", "Connect ideas"),
        Intent.TIME_MANAGEMENT: ("Use 15-min timer", "Single-task only", "Plan breaks"),
        Intent.MOTIVATION: ("Do a 2-min starter", "Celebrate small win", "Review progress"),
        Intent.CONNECTION_MAKING: _GENERAL_ACTIONS,
        Intent.CREATIVITY: _GENERAL_ACTIONS,
        Intent.SKILL_IMPROVEMENT: _GENERAL_ACTIONS,
        Intent.MEMORY: _GENERAL_ACTIONS,
        Intent.COMPREHENSION: _GENERAL_ACTIONS,
        Intent.GENERAL_ADVICE: _GENERAL_ACTIONS,
    }
)

FOLLOW_UP_QUESTIONS: Mapping[Intent, tuple[str, ...]] = MappingProxyType(
    {
        Intent.LEARNING_METHOD: ("What topic are you focusing on?", "Want a custom study plan?"),
        Intent.GOAL_ACHIEVEMENT: ("What's your #1 goal right now?", "Need help breaking it down?"),
        Intent.PROBLEM_SOLVING: ("Can you describe the block?", "Want a fresh perspective?"),
        Intent.NOTE_ORGANIZATION: ("Want tagging suggestions?", "Should we clean up old notes?"),
        Intent.TIME_MANAGEMENT: _GENERAL_FOLLOW_UPS,
        Intent.MOTIVATION: _GENERAL_FOLLOW_UPS,
        Intent.CONNECTION_MAKING: _GENERAL_FOLLOW_UPS,
        Intent.CREATIVITY: _GENERAL_FOLLOW_UPS,
        Intent.SKILL_IMPROVEMENT: _GENERAL_FOLLOW_UPS,
        Intent.MEMORY: _GENERAL_FOLLOW_UPS,
        Intent.COMPREHENSION: _GENERAL_FOLLOW_UPS,
        Intent.GENERAL_ADVICE: _GENERAL_FOLLOW_UPS,
    }
)

# Longer-form advisor tables used outside the chat reply.
_ADVISOR_GENERAL_ACTIONS = ("Review patterns", "Set learning goal", "Connect concepts")
_ADVISOR_GENERAL_QUESTIONS = (
    "What area of knowledge management interests you most?",
    "How can I better support your learning journey?",
    "What recent insight has been most valuable to you?",
)

ADVISOR_ACTIONS: Mapping[Intent, tuple[str, ...]] = MappingProxyType(
    {
        Intent.LEARNING_METHOD: ("Create flashcards", "Teach someone", "Apply knowledge"),
        Intent.GOAL_ACHIEVEMENT: ("Break into milestones", "Set deadlines", "Track progress"),
        Intent.PROBLEM_SOLVING: ("Break it down", "Seek perspectives", "Experiment"),
        Intent.NOTE_ORGANIZATION: ("Create categories", "Add tags", "Weekly review"),
        Intent.TIME_MANAGEMENT: _ADVISOR_GENERAL_ACTIONS,
        Intent.MOTIVATION: _ADVISOR_GENERAL_ACTIONS,
        Intent.CONNECTION_MAKING: _ADVISOR_GENERAL_ACTIONS,
        Intent.CREATIVITY: _ADVISOR_GENERAL_ACTIONS,
        Intent.SKILL_IMPROVEMENT: _ADVISOR_GENERAL_ACTIONS,
        Intent.MEMORY: _ADVISOR_GENERAL_ACTIONS,
        Intent.COMPREHENSION: _ADVISOR_GENERAL_ACTIONS,
        Intent.GENERAL_ADVICE: _ADVISOR_GENERAL_ACTIONS,
    }
)

ADVISOR_FOLLOW_UPS: Mapping[Intent, tuple[str, ...]] = MappingProxyType(
    {
        Intent.LEARNING_METHOD: (
            "What specific topic do you want to master next?",
            "How do you prefer to test your understanding?",
            "What learning obstacles have you faced recently?",
        ),
        Intent.GOAL_ACHIEVEMENT: (
            "What's the smallest step you can take today?",
            "How will you measure progress this week?",
            "What resources do you need to succeed?",
        ),
        Intent.PROBLEM_SOLVING: (
            "Have you faced similar challenges before?",
            "Who could provide valuable perspective on this?",
            "What assumptions might be limiting your solution?",
        ),
        Intent.NOTE_ORGANIZATION: _ADVISOR_GENERAL_QUESTIONS,
        Intent.TIME_MANAGEMENT: _ADVISOR_GENERAL_QUESTIONS,
        Intent.MOTIVATION: _ADVISOR_GENERAL_QUESTIONS,
        Intent.CONNECTION_MAKING: _ADVISOR_GENERAL_QUESTIONS,
        Intent.CREATIVITY: _ADVISOR_GENERAL_QUESTIONS,
        Intent.SKILL_IMPROVEMENT: _ADVISOR_GENERAL_QUESTIONS,
        Intent.MEMORY: _ADVISOR_GENERAL_QUESTIONS,
        Intent.COMPREHENSION: _ADVISOR_GENERAL_QUESTIONS,
        Intent.GENERAL_ADVICE: _ADVISOR_GENERAL_QUESTIONS,
    }
)

for _name, _table in (
    ("SUGGESTED_ACTIONS", SUGGESTED_ACTIONS),
    ("FOLLOW_UP_QUESTIONS", FOLLOW_UP_QUESTIONS),
    ("ADVISOR_ACTIONS", ADVISOR_ACTIONS),
    ("ADVISOR_FOLLOW_UPS", ADVISOR_FOLLOW_UPS),
):
    _missing = set(Intent) - set(_table)
    if _missing:
        raise RuntimeError(f"{_name} missing intents: {sorted(i.value for i in _missing)}")
