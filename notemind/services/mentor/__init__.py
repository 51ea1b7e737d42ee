"""Rule-based mentor: profiling, dialogue, challenges, paths and reports."""

from notemind.services.mentor.challenges import CHALLENGE_TEMPLATES, ChallengeEngine
from notemind.services.mentor.dialogue import DialogueEngine
from notemind.services.mentor.intents import INTENT_RULES, determine_intent
from notemind.services.mentor.mentor_system import MentorSystem
from notemind.services.mentor.planning import LearningPlanner
from notemind.services.mentor.profile import ProfileBuilder
from notemind.services.mentor.reports import ReportBuilder

__all__ = [
    "MentorSystem",
    "ProfileBuilder",
    "DialogueEngine",
    "ChallengeEngine",
    "LearningPlanner",
    "ReportBuilder",
    "determine_intent",
    "INTENT_RULES",
    "CHALLENGE_TEMPLATES",
]
