"""
Mentor System - the rule-based learning coach.

Brings together:
- Learner profiling from writing patterns
- Intent classification and conversational replies
- Adaptive challenges and XP bookkeeping
- Learning paths, recommendations and weekly reports

Every public method is total: internal failures are reported through the
FallbackReporter and replaced by a well-formed default.
"""

from notemind.config import Config
from notemind.core.analysis import ContentAnalyzer
from notemind.models import (
    Challenge,
    Goal,
    Intent,
    LearningPath,
    LearningPatterns,
    MentorContext,
    MentorMessage,
    MentorProgress,
    Note,
    RecentPerformance,
    Recommendation,
    UserProfile,
    WeeklyReport,
)
from notemind.services.mentor.challenges import ChallengeEngine
from notemind.services.mentor.dialogue import DialogueEngine
from notemind.services.mentor.intents import ADVISOR_ACTIONS, ADVISOR_FOLLOW_UPS, determine_intent
from notemind.services.mentor.planning import LearningPlanner
from notemind.services.mentor.profile import ProfileBuilder
from notemind.services.mentor.reports import ReportBuilder
from notemind.utils.clock import Clock, SystemClock
from notemind.utils.fallback import FallbackReporter
from notemind.utils.logger import get_logger
from notemind.utils.random_source import RandomSource

logger = get_logger(__name__)


class MentorSystem:
    """
    Stateless mentor facade.

    Usage:
        mentor = MentorSystem()
        profile = mentor.initialize_user_profile(notes)
        reply = mentor.process_user_message("How do I study better?", context)
    """

    def __init__(
        self,
        config: Config | None = None,
        analyzer: ContentAnalyzer | None = None,
        clock: Clock | None = None,
        rng: RandomSource | None = None,
        reporter: FallbackReporter | None = None,
    ):
        """
        Initialize Mentor System.

        Args:
            config: Configuration object
            analyzer: Shared content analyzer
            clock: Time source for greetings, ids and report windows
            rng: Random source for challenge selection
            reporter: Fallback reporter shared by all sub-engines
        """
        self.config = config or Config()
        self.reporter = reporter or FallbackReporter()
        self.analyzer = analyzer or ContentAnalyzer(self.config.analysis, reporter=self.reporter)
        self.clock = clock or SystemClock()
        self.rng = rng or RandomSource()

        mentor_config = self.config.mentor
        self.profiles = ProfileBuilder(self.analyzer, mentor_config, self.reporter)
        self.dialogue = DialogueEngine(self.analyzer, self.clock, self.reporter)
        self.challenges = ChallengeEngine(
            self.analyzer, mentor_config, self.clock, self.rng, self.reporter
        )
        self.planner = LearningPlanner(self.reporter)
        self.reports = ReportBuilder(self.analyzer, mentor_config, self.clock, self.reporter)

        logger.debug("Mentor system initialized")

    # Profile

    def analyze_writing_patterns(self, notes: list[Note]) -> LearningPatterns:
        return self.profiles.analyze_writing_patterns(notes)

    def initialize_user_profile(self, notes: list[Note]) -> UserProfile:
        return self.profiles.initialize_user_profile(notes)

    # Dialogue

    def determine_intent(self, message: str | None) -> Intent:
        return determine_intent(message)

    def process_user_message(
        self, message: str | None, context: MentorContext | None = None
    ) -> MentorMessage:
        return self.dialogue.process_user_message(message, context)

    def get_suggested_actions(self, intent: Intent) -> list[str]:
        """Advisor action list for an intent."""
        return list(ADVISOR_ACTIONS.get(intent, ADVISOR_ACTIONS[Intent.GENERAL_ADVICE]))

    def generate_follow_up_questions(self, intent: Intent) -> list[str]:
        """Advisor follow-up questions for an intent."""
        return list(ADVISOR_FOLLOW_UPS.get(intent, ADVISOR_FOLLOW_UPS[Intent.GENERAL_ADVICE]))

    # Challenges

    def generate_adaptive_challenge(
        self,
        profile: UserProfile | None,
        recent_performance: RecentPerformance | None,
        notes: list[Note],
    ) -> Challenge:
        return self.challenges.generate_adaptive_challenge(profile, recent_performance, notes)

    def start_challenge_message(self, challenge: Challenge) -> MentorMessage:
        return self.challenges.start_challenge_message(challenge)

    def complete_challenge(
        self, progress: MentorProgress, challenge: Challenge | None = None
    ) -> tuple[MentorProgress, MentorMessage | None]:
        return self.challenges.complete_challenge(progress, challenge)

    def record_note_created(self, progress: MentorProgress) -> MentorProgress:
        return self.challenges.record_note_created(progress)

    # Planning and reports

    def generate_learning_path(
        self, profile: UserProfile | None, goals: list[Goal] | None, progress: float = 0.0
    ) -> LearningPath:
        return self.planner.generate_learning_path(profile, goals, progress)

    def generate_learning_recommendations(
        self, profile: UserProfile | None, notes: list[Note] | None, goals: list[Goal] | None
    ) -> list[Recommendation]:
        return self.planner.generate_learning_recommendations(profile, notes, goals)

    def generate_weekly_report(
        self,
        notes: list[Note] | None,
        goals: list[Goal] | None = None,
        challenges: list[Challenge] | None = None,
        profile: UserProfile | None = None,
    ) -> WeeklyReport:
        return self.reports.generate_weekly_report(notes, goals, challenges, profile)

    def generate_personalized_insights(self, context: MentorContext) -> list[str]:
        return self.reports.generate_personalized_insights(context)

    def generate_actionable_suggestions(self, intent: Intent, context: MentorContext) -> list[str]:
        return self.reports.generate_actionable_suggestions(intent, context)
