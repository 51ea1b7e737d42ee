"""Learning paths and personalized recommendations."""

from types import MappingProxyType

from notemind.models import (
    Goal,
    GoalStatus,
    LearningLevel,
    LearningPath,
    LearningStyle,
    Milestone,
    Note,
    PathStep,
    Priority,
    Recommendation,
    UserProfile,
)
from notemind.utils.fallback import FallbackReporter
from notemind.utils.logger import get_logger

logger = get_logger(__name__)

MAX_RECOMMENDATIONS = 3
FOCUS_AREA_COUNT = 3

LEARNING_STEPS = MappingProxyType(
    {
        LearningStyle.VISUAL: (
            PathStep(step=1, action="Create visual mind maps for your notes", duration="1 week", focus="visualization"),
            PathStep(step=2, action="Use color coding for different topics", duration="3 days", focus="organization"),
            PathStep(step=3, action="Create diagrams for complex concepts", duration="2 weeks", focus="comprehension"),
        ),
        LearningStyle.AUDITORY: (
            PathStep(step=1, action="Record yourself explaining key concepts", duration="1 week", focus="verbalization"),
            PathStep(step=2, action="Discuss notes with others or teach concepts", duration="2 weeks", focus="communication"),
            PathStep(step=3, action="Create audio summaries of your notes", duration="1 week", focus="synthesis"),
        ),
        LearningStyle.KINESTHETIC: (
            PathStep(step=1, action="Create physical representations of concepts", duration="1 week", focus="tactile"),
            PathStep(step=2, action="Apply concepts through practical projects", duration="3 weeks", focus="application"),
            PathStep(step=3, action="Build prototypes or models of ideas", duration="2 weeks", focus="creation"),
        ),
        LearningStyle.BALANCED: (
            PathStep(step=1, action="Combine multiple learning methods", duration="1 week", focus="integration"),
            PathStep(step=2, action="Create multi-modal study materials", duration="2 weeks", focus="diversity"),
            PathStep(step=3, action="Teach concepts using different approaches", duration="2 weeks", focus="adaptation"),
        ),
    }
)

GOAL_MILESTONES = (
    Milestone(milestone="Complete first learning step", reward="🚀 Starter Badge"),
    Milestone(milestone="Apply learning to a specific goal", reward="🎯 Goal-Oriented Badge"),
    Milestone(milestone="Create comprehensive project", reward="🏆 Mastery Badge"),
)

HABIT_MILESTONES = (
    Milestone(milestone="Complete 5 learning sessions", reward="⭐ Consistency Badge"),
    Milestone(milestone="Master 3 key concepts", reward="🧠 Knowledge Builder Badge"),
    Milestone(milestone="Teach someone a concept", reward="👥 Mentor Badge"),
)

if set(LearningStyle) - set(LEARNING_STEPS):
    raise RuntimeError("LEARNING_STEPS must cover every LearningStyle")


def level_for(progress: float) -> LearningLevel:
    if progress < 30:
        return LearningLevel.BEGINNER
    if progress < 70:
        return LearningLevel.INTERMEDIATE
    return LearningLevel.ADVANCED


class LearningPlanner:
    """Builds learning paths and recommendation lists from the profile."""

    def __init__(self, reporter: FallbackReporter | None = None):
        self.reporter = reporter or FallbackReporter()

    def generate_learning_path(
        self, profile: UserProfile | None, goals: list[Goal] | None, progress: float = 0.0
    ) -> LearningPath:
        """
        Build a personalized learning path.

        Args:
            profile: Learner profile (selects the step template)
            goals: User goals (selects the milestone list)
            progress: Overall progress, 0-100

        Returns:
            LearningPath; a balanced beginner path on internal failure
        """
        try:
            profile = profile or UserProfile()
            return LearningPath(
                level=level_for(progress),
                path=[s.model_copy() for s in LEARNING_STEPS[profile.learning_style]],
                milestones=[m.model_copy() for m in (GOAL_MILESTONES if goals else HABIT_MILESTONES)],
                focus_areas=profile.preferred_topics[:FOCUS_AREA_COUNT] or ["general learning"],
            )
        except Exception as e:
            self.reporter.report("mentor.generate_learning_path", e)
            return LearningPath(
                level=LearningLevel.BEGINNER,
                path=[s.model_copy() for s in LEARNING_STEPS[LearningStyle.BALANCED]],
                milestones=[m.model_copy() for m in HABIT_MILESTONES],
                focus_areas=["general learning"],
            )

    def generate_learning_recommendations(
        self, profile: UserProfile | None, notes: list[Note] | None, goals: list[Goal] | None
    ) -> list[Recommendation]:
        """
        Recommend up to three next activities.

        Args:
            profile: Learner profile
            notes: Note history
            goals: User goals

        Returns:
            Recommendations in rule order, at most three
        """
        notes = notes or []
        try:
            profile = profile or UserProfile()
            recommendations: list[Recommendation] = []

            if profile.learning_style == LearningStyle.VISUAL:
                recommendations.append(
                    Recommendation(
                        title="Visual Learning Boost",
                        description="Create mind maps for your top 3 topics",
                        reason="Leverages your visual learning strength",
                        estimated_time="45 minutes",
                        priority=Priority.HIGH,
                    )
                )
            if profile.consistency_score < 0.5:
                recommendations.append(
                    Recommendation(
                        title="Consistency Building",
                        description="Set a daily 15-minute note-taking habit",
                        reason="Builds foundational learning consistency",
                        estimated_time="Daily 15 minutes",
                        priority=Priority.HIGH,
                    )
                )
            if profile.knowledge_depth < 0.4 and len(notes) > 5:
                recommendations.append(
                    Recommendation(
                        title="Depth Development",
                        description="Deep dive into one complex topic",
                        reason="Increases knowledge depth and complexity",
                        estimated_time="2-3 hours",
                        priority=Priority.MEDIUM,
                    )
                )
            active = next((g for g in goals or [] if g.status == GoalStatus.ACTIVE), None)
            if active:
                recommendations.append(
                    Recommendation(
                        title="Goal Alignment",
                        description=f'Create notes specifically related to "{active.name}"',
                        reason="Directly supports your current goal",
                        estimated_time="30 minutes",
                        priority=Priority.HIGH,
                    )
                )

            return recommendations[:MAX_RECOMMENDATIONS]

        except Exception as e:
            self.reporter.report("mentor.generate_learning_recommendations", e)
            return []
