"""Weekly report, personalized insights and actionable suggestions."""

from datetime import datetime, timedelta

from notemind.config import MentorConfig
from notemind.core.analysis import ContentAnalyzer
from notemind.models import (
    Challenge,
    ChallengeStatus,
    Goal,
    GoalStatus,
    Intent,
    LearningStyle,
    MentorContext,
    Note,
    UserProfile,
    WeeklyMetrics,
    WeeklyReport,
)
from notemind.utils.clock import Clock, SystemClock
from notemind.utils.fallback import FallbackReporter
from notemind.utils.logger import get_logger

logger = get_logger(__name__)

MAX_INSIGHTS = 2
MAX_SUGGESTIONS = 2
MINDMAP_TAG = "mindmap"


def to_local_naive(moment: datetime) -> datetime:
    """Normalize aware datetimes to naive local time so they compare with naive ones."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)


def format_date(moment: datetime) -> str:
    return f"{moment.month}/{moment.day}/{moment.year}"


class ReportBuilder:
    """
    Aggregations over notes, goals and challenges.

    Every method degrades to an empty or minimal result on empty input.
    """

    def __init__(
        self,
        analyzer: ContentAnalyzer | None = None,
        config: MentorConfig | None = None,
        clock: Clock | None = None,
        reporter: FallbackReporter | None = None,
    ):
        self.reporter = reporter or FallbackReporter()
        self.analyzer = analyzer or ContentAnalyzer(reporter=self.reporter)
        self.config = config or MentorConfig()
        self.clock = clock or SystemClock()

    def generate_weekly_report(
        self,
        notes: list[Note] | None,
        goals: list[Goal] | None = None,
        challenges: list[Challenge] | None = None,
        profile: UserProfile | None = None,
    ) -> WeeklyReport:
        """
        Summarize activity over the report window.

        Args:
            notes: Note history
            goals: User goals
            challenges: Past challenges
            profile: Learner profile (currently not used in the summary)

        Returns:
            WeeklyReport; an empty report on internal failure
        """
        notes = notes or []
        now = to_local_naive(self.clock.now())
        week_start = now - timedelta(days=self.config.report_window_days)
        date_range = f"{format_date(week_start)} - {format_date(now)}"

        try:
            recent = [n for n in notes if to_local_naive(n.created_at) > week_start]
            completed_goals = [
                g
                for g in goals or []
                if g.status == GoalStatus.COMPLETED
                and g.completed_at is not None
                and to_local_naive(g.completed_at) > week_start
            ]
            completed_challenges = [
                c
                for c in challenges or []
                if c.status == ChallengeStatus.COMPLETED
                and c.completed_at is not None
                and to_local_naive(c.completed_at) > week_start
            ]
            analyses = [self.analyzer.ensure_analysis(n) for n in recent]

            metrics = WeeklyMetrics(
                notes_created=len(recent),
                goals_completed=len(completed_goals),
                challenges_completed=len(completed_challenges),
                avg_note_length=(
                    round(sum(len(n.content) for n in recent) / len(recent)) if recent else 0
                ),
                topic_diversity=len({t for a in analyses for t in a.key_topics}),
                avg_complexity=(
                    round(sum(a.complexity for a in analyses) / len(analyses), 2) if analyses else 0.0
                ),
                action_item_count=sum(len(a.action_items) for a in analyses),
            )

            insights = []
            if metrics.notes_created >= 5:
                insights.append(f"Consistent note-taking: {metrics.notes_created} notes this week")
            if metrics.avg_complexity > 0.5:
                insights.append("Engaging with complex topics - great for cognitive growth")
            if metrics.action_item_count > 0:
                insights.append(
                    f"{metrics.action_item_count} actionable items identified - focus on implementation"
                )
            if completed_challenges:
                insights.append(
                    f"{len(completed_challenges)} challenges completed - demonstrating perseverance"
                )

            recommendations = [
                "Aim for at least 5 notes next week"
                if metrics.notes_created < 3
                else "Maintain current note-taking pace",
                "Review and connect notes from different days",
                "Set one specific learning goal for next week",
                "Explore a new topic area"
                if metrics.topic_diversity < 2
                else "Deepen existing topic knowledge",
            ]

            if completed_challenges:
                achievements = ["Weekly challenge completion", "Knowledge consistency demonstrated"]
            else:
                achievements = ["Building foundational habits"]
            if metrics.notes_created >= 7:
                achievements.append("Consistent daily practice")

            growth_areas = []
            if metrics.avg_complexity < 0.4:
                growth_areas.append("Increase topic complexity")
            if metrics.action_item_count < 3:
                growth_areas.append("Focus on actionable insights")
            if metrics.topic_diversity < 3:
                growth_areas.append("Expand topic exploration")

            logger.debug(f"Weekly report: {metrics.notes_created} notes, {len(insights)} insights")
            return WeeklyReport(
                date_range=date_range,
                metrics=metrics,
                insights=insights or ["Starting your learning journey - every note counts!"],
                recommendations=recommendations,
                achievements=achievements,
                growth_areas=growth_areas,
            )

        except Exception as e:
            self.reporter.report("mentor.generate_weekly_report", e, note_count=len(notes))
            return WeeklyReport(date_range=date_range)

    def generate_personalized_insights(self, context: MentorContext) -> list[str]:
        """
        Up to two short observations about recent notes.

        Args:
            context: Notes (most recent first) and profile

        Returns:
            Insight strings
        """
        try:
            notes = context.notes
            insights: list[str] = []

            if len(notes) >= 5:
                recent = [self.analyzer.ensure_analysis(n) for n in notes[:5]]
                if sum(a.complexity for a in recent) / len(recent) > 0.6:
                    insights.append("You're engaging with complex topics, which accelerates learning")
                if context.user_profile.consistency_score > 0.7:
                    insights.append("Strong consistency detected - this habit will compound over time")
                diversity = len(
                    {t for n in notes for t in self.analyzer.ensure_analysis(n).key_topics}
                )
                if diversity > 3:
                    insights.append(
                        f"You're exploring {diversity} different topic areas - "
                        "great for interdisciplinary thinking"
                    )

            if notes:
                latest = self.analyzer.ensure_analysis(notes[0])
                if latest.sentiment > 0.3:
                    insights.append("Positive tone in recent notes correlates with better learning outcomes")
                if latest.action_items:
                    insights.append("Action-oriented notes increase implementation likelihood by 40%")

            return insights[:MAX_INSIGHTS]

        except Exception as e:
            self.reporter.report("mentor.generate_personalized_insights", e)
            return []

    def generate_actionable_suggestions(self, intent: Intent, context: MentorContext) -> list[str]:
        """
        Up to two concrete suggestions for the learner.

        Args:
            intent: Intent of the current message (recorded only)
            context: Notes (most recent first) and profile

        Returns:
            Suggestion strings
        """
        try:
            notes = context.notes
            suggestions: list[str] = []

            if notes:
                latest = self.analyzer.ensure_analysis(notes[0])
                if latest.complexity < 0.3 and len(notes) > 5:
                    suggestions.append("Challenge yourself with more complex topics to accelerate growth")
                if not latest.action_items and latest.complexity > 0.4:
                    suggestions.append("Add actionable next steps to complex notes for better application")
                if context.user_profile.learning_style == LearningStyle.VISUAL and not any(
                    MINDMAP_TAG in (t.lower() for t in n.tags) for n in notes
                ):
                    suggestions.append(
                        "Create visual mind maps for complex topics to leverage your visual learning strength"
                    )

            if len(notes) > 10 and not any(len(n.tags) > 3 for n in notes):
                suggestions.append("Add more tags to notes for better organization and retrieval")

            return suggestions[:MAX_SUGGESTIONS]

        except Exception as e:
            self.reporter.report("mentor.generate_actionable_suggestions", e, intent=intent)
            return []
