"""Adaptive challenges and the gamification bookkeeping around them."""

from datetime import timedelta
from decimal import ROUND_HALF_UP, Decimal
from types import MappingProxyType

from pydantic import BaseModel

from notemind.config import MentorConfig
from notemind.core.analysis import ContentAnalyzer
from notemind.models import (
    Challenge,
    ChallengeDifficulty,
    ChallengeFocus,
    ChallengeStatus,
    MentorMessage,
    MentorProgress,
    MessageType,
    Note,
    NoteCategory,
    RecentPerformance,
    UserProfile,
)
from notemind.utils.clock import Clock, SystemClock
from notemind.utils.fallback import FallbackReporter
from notemind.utils.id_generator import generate_challenge_id, generate_message_id
from notemind.utils.logger import get_logger
from notemind.utils.random_source import RandomSource

logger = get_logger(__name__)

RECENT_NOTE_COUNT = 5
SYNTHESIS_COMPLEXITY = 0.6
XP_PER_LEVEL = 100
NOTE_CREATED_XP = 10
START_FALLBACK_TEXT = "🎯 New challenge started! Good luck, you've got this."


class ChallengeTemplate(BaseModel):
    """Static challenge definition before difficulty scaling."""

    title: str
    description: str
    xp: int
    minutes: int
    success_criteria: str
    tags: tuple[str, ...]


CHALLENGE_TEMPLATES = MappingProxyType(
    {
        ChallengeFocus.CREATIVITY: (
            ChallengeTemplate(
                title="Idea Fusion Challenge",
                description="Combine three unrelated concepts from your notes into one innovative solution",
                xp=30,
                minutes=45,
                success_criteria="Create a coherent concept combining all three ideas",
                tags=("creativity", "innovation", "synthesis"),
            ),
            ChallengeTemplate(
                title="Perspective Shifting",
                description="Rewrite a technical note for a complete beginner audience",
                xp=40,
                minutes=60,
                success_criteria="Make the concept understandable without jargon",
                tags=("communication", "simplification", "empathy"),
            ),
        ),
        ChallengeFocus.ANALYSIS: (
            ChallengeTemplate(
                title="Pattern Recognition Mastery",
                description="Analyze your last 15 notes and identify at least 5 recurring patterns",
                xp=35,
                minutes=50,
                success_criteria="Document patterns with specific examples",
                tags=("analysis", "patterns", "insights"),
            ),
            ChallengeTemplate(
                title="Root Cause Investigation",
                description='Take a problem from your notes and trace it through 5 levels of "why"',
                xp=45,
                minutes=75,
                success_criteria="Create a detailed cause-effect chain",
                tags=("problem-solving", "depth", "investigation"),
            ),
        ),
        ChallengeFocus.SYNTHESIS: (
            ChallengeTemplate(
                title="Knowledge Integration",
                description="Connect 5 different notes into a coherent story or framework",
                xp=35,
                minutes=55,
                success_criteria="Create meaningful connections between all notes",
                tags=("synthesis", "integration", "framework"),
            ),
            ChallengeTemplate(
                title="Concept Mapping",
                description="Create a comprehensive mind map connecting 10+ related notes",
                xp=50,
                minutes=90,
                success_criteria="Map with clear hierarchy and connections",
                tags=("visualization", "organization", "comprehension"),
            ),
        ),
    }
)

FIRST_NOTE_TEMPLATE = ChallengeTemplate(
    title="First Note Creation",
    description="Create your first note to start your knowledge journey",
    xp=10,
    minutes=10,
    success_criteria="Create one note with at least 50 words",
    tags=("foundation", "getting-started"),
)

# (xp multiplier, time multiplier)
DIFFICULTY_MULTIPLIERS = MappingProxyType(
    {
        ChallengeDifficulty.BEGINNER: (Decimal("0.7"), Decimal("0.8")),
        ChallengeDifficulty.MEDIUM: (Decimal("1"), Decimal("1")),
        ChallengeDifficulty.HARD: (Decimal("1.3"), Decimal("1.2")),
    }
)

ANALYTICAL_CATEGORIES = frozenset({NoteCategory.RESEARCH, NoteCategory.TECHNICAL})


def round_half_up(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_minutes(minutes: int) -> str:
    return f"{minutes} minutes"


def difficulty_for(profile: UserProfile) -> ChallengeDifficulty:
    if profile.consistency_score < 0.3:
        return ChallengeDifficulty.BEGINNER
    if profile.consistency_score > 0.7:
        return ChallengeDifficulty.HARD
    return ChallengeDifficulty.MEDIUM


class ChallengeEngine:
    """
    Generates challenges and applies their XP/progress effects.

    All state changes are returned as new MentorProgress instances; the
    caller's object is never modified.
    """

    def __init__(
        self,
        analyzer: ContentAnalyzer | None = None,
        config: MentorConfig | None = None,
        clock: Clock | None = None,
        rng: RandomSource | None = None,
        reporter: FallbackReporter | None = None,
    ):
        self.reporter = reporter or FallbackReporter()
        self.analyzer = analyzer or ContentAnalyzer(reporter=self.reporter)
        self.config = config or MentorConfig()
        self.clock = clock or SystemClock()
        self.rng = rng or RandomSource()

    def generate_adaptive_challenge(
        self,
        profile: UserProfile | None,
        recent_performance: RecentPerformance | None,
        notes: list[Note],
    ) -> Challenge:
        """
        Pick and scale a challenge for the learner.

        Args:
            profile: Learner profile (difficulty comes from its consistency score)
            recent_performance: Performance ratios; recorded in the log only
            notes: Note history, most recent first

        Returns:
            A fresh active challenge; the first-note challenge when there are
            no notes or on internal failure
        """
        if not notes:
            return self._build(FIRST_NOTE_TEMPLATE, ChallengeDifficulty.BEGINNER, ChallengeFocus.GENERAL)

        try:
            profile = profile or UserProfile()
            focus = self.select_focus(notes)
            difficulty = difficulty_for(profile)
            template = self.rng.choice(CHALLENGE_TEMPLATES[focus])

            xp_mult, time_mult = DIFFICULTY_MULTIPLIERS[difficulty]
            scaled = template.model_copy(
                update={
                    "xp": round_half_up(template.xp * xp_mult),
                    "minutes": round_half_up(template.minutes * time_mult),
                }
            )
            challenge = self._build(scaled, difficulty, focus)
            logger.bind(
                recent_performance=recent_performance.model_dump() if recent_performance else None
            ).debug(f"Challenge '{challenge.title}' ({difficulty.value}, {focus.value}) generated")
            return challenge

        except Exception as e:
            self.reporter.report("mentor.generate_adaptive_challenge", e, note_count=len(notes))
            return self._build(FIRST_NOTE_TEMPLATE, ChallengeDifficulty.BEGINNER, ChallengeFocus.GENERAL)

    def select_focus(self, notes: list[Note]) -> ChallengeFocus:
        """
        Choose the challenge category from the most recent notes.

        A category wins only with a strict majority over both others;
        creativity is the default.
        """
        recent = notes[:RECENT_NOTE_COUNT]
        creative = sum(1 for n in recent if n.category == NoteCategory.IDEA)
        analytical = sum(1 for n in recent if n.category in ANALYTICAL_CATEGORIES)
        synthesis = sum(
            1 for n in recent if self.analyzer.ensure_analysis(n).complexity > SYNTHESIS_COMPLEXITY
        )

        if analytical > creative and analytical > synthesis:
            return ChallengeFocus.ANALYSIS
        if synthesis > creative and synthesis > analytical:
            return ChallengeFocus.SYNTHESIS
        return ChallengeFocus.CREATIVITY

    def start_challenge_message(self, challenge: Challenge) -> MentorMessage:
        """System message announcing a newly started challenge."""
        now = self.clock.now()
        try:
            return MentorMessage(
                id=generate_message_id("challenge_start", now),
                text=(
                    f'🎯 New challenge started: "{challenge.title}"\n'
                    f"Difficulty: {challenge.difficulty.value}\n"
                    f"XP Reward: {challenge.xp}\n"
                    f"Time estimate: {challenge.time_estimate}\n"
                    f"{challenge.description}"
                ),
                type=MessageType.SYSTEM,
                timestamp=now,
            )
        except Exception as e:
            self.reporter.report(
                "mentor.start_challenge_message", e, challenge_id=getattr(challenge, "id", None)
            )
            return MentorMessage(
                id="fallback", text=START_FALLBACK_TEXT, type=MessageType.SYSTEM, timestamp=now
            )

    def complete_challenge(
        self, progress: MentorProgress, challenge: Challenge | None = None
    ) -> tuple[MentorProgress, MentorMessage | None]:
        """
        Complete a challenge and award its XP.

        Args:
            progress: Current gamification state
            challenge: Challenge to complete (defaults to the current one)

        Returns:
            (new progress, achievement message); the progress is returned
            unchanged with no message when there is nothing to complete
        """
        challenge = challenge or progress.current_challenge
        if challenge is None:
            return progress, None

        try:
            now = self.clock.now()
            xp = progress.xp + challenge.xp
            level = xp // XP_PER_LEVEL + 1
            completed = challenge.model_copy(
                update={"status": ChallengeStatus.COMPLETED, "completed_at": now, "progress": 100}
            )
            scores = progress.progress.model_copy(
                update={"overall": min(100.0, progress.progress.overall + 8)}
            )
            updated = progress.model_copy(
                update={
                    "xp": xp,
                    "level": level,
                    "streak": progress.streak + 1,
                    "progress": scores,
                    "badges": [*progress.badges, f"{challenge.difficulty.value}_challenge"],
                    "completed_challenges": [*progress.completed_challenges, completed],
                    "current_challenge": None,
                }
            )

            skills = ", ".join(challenge.tags) or "valuable skills"
            text = (
                f"🏆 Challenge completed! +{challenge.xp} XP\n"
                f"You've demonstrated {skills} and are now at {xp} total XP. "
            )
            if level > progress.level:
                text += f"🎊 Level up to {level}!"

            logger.info(f"Challenge '{challenge.title}' completed: +{challenge.xp} XP, level {level}")
            return updated, MentorMessage(
                id=generate_message_id("ach", now),
                text=text,
                type=MessageType.SYSTEM,
                timestamp=now,
            )

        except Exception as e:
            self.reporter.report("mentor.complete_challenge", e, challenge_id=challenge.id)
            return progress, None

    def record_note_created(self, progress: MentorProgress) -> MentorProgress:
        """Award XP and progress for a newly created note; unchanged progress on failure."""
        try:
            scores = progress.progress
            return progress.model_copy(
                update={
                    "xp": progress.xp + NOTE_CREATED_XP,
                    "progress": scores.model_copy(
                        update={
                            "overall": min(100.0, scores.overall + 3),
                            "knowledge": min(100.0, scores.knowledge + 5),
                            "consistency": min(100.0, scores.consistency + 2),
                        }
                    ),
                }
            )
        except Exception as e:
            self.reporter.report("mentor.record_note_created", e)
            return progress if isinstance(progress, MentorProgress) else MentorProgress()

    def _build(
        self, template: ChallengeTemplate, difficulty: ChallengeDifficulty, focus: ChallengeFocus
    ) -> Challenge:
        now = self.clock.now()
        return Challenge(
            id=generate_challenge_id(now),
            title=template.title,
            description=template.description,
            difficulty=difficulty,
            xp=template.xp,
            time_estimate=format_minutes(template.minutes),
            success_criteria=template.success_criteria,
            tags=list(template.tags),
            focus_area=focus,
            assigned_at=now,
            due_date=now + timedelta(hours=self.config.challenge_due_hours),
        )
