"""
Mentor models: learner profile, dialogue, challenges, paths and reports.

The mentor layer is stateless; every record here is either derived from the
caller's notes/goals or handed back to the caller to persist.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from notemind.models.note import Note

# ---------------------------------------------------------------------------
# Learner profile
# ---------------------------------------------------------------------------


class LearningStyle(str, Enum):
    """Dominant sensory learning style."""

    VISUAL = "visual"
    AUDITORY = "auditory"
    KINESTHETIC = "kinesthetic"
    BALANCED = "balanced"


class CognitivePattern(str, Enum):
    """How abstract the learner's notes tend to be."""

    ANALYTICAL = "analytical"
    PRACTICAL = "practical"
    BALANCED = "balanced"


class MotivationPattern(str, Enum):
    """What seems to drive the learner."""

    ACHIEVEMENT = "achievement"
    EXPLORATORY = "exploratory"


class LearningPatterns(BaseModel):
    """Writing-pattern scores, each clamped to [0, 1]."""

    visual_score: float = 0.0
    verbal_score: float = 0.0
    kinesthetic_score: float = 0.0
    detail_oriented: float = 0.0
    big_picture: float = 0.0
    question_frequency: float = 0.0
    action_orientation: float = 0.0


class UserProfile(BaseModel):
    """Aggregate learner model recomputed from the full note history."""

    learning_style: LearningStyle = LearningStyle.BALANCED
    consistency_score: float = Field(default=0.3, ge=0.0, le=1.0)
    engagement_level: float = Field(default=0.5, ge=0.0, le=1.0)
    knowledge_depth: float = Field(default=0.0, ge=0.0, le=1.0)
    growth_rate: float = Field(default=0.0, ge=0.0, le=1.0)
    learning_patterns: LearningPatterns | None = None
    preferred_topics: list[str] = Field(default_factory=list)
    cognitive_pattern: CognitivePattern = CognitivePattern.BALANCED
    motivation_pattern: MotivationPattern = MotivationPattern.EXPLORATORY


# ---------------------------------------------------------------------------
# Dialogue
# ---------------------------------------------------------------------------


class Intent(str, Enum):
    """Classified purpose of a user's chat message."""

    LEARNING_METHOD = "learning_method"
    GOAL_ACHIEVEMENT = "goal_achievement"
    PROBLEM_SOLVING = "problem_solving"
    NOTE_ORGANIZATION = "note_organization"
    TIME_MANAGEMENT = "time_management"
    MOTIVATION = "motivation"
    CONNECTION_MAKING = "connection_making"
    CREATIVITY = "creativity"
    SKILL_IMPROVEMENT = "skill_improvement"
    MEMORY = "memory"
    COMPREHENSION = "comprehension"
    GENERAL_ADVICE = "general_advice"


class MessageType(str, Enum):
    """Who authored a session message."""

    USER = "user"
    MENTOR = "mentor"
    SYSTEM = "system"


class MentorMessage(BaseModel):
    """One message in a mentor session."""

    id: str | None = None
    text: str
    type: MessageType = MessageType.MENTOR
    timestamp: datetime
    suggested_actions: list[str] = Field(default_factory=list)
    follow_up_questions: list[str] = Field(default_factory=list)
    confidence: float | None = None
    intent: Intent | None = None


# ---------------------------------------------------------------------------
# Goals and progress
# ---------------------------------------------------------------------------


class GoalStatus(str, Enum):
    """Goal lifecycle status."""

    ACTIVE = "active"
    COMPLETED = "completed"
    PAUSED = "paused"


class Goal(BaseModel):
    """A user goal supplied by the caller."""

    id: str
    name: str
    description: str = ""
    status: GoalStatus = GoalStatus.ACTIVE
    progress: float = Field(default=0.0, ge=0.0, le=100.0)
    timeframe: str | None = None
    created_at: datetime = Field(default_factory=datetime.now)
    completed_at: datetime | None = None


class ProgressScores(BaseModel):
    """Percent-style progress counters (0-100)."""

    overall: float = 0.0
    knowledge: float = 0.0
    consistency: float = 0.0
    depth: float = 0.0
    connections: float = 0.0


# ---------------------------------------------------------------------------
# Challenges
# ---------------------------------------------------------------------------


class ChallengeDifficulty(str, Enum):
    """Challenge difficulty tier."""

    BEGINNER = "beginner"
    MEDIUM = "medium"
    HARD = "hard"


class ChallengeFocus(str, Enum):
    """Challenge category."""

    GENERAL = "general"
    CREATIVITY = "creativity"
    ANALYSIS = "analysis"
    SYNTHESIS = "synthesis"


class ChallengeStatus(str, Enum):
    """Challenge lifecycle status."""

    ACTIVE = "active"
    COMPLETED = "completed"


class Challenge(BaseModel):
    """A generated, gamified learning task."""

    id: str
    title: str
    description: str
    difficulty: ChallengeDifficulty
    xp: int = Field(..., ge=0)
    time_estimate: str
    success_criteria: str
    tags: list[str] = Field(default_factory=list)
    focus_area: ChallengeFocus = ChallengeFocus.GENERAL
    assigned_at: datetime
    due_date: datetime
    status: ChallengeStatus = ChallengeStatus.ACTIVE
    progress: int = 0
    completed_at: datetime | None = None


class RecentPerformance(BaseModel):
    """Caller-supplied performance ratios in [0, 1]."""

    productivity: float = 0.0
    creativity: float = 0.0
    analysis: float = 0.0


class MentorProgress(BaseModel):
    """Gamification state the caller persists between sessions."""

    xp: int = 0
    level: int = 1
    streak: int = 1
    progress: ProgressScores = Field(default_factory=ProgressScores)
    badges: list[str] = Field(default_factory=list)
    completed_challenges: list[Challenge] = Field(default_factory=list)
    current_challenge: Challenge | None = None


class MentorContext(BaseModel):
    """Everything a conversational turn may draw on."""

    notes: list[Note] = Field(default_factory=list, description="Most recent first")
    goals: list[Goal] = Field(default_factory=list)
    user_profile: UserProfile = Field(default_factory=UserProfile)
    conversation_history: list[MentorMessage] = Field(default_factory=list)
    streak: int = 1
    progress: ProgressScores = Field(default_factory=ProgressScores)


# ---------------------------------------------------------------------------
# Learning paths and reports
# ---------------------------------------------------------------------------


class LearningLevel(str, Enum):
    """Learner level derived from overall progress."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class PathStep(BaseModel):
    """One step of a learning path."""

    step: int
    action: str
    duration: str
    focus: str


class Milestone(BaseModel):
    """A milestone and its badge reward."""

    milestone: str
    reward: str


class SuccessMetrics(BaseModel):
    """Targets attached to a learning path."""

    notes_target: int = 20
    connections_target: int = 10
    mastery_target: int = 5


class LearningPath(BaseModel):
    """Personalized learning plan."""

    level: LearningLevel
    path: list[PathStep]
    estimated_completion: str = "4-6 weeks"
    milestones: list[Milestone]
    focus_areas: list[str]
    success_metrics: SuccessMetrics = Field(default_factory=SuccessMetrics)


class WeeklyMetrics(BaseModel):
    """Activity counts over the report window."""

    notes_created: int = 0
    goals_completed: int = 0
    challenges_completed: int = 0
    avg_note_length: int = 0
    topic_diversity: int = 0
    avg_complexity: float = 0.0
    action_item_count: int = 0


class WeeklyReport(BaseModel):
    """Weekly learning summary."""

    period: str = "Weekly Learning Report"
    date_range: str = ""
    metrics: WeeklyMetrics = Field(default_factory=WeeklyMetrics)
    insights: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    achievements: list[str] = Field(default_factory=list)
    growth_areas: list[str] = Field(default_factory=list)


class Priority(str, Enum):
    """Recommendation priority."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Recommendation(BaseModel):
    """A personalized learning recommendation."""

    title: str
    description: str
    reason: str
    estimated_time: str
    priority: Priority
