"""
Data models for NoteMind.

Layers:
1. Source content (Note) supplied by the caller
2. Derived analysis (ContentAnalysis, NoteConnection, MindMap, Flashcard)
3. Mentor records (UserProfile, MentorMessage, Challenge, LearningPath, reports)
"""

from notemind.models.analysis import ContentAnalysis, EmotionalTone
from notemind.models.connection import NoteConnection
from notemind.models.flashcard import Flashcard, QuestionCard
from notemind.models.mentor import (
    Challenge,
    ChallengeDifficulty,
    ChallengeFocus,
    ChallengeStatus,
    CognitivePattern,
    Goal,
    GoalStatus,
    Intent,
    LearningLevel,
    LearningPath,
    LearningPatterns,
    LearningStyle,
    MentorContext,
    MentorMessage,
    MentorProgress,
    MessageType,
    Milestone,
    MotivationPattern,
    PathStep,
    Priority,
    ProgressScores,
    RecentPerformance,
    Recommendation,
    SuccessMetrics,
    UserProfile,
    WeeklyMetrics,
    WeeklyReport,
)
from notemind.models.mindmap import (
    ConnectionKind,
    MindMap,
    MindMapCluster,
    MindMapConnection,
    MindMapNode,
    MindMapStats,
    NodeKind,
)
from notemind.models.note import Note, NoteCategory

__all__ = [
    # Source content
    "Note",
    "NoteCategory",
    # Analysis
    "ContentAnalysis",
    "EmotionalTone",
    "NoteConnection",
    # Mind map
    "MindMap",
    "MindMapNode",
    "MindMapConnection",
    "MindMapCluster",
    "MindMapStats",
    "NodeKind",
    "ConnectionKind",
    # Flashcards
    "Flashcard",
    "QuestionCard",
    # Mentor
    "UserProfile",
    "LearningPatterns",
    "LearningStyle",
    "CognitivePattern",
    "MotivationPattern",
    "Intent",
    "MessageType",
    "MentorMessage",
    "MentorContext",
    "MentorProgress",
    "ProgressScores",
    "Goal",
    "GoalStatus",
    "Challenge",
    "ChallengeDifficulty",
    "ChallengeFocus",
    "ChallengeStatus",
    "RecentPerformance",
    "LearningLevel",
    "LearningPath",
    "PathStep",
    "Milestone",
    "SuccessMetrics",
    "WeeklyMetrics",
    "WeeklyReport",
    "Recommendation",
    "Priority",
]
