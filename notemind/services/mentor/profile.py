"""Learner profile derived from writing patterns across the note history."""

from notemind.config import MentorConfig
from notemind.core.analysis import ContentAnalyzer
from notemind.models import (
    CognitivePattern,
    LearningPatterns,
    LearningStyle,
    MotivationPattern,
    Note,
    UserProfile,
)
from notemind.utils.fallback import FallbackReporter
from notemind.utils.logger import get_logger

logger = get_logger(__name__)

VISUAL_WORDS = ("see", "look", "visual", "picture", "diagram", "chart", "graph", "color", "shape")
VERBAL_WORDS = ("say", "tell", "speak", "discuss", "explain", "describe", "word", "language")
KINESTHETIC_WORDS = ("do", "make", "build", "create", "move", "action", "practice", "hands-on")
DETAIL_WORDS = ("specifically", "exactly", "precisely", "detail", "particular", "specific")
BIG_PICTURE_WORDS = ("overall", "generally", "broadly", "big", "picture", "strategy", "vision")

ANALYTICAL_COMPLEXITY = 0.7
PRACTICAL_COMPLEXITY = 0.3
ACHIEVEMENT_SENTIMENT = 0.3
ENGAGED_NOTE_LENGTH = 100


def _hits(words: tuple[str, ...], content: str) -> int:
    return sum(1 for w in words if w in content)


class ProfileBuilder:
    """
    Builds a UserProfile from scratch on every call.

    Nothing accumulates between calls; the profile is a pure function of the
    notes passed in.
    """

    def __init__(
        self,
        analyzer: ContentAnalyzer | None = None,
        config: MentorConfig | None = None,
        reporter: FallbackReporter | None = None,
    ):
        self.reporter = reporter or FallbackReporter()
        self.analyzer = analyzer or ContentAnalyzer(reporter=self.reporter)
        self.config = config or MentorConfig()

    def analyze_writing_patterns(self, notes: list[Note]) -> LearningPatterns:
        """
        Score word-list hit rates across notes.

        Sensory, detail and big-picture scores are hits per 100 words;
        question frequency and action orientation are per note. All are
        clamped to 1.

        Args:
            notes: Note history

        Returns:
            Pattern scores (all zero for no notes)
        """
        if not notes:
            return LearningPatterns()

        try:
            raw = dict.fromkeys(LearningPatterns.model_fields, 0.0)
            total_words = 0
            question_count = 0
            action_word_count = 0

            for note in notes:
                content = note.content.lower()
                total_words += len(content.split())
                question_count += content.count("?")
                action_word_count += _hits(KINESTHETIC_WORDS, content)
                raw["visual_score"] += _hits(VISUAL_WORDS, content)
                raw["verbal_score"] += _hits(VERBAL_WORDS, content)
                raw["kinesthetic_score"] += _hits(KINESTHETIC_WORDS, content)
                raw["detail_oriented"] += _hits(DETAIL_WORDS, content)
                raw["big_picture"] += _hits(BIG_PICTURE_WORDS, content)

            per_hundred = max(1.0, total_words / 100)
            scores = {key: value / per_hundred for key, value in raw.items()}
            scores["question_frequency"] = question_count / len(notes)
            scores["action_orientation"] = action_word_count / len(notes)

            return LearningPatterns(**{key: min(1.0, value) for key, value in scores.items()})

        except Exception as e:
            self.reporter.report("mentor.writing_patterns", e, note_count=len(notes))
            return LearningPatterns()

    def initialize_user_profile(self, notes: list[Note]) -> UserProfile:
        """
        Derive the learner profile.

        Args:
            notes: Full note history, most recent first

        Returns:
            UserProfile; the fixed default profile when there are no notes or
            on internal failure
        """
        if not notes:
            return UserProfile()

        try:
            patterns = self.analyze_writing_patterns(notes)
            overall = self.analyzer.analyze(" ".join(n.content for n in notes))
            complexities = [self.analyzer.ensure_analysis(n).complexity for n in notes]
            avg_complexity = sum(complexities) / len(complexities)

            profile = UserProfile(
                learning_style=self._learning_style(patterns),
                consistency_score=min(1.0, len(notes) / self.config.consistency_target_notes),
                engagement_level=min(
                    1.0,
                    sum(1 for n in notes if len(n.content) > ENGAGED_NOTE_LENGTH) / len(notes),
                ),
                knowledge_depth=min(1.0, avg_complexity),
                growth_rate=min(1.0, sum(complexities[:5]) / max(1.0, sum(complexities[-5:]))),
                learning_patterns=patterns,
                preferred_topics=overall.key_topics,
                cognitive_pattern=self._cognitive_pattern(avg_complexity),
                motivation_pattern=(
                    MotivationPattern.ACHIEVEMENT
                    if overall.sentiment > ACHIEVEMENT_SENTIMENT
                    else MotivationPattern.EXPLORATORY
                ),
            )
            logger.debug(
                f"Profile built from {len(notes)} notes: style={profile.learning_style.value}, "
                f"pattern={profile.cognitive_pattern.value}"
            )
            return profile

        except Exception as e:
            self.reporter.report("mentor.profile", e, note_count=len(notes))
            return UserProfile()

    @staticmethod
    def _learning_style(patterns: LearningPatterns) -> LearningStyle:
        visual = patterns.visual_score
        verbal = patterns.verbal_score
        kinesthetic = patterns.kinesthetic_score
        if visual > verbal and visual > kinesthetic:
            return LearningStyle.VISUAL
        if verbal > visual and verbal > kinesthetic:
            return LearningStyle.AUDITORY
        if kinesthetic > visual and kinesthetic > verbal:
            return LearningStyle.KINESTHETIC
        return LearningStyle.BALANCED

    @staticmethod
    def _cognitive_pattern(avg_complexity: float) -> CognitivePattern:
        if avg_complexity > ANALYTICAL_COMPLEXITY:
            return CognitivePattern.ANALYTICAL
        if avg_complexity < PRACTICAL_COMPLEXITY:
            return CognitivePattern.PRACTICAL
        return CognitivePattern.BALANCED
