"""Heuristic content analysis: topics, sentiment, complexity, tone, action items."""

import re

from notemind.config import AnalysisConfig
from notemind.core.text import extract_keywords, sanitize_text
from notemind.models import ContentAnalysis, EmotionalTone, Note
from notemind.utils.fallback import FallbackReporter
from notemind.utils.logger import get_logger

logger = get_logger(__name__)

POSITIVE_WORDS: tuple[str, ...] = (
    "good",
    "great",
    "improve",
    "positive",
    "success",
    "benefit",
    "increase",
    "win",
    "helpful",
)
NEGATIVE_WORDS: tuple[str, ...] = (
    "bad",
    "problem",
    "issue",
    "error",
    "fail",
    "difficult",
    "bug",
    "reduce",
    "loss",
)

_CLAUSE_SPLIT = re.compile(r"\n|\.|;")


class ContentAnalyzer:
    """
    Turns raw text into a ContentAnalysis record.

    Each step is its own method and falls back to a neutral value when it
    fails, so one odd note never aborts a batch.

    Usage:
        analyzer = ContentAnalyzer()
        analysis = analyzer.analyze("I need to fix the login bug.")
        note = analyzer.annotate(note)
    """

    def __init__(
        self,
        config: AnalysisConfig | None = None,
        reporter: FallbackReporter | None = None,
    ):
        """
        Initialize content analyzer.

        Args:
            config: Analysis thresholds. Uses defaults if not provided.
            reporter: Receives an event whenever a step falls back
        """
        self.config = config or AnalysisConfig()
        self.reporter = reporter or FallbackReporter()

    def analyze(self, text: str | None) -> ContentAnalysis:
        """
        Analyze text.

        Args:
            text: Raw note content (None is treated as empty)

        Returns:
            Analysis record; identical text always gives an equal record
        """
        cleaned = sanitize_text(text)
        keywords = self.extract_keywords(cleaned)
        tokens = cleaned.split()
        sentiment = self.sentiment(cleaned)

        return ContentAnalysis(
            key_topics=keywords[: self.config.max_topics],
            keyword_scores=self.keyword_scores(cleaned, keywords),
            complexity=self.complexity(tokens),
            word_count=len(tokens),
            emotional_tone=self.tone(sentiment),
            action_items=self.action_items(cleaned),
            sentiment=sentiment,
        )

    def ensure_analysis(self, note: Note) -> ContentAnalysis:
        """Return the note's cached analysis, computing it when absent."""
        if note.analysis is not None:
            return note.analysis
        return self.analyze(note.content)

    def annotate(self, note: Note) -> Note:
        """Return a copy of the note with its analysis attached."""
        if note.analysis is not None:
            return note
        return note.with_analysis(self.analyze(note.content))

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def extract_keywords(self, cleaned: str) -> list[str]:
        try:
            return extract_keywords(cleaned, self.config.max_keywords)
        except Exception as e:
            self.reporter.report("analysis.keywords", e)
            return []

    def keyword_scores(self, cleaned: str, keywords: list[str]) -> dict[str, float]:
        """Occurrences of each keyword in the sanitized text / divisor, capped at 1."""
        scores: dict[str, float] = {}
        for word in keywords:
            try:
                hits = len(re.findall(rf"\b{re.escape(word)}\b", cleaned))
            except Exception as e:
                self.reporter.report("analysis.keyword_scores", e, keyword=word)
                hits = 0
            scores[word] = min(1.0, hits / self.config.keyword_score_divisor)
        return scores

    def complexity(self, tokens: list[str]) -> float:
        """Unique-token ratio; 0 when there are no tokens."""
        if not tokens:
            return 0.0
        return min(1.0, len(set(tokens)) / len(tokens))

    def action_items(self, cleaned: str) -> list[str]:
        """Leading clauses with more than two words."""
        try:
            clauses = [c.strip() for c in _CLAUSE_SPLIT.split(cleaned)]
            candidates = [c for c in clauses if c][: self.config.action_item_candidates]
            return [c for c in candidates if len(c.split(" ")) > 2][: self.config.max_action_items]
        except Exception as e:
            self.reporter.report("analysis.action_items", e)
            return []

    def sentiment(self, cleaned: str) -> float:
        """Lexicon presence score normalized into [-1, 1]."""
        try:
            lowered = cleaned.lower()
            score = sum(1 for w in POSITIVE_WORDS if w in lowered)
            score -= sum(1 for w in NEGATIVE_WORDS if w in lowered)
            scale = max(1.0, (len(POSITIVE_WORDS) + len(NEGATIVE_WORDS)) / 8)
            return max(-1.0, min(1.0, score / scale))
        except Exception as e:
            self.reporter.report("analysis.sentiment", e)
            return 0.0

    def tone(self, sentiment: float) -> EmotionalTone:
        threshold = self.config.tone_threshold
        if sentiment > threshold:
            return EmotionalTone.POSITIVE
        if sentiment < -threshold:
            return EmotionalTone.NEGATIVE
        return EmotionalTone.NEUTRAL
