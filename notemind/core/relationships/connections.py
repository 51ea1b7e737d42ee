"""Semantic connection scoring between notes."""

from notemind.config import ConnectionConfig
from notemind.core.analysis import ContentAnalyzer
from notemind.core.text import extract_keywords, similarity
from notemind.models import ContentAnalysis, Note, NoteConnection
from notemind.utils.fallback import FallbackReporter
from notemind.utils.logger import get_logger

logger = get_logger(__name__)

TOPIC_OVERLAP_POINTS = 40
TONE_MATCH_POINTS = 20
COMPLEXITY_MATCH_POINTS = 15
COMPLEXITY_MATCH_DELTA = 0.2
KEYWORD_MATCH_POINTS = 15
KEYWORD_MATCH_CAP = 30


class ConnectionFinder:
    """
    Ranks notes by relatedness to a target note.

    Score components (all symmetric in the two notes):
    - 40 per shared key topic
    - 20 when emotional tones match
    - 15 when complexities differ by less than 0.2
    - 15 per similar keyword pair, capped at 30
    """

    def __init__(
        self,
        analyzer: ContentAnalyzer | None = None,
        config: ConnectionConfig | None = None,
        reporter: FallbackReporter | None = None,
    ):
        """
        Initialize connection finder.

        Args:
            analyzer: Analyzer used when a note has no cached analysis
            config: Scoring thresholds
            reporter: Receives an event whenever a fallback is taken
        """
        self.reporter = reporter or FallbackReporter()
        self.analyzer = analyzer or ContentAnalyzer(reporter=self.reporter)
        self.config = config or ConnectionConfig()

    def find_connections(self, notes: list[Note] | None, target_id: str) -> list[NoteConnection]:
        """
        Find notes related to the target.

        Args:
            notes: All candidate notes, target included
            target_id: ID of the note to relate others to

        Returns:
            Connections sorted by descending strength (stable), at most
            max_results; empty on fewer than two notes, a missing target or
            any internal error
        """
        try:
            if not notes or len(notes) < 2:
                return []
            target = next((n for n in notes if n.id == target_id), None)
            if target is None:
                return []

            base_analysis = self.analyzer.ensure_analysis(target)
            base_keywords = self._keywords(target)

            connections = []
            for other in notes:
                if other.id == target_id:
                    continue
                try:
                    score = self._score(
                        base_analysis,
                        base_keywords,
                        self.analyzer.ensure_analysis(other),
                        self._keywords(other),
                    )
                except Exception as e:
                    self.reporter.report("connections.score", e, note_id=other.id)
                    continue

                strength = max(0.0, min(1.0, score / 100))
                if strength > self.config.min_strength:
                    connections.append(
                        NoteConnection(
                            id=other.id,
                            title=other.title or other.content[:30],
                            excerpt=other.content[:160],
                            strength=strength,
                            score=score,
                        )
                    )

            connections.sort(key=lambda c: c.strength, reverse=True)
            logger.debug(f"Found {len(connections)} connections for note {target_id}")
            return connections[: self.config.max_results]

        except Exception as e:
            self.reporter.report("connections.find", e, target_id=target_id)
            return []

    def score_pair(self, a: Note, b: Note) -> float:
        """
        Raw relatedness score between two notes.

        Returns:
            Non-negative score; score_pair(a, b) == score_pair(b, a)
        """
        return self._score(
            self.analyzer.ensure_analysis(a),
            self._keywords(a),
            self.analyzer.ensure_analysis(b),
            self._keywords(b),
        )

    def _keywords(self, note: Note) -> list[str]:
        return extract_keywords(note.content, self.config.keyword_count)

    def _score(
        self,
        a: ContentAnalysis,
        a_keywords: list[str],
        b: ContentAnalysis,
        b_keywords: list[str],
    ) -> float:
        score = 0.0

        overlap = len(set(a.key_topics) & set(b.key_topics))
        score += overlap * TOPIC_OVERLAP_POINTS

        if a.emotional_tone == b.emotional_tone:
            score += TONE_MATCH_POINTS

        if abs(a.complexity - b.complexity) < COMPLEXITY_MATCH_DELTA:
            score += COMPLEXITY_MATCH_POINTS

        threshold = self.config.keyword_similarity_threshold
        pairs = sum(1 for ka in a_keywords for kb in b_keywords if similarity(ka, kb) > threshold)
        score += min(KEYWORD_MATCH_CAP, pairs * KEYWORD_MATCH_POINTS)

        return score
