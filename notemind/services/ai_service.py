"""
AI Service - single entry point for the note-analysis engine.

Wires one shared ContentAnalyzer, Clock, RandomSource and FallbackReporter
into every engine so they agree on analysis results, time and randomness.
"""

from notemind.config import Config
from notemind.core.analysis import ContentAnalyzer
from notemind.core.flashcards import FlashcardGenerator, QuestionSynthesizer
from notemind.core.relationships import (
    ConnectionFinder,
    MindMapBuilder,
    get_category_color,
    get_topic_color,
)
from notemind.core.text import edit_distance, extract_keywords, sanitize_text, similarity
from notemind.models import (
    ContentAnalysis,
    Flashcard,
    LearningStyle,
    MindMap,
    Note,
    NoteCategory,
    NoteConnection,
    QuestionCard,
)
from notemind.services.mentor import MentorSystem
from notemind.utils.clock import Clock, SystemClock
from notemind.utils.fallback import FallbackListener, FallbackReporter
from notemind.utils.logger import get_logger
from notemind.utils.random_source import RandomSource

logger = get_logger(__name__)


class AIService:
    """
    Facade over the analysis, relationship, flashcard and mentor engines.

    Usage:
        service = AIService()
        analysis = service.analyze_content_deeply(note.content)
        cards = service.generate_smart_flashcards(notes)
        reply = service.mentor.process_user_message("How should I study?", context)
    """

    def __init__(
        self,
        config: Config | None = None,
        clock: Clock | None = None,
        rng: RandomSource | None = None,
        fallback_listener: FallbackListener | None = None,
    ):
        """
        Initialize AI Service.

        Args:
            config: Configuration object. Uses defaults if not provided.
            clock: Time source (SystemClock by default)
            rng: Random source (unseeded by default)
            fallback_listener: Called with a FallbackEvent whenever an
                operation returns a default instead of raising
        """
        self.config = config or Config()
        self.clock = clock or SystemClock()
        self.rng = rng or RandomSource()
        self.reporter = FallbackReporter(listener=fallback_listener)

        self.analyzer = ContentAnalyzer(self.config.analysis, self.reporter)
        self.connections = ConnectionFinder(self.analyzer, self.config.connections, self.reporter)
        self.mind_maps = MindMapBuilder(self.analyzer, self.config.mind_map, self.reporter)
        self.flashcards = FlashcardGenerator(
            self.analyzer, self.config.flashcards, self.clock, self.rng, self.reporter
        )
        self.questions = QuestionSynthesizer()
        self.mentor = MentorSystem(
            self.config, self.analyzer, self.clock, self.rng, self.reporter
        )

        logger.info("AI service initialized")

    # Text metrics

    @staticmethod
    def edit_distance(s1: str, s2: str) -> int:
        return edit_distance(s1, s2)

    @staticmethod
    def similarity(s1: str, s2: str) -> float:
        return similarity(s1, s2)

    @staticmethod
    def extract_keywords(text: str, max_keywords: int = 6) -> list[str]:
        return extract_keywords(text, max_keywords)

    @staticmethod
    def sanitize_text(value: object) -> str:
        return sanitize_text(value)

    # Analysis and relationships

    def analyze_content_deeply(self, text: str | None) -> ContentAnalysis:
        return self.analyzer.analyze(text)

    def find_semantic_connections(
        self, notes: list[Note] | None, target_id: str
    ) -> list[NoteConnection]:
        return self.connections.find_connections(notes, target_id)

    def generate_advanced_mind_map(
        self, notes: list[Note] | None, focus_label: str | None = None
    ) -> MindMap:
        return self.mind_maps.build(notes, focus_label)

    @staticmethod
    def get_topic_color(topic: str) -> str:
        return get_topic_color(topic)

    @staticmethod
    def get_category_color(category: NoteCategory | str) -> str:
        return get_category_color(category)

    # Flashcards

    def generate_smart_flashcards(
        self, notes: list[Note] | None, learning_style: LearningStyle = LearningStyle.VISUAL
    ) -> list[Flashcard]:
        return self.flashcards.generate(notes, learning_style)

    def generate_question_from_analysis(
        self, note: Note, analysis: ContentAnalysis | None = None
    ) -> QuestionCard:
        """
        Synthesize the single best question for a note.

        Args:
            note: Source note
            analysis: Precomputed analysis (computed when omitted)

        Returns:
            Question/answer/hint triple
        """
        return self.questions.synthesize(note, analysis or self.analyzer.ensure_analysis(note))

    def review_flashcard(self, card: Flashcard, remembered: bool) -> Flashcard:
        return self.flashcards.review(card, remembered)
