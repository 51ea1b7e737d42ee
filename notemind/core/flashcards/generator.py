"""Flashcard generation and spaced-repetition review."""

import math
from datetime import timedelta
from types import MappingProxyType

from pydantic import BaseModel

from notemind.config import FlashcardConfig
from notemind.core.analysis import ContentAnalyzer
from notemind.core.flashcards.questions import (
    MIN_CLOZE_SENTENCE_LENGTH,
    QuestionSynthesizer,
    bullet_list,
    make_cloze,
    split_sentences,
)
from notemind.core.text import extract_keywords, sanitize_text
from notemind.models import ContentAnalysis, Flashcard, LearningStyle, Note, QuestionCard
from notemind.utils.clock import Clock, SystemClock
from notemind.utils.fallback import FallbackReporter
from notemind.utils.id_generator import generate_flashcard_id
from notemind.utils.logger import get_logger
from notemind.utils.random_source import RandomSource

logger = get_logger(__name__)

MAX_DIFFICULTY = 5
MAX_MASTERY = 5

STYLE_HINTS = MappingProxyType(
    {
        LearningStyle.VISUAL: " (Try drawing a mind map)",
        LearningStyle.AUDITORY: " (Explain it aloud)",
        LearningStyle.KINESTHETIC: " (Build a simple example)",
        LearningStyle.BALANCED: "",
    }
)


class _Draft(BaseModel):
    card: QuestionCard
    difficulty: int


def base_difficulty(complexity: float) -> int:
    return min(MAX_DIFFICULTY, 1 + math.ceil(complexity * 2))


def action_difficulty(complexity: float) -> int:
    return min(MAX_DIFFICULTY, 2 + math.ceil(complexity * 3))


class FlashcardGenerator:
    """
    Derives study cards from notes.

    Per note, in order (all candidates kept):
    1. Synthesized question (see QuestionSynthesizer)
    2. Action-step card when the note has action items
    3. Cloze card for the top keyword plus a concept card for the top three,
       or a summary card when the note has no keywords

    The batch is deduplicated by question text (first wins) and sorted by
    ascending difficulty.
    """

    def __init__(
        self,
        analyzer: ContentAnalyzer | None = None,
        config: FlashcardConfig | None = None,
        clock: Clock | None = None,
        rng: RandomSource | None = None,
        reporter: FallbackReporter | None = None,
    ):
        self.reporter = reporter or FallbackReporter()
        self.analyzer = analyzer or ContentAnalyzer(reporter=self.reporter)
        self.config = config or FlashcardConfig()
        self.clock = clock or SystemClock()
        self.rng = rng or RandomSource()
        self.synthesizer = QuestionSynthesizer()

    def generate(
        self, notes: list[Note] | None, learning_style: LearningStyle = LearningStyle.VISUAL
    ) -> list[Flashcard]:
        """
        Generate flashcards for a batch of notes.

        Args:
            notes: Source notes
            learning_style: Style used for the hint suffix on each note's last two cards

        Returns:
            Deduplicated cards sorted by difficulty
        """
        notes = notes or []
        now = self.clock.now()
        due = now + timedelta(hours=self.config.review_interval_hours)
        suffix = STYLE_HINTS.get(learning_style, "")
        cards: list[Flashcard] = []

        for note in notes:
            try:
                analysis = self.analyzer.ensure_analysis(note)
                drafts = self._drafts(note, analysis)
            except Exception as e:
                self.reporter.report("flashcards.note", e, note_id=getattr(note, "id", None))
                continue

            for draft in drafts[-2:]:
                draft.card.hint += suffix

            for draft in drafts:
                cards.append(
                    Flashcard(
                        id=generate_flashcard_id(
                            note.id, now, len(cards), self.rng.token(self.config.id_suffix_length)
                        ),
                        note_id=note.id,
                        question=draft.card.question,
                        answer=draft.card.answer,
                        hint=draft.card.hint,
                        difficulty=draft.difficulty,
                        next_review_due=due,
                        category=note.category,
                        tags=list(analysis.key_topics),
                    )
                )

        seen: set[str] = set()
        unique = []
        for card in cards:
            if card.question not in seen:
                seen.add(card.question)
                unique.append(card)

        unique.sort(key=lambda c: c.difficulty)
        logger.debug(f"Generated {len(unique)} flashcards from {len(notes)} notes")
        return unique

    def review(self, card: Flashcard, remembered: bool) -> Flashcard:
        """
        Apply one review to a card.

        Remembered cards are marked learned, gain a mastery level and are
        scheduled interval * 2^mastery hours out; forgotten cards lose a
        mastery level and come back after one interval.

        Args:
            card: Card being reviewed
            remembered: Whether the learner recalled the answer

        Returns:
            Updated copy of the card
        """
        now = self.clock.now()
        interval = self.config.review_interval_hours
        if remembered:
            mastery = min(MAX_MASTERY, card.mastery_level + 1)
            next_due = now + timedelta(hours=interval * 2**mastery)
        else:
            mastery = max(0, card.mastery_level - 1)
            next_due = now + timedelta(hours=interval)

        return card.model_copy(
            update={
                "learned": card.learned or remembered,
                "last_reviewed": now,
                "review_count": card.review_count + 1,
                "mastery_level": mastery,
                "next_review_due": next_due,
            }
        )

    def _drafts(self, note: Note, analysis: ContentAnalysis) -> list[_Draft]:
        drafts: list[_Draft] = []
        difficulty = base_difficulty(analysis.complexity)
        content = note.content or ""
        label = sanitize_text(note.title)
        summary = content[: self.config.summary_length] + (
            "..." if len(content) > self.config.summary_length else ""
        )

        try:
            primary = self.synthesizer.synthesize(note, analysis)
            drafts.append(_Draft(card=primary, difficulty=difficulty))
        except Exception as e:
            self.reporter.report("flashcards.synthesize", e, note_id=note.id)

        if analysis.action_items:
            drafts.append(
                _Draft(
                    card=QuestionCard(
                        question=f'What actionable steps are suggested in: "{label or "this note"}"?',
                        answer=bullet_list(analysis.action_items),
                        hint="Focus on verbs and specific tasks.",
                    ),
                    difficulty=action_difficulty(analysis.complexity),
                )
            )

        keywords = analysis.key_topics or extract_keywords(content)
        if keywords:
            top = keywords[0]
            sentence = next((s for s in split_sentences(content) if top in s.lower()), None)
            if sentence and len(sentence) > MIN_CLOZE_SENTENCE_LENGTH:
                drafts.append(
                    _Draft(
                        card=QuestionCard(
                            question=f"Fill in the blank: {make_cloze(sentence, top)}",
                            answer=top,
                            hint=f"Look for the important term related to this sentence: {top[0].upper()}...",
                        ),
                        difficulty=difficulty,
                    )
                )

            drafts.append(
                _Draft(
                    card=QuestionCard(
                        question=f"Explain the key concepts: {', '.join(keywords[:3])}",
                        answer=summary,
                        hint="Summarize the definitions and relationships between these concepts.",
                    ),
                    difficulty=difficulty,
                )
            )
        else:
            drafts.append(
                _Draft(
                    card=QuestionCard(
                        question=f'Summarize the main point of: "{label or "this note"}"',
                        answer=summary,
                        hint="Identify the thesis or main conclusion.",
                    ),
                    difficulty=difficulty,
                )
            )

        return drafts
