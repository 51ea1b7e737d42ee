"""
Tests for flashcard generation, question synthesis and review scheduling.
"""

from datetime import timedelta

import pytest

from notemind.core.flashcards import STYLE_HINTS, FlashcardGenerator, QuestionSynthesizer
from notemind.core.flashcards.generator import action_difficulty, base_difficulty
from notemind.core.flashcards.questions import make_cloze, split_sentences
from notemind.models import LearningStyle, NoteCategory
from notemind.utils import RandomSource, timestamp_ms

NOTE_TEXT = "Alpha systems need careful review. Alpha testing improves quality."


@pytest.fixture
def generator(analyzer, clock, rng, reporter) -> FlashcardGenerator:
    return FlashcardGenerator(analyzer, clock=clock, rng=rng, reporter=reporter)


@pytest.mark.unit
class TestDifficulty:
    """Tests for difficulty formulas."""

    @pytest.mark.parametrize("complexity,expected", [(0.0, 1), (0.3, 2), (0.5, 2), (0.9, 3), (1.0, 3)])
    def test_base(self, complexity, expected):
        assert base_difficulty(complexity) == expected

    @pytest.mark.parametrize("complexity,expected", [(0.0, 2), (0.3, 3), (0.5, 4), (1.0, 5)])
    def test_action(self, complexity, expected):
        assert action_difficulty(complexity) == expected


@pytest.mark.unit
class TestGenerate:
    """Tests for batch generation."""

    def test_empty(self, generator):
        assert generator.generate([]) == []

    def test_cards_for_one_note(self, generator, clock, note_factory):
        note = note_factory("n1", NOTE_TEXT, title="Alpha", category=NoteCategory.TECHNICAL)
        cards = generator.generate([note])

        assert len(cards) == 4
        assert [c.difficulty for c in cards] == [3, 3, 3, 5]
        assert cards[-1].question == 'What actionable steps are suggested in: "Alpha"?'
        assert cards[0].question == 'What are the next actionable steps recommended in "Alpha"?'
        for card in cards:
            assert card.note_id == "n1"
            assert card.id.startswith(f"flashcard_n1_{timestamp_ms(clock.now())}_")
            assert card.learned is False
            assert card.review_count == 0
            assert card.mastery_level == 0
            assert card.next_review_due == clock.now() + timedelta(hours=24)
            assert card.category == NoteCategory.TECHNICAL
            assert card.tags[0] == "alpha"

    def test_cloze_card(self, generator, note_factory):
        cards = generator.generate([note_factory("n1", NOTE_TEXT)])
        cloze = next(c for c in cards if c.question.startswith("Fill in the blank"))

        assert cloze.question == "Fill in the blank: _____ systems need careful review."
        assert cloze.answer == "alpha"

    def test_style_hint_on_last_two_cards(self, generator, note_factory):
        suffix = STYLE_HINTS[LearningStyle.VISUAL]
        cards = generator.generate([note_factory("n1", NOTE_TEXT)])

        hinted = [c for c in cards if c.hint.endswith(suffix)]
        assert len(hinted) == 2
        assert {c.question.split(":")[0] for c in hinted} == {
            "Fill in the blank",
            "Explain the key concepts",
        }

    def test_balanced_style_has_no_hint(self, generator, note_factory):
        cards = generator.generate([note_factory("n1", NOTE_TEXT)], LearningStyle.BALANCED)
        assert not any(c.hint.endswith(h) for c in cards for h in STYLE_HINTS.values() if h)

    def test_deduplicates_questions(self, generator, note_factory):
        notes = [note_factory("a", NOTE_TEXT, title="Same"), note_factory("b", NOTE_TEXT, title="Same")]
        cards = generator.generate(notes)

        questions = [c.question for c in cards]
        assert len(questions) == len(set(questions))
        assert {c.note_id for c in cards} == {"a"}

    def test_sorted_by_difficulty(self, generator, sample_notes):
        difficulties = [c.difficulty for c in generator.generate(sample_notes)]
        assert difficulties == sorted(difficulties)

    def test_unique_ids(self, generator, sample_notes):
        ids = [c.id for c in generator.generate(sample_notes)]
        assert len(ids) == len(set(ids))

    def test_seeded_ids_are_reproducible(self, analyzer, clock, sample_notes):
        first = FlashcardGenerator(analyzer, clock=clock, rng=RandomSource(seed=7))
        second = FlashcardGenerator(analyzer, clock=clock, rng=RandomSource(seed=7))

        assert [c.id for c in first.generate(sample_notes)] == [
            c.id for c in second.generate(sample_notes)
        ]

    def test_summary_card_without_keywords(self, generator, note_factory):
        cards = generator.generate([note_factory("n1", "a b", title="Tiny")])
        assert [c.question for c in cards] == [
            'Summarize the main point of "Tiny".',
            'Summarize the main point of: "Tiny"',
        ]

    def test_failing_note_is_skipped(self, generator, fallback_events, note_factory, monkeypatch):
        original = generator.analyzer.ensure_analysis

        def flaky(note):
            if note.id == "bad":
                raise ValueError("corrupt")
            return original(note)

        monkeypatch.setattr(generator.analyzer, "ensure_analysis", flaky)
        cards = generator.generate([note_factory("bad", NOTE_TEXT), note_factory("ok", NOTE_TEXT)])

        assert cards
        assert {c.note_id for c in cards} == {"ok"}
        assert fallback_events[0].operation == "flashcards.note"


@pytest.mark.unit
class TestReview:
    """Tests for spaced-repetition review."""

    def test_remembered(self, generator, clock, note_factory):
        card = generator.generate([note_factory("n1", NOTE_TEXT)])[0]
        reviewed = generator.review(card, remembered=True)

        assert reviewed.learned is True
        assert reviewed.mastery_level == 1
        assert reviewed.review_count == 1
        assert reviewed.last_reviewed == clock.now()
        assert reviewed.next_review_due == clock.now() + timedelta(hours=48)
        assert card.review_count == 0

    def test_forgotten(self, generator, clock, note_factory):
        card = generator.generate([note_factory("n1", NOTE_TEXT)])[0]
        card = card.model_copy(update={"mastery_level": 3, "learned": True})
        reviewed = generator.review(card, remembered=False)

        assert reviewed.mastery_level == 2
        assert reviewed.learned is True
        assert reviewed.next_review_due == clock.now() + timedelta(hours=24)

    def test_mastery_bounds(self, generator, note_factory):
        card = generator.generate([note_factory("n1", NOTE_TEXT)])[0]
        assert generator.review(card, remembered=False).mastery_level == 0
        top = card.model_copy(update={"mastery_level": 5})
        assert generator.review(top, remembered=True).mastery_level == 5


@pytest.mark.unit
class TestQuestionSynthesizer:
    """Tests for the question priority chain."""

    def test_action_items_first(self, analyzer, note_factory):
        note = note_factory("n1", NOTE_TEXT)
        card = QuestionSynthesizer().synthesize(note, analyzer.analyze(note.content))

        assert card.question == "What are the next actionable steps recommended in this note?"
        assert card.answer.startswith("• Alpha systems need careful review")

    def test_cloze_without_action_items(self, analyzer, note_factory):
        text = "Photosynthesis converts light into chemical energy"
        note = note_factory("n1", text)
        analysis = analyzer.analyze(text).model_copy(update={"action_items": []})

        card = QuestionSynthesizer().synthesize(note, analysis)

        assert card.question.startswith("Fill in the blank")
        assert card.answer == "photosynthesis"

    def test_definition_for_short_sentence(self, analyzer, note_factory):
        note = note_factory("n1", "Entropy rises.")
        analysis = analyzer.analyze(note.content).model_copy(update={"action_items": []})

        card = QuestionSynthesizer().synthesize(note, analysis)

        assert card.question == "What is entropy? Explain briefly."
        assert card.answer == "Entropy rises."

    def test_summary_fallback(self, analyzer, note_factory):
        note = note_factory("n1", "")
        card = QuestionSynthesizer().synthesize(note, analyzer.analyze(""))
        assert card.question == "Summarize the main point of this note."

    def test_helpers(self):
        assert split_sentences("One. Two! Three?") == ["One.", "Two!", "Three?"]
        assert make_cloze("Data beats data", "data") == "_____ beats _____"


@pytest.mark.unit
class TestGenerateFallbacks:
    """Tests for batch generation with unusable input."""

    def test_none_notes(self, generator, fallback_events):
        assert generator.generate(None) == []
        assert fallback_events == []

    def test_error_message_with_braces(self, generator, fallback_events, note_factory, monkeypatch):
        original = generator.analyzer.ensure_analysis

        def flaky(note):
            if note.id == "bad":
                raise ValueError("unexpected {token}")
            return original(note)

        monkeypatch.setattr(generator.analyzer, "ensure_analysis", flaky)
        cards = generator.generate([note_factory("bad", NOTE_TEXT), note_factory("ok", NOTE_TEXT)])

        assert {c.note_id for c in cards} == {"ok"}
        assert fallback_events[0].message == "unexpected {token}"
