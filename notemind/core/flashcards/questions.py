"""Heuristic question synthesis from a note and its analysis."""

import re

from notemind.core.text import sanitize_text
from notemind.models import ContentAnalysis, Note, QuestionCard

SENTENCE_SPLIT = re.compile(r"(?<=[.!?])\s+")
CLOZE_BLANK = "_____"
MIN_CLOZE_SENTENCE_LENGTH = 30


def split_sentences(text: str) -> list[str]:
    """Split on whitespace that follows sentence-ending punctuation."""
    return SENTENCE_SPLIT.split(text)


def make_cloze(sentence: str, term: str) -> str:
    """Blank out every case-insensitive occurrence of term."""
    return re.sub(re.escape(term), CLOZE_BLANK, sentence, flags=re.IGNORECASE)


def bullet_list(items: list[str]) -> str:
    return "\n".join(f"• {item}" for item in items)


class QuestionSynthesizer:
    """
    Picks the best question template for a note.

    Priority chain, first match wins:
    1. Action items present -> next-steps question
    2. Sentence over 30 chars containing the top keyword -> cloze
    3. Top keyword present -> definition question
    4. Otherwise -> summarization question
    """

    def synthesize(self, note: Note, analysis: ContentAnalysis) -> QuestionCard:
        text = (note.content or "").strip()
        title = sanitize_text(note.title)
        label = f'"{title}"' if title else "this note"

        if analysis.action_items:
            return self.action_question(label, analysis.action_items)

        keywords = self._keywords(analysis)[:3]
        if keywords:
            main = keywords[0]
            sentences = [s for s in split_sentences(text) if s.strip()]
            containing = next((s for s in sentences if main.lower() in s.lower()), None)

            if containing and len(containing) > MIN_CLOZE_SENTENCE_LENGTH:
                return self.cloze_question(containing, main)
            return self.definition_question(main, containing, text)

        return self.summary_question(label, text)

    def action_question(self, label: str, action_items: list[str]) -> QuestionCard:
        return QuestionCard(
            question=f"What are the next actionable steps recommended in {label}?",
            answer=bullet_list(action_items),
            hint="List the concrete steps or tasks suggested.",
        )

    def cloze_question(self, sentence: str, term: str) -> QuestionCard:
        return QuestionCard(
            question=f"Fill in the blank: {make_cloze(sentence, term)}",
            answer=term,
            hint=f"The missing term is an important concept (starts with {term[0].upper()}).",
        )

    def definition_question(self, term: str, sentence: str | None, text: str) -> QuestionCard:
        answer = sentence if sentence else (text[:150] + "..." if len(text) > 150 else text)
        return QuestionCard(
            question=f"What is {term}? Explain briefly.",
            answer=answer,
            hint=f"Describe the meaning and role of {term} in the note.",
        )

    def summary_question(self, label: str, text: str) -> QuestionCard:
        return QuestionCard(
            question=f"Summarize the main point of {label}.",
            answer=text[:200] + "..." if len(text) > 200 else text,
            hint="State the thesis or core conclusion in one or two sentences.",
        )

    @staticmethod
    def _keywords(analysis: ContentAnalysis) -> list[str]:
        source = analysis.key_topics or list(analysis.keyword_scores)
        return [k for k in (sanitize_text(w) for w in source) if k]
