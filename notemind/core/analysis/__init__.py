"""Content analysis engine."""

from notemind.core.analysis.analyzer import NEGATIVE_WORDS, POSITIVE_WORDS, ContentAnalyzer

__all__ = ["ContentAnalyzer", "POSITIVE_WORDS", "NEGATIVE_WORDS"]
