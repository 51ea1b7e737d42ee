"""Text metrics: edit distance, similarity, keyword extraction, sanitizing."""

from notemind.core.text.metrics import edit_distance, extract_keywords, sanitize_text, similarity

__all__ = ["edit_distance", "similarity", "extract_keywords", "sanitize_text"]
