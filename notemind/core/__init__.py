"""Core heuristic engines: text metrics, analysis, relationships, flashcards."""
