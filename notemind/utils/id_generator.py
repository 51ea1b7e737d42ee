"""
ID generation utilities for NoteMind.

Derived records get ids built from the injected clock and random source so
tests can pin them exactly:
- Flashcards: flashcard_<note id>_<ms>_<index>_<suffix>
- Challenges: challenge_<ms>
- Messages: <prefix>_<ms>
"""

from datetime import datetime


def timestamp_ms(moment: datetime) -> int:
    """
    Convert a datetime to integer milliseconds since the epoch.

    Args:
        moment: Datetime (naive values are treated as local time)

    Returns:
        Milliseconds since the epoch
    """
    return int(moment.timestamp() * 1000)


def generate_flashcard_id(note_id: str, moment: datetime, index: int, suffix: str) -> str:
    """
    Generate a Flashcard ID.

    Args:
        note_id: Source note ID
        moment: Generation time
        index: Running index of the card within its batch
        suffix: Short random suffix

    Returns:
        ID in format "flashcard_<note id>_<ms>_<index>_<suffix>"
    """
    return f"flashcard_{note_id}_{timestamp_ms(moment)}_{index}_{suffix}"


def generate_challenge_id(moment: datetime) -> str:
    """
    Generate a Challenge ID.

    Returns:
        ID in format "challenge_<ms>"
    """
    return f"challenge_{timestamp_ms(moment)}"


def generate_message_id(prefix: str, moment: datetime) -> str:
    """
    Generate a mentor session message ID.

    Returns:
        ID in format "<prefix>_<ms>"
    """
    return f"{prefix}_{timestamp_ms(moment)}"
