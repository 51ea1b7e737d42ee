"""Service layer: the mentor system and the AIService facade."""

from notemind.services.ai_service import AIService
from notemind.services.mentor import MentorSystem

__all__ = ["AIService", "MentorSystem"]
