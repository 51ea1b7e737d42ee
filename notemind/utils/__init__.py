"""Utility modules for NoteMind."""

from notemind.utils.clock import Clock, FixedClock, SystemClock
from notemind.utils.exceptions import ConfigurationError, NoteMindError
from notemind.utils.fallback import FallbackEvent, FallbackListener, FallbackReporter
from notemind.utils.id_generator import (
    generate_challenge_id,
    generate_flashcard_id,
    generate_message_id,
    timestamp_ms,
)
from notemind.utils.logger import configure_logging, get_logger, setup_logging
from notemind.utils.random_source import RandomSource

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    "configure_logging",
    # ID Generators
    "generate_flashcard_id",
    "generate_challenge_id",
    "generate_message_id",
    "timestamp_ms",
    # Time and randomness
    "Clock",
    "SystemClock",
    "FixedClock",
    "RandomSource",
    # Fallbacks
    "FallbackEvent",
    "FallbackListener",
    "FallbackReporter",
    # Exceptions
    "NoteMindError",
    "ConfigurationError",
]
