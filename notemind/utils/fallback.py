"""
Observable fail-soft handling.

Every public entry point of the analysis and mentor layers returns a
well-formed default instead of raising. FallbackReporter logs the swallowed
exception and forwards a FallbackEvent to an optional listener.
"""

from collections.abc import Callable
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from notemind.utils.logger import get_logger

logger = get_logger(__name__)


class FallbackEvent(BaseModel):
    """A fallback value was returned in place of a failed computation."""

    operation: str = Field(..., description="Operation that failed, e.g. 'analysis.sentiment'")
    error_type: str = Field(..., description="Exception class name")
    message: str = Field(default="", description="Exception message")
    context: dict[str, Any] = Field(default_factory=dict)
    occurred_at: datetime = Field(default_factory=datetime.now)


FallbackListener = Callable[[FallbackEvent], None]


class FallbackReporter:
    """
    Reports fallbacks to the log and to an optional listener.

    Usage:
        events = []
        reporter = FallbackReporter(listener=events.append)
    """

    def __init__(self, listener: FallbackListener | None = None):
        self.listener = listener

    def report(self, operation: str, error: BaseException, **context: Any) -> FallbackEvent:
        """
        Record that an operation fell back to its default value.

        Args:
            operation: Dotted operation name
            error: The exception that was swallowed
            **context: Extra identifying details (note id, intent, ...)

        Returns:
            The emitted event
        """
        try:
            message = str(error)
        except Exception:
            message = f"<unprintable {type(error).__name__}>"

        event = FallbackEvent(
            operation=operation,
            error_type=type(error).__name__,
            message=message,
            context=context,
        )
        # Bound fields only: the message may contain braces and must not be formatted
        logger.bind(operation=operation, **context).warning(
            f"Fallback taken in {operation}: {event.error_type}: {event.message}"
        )
        if self.listener is not None:
            try:
                self.listener(event)
            except Exception as e:
                logger.error(f"Fallback listener failed: {e}")
        return event
