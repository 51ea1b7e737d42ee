"""Relationship engines: note connections and mind maps."""

from notemind.core.relationships.connections import ConnectionFinder
from notemind.core.relationships.mindmap import MindMapBuilder
from notemind.core.relationships.palette import (
    CATEGORY_COLORS,
    DEFAULT_COLOR,
    TOPIC_COLORS,
    get_category_color,
    get_topic_color,
)

__all__ = [
    "ConnectionFinder",
    "MindMapBuilder",
    "TOPIC_COLORS",
    "CATEGORY_COLORS",
    "DEFAULT_COLOR",
    "get_topic_color",
    "get_category_color",
]
