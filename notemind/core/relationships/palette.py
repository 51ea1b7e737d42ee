"""Fixed color tables for mind map clusters and note nodes."""

from types import MappingProxyType

from notemind.models import NoteCategory

DEFAULT_COLOR = "#6b7280"

# Cluster topics are free-form keywords; only these get a dedicated color.
TOPIC_COLORS = MappingProxyType(
    {
        "learning": "#3b82f6",
        "work": "#10b981",
        "creative": "#8b5cf6",
        "personal": "#f59e0b",
        "technical": "#ef4444",
        "business": "#ec4899",
        "general": DEFAULT_COLOR,
        "research": "#06b6d4",
        "idea": "#8b5cf6",
        "project": "#10b981",
    }
)

CATEGORY_COLORS = MappingProxyType(
    {
        NoteCategory.IDEA: "#ec4899",
        NoteCategory.RESEARCH: "#3b82f6",
        NoteCategory.PROJECT: "#10b981",
        NoteCategory.PERSONAL: "#f59e0b",
        NoteCategory.GENERAL: DEFAULT_COLOR,
        NoteCategory.TECHNICAL: "#ef4444",
        NoteCategory.BUSINESS: "#8b5cf6",
    }
)

_missing = set(NoteCategory) - set(CATEGORY_COLORS)
if _missing:
    raise RuntimeError(f"CATEGORY_COLORS missing categories: {sorted(c.value for c in _missing)}")


def get_topic_color(topic: str) -> str:
    """Color for a cluster topic, gray when unknown."""
    return TOPIC_COLORS.get(topic, DEFAULT_COLOR)


def get_category_color(category: NoteCategory | str) -> str:
    """Color for a note category, gray when unknown."""
    try:
        return CATEGORY_COLORS[NoteCategory(category)]
    except ValueError:
        return DEFAULT_COLOR
