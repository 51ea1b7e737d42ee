"""
Mind map models: clustered note graph with radial layout.
"""

from enum import Enum

from pydantic import BaseModel, Field


class NodeKind(str, Enum):
    """Mind map node kinds."""

    CLUSTER = "cluster"
    NOTE = "note"


class ConnectionKind(str, Enum):
    """Why two notes are linked in the mind map."""

    TOPIC = "topic"
    SEMANTIC = "semantic"


class MindMapNode(BaseModel):
    """Positioned node in the mind map."""

    id: str
    label: str
    type: NodeKind
    size: float
    color: str
    x: float
    y: float
    cluster: str = Field(..., description="Topic key of the owning cluster")
    content_preview: str | None = None


class MindMapConnection(BaseModel):
    """Weighted edge between two note nodes."""

    source: str
    target: str
    strength: float = Field(..., ge=0.0, le=1.0)
    type: ConnectionKind
    width: float


class MindMapCluster(BaseModel):
    """Group of notes sharing a dominant topic."""

    topic: str
    notes: list[str] = Field(default_factory=list, description="Member note IDs")
    color: str
    size: int = 0


class MindMapStats(BaseModel):
    """Summary counts for a mind map."""

    total_nodes: int = 0
    total_connections: int = Field(default=0, description="Edges found before the max_edges cap")
    cluster_count: int = 0
    connection_density: float = 0.0


class MindMap(BaseModel):
    """Derived, ephemeral graph of notes clustered by dominant topic."""

    nodes: list[MindMapNode] = Field(default_factory=list)
    connections: list[MindMapConnection] = Field(default_factory=list)
    clusters: list[MindMapCluster] = Field(default_factory=list)
    central_topic: str = "Your Knowledge"
    stats: MindMapStats = Field(default_factory=MindMapStats)
