"""Mind map construction: topic clustering, radial layout and note edges."""

import numpy as np

from notemind.config import MindMapConfig
from notemind.core.analysis import ContentAnalyzer
from notemind.core.relationships.palette import get_category_color, get_topic_color
from notemind.models import (
    ConnectionKind,
    ContentAnalysis,
    MindMap,
    MindMapCluster,
    MindMapConnection,
    MindMapNode,
    MindMapStats,
    NodeKind,
    Note,
)
from notemind.utils.fallback import FallbackReporter
from notemind.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_TOPIC = "general"
EMPTY_CENTRAL_TOPIC = "Your Knowledge"
DEFAULT_CENTRAL_TOPIC = "Your Knowledge Network"


class MindMapBuilder:
    """
    Builds a MindMap from notes.

    Layout:
    - One cluster per dominant topic (first key topic, "general" if none)
    - Clusters evenly spaced on a circle of cluster_radius
    - Up to notes_per_cluster notes on a small spiral around their cluster

    Edges are only searched in a bounded window (the first edge_source_limit
    notes against their next neighbor_window neighbors).
    """

    def __init__(
        self,
        analyzer: ContentAnalyzer | None = None,
        config: MindMapConfig | None = None,
        reporter: FallbackReporter | None = None,
    ):
        self.reporter = reporter or FallbackReporter()
        self.analyzer = analyzer or ContentAnalyzer(reporter=self.reporter)
        self.config = config or MindMapConfig()

    def build(self, notes: list[Note] | None, focus_label: str | None = None) -> MindMap:
        """
        Build the mind map.

        Args:
            notes: Notes to map, most recent first
            focus_label: Optional central topic label

        Returns:
            MindMap; an empty map on empty input or internal failure
        """
        if not notes:
            return MindMap(central_topic=EMPTY_CENTRAL_TOPIC)

        try:
            analyses = {}
            for note in notes:
                analyses.setdefault(note.id, self.analyzer.ensure_analysis(note))

            clusters = self._cluster(notes, analyses)
            nodes = self._layout(clusters)
            note_ids = {n.id for n in nodes if n.type == NodeKind.NOTE}
            connections = [
                c
                for c in self._edges(notes, analyses)
                if c.source in note_ids and c.target in note_ids
            ]
            if self.config.sort_edges_by_strength:
                connections.sort(key=lambda c: c.strength, reverse=True)
            total_connections = len(connections)
            connections = connections[: self.config.max_edges]

            cluster_models = [
                MindMapCluster(
                    topic=topic,
                    notes=[n.id for n in members],
                    color=get_topic_color(topic),
                    size=len(members),
                )
                for topic, members in clusters.items()
            ]

            logger.debug(
                f"Mind map built: {len(nodes)} nodes, {len(connections)} of {total_connections} connections, "
                f"{len(cluster_models)} clusters"
            )

            return MindMap(
                nodes=nodes,
                connections=connections,
                clusters=cluster_models,
                central_topic=focus_label or DEFAULT_CENTRAL_TOPIC,
                stats=MindMapStats(
                    total_nodes=len(nodes),
                    total_connections=total_connections,
                    cluster_count=len(cluster_models),
                    connection_density=round(total_connections / max(1, len(nodes)), 2),
                ),
            )

        except Exception as e:
            self.reporter.report("mind_map.build", e, note_count=len(notes))
            return MindMap(central_topic=focus_label or EMPTY_CENTRAL_TOPIC)

    def _cluster(
        self, notes: list[Note], analyses: dict[str, ContentAnalysis]
    ) -> dict[str, list[Note]]:
        clusters: dict[str, list[Note]] = {}
        for note in notes:
            topics = analyses[note.id].key_topics
            topic = topics[0] if topics else DEFAULT_TOPIC
            clusters.setdefault(topic, []).append(note)
        return clusters

    def _layout(self, clusters: dict[str, list[Note]]) -> list[MindMapNode]:
        nodes: list[MindMapNode] = []
        angles = 2 * np.pi * np.arange(len(clusters)) / len(clusters)

        for angle, (topic, members) in zip(angles, clusters.items(), strict=True):
            cx = float(np.cos(angle) * self.config.cluster_radius)
            cy = float(np.sin(angle) * self.config.cluster_radius)
            nodes.append(
                MindMapNode(
                    id=f"cluster_{topic}",
                    label=topic.upper(),
                    type=NodeKind.CLUSTER,
                    size=10 + min(len(members), 10),
                    color=get_topic_color(topic),
                    x=cx,
                    y=cy,
                    cluster=topic,
                )
            )

            for index, note in enumerate(members[: self.config.notes_per_cluster]):
                note_angle = 2 * np.pi * index / len(members)
                radius = self.config.note_radius + index * self.config.note_radius_step
                nodes.append(
                    MindMapNode(
                        id=note.id,
                        label=note.title or note.content[:15] + "...",
                        type=NodeKind.NOTE,
                        size=6 + min(len(note.content) / 80, 6),
                        color=get_category_color(note.category),
                        x=cx + float(np.cos(note_angle) * radius),
                        y=cy + float(np.sin(note_angle) * radius),
                        cluster=topic,
                        content_preview=note.content_preview,
                    )
                )
        return nodes

    def _edges(
        self, notes: list[Note], analyses: dict[str, ContentAnalysis]
    ) -> list[MindMapConnection]:
        connections: list[MindMapConnection] = []
        seen_pairs: set[tuple[str, str]] = set()

        for i, note in enumerate(notes[: self.config.edge_source_limit]):
            window_end = min(i + 1 + self.config.neighbor_window, len(notes))
            for other in notes[i + 1 : window_end]:
                pair = tuple(sorted((note.id, other.id)))
                if pair in seen_pairs:
                    continue
                seen_pairs.add(pair)

                strength, overlap = self.edge_strength(analyses[note.id], analyses[other.id])
                if strength > self.config.edge_threshold:
                    strength = min(1.0, strength)
                    connections.append(
                        MindMapConnection(
                            source=note.id,
                            target=other.id,
                            strength=strength,
                            type=ConnectionKind.TOPIC if overlap > 0 else ConnectionKind.SEMANTIC,
                            width=1 + strength * 3,
                        )
                    )
        return connections

    @staticmethod
    def edge_strength(a: ContentAnalysis, b: ContentAnalysis) -> tuple[float, int]:
        """
        Weighted edge strength between two analyses.

        Returns:
            (unclamped strength, topic overlap count)
        """
        overlap = len(set(a.key_topics) & set(b.key_topics))
        sentiment_similarity = 1 - abs(a.sentiment - b.sentiment) / 2
        complexity_similarity = 1 - abs(a.complexity - b.complexity)
        strength = overlap * 0.4 + sentiment_similarity * 0.3 + complexity_similarity * 0.3
        return strength, overlap
