"""Weighted directed graph with string vertex labels.

Each ordered pair of vertices has at most one edge. An edge carries a
positive integer weight; setting a weight of zero removes the edge rather
than storing it. Outgoing edges are kept in insertion order, so iterating
``outgoing(v)`` visits targets in the order their edges were first created.
"""

from typing import Dict, Set


class WeightedDirectedGraph:
    """Mutable labeled graph with weighted directed edges.

    Usage:
        graph = WeightedDirectedGraph()
        graph.add_vertex("night")
        graph.increment_edge("night", "falls")
        graph.outgoing("night")  # {"falls": 1}
    """

    def __init__(self):
        self._targets: Dict[str, Dict[str, int]] = {}
        self._sources: Dict[str, Dict[str, int]] = {}

    def add_vertex(self, label: str) -> bool:
        """Add a vertex.

        Args:
            label: Vertex label. Must be non-empty.

        Returns:
            True if the vertex was added, False if it was already present.

        Raises:
            ValueError: If the label is empty.
        """
        if not label:
            raise ValueError("Vertex label must be a non-empty string")
        if label in self._targets:
            return False
        self._targets[label] = {}
        self._sources[label] = {}
        return True

    def set_edge(self, source: str, target: str, weight: int) -> int:
        """Set the weight of the edge from source to target.

        Missing vertices are created. A weight of zero removes the edge.

        Args:
            source: Source vertex label.
            target: Target vertex label.
            weight: New weight, zero or positive.

        Returns:
            The weight of the edge before the call, or 0 if there was none.

        Raises:
            ValueError: If the weight is negative or a label is empty.
        """
        if weight < 0:
            raise ValueError(f"Edge weight must be non-negative, got {weight}")
        if not source or not target:
            raise ValueError("Vertex label must be a non-empty string")

        self.add_vertex(source)
        self.add_vertex(target)

        previous = self._targets[source].get(target, 0)
        if weight == 0:
            if previous:
                del self._targets[source][target]
                del self._sources[target][source]
        else:
            self._targets[source][target] = weight
            self._sources[target][source] = weight
        return previous

    def increment_edge(self, source: str, target: str, amount: int = 1) -> int:
        """Add to the weight of an edge, creating it if needed.

        Returns:
            The new edge weight.
        """
        if amount <= 0:
            raise ValueError(f"Increment must be positive, got {amount}")
        weight = self.edge_weight(source, target) + amount
        self.set_edge(source, target, weight)
        return weight

    def edge_weight(self, source: str, target: str) -> int:
        """Weight of the edge from source to target, 0 if absent."""
        return self._targets.get(source, {}).get(target, 0)

    def remove_vertex(self, label: str) -> bool:
        """Remove a vertex and every edge touching it.

        Returns:
            True if the vertex existed.
        """
        if label not in self._targets:
            return False
        for target in self._targets.pop(label):
            if target != label:
                del self._sources[target][label]
        for source in self._sources.pop(label):
            if source != label:
                del self._targets[source][label]
        return True

    def outgoing(self, vertex: str) -> Dict[str, int]:
        """Targets of edges leaving vertex, mapped to their weights."""
        return dict(self._targets.get(vertex, {}))

    def incoming(self, vertex: str) -> Dict[str, int]:
        """Sources of edges entering vertex, mapped to their weights."""
        return dict(self._sources.get(vertex, {}))

    def vertices(self) -> Set[str]:
        return set(self._targets)

    @property
    def edge_count(self) -> int:
        return sum(len(targets) for targets in self._targets.values())

    @property
    def total_weight(self) -> int:
        """Sum of all edge weights."""
        return sum(sum(targets.values()) for targets in self._targets.values())

    def __contains__(self, label: object) -> bool:
        return label in self._targets

    def __len__(self) -> int:
        return len(self._targets)

    def __repr__(self) -> str:
        return (
            f"WeightedDirectedGraph(vertices={len(self)}, "
            f"edges={self.edge_count})"
        )

    def __str__(self) -> str:
        lines = [repr(self)]
        for source, targets in self._targets.items():
            for target, weight in targets.items():
                lines.append(f"  {source} -> {target} ({weight})")
        return "\n".join(lines)
